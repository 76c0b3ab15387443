"""Decay kinematics of a heavy neutral lepton and the decay-channel bookkeeping."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from cc1pitools.hnl_widths import (
    ELECTRON_PDG,
    MUON_PDG,
    HNLWidths,
    PhysicsConstants,
    forcedecay_weight,
    kallen_lambda,
)

_log = logging.getLogger(__name__)

Vector3 = tuple[float, float, float]

# Channels whose final state can be generated; each one also has a width.
_DECAY_CHANNELS = ("mu_pi", "e_pi", "nu_mu_mu", "nu_e_e", "nu_pi0", "nu_eta", "nu_etap")

PIZERO_PDG = 111
ETA_PDG = 221
ETAP_PDG = 331


class RandomSource(Protocol):
    """Anything that yields flat random numbers in [0, 1)."""

    def random(self) -> float: ...


@dataclass(frozen=True)
class FourVector:
    """A Lorentz four-momentum (px, py, pz, E)."""

    px: float
    py: float
    pz: float
    e: float

    @classmethod
    def from_momentum(cls, p: Vector3, e: float) -> FourVector:
        """Build a four-vector from a three-momentum and an energy."""
        return cls(p[0], p[1], p[2], e)

    @property
    def vect(self) -> Vector3:
        """The three-momentum."""
        return (self.px, self.py, self.pz)

    @property
    def p(self) -> float:
        """Magnitude of the three-momentum."""
        return math.sqrt(self.px**2 + self.py**2 + self.pz**2)

    @property
    def mass(self) -> float:
        """Invariant mass; negative for space-like vectors."""
        m2 = self.e**2 - self.p**2
        return math.sqrt(m2) if m2 >= 0 else -math.sqrt(-m2)

    @property
    def beta(self) -> float:
        """Speed as a fraction of c."""
        return self.p / self.e

    @property
    def gamma(self) -> float:
        """Lorentz factor."""
        return 1.0 / math.sqrt(1.0 - self.beta**2)

    def boost_vector(self) -> Vector3:
        """Velocity of the frame in which this four-vector is at rest."""
        return (self.px / self.e, self.py / self.e, self.pz / self.e)

    def boost(self, beta: Vector3) -> FourVector:
        """Return this four-vector boosted by the velocity beta."""
        bx, by, bz = beta
        b2 = bx * bx + by * by + bz * bz
        gamma = 1.0 / math.sqrt(1.0 - b2)
        bp = bx * self.px + by * self.py + bz * self.pz
        gamma2 = (gamma - 1.0) / b2 if b2 > 0 else 0.0
        shift = gamma2 * bp
        return FourVector(
            self.px + shift * bx + gamma * bx * self.e,
            self.py + shift * by + gamma * by * self.e,
            self.pz + shift * bz + gamma * bz * self.e,
            gamma * (self.e + bp),
        )


@dataclass
class DecayFinalState:
    """Width of a channel and, when open, the generated daughters."""

    width: float
    momenta: list[FourVector] = field(default_factory=list)
    pdgs: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class HNLFlux:
    """A heavy neutral lepton arriving at the decay stage."""

    mass: float
    mom: FourVector
    ue4: float
    um4: float
    ut4: float
    secondary_pdg: int = 1


@dataclass
class HNLDecayConfig:
    """Selected decay channels and the reference point used for the maximum weight."""

    decays: Sequence[str]
    reference_ue4: float
    reference_um4: float
    reference_ut4: float
    reference_hnl_mass: float
    reference_ray_length: float
    reference_ray_distance: float
    reference_hnl_energy: float
    majorana: bool = False
    width_decays: Sequence[str] | None = None
    verbose: bool = False


def twobody_momentum(parent_mass: float, mass_a: float, mass_b: float) -> float:
    """Momentum of each daughter of a two-body decay in the parent rest frame."""
    lam = kallen_lambda(parent_mass**2, mass_a**2, mass_b**2)
    return math.sqrt(max(lam, 0.0)) / (2.0 * parent_mass)


def random_unit_vector(rng: RandomSource) -> Vector3:
    """Draw an isotropically distributed unit vector."""
    cos_theta = 2.0 * rng.random() - 1.0
    phi = 2.0 * math.pi * rng.random()
    sin_theta = math.sqrt(max(1.0 - cos_theta * cos_theta, 0.0))
    return (sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta)


def _sin_from_cos(c: float) -> float:
    return math.sqrt(max(1.0 - c * c, 0.0))


def _daughter_direction(cos_th: float, gamma: float, cos_a: float, phi_a: float) -> Vector3:
    sin_th = _sin_from_cos(cos_th)
    sin_a = _sin_from_cos(cos_a)
    return (
        sin_th * math.cos(gamma) * cos_a * math.sin(phi_a)
        - sin_th * math.sin(gamma) * math.sin(phi_a)
        + cos_th * sin_a * math.cos(phi_a),
        sin_th * math.cos(gamma) * cos_a * math.cos(phi_a)
        - sin_th * math.sin(gamma) * math.cos(phi_a)
        + cos_th * sin_a * math.sin(phi_a),
        -sin_th * math.cos(gamma) * sin_a + cos_th * cos_a,
    )


def _scaled(p: float, direction: Vector3) -> Vector3:
    return (p * direction[0], p * direction[1], p * direction[2])


def isotropic_threebody_momentum(
    parent_mass: float, mass_a: float, mass_b: float, mass_c: float, rng: RandomSource
) -> tuple[FourVector, FourVector, FourVector]:
    """Draw three daughter four-momenta with a flat Dalitz density, in the parent frame."""
    total = mass_a + mass_b + mass_c
    if parent_mass < total:
        raise ValueError(
            f"parent mass {parent_mass} is below the daughter mass sum {total}"
        )
    kinetic = parent_mass - total
    while True:
        r1 = rng.random()
        r2 = rng.random()
        e_a = mass_a + kinetic * min(r1, r2)
        e_b = mass_b + kinetic * min(1 - r1, 1 - r2)
        e_c = mass_c + kinetic * abs(r1 - r2)
        p_a = math.sqrt(max(e_a * e_a - mass_a * mass_a, 0.0))
        p_b = math.sqrt(max(e_b * e_b - mass_b * mass_b, 0.0))
        p_c = math.sqrt(max(e_c * e_c - mass_c * mass_c, 0.0))
        p_max = max(p_a, p_b, p_c)
        if p_max <= p_a + p_b + p_c - p_max:
            break

    dir_a = random_unit_vector(rng)
    cos_a = dir_a[2]
    phi_a = math.atan2(dir_a[1], dir_a[0])

    cos_ab = (p_c * p_c - p_b * p_b - p_a * p_a) / (2.0 * p_a * p_b)
    cos_ac = (p_b * p_b - p_c * p_c - p_a * p_a) / (2.0 * p_a * p_c)

    gamma_b = (2 * rng.random() - 1.0) * math.pi
    gamma_c = math.fmod(gamma_b + 2 * math.pi, 2 * math.pi) - math.pi

    dir_b = _daughter_direction(cos_ab, gamma_b, cos_a, phi_a)
    dir_c = _daughter_direction(cos_ac, gamma_c, cos_a, phi_a)

    return (
        FourVector.from_momentum(_scaled(p_a, dir_a), e_a),
        FourVector.from_momentum(_scaled(p_b, dir_b), e_b),
        FourVector.from_momentum(_scaled(p_c, dir_c), e_c),
    )


class HNLMakeDecay:
    """Chooses and generates heavy-neutral-lepton decays for the configured channels."""

    def __init__(
        self, config: HNLDecayConfig, constants: PhysicsConstants, rng: RandomSource
    ) -> None:
        self.config = config
        self.constants = constants
        self.rng = rng
        self.widths = HNLWidths(constants, majorana=config.majorana)

        available_widths = set(self.widths.channels())
        self.selected_channels: tuple[str, ...] = tuple(config.decays)
        for name in self.selected_channels:
            if name not in _DECAY_CHANNELS:
                raise ValueError(f"selected unavailable decay ({name})")
        width_channels = (
            config.decays if config.width_decays is None else config.width_decays
        )
        self.width_channels: tuple[str, ...] = tuple(width_channels)
        for name in self.width_channels:
            if name not in available_widths:
                raise ValueError(f"selected unavailable decay ({name})")
        if config.verbose:
            for name in self.selected_channels:
                _log.info("Selected Decay: %s", name)

        self._max_weight = self._calculate_max_weight()

    def total_width(self, hnl_mass: float, ue4: float, um4: float, ut4: float) -> float:
        """Sum of the widths of every channel counted in the total width."""
        return sum(
            self.widths.channel_width(name, hnl_mass, ue4, um4, ut4)
            for name in self.width_channels
        )

    def selected_width(self, hnl_mass: float, ue4: float, um4: float, ut4: float) -> float:
        """Sum of the widths of the selected channels."""
        return sum(
            self.widths.channel_width(name, hnl_mass, ue4, um4, ut4)
            for name in self.selected_channels
        )

    def max_weight(self) -> float:
        """Decay weight at the configured reference point."""
        return self._max_weight

    def _calculate_max_weight(self) -> float:
        cfg = self.config
        c = self.constants
        mass = cfg.reference_hnl_mass
        energy = cfg.reference_hnl_energy
        if energy < mass:
            raise ValueError(
                f"reference energy {energy} is below the reference mass {mass}"
            )
        momentum = math.sqrt(energy * energy - mass * mass)
        gamma_beta = momentum / mass
        ue4, um4, ut4 = cfg.reference_ue4, cfg.reference_um4, cfg.reference_ut4

        total = self.total_width(mass, ue4, um4, ut4)
        if total == 0.0:
            raise ValueError("total decay width at the reference point is zero")
        total_mean_dist = c.hbar / total * gamma_beta * c.c_cm_per_ns
        partial = self.selected_width(mass, ue4, um4, ut4)

        if cfg.verbose:
            _log.info("Reference ue4: %g um4: %g ut4: %g", ue4, um4, ut4)
            _log.info("Reference Energy: %g P: %g", energy, momentum)
            _log.info("Reference all decay width: %g length: %g", total, total_mean_dist)
            _log.info("Reference selected decay width: %g", partial)

        distance = cfg.reference_ray_distance
        return (
            forcedecay_weight(total_mean_dist, distance, distance + cfg.reference_ray_length)
            * partial
            / total
        )

    def _nu_sign(self, flux: HNLFlux) -> int:
        if self.config.majorana:
            return 1 if self.rng.random() > 0.5 else -1
        return -1 if flux.secondary_pdg > 0 else 1

    def _nu_flavour(self, first: float, second: float, total: float) -> int:
        r = self.rng.random()
        if r > (first + second) / total:
            return 16
        if r > first / total:
            return 14
        return 12

    def nu_dilep(self, flux: HNLFlux, is_muon: bool) -> DecayFinalState:
        """Generate N -> nu l+ l- with the lepton a muon or an electron."""
        c = self.constants
        lep_mass = c.muon_mass if is_muon else c.elec_mass
        lep_pdg = MUON_PDG if is_muon else ELECTRON_PDG
        if 2 * lep_mass > flux.mass:
            return DecayFinalState(0.0)

        nue = self.widths.nu_dilep_width(flux.mass, flux.ue4, 12, lep_pdg)
        numu = self.widths.nu_dilep_width(flux.mass, flux.um4, 14, lep_pdg)
        nut = self.widths.nu_dilep_width(flux.mass, flux.ut4, 16, lep_pdg)
        total = nue + numu + nut
        if total == 0.0:
            return DecayFinalState(total)

        beta = flux.mom.boost_vector()
        momenta = [
            v.boost(beta)
            for v in isotropic_threebody_momentum(flux.mass, 0.0, lep_mass, lep_mass, self.rng)
        ]
        sign = self._nu_sign(flux)
        nu_pdg = self._nu_flavour(nue, numu, total) * sign
        return DecayFinalState(total, momenta, [nu_pdg, lep_pdg, -lep_pdg])

    def nu_p0(self, flux: HNLFlux, meson_pdg: int) -> DecayFinalState:
        """Generate N -> nu plus a neutral pseudoscalar meson (pi0, eta or eta')."""
        c = self.constants
        mesons = {
            PIZERO_PDG: (c.pizero_mass, c.fpion),
            ETA_PDG: (c.eta_mass, c.feta),
            ETAP_PDG: (c.etap_mass, c.fetap),
        }
        try:
            meson_mass, decay_constant = mesons[meson_pdg]
        except KeyError:
            raise ValueError(
                f"wrong pdg {meson_pdg} for NuP0 decay; only 111, 221, 331 allowed"
            ) from None

        total_u4 = flux.ue4 + flux.um4 + flux.ut4
        width = self.widths.nu_p0_width(flux.mass, total_u4, meson_mass, decay_constant)
        if width == 0.0:
            return DecayFinalState(width)

        p = twobody_momentum(flux.mass, 0.0, meson_mass)
        direction = random_unit_vector(self.rng)
        beta = flux.mom.boost_vector()
        nu = FourVector.from_momentum(_scaled(p, direction), p).boost(beta)
        meson = FourVector.from_momentum(
            _scaled(-p, direction), math.sqrt(p * p + meson_mass * meson_mass)
        ).boost(beta)

        sign = self._nu_sign(flux)
        nu_pdg = self._nu_flavour(flux.ue4, flux.um4, total_u4) * sign
        return DecayFinalState(width, [nu, meson], [nu_pdg, meson_pdg])

    def pick_channel(self, states: Sequence[DecayFinalState]) -> int:
        """Choose one final state at random, weighted by its width; return its index."""
        if not states:
            raise ValueError("no decay states to choose from")
        partial = sum(state.width for state in states)
        if partial == 0.0:
            raise ValueError("every decay channel is closed")
        r = self.rng.random()
        cumulative = 0.0
        for index, state in enumerate(states[:-1]):
            cumulative += state.width
            if r < cumulative / partial:
                return index
        return len(states) - 1