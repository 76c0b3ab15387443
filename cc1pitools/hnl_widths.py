"""Partial decay widths of a heavy neutral lepton and related helpers."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from scipy.integrate import quad

ELECTRON_PDG = 11
MUON_PDG = 13
TAU_PDG = 15


@dataclass(frozen=True)
class PhysicsConstants:
    """Masses (GeV), couplings and unit conversions used by the decay model."""

    muon_mass: float
    elec_mass: float
    piplus_mass: float
    pizero_mass: float
    eta_mass: float
    etap_mass: float
    rho_mass: float
    kplus_mass: float
    tau_mass: float
    gfermi: float
    g_l: float
    g_r: float
    fpion: float
    feta: float
    fetap: float
    frho: float
    grho: float
    abs_vud_squared: float
    hbar: float
    c_cm_per_ns: float


def kallen_lambda(a: float, b: float, c: float) -> float:
    """Return the Källén triangle function of a, b and c."""
    return a * a + b * b + c * c - 2 * a * b - 2 * b * c - 2 * c * a


def flat_to_exp_rand(x: float, mean: float, a: float, b: float) -> float:
    """Map a flat random number in [0, 1] to an exponential draw confined to [a, b]."""
    span = 1.0 - math.exp(-(b - a) / mean)
    return -mean * math.log(1 - x * span) + a


def forcedecay_weight(mean: float, a: float, b: float) -> float:
    """Return the probability that a decay with this mean length happens in [a, b]."""
    return math.exp(-a / mean) - math.exp(-b / mean)


def _i1_integrand(s: float, x: float, y: float, z: float) -> float:
    root = kallen_lambda(s, x * x, y * y) * kallen_lambda(1.0, s, z * z)
    return 12.0 * (s - x * x - y * y) * (1 + z * z - s) * math.sqrt(max(root, 0.0)) / s


def _i2_integrand(s: float, x: float, y: float, z: float) -> float:
    root = kallen_lambda(s, y * y, z * z) * kallen_lambda(1.0, s, x * x)
    return 24.0 * y * z * (1.0 + x * x - s) * math.sqrt(max(root, 0.0)) / s


_WidthFunction = Callable[[float, float, float, float], float]


class HNLWidths:
    """Partial widths of heavy-neutral-lepton decay channels.

    A Majorana particle gets twice the Dirac width in every channel except
    the neutral vector meson one.
    """

    def __init__(
        self,
        constants: PhysicsConstants,
        majorana: bool = False,
        epsrel: float = 1e-7,
        limit: int = 1000,
    ) -> None:
        self.constants = constants
        self.majorana = majorana
        self.epsrel = epsrel
        self.limit = limit
        self._channels: dict[str, _WidthFunction] = {
            "mu_pi": self._mu_pi,
            "e_pi": self._e_pi,
            "nu_mu_mu": self._nu_mu_mu,
            "nu_e_e": self._nu_e_e,
            "nu_nu_nu": self._tri_nu,
            "nu_pi0": self._nu_pi0,
            "nu_eta": self._nu_eta,
            "nu_etap": self._nu_etap,
            "nu_rho0": self._nu_rho0,
            "nu_mu_e": self._nu_mu_e,
        }

    def _majorana_factor(self) -> float:
        return 2.0 if self.majorana else 1.0

    def _integrate(self, func, low: float, high: float, args: tuple) -> float:
        result, _error = quad(
            func, low, high, args=args, epsabs=0.0, epsrel=self.epsrel, limit=self.limit
        )
        return result

    def i1(self, x: float, y: float, z: float) -> float:
        """Phase-space integral I1 for mass ratios x, y, z."""
        return self._integrate(_i1_integrand, (x + y) ** 2, (1.0 - z) ** 2, (x, y, z))

    def i2(self, x: float, y: float, z: float) -> float:
        """Phase-space integral I2 for mass ratios x, y, z."""
        return self._integrate(_i2_integrand, (y + z) ** 2, (1.0 - x) ** 2, (x, y, z))

    def _lepton_mass(self, pdg: int) -> float:
        if pdg == ELECTRON_PDG:
            return self.constants.elec_mass
        if pdg == MUON_PDG:
            return self.constants.muon_mass
        return 0.0

    def nu_dilep_width(self, hnl_mass: float, u4: float, nu_pdg: int, lep_pdg: int) -> float:
        """Width of N -> nu l+ l- for one neutrino flavour."""
        c = self.constants
        lep_mass = c.muon_mass if lep_pdg == MUON_PDG else c.elec_mass
        if hnl_mass < lep_mass * 2.0:
            return 0.0
        cc = 1 if lep_pdg + 1 == nu_pdg else 0
        ratio = lep_mass / hnl_mass
        i1 = self.i1(0.0, ratio, ratio)
        i2 = self.i2(0.0, ratio, ratio)
        width = (
            c.gfermi**2
            * hnl_mass**5
            * u4
            * (
                (c.g_l * c.g_r + cc * c.g_r) * i2
                + (c.g_l**2 + c.g_r**2 + cc * (1 + 2.0 * c.g_l)) * i1
            )
            / (192 * math.pi**3)
        )
        return width * self._majorana_factor()

    def tri_nu_width(self, hnl_mass: float, u4tot: float) -> float:
        """Width of N -> three neutrinos."""
        width = self.constants.gfermi**2 * hnl_mass**5 * u4tot / (192 * math.pi**3)
        return width * self._majorana_factor()

    def nu_p0_width(
        self, hnl_mass: float, u4tot: float, m0_mass: float, m0_decay_const: float
    ) -> float:
        """Width of N -> nu plus a neutral pseudoscalar meson."""
        if m0_mass > hnl_mass:
            return 0.0
        mu_m0 = m0_mass**2 / hnl_mass**2
        width = (
            self.constants.gfermi**2
            * hnl_mass**3
            * m0_decay_const**2
            * u4tot
            * (1 - mu_m0) ** 2
            / (32 * math.pi)
        )
        return width * self._majorana_factor()

    def nu_v0_width(
        self,
        hnl_mass: float,
        u4tot: float,
        m0_mass: float,
        m0_decay_const: float,
        m0_g_const: float,
    ) -> float:
        """Width of N -> nu plus a neutral vector meson."""
        if m0_mass > hnl_mass:
            return 0.0
        # The mass ratio is evaluated left to right, as the model defines it.
        mu_m0 = m0_mass * m0_mass / hnl_mass * hnl_mass
        return (
            u4tot
            * self.constants.gfermi**2
            * hnl_mass**3
            * m0_decay_const**2
            * m0_g_const**2
            / (16 * math.pi * m0_mass**2)
            * (1 + 2 * m0_mass**2 / hnl_mass**2)
            * (1 - mu_m0) ** 2
        )

    def lep_pi_width(self, hnl_mass: float, u4: float, lep_mass: float) -> float:
        """Width of N -> l pi."""
        c = self.constants
        if lep_mass + c.piplus_mass > hnl_mass:
            return 0.0
        lep_ratio = lep_mass**2 / hnl_mass**2
        pion_ratio = c.piplus_mass**2 / hnl_mass**2
        ifunc = ((1 + lep_ratio - pion_ratio) * (1 + lep_ratio) - 4 * lep_ratio) * math.sqrt(
            kallen_lambda(1.0, lep_ratio, pion_ratio)
        )
        width = (
            u4
            * c.gfermi**2
            * c.fpion**2
            * c.abs_vud_squared
            * hnl_mass**3
            * ifunc
            / (16 * math.pi)
        )
        return width * self._majorana_factor()

    def nul1l2_width(
        self,
        hnl_mass: float,
        ue4: float,
        um4: float,
        ut4: float,
        lepplus_pdg: int,
        lepminus_pdg: int,
    ) -> float:
        """Width of N -> nu l1+ l2- for distinct charged leptons."""
        lepminus_mass = self._lepton_mass(lepminus_pdg)
        lepplus_mass = self._lepton_mass(lepplus_pdg)
        if lepminus_mass + lepplus_mass > hnl_mass:
            return 0.0
        u4minus = {ELECTRON_PDG: ue4, MUON_PDG: um4, TAU_PDG: ut4}.get(lepminus_pdg, 0.0)
        i1 = self.i1(lepminus_mass / hnl_mass, 0.0, lepplus_mass / hnl_mass)
        width = self.constants.gfermi**2 * hnl_mass**5 * u4minus * i1 / (192 * math.pi**3)
        return width * self._majorana_factor()

    def _mu_pi(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        return self.lep_pi_width(m, um4, self.constants.muon_mass)

    def _e_pi(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        return self.lep_pi_width(m, ue4, self.constants.elec_mass)

    def _nu_mu_mu(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        return (
            self.nu_dilep_width(m, ue4, 12, MUON_PDG)
            + self.nu_dilep_width(m, um4, 14, MUON_PDG)
            + self.nu_dilep_width(m, ut4, 16, MUON_PDG)
        )

    def _nu_e_e(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        return (
            self.nu_dilep_width(m, ue4, 12, ELECTRON_PDG)
            + self.nu_dilep_width(m, um4, 14, ELECTRON_PDG)
            + self.nu_dilep_width(m, ut4, 16, ELECTRON_PDG)
        )

    def _tri_nu(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        return self.tri_nu_width(m, ue4 + um4 + ut4)

    def _nu_pi0(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        c = self.constants
        return self.nu_p0_width(m, ue4 + um4 + ut4, c.pizero_mass, c.fpion)

    def _nu_eta(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        c = self.constants
        return self.nu_p0_width(m, ue4 + um4 + ut4, c.eta_mass, c.feta)

    def _nu_etap(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        c = self.constants
        return self.nu_p0_width(m, ue4 + um4 + ut4, c.etap_mass, c.fetap)

    def _nu_rho0(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        c = self.constants
        return self.nu_v0_width(m, ue4 + um4 + ut4, c.rho_mass, c.frho, c.grho)

    def _nu_mu_e(self, m: float, ue4: float, um4: float, ut4: float) -> float:
        return self.nul1l2_width(m, ue4, um4, ut4, ELECTRON_PDG, MUON_PDG) + self.nul1l2_width(
            m, ue4, um4, ut4, MUON_PDG, ELECTRON_PDG
        )

    def channel_width(
        self, name: str, hnl_mass: float, ue4: float, um4: float, ut4: float
    ) -> float:
        """Return the width of the named channel, raising KeyError if unknown."""
        try:
            func = self._channels[name]
        except KeyError:
            raise KeyError(f"unavailable decay channel {name!r}") from None
        return func(hnl_mass, ue4, um4, ut4)

    def channels(self) -> tuple[str, ...]:
        """Return the names of every channel with a width."""
        return tuple(self._channels)