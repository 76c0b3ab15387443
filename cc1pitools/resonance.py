"""Classification of baryon resonances produced in neutrino interactions."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ResonanceFamily(enum.Enum):
    """Whether a resonance is a Delta, a nucleon excitation, or unknown."""

    UNCLASSIFIED = "unclasified"
    DELTA = "delta"
    NUCLEON = "np"


@dataclass(frozen=True)
class _Resonance:
    code: int
    index: int
    family: ResonanceFamily
    name: str
    title: str


_DELTA_CHARGES = ("++", "+", "0", "-")
_NUCLEON_LABELS = ("p", "n")

# (family, mass in MeV, generator codes, index of the first code); indices descend.
_GROUPS = (
    (ResonanceFamily.DELTA, 1950, (202228, 202218, 202118, 201118), 50),
    (ResonanceFamily.DELTA, 1920, (222224, 222214, 222114, 221114), 46),
    (ResonanceFamily.DELTA, 1905, (212226, 212216, 212116, 211116), 42),
    (ResonanceFamily.NUCLEON, 1710, (212212, 212112), 38),
    (ResonanceFamily.NUCLEON, 1675, (102216, 102116), 36),
    (ResonanceFamily.DELTA, 1910, (222222, 222212, 222112, 221112), 34),
    (ResonanceFamily.NUCLEON, 1700, (112214, 112114), 30),
    (ResonanceFamily.NUCLEON, 1650, (132212, 132112), 28),
    (ResonanceFamily.DELTA, 1700, (122224, 122214, 122114, 121114), 26),
    (ResonanceFamily.NUCLEON, 1535, (102212, 102112), 22),
    (ResonanceFamily.DELTA, 1620, (112222, 112212, 112112, 111112), 20),
    (ResonanceFamily.NUCLEON, 1720, (202114, 202214), 16),
    (ResonanceFamily.NUCLEON, 1440, (202212, 202112), 14),
    (ResonanceFamily.NUCLEON, 1680, (202216, 202116), 12),
    (ResonanceFamily.NUCLEON, 1520, (102214, 102114), 10),
    (ResonanceFamily.DELTA, 1600, (212224, 212214, 212114, 211114), 8),
    (ResonanceFamily.DELTA, 1232, (2224, 2214, 2114, 1114), 4),
)


def _build_table() -> list[_Resonance]:
    table = [
        _Resonance(0, 0, ResonanceFamily.UNCLASSIFIED, "unclasified",
                   "No Resonance; E_{Nu}; Events")
    ]
    for family, mass, codes, top in _GROUPS:
        if family is ResonanceFamily.DELTA:
            name = f"Delta ({mass})"
            labels = [f"#Delta^{{{charge}}}" for charge in _DELTA_CHARGES]
        else:
            name = f"N ({mass})"
            labels = list(_NUCLEON_LABELS)
        for offset, (code, label) in enumerate(zip(codes, labels)):
            title = f"{label}({mass}) resonance; E_{{Nu}}; Events"
            table.append(_Resonance(code, top - offset, family, name, title))
    return table


_TABLE = _build_table()
_BY_CODE = {r.code: r for r in _TABLE}
_BY_INDEX = {r.index: r for r in _TABLE}

_FAMILY_TITLES = {
    0: " Unknown resonance; E_{#nu} [GeV]; Events",
    1: "#Delta resonance; E_{#nu} [GeV]; Events",
    2: "N resonance; E_{#nu} [GeV]; Events",
}


def _lookup(index: int) -> _Resonance:
    try:
        return _BY_INDEX[index]
    except KeyError:
        raise ValueError(f"unknown resonance index {index}") from None


def resonance_index(code: int) -> int:
    """Return the histogram index for a generator resonance code."""
    try:
        return _BY_CODE[code].index
    except KeyError:
        raise ValueError(f"unknown resonance code {code}") from None


def resonance_family(index: int) -> ResonanceFamily:
    """Return whether the resonance with this index is a Delta or a nucleon."""
    return _lookup(index).family


def resonance_name(index: int) -> str:
    """Return the short name, such as 'Delta (1232)', for a resonance index."""
    return _lookup(index).name


def resonance_title(index: int) -> str:
    """Return the histogram title for a resonance index, or '' if unknown."""
    entry = _BY_INDEX.get(index)
    return entry.title if entry is not None else ""


def family_title(index: int) -> str:
    """Return the histogram title for a family index (0, 1 or 2), or '' otherwise."""
    return _FAMILY_TITLES.get(index, "")