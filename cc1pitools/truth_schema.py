"""Branch layout of the analyser's event tree (truth part) and subrun tree."""

from __future__ import annotations

from collections.abc import Iterable

from cc1pitools.branches import Branch


class _IntVector(list):
    """A per-particle list whose entries are stored as integers."""

    def __init__(self, values: Iterable = ()) -> None:
        super().__init__(int(v) for v in values)


class _FloatVector(list):
    """A per-particle list whose entries are stored as floats."""

    def __init__(self, values: Iterable = ()) -> None:
        super().__init__(float(v) for v in values)


class _StrVector(list):
    """A per-particle list whose entries are stored as strings."""

    def __init__(self, values: Iterable = ()) -> None:
        super().__init__(str(v) for v in values)


# A tree carries the generator block only if it has this branch.
GENERATOR_MARKER = "gen_part_start_pos_X"
# A tree carries the Geant4 block only if it has this branch.
GEANT4_MARKER = "g4_part_trackID"

_HEADER_LAYOUT: tuple[tuple[str, type], ...] = (
    ("file_name", str),
    ("event_ID", int),
    ("subrun_ID", int),
    ("run_ID", int),
)

_GENERATOR_LAYOUT: tuple[tuple[str, type], ...] = (
    ("gen_index", int),
    ("nu_PDG", int),
    ("nu_E0", float),
    ("nu_weight", float),
    ("nu_interaction_mode", int),
    ("nu_interaction_type", int),
    ("nu_CC_NC", int),
    ("nu_target", int),
    ("nu_HitNuc", int),
    ("nu_HitQuark", int),
    ("nu_W", float),
    ("nu_X", float),
    ("nu_Y", float),
    ("nu_QSqr", float),
    ("gen_part_trackID", _IntVector),
    ("gen_part_statusCode", _IntVector),
    ("gen_part_mother", _IntVector),
    ("gen_part_PDGcode", _IntVector),
    ("gen_part_mass", _FloatVector),
    ("gen_part_E0", _FloatVector),
    ("gen_part_start_pos_X", _FloatVector),
    ("gen_part_start_pos_Y", _FloatVector),
    ("gen_part_start_pos_Z", _FloatVector),
    ("gen_part_P0_X", _FloatVector),
    ("gen_part_P0_Y", _FloatVector),
    ("gen_part_P0_Z", _FloatVector),
)

_GEANT4_LAYOUT: tuple[tuple[str, type], ...] = (
    ("g4_part_trackID", _IntVector),
    ("g4_part_mother", _IntVector),
    ("g4_part_PDGcode", _IntVector),
    ("g4_part_mass", _FloatVector),
    ("g4_part_TL", _FloatVector),
    ("g4_part_E0", _FloatVector),
    ("g4_part_Ef", _FloatVector),
    ("g4_part_start_pos_X", _FloatVector),
    ("g4_part_start_pos_Y", _FloatVector),
    ("g4_part_start_pos_Z", _FloatVector),
    ("g4_part_start_T", _FloatVector),
    ("g4_part_end_pos_X", _FloatVector),
    ("g4_part_end_pos_Y", _FloatVector),
    ("g4_part_end_pos_Z", _FloatVector),
    ("g4_part_end_T", _FloatVector),
    ("g4_part_P0_X", _FloatVector),
    ("g4_part_P0_Y", _FloatVector),
    ("g4_part_P0_Z", _FloatVector),
    ("g4_part_Pf_X", _FloatVector),
    ("g4_part_Pf_Y", _FloatVector),
    ("g4_part_Pf_Z", _FloatVector),
    ("g4_part_process", _StrVector),
    ("g4_part_end_process", _StrVector),
)

_SUBRUN_LAYOUT: tuple[tuple[str, type], ...] = (
    ("POT", float),
    ("spill", float),
    ("num_gen_evts", int),
)


def _make(layout: tuple[tuple[str, type], ...]) -> list[Branch]:
    return [Branch(name, dtype) for name, dtype in layout]


def header_branches() -> list[Branch]:
    """Return the branches identifying an event: file, event, subrun and run."""
    return _make(_HEADER_LAYOUT)


def generator_branches() -> list[Branch]:
    """Return the neutrino and generator-stage particle branches."""
    return _make(_GENERATOR_LAYOUT)


def geant4_branches() -> list[Branch]:
    """Return the branches of particles propagated by Geant4."""
    return _make(_GEANT4_LAYOUT)


def truth_branches(available: Iterable[str]) -> list[Branch]:
    """Return the truth branches to read from a tree holding the named branches.

    The header is always read; the generator and Geant4 blocks are read only
    when the tree has their marker branch.
    """
    names = set(available)
    branches = header_branches()
    if GENERATOR_MARKER in names:
        branches.extend(generator_branches())
    if GEANT4_MARKER in names:
        branches.extend(geant4_branches())
    return branches


def subrun_branches() -> list[Branch]:
    """Return the branches of the subrun tree."""
    return _make(_SUBRUN_LAYOUT)