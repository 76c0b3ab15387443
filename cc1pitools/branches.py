"""Layout of the reduced per-slice summary tree and reading of its rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Branch:
    """A named scalar branch with the Python type its values are stored as."""

    name: str
    dtype: type

    def convert(self, value: Any) -> Any:
        """Coerce a raw value to this branch's type."""
        return self.dtype(value)

    def read(self, row: Mapping[str, Any]) -> Any:
        """Take this branch's value out of a row, coerced to its type."""
        try:
            raw = row[self.name]
        except KeyError:
            raise KeyError(f"row has no branch {self.name!r}") from None
        return self.convert(raw)


_SUMMARY_LAYOUT: tuple[tuple[str, type], ...] = (
    ("gen_index", float),
    ("weight", float),
    ("E_0", float),
    ("nu_type", str),
    ("final_state", str),
    ("crumbs_score", float),
    ("is_clear_cosmic", bool),
    ("is_reconstructed", bool),
    ("v_x", float),
    ("v_y", float),
    ("v_z", float),
    ("v_x_true", float),
    ("v_y_true", float),
    ("v_z_true", float),
    ("num_tracks", float),
    ("num_showers", float),
    ("num_razzled_primary_photons", float),
    ("num_razzled_primary_electrons", float),
    ("num_razzled_primary_protons", float),
    ("num_razzled_primary_muons", float),
    ("num_razzled_primary_pions", float),
    ("num_razzled_primary_muon_like", float),
    ("num_razzled_primary_muon_like_candidates", float),
    ("num_chi2_primary_muon_like_candidates", float),
    ("E_mu_reco", float),
)


def summary_branches() -> list[Branch]:
    """Return the branches of the summary tree, in the order they are written."""
    return [Branch(name, dtype) for name, dtype in _SUMMARY_LAYOUT]


def select_branches(
    row: Mapping[str, Any], branches: Iterable[Branch] | None = None
) -> dict[str, Any]:
    """Read the given branches (all summary branches by default) from a row."""
    if branches is None:
        branches = summary_branches()
    return {branch.name: branch.read(row) for branch in branches}