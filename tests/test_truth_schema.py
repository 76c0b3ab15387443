import pytest

from cc1pitools.branches import select_branches
from cc1pitools.truth_schema import (
    geant4_branches,
    generator_branches,
    header_branches,
    subrun_branches,
    truth_branches,
)


def _names(branches):
    return [b.name for b in branches]


def test_header_branch_names_in_order():
    assert _names(header_branches()) == ["file_name", "event_ID", "subrun_ID", "run_ID"]


def test_subrun_branch_names_in_order():
    assert _names(subrun_branches()) == ["POT", "spill", "num_gen_evts"]


def test_truth_without_markers_is_header_only():
    assert _names(truth_branches([])) == _names(header_branches())


def test_truth_with_generator_marker():
    names = _names(truth_branches(["gen_part_start_pos_X"]))
    assert names == _names(header_branches()) + _names(generator_branches())
    assert "g4_part_trackID" not in names


def test_truth_with_geant4_marker_only():
    names = _names(truth_branches({"g4_part_trackID"}))
    assert names == _names(header_branches()) + _names(geant4_branches())
    assert "nu_PDG" not in names


def test_truth_with_all_blocks_has_unique_names():
    names = _names(truth_branches(["gen_part_start_pos_X", "g4_part_trackID", "other"]))
    assert len(names) == len(set(names))
    assert len(names) == (
        len(header_branches()) + len(generator_branches()) + len(geant4_branches())
    )


def test_generator_block_contains_neutrino_and_particles():
    names = _names(generator_branches())
    assert names[0] == "gen_index"
    assert "nu_QSqr" in names
    assert names[-1] == "gen_part_P0_Z"


def test_geant4_vectors_are_coerced():
    row = {b.name: ["1", "2"] for b in geant4_branches()}
    row["g4_part_process"] = ["primary", 7]
    values = select_branches(row, geant4_branches())
    assert values["g4_part_trackID"] == [1, 2]
    assert values["g4_part_E0"] == [1.0, 2.0]
    assert all(isinstance(v, float) for v in values["g4_part_E0"])
    assert values["g4_part_process"] == ["primary", "7"]


def test_subrun_row_round_trip():
    row = {"POT": 5e12, "spill": 0, "num_gen_evts": "100"}
    values = select_branches(row, subrun_branches())
    assert values == {"POT": 5e12, "spill": 0.0, "num_gen_evts": 100}
    assert isinstance(values["spill"], float)


def test_missing_branch_raises():
    with pytest.raises(KeyError):
        select_branches({"file_name": "a.root"}, header_branches())


def test_bad_integer_raises():
    row = {"file_name": "a.root", "event_ID": "x", "subrun_ID": 1, "run_ID": 1}
    with pytest.raises(ValueError):
        select_branches(row, header_branches())