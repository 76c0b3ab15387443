import pytest

from cc1pitools.resonance import (
    ResonanceFamily,
    family_title,
    resonance_family,
    resonance_index,
    resonance_name,
    resonance_title,
)

ALL_CODES = [
    0, 202228, 202218, 202118, 201118, 222224, 222214, 222114, 221114,
    212226, 212216, 212116, 211116, 212212, 212112, 102216, 102116,
    222222, 222212, 222112, 221112, 112214, 112114, 132212, 132112,
    122224, 122214, 122114, 121114, 102212, 102112, 112222, 112212,
    112112, 111112, 202114, 202214, 202212, 202112, 202216, 202116,
    102214, 102114, 212224, 212214, 212114, 211114, 2224, 2214, 2114, 1114,
]


def test_known_codes_map_to_source_indices():
    assert resonance_index(2224) == 4
    assert resonance_index(1114) == 1
    assert resonance_index(202228) == 50
    assert resonance_index(202114) == 16


def test_codes_cover_every_index_once():
    indices = sorted(resonance_index(code) for code in ALL_CODES)
    assert indices == list(range(51))


def test_unknown_code_raises():
    with pytest.raises(ValueError):
        resonance_index(123456)


def test_family_and_name():
    assert resonance_family(4) is ResonanceFamily.DELTA
    assert resonance_name(4) == "Delta (1232)"
    assert resonance_family(38) is ResonanceFamily.NUCLEON
    assert resonance_name(38) == "N (1710)"
    assert resonance_family(0) is ResonanceFamily.UNCLASSIFIED
    assert ResonanceFamily.NUCLEON.value == "np"


def test_unknown_index_raises():
    with pytest.raises(ValueError):
        resonance_family(51)
    with pytest.raises(ValueError):
        resonance_name(-1)


def test_titles_from_source():
    assert resonance_title(50) == "#Delta^{++}(1950) resonance; E_{Nu}; Events"
    assert resonance_title(1) == "#Delta^{-}(1232) resonance; E_{Nu}; Events"
    assert resonance_title(16) == "p(1720) resonance; E_{Nu}; Events"
    assert resonance_title(9) == "n(1520) resonance; E_{Nu}; Events"
    assert resonance_title(0) == "No Resonance; E_{Nu}; Events"


def test_title_unknown_index_is_empty():
    assert resonance_title(99) == ""


@pytest.mark.parametrize("index", range(1, 51))
def test_title_agrees_with_family_and_name(index):
    title = resonance_title(index)
    family = resonance_family(index)
    mass = resonance_name(index).split("(")[1].rstrip(")")
    assert f"({mass}) resonance" in title
    if family is ResonanceFamily.DELTA:
        assert title.startswith("#Delta^{")
    else:
        assert title[0] in "pn"


def test_family_titles():
    assert family_title(0) == " Unknown resonance; E_{#nu} [GeV]; Events"
    assert family_title(1) == "#Delta resonance; E_{#nu} [GeV]; Events"
    assert family_title(2) == "N resonance; E_{#nu} [GeV]; Events"
    assert family_title(3) == ""