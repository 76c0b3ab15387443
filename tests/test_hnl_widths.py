import math

import pytest

from cc1pitools.hnl_widths import (
    HNLWidths,
    PhysicsConstants,
    flat_to_exp_rand,
    forcedecay_weight,
    kallen_lambda,
)


@pytest.fixture
def constants():
    return PhysicsConstants(
        muon_mass=0.1057,
        elec_mass=0.000511,
        piplus_mass=0.1396,
        pizero_mass=0.1350,
        eta_mass=0.5479,
        etap_mass=0.9578,
        rho_mass=0.7753,
        kplus_mass=0.4937,
        tau_mass=1.777,
        gfermi=1.166e-5,
        g_l=-0.27,
        g_r=0.23,
        fpion=0.130,
        feta=0.0817,
        fetap=-0.0947,
        frho=0.171,
        grho=0.4,
        abs_vud_squared=0.948,
        hbar=6.58e-16,
        c_cm_per_ns=29.98,
    )


@pytest.fixture
def dirac(constants):
    return HNLWidths(constants, majorana=False)


@pytest.fixture
def majorana(constants):
    return HNLWidths(constants, majorana=True)


def test_kallen_lambda_symmetric():
    assert kallen_lambda(1.0, 0.2, 0.3) == pytest.approx(kallen_lambda(0.3, 1.0, 0.2))
    assert kallen_lambda(1.0, 0.0, 0.0) == pytest.approx(1.0)


def test_forcedecay_weight_full_range_is_one():
    assert forcedecay_weight(5.0, 0.0, math.inf) == pytest.approx(1.0)
    assert forcedecay_weight(5.0, 3.0, 3.0) == 0.0


def test_flat_to_exp_rand_endpoints():
    assert flat_to_exp_rand(0.0, 10.0, 2.0, 7.0) == pytest.approx(2.0)
    assert flat_to_exp_rand(1.0, 10.0, 2.0, 7.0) == pytest.approx(7.0)
    mid = flat_to_exp_rand(0.5, 10.0, 2.0, 7.0)
    assert 2.0 < mid < 7.0


def test_i1_massless_normalisation(dirac):
    assert dirac.i1(0.0, 0.0, 0.0) == pytest.approx(1.0, rel=1e-6)


def test_i1_decreases_with_mass(dirac):
    assert 0.0 < dirac.i1(0.0, 0.3, 0.3) < dirac.i1(0.0, 0.1, 0.1)


def test_i2_positive(dirac):
    assert dirac.i2(0.0, 0.2, 0.2) > 0.0


def test_tri_nu_linear_and_majorana(dirac, majorana):
    assert dirac.tri_nu_width(0.3, 2e-6) == pytest.approx(2 * dirac.tri_nu_width(0.3, 1e-6))
    assert majorana.tri_nu_width(0.3, 1e-6) == pytest.approx(2 * dirac.tri_nu_width(0.3, 1e-6))


def test_nul1l2_massless_matches_tri_nu(dirac):
    assert dirac.nul1l2_width(0.3, 0.0, 0.0, 1e-6, 15, 15) == pytest.approx(
        dirac.tri_nu_width(0.3, 1e-6), rel=1e-6
    )


def test_nul1l2_below_threshold(dirac):
    assert dirac.nul1l2_width(0.1, 1e-6, 1e-6, 0.0, 11, 13) == 0.0


def test_lep_pi_threshold_and_scaling(dirac, majorana):
    assert dirac.lep_pi_width(0.2, 1e-6, 0.1057) == 0.0
    w1 = dirac.lep_pi_width(0.35, 1e-6, 0.1057)
    assert w1 > 0.0
    assert dirac.lep_pi_width(0.35, 3e-6, 0.1057) == pytest.approx(3 * w1)
    assert majorana.lep_pi_width(0.35, 1e-6, 0.1057) == pytest.approx(2 * w1)


def test_nu_p0_threshold_and_majorana(dirac, majorana):
    assert dirac.nu_p0_width(0.1, 1e-6, 0.135, 0.13) == 0.0
    w = dirac.nu_p0_width(0.3, 1e-6, 0.135, 0.13)
    assert w > 0.0
    assert majorana.nu_p0_width(0.3, 1e-6, 0.135, 0.13) == pytest.approx(2 * w)


def test_nu_v0_not_doubled_for_majorana(dirac, majorana):
    assert dirac.nu_v0_width(0.5, 1e-6, 0.7753, 0.171, 0.4) == 0.0
    w = dirac.nu_v0_width(0.9, 1e-6, 0.7753, 0.171, 0.4)
    assert majorana.nu_v0_width(0.9, 1e-6, 0.7753, 0.171, 0.4) == pytest.approx(w)


def test_nu_dilep_threshold(dirac):
    assert dirac.nu_dilep_width(0.2, 1e-6, 14, 13) == 0.0
    assert dirac.nu_dilep_width(0.3, 0.0, 14, 13) == 0.0


def test_channel_width_matches_direct(dirac, constants):
    assert dirac.channel_width("mu_pi", 0.35, 1e-6, 2e-6, 3e-6) == pytest.approx(
        dirac.lep_pi_width(0.35, 2e-6, constants.muon_mass)
    )
    assert dirac.channel_width("nu_nu_nu", 0.35, 1e-6, 2e-6, 3e-6) == pytest.approx(
        dirac.tri_nu_width(0.35, 6e-6)
    )
    assert dirac.channel_width("nu_pi0", 0.35, 1e-6, 2e-6, 3e-6) == pytest.approx(
        dirac.nu_p0_width(0.35, 6e-6, constants.pizero_mass, constants.fpion)
    )


def test_nu_mu_e_sums_both_orderings(dirac):
    total = dirac.channel_width("nu_mu_e", 0.35, 1e-6, 2e-6, 0.0)
    parts = dirac.nul1l2_width(0.35, 1e-6, 2e-6, 0.0, 11, 13) + dirac.nul1l2_width(
        0.35, 1e-6, 2e-6, 0.0, 13, 11
    )
    assert total == pytest.approx(parts)


def test_channels_listed(dirac):
    names = dirac.channels()
    assert "mu_pi" in names
    assert "nu_rho0" in names
    assert len(names) == len(set(names))


def test_unknown_channel_raises(dirac):
    with pytest.raises(KeyError):
        dirac.channel_width("nu_tau_tau", 0.3, 1e-6, 1e-6, 1e-6)