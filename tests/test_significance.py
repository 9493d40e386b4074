import pytest
from scipy.stats import norm

from uxsim.stats.significance import confidence_percent, welch_two_prop


def test_identical_rates_floor_at_50():
    out = welch_two_prop(0.1, 0.1, 500, 500)
    assert out["z"] == 0.0
    assert out["confidence"] == 50.0


def test_zero_standard_error():
    assert confidence_percent(0.0, 0.0, 1000, 1000) == 50.0
    assert confidence_percent(1.0, 1.0, 10, 10) == 50.0


def test_empty_arm_is_inconclusive():
    out = welch_two_prop(0.0, 0.2, 0, 400)
    assert out["confidence"] == 50.0
    assert out["p"] == 1.0


def test_huge_difference_caps_at_99_9():
    assert confidence_percent(0.02, 0.08, 5000, 5000) == pytest.approx(99.9)


def test_confidence_matches_normal_tail():
    out = welch_two_prop(0.030, 0.036, 10000, 10000)
    assert out["p"] == pytest.approx(2 * norm.sf(out["z"]))
    assert out["confidence"] == pytest.approx(max(50.0, min(99.9, (1 - out["p"]) * 100)))
    assert 50.0 <= out["confidence"] <= 99.9


def test_symmetric_in_arms():
    a = welch_two_prop(0.03, 0.05, 800, 1200)
    b = welch_two_prop(0.05, 0.03, 1200, 800)
    assert a["z"] == pytest.approx(b["z"])
    assert a["confidence"] == pytest.approx(b["confidence"])


def test_welch_df_equal_arms():
    # equal variances and sizes: df = 2(n-1)
    out = welch_two_prop(0.1, 0.1, 100, 100)
    assert out["df"] == pytest.approx(198.0)


def test_confidence_bounds_grid():
    for pA in (0.0, 0.01, 0.05, 0.3):
        for pB in (0.0, 0.02, 0.05, 0.9):
            for n in (0, 1, 10, 1000):
                c = confidence_percent(pA, pB, n, n + 3)
                assert 50.0 <= c <= 99.9
