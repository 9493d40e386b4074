import math

import pytest

from uxsim.data.experiments import get_test
from uxsim.data.segments import get_segment, average_order_value
from uxsim.sim.engine import BASE_CONVERSION_RATE, revenue_impact, simulate, split_visitors, variant_effect
from uxsim.sim.model import SimulationInput, Variant
from uxsim.stats.sampling import Xorshift32


def _input(category, test, segment="mixed", split=50, visitors=1000, seeded=True, seed=42):
    t = get_test(category, test)
    return SimulationInput(
        variant_a=t.variant_a, variant_b=t.variant_b, segment=get_segment(segment),
        traffic_split_percent=split, total_visitors=visitors, seeded=seeded, seed=seed,
        sample_size_needed=t.meta.sample_size_needed,
    )


def test_variant_effect_per_appeal_type():
    mixed = get_segment("mixed")
    assert variant_effect(Variant("p", "price"), mixed) == pytest.approx(0.025 + 0.35 * 0.02)
    assert variant_effect(Variant("c", "convenience"), mixed) == pytest.approx(0.025 + 0.45 * 0.025)
    assert variant_effect(Variant("u", "urgency"), mixed) == pytest.approx(0.025 + 0.30 * 0.03)
    assert variant_effect(Variant("s", "speed"), mixed) == pytest.approx(0.025 + 0.40 * 0.028)
    assert BASE_CONVERSION_RATE == 0.025


def test_split_floor_for_a_remainder_for_b():
    assert split_visitors(1001, 50) == (500, 501)
    assert split_visitors(1000, 25) == (250, 750)
    assert split_visitors(1000, 150) == (1000, 0)
    assert split_visitors(-5, 50) == (0, 0)


def test_seeded_run_is_reproducible():
    inp = _input("navigation_ia", "search_placement", seed=1234)
    a, b = simulate(inp), simulate(inp)
    assert a.to_dict() == b.to_dict()


def test_different_seeds_differ():
    outs = {simulate(_input("navigation_ia", "search_placement", visitors=20000, seed=s)).variant_a.conversions
            for s in (1, 2, 3, 4, 5)}
    assert len(outs) > 1


def test_injected_rng_matches_seeded_mode():
    seeded = simulate(_input("mobile_optimization", "thumb_zone_cta", seed=99))
    injected = simulate(_input("mobile_optimization", "thumb_zone_cta", seeded=False), rng=Xorshift32(99))
    assert injected.variant_a.conversions == seeded.variant_a.conversions
    assert injected.variant_b.conversions == seeded.variant_b.conversions


def test_conversions_within_visitors():
    for visitors in (0, 1, 3, 10, 999, 50000):
        for split in (0, 10, 50, 90, 100):
            out = simulate(_input("conversion_psych", "price_anchor_display", "value_seeker",
                                  split=split, visitors=visitors, seed=visitors + split))
            for arm in (out.variant_a, out.variant_b):
                assert 0 <= arm.conversions <= arm.visitors
            assert out.variant_a.visitors + out.variant_b.visitors == visitors
            assert 50.0 <= out.confidence_percent <= 99.9


def test_empty_arm_reports_zero_rate_and_floor_confidence():
    out = simulate(_input("navigation_ia", "top_nav_structure", split=100, visitors=5000))
    assert out.variant_b.visitors == 0
    assert out.variant_b.conversion_rate == 0.0
    assert out.confidence_percent == 50.0
    assert out.power_percent == 0.0


def test_equal_effects_report_equal_rates():
    out = simulate(_input("conversion_psych", "scarcity_timer", visitors=4000, seed=7))
    assert out.variant_a.conversion_rate == out.variant_b.conversion_rate
    assert out.improvement_percent == 0.0
    assert out.winner == "A"
    assert math.isnan(out.required_visitors_per_arm)


def test_revenue_is_conversions_times_aov():
    for seg in ("premium_buyer", "value_seeker", "gen_z_mobile_native"):
        out = simulate(_input("visual_hierarchy", "hero_copy_weight", seg, visitors=3000))
        aov = average_order_value(seg)
        assert out.variant_a.revenue == out.variant_a.conversions * aov
        assert out.variant_b.revenue == out.variant_b.conversions * aov


def test_revenue_lift_zero_without_a_revenue():
    out = simulate(_input("visual_hierarchy", "hero_copy_weight", split=0, visitors=2000))
    assert out.variant_a.revenue == 0
    assert out.revenue_lift_percent == 0.0


def test_revenue_impact_projects_month_and_year():
    assert revenue_impact(100, 250) == {
        "daily_revenue_delta": 150.0,
        "monthly_revenue_delta": 4500.0,
        "annual_revenue_delta": 54750.0,
    }
    assert revenue_impact(250, 100)["annual_revenue_delta"] == -54750.0


def test_output_carries_revenue_projection():
    out = simulate(_input("visual_hierarchy", "hero_copy_weight", "premium_buyer", visitors=5000))
    daily = out.variant_b.revenue - out.variant_a.revenue
    assert out.daily_revenue_delta == daily
    assert out.monthly_revenue_delta == daily * 30
    assert out.annual_revenue_delta == daily * 365


def test_large_traffic_gives_strong_recommendation():
    # premium buyers: urgency 0.034 vs convenience 0.040
    out = simulate(_input("visual_hierarchy", "hero_copy_weight", "premium_buyer",
                          visitors=1_000_000, seed=42))
    assert out.winner == "B"
    assert out.improvement_percent == pytest.approx(17.647, abs=1e-3)
    assert out.confidence_percent == pytest.approx(99.9)
    assert out.recommendation_text.startswith("✅ Adopt Regular.")
    assert "17.6%" in out.recommendation_text
    assert out.revenue_lift_percent > 0
    assert out.power_percent > 99


def test_small_traffic_mentions_sample_size():
    out = simulate(_input("navigation_ia", "top_nav_structure", visitors=800))
    assert "5,000 visitors" in out.recommendation_text


def test_unseeded_runs_still_valid():
    out = simulate(_input("trust_security", "trust_badges_checkout", seeded=False, visitors=2000))
    assert 0 <= out.variant_a.conversions <= out.variant_a.visitors
    assert 50.0 <= out.confidence_percent <= 99.9


def test_to_dict_flattens_recommendation():
    d = simulate(_input("navigation_ia", "search_placement")).to_dict()
    assert "recommendation" not in d
    assert {"recommendation_text", "research_support", "variant_a", "confidence_percent"} <= set(d)
