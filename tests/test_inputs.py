import pytest

from uxsim.sim.inputs import (
    InvalidTrafficSplitError,
    InvalidVisitorCountError,
    MissingSelectionError,
    SimulationInputError,
    build_simulation_input,
    parse_visitors,
)


def test_missing_selection():
    for cat, test in ((None, "search_placement"), ("navigation_ia", None), ("", ""), ("navigation_ia", "")):
        with pytest.raises(MissingSelectionError, match="category and a test"):
            build_simulation_input(cat, test, "mixed", 50, 1000)


def test_unknown_keys_are_selection_errors():
    with pytest.raises(MissingSelectionError):
        build_simulation_input("navigation_ia", "nope", "mixed", 50, 1000)
    with pytest.raises(MissingSelectionError):
        build_simulation_input("nope", "search_placement", "mixed", 50, 1000)
    with pytest.raises(MissingSelectionError):
        build_simulation_input("navigation_ia", "search_placement", "martians", 50, 1000)


def test_invalid_visitor_counts():
    for bad in (None, -1, 1.5, float("nan"), float("inf"), "abc", "-3", True, 10_000_001,
                "9" * 400, 10 ** 400, -(10 ** 400), "9" * 5000):
        with pytest.raises(InvalidVisitorCountError):
            build_simulation_input("navigation_ia", "search_placement", "mixed", 50, bad)


def test_errors_are_value_errors():
    assert issubclass(MissingSelectionError, SimulationInputError)
    assert issubclass(InvalidVisitorCountError, ValueError)


def test_parse_visitors_accepts_common_forms():
    assert parse_visitors(0) == 0
    assert parse_visitors(1000.0) == 1000
    assert parse_visitors(" 1,000 ") == 1000


def test_split_out_of_range():
    for bad in (120, -5, float("nan"), None, "half", [50]):
        with pytest.raises(InvalidTrafficSplitError, match="Traffic split"):
            build_simulation_input("navigation_ia", "search_placement", "mixed", bad, 1000)
    assert issubclass(InvalidTrafficSplitError, SimulationInputError)


def test_builds_input_from_catalog():
    inp = build_simulation_input("mobile_optimization", "bottom_nav_bar", "gen_z_mobile_native",
                                 30, "2500", seeded=True, seed=7)
    assert inp.variant_a.appeal_type == "speed"
    assert inp.variant_b.appeal_type == "convenience"
    assert inp.segment.key == "gen_z_mobile_native"
    assert inp.traffic_split_percent == 30.0
    assert inp.total_visitors == 2500
    assert inp.seeded and inp.seed == 7
    assert inp.sample_size_needed == 4500


def test_default_seed():
    inp = build_simulation_input("navigation_ia", "search_placement", "mixed", 50, 100)
    assert inp.seeded is False
    assert inp.seed == 42
