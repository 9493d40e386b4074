"""Pre-test planning: is the catalog's usual traffic enough for this segment?

The modeled rates of the two variants fix the gap to detect; the test's
`sample_size_needed` (total visitors, split evenly) is what teams usually
run. Comparing the two tells a planner whether to budget more traffic.
"""

from typing import Any, Dict

from uxsim.config import ALPHA, POWER
from uxsim.sim.engine import variant_effect
from uxsim.sim.model import Segment, TestDefinition
from uxsim.stats.power import achieved_power, detectable_lift, required_visitors_per_arm


def plan_test(test: TestDefinition, segment: Segment) -> Dict[str, Any]:
    rate_a = variant_effect(test.variant_a, segment)
    rate_b = variant_effect(test.variant_b, segment)
    per_arm = test.meta.sample_size_needed // 2
    need = required_visitors_per_arm(rate_a, rate_b, alpha=ALPHA, power=POWER)
    lift = detectable_lift(min(rate_a, rate_b), per_arm, alpha=ALPHA, power=POWER)
    return {
        "rate_a": rate_a,
        "rate_b": rate_b,
        "gap": abs(rate_b - rate_a),
        "catalog_visitors_per_arm": per_arm,
        "required_visitors_per_arm": need,
        # NaN (equal rates) never compares as enough
        "catalog_size_enough": bool(need <= per_arm),
        "detectable_lift": lift,
        "power_at_catalog_size": achieved_power(rate_a, rate_b, per_arm, alpha=ALPHA) if rate_a != rate_b else 0.0,
    }
