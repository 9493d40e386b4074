"""Simulation engine: turn a test selection into plausible A/B numbers.

Each arm gets a modeled conversion rate (base rate plus an appeal bonus
scaled by the segment's sensitivity), a share of the traffic, and a
sampled conversion count. The two observed proportions are compared with
a Welch-style test to produce a confidence score, and revenue comes from
the segment's average order value.

All randomness flows through one generator so a seeded run is
reproducible: arm A draws first, then arm B.
"""

import logging
import math
from typing import Dict, Optional

from uxsim.config import ALPHA, POWER
from uxsim.data.segments import average_order_value
from uxsim.sim.model import Segment, SimulationInput, SimulationOutput, Variant, VariantResult
from uxsim.sim.recommend import generate_recommendation, improvement_percent
from uxsim.stats.power import achieved_power, required_visitors_per_arm
from uxsim.stats.sampling import RandFn, binomial_sample_approx, clamp, make_rng
from uxsim.stats.significance import welch_two_prop

logger = logging.getLogger(__name__)

BASE_CONVERSION_RATE = 0.025

# bonus per unit of segment sensitivity
APPEAL_COEFFICIENTS = {
    "price": 0.02,
    "convenience": 0.025,
    "urgency": 0.03,
    "speed": 0.028,
}

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365


def variant_effect(variant: Variant, segment: Segment) -> float:
    """Modeled conversion probability for one variant in one segment."""
    coef = APPEAL_COEFFICIENTS[variant.appeal_type]
    return BASE_CONVERSION_RATE + segment.weight_for(variant.appeal_type) * coef

def split_visitors(total: int, split_percent: float):
    total = max(0, int(total))
    split = clamp(float(split_percent), 0.0, 100.0)
    visitors_a = int(math.floor(total * (split / 100)))
    return visitors_a, total - visitors_a

def revenue_impact(revenue_a: float, revenue_b: float) -> Dict[str, float]:
    """Treat one simulated run as a day of traffic and scale the B - A gap."""
    daily = float(revenue_b - revenue_a)
    return {
        "daily_revenue_delta": daily,
        "monthly_revenue_delta": daily * DAYS_PER_MONTH,
        "annual_revenue_delta": daily * DAYS_PER_YEAR,
    }


def simulate(inp: SimulationInput, rng: Optional[RandFn] = None) -> SimulationOutput:
    if rng is None:
        rng = make_rng(inp.seeded, inp.seed)

    effectA = variant_effect(inp.variant_a, inp.segment)
    effectB = variant_effect(inp.variant_b, inp.segment)
    nA, nB = split_visitors(inp.total_visitors, inp.traffic_split_percent)
    logger.debug("effects A=%.4f B=%.4f, visitors A=%d B=%d", effectA, effectB, nA, nB)

    convA = binomial_sample_approx(nA, clamp(effectA, 0, 1), rng)
    convB = binomial_sample_approx(nB, clamp(effectB, 0, 1), rng)

    pA = convA / nA if nA > 0 else 0.0
    pB = convB / nB if nB > 0 else 0.0
    test = welch_two_prop(pA, pB, nA, nB)

    aov = average_order_value(inp.segment.key)
    revA = convA * aov
    revB = convB * aov
    rev_lift = (revB - revA) / revA * 100 if revA > 0 else 0.0

    rec = generate_recommendation(
        effectA, effectB, test["confidence"], inp.variant_a, inp.variant_b, inp.segment.key,
        visitors=max(0, int(inp.total_visitors)), sample_size_needed=inp.sample_size_needed,
    )

    need = required_visitors_per_arm(effectA, effectB, alpha=ALPHA, power=POWER)
    pw = achieved_power(effectA, effectB, min(nA, nB), alpha=ALPHA) if effectA != effectB else 0.0

    out = SimulationOutput(
        variant_a=VariantResult(
            name=inp.variant_a.name, visitors=nA, conversions=convA,
            conversion_rate=effectA * 100 if nA > 0 else 0.0,
            observed_rate=pA * 100, revenue=float(revA),
        ),
        variant_b=VariantResult(
            name=inp.variant_b.name, visitors=nB, conversions=convB,
            conversion_rate=effectB * 100 if nB > 0 else 0.0,
            observed_rate=pB * 100, revenue=float(revB),
        ),
        winner="B" if effectB > effectA else "A",
        improvement_percent=improvement_percent(effectA, effectB),
        confidence_percent=test["confidence"],
        revenue_lift_percent=float(rev_lift),
        recommendation=rec,
        p_value=test["p"],
        z_score=test["z"],
        welch_df=test["df"],
        power_percent=pw * 100,
        required_visitors_per_arm=need,
        **revenue_impact(revA, revB),
    )
    logger.debug("conversions A=%d B=%d, confidence=%.1f%%", convA, convB, out.confidence_percent)
    return out
