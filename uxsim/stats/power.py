"""Sample-size and power arithmetic for two modeled conversion rates.

Everything is per arm, two-sided, normal approximation on proportions.
"""

import math
from typing import Tuple

from scipy.stats import norm

_EPS = 1e-9


def _unit(rate: float) -> float:
    return min(max(float(rate), _EPS), 1 - _EPS)

def _z_pair(alpha: float, power: float) -> Tuple[float, float]:
    return float(norm.ppf(1 - alpha / 2)), float(norm.ppf(power))


def required_visitors_per_arm(rate_a: float, rate_b: float, alpha: float = 0.05, power: float = 0.80) -> float:
    """
    Visitors each arm needs before a rate_a vs rate_b gap is detectable.
    Uses the average of the two rates for the variance; equal rates give NaN.
    """
    rate_a, rate_b = _unit(rate_a), _unit(rate_b)
    gap = abs(rate_b - rate_a)
    if gap <= _EPS:
        return float("nan")
    z_a, z_b = _z_pair(alpha, power)
    mid = (rate_a + rate_b) / 2.0
    return float(math.ceil((z_a + z_b) ** 2 * 2 * mid * (1 - mid) / gap ** 2))


def detectable_lift(rate: float, visitors_per_arm: int, alpha: float = 0.05, power: float = 0.80) -> float:
    """Smallest absolute lift over `rate` that visitors_per_arm can pick up."""
    rate = _unit(rate)
    n = max(1, int(visitors_per_arm))
    z_a, z_b = _z_pair(alpha, power)
    lift = (z_a + z_b) * math.sqrt(2 * rate * (1 - rate) / n)
    # the variance depends on the lifted rate, so settle it a few times
    for _ in range(3):
        mid = (rate + _unit(rate + lift)) / 2.0
        lift = (z_a + z_b) * math.sqrt(2 * mid * (1 - mid) / n)
    return float(lift)


def achieved_power(rate_a: float, rate_b: float, visitors_per_arm: int, alpha: float = 0.05) -> float:
    n = int(visitors_per_arm)
    if n <= 0:
        return 0.0
    rate_a, rate_b = _unit(rate_a), _unit(rate_b)
    se = math.sqrt((rate_a * (1 - rate_a) + rate_b * (1 - rate_b)) / n)
    shift = abs(rate_b - rate_a) / se
    z_a = float(norm.ppf(1 - alpha / 2))
    pw = norm.sf(z_a - shift) + norm.cdf(-z_a - shift)
    return float(min(1.0, max(0.0, pw)))
