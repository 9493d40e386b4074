import math
from typing import Dict

from scipy.stats import norm

from uxsim.stats.sampling import clamp

CONFIDENCE_FLOOR = 50.0
CONFIDENCE_CEIL = 99.9


def welch_two_prop(pA: float, pB: float, nA: int, nB: int) -> Dict[str, float]:
    """
    Welch-style comparison of two sample proportions (unpooled SE).
    Returns z, Welch-Satterthwaite df, two-sided normal p and a confidence %
    clamped to [50, 99.9]. An empty arm or zero SE gives the 50% floor.
    """
    nA, nB = int(nA), int(nB)
    varA = pA * (1 - pA) / max(1, nA)
    varB = pB * (1 - pB) / max(1, nB)
    se = math.sqrt(varA + varB)

    num = (varA + varB) ** 2
    den = varA ** 2 / max(1, nA - 1) + varB ** 2 / max(1, nB - 1)
    df = max(1.0, num / den) if den > 0 else float(max(1, nA + nB - 2))

    if min(nA, nB) <= 0 or se == 0:
        return {"z": 0.0, "df": float(df), "p": 1.0, "confidence": CONFIDENCE_FLOOR}

    z = abs(pA - pB) / se
    # normal tail in place of Student t
    p = 2 * norm.sf(z)
    conf = clamp((1 - p) * 100, CONFIDENCE_FLOOR, CONFIDENCE_CEIL)
    return {"z": float(z), "df": float(df), "p": float(p), "confidence": float(conf)}


def confidence_percent(pA: float, pB: float, nA: int, nB: int) -> float:
    return welch_two_prop(pA, pB, nA, nB)["confidence"]
