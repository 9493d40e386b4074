from typing import Optional

from uxsim.sim.model import Recommendation, Variant

STRONG_CONFIDENCE = 95.0
WEAK_CONFIDENCE = 90.0
BIG_LIFT_PCT = 10.0

PROFESSIONAL_SEGMENTS = ("millennial_professional",)


def improvement_percent(effectA: float, effectB: float) -> float:
    if effectA <= 0:
        return 0.0
    return abs((effectB - effectA) / effectA * 100)

def generate_recommendation(
    effectA: float,
    effectB: float,
    confidence: float,
    variantA: Variant,
    variantB: Variant,
    segment_key: str,
    visitors: Optional[int] = None,
    sample_size_needed: Optional[int] = None,
) -> Recommendation:
    """
    Templated readout keyed on confidence (>=95 adopt, >=90 lean, else
    inconclusive), followed by a segment/appeal-type tip when one applies.
    """
    winner = variantB if effectB > effectA else variantA
    improvement = improvement_percent(effectA, effectB)

    if confidence >= STRONG_CONFIDENCE:
        text = f"✅ Adopt {winner.name}. "
        if improvement >= BIG_LIFT_PCT:
            text += f"Conversion improves by {improvement:.1f}%, so expect a large impact."
        else:
            text += "The result is significant but the lift is small; weigh other factors too."
    elif confidence >= WEAK_CONFIDENCE:
        text = f"⚠️ {winner.name} is slightly ahead, but more data is needed."
    else:
        text = "🤔 The difference between the two variants is unclear. Try a different approach."

    research = ""
    if segment_key == "value_seeker" and winner.appeal_type == "price":
        text += "\n💡 Discount and price messages work well for value seekers."
        research = "Basis: Korea Consumer Agency study, 67% of shoppers in their 20s respond to discounts"
    elif segment_key in PROFESSIONAL_SEGMENTS and winner.appeal_type in ("convenience", "speed"):
        text += "\n💡 Convenience and speed messages appeal more to working professionals."
        research = "Basis: Google research, 58% of shoppers in their 30s-40s respond to convenience"
    elif winner.appeal_type == "speed":
        research = "Basis: Baymard Institute, clear delivery information cuts abandonment by 23%"

    if sample_size_needed and visitors is not None and visitors < sample_size_needed:
        text += f"\n📏 This test usually needs about {sample_size_needed:,} visitors; you simulated {visitors:,}."

    return Recommendation(text=text, research_support=research)
