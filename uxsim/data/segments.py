"""Customer segment profiles.

Each segment carries the four appeal sensitivities the engine uses plus
twelve extended traits shown in the UI. Weights are in [0, 1].
"""

from typing import Dict

from uxsim.sim.model import EXTENDED_TRAITS, Segment

DEFAULT_SEGMENT = "mixed"
DEFAULT_AOV = 50000


def _seg(key, name, price, convenience, urgency, speed, basis, *traits) -> Segment:
    return Segment(
        key=key, name=name,
        price_sensitivity=price, convenience_preference=convenience,
        urgency_response=urgency, speed_preference=speed,
        research_basis=basis, traits=dict(zip(EXTENDED_TRAITS, traits)),
    )


CUSTOMER_SEGMENTS: Dict[str, Segment] = {s.key: s for s in [
    _seg("gen_z_mobile_native", "Gen Z mobile natives (18-25)",
         0.35, 0.45, 0.40, 0.50, "Journal of Consumer Psychology / Mobile UX",
         0.30, 0.60, 0.35, 0.30, 0.35, 0.65, 0.25, 0.55, 0.45, 0.35, 0.40, 0.55),
    _seg("millennial_professional", "Millennial professionals (26-35)",
         0.30, 0.55, 0.35, 0.45, "HBR / Google Consumer Insights",
         0.45, 0.55, 0.40, 0.45, 0.40, 0.45, 0.40, 0.50, 0.50, 0.45, 0.35, 0.55),
    _seg("gen_x_family", "Gen X families (36-50)",
         0.30, 0.45, 0.25, 0.35, "Nielsen Norman Group",
         0.55, 0.45, 0.45, 0.55, 0.55, 0.30, 0.55, 0.40, 0.55, 0.55, 0.40, 0.50),
    _seg("baby_boomer_cautious", "Cautious baby boomers (51-65)",
         0.30, 0.40, 0.20, 0.30, "NNG / Baymard",
         0.65, 0.40, 0.45, 0.65, 0.60, 0.25, 0.65, 0.35, 0.50, 0.65, 0.35, 0.50),
    _seg("premium_buyer", "Premium buyers",
         0.15, 0.60, 0.30, 0.45, "HBR Premium Market",
         0.60, 0.45, 0.35, 0.40, 0.70, 0.50, 0.40, 0.55, 0.45, 0.55, 0.20, 0.60),
    _seg("value_seeker", "Value seekers",
         0.60, 0.35, 0.30, 0.35, "Consumer behaviour research (value for money)",
         0.40, 0.50, 0.50, 0.55, 0.35, 0.40, 0.50, 0.45, 0.50, 0.45, 0.65, 0.50),
    _seg("mixed", "Overall average",
         0.35, 0.45, 0.30, 0.40, "Weighted average of combined studies",
         0.50, 0.50, 0.45, 0.50, 0.50, 0.45, 0.50, 0.50, 0.50, 0.50, 0.45, 0.50),
]}

# average order value per segment, in KRW
SEGMENT_AOV: Dict[str, int] = {
    "gen_z_mobile_native": 42000,
    "millennial_professional": 62000,
    "gen_x_family": 70000,
    "baby_boomer_cautious": 68000,
    "premium_buyer": 120000,
    "value_seeker": 38000,
    "mixed": 50000,
}


def get_segment(key: str) -> Segment:
    if key not in CUSTOMER_SEGMENTS:
        raise KeyError(f"Unknown segment: {key!r}")
    return CUSTOMER_SEGMENTS[key]

def average_order_value(segment_key: str) -> int:
    return SEGMENT_AOV.get(segment_key, DEFAULT_AOV)
