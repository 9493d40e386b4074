"""Catalog of predefined UI/UX tests.

Five categories, three tests each. Every test pits two variants that
differ in appeal type against each other; the segment's sensitivity to
that appeal type drives the modeled conversion rate.
"""

from typing import Dict, List, Tuple

from uxsim.sim.model import TestCategory, TestDefinition, TestMeta, Variant


def _test(key, name, description, impact, difficulty, sample_size, a, b) -> TestDefinition:
    return TestDefinition(
        key=key, name=name, description=description,
        meta=TestMeta(impact_level=impact, difficulty=difficulty, sample_size_needed=sample_size),
        variant_a=Variant(*a), variant_b=Variant(*b),
    )


def _category(key, name, description, tests: List[TestDefinition]) -> TestCategory:
    return TestCategory(key=key, name=name, description=description, tests={t.key: t for t in tests})


TEST_CATEGORIES: Dict[str, TestCategory] = {c.key: c for c in [
    _category("navigation_ia", "🧭 Navigation & information architecture",
              "Findability and information structure", [
        _test("top_nav_structure", "Top navigation structure", "Compact vs mega menu",
              "medium", "medium", 5000,
              ("Compact, 5 items", "convenience", "Only the 5 core categories", "🧭 Core 5"),
              ("Mega menu", "speed", "All sub-categories exposed", "🧭 Mega menu")),
        _test("search_placement", "Search placement", "Top bar vs sticky bottom (mobile)",
              "high", "low", 3000,
              ("Top search", "speed", "Search in the top bar", "🔍 Top"),
              ("Sticky bottom", "convenience", "Search pinned to the bottom on mobile", "🔍 Bottom")),
        _test("breadcrumb_visibility", "Breadcrumb visibility", "Shown vs hidden",
              "low", "low", 4000,
              ("Shown", "convenience", "Breadcrumb trail visible", "🧱 Shown"),
              ("Hidden", "speed", "Breadcrumb trail hidden", "🧱 Hidden")),
    ]),
    _category("conversion_psych", "💰 Conversion psychology",
              "Social proof, scarcity, anchoring and other persuasion drivers", [
        _test("social_proof_badge", "Social proof badge", "Review count vs purchase count",
              "high", "low", 2500,
              ("Review count", "urgency", "1.2k reviews", "⭐ 1.2k reviews"),
              ("Purchase count", "urgency", "500 bought in the last 24h", "🛒 500 bought/24h")),
        _test("scarcity_timer", "Scarcity timer", "Limited stock vs limited time",
              "medium", "medium", 3500,
              ("Limited stock", "urgency", "Only 7 left", "⏳ 7 left"),
              ("Limited time", "urgency", "Ends in 2 hours", "⏳ 2h left")),
        _test("price_anchor_display", "Price anchor display", "List price vs sale price emphasis",
              "medium", "low", 3000,
              ("Struck list price", "price", "List price 89,000 KRW", " ~89,000~ "),
              ("Sale price emphasis", "price", "Now 59,000 KRW", "59,000")),
    ]),
    _category("trust_security", "🛡️ Trust & security",
              "Payment trust, refund policy and security cues", [
        _test("trust_badges_checkout", "Checkout trust badges", "Security badges at checkout",
              "medium", "low", 4000,
              ("Trust badges", "convenience", "SSL / secure payment logos", "🔒 SSL"),
              ("Security copy", "convenience", "Plain-text security notice", "🔒 Notice")),
        _test("refund_policy_visibility", "Refund policy visibility", "Where the refund policy shows",
              "low", "low", 3000,
              ("Header link", "convenience", "Refund policy link in the header", "↗ Refund policy"),
              ("At checkout", "convenience", "Refund policy shown before payment", "🧾 Refund policy")),
        _test("https_lock_icon_emphasis", "HTTPS lock emphasis", "Near the address bar vs near pay button",
              "low", "low", 2500,
              ("Near address bar", "convenience", "Lock icon beside the address bar", "🔐 Address bar"),
              ("Near pay button", "convenience", "Lock icon beside the payment CTA", "🔐 Payment")),
    ]),
    _category("mobile_optimization", "📱 Mobile optimisation",
              "Mobile usability and speed", [
        _test("bottom_nav_bar", "Bottom navigation bar", "Introduce a sticky bottom bar",
              "high", "medium", 4500,
              ("Not introduced", "speed", "Keep top tabs", "⬆️ Top"),
              ("Introduced", "convenience", "Sticky bottom bar", "⬇️ Bottom")),
        _test("thumb_zone_cta", "Thumb-zone CTA", "CTA placed in the thumb zone",
              "high", "low", 3000,
              ("Current position", "speed", "CTA at top/middle", "👆 Top"),
              ("Thumb zone", "convenience", "CTA pinned to the bottom", "👍 Bottom")),
        _test("image_lazy_loading", "Image lazy loading", "Enable lazy loading",
              "medium", "low", 3500,
              ("Off", "speed", "Load images immediately", "🖼️ Eager"),
              ("On", "speed", "Defer offscreen images", "🖼️ Lazy")),
    ]),
    _category("visual_hierarchy", "👁️ Visual hierarchy",
              "Clear information priority and CTA emphasis", [
        _test("primary_cta_color", "Primary CTA colour", "Blue vs green",
              "medium", "low", 3000,
              ("Blue", "urgency", "Blue CTA", "🔵 CTA"),
              ("Green", "urgency", "Green CTA", "🟢 CTA")),
        _test("hero_copy_weight", "Hero copy weight", "Bold vs regular",
              "low", "low", 2500,
              ("Bold", "urgency", "Heavy emphasis", "🅱️ Bold"),
              ("Regular", "convenience", "Default weight", "🔤 Regular")),
        _test("card_shadow_depth", "Card shadow depth", "Light vs deep",
              "low", "low", 2500,
              ("Light", "convenience", "Subtle shadow", "🃏 Light"),
              ("Deep", "convenience", "Strong shadow", "🃏 Deep")),
    ]),
]}

# Published results used as a sanity reference in the UI
HISTORICAL_TESTS: List[Dict[str, str]] = [
    {
        "company": "Large domestic marketplace A",
        "test": "Fast delivery vs discount emphasis",
        "winner": "Fast delivery",
        "lift": "+18%",
        "duration": "14 days",
        "traffic": "500k sessions",
    },
    {
        "company": "Fashion retailer C",
        "test": "Buy now vs buy at sale price",
        "winner": "Buy at sale price",
        "lift": "+24%",
        "duration": "10 days",
        "traffic": "300k sessions",
    },
]

# Behavioral research the appeal coefficients lean on
RESEARCH_SOURCES: List[str] = [
    "Kahneman & Tversky (1979) - Prospect Theory",
    "Cialdini (2006) - Influence: Psychology of Persuasion",
    "Nielsen Norman Group - Mobile UX Guidelines",
    "MIT Technology Review - Mobile Commerce Studies",
    "Harvard Business Review - Consumer Behavior",
]


def get_test(category_key: str, test_key: str) -> TestDefinition:
    if category_key not in TEST_CATEGORIES:
        raise KeyError(f"Unknown category: {category_key!r}")
    tests = TEST_CATEGORIES[category_key].tests
    if test_key not in tests:
        raise KeyError(f"Unknown test {test_key!r} in category {category_key!r}")
    return tests[test_key]

def choices_for_category(category_key: str) -> List[Tuple[str, str]]:
    """(label, key) pairs for a category, in catalog order."""
    if category_key not in TEST_CATEGORIES:
        return []
    return [(t.name, t.key) for t in TEST_CATEGORIES[category_key].tests.values()]
