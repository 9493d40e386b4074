"""Plain data types passed into and out of the simulation engine.

Variants and segments come from the catalog (or a caller's own CSV);
SimulationInput bundles one selection, SimulationOutput is what the
engine hands back. Nothing here is persisted.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

APPEAL_TYPES = ("price", "convenience", "urgency", "speed")

# appeal type -> Segment attribute holding the matching sensitivity
APPEAL_WEIGHT_FIELDS = {
    "price": "price_sensitivity",
    "convenience": "convenience_preference",
    "urgency": "urgency_response",
    "speed": "speed_preference",
}

EXTENDED_TRAITS = (
    "trust_sensitivity",
    "social_proof_response",
    "anchoring_susceptibility",
    "loss_aversion",
    "brand_loyalty",
    "novelty_seeking",
    "risk_aversion",
    "cognitive_load_tolerance",
    "info_density_preference",
    "security_concern",
    "discount_frugality_index",
    "visual_hierarchy_sensitivity",
)

LEVELS = ("low", "medium", "high")


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= float(value) <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")


@dataclass(frozen=True)
class Variant:
    name: str
    appeal_type: str
    description: str = ""
    visual: str = ""

    def __post_init__(self):
        if self.appeal_type not in APPEAL_TYPES:
            raise ValueError(f"Unknown appeal_type {self.appeal_type!r}; use one of {APPEAL_TYPES}")


@dataclass(frozen=True)
class Segment:
    key: str
    name: str
    price_sensitivity: float
    convenience_preference: float
    urgency_response: float
    speed_preference: float
    research_basis: str = ""
    traits: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        for attr in APPEAL_WEIGHT_FIELDS.values():
            _check_unit(attr, getattr(self, attr))
        for trait, value in self.traits.items():
            if trait not in EXTENDED_TRAITS:
                raise ValueError(f"Unknown trait {trait!r}")
            _check_unit(trait, value)

    def weight_for(self, appeal_type: str) -> float:
        return float(getattr(self, APPEAL_WEIGHT_FIELDS[appeal_type]))


@dataclass(frozen=True)
class TestMeta:
    __test__ = False  # not a pytest class

    impact_level: str
    difficulty: str
    sample_size_needed: int

    def __post_init__(self):
        if self.impact_level not in LEVELS or self.difficulty not in LEVELS:
            raise ValueError(f"impact_level/difficulty must be one of {LEVELS}")


@dataclass(frozen=True)
class TestDefinition:
    __test__ = False  # not a pytest class

    key: str
    name: str
    description: str
    meta: TestMeta
    variant_a: Variant
    variant_b: Variant


@dataclass(frozen=True)
class TestCategory:
    __test__ = False  # not a pytest class

    key: str
    name: str
    description: str
    tests: Dict[str, TestDefinition]


@dataclass(frozen=True)
class SimulationInput:
    variant_a: Variant
    variant_b: Variant
    segment: Segment
    traffic_split_percent: float = 50.0
    total_visitors: int = 1000
    seeded: bool = False
    seed: int = 42
    sample_size_needed: Optional[int] = None


@dataclass(frozen=True)
class VariantResult:
    name: str
    visitors: int
    conversions: int
    conversion_rate: float  # modeled rate, percent
    observed_rate: float    # conversions / visitors, percent
    revenue: float


@dataclass(frozen=True)
class Recommendation:
    text: str
    research_support: str = ""


@dataclass(frozen=True)
class SimulationOutput:
    variant_a: VariantResult
    variant_b: VariantResult
    winner: str
    improvement_percent: float
    confidence_percent: float
    revenue_lift_percent: float
    recommendation: Recommendation
    p_value: float = 1.0
    z_score: float = 0.0
    welch_df: float = 1.0
    power_percent: float = 0.0
    required_visitors_per_arm: float = float("nan")
    # B minus A revenue, projected over a day, a 30-day month and a year
    daily_revenue_delta: float = 0.0
    monthly_revenue_delta: float = 0.0
    annual_revenue_delta: float = 0.0

    @property
    def recommendation_text(self) -> str:
        return self.recommendation.text

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        rec = out.pop("recommendation")
        out["recommendation_text"] = rec["text"]
        out["research_support"] = rec["research_support"]
        return out
