"""Risk tier classification for AI impact scores.

Every consumer that turns an impact score into a tier (gauge color and label,
explorer filter, explanation and recommendation text) goes through
:func:`risk_tier`, so the 30/70 thresholds live in exactly one place.
"""

LOW_THRESHOLD = 30
HIGH_THRESHOLD = 70

TIERS = ("low", "medium", "high")

TIER_COLORS = {
    "low": "#4CAF50",
    "medium": "#FFC107",
    "high": "#E76F6F",
}

TIER_LABELS = {
    "low": "Low Risk",
    "medium": "Medium Risk",
    "high": "High Risk",
}

EXPLANATIONS = {
    "low": (
        "Low automation risk. This role requires human skills like creativity, empathy, "
        "or complex problem-solving that AI cannot easily replicate."
    ),
    "medium": (
        "Moderate automation risk. While some tasks may be automated, this role involves "
        "skills and responsibilities that still require human judgment and intervention."
    ),
    "high": (
        "High automation risk. Many tasks in this role could be automated by AI systems "
        "in the coming years, potentially reducing demand for this position."
    ),
}

KEY_FACTORS = {
    "low": [
        "Requires high emotional intelligence or creativity",
        "Complex problem-solving in unpredictable environments",
        "Human connection is central to the role",
    ],
    "medium": [
        "Mix of routine and non-routine tasks",
        "Some aspects require human judgment",
        "AI will augment rather than replace",
    ],
    "high": [
        "Tasks involve routine, predictable processes",
        "Data-intensive work that can be automated",
        "Limited need for creative or emotional intelligence",
    ],
}

RECOMMENDATIONS = {
    "low": (
        "Continue developing expertise in your field, while also learning to work alongside "
        "AI tools that can enhance your productivity."
    ),
    "medium": (
        "Focus on developing skills that complement AI capabilities, such as complex "
        "problem-solving and interpersonal communication."
    ),
    "high": (
        "Consider upskilling in complementary areas or transitioning to roles that require "
        "more human judgment and creativity."
    ),
}


def risk_tier(impact: float) -> str:
    """Classify an impact score: low < 30 <= medium < 70 <= high.

    NaN fails both comparisons and lands in "high".
    """
    if impact < LOW_THRESHOLD:
        return "low"
    if impact < HIGH_THRESHOLD:
        return "medium"
    return "high"


def risk_color(impact: float) -> str:
    return TIER_COLORS[risk_tier(impact)]


def risk_label(impact: float) -> str:
    return TIER_LABELS[risk_tier(impact)]


def explanation(impact: float) -> str:
    return EXPLANATIONS[risk_tier(impact)]


def key_factors(impact: float) -> list[str]:
    return list(KEY_FACTORS[risk_tier(impact)])


def recommendation(impact: float) -> str:
    return RECOMMENDATIONS[risk_tier(impact)]


def matches_tier(impact: float, tier: str) -> bool:
    """Tier filter used by the job explorer; ``"all"`` matches everything."""
    if tier == "all":
        return True
    if tier not in TIERS:
        raise ValueError(f"Unknown risk tier: {tier!r}")
    return risk_tier(impact) == tier
