"""Recommendations derived from the score breakdown alone."""

from visibility.analyzer.models import ScoreBreakdown

# (breakdown field, threshold, recommendation) - fires when score < threshold
RECOMMENDATION_RULES: tuple[tuple[str, int, str], ...] = (
    (
        "answer_front_loading",
        70,
        "Front-load your answers: AI models prioritize content in the first 20% of a section",
    ),
    (
        "fact_density",
        60,
        "Add more data: Include specific numbers, dates, and statistics to improve citability",
    ),
    (
        "heading_structure",
        80,
        "Fix heading hierarchy: Use H1 → H2 → H3 consistently for better content parsing",
    ),
    (
        "eeat_signals",
        60,
        "Boost E-E-A-T: Add author credentials, company info, and trust signals",
    ),
    (
        "snippability",
        70,
        "Improve snippability: Each section should be self-contained and informative",
    ),
    (
        "schema_coverage",
        50,
        "Add structured data: Use SchemaBuilder to add JSON-LD markup for AI understanding",
    ),
)

WELL_OPTIMIZED = "Great job! Your content is well-optimized for AI visibility"


def generate_recommendations(breakdown: ScoreBreakdown) -> list[str]:
    recommendations = [
        text
        for name, threshold, text in RECOMMENDATION_RULES
        if getattr(breakdown, name) < threshold
    ]
    return recommendations or [WELL_OPTIMIZED]
