"""Assorted utility helpers."""
from homequote.presets import CREDIT_SCORE_TIERS


def credit_score_to_tier(score):
    """Map a numeric credit score to the pre-qualification credit tiers."""
    try:
        s = float(score)
    except (TypeError, ValueError):
        return "good"
    for cutoff, tier in CREDIT_SCORE_TIERS:
        if s >= cutoff:
            return tier
    return "poor"


def fmt_currency(value, cents=False):
    """Format a dollar amount for captions and metrics."""
    if cents:
        return f"${value:,.2f}"
    return f"${value:,.0f}"
