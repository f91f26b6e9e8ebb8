"""Confidence tiers derived from a compatibility score.

The thresholds are persisted alongside every matrix entry, so they must not
change without migrating existing records.
"""

HIGH_CONFIDENCE = 95
MEDIUM_CONFIDENCE = 75
LOW_CONFIDENCE = 50


def confidence_for(score: int) -> int:
    """Map a 0-100 score onto the 95 / 75 / 50 confidence ladder."""
    if score > 80:
        return HIGH_CONFIDENCE
    if score > 60:
        return MEDIUM_CONFIDENCE
    return LOW_CONFIDENCE
