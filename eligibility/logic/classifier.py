"""
Classifier

Classifies a total score into a chance band:
- High Chance
- Moderate Chance
- Low Chance
"""

from typing import Dict

from .constants import ChanceBand, CHANCE_BAND_THRESHOLDS


def classify_score(score: int) -> ChanceBand:
    """
    Classify a total score into a chance band.

    Args:
        score: Total score (0-100)

    Returns:
        ChanceBand enum value
    """
    # Check thresholds from highest to lowest
    for band, minimum in CHANCE_BAND_THRESHOLDS:
        if score >= minimum:
            return band

    return ChanceBand.LOW


def band_thresholds() -> Dict[str, int]:
    """Minimum score per band, for display."""
    thresholds = {band.value: minimum for band, minimum in CHANCE_BAND_THRESHOLDS}
    thresholds[ChanceBand.LOW.value] = 0
    return thresholds
