"""
Academic Transition

Compares the applicant's current level with the intended program level.
This is the only place level-to-level comparison lives.
"""

from typing import Optional

from .constants import PROGRESSION_BONUS, DOWNGRADE_PENALTY
from .reference_data import program_requirements


def transition_delta(current_level: Optional[str], intended_level: Optional[str]) -> int:
    """
    Bonus or penalty for moving from current_level to intended_level.

    - Either level unknown: 0
    - Any step down: DOWNGRADE_PENALTY
    - Exactly one step up: PROGRESSION_BONUS
    - Same level or a jump of two or more: 0
    """
    current = program_requirements(current_level)
    intended = program_requirements(intended_level)

    if current is None or intended is None:
        return 0

    if intended.rank < current.rank:
        return DOWNGRADE_PENALTY

    if intended.rank == current.rank + 1:
        return PROGRESSION_BONUS

    return 0


def progression_label(delta: int) -> str:
    """Positive / Negative / Neutral by the sign of a transition delta."""
    if delta > 0:
        return "Positive"
    if delta < 0:
        return "Negative"
    return "Neutral"
