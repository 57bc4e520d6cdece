"""
Eligibility Logic Module

Provides the deterministic scoring engine for study visa eligibility.
"""

from .contracts import (
    ApplicantRecord,
    CategoryResult,
    ScoringOutcome,
    EligibilityReport,
    EnglishProficiency,
    FinancialStatus,
    PreviousVisa,
)
from .engine import EligibilityEngine, assess
from .constants import Category, ChanceBand
from .classifier import classify_score
from .transition import transition_delta

__all__ = [
    # Main engine
    "EligibilityEngine",
    "assess",
    "transition_delta",
    "classify_score",

    # Contracts
    "ApplicantRecord",
    "CategoryResult",
    "ScoringOutcome",
    "EligibilityReport",

    # Enums
    "EnglishProficiency",
    "FinancialStatus",
    "PreviousVisa",
    "Category",
    "ChanceBand",
]
