"""
Scoring Engine Constants

Defines category weights, score ladders, chance bands and the fixed guidance
text attached to each category. All values are deterministic.
"""

from enum import Enum
from typing import Dict, List, Tuple

# =============================================================================
# CATEGORY WEIGHTS
# =============================================================================

class Category(str, Enum):
    """The six scoring categories, in reporting order."""
    COUNTRY_ASSESSMENT = "Country Assessment"
    ACADEMIC_ALIGNMENT = "Academic Alignment"
    STUDY_EXPERIENCE = "Study & Experience"
    ENGLISH_PROFICIENCY = "English Proficiency"
    FINANCIAL_CAPACITY = "Financial Capacity"
    VISA_COMPLIANCE = "Visa Compliance"


# Maximum points per category (must sum to 100)
CATEGORY_MAX_SCORES: Dict[Category, int] = {
    Category.COUNTRY_ASSESSMENT: 15,
    Category.ACADEMIC_ALIGNMENT: 20,
    Category.STUDY_EXPERIENCE: 25,
    Category.ENGLISH_PROFICIENCY: 20,
    Category.FINANCIAL_CAPACITY: 15,
    Category.VISA_COMPLIANCE: 5,
}

MAX_TOTAL_SCORE = 100
MIN_TOTAL_SCORE = 0

# =============================================================================
# ACADEMIC TRANSITION
# =============================================================================

ACADEMIC_BASE_SCORE = 15
PROGRESSION_BONUS = 5       # exactly one level up
DOWNGRADE_PENALTY = -5      # any step down

# =============================================================================
# STUDY & EXPERIENCE
# =============================================================================

RELATED_STUDY_POINTS = 15
WORK_POINTS_PER_YEAR = 2
WORK_POINTS_CAP = 10

# =============================================================================
# ENGLISH PROFICIENCY LADDERS
# =============================================================================

# (margin above requirement for 20, margin below requirement still worth 10)
ENGLISH_LADDER_MARGINS: Dict[str, Tuple[float, float]] = {
    "IELTS": (1.0, 0.5),
    "TOEFL": (10.0, 5.0),
    "PTE": (10.0, 5.0),
}

ENGLISH_EXCEEDS_SCORE = 20
ENGLISH_MEETS_SCORE = 15
ENGLISH_BORDERLINE_SCORE = 10
ENGLISH_BELOW_SCORE = 5
IELTS_TARGET_STEP = 0.5

# =============================================================================
# FINANCIAL CAPACITY & VISA COMPLIANCE
# =============================================================================

HEALTH_INSURANCE_POINTS = 5

# =============================================================================
# CHANCE BANDS
# =============================================================================

class ChanceBand(str, Enum):
    """Qualitative label derived from the total score."""
    HIGH = "High Chance"
    MODERATE = "Moderate Chance"
    LOW = "Low Chance"


# Minimum total score for each band, checked from highest to lowest
CHANCE_BAND_THRESHOLDS: List[Tuple[ChanceBand, int]] = [
    (ChanceBand.HIGH, 80),
    (ChanceBand.MODERATE, 60),
]

# =============================================================================
# EXPLANATIONS & IMPROVEMENT TIPS
# =============================================================================

CATEGORY_EXPLANATIONS: Dict[Category, str] = {
    Category.COUNTRY_ASSESSMENT: "Points based on country assessment level and education background",
    Category.ACADEMIC_ALIGNMENT: "Points based on academic progression and study pathway relevance",
    Category.STUDY_EXPERIENCE: "Points awarded for relevant academic and professional background",
    Category.ENGLISH_PROFICIENCY: "Points based on English language proficiency relative to course requirements",
    Category.FINANCIAL_CAPACITY: "Assessment of financial capacity to support study period",
    Category.VISA_COMPLIANCE: "Points for meeting visa requirements and compliance history",
}

IMPROVEMENT_TIPS: Dict[Category, List[str]] = {
    Category.COUNTRY_ASSESSMENT: [
        "Provide complete documentation of academic history",
        "Include certified translations of all documents",
        "Submit detailed explanation of study gaps (if any)",
    ],
    Category.ACADEMIC_ALIGNMENT: [
        "Demonstrate clear academic progression",
        "Provide detailed study plan",
        "Include statement of purpose explaining course selection",
    ],
    Category.STUDY_EXPERIENCE: [
        "Document all relevant work experience",
        "Include professional certifications",
        "Provide detailed job descriptions for relevant roles",
    ],
    Category.ENGLISH_PROFICIENCY: [
        "Consider English preparation courses",
        "Practice academic writing and speaking",
    ],
    Category.FINANCIAL_CAPACITY: [
        "Provide evidence of liquid assets",
        "Include sponsor documentation if applicable",
        "Show additional financial security",
    ],
    Category.VISA_COMPLIANCE: [
        "Obtain OSHC coverage for full study period",
        "Ensure coverage meets minimum requirements",
    ],
}

FINANCIAL_REQUIREMENT_NOTE = "Required: 12 months of living costs + full tuition"

# =============================================================================
# DEFAULT VALUES
# =============================================================================

CURRENCY = "AUD"
NATIVE_TEST_SCORE = "NATIVE"

# Reported on every EligibilityReport unless configured otherwise
DEFAULT_ENGINE_VERSION = "1.0.0"
