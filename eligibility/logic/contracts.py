"""
Data Contracts for the Eligibility Scoring Engine

Defines Pydantic models for ApplicantRecord (input), ScoringOutcome and
EligibilityReport (output), and the reference data records.
These contracts are the API boundary for the scoring engine.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from enum import Enum

from .constants import ChanceBand, CURRENCY, DEFAULT_ENGINE_VERSION


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class EnglishProficiency(str, Enum):
    """How the applicant evidences English ability."""
    NATIVE = "NATIVE"
    IELTS = "IELTS"
    TOEFL = "TOEFL"
    PTE = "PTE"


class FinancialStatus(str, Enum):
    """How the applicant intends to fund the study period."""
    SUFFICIENT = "SUFFICIENT"
    SCHOLARSHIP = "SCHOLARSHIP"
    LOAN = "LOAN"
    PARTIAL = "PARTIAL"

    @classmethod
    def _missing_(cls, value):
        # Stored status strings are compared case-insensitively
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


class PreviousVisa(str, Enum):
    """Applicant's prior Australian visa history."""
    NO_VISA = "NO_VISA"
    STUDENT_VISA = "STUDENT_VISA"
    TOURIST_VISA = "TOURIST_VISA"
    WORKING_VISA = "WORKING_VISA"
    VISA_REFUSED = "VISA_REFUSED"


class ApplicantRecord(BaseModel):
    """
    Input contract for the scoring engine.
    A completed questionnaire snapshot; never mutated after construction.
    """
    # Personal
    age: int = Field(ge=15, le=99)
    country_of_origin: str

    # Academic Background
    education_level: str   # current level, e.g. BACHELORS
    intended_study: str    # target program level, e.g. MASTERS
    selected_field: str    # study field key, e.g. IT
    has_related_study: bool = False
    prior_study_details: str = ""

    # Work Experience
    has_work_experience: bool = False
    work_experience_years: int = Field(default=0, ge=0)

    # English
    english_proficiency: EnglishProficiency
    english_test_score: str = ""  # "NATIVE" when proficiency is NATIVE

    # Visa & Finances
    previous_visa: Optional[PreviousVisa] = None
    health_insurance: bool = False
    financial_status: FinancialStatus

    class Config:
        frozen = True

    @field_validator("previous_visa", mode="before")
    @classmethod
    def _blank_visa_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("financial_status", mode="before")
    @classmethod
    def _normalize_financial_status(cls, value):
        if isinstance(value, str):
            return FinancialStatus(value)
        return value


# =============================================================================
# REFERENCE DATA RECORDS
# =============================================================================

class CountryInfo(BaseModel):
    """Assessment profile for a country of origin."""
    code: str
    name: str
    assessment_level: int = Field(ge=1, le=3)
    risk_score: int = Field(ge=0)


class FinancialRequirements(BaseModel):
    """Funds an applicant must evidence, in AUD."""
    base_amount: int
    additional_funds: int  # annual living cost
    currency: str = CURRENCY


class ProgramRequirements(BaseModel):
    """Entry requirements for a program level."""
    key: str
    name: str
    rank: int
    required_ielts: float
    required_toefl: float
    required_pte: float
    financial_requirement: int
    required_score: int


class StudyFieldInfo(BaseModel):
    """A field of study offered to applicants."""
    key: str
    name: str
    description: str
    priority_level: int = Field(ge=1, le=3)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class CategoryResult(BaseModel):
    """Score for one category with its rationale."""
    category: str
    score: int = Field(ge=0)
    max_score: int = Field(ge=0)
    notes: List[str] = Field(default_factory=list)
    explanation: str = ""
    improvement: Optional[List[str]] = None


class ScoringOutcome(BaseModel):
    """Total score and the six category results, in fixed order."""
    score: int = Field(ge=0, le=100)
    details: List[CategoryResult] = Field(default_factory=list)


class ProgramRequirementStatus(BaseModel):
    """Whether the total reaches the score expected for the intended program."""
    program_name: str
    required_score: int
    met: bool


class EligibilityReport(BaseModel):
    """
    Output contract for the presentation layer.
    Wraps the scoring outcome with values derived from it or from the applicant.
    """
    outcome: ScoringOutcome
    chance_band: ChanceBand
    financial_requirements: FinancialRequirements
    program_requirement: Optional[ProgramRequirementStatus] = None
    document_requirements: List[str] = Field(default_factory=list)
    study_field: Optional[StudyFieldInfo] = None
    engine_version: str = DEFAULT_ENGINE_VERSION
