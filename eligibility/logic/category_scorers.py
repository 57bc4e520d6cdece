"""
Category Scorers

Individual scoring functions for each eligibility category.
Each scorer reads only the applicant and the reference tables and returns a
CategoryResult bounded by the category's maximum. No scorer sees another's
output.
"""

import re
from typing import Callable, Dict, List, Optional

from .contracts import (
    ApplicantRecord,
    CategoryResult,
    EnglishProficiency,
    FinancialStatus,
    ProgramRequirements,
)
from .constants import (
    Category,
    CATEGORY_MAX_SCORES,
    CATEGORY_EXPLANATIONS,
    IMPROVEMENT_TIPS,
    ACADEMIC_BASE_SCORE,
    RELATED_STUDY_POINTS,
    WORK_POINTS_PER_YEAR,
    WORK_POINTS_CAP,
    ENGLISH_LADDER_MARGINS,
    ENGLISH_EXCEEDS_SCORE,
    ENGLISH_MEETS_SCORE,
    ENGLISH_BORDERLINE_SCORE,
    ENGLISH_BELOW_SCORE,
    IELTS_TARGET_STEP,
    FINANCIAL_REQUIREMENT_NOTE,
    HEALTH_INSURANCE_POINTS,
)
from .reference_data import country_info, program_requirements, study_field_info
from .transition import transition_delta, progression_label


def score_country_assessment(applicant: ApplicantRecord) -> CategoryResult:
    """
    Score the country of origin by its risk score, capped at the category max.
    """
    category = Category.COUNTRY_ASSESSMENT
    info = country_info(applicant.country_of_origin)

    score = min(info.risk_score, CATEGORY_MAX_SCORES[category]) if info else 0

    if info:
        notes = [
            f"Country: {info.name}",
            f"Assessment Level: {info.assessment_level}",
        ]
    else:
        notes = [f"Country assessment data unavailable for '{applicant.country_of_origin}'"]
    notes.append(f"Current Education: {_level_name(applicant.education_level)}")

    return _build_result(category, score, notes)


def score_academic_alignment(applicant: ApplicantRecord) -> CategoryResult:
    """
    Score the step from current education to the intended program.

    A neutral move scores the base, one step up earns the bonus,
    any downgrade takes the penalty.
    """
    category = Category.ACADEMIC_ALIGNMENT
    delta = transition_delta(applicant.education_level, applicant.intended_study)
    score = max(0, ACADEMIC_BASE_SCORE + delta)

    notes = [
        f"Current Level: {_level_name(applicant.education_level)}",
        f"Intended Level: {_level_name(applicant.intended_study)}",
        f"Academic Progression: {progression_label(delta)}",
        "Has relevant prior study" if applicant.has_related_study else "No related prior study",
    ]

    return _build_result(category, score, notes)


def score_study_experience(applicant: ApplicantRecord) -> CategoryResult:
    """
    Score related prior study and work experience.

    Both components are capped individually, so the sum never exceeds 25.
    """
    category = Category.STUDY_EXPERIENCE

    study_points = RELATED_STUDY_POINTS if applicant.has_related_study else 0
    work_points = _work_experience_points(applicant)
    score = study_points + work_points

    field = study_field_info(applicant.selected_field)
    field_name = field.name if field else applicant.selected_field

    if applicant.has_related_study:
        details = applicant.prior_study_details.strip() or "Related study"
        prior_note = f"Prior Study: {details} (+{study_points} points)"
    else:
        prior_note = "Prior Study: None"

    if applicant.has_work_experience:
        work_note = f"Work Experience: {applicant.work_experience_years} years (+{work_points} points)"
    else:
        work_note = "Work Experience: None"

    notes = [f"Selected Field: {field_name}", prior_note, work_note]

    return _build_result(category, score, notes)


def score_english_proficiency(applicant: ApplicantRecord) -> CategoryResult:
    """
    Score English ability against the intended program's threshold.

    Native speakers score full marks. Test takers are placed on a
    four-tier ladder around the threshold for their test type.
    """
    category = Category.ENGLISH_PROFICIENCY
    proficiency = applicant.english_proficiency
    program = program_requirements(applicant.intended_study)

    notes = [
        f"Test Type: {proficiency.value}",
        f"Score: {applicant.english_test_score}",
    ]

    if proficiency is EnglishProficiency.NATIVE:
        score = ENGLISH_EXCEEDS_SCORE
        notes.append("Required Level: Not applicable for native speakers")
    else:
        numeric = _parse_test_score(applicant.english_test_score)
        if numeric is None:
            score = 0
            notes.append("Test score could not be read as a number")
        elif program is None:
            score = 0
            notes.append(f"Required Level: Program data unavailable for '{applicant.intended_study}'")
        else:
            required = _required_threshold(proficiency, program)
            score = _english_ladder(proficiency, numeric, required)
            notes.append(f"Required Level: {proficiency.value} {_format_threshold(proficiency, required)}")

    notes.append(f"Status: {_english_status(score)} requirements")

    improvement = None
    if score < CATEGORY_MAX_SCORES[category]:
        improvement = list(IMPROVEMENT_TIPS[category])
        if program is not None:
            target = program.required_ielts + IELTS_TARGET_STEP
            improvement.insert(0, f"Aim for IELTS {target:.1f} or equivalent")

    return _build_result(category, score, notes, improvement=improvement)


FINANCIAL_STATUS_POINTS: Dict[FinancialStatus, int] = {
    FinancialStatus.SUFFICIENT: 15,
    FinancialStatus.SCHOLARSHIP: 15,
    FinancialStatus.LOAN: 10,
    FinancialStatus.PARTIAL: 5,
}


def score_financial_capacity(applicant: ApplicantRecord) -> CategoryResult:
    """Score the declared funding source."""
    category = Category.FINANCIAL_CAPACITY
    status = applicant.financial_status
    score = FINANCIAL_STATUS_POINTS.get(status, 0)

    notes = [
        f"Status: {status.value}",
        f"Score Impact: +{score} points",
        FINANCIAL_REQUIREMENT_NOTE,
    ]

    return _build_result(category, score, notes)


def score_visa_compliance(applicant: ApplicantRecord) -> CategoryResult:
    """
    Score health cover. Previous visa history is reported but not scored.
    """
    category = Category.VISA_COMPLIANCE
    score = HEALTH_INSURANCE_POINTS if applicant.health_insurance else 0

    visa_history = applicant.previous_visa.value if applicant.previous_visa else "None"
    notes = [
        f"Health Insurance: Yes (+{score} points)" if applicant.health_insurance else "Health Insurance: No",
        f"Previous Visa History: {visa_history}",
    ]

    return _build_result(category, score, notes)


# Fixed reporting order
CATEGORY_SCORERS: List[Callable[[ApplicantRecord], CategoryResult]] = [
    score_country_assessment,
    score_academic_alignment,
    score_study_experience,
    score_english_proficiency,
    score_financial_capacity,
    score_visa_compliance,
]


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _build_result(
    category: Category,
    score: int,
    notes: List[str],
    improvement: Optional[List[str]] = None,
) -> CategoryResult:
    """Attach max score, explanation and tips (only when below max)."""
    max_score = CATEGORY_MAX_SCORES[category]
    score = max(0, min(score, max_score))

    if score < max_score:
        tips = improvement if improvement is not None else list(IMPROVEMENT_TIPS[category])
    else:
        tips = None

    return CategoryResult(
        category=category.value,
        score=score,
        max_score=max_score,
        notes=notes,
        explanation=CATEGORY_EXPLANATIONS[category],
        improvement=tips,
    )


def _level_name(level_key: str) -> str:
    """Canonical level name, or the raw key when unknown."""
    program = program_requirements(level_key)
    return program.name if program else level_key


def _work_experience_points(applicant: ApplicantRecord) -> int:
    if not applicant.has_work_experience:
        return 0
    return min(applicant.work_experience_years * WORK_POINTS_PER_YEAR, WORK_POINTS_CAP)


_DECIMAL_PATTERN = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)\s*")


def _parse_test_score(raw_score: str) -> Optional[float]:
    """Parse a plain decimal test score; None for anything else."""
    if not isinstance(raw_score, str) or not _DECIMAL_PATTERN.fullmatch(raw_score):
        return None
    return float(raw_score)


_THRESHOLD_FIELDS: Dict[EnglishProficiency, str] = {
    EnglishProficiency.IELTS: "required_ielts",
    EnglishProficiency.TOEFL: "required_toefl",
    EnglishProficiency.PTE: "required_pte",
}


def _required_threshold(proficiency: EnglishProficiency, program: ProgramRequirements) -> float:
    return getattr(program, _THRESHOLD_FIELDS[proficiency])


def _english_ladder(proficiency: EnglishProficiency, score: float, required: float) -> int:
    exceeds_margin, borderline_margin = ENGLISH_LADDER_MARGINS[proficiency.value]
    if score >= required + exceeds_margin:
        return ENGLISH_EXCEEDS_SCORE
    if score >= required:
        return ENGLISH_MEETS_SCORE
    if score >= required - borderline_margin:
        return ENGLISH_BORDERLINE_SCORE
    return ENGLISH_BELOW_SCORE


def _format_threshold(proficiency: EnglishProficiency, required: float) -> str:
    if proficiency is EnglishProficiency.IELTS:
        return f"{required:.1f}"
    return f"{required:.0f}"


def _english_status(score: int) -> str:
    if score == ENGLISH_EXCEEDS_SCORE:
        return "Exceeds"
    if score >= ENGLISH_MEETS_SCORE:
        return "Meets"
    return "Below"
