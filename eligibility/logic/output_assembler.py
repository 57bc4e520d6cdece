"""
Output Assembler

Transforms a ScoringOutcome into the final EligibilityReport contract.
Adds the values the presentation layer shows next to the score: chance band,
financial requirements, program requirement and document checklist.
"""

from typing import Any, Dict, Optional

from .contracts import (
    ApplicantRecord,
    ScoringOutcome,
    EligibilityReport,
    ProgramRequirementStatus,
)
from .classifier import classify_score
from .constants import DEFAULT_ENGINE_VERSION
from .reference_data import (
    financial_requirements,
    document_requirements,
    program_requirements,
    study_field_info,
)


def assemble_report(
    applicant: ApplicantRecord,
    outcome: ScoringOutcome,
    engine_version: str = DEFAULT_ENGINE_VERSION,
) -> EligibilityReport:
    """
    Convert a ScoringOutcome into an EligibilityReport.

    Args:
        applicant: The record that was scored
        outcome: The engine's scoring outcome
        engine_version: Version string stamped on the report

    Returns:
        EligibilityReport object
    """
    return EligibilityReport(
        outcome=outcome,
        chance_band=classify_score(outcome.score),
        # Depends only on country, never on the score
        financial_requirements=financial_requirements(applicant.country_of_origin),
        program_requirement=_program_requirement(applicant, outcome.score),
        document_requirements=document_requirements(applicant.country_of_origin),
        study_field=study_field_info(applicant.selected_field),
        engine_version=engine_version,
    )


def summarize_report(report: EligibilityReport) -> Dict[str, Any]:
    """Simplified output format for easier consumption."""
    return {
        "score": report.outcome.score,
        "chance_band": report.chance_band.value,
        "categories": {
            detail.category: f"{detail.score}/{detail.max_score}"
            for detail in report.outcome.details
        },
    }


def _program_requirement(
    applicant: ApplicantRecord,
    total_score: int,
) -> Optional[ProgramRequirementStatus]:
    """Compare the total with the score expected for the intended program."""
    program = program_requirements(applicant.intended_study)
    if program is None:
        return None
    return ProgramRequirementStatus(
        program_name=program.name,
        required_score=program.required_score,
        met=total_score >= program.required_score,
    )
