"""
Eligibility Engine

Main orchestrator that runs the six category scorers and combines them.
This is the primary entry point for scoring an applicant.
"""

import logging
from typing import Any, Dict, List

from .contracts import ApplicantRecord, CategoryResult, ScoringOutcome, EligibilityReport
from .category_scorers import CATEGORY_SCORERS
from .constants import DEFAULT_ENGINE_VERSION, MAX_TOTAL_SCORE, MIN_TOTAL_SCORE
from .output_assembler import assemble_report

logger = logging.getLogger(__name__)


class EligibilityEngine:
    """
    Stateless eligibility engine.

    Pipeline flow:
    1. Category Scoring - Score each category independently
    2. Aggregation - Sum and clamp into a 0-100 total
    3. Output Assembly - Attach chance band and reference values
    """

    def __init__(self, version: str = DEFAULT_ENGINE_VERSION):
        self.version = version

    def assess(self, applicant: ApplicantRecord) -> ScoringOutcome:
        """
        Score an applicant.

        Args:
            applicant: Completed questionnaire snapshot

        Returns:
            ScoringOutcome with the total and six category results
        """
        details: List[CategoryResult] = []

        for scorer in CATEGORY_SCORERS:
            result = scorer(applicant)
            logger.debug(f"{result.category}: {result.score}/{result.max_score}")
            details.append(result)

        total = sum(result.score for result in details)
        total = max(MIN_TOTAL_SCORE, min(MAX_TOTAL_SCORE, total))

        logger.info(
            f"📊 Eligibility assessed: {total}/{MAX_TOTAL_SCORE} "
            f"(country={applicant.country_of_origin}, intended={applicant.intended_study})"
        )

        return ScoringOutcome(score=total, details=details)

    def evaluate(self, applicant: ApplicantRecord) -> EligibilityReport:
        """
        Score an applicant and assemble the full report.

        Args:
            applicant: Completed questionnaire snapshot

        Returns:
            EligibilityReport with outcome, chance band and requirements
        """
        outcome = self.assess(applicant)
        return assemble_report(applicant, outcome, engine_version=self.version)

    def evaluate_from_dict(self, applicant_data: Dict[str, Any]) -> EligibilityReport:
        """
        Score an applicant given as a dictionary.

        Convenience method for API integration.

        Args:
            applicant_data: Dictionary matching ApplicantRecord fields

        Returns:
            EligibilityReport
        """
        applicant = ApplicantRecord(**applicant_data)
        return self.evaluate(applicant)


# Convenience function for simple usage
def assess(applicant: ApplicantRecord) -> ScoringOutcome:
    """
    Score an applicant with a default engine.

    Args:
        applicant: Completed questionnaire snapshot

    Returns:
        ScoringOutcome
    """
    return EligibilityEngine().assess(applicant)
