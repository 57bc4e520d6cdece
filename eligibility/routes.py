"""
Eligibility API Routes

Exposes the eligibility engine via REST API.
Scoring endpoint: POST /eligibility
"""

import logging
from typing import Dict, Any
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from config import ENGINE_VERSION
from .logic.contracts import ApplicantRecord
from .logic.engine import EligibilityEngine
from .logic.classifier import band_thresholds
from .logic.output_assembler import summarize_report
from .logic.reference_data import (
    country_info,
    document_requirements,
    financial_requirements,
    list_countries,
    list_program_levels,
    list_study_fields,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eligibility", tags=["eligibility"])

engine = EligibilityEngine(version=ENGINE_VERSION)


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class EligibilityRequest(BaseModel):
    """Request body for eligibility endpoint."""
    applicant: Dict[str, Any] = Field(
        ...,
        description="Completed questionnaire answers",
        json_schema_extra={
            "example": {
                "age": 24,
                "country_of_origin": "US",
                "education_level": "BACHELORS",
                "intended_study": "MASTERS",
                "selected_field": "IT",
                "has_related_study": True,
                "prior_study_details": "BSc Computer Science",
                "has_work_experience": True,
                "work_experience_years": 3,
                "english_proficiency": "IELTS",
                "english_test_score": "7.0",
                "previous_visa": "NO_VISA",
                "health_insurance": True,
                "financial_status": "SUFFICIENT",
            }
        },
    )
    format: str = Field(
        default="full",
        description="Response format: 'full' (complete report) or 'simple' (score summary)"
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Assess study visa eligibility")
@router.post("/", summary="Assess study visa eligibility", include_in_schema=False)
def assess_eligibility(request: EligibilityRequest):
    """
    Score a completed questionnaire.

    **Request Body:**
    - `applicant`: Questionnaire answers
    - `format`: Response format - 'full' or 'simple'

    **Response:**
    - Total score out of 100 with a chance band
    - Six category scores with notes and improvement tips
    - Financial requirements and document checklist for the country of origin
    """
    try:
        # Parse applicant
        try:
            applicant = ApplicantRecord(**request.applicant)
        except ValidationError as e:
            logger.info(f"Rejected applicant: {e.error_count()} validation error(s)")
            raise HTTPException(
                status_code=400,
                detail=f"Invalid applicant: {str(e)}"
            )

        report = engine.evaluate(applicant)

        if request.format == "simple":
            return summarize_report(report)
        return report.model_dump(mode="json")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Eligibility assessment failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.get("/reference/countries", summary="List supported countries")
def get_countries():
    """Countries sorted by name with assessment level and risk score."""
    return [c.model_dump() for c in list_countries()]


@router.get("/reference/countries/{code}/documents", summary="Documents for a country")
def get_country_documents(code: str):
    """Document checklist and financial requirements for a country of origin."""
    info = country_info(code)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown country code: {code}")
    return {
        "country": info.model_dump(),
        "documents": document_requirements(code),
        "financial_requirements": financial_requirements(code).model_dump(),
    }


@router.get("/reference/levels", summary="List program levels")
def get_program_levels():
    """Program levels in rank order with English thresholds."""
    return [p.model_dump() for p in list_program_levels()]


@router.get("/reference/fields", summary="List study fields")
def get_study_fields():
    """Study fields offered in the questionnaire."""
    return [f.model_dump() for f in list_study_fields()]


@router.get("/reference/bands", summary="Chance band thresholds")
def get_chance_bands():
    """Minimum total score for each chance band."""
    return band_thresholds()


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Eligibility engine health check")
def health_check():
    """Check if eligibility engine is operational."""
    return {"status": "ok", "engine": "eligibility", "version": engine.version}
