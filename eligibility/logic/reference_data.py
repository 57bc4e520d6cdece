"""
Reference Data Tables

Static lookups for countries, program levels and study fields.
Tables are module-level and read-only; query functions return fresh
contract objects so callers cannot alter the shared rows.

This is a pure READ layer:
- NO scoring logic
- NO DB access
"""

from typing import Dict, List, Optional, Tuple

from .contracts import (
    CountryInfo,
    FinancialRequirements,
    ProgramRequirements,
    StudyFieldInfo,
)


# =============================================================================
# COUNTRIES
# =============================================================================

# code -> (name, assessment level, risk score)
COUNTRY_ASSESSMENT_LEVELS: Dict[str, Tuple[str, int, int]] = {
    # Level 1 - streamlined evidence
    "GB": ("United Kingdom", 1, 15),
    "CA": ("Canada", 1, 15),
    "NZ": ("New Zealand", 1, 15),
    "IE": ("Ireland", 1, 15),
    "JP": ("Japan", 1, 15),
    "SG": ("Singapore", 1, 15),
    "DE": ("Germany", 1, 15),
    "FR": ("France", 1, 15),
    "NL": ("Netherlands", 1, 15),
    "SE": ("Sweden", 1, 15),
    "CH": ("Switzerland", 1, 15),
    "KR": ("South Korea", 1, 12),
    "IT": ("Italy", 1, 12),
    "US": ("United States", 1, 10),
    # Level 2 - standard evidence
    "CN": ("China", 2, 10),
    "MY": ("Malaysia", 2, 10),
    "CL": ("Chile", 2, 10),
    "TH": ("Thailand", 2, 8),
    "BR": ("Brazil", 2, 8),
    "CO": ("Colombia", 2, 8),
    "PH": ("Philippines", 2, 8),
    "ID": ("Indonesia", 2, 8),
    "MX": ("Mexico", 2, 8),
    "VN": ("Vietnam", 2, 7),
    # Level 3 - enhanced evidence
    "IN": ("India", 3, 5),
    "LK": ("Sri Lanka", 3, 5),
    "KE": ("Kenya", 3, 5),
    "NP": ("Nepal", 3, 4),
    "PK": ("Pakistan", 3, 4),
    "BD": ("Bangladesh", 3, 4),
    "GH": ("Ghana", 3, 4),
    "NG": ("Nigeria", 3, 3),
}

# assessment level -> (base funds, annual living cost) in AUD
FINANCIAL_REQUIREMENTS_BY_LEVEL: Dict[int, Tuple[int, int]] = {
    1: (21041, 24505),
    2: (25000, 24505),
    3: (30000, 29710),
}

# Unknown countries are treated as the strictest level
DEFAULT_ASSESSMENT_LEVEL = 3

BASE_DOCUMENTS: List[str] = [
    "Valid passport",
    "Confirmation of Enrolment (CoE)",
    "Genuine Student statement",
    "Overseas Student Health Cover (OSHC) policy",
]

ADDITIONAL_DOCUMENTS_BY_LEVEL: Dict[int, List[str]] = {
    1: [],
    2: [
        "Evidence of English proficiency",
        "Bank statements covering the last 3 months",
    ],
    3: [
        "Evidence of English proficiency",
        "Bank statements covering the last 6 months",
        "Certified academic transcripts with verification",
        "Police clearance certificate",
    ],
}


# =============================================================================
# PROGRAM LEVELS
# =============================================================================

ACADEMIC_LEVELS: Dict[str, Dict] = {
    "CERTIFICATE": {
        "rank": 1,
        "name": "Certificate",
        "required_ielts": 5.5,
        "required_toefl": 46,
        "required_pte": 42,
        "financial_requirement": 15000,
        "required_score": 50,
    },
    "DIPLOMA": {
        "rank": 2,
        "name": "Diploma",
        "required_ielts": 5.5,
        "required_toefl": 46,
        "required_pte": 42,
        "financial_requirement": 15000,
        "required_score": 55,
    },
    "BACHELORS": {
        "rank": 3,
        "name": "Bachelor Degree",
        "required_ielts": 6.0,
        "required_toefl": 60,
        "required_pte": 50,
        "financial_requirement": 20000,
        "required_score": 60,
    },
    "MASTERS": {
        "rank": 4,
        "name": "Masters Degree",
        "required_ielts": 6.5,
        "required_toefl": 79,
        "required_pte": 58,
        "financial_requirement": 25000,
        "required_score": 65,
    },
    "PHD": {
        "rank": 5,
        "name": "Doctorate",
        "required_ielts": 6.5,
        "required_toefl": 79,
        "required_pte": 58,
        "financial_requirement": 25000,
        "required_score": 70,
    },
}

# Alternate spellings accepted for level keys
LEVEL_ALIASES: Dict[str, str] = {
    "BACHELOR": "BACHELORS",
    "MASTER": "MASTERS",
    "DOCTORATE": "PHD",
}


# =============================================================================
# STUDY FIELDS
# =============================================================================

# key -> (name, description, priority level)
STUDY_FIELDS: Dict[str, Tuple[str, str, int]] = {
    "IT": (
        "Information Technology",
        "Software development, data science, cybersecurity and networking",
        3,
    ),
    "ENGINEERING": (
        "Engineering",
        "Civil, mechanical, electrical and chemical engineering",
        3,
    ),
    "HEALTH": (
        "Health & Medicine",
        "Nursing, medicine, allied health and public health",
        3,
    ),
    "EDUCATION": (
        "Education",
        "Early childhood, primary and secondary teaching",
        2,
    ),
    "SCIENCE": (
        "Natural Sciences",
        "Physics, chemistry, biology and environmental science",
        2,
    ),
    "AGRICULTURE": (
        "Agriculture",
        "Agricultural science, agribusiness and food technology",
        2,
    ),
    "BUSINESS": (
        "Business & Management",
        "Accounting, finance, marketing and management",
        1,
    ),
    "HOSPITALITY": (
        "Hospitality & Tourism",
        "Hotel management, tourism and event management",
        1,
    ),
    "ARTS": (
        "Arts & Humanities",
        "Design, languages, history and social sciences",
        1,
    ),
    "LAW": (
        "Law",
        "Legal studies, international law and criminology",
        1,
    ),
}


# =============================================================================
# QUERIES
# =============================================================================

def normalize_level_key(raw_level: Optional[str]) -> str:
    """
    Normalize a level label to a canonical ACADEMIC_LEVELS key.

    Returns the cleaned key even when it is not in the table, so callers
    can still show it back to the user.
    """
    if not raw_level:
        return ""
    key = raw_level.strip().upper().replace(" ", "_").replace("-", "_")
    return LEVEL_ALIASES.get(key, key)


def country_info(code: Optional[str]) -> Optional[CountryInfo]:
    """Look up a country's assessment profile. None when unknown."""
    if not code:
        return None
    code = code.strip().upper()
    row = COUNTRY_ASSESSMENT_LEVELS.get(code)
    if row is None:
        return None
    name, level, risk_score = row
    return CountryInfo(code=code, name=name, assessment_level=level, risk_score=risk_score)


def country_risk_score(code: Optional[str]) -> int:
    """Points contributed by the country of origin; 0 when unknown."""
    info = country_info(code)
    return info.risk_score if info else 0


def _assessment_level(code: Optional[str]) -> int:
    info = country_info(code)
    return info.assessment_level if info else DEFAULT_ASSESSMENT_LEVEL


def financial_requirements(code: Optional[str]) -> FinancialRequirements:
    """Base funds and annual living cost for a country of origin."""
    base_amount, additional_funds = FINANCIAL_REQUIREMENTS_BY_LEVEL[_assessment_level(code)]
    return FinancialRequirements(base_amount=base_amount, additional_funds=additional_funds)


def document_requirements(code: Optional[str]) -> List[str]:
    """Ordered document checklist for a country of origin."""
    return BASE_DOCUMENTS + ADDITIONAL_DOCUMENTS_BY_LEVEL[_assessment_level(code)]


def program_requirements(level_key: Optional[str]) -> Optional[ProgramRequirements]:
    """Entry requirements for a program level. None when unknown."""
    key = normalize_level_key(level_key)
    row = ACADEMIC_LEVELS.get(key)
    if row is None:
        return None
    return ProgramRequirements(key=key, **row)


def required_score_for_level(level_key: Optional[str]) -> Optional[int]:
    """Total score expected for the intended program level."""
    program = program_requirements(level_key)
    return program.required_score if program else None


def study_field_info(key: Optional[str]) -> Optional[StudyFieldInfo]:
    """Look up a study field. None when unknown."""
    if not key:
        return None
    key = key.strip().upper()
    row = STUDY_FIELDS.get(key)
    if row is None:
        return None
    name, description, priority_level = row
    return StudyFieldInfo(key=key, name=name, description=description, priority_level=priority_level)


def list_countries() -> List[CountryInfo]:
    """All known countries sorted by name."""
    countries = [country_info(code) for code in COUNTRY_ASSESSMENT_LEVELS]
    return sorted(countries, key=lambda c: c.name)


def list_program_levels() -> List[ProgramRequirements]:
    """All program levels in rank order."""
    levels = [program_requirements(key) for key in ACADEMIC_LEVELS]
    return sorted(levels, key=lambda p: p.rank)


def list_study_fields() -> List[StudyFieldInfo]:
    """All study fields in table order."""
    return [study_field_info(key) for key in STUDY_FIELDS]
