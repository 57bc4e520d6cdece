import pytest

from eligibility.logic import ApplicantRecord


def base_applicant_data() -> dict:
    return {
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


@pytest.fixture
def applicant_data() -> dict:
    return base_applicant_data()


@pytest.fixture
def make_applicant():
    def _make(**overrides) -> ApplicantRecord:
        data = base_applicant_data()
        data.update(overrides)
        return ApplicantRecord(**data)

    return _make
