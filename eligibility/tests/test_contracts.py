import pytest
from pydantic import ValidationError

from eligibility.logic import ApplicantRecord, FinancialStatus, PreviousVisa, EnglishProficiency


def test_enums_are_parsed(applicant_data) -> None:
    applicant = ApplicantRecord(**applicant_data)

    assert applicant.english_proficiency is EnglishProficiency.IELTS
    assert applicant.financial_status is FinancialStatus.SUFFICIENT
    assert applicant.previous_visa is PreviousVisa.NO_VISA


def test_financial_status_is_case_insensitive(applicant_data) -> None:
    applicant_data["financial_status"] = "scholarship"

    assert ApplicantRecord(**applicant_data).financial_status is FinancialStatus.SCHOLARSHIP


def test_blank_previous_visa_is_none(applicant_data) -> None:
    applicant_data["previous_visa"] = ""

    assert ApplicantRecord(**applicant_data).previous_visa is None


@pytest.mark.parametrize(
    "field, value",
    [
        ("age", 14),
        ("age", 100),
        ("work_experience_years", -1),
        ("english_proficiency", "DUOLINGO"),
        ("financial_status", "WEALTHY"),
        ("previous_visa", "DIPLOMATIC"),
    ],
)
def test_out_of_range_values_are_rejected(applicant_data, field: str, value) -> None:
    applicant_data[field] = value

    with pytest.raises(ValidationError):
        ApplicantRecord(**applicant_data)


def test_applicant_is_immutable(applicant_data) -> None:
    applicant = ApplicantRecord(**applicant_data)

    with pytest.raises(ValidationError):
        applicant.age = 30
