from eligibility.logic.reference_data import (
    country_info,
    country_risk_score,
    document_requirements,
    financial_requirements,
    list_countries,
    list_program_levels,
    list_study_fields,
    normalize_level_key,
    program_requirements,
    required_score_for_level,
    study_field_info,
)


def test_country_info_lookup() -> None:
    info = country_info("us")

    assert info.code == "US"
    assert info.name == "United States"
    assert info.assessment_level == 1
    assert info.risk_score == 10


def test_unknown_country_is_absent() -> None:
    assert country_info("ZZ") is None
    assert country_info("") is None
    assert country_risk_score("ZZ") == 0


def test_unknown_country_uses_strictest_requirements() -> None:
    assert financial_requirements("ZZ") == financial_requirements("NG")
    assert document_requirements("ZZ") == document_requirements("NG")


def test_documents_grow_with_assessment_level() -> None:
    level_1 = document_requirements("GB")
    level_2 = document_requirements("CN")
    level_3 = document_requirements("IN")

    assert level_1[: len(level_1)] == level_2[: len(level_1)] == level_3[: len(level_1)]
    assert len(level_1) < len(level_2) < len(level_3)
    assert "Police clearance certificate" in level_3


def test_document_list_is_a_copy() -> None:
    documents = document_requirements("GB")
    documents.append("Something else")

    assert "Something else" not in document_requirements("GB")


def test_program_requirements() -> None:
    program = program_requirements("MASTERS")

    assert program.name == "Masters Degree"
    assert program.rank == 4
    assert program.required_ielts == 6.5
    assert program.required_toefl == 79
    assert program.required_pte == 58
    assert program.financial_requirement == 25000


def test_program_requirements_unknown_level() -> None:
    assert program_requirements("HIGH_SCHOOL") is None
    assert required_score_for_level("HIGH_SCHOOL") is None
    assert required_score_for_level("bachelor") == 60


def test_normalize_level_key() -> None:
    assert normalize_level_key(" Bachelor ") == "BACHELORS"
    assert normalize_level_key("Advanced Diploma") == "ADVANCED_DIPLOMA"
    assert normalize_level_key("doctorate") == "PHD"
    assert normalize_level_key(None) == ""


def test_study_field_info() -> None:
    field = study_field_info("it")

    assert field.name == "Information Technology"
    assert field.priority_level == 3
    assert study_field_info("UNKNOWN") is None


def test_listings() -> None:
    names = [c.name for c in list_countries()]
    assert names == sorted(names)

    ranks = [p.rank for p in list_program_levels()]
    assert ranks == [1, 2, 3, 4, 5]

    assert len(list_study_fields()) == 10
