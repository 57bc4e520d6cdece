import pytest

from eligibility.logic import transition_delta
from eligibility.logic.transition import progression_label


@pytest.mark.parametrize(
    "current, intended",
    [
        ("CERTIFICATE", "DIPLOMA"),
        ("DIPLOMA", "BACHELORS"),
        ("BACHELORS", "MASTERS"),
        ("MASTERS", "PHD"),
    ],
)
def test_one_step_up_earns_bonus(current: str, intended: str) -> None:
    assert transition_delta(current, intended) == 5


@pytest.mark.parametrize(
    "current, intended",
    [
        ("PHD", "MASTERS"),
        ("PHD", "CERTIFICATE"),
        ("BACHELORS", "DIPLOMA"),
    ],
)
def test_any_downgrade_is_penalised(current: str, intended: str) -> None:
    assert transition_delta(current, intended) == -5


def test_same_level_is_neutral() -> None:
    assert transition_delta("MASTERS", "MASTERS") == 0


def test_jump_of_two_or_more_is_neutral() -> None:
    assert transition_delta("DIPLOMA", "MASTERS") == 0
    assert transition_delta("CERTIFICATE", "PHD") == 0


def test_unknown_levels_are_neutral() -> None:
    assert transition_delta("HIGH_SCHOOL", "BACHELORS") == 0
    assert transition_delta("BACHELORS", "") == 0
    assert transition_delta(None, "MASTERS") == 0


def test_level_aliases_and_case_are_normalised() -> None:
    assert transition_delta("Bachelor", "master") == 5
    assert transition_delta("masters", "Doctorate") == 5


def test_progression_label_follows_sign() -> None:
    assert progression_label(5) == "Positive"
    assert progression_label(-5) == "Negative"
    assert progression_label(0) == "Neutral"
