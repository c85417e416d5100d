"""Unit tests for grade classification."""

from pydantic import ValidationError as PydanticValidationError
import pytest

from recordkeeper.domain import Grade, ScoreRangeError, Student, ValidationError, classify


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (100, Grade.A),
        (85, Grade.A),
        (80, Grade.A),
        (79, Grade.B),
        (70, Grade.B),
        (69, Grade.C),
        (60, Grade.C),
        (59, Grade.D),
        (50, Grade.D),
        (49, Grade.F),
        (0, Grade.F),
        (-5, Grade.F),
    ],
)
def test_classify_bands(score: int, expected: Grade) -> None:
    assert classify(score) is expected


def test_classify_rejects_scores_above_100() -> None:
    with pytest.raises(ScoreRangeError, match="Invalid score: 101") as exc_info:
        classify(101)
    assert exc_info.value.score == 101
    assert isinstance(exc_info.value, ValidationError)


def test_student_grade_property() -> None:
    assert Student(id=1, full_name="Alice", score=85).grade is Grade.A


def test_student_with_out_of_range_score_is_constructible() -> None:
    student = Student(id=3, full_name="Bob", score=101)
    with pytest.raises(ScoreRangeError):
        _ = student.grade


def test_student_requires_name() -> None:
    with pytest.raises(PydanticValidationError):
        Student(id=1, full_name="", score=70)
    with pytest.raises(ValueError):
        Student(id=1, full_name="   ", score=70)
