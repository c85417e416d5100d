"""Students and letter-grade classification."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import Field
from pydantic.dataclasses import dataclass

from recordkeeper.domain.errors import ScoreRangeError


MAX_SCORE = 100


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


# Lower bound (inclusive) of each passing band, highest first.
_GRADE_BANDS: tuple[tuple[int, Grade], ...] = (
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
)


def classify(score: int) -> Grade:
    """Map a score to its letter grade.

    Scores below 50 (including negative ones) grade as F. Scores above 100
    cannot be graded and raise ``ScoreRangeError``; readers do not enforce the
    range, so this is where an out-of-range score is caught.
    """
    if score > MAX_SCORE:
        raise ScoreRangeError(score)
    for lower_bound, grade in _GRADE_BANDS:
        if score >= lower_bound:
            return grade
    return Grade.F


@dataclass(frozen=True)
class Student:
    """A graded student record read from a score file."""

    id: int
    full_name: Annotated[str, Field(min_length=1)]
    score: int

    def __post_init__(self) -> None:
        if not self.full_name.strip():
            raise ValueError("Student must have a non-empty name")

    @property
    def grade(self) -> Grade:
        return classify(self.score)
