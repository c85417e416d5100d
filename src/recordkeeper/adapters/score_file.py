"""Line-oriented student score files and the plain-text grade report.

Input format: one ``id,name,score`` record per line. Each line is parsed on
its own; a malformed line is skipped with a warning and never aborts the read.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
import logging
from pathlib import Path
import re

from recordkeeper.domain.errors import (
    InvalidScoreFormatError,
    MissingFieldError,
    ScoreFileError,
    ScoreRangeError,
)
from recordkeeper.domain.grading import Student


logger = logging.getLogger(__name__)

FIELD_COUNT = 3
REPORT_TITLE = "STUDENT GRADE REPORT"
INVALID_GRADE = "INVALID"
ENCODING = "utf-8"

# ASCII digits only: int() would also take "1_0" and non-ASCII digits.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


@dataclass(slots=True, frozen=True)
class SkippedLine:
    """A rejected input line and why it was rejected."""

    line_number: int
    reason: str


@dataclass(slots=True)
class ScoreFileResult:
    """Students parsed from a score file plus the lines that were skipped."""

    students: list[Student] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)


def _parse_int(raw: str, *, what: str, line_number: int) -> int:
    value = raw.strip()
    if _INTEGER_PATTERN.fullmatch(value) and _INT32_MIN <= int(value) <= _INT32_MAX:
        return int(value)
    raise InvalidScoreFormatError(f"Line {line_number}: Invalid {what} format '{raw}'", line_number=line_number)


def _decode_line(line: str | bytes, line_number: int) -> str:
    if isinstance(line, str):
        return line
    try:
        return line.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise ScoreFileError(
            f"Line {line_number}: Undecodable {ENCODING} bytes at position {exc.start}", line_number=line_number
        ) from exc


def parse_score_line(line: str, line_number: int) -> Student:
    """Parse one ``id,name,score`` record.

    Scores are not range checked here; ``classify`` rejects scores above 100.

    Raises:
        MissingFieldError: Wrong field count or blank name.
        InvalidScoreFormatError: Non-numeric id or score.
    """
    fields = line.split(",")
    if len(fields) != FIELD_COUNT:
        raise MissingFieldError(
            f"Line {line_number}: Expected {FIELD_COUNT} fields but found {len(fields)}",
            line_number=line_number,
        )

    raw_id, raw_name, raw_score = fields
    student_id = _parse_int(raw_id, what="ID", line_number=line_number)

    full_name = raw_name.strip()
    if not full_name:
        raise MissingFieldError(f"Line {line_number}: Missing student name", line_number=line_number)

    score = _parse_int(raw_score, what="score", line_number=line_number)
    return Student(id=student_id, full_name=full_name, score=score)


def parse_score_lines(lines: Sequence[str | bytes]) -> ScoreFileResult:
    """Parse every line, skipping and recording the malformed ones.

    Byte lines are decoded one at a time, so an undecodable line is skipped
    like any other malformed record.
    """
    result = ScoreFileResult()
    for line_number, line in enumerate(lines, start=1):
        try:
            result.students.append(parse_score_line(_decode_line(line, line_number).rstrip("\r\n"), line_number))
        except ScoreFileError as exc:
            logger.warning("Skipping line %d: %s", line_number, exc, extra={"line_number": exc.line_number})
            result.skipped.append(SkippedLine(line_number=line_number, reason=str(exc)))
    return result


def read_students(path: Path) -> ScoreFileResult:
    """Read a score file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    with Path(path).open("rb") as fp:
        raw_lines = fp.read().splitlines()
    return parse_score_lines(raw_lines)


def format_student_line(student: Student) -> str:
    try:
        grade = student.grade.value
    except ScoreRangeError as exc:
        logger.warning("Cannot grade student %s: %s", student.id, exc)
        grade = INVALID_GRADE
    return f"{student.full_name} (ID: {student.id}): Score = {student.score}, Grade = {grade}"


def render_grade_report(students: Sequence[Student], generated_at: datetime) -> str:
    lines = [
        REPORT_TITLE,
        "=" * len(REPORT_TITLE),
        f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}",
        "",
        *(format_student_line(student) for student in students),
        "",
        f"Total students processed: {len(students)}",
    ]
    return "\n".join(lines) + "\n"


def write_grade_report(students: Sequence[Student], path: Path, generated_at: datetime | None = None) -> None:
    """Write the plain-text grade report, overwriting ``path``."""
    report = render_grade_report(students, generated_at or datetime.now())
    Path(path).write_text(report, encoding="utf-8")
    logger.info("Wrote grade report for %d students to %s", len(students), path)
