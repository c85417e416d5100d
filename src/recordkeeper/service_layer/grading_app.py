"""Grading demo: read a score file and write the grade report."""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path
from typing import TextIO

from recordkeeper.adapters.score_file import ScoreFileResult, read_students, write_grade_report


logger = logging.getLogger(__name__)


def run(
    input_file: Path,
    output_file: Path,
    out: TextIO,
    *,
    generated_at: datetime | None = None,
) -> ScoreFileResult | None:
    """Process ``input_file`` into ``output_file``.

    Returns the parse result, or None when the input file is missing or the
    report cannot be written. Skipped lines are reported but never stop the run.
    """
    print("Starting grade processing...", file=out)

    try:
        result = read_students(input_file)
    except FileNotFoundError:
        print(f"Error: Input file not found - {input_file}", file=out)
        print("Please ensure the file exists and try again.", file=out)
        return None
    except OSError as exc:
        logger.error("Could not read scores: %s", exc)
        print(f"Error: Could not read input file - {exc}", file=out)
        return None

    for skipped in result.skipped:
        print(f"Skipping line {skipped.line_number}: {skipped.reason}", file=out)

    try:
        write_grade_report(result.students, output_file, generated_at)
    except OSError as exc:
        logger.error("Could not write grade report: %s", exc)
        print(f"Error: Could not write report - {exc}", file=out)
        return None

    print(f"Successfully processed {len(result.students)} students", file=out)
    print(f"Report saved to: {Path(output_file).resolve()}", file=out)
    return result
