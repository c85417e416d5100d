"""CLI for running the recordkeeper console demos."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
import logging
import sys
from typing import TextIO

from recordkeeper.config import Settings, get_settings
from recordkeeper.observability.logging import configure_logging
from recordkeeper.service_layer import finance_app, grading_app, health_app, inventory_app, warehouse_app


logger = logging.getLogger(__name__)

DEMO_NAMES = ("inventory", "finance", "grading", "warehouse", "health")


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recordkeeper",
        description="Run one of the keyed-repository console demos",
    )
    parser.add_argument(
        "demo",
        choices=(*DEMO_NAMES, "all"),
        help="Demo to run, or 'all' to run every demo in turn",
    )
    parser.add_argument(
        "--log-level",
        choices=("debug", "info", "warning", "error", "critical"),
        help="Override RECORDKEEPER_LOG_LEVEL",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit structured JSON log lines",
    )
    return parser


def _demo_runners(settings: Settings, out: TextIO, input_stream: TextIO) -> dict[str, Callable[[], object]]:
    return {
        "inventory": lambda: inventory_app.run(settings.inventory_file, out),
        "finance": lambda: finance_app.run(out),
        "grading": lambda: grading_app.run(settings.scores_input_file, settings.grade_report_file, out),
        "warehouse": lambda: warehouse_app.run(out),
        "health": lambda: health_app.run(out, input_stream, default_patient_id=settings.default_patient_id),
    }


def main(
    argv: Sequence[str] | None = None,
    *,
    out: TextIO | None = None,
    input_stream: TextIO | None = None,
    settings: Settings | None = None,
) -> int:
    """Run the selected demo. Failures are reported as text; the exit code is always 0."""
    args = build_argument_parser().parse_args(argv)
    settings = settings or get_settings()
    configure_logging(args.log_level or settings.log_level, args.log_json or settings.log_json)

    out = out or sys.stdout
    runners = _demo_runners(settings, out, input_stream or sys.stdin)
    selected = DEMO_NAMES if args.demo == "all" else (args.demo,)
    for index, name in enumerate(selected):
        if index:
            print(file=out)
        logger.info("Running %s demo", name)
        runners[name]()
    return 0


if __name__ == "__main__":
    sys.exit(main())
