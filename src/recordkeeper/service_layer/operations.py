"""Run demo steps and turn repository errors into outcomes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import logging
from typing import TextIO

from recordkeeper.domain.errors import DuplicateKeyError, NotFoundError, RepositoryError, ValidationError


logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


@dataclass(slots=True, frozen=True)
class OperationOutcome:
    """What happened when a demo step ran."""

    description: str
    error_kind: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def error_kind_of(exc: RepositoryError) -> ErrorKind:
    if isinstance(exc, DuplicateKeyError):
        return ErrorKind.DUPLICATE_KEY
    if isinstance(exc, NotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, ValidationError):
        return ErrorKind.VALIDATION
    raise TypeError(f"Unclassified repository error: {type(exc).__name__}")


def run_operation(description: str, action: Callable[[], object], out: TextIO) -> OperationOutcome:
    """Run ``action``, reporting a repository error on ``out`` instead of raising.

    Other exceptions propagate: only the expected duplicate, not-found and
    validation conditions are turned into outcomes.
    """
    try:
        action()
    except RepositoryError as exc:
        kind = error_kind_of(exc)
        logger.info(
            "%s failed: %s",
            description,
            exc,
            extra={"entity_type": exc.entity_type, "key": exc.key, "error_kind": kind.value},
        )
        print(f"Error: {exc}", file=out)
        return OperationOutcome(description=description, error_kind=kind, message=str(exc))
    return OperationOutcome(description=description)
