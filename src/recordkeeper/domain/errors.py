"""Error taxonomy shared by the repository, the file stores and the demos.

Repository errors carry the entity type and the offending key so callers can
report them without parsing messages. Score file errors carry the line number
of the rejected record.
"""

from __future__ import annotations

from collections.abc import Hashable


class RecordkeeperError(Exception):
    """Base error for recordkeeper."""


class RepositoryError(RecordkeeperError):
    """Base error for keyed repository operations."""

    def __init__(self, message: str, *, entity_type: str = "", key: Hashable | None = None) -> None:
        super().__init__(message)
        self.entity_type = entity_type
        self.key = key


class DuplicateKeyError(RepositoryError):
    """Raised when adding an entity whose id is already present."""

    def __init__(self, entity_type: str, key: Hashable) -> None:
        super().__init__(f"{entity_type} with ID {key} already exists", entity_type=entity_type, key=key)


class NotFoundError(RepositoryError):
    """Raised when an operation targets an id that is not present."""

    def __init__(self, entity_type: str, key: Hashable) -> None:
        super().__init__(f"{entity_type} with ID {key} not found", entity_type=entity_type, key=key)


class ValidationError(RepositoryError, ValueError):
    """Raised when a value violates a domain constraint."""


class ScoreRangeError(ValidationError):
    """Raised when a score falls outside the gradable range."""

    def __init__(self, score: int) -> None:
        super().__init__(f"Invalid score: {score}", entity_type="Student", key=None)
        self.score = score


class ScoreFileError(RecordkeeperError, ValueError):
    """Base error for a malformed line in a score file."""

    def __init__(self, message: str, *, line_number: int) -> None:
        super().__init__(message)
        self.line_number = line_number


class MissingFieldError(ScoreFileError):
    """Raised when a score line has the wrong field count or a blank name."""


class InvalidScoreFormatError(ScoreFileError):
    """Raised when a score line has a non-numeric id or score."""


class CorruptDataError(RecordkeeperError):
    """Raised when persisted content cannot be parsed into the expected shape."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Corrupt data in {path}: {reason}")
        self.path = path
        self.reason = reason
