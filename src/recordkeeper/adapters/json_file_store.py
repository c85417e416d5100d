"""JSON file persistence for repository snapshots.

A snapshot is stored as one JSON array of objects, one object per entity, with
field names matching entity attributes. Dates are ISO-8601 strings. There is
no schema version: a file that does not match the entity shape is corrupt.
"""

from __future__ import annotations

from collections.abc import Sequence
import contextlib
import logging
from pathlib import Path
import shutil
from typing import Any, Generic, TypeVar

import orjson
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from recordkeeper.domain.errors import CorruptDataError


logger = logging.getLogger(__name__)

E = TypeVar("E")

TMP_SUFFIX = ".tmp"


class JsonFileStore(Generic[E]):
    """Save and restore ordered entity snapshots as indented JSON."""

    def __init__(self, entity_type: type[E]) -> None:
        self.entity_type = entity_type
        self._adapter: TypeAdapter[list[E]] = TypeAdapter(list[entity_type])  # type: ignore[valid-type]

    def save(self, entities: Sequence[E], path: Path) -> None:
        """Write ``entities`` to ``path``, replacing any existing content.

        The payload is written to a temporary sibling first and moved into
        place, so a failed write never leaves a half-written snapshot.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        path = Path(path)
        payload = orjson.dumps(
            self._adapter.dump_python(list(entities), mode="json"),
            option=orjson.OPT_INDENT_2,
        )
        tmp_path = path.with_suffix(path.suffix + TMP_SUFFIX)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(payload)
            shutil.move(str(tmp_path), str(path))
        except OSError as exc:
            logger.error("Error saving to file %s: %s", path, exc)
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise
        logger.info(
            "Saved %d %s records to %s", len(entities), self.entity_type.__name__, path, extra={"path": Path(path)}
        )

    def load(self, path: Path) -> list[E]:
        """Read a snapshot from ``path`` in file order.

        A missing file is a fresh system, not an error: it yields ``[]``.

        Raises:
            CorruptDataError: If the content is not a JSON array of entities.
            OSError: If the file exists but cannot be read.
        """
        path = Path(path)
        if not path.exists():
            logger.info("File not found: %s", path, extra={"path": Path(path)})
            return []

        try:
            raw: Any = orjson.loads(path.read_bytes())
        except orjson.JSONDecodeError as exc:
            raise CorruptDataError(path, f"invalid JSON ({exc})") from exc

        if not isinstance(raw, list):
            raise CorruptDataError(path, f"expected a JSON array, found {type(raw).__name__}")

        try:
            entities = self._adapter.validate_python(raw)
        except PydanticValidationError as exc:
            raise CorruptDataError(path, f"{exc.error_count()} invalid field(s)") from exc

        logger.info(
            "Loaded %d %s records from %s", len(entities), self.entity_type.__name__, path, extra={"path": Path(path)}
        )
        return entities
