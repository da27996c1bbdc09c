"""
Observed set persisted as a JSON array of objects. Every save rewrites the whole file.
"""
from __future__ import annotations

import logging
import os

from pydantic import TypeAdapter, ValidationError

from errors import StoreError
from models import TrackedObject

logger = logging.getLogger(__name__)

_objects_adapter = TypeAdapter(list[TrackedObject])


class ObservedStore:
    """Every TrackedObject ever reported as new, in the order it was first reported."""

    def __init__(self, path: str) -> None:
        self.path = path

    def _ensure_dir(self) -> None:
        d = os.path.dirname(self.path)
        if d:
            os.makedirs(d, exist_ok=True)

    def load(self) -> list[TrackedObject]:
        """Return the persisted objects. A missing file is initialized to an empty set."""
        if not os.path.exists(self.path):
            logger.info("no observed set at %s, starting empty", self.path)
            self.save([])
            return []
        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise StoreError(f"cannot read {self.path}: {e}") from e
        if not raw.strip():
            return []
        try:
            return _objects_adapter.validate_json(raw)
        except ValidationError as e:
            raise StoreError(f"cannot decode {self.path}: {e}") from e

    def save(self, objects: list[TrackedObject]) -> None:
        """Overwrite the persisted set with objects."""
        tmp_path = f"{self.path}.tmp"
        try:
            self._ensure_dir()
            with open(tmp_path, "wb") as f:
                f.write(_objects_adapter.dump_json(objects, indent=2))
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StoreError(f"cannot write {self.path}: {e}") from e
        logger.debug("saved %d observed objects to %s", len(objects), self.path)

    def ids(self) -> list[str]:
        """Identifiers in report order. Read only: a missing file is not initialized."""
        if not os.path.exists(self.path):
            return []
        return [o.neo_reference_id for o in self.load()]
