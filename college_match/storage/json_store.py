from __future__ import annotations

import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from .config import DEFAULT_STORE_CONFIG, StoreConfig

logger = logging.getLogger(__name__)

Document = Any

# Assessment results were written under either key over time.
OWNER_KEY = "username"
LEGACY_OWNER_KEY = "userId"


def load_document(path: Path, default: Document) -> Document:
    """
    Read a whole JSON document from ``path``.

    Returns ``default`` when the file is missing, blank or unparseable.
    Failures are logged and never raised.
    """
    path = Path(path)
    if not path.exists():
        return default
    try:
        raw = path.read_text(encoding="utf-8")
        if not raw.strip():
            return default
        return json.loads(raw)
    except (OSError, ValueError):
        logger.warning("Could not read JSON document %s, using default", path, exc_info=True)
        return default


def save_document(path: Path, document: Document) -> bool:
    """Overwrite ``path`` with ``document``. Returns ``False`` if the write failed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        return True
    except (OSError, TypeError, ValueError):
        logger.warning("Could not write JSON document %s", path, exc_info=True)
        return False


def _as_list(document: Document) -> list[dict[str, Any]]:
    return document if isinstance(document, list) else []


def normalize_owner(record: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of an assessment record with its owner under ``username``."""
    out = dict(record)
    legacy = out.pop(LEGACY_OWNER_KEY, None)
    if not out.get(OWNER_KEY) and legacy:
        out[OWNER_KEY] = legacy
    return out


class RecordStore(ABC):
    """Load/save access to each collection the service persists."""

    @abstractmethod
    def load_users(self) -> list[dict[str, Any]]: ...

    @abstractmethod
    def save_users(self, users: list[dict[str, Any]]) -> bool: ...

    @abstractmethod
    def _load_raw_assessments(self) -> list[dict[str, Any]]: ...

    @abstractmethod
    def save_assessments(self, assessments: list[dict[str, Any]]) -> bool: ...

    @abstractmethod
    def load_colleges(self) -> list[dict[str, Any]]: ...

    @abstractmethod
    def load_college_detail(self, identifier: str) -> Document: ...

    def load_assessments(self) -> list[dict[str, Any]]:
        return [
            normalize_owner(r) for r in self._load_raw_assessments() if isinstance(r, dict)
        ]


class JsonRecordStore(RecordStore):
    def __init__(self, config: StoreConfig = DEFAULT_STORE_CONFIG) -> None:
        self.config = config

    def load_users(self) -> list[dict[str, Any]]:
        return _as_list(load_document(self.config.users_path, []))

    def save_users(self, users: list[dict[str, Any]]) -> bool:
        return save_document(self.config.users_path, users)

    def _load_raw_assessments(self) -> list[dict[str, Any]]:
        return _as_list(load_document(self.config.assessments_path, []))

    def save_assessments(self, assessments: list[dict[str, Any]]) -> bool:
        return save_document(self.config.assessments_path, assessments)

    def load_colleges(self) -> list[dict[str, Any]]:
        return _as_list(load_document(self.config.colleges_path, []))

    def load_college_detail(self, identifier: str) -> Document:
        return load_document(self.config.detail_path(identifier), None)


class InMemoryRecordStore(RecordStore):
    """Dictionary-backed store. Documents are deep-copied in and out."""

    def __init__(
        self,
        users: list[dict[str, Any]] | None = None,
        assessments: list[dict[str, Any]] | None = None,
        colleges: list[dict[str, Any]] | None = None,
        details: dict[str, Document] | None = None,
    ) -> None:
        self.users = copy.deepcopy(users or [])
        self.assessments = copy.deepcopy(assessments or [])
        self.colleges = copy.deepcopy(colleges or [])
        self.details = copy.deepcopy(details or {})

    def load_users(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self.users)

    def save_users(self, users: list[dict[str, Any]]) -> bool:
        self.users = copy.deepcopy(users)
        return True

    def _load_raw_assessments(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self.assessments)

    def save_assessments(self, assessments: list[dict[str, Any]]) -> bool:
        self.assessments = copy.deepcopy(assessments)
        return True

    def load_colleges(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self.colleges)

    def load_college_detail(self, identifier: str) -> Document:
        return copy.deepcopy(self.details.get(identifier))
