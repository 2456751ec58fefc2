from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..errors import NotFoundError, StorageError, ValidationError
from ..storage import RecordStore
from ..storage.json_store import OWNER_KEY, normalize_owner

logger = logging.getLogger(__name__)


def find_assessment(store: RecordStore, username: str) -> dict[str, Any] | None:
    for record in store.load_assessments():
        if record.get(OWNER_KEY) == username:
            return record
    return None


def save_assessment(store: RecordStore, payload: dict[str, Any]) -> dict[str, str]:
    """Insert or replace the single assessment result kept per owner."""
    record = normalize_owner(payload)
    username = record.get(OWNER_KEY)
    if not username:
        raise ValidationError("Username is required")
    record["savedAt"] = datetime.now(timezone.utc).isoformat()

    assessments = store.load_assessments()
    existing = [i for i, a in enumerate(assessments) if a.get(OWNER_KEY) == username]
    if existing:
        assessments[existing[0]] = record
        for i in reversed(existing[1:]):
            del assessments[i]
    else:
        assessments.append(record)
    if not store.save_assessments(assessments):
        raise StorageError("Failed to save assessment")
    logger.info("Saved assessment for %s", username)
    return {"status": "success"}


def has_assessment(store: RecordStore, username: str) -> bool:
    return find_assessment(store, username) is not None


def get_assessment(store: RecordStore, username: str) -> dict[str, Any]:
    record = find_assessment(store, username)
    if record is None:
        raise NotFoundError("Assessment not found")
    return record
