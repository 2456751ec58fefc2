from __future__ import annotations

import logging
from typing import Any

import bcrypt

from ..errors import ConflictError, NotFoundError, StorageError, ValidationError
from ..storage import RecordStore

logger = logging.getLogger(__name__)

_PRIVATE_FIELDS = ("password",)


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode(), hashed.encode())
    except ValueError:
        # Not a bcrypt hash (plain-text record from an old revision).
        return False


def public_profile(record: dict[str, Any]) -> dict[str, Any]:
    """Strip credentials from a stored user record."""
    return {k: v for k, v in record.items() if k not in _PRIVATE_FIELDS}


def _persist(store: RecordStore, users: list[dict[str, Any]]) -> None:
    if not store.save_users(users):
        raise StorageError("Failed to save user")


def signup(store: RecordStore, account: dict[str, Any]) -> dict[str, Any]:
    """Create a password account. ``username`` must be unique."""
    username = account.get("username")
    password = account.get("password")
    if not username or not password:
        raise ValidationError("Username and password required")

    users = store.load_users()
    if any(u.get("username") == username for u in users):
        raise ConflictError("Username already exists")

    record = {**account, "password": _hash_password(password), "isGoogleUser": False}
    users.append(record)
    _persist(store, users)
    logger.info("Created account %s", username)
    return public_profile(record)


def login(store: RecordStore, username: str, password: str) -> dict[str, Any]:
    """Verify credentials and return the public profile."""
    if not username or not password:
        raise ValidationError("Username and password required")
    for record in store.load_users():
        if record.get("username") != username:
            continue
        hashed = record.get("password")
        if hashed and _verify_password(password, hashed):
            return public_profile(record)
        break
    raise NotFoundError("Invalid credentials", status_code=401)


def google_signup(store: RecordStore, account: dict[str, Any]) -> dict[str, Any]:
    """Create an account for a Google identity, keyed on ``email``."""
    email = account.get("email")
    if not email or not account.get("name"):
        raise ValidationError("Google user info missing")

    record = {k: v for k, v in account.items() if k not in _PRIVATE_FIELDS}
    record.setdefault("username", email)

    users = store.load_users()
    if any(
        u.get("email") == email or u.get("username") == record["username"] for u in users
    ):
        raise ConflictError("User already exists")

    record["isGoogleUser"] = True
    users.append(record)
    _persist(store, users)
    logger.info("Created Google account %s", email)
    return public_profile(record)


def google_login(store: RecordStore, email: str) -> dict[str, Any]:
    if not email:
        raise ValidationError("Email is required")
    for record in store.load_users():
        if record.get("email") == email:
            return public_profile(record)
    raise NotFoundError("User not found", status_code=401)


def get_user(store: RecordStore, username: str) -> dict[str, Any]:
    for record in store.load_users():
        if record.get("username") == username:
            return public_profile(record)
    raise NotFoundError("User not found")
