from __future__ import annotations


class ServiceError(Exception):
    """Base error carrying the HTTP status the app should answer with."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 400


class UpstreamError(ServiceError):
    status_code = 500


class StorageError(ServiceError):
    status_code = 500
