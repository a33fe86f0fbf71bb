from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    code = "validation_error"
    status_code = 400


class ConflictError(AppError):
    code = "conflict"
    status_code = 409


class PayloadTooLarge(AppError):
    code = "payload_too_large"
    status_code = 413


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500


class StorageError(InfrastructureError):
    code = "storage_error"
