"""Domain errors raised by the quoting core and rendered by the API layer."""

from __future__ import annotations


class QuoterError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(QuoterError):
    """Bad or missing input, detected before any storage call."""

    status_code = 400


class PermissionDeniedError(QuoterError):
    status_code = 403


class NotFoundError(QuoterError):
    status_code = 404


class PersistenceError(QuoterError):
    """Storage failed; surfaced unchanged to the caller, never retried."""

    status_code = 500
