"""
Error taxonomy for the word bank service.

The domain layer (store, code registry) raises these. The HTTP boundary in
main.py turns every WordBankError into a JSON response with the matching
status code, so routes never build error responses by hand.
"""


class WordBankError(Exception):
    """Base class for request-scoped, recoverable errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def body(self) -> dict:
        return {"error": self.message}


class ValidationError(WordBankError):
    """A required request field is missing or empty."""

    status_code = 400


class NotFoundError(WordBankError):
    """Category, word or access code does not exist."""

    status_code = 404


class UnauthorizedError(WordBankError):
    """Master code did not match."""

    status_code = 403


class InvalidCodeError(WordBankError):
    """Access code or session value is invalid or expired.

    The message never says which of the two it was."""

    status_code = 401

    def body(self) -> dict:
        return {"valid": False, "error": self.message}


class ConflictError(WordBankError):
    """Word already present in the category (after normalization)."""

    status_code = 409


class PersistenceError(WordBankError):
    """Snapshot write failed. In-memory state no longer matches the file."""

    status_code = 500


# ── Startup-only errors (never served over HTTP) ───────────────────

class SnapshotError(Exception):
    """Snapshot file exists but cannot be parsed into the expected shape."""


class ConfigError(Exception):
    """Required configuration is missing or inconsistent."""
