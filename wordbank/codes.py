"""
Code Registry: short-lived access codes that gate write sessions.

Flow:
  1. A client obtains a code (GET /publish, or POST /auth/issue with the
     master code).
  2. It trades the code for the session key/value (POST /auth/verify).
  3. Later requests prove the session with POST /auth/session.

Codes expire 24 hours after issue. Expired codes are swept lazily on
issue/verify and once at startup. Verification never reveals whether a
rejected code was expired or never existed.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

from wordbank.errors import (
    InvalidCodeError,
    NotFoundError,
    PersistenceError,
    SnapshotError,
    UnauthorizedError,
)
from wordbank.snapshot import read_json, write_json_atomic

logger = logging.getLogger(__name__)

CODE_EXPIRY = timedelta(hours=24)
EXPIRY_DESCRIPTION = "24 hours"

# 8 random bytes -> 16 hex chars
CODE_BYTES = 8


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _mask(code: str) -> str:
    return code[:4] + "…"


@dataclass
class AccessCode:
    code: str
    created_at: datetime

    def to_json(self) -> dict:
        return {"code": self.code, "createdAt": self.created_at.isoformat()}

    @classmethod
    def from_json(cls, entry) -> "AccessCode":
        try:
            created_at = datetime.fromisoformat(entry["createdAt"])
            code = entry["code"]
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotError(f"malformed access code entry: {entry!r}") from e
        if not isinstance(code, str):
            raise SnapshotError(f"malformed access code entry: {entry!r}")
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(code=code, created_at=created_at)


@dataclass
class IssuedCode:
    code: str
    expires_in: str


@dataclass
class SessionGrant:
    session_key: str
    session_value: str


class CodeRegistry:
    """Issued access codes, keyed by code value, persisted as one JSON file."""

    def __init__(
        self,
        path: Path,
        master_code: str,
        session_key: str,
        session_secret: str,
        codes: list[AccessCode] | None = None,
        clock: Callable[[], datetime] = utc_now,
        expiry: timedelta = CODE_EXPIRY,
    ):
        self.path = Path(path)
        self._master_code = master_code
        self._session_key = session_key
        self._session_secret = session_secret
        self._clock = clock
        self.expiry = expiry
        # dicts keep insertion order, which is the display order
        self._codes: dict[str, AccessCode] = {c.code: c for c in (codes or [])}
        self.diverged = False

    @classmethod
    def load(cls, path: Path, **kwargs) -> "CodeRegistry":
        """Load the codes snapshot (empty if absent) and sweep expired codes."""
        path = Path(path)
        data = read_json(path)

        codes: list[AccessCode] = []
        if data is not None:
            if not isinstance(data, dict) or not isinstance(data.get("codes"), list):
                raise SnapshotError('codes snapshot must be an object with a "codes" list')
            codes = [AccessCode.from_json(entry) for entry in data["codes"]]

        registry = cls(path, codes=codes, **kwargs)
        removed = registry.sweep_expired()
        logger.info(
            "Loaded %d access code(s) from %s (%d expired removed)",
            len(registry), path, removed,
        )
        return registry

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, code: str) -> bool:
        return code in self._codes

    def codes(self) -> list[AccessCode]:
        return list(self._codes.values())

    # ── Operations ─────────────────────────────────────────────────

    def sweep_expired(self) -> int:
        """Remove codes older than the expiry window. Persists only on change."""
        now = self._clock()
        expired = [c.code for c in self._codes.values() if now - c.created_at > self.expiry]
        for code in expired:
            del self._codes[code]

        if expired:
            logger.info("Swept %d expired access code(s)", len(expired))
            self._persist()
        return len(expired)

    def issue(self) -> IssuedCode:
        self.sweep_expired()

        code = secrets.token_hex(CODE_BYTES)
        self._codes[code] = AccessCode(code=code, created_at=self._clock())
        logger.info("Issued access code %s", _mask(code))
        self._persist()
        return IssuedCode(code=code, expires_in=EXPIRY_DESCRIPTION)

    def issue_privileged(self, master_code: str) -> IssuedCode:
        self._check_master(master_code)
        return self.issue()

    def verify(self, code: str) -> SessionGrant:
        self.sweep_expired()

        if code not in self._codes:
            logger.warning("Rejected access code %s", _mask(code))
            raise InvalidCodeError("Invalid or expired code")

        return SessionGrant(session_key=self._session_key, session_value=self._session_secret)

    def verify_session(self, session_value: str) -> None:
        if not secrets.compare_digest(session_value.encode(), self._session_secret.encode()):
            logger.warning("Rejected session value")
            raise InvalidCodeError("Invalid session")

    def revoke(self, master_code: str, code: str) -> str:
        self._check_master(master_code)

        if code not in self._codes:
            raise NotFoundError("Code not found")

        del self._codes[code]
        logger.info("Revoked access code %s", _mask(code))
        self._persist()
        return code

    # ── Internals ──────────────────────────────────────────────────

    def _check_master(self, master_code: str) -> None:
        if not secrets.compare_digest(master_code.encode(), self._master_code.encode()):
            logger.warning("Rejected master code")
            raise UnauthorizedError("Invalid master code")

    def _persist(self) -> None:
        document = {"codes": [c.to_json() for c in self._codes.values()]}
        try:
            write_json_atomic(self.path, document)
        except OSError as e:
            self.diverged = True
            logger.error("Failed to write codes snapshot %s: %s", self.path, e)
            raise PersistenceError(
                "Access codes could not be saved; in-memory codes and the snapshot file have diverged"
            ) from e
        self.diverged = False
