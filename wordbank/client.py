"""
Hobby Word Bank -- Python client

Thin wrapper around the word bank HTTP API.

Usage:

    from wordbank.client import WordBankClient

    wb = WordBankClient("http://localhost:3000")

    # Get an access code and trade it for a session
    issued = wb.publish_code()
    session = wb.verify_code(issued.code)

    # Edit a category
    words = wb.add_word("game", "마인크래프트")
    wb.update_word("game", "마인크래프트", "마크")
    deleted = wb.delete_word("game", "마크")

Requirements: requests
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 10


# ── Result types ──────────────────────────────────────────────────────────


@dataclass
class HobbyResult:
    """A category and its words after a read or write."""

    hobby: str
    words: List[str]
    message: Optional[str] = None
    deleted_word: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class CodeResult:
    """Result from /publish or /auth/issue."""

    code: str
    expires_in: str
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class SessionResult:
    """Result from /auth/verify."""

    session_key: str
    session_value: str
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)


# ── Exceptions ────────────────────────────────────────────────────────────


class WordBankClientError(Exception):
    """Raised for any response with status >= 400."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# ── Client ────────────────────────────────────────────────────────────────


class WordBankClient:
    """
    Client for the Hobby Word Bank API.

    Args:
        base_url: API base URL. Defaults to http://localhost:3000.
        timeout: Request timeout in seconds. Defaults to 10.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        kwargs.setdefault("timeout", self.timeout)
        resp = self._session.request(method, url, **kwargs)
        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = resp.text
            message = body.get("error", body) if isinstance(body, dict) else body
            raise WordBankClientError(
                f"API error {resp.status_code}: {message}",
                status_code=resp.status_code,
                body=body,
            )
        return resp.json()

    @staticmethod
    def _hobby(data: Dict[str, Any]) -> HobbyResult:
        return HobbyResult(
            hobby=data["hobby"],
            words=data["words"],
            message=data.get("message"),
            deleted_word=data.get("deletedWord"),
            raw=data,
        )

    # ── Words ─────────────────────────────────────────────────────────

    def list_all(self) -> Dict[str, List[str]]:
        return self._request("GET", "/data")

    def get_words(self, hobby: str) -> HobbyResult:
        return self._hobby(self._request("GET", f"/hobby/{hobby}"))

    def add_word(self, hobby: str, word: str) -> HobbyResult:
        return self._hobby(self._request("POST", f"/hobby/{hobby}", json={"word": word}))

    def delete_word(self, hobby: str, word: str) -> HobbyResult:
        return self._hobby(self._request("DELETE", f"/hobby/{hobby}", json={"word": word}))

    def update_word(self, hobby: str, old_word: str, new_word: str) -> HobbyResult:
        payload = {"oldWord": old_word, "newWord": new_word}
        return self._hobby(self._request("PUT", f"/hobby/{hobby}", json=payload))

    def reset(self) -> Dict[str, List[str]]:
        return self._request("POST", "/reset")["data"]

    # ── Access codes ──────────────────────────────────────────────────

    def publish_code(self) -> CodeResult:
        data = self._request("GET", "/publish")
        return CodeResult(code=data["code"], expires_in=data["expiresIn"], raw=data)

    def issue_code(self, master_code: str) -> CodeResult:
        data = self._request("POST", "/auth/issue", json={"masterCode": master_code})
        return CodeResult(code=data["code"], expires_in=data["expiresIn"], raw=data)

    def verify_code(self, code: str) -> SessionResult:
        data = self._request("POST", "/auth/verify", json={"code": code})
        return SessionResult(
            session_key=data["sessionKey"],
            session_value=data["sessionValue"],
            raw=data,
        )

    def verify_session(self, session_value: str) -> bool:
        """True if the session value is accepted. Other errors still raise."""
        try:
            data = self._request("POST", "/auth/session", json={"sessionValue": session_value})
        except WordBankClientError as e:
            if e.status_code == 401:
                return False
            raise
        return bool(data.get("valid"))

    def revoke_code(self, master_code: str, code: str) -> str:
        data = self._request("DELETE", "/auth/revoke", json={"masterCode": master_code, "code": code})
        return data["code"]

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")
