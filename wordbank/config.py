"""
Runtime configuration, read from environment variables.

The master code and session secret have no fallback values: the server
refuses to start without them.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from wordbank.errors import ConfigError

DEFAULT_SESSION_KEY = "hobby_session"
DEFAULT_PORT = 3000


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    master_code: str
    session_secret: str
    session_key: str = DEFAULT_SESSION_KEY
    data_file: Path = Path("data.json")
    codes_file: Path = Path("codes.json")
    allowed_origins: list[str] = field(default_factory=list)
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    ssl_keyfile: str | None = None
    ssl_certfile: str | None = None
    log_level: str = "INFO"

    @property
    def tls_enabled(self) -> bool:
        return bool(self.ssl_keyfile and self.ssl_certfile)


def _required(env: dict, name: str) -> str:
    value = env.get(name, "")
    if not value.strip():
        raise ConfigError(f"{name} must be set")
    return value


def load_settings(env: dict | None = None) -> Settings:
    """Build Settings from `env` (defaults to os.environ). Fails fast."""
    env = os.environ if env is None else env

    ssl_keyfile = env.get("WORDBANK_SSL_KEYFILE") or None
    ssl_certfile = env.get("WORDBANK_SSL_CERTFILE") or None
    if bool(ssl_keyfile) != bool(ssl_certfile):
        raise ConfigError("WORDBANK_SSL_KEYFILE and WORDBANK_SSL_CERTFILE must be set together")

    raw_port = env.get("PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw_port!r}") from None

    return Settings(
        master_code=_required(env, "WORDBANK_MASTER_CODE"),
        session_secret=_required(env, "WORDBANK_SESSION_SECRET"),
        session_key=env.get("WORDBANK_SESSION_KEY") or DEFAULT_SESSION_KEY,
        data_file=Path(env.get("WORDBANK_DATA_FILE") or "data.json"),
        codes_file=Path(env.get("WORDBANK_CODES_FILE") or "codes.json"),
        allowed_origins=_split_origins(env.get("WORDBANK_ALLOWED_ORIGINS", "")),
        host=env.get("WORDBANK_HOST") or "0.0.0.0",
        port=port,
        ssl_keyfile=ssl_keyfile,
        ssl_certfile=ssl_certfile,
        log_level=(env.get("WORDBANK_LOG_LEVEL") or "INFO").upper(),
    )
