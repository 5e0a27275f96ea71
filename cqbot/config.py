"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_REGISTRY_URL = "https://daze-now.herokuapp.com/api/host/add"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


CONFIG = {
    # Webhook listener (the connector posts events here)
    "listen_host": os.getenv("LISTEN_HOST", "0.0.0.0"),
    "listen_port": _int_env("LISTEN_PORT", 5701),
    # CQHTTP connector API
    "cqhttp_api_url": os.getenv("CQHTTP_API_URL", "http://localhost:5700").rstrip("/"),
    "cqhttp_access_token": os.getenv("CQHTTP_ACCESS_TOKEN", ""),
    "cqhttp_secret": os.getenv("CQHTTP_SECRET", ""),
    # Host registry
    "registry_url": os.getenv("REGISTRY_URL", DEFAULT_REGISTRY_URL),
    "http_timeout_seconds": _float_env("HTTP_TIMEOUT_SECONDS", 10.0),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class CQHTTPConfig:
    api_url: str = "http://localhost:5700"
    access_token: str = ""
    secret: str = ""


@dataclass
class RegistryConfig:
    url: str = DEFAULT_REGISTRY_URL


@dataclass
class AppConfig:
    """Typed configuration, built once at startup and passed into BotContext."""

    listen_host: str = "0.0.0.0"
    listen_port: int = 5701
    http_timeout_seconds: float = 10.0
    cqhttp: CQHTTPConfig = field(default_factory=CQHTTPConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            listen_host=CONFIG["listen_host"],
            listen_port=CONFIG["listen_port"],
            http_timeout_seconds=CONFIG["http_timeout_seconds"],
            cqhttp=CQHTTPConfig(
                api_url=CONFIG["cqhttp_api_url"],
                access_token=CONFIG["cqhttp_access_token"],
                secret=CONFIG["cqhttp_secret"],
            ),
            registry=RegistryConfig(url=CONFIG["registry_url"]),
        )
