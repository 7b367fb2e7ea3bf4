from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional


def _b(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    v2 = v.strip().lower()
    return v2 in ("1", "true", "yes", "on", "y")


def _f(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except Exception:
        return default


def _i(name: str, default: int) -> int:
    try:
        return int(float(os.getenv(name, str(default))))
    except Exception:
        return default


def _s(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return v.strip()


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

SESSION_COOKIE_NAME = "yasashii_session"


def _api_key_from_env() -> Optional[str]:
    # API_KEY is the name the hosted app used; GEMINI_API_KEY wins when both are set
    return _s("GEMINI_API_KEY") or _s("API_KEY")


@dataclass
class Settings:
    api_key: Optional[str] = field(default_factory=_api_key_from_env)
    model: str = field(default_factory=lambda: _s("YASASHII_MODEL", DEFAULT_MODEL))
    gemini_base_url: str = field(
        default_factory=lambda: _s("YASASHII_GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL)
    )
    http_timeout_sec: float = field(default_factory=lambda: _f("YASASHII_HTTP_TIMEOUT_SEC", 60.0))
    max_sessions: int = field(default_factory=lambda: _i("YASASHII_MAX_SESSIONS", 256))
    log_level: str = field(default_factory=lambda: _s("YASASHII_LOG_LEVEL", "INFO"))
    log_prompts: bool = field(default_factory=lambda: _b("YASASHII_LOG_PROMPTS", False))


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """Settings read from the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS
