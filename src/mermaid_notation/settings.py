# src/mermaid_notation/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass

def _truthy(v: str | None) -> bool:
    return str(v or "").strip().lower() in {"1", "true", "yes", "y", "on"}

def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except Exception:
        return default

def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default

@dataclass
class Settings:
    # Render host (Kroki); None means no presentation host is available
    kroki_url: str | None = None
    kroki_timeout: float = 30.0

    # Engine defaults
    theme: str = "default"
    security_level: str = "loose"

    # Render cache
    cache_enabled: bool = True
    cache_max_size: int = 100
    cache_ttl_seconds: float = 15 * 60.0

    @classmethod
    def from_env(cls) -> "Settings":
        kroki_url = (os.getenv("KROKI_URL") or "").strip() or None
        return cls(
            kroki_url=kroki_url.rstrip("/") if kroki_url else None,
            kroki_timeout=_float_env("KROKI_TIMEOUT_SECONDS", 30.0),
            theme=(os.getenv("MERMAID_THEME") or "default").strip().lower(),
            security_level=(os.getenv("MERMAID_SECURITY_LEVEL") or "loose").strip().lower(),
            cache_enabled=_truthy(os.getenv("RENDER_CACHE_ENABLED", "true")),
            cache_max_size=_int_env("RENDER_CACHE_SIZE", 100),
            cache_ttl_seconds=_float_env("RENDER_CACHE_TTL_SECONDS", 15 * 60.0),
        )
