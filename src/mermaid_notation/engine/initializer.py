# src/mermaid_notation/engine/initializer.py
from __future__ import annotations

import json
import logging
import threading
from typing import Any, Dict, Optional, Union

from ..models.engine_config import EngineConfig

log = logging.getLogger("mermaid.notation.engine")

_lock = threading.Lock()
_config: Optional[EngineConfig] = None

ConfigLike = Union[EngineConfig, Dict[str, Any], None]

def _resolve(config: ConfigLike) -> EngineConfig:
    if isinstance(config, EngineConfig):
        return config
    return EngineConfig().merged(config or None)

async def initialize_engine(config: ConfigLike = None) -> EngineConfig:
    """
    Apply engine configuration for the whole process. Calling again simply
    re-applies the merged configuration.
    """
    global _config
    resolved = _resolve(config)
    with _lock:
        reapplied = _config is not None
        _config = resolved
    log.info("engine.initialized", extra={
        "theme": resolved.theme,
        "security_level": resolved.security_level,
        "log_level": resolved.log_level,
        "reapplied": reapplied,
    })
    return resolved

def is_engine_initialized() -> bool:
    return _config is not None

def get_engine_config() -> EngineConfig:
    """Current configuration, or the defaults when nothing was applied yet."""
    return _config if _config is not None else EngineConfig()

def reset_engine() -> None:
    global _config
    with _lock:
        _config = None

def init_directive(config: Optional[EngineConfig] = None) -> str:
    """Inline %%{init: ...}%% directive carrying the configuration, with stable key order."""
    cfg = (config or get_engine_config()).to_mermaid()
    cfg.pop("startOnLoad", None)
    return "%%{init: " + json.dumps(cfg, sort_keys=True, separators=(",", ":")) + "}%%"
