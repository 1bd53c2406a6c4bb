from .hosts import ContainerRegistryHost, KrokiRenderHost, RenderHost
from .initializer import (
    get_engine_config,
    init_directive,
    initialize_engine,
    is_engine_initialized,
    reset_engine,
)
from .renderer import SafeRenderer, configure_default_host, error_fallback, get_default_host, render
from .sanity import sanitize_mermaid, validate
from .service import DiagramService

__all__ = [
    "ContainerRegistryHost",
    "DiagramService",
    "KrokiRenderHost",
    "RenderHost",
    "SafeRenderer",
    "configure_default_host",
    "error_fallback",
    "get_default_host",
    "get_engine_config",
    "init_directive",
    "initialize_engine",
    "is_engine_initialized",
    "render",
    "reset_engine",
    "sanitize_mermaid",
    "validate",
]
