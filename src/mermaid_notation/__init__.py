"""Structured diagram data to Mermaid notation, with permissive validation and safe rendering."""

from .builders import create_org_chart, create_project_roadmap, create_risk_matrix
from .engine import (
    DiagramService,
    KrokiRenderHost,
    RenderHost,
    SafeRenderer,
    configure_default_host,
    get_engine_config,
    initialize_engine,
    render,
    sanitize_mermaid,
    validate,
)
from .errors import (
    DiagramError,
    InputError,
    PreconditionFailure,
    RenderCollisionError,
    RenderFailure,
)
from .models import DiagramResult, EngineConfig, RenderResult, ValidationResult
from .notation import serialize

__version__ = "0.1.0"

__all__ = [
    "DiagramError",
    "DiagramResult",
    "DiagramService",
    "EngineConfig",
    "InputError",
    "KrokiRenderHost",
    "PreconditionFailure",
    "RenderCollisionError",
    "RenderFailure",
    "RenderHost",
    "RenderResult",
    "SafeRenderer",
    "ValidationResult",
    "configure_default_host",
    "create_org_chart",
    "create_project_roadmap",
    "create_risk_matrix",
    "get_engine_config",
    "initialize_engine",
    "render",
    "sanitize_mermaid",
    "serialize",
    "validate",
]
