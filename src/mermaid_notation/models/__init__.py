from .engine_config import EngineConfig, FlowchartSettings, GanttSettings, ThemeVariables
from .results import DiagramResult, RenderResult, ValidationResult
from .variants import DIAGRAM_KINDS, FAMILY_KEYWORDS, DiagramKind, DiagramVariant

__all__ = [
    "DIAGRAM_KINDS",
    "FAMILY_KEYWORDS",
    "DiagramKind",
    "DiagramResult",
    "DiagramVariant",
    "EngineConfig",
    "FlowchartSettings",
    "GanttSettings",
    "RenderResult",
    "ThemeVariables",
    "ValidationResult",
]
