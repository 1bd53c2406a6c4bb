# src/mermaid_notation/models/engine_config.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import FlowchartCurve, LogLevel, MermaidTheme, SecurityLevel

class _Section(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

class ThemeVariables(_Section):
    primary_color: Optional[str] = Field(default="#6366f1", alias="primaryColor")
    primary_text_color: Optional[str] = Field(default="#fff", alias="primaryTextColor")
    primary_border_color: Optional[str] = Field(default="#4f46e5", alias="primaryBorderColor")
    line_color: Optional[str] = Field(default="#e5e7eb", alias="lineColor")
    secondary_color: Optional[str] = Field(default="#f3f4f6", alias="secondaryColor")
    tertiary_color: Optional[str] = Field(default="#fef3c7", alias="tertiaryColor")
    background: Optional[str] = None
    main_bkg: Optional[str] = Field(default=None, alias="mainBkg")
    second_bkg: Optional[str] = Field(default=None, alias="secondBkg")
    tertiary_bkg: Optional[str] = Field(default=None, alias="tertiaryBkg")
    dark_mode: Optional[bool] = Field(default=None, alias="darkMode")
    font_size: Optional[int] = Field(default=None, alias="fontSize")

class FlowchartSettings(_Section):
    html_labels: bool = Field(default=True, alias="htmlLabels")
    curve: FlowchartCurve = FlowchartCurve.BASIS
    padding: Optional[int] = None
    node_spacing: Optional[int] = Field(default=None, alias="nodeSpacing")
    rank_spacing: Optional[int] = Field(default=None, alias="rankSpacing")

class GanttSettings(_Section):
    number_section_styles: int = Field(default=4, alias="numberSectionStyles")
    font_size: int = Field(default=11, alias="fontSize")
    grid_line_start_padding: Optional[int] = Field(default=None, alias="gridLineStartPadding")
    left_padding: Optional[int] = Field(default=None, alias="leftPadding")

class EngineConfig(_Section):
    """Process-wide rendering configuration handed to the engine as-is."""
    theme: MermaidTheme = MermaidTheme.DEFAULT
    start_on_load: bool = Field(default=False, alias="startOnLoad")
    security_level: SecurityLevel = Field(default=SecurityLevel.LOOSE, alias="securityLevel")
    log_level: LogLevel = Field(default=LogLevel.FATAL, alias="logLevel")
    flowchart: FlowchartSettings = Field(default_factory=FlowchartSettings)
    gantt: GanttSettings = Field(default_factory=GanttSettings)
    theme_variables: ThemeVariables = Field(default_factory=ThemeVariables, alias="themeVariables")

    def to_mermaid(self) -> Dict[str, Any]:
        """camelCase dict in the shape the engine expects; unset options are left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def merged(self, overrides: Optional[Dict[str, Any]] = None) -> "EngineConfig":
        """Return a copy with overrides laid over this config, one level deep per section."""
        if not overrides:
            return self
        base = self.to_mermaid()
        for key, value in _camelize(overrides).items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key] = {**base[key], **value}
            else:
                base[key] = value
        return EngineConfig.model_validate(base)

_SNAKE_TO_CAMEL = {
    "start_on_load": "startOnLoad",
    "security_level": "securityLevel",
    "log_level": "logLevel",
    "theme_variables": "themeVariables",
}

def _camelize(overrides: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in overrides.items():
        key = _SNAKE_TO_CAMEL.get(key, key)
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
        elif isinstance(value, Enum):
            value = value.value
        if isinstance(value, dict):
            # nested sections are validated by alias, so map snake keys there too
            value = {_nested_alias(key, k): v for k, v in value.items()}
        out[key] = value
    return out

def _nested_alias(section: str, key: str) -> str:
    model = {
        "flowchart": FlowchartSettings,
        "gantt": GanttSettings,
        "themeVariables": ThemeVariables,
    }.get(section)
    if model is None:
        return key
    field = model.model_fields.get(key)
    if field is not None and field.alias:
        return field.alias
    return key
