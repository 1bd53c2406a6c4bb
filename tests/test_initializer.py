import asyncio
import json

import pytest
from pydantic import ValidationError

from mermaid_notation.engine.initializer import (
    get_engine_config,
    init_directive,
    initialize_engine,
    is_engine_initialized,
    reset_engine,
)
from mermaid_notation.models.engine_config import EngineConfig


def test_defaults_before_initialization():
    assert is_engine_initialized() is False
    cfg = get_engine_config()
    assert cfg.theme == "default"
    assert cfg.security_level == "loose"
    assert cfg.log_level == "fatal"
    assert cfg.start_on_load is False
    assert cfg.flowchart.curve == "basis"
    assert cfg.flowchart.html_labels is True
    assert cfg.gantt.number_section_styles == 4
    assert cfg.gantt.font_size == 11
    assert cfg.theme_variables.primary_color == "#6366f1"
    assert cfg.theme_variables.primary_border_color == "#4f46e5"


def test_overrides_merge_per_section():
    cfg = asyncio.run(initialize_engine({"theme": "dark", "flowchart": {"curve": "linear"}}))
    assert is_engine_initialized()
    assert cfg.theme == "dark"
    assert cfg.flowchart.curve == "linear"
    assert cfg.flowchart.html_labels is True
    assert get_engine_config() == cfg


def test_snake_case_overrides_are_accepted():
    cfg = asyncio.run(initialize_engine({
        "security_level": "strict",
        "gantt": {"font_size": 14},
        "theme_variables": {"primary_color": "#000000"},
    }))
    assert cfg.security_level == "strict"
    assert cfg.gantt.font_size == 14
    assert cfg.gantt.number_section_styles == 4
    assert cfg.theme_variables.primary_color == "#000000"
    assert cfg.theme_variables.line_color == "#e5e7eb"


def test_reinitializing_reapplies_configuration():
    asyncio.run(initialize_engine({"theme": "forest"}))
    asyncio.run(initialize_engine(EngineConfig(theme="neutral")))
    assert get_engine_config().theme == "neutral"
    reset_engine()
    assert is_engine_initialized() is False


def test_invalid_option_is_rejected():
    with pytest.raises(ValidationError):
        asyncio.run(initialize_engine({"theme": "sparkly"}))


def test_init_directive_is_stable_json():
    directive = init_directive(EngineConfig())
    assert directive == init_directive(EngineConfig())
    assert directive.startswith("%%{init: ") and directive.endswith("}%%")

    payload = json.loads(directive[len("%%{init: "):-len("}%%")])
    assert payload["theme"] == "default"
    assert payload["securityLevel"] == "loose"
    assert payload["themeVariables"]["primaryColor"] == "#6366f1"
    assert "startOnLoad" not in payload
    assert "padding" not in payload["flowchart"]
