# src/mermaid_notation/engine/sanity.py
from __future__ import annotations

import logging
import re
from typing import FrozenSet

from ..models.results import ValidationResult
from ..utils.logging import preview

log = logging.getLogger("mermaid.notation.sanity")

KNOWN_DIAGRAM_TYPES: FrozenSet[str] = frozenset({
    "graph", "flowchart", "sequenceDiagram", "classDiagram",
    "stateDiagram-v2", "stateDiagram", "erDiagram", "gitGraph", "pie",
    "timeline", "gantt", "kanban", "journey", "architecture-beta",
    "block-beta", "packet-beta", "mindmap", "quadrantChart",
    "requirementDiagram", "sankey-beta", "xychart-beta", "treemap-beta",
    "C4Context", "C4Container", "C4Component", "C4Dynamic", "C4Deployment",
})

FENCE = "```"

def sanitize_mermaid(text: str) -> str:
    s = (text or "").strip()
    if s.startswith(FENCE):
        s = re.sub(r"^```[a-zA-Z0-9]*\s*", "", s)
        s = re.sub(r"\s*```$", "", s)
    return s.strip()

def first_token(definition: str) -> str:
    s = (definition or "").strip()
    if not s:
        return ""
    head = s.split("\n", 1)[0].strip()
    return head.split(" ", 1)[0]

def validate(definition: str, *, suppress_errors: bool = False) -> ValidationResult:
    """
    Permissive pre-render check. Only an empty definition is an error; an
    unknown leading keyword or stray code fences are reported as warnings and
    the engine is left to judge the rest.
    """
    result = ValidationResult()

    if not definition or not definition.strip():
        result.errors.append("Definition is empty")
        result.is_valid = suppress_errors
        return result

    token = first_token(definition)
    if token not in KNOWN_DIAGRAM_TYPES:
        result.warnings.append(f"Diagram type '{token}' may not be recognized")

    if FENCE in definition:
        result.warnings.append("Definition contains markdown code fence markers")

    if suppress_errors:
        result.is_valid = True

    if result.warnings:
        log.debug("validate.warnings", extra={
            "warnings": result.warnings,
            "head": preview(definition, 80),
        })
    return result
