# src/mermaid_notation/notation/fmt.py
"""Small formatting helpers shared by every family serializer."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Optional

from ..engine.sanity import validate
from ..models.enums import ConnectionType, NodeShape
from ..models.results import DiagramResult

log = logging.getLogger("mermaid.notation.serialize")

INDENT = "    "

# label goes between the brackets
SHAPE_BRACKETS = {
    NodeShape.RECTANGLE: ("[", "]"),
    NodeShape.ROUNDED: ("(", ")"),
    NodeShape.STADIUM: ("([", "])"),
    NodeShape.SUBROUTINE: ("[[", "]]"),
    NodeShape.CYLINDRICAL: ("[(", ")]"),
    NodeShape.CIRCLE: ("((", "))"),
    NodeShape.RHOMBUS: ("{", "}"),
    NodeShape.HEXAGON: ("{{", "}}"),
    NodeShape.PARALLELOGRAM: ("[/", "/]"),
    NodeShape.TRAPEZOID: ("[\\", "\\]"),
}

ARROWS = {
    ConnectionType.SOLID: "-->",
    ConnectionType.ARROW: "-->",
    ConnectionType.OPEN: "---",
    ConnectionType.DOTTED: "-.->",
    ConnectionType.THICK: "==>",
}

def shaped(node_id: str, label: str, shape: Optional[NodeShape], *, quote: bool = False) -> str:
    left, right = SHAPE_BRACKETS.get(shape, SHAPE_BRACKETS[NodeShape.RECTANGLE])  # type: ignore[arg-type]
    text = f'"{label}"' if quote else label
    return f"{node_id}{left}{text}{right}"

def arrow(kind: Optional[ConnectionType]) -> str:
    return ARROWS.get(kind, "-->")  # type: ignore[arg-type]

def num(v: Any) -> str:
    """Numbers verbatim; integral floats lose the trailing .0."""
    if isinstance(v, bool):
        return str(v).lower()
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)

def val(v: Any) -> str:
    """Enum members print as their value."""
    return str(v.value) if isinstance(v, Enum) else str(v)

def title_comment(lines: List[str], title: Optional[str]) -> None:
    # families without a title statement keep it as a comment after the keyword
    if title:
        lines.append(f"%% title: {title}")

def finish(kind: str, lines: List[str], *, trim: bool = False) -> DiagramResult:
    definition = "\n".join(lines)
    if trim:
        definition = definition.strip()
    check = validate(definition)
    if not check.is_valid:
        log.warning("serialize.invalid", extra={"kind": kind, "errors": check.errors})
    return DiagramResult(
        definition=definition,
        type=kind,
        is_valid=check.is_valid,
        error=", ".join(check.errors) if not check.is_valid else None,
        warnings=list(check.warnings),
    )
