# src/mermaid_notation/notation/technical.py
"""Technical families: architecture, block, packet."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..models.enums import ConnectionType, Direction
from ..models.results import DiagramResult
from ..models.variants import ArchitectureData, BlockData, PacketData
from .fmt import INDENT, arrow, finish, shaped, title_comment, val

# ---------- architecture ----------

OPPOSITE_SIDE: Dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
}

def serialize_architecture(data: ArchitectureData) -> DiagramResult:
    lines: List[str] = ["architecture-beta"]
    title_comment(lines, data.title)

    for group in data.groups:
        parent = f" in {group.parent}" if group.parent else ""
        lines.append(f"{INDENT}group {group.id}({val(group.type)})[{group.name}]{parent}")

    for service in data.services:
        where = f" in {service.group}" if service.group else ""
        lines.append(f"{INDENT}service {service.id}({val(service.type)})[{service.name}]{where}")

    # edges always carry both sides; labels have no place in this grammar
    for conn in data.connections:
        side = conn.direction or Direction.RIGHT
        lines.append(f"{INDENT}{conn.source}:{val(side)} --> {val(OPPOSITE_SIDE[side])}:{conn.target}")

    return finish("architecture", lines)

# ---------- block ----------

# (head, tail) around a quoted edge label
_LABELED_EDGES: Dict[ConnectionType, Tuple[str, str]] = {
    ConnectionType.SOLID: ("--", "-->"),
    ConnectionType.ARROW: ("--", "-->"),
    ConnectionType.OPEN: ("--", "---"),
    ConnectionType.DOTTED: ("-.", ".->"),
    ConnectionType.THICK: ("==", "==>"),
}

def _block_edge(style: Optional[ConnectionType], label: Optional[str]) -> str:
    if not label:
        return arrow(style)
    head, tail = _LABELED_EDGES.get(style, _LABELED_EDGES[ConnectionType.SOLID])  # type: ignore[arg-type]
    return f'{head} "{label}" {tail}'

def serialize_block(data: BlockData) -> DiagramResult:
    lines: List[str] = ["block-beta"]
    title_comment(lines, data.title)

    if data.columns:
        lines.append(f"{INDENT}columns {data.columns}")

    for block in data.blocks:
        s = shaped(block.id, block.label, block.type, quote=True)
        if block.width and block.width > 1:
            s += f":{block.width}"
        lines.append(f"{INDENT}{s}")

    for conn in data.connections:
        lines.append(f"{INDENT}{conn.source} {_block_edge(conn.style, conn.label)} {conn.target}")

    return finish("block", lines)

# ---------- packet ----------

def serialize_packet(data: PacketData) -> DiagramResult:
    lines: List[str] = ["packet-beta"]
    if data.title:
        lines.append(f"title {data.title}")
    for bit in data.bits:
        lines.append(f'{bit.range}: "{bit.label}"')
    return finish("packet", lines)
