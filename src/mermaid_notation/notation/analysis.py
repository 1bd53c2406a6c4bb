# src/mermaid_notation/notation/analysis.py
"""Business-analysis families: mind map, quadrant, tree map, flow network, xy chart, requirement."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models.enums import ChartType, MindMapShape, RequirementType
from ..models.results import DiagramResult
from ..models.variants import (
    MindMapData,
    MindMapNode,
    QuadrantData,
    RequirementData,
    SankeyData,
    TreeMapData,
    TreeMapNode,
    XYAxis,
    XYChartData,
)
from .fmt import INDENT, finish, num, title_comment, val

# ---------- mind map ----------

MINDMAP_SHAPES = {
    MindMapShape.CIRCLE: ("((", "))"),
    MindMapShape.SQUARE: ("[", "]"),
    MindMapShape.HEXAGON: ("{{", "}}"),
    MindMapShape.CLOUD: (")", "("),
}

def _mindmap_lines(root: MindMapNode, lines: List[str]) -> None:
    # explicit stack so nesting depth is bounded by memory only
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        pad = "  " * (depth + 1)
        left, right = MINDMAP_SHAPES.get(node.shape, ("", "")) if node.shape else ("", "")
        lines.append(f"{pad}{left}{node.label}{right}")
        if node.icon:
            lines.append(f"{pad}  ::icon({node.icon})")
        stack.extend((child, depth + 1) for child in reversed(node.children))

def serialize_mind_map(data: MindMapData) -> DiagramResult:
    lines: List[str] = ["mindmap"]
    title_comment(lines, data.title)
    _mindmap_lines(data.root, lines)
    return finish("mind_map", lines)

# ---------- quadrant ----------

def serialize_quadrant(data: QuadrantData) -> DiagramResult:
    lines: List[str] = [
        "quadrantChart",
        f"{INDENT}title {data.title}",
        f"{INDENT}x-axis {data.x_axis.left} --> {data.x_axis.right}",
        f"{INDENT}y-axis {data.y_axis.left} --> {data.y_axis.right}",
    ]

    for quad in data.quadrants:
        lines.append(f"{INDENT}quadrant-{int(quad.number)} {quad.label}")

    for item in data.items:
        line = f'{INDENT}"{item.label}": [{num(item.x)}, {num(item.y)}]'
        styles: List[str] = []
        if item.size is not None:
            styles.append(f"radius: {num(item.size)}")
        if item.color:
            styles.append(f"color: {item.color}")
        if styles:
            line += " " + ", ".join(styles)
        lines.append(line)

    return finish("quadrant", lines)

# ---------- tree map ----------

def _treemap_lines(root: TreeMapNode, lines: List[str]) -> None:
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        value = f": {num(node.value)}" if node.value is not None else ""
        lines.append(f'{"  " * depth}"{node.name}"{value}')
        stack.extend((child, depth + 1) for child in reversed(node.children))

def serialize_tree_map(data: TreeMapData) -> DiagramResult:
    lines: List[str] = ["treemap-beta"]
    title_comment(lines, data.title)
    _treemap_lines(data.root, lines)
    return finish("tree_map", lines)

# ---------- flow network ----------

def csv_field(text: str) -> str:
    if any(ch in text for ch in (",", '"', "\n")):
        return '"' + text.replace('"', '""') + '"'
    return text

def serialize_flow_network(data: SankeyData) -> DiagramResult:
    lines: List[str] = ["sankey-beta"]
    title_comment(lines, data.title)
    lines.append("")
    for flow in data.flows:
        lines.append(f"{csv_field(flow.source)},{csv_field(flow.target)},{num(flow.value)}")
    return finish("flow_network", lines)

# ---------- xy chart ----------

def _axis_values(values: List[Any]) -> str:
    return ", ".join(f'"{v}"' if isinstance(v, str) else num(v) for v in values)

def _axis_label(axis: XYAxis) -> str:
    return f'"{axis.label}" ' if axis.label else ""

def _bound(v: Optional[Any], default: int) -> str:
    return num(default if v is None else v)

def serialize_xy_chart(data: XYChartData) -> DiagramResult:
    head = "xychart-beta horizontal" if data.horizontal else "xychart-beta"
    lines: List[str] = [head, f'{INDENT}title "{data.title}"']

    x = data.x_axis
    if x.values:
        lines.append(f"{INDENT}x-axis {_axis_label(x)}[{_axis_values(x.values)}]")
    elif x.min is not None and x.max is not None:
        lines.append(f"{INDENT}x-axis {_axis_label(x)}{num(x.min)} --> {num(x.max)}")
    elif x.label:
        lines.append(f'{INDENT}x-axis "{x.label}"')

    y = data.y_axis
    lines.append(f"{INDENT}y-axis {_axis_label(y)}{_bound(y.min, 0)} --> {_bound(y.max, 100)}")

    for ds in data.datasets:
        # the engine only plots bars and lines
        series = "bar" if ds.type == ChartType.BAR else "line"
        points = ", ".join("" if p is None else num(p) for p in ds.data)
        lines.append(f"{INDENT}{series} [{points}]")

    return finish("xy_chart", lines)

# ---------- requirement ----------

REQUIREMENT_KEYWORDS: Dict[Optional[RequirementType], str] = {
    None: "requirement",
    RequirementType.FUNCTIONAL: "functionalRequirement",
    RequirementType.PERFORMANCE: "performanceRequirement",
    RequirementType.INTERFACE: "interfaceRequirement",
    RequirementType.DESIGN: "designConstraint",
}

def serialize_requirement(data: RequirementData) -> DiagramResult:
    lines: List[str] = ["requirementDiagram"]
    title_comment(lines, data.title)

    for req in data.requirements:
        lines.append(f"{INDENT}{REQUIREMENT_KEYWORDS[req.type]} {req.name or req.id} {{")
        lines.append(f"{INDENT * 2}id: {req.id}")
        lines.append(f"{INDENT * 2}text: {req.text}")
        if req.risk:
            lines.append(f"{INDENT * 2}risk: {val(req.risk)}")
        if req.verify_method:
            lines.append(f"{INDENT * 2}verifymethod: {val(req.verify_method)}")
        lines.append(f"{INDENT}}}")

    for elem in data.elements:
        lines.append(f"{INDENT}element {elem.id} {{")
        lines.append(f"{INDENT * 2}type: {val(elem.type)}")
        if elem.docref:
            lines.append(f"{INDENT * 2}docref: {elem.docref}")
        lines.append(f"{INDENT}}}")

    for rel in data.relationships:
        lines.append(f"{INDENT}{rel.source} - {val(rel.type)} -> {rel.target}")

    return finish("requirement", lines)
