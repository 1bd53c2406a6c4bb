# src/mermaid_notation/builders.py
"""Shortcuts that assemble common diagrams from domain-shaped parameters."""
from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from .models.enums import FlowchartDirection, NodeShape
from .models.results import DiagramResult
from .models.variants import (
    FlowchartConnection,
    FlowchartData,
    FlowchartNode,
    QuadrantAxis,
    QuadrantData,
    QuadrantDefinition,
    QuadrantItem,
    TimelineData,
    TimelineEntry,
)
from .notation.analysis import serialize_quadrant
from .notation.core import serialize_flowchart
from .notation.project import serialize_timeline

RISK_QUADRANTS = (
    (1, "Critical Risks"),
    (2, "Monitor Closely"),
    (3, "Low Priority"),
    (4, "Contingency Planning"),
)

def create_org_chart(title: str, leader: str, departments: Sequence[Mapping[str, Any]]) -> DiagramResult:
    """
    Organisation chart as a top-down flowchart.

    departments: [{"name": ..., "head": ..., "members": [...]}, ...]
    """
    nodes: List[FlowchartNode] = [FlowchartNode(id="CEO", label=leader, shape=NodeShape.ROUNDED)]
    connections: List[FlowchartConnection] = []

    for idx, dept in enumerate(departments):
        dept_id = f"dept{idx}"
        nodes.append(FlowchartNode(id=dept_id, label=dept["head"], shape=NodeShape.RECTANGLE))
        connections.append(FlowchartConnection(source="CEO", target=dept_id, label=dept.get("name")))
        for midx, member in enumerate(dept.get("members") or []):
            member_id = f"{dept_id}_m{midx}"
            nodes.append(FlowchartNode(id=member_id, label=member, shape=NodeShape.STADIUM))
            connections.append(FlowchartConnection(source=dept_id, target=member_id))

    return serialize_flowchart(FlowchartData(
        title=title or None,
        direction=FlowchartDirection.TOP_DOWN,
        nodes=nodes,
        connections=connections,
    ))

def create_risk_matrix(risks: Sequence[Mapping[str, Any]]) -> DiagramResult:
    """risks: [{"name": ..., "impact": 0..1, "probability": 0..1}, ...]"""
    return serialize_quadrant(QuadrantData(
        title="Risk Assessment Matrix",
        x_axis=QuadrantAxis(label="Impact", left="Low Impact", right="High Impact"),
        y_axis=QuadrantAxis(label="Probability", left="Low Probability", right="High Probability"),
        items=[QuadrantItem(label=r["name"], x=r["impact"], y=r["probability"]) for r in risks],
        quadrants=[QuadrantDefinition(number=n, label=label) for n, label in RISK_QUADRANTS],
    ))

def create_project_roadmap(phases: Sequence[Mapping[str, Any]]) -> DiagramResult:
    """phases: [{"name": ..., "quarter": ..., "milestones": [...]}, ...]"""
    entries: List[TimelineEntry] = [
        TimelineEntry(period=f"{p['quarter']} - {p['name']}", events=list(p.get("milestones") or []))
        for p in phases
    ]
    return serialize_timeline(TimelineData(title="Project Roadmap", entries=entries))
