# src/mermaid_notation/notation/project.py
"""Project-management families: timeline, gantt, kanban, user journey."""
from __future__ import annotations

import re
from typing import List

from ..models.enums import Priority
from ..models.results import DiagramResult
from ..models.variants import GanttData, GanttTask, KanbanData, TimelineData, UserJourneyData
from .fmt import finish, title_comment, val

# ---------- timeline ----------

# continuation events line up under the first one
TIMELINE_CONTINUATION = " " * 8

def serialize_timeline(data: TimelineData) -> DiagramResult:
    # timeline lines must start at column zero
    lines: List[str] = ["timeline", f"title {data.title}", ""]

    for entry in data.entries:
        if entry.events:
            lines.append(f"{entry.period} : {entry.events[0]}")
            lines.extend(f"{TIMELINE_CONTINUATION}: {event}" for event in entry.events[1:])
        else:
            lines.append(entry.period)
        lines.append("")

    return finish("timeline", lines, trim=True)

# ---------- gantt ----------

def _task_timing(task: GanttTask) -> List[str]:
    if task.after:
        return [f"after {task.after}"] + ([task.duration] if task.duration else [])
    if task.start_date:
        if task.duration:
            return [task.start_date, task.duration]
        if task.end_date:
            return [task.start_date, task.end_date]
        return [task.start_date]
    if task.duration:
        return [task.duration]
    return []

def gantt_task_line(task: GanttTask) -> str:
    parts: List[str] = []
    if task.status:
        parts.append(val(task.status))
    if task.id:
        parts.append(task.id)
    parts.extend(_task_timing(task))
    return f"{task.name} :{', '.join(parts)}"

def serialize_gantt(data: GanttData) -> DiagramResult:
    lines: List[str] = [
        "gantt",
        f"title {data.title}",
        f"dateFormat {data.date_format or 'YYYY-MM-DD'}",
    ]
    if data.axis_format:
        lines.append(f"axisFormat {data.axis_format}")
    if data.excludes:
        lines.append(f"excludes {' '.join(data.excludes)}")

    for idx, section in enumerate(data.sections):
        if idx > 0:
            lines.append("")
        lines.append(f"section {section.name}")
        lines.extend(gantt_task_line(task) for task in section.tasks)

    return finish("gantt", lines)

# ---------- kanban ----------

_KANBAN_PRIORITY = {
    Priority.LOW: "Low",
    Priority.MEDIUM: "Medium",
    Priority.HIGH: "High",
    Priority.CRITICAL: "Very High",
}

def _slug(name: str) -> str:
    s = re.sub(r"[^A-Za-z0-9_]+", "_", name.strip()).strip("_")
    return s or "column"

def serialize_kanban(data: KanbanData) -> DiagramResult:
    lines: List[str] = ["kanban"]
    title_comment(lines, data.title)

    for column in data.columns:
        lines.append(f"{column.id or _slug(column.name)}[{column.name}]")
        for card in column.cards:
            meta: List[str] = []
            if card.assignee:
                meta.append(f"assigned: '{card.assignee}'")
            if card.labels:
                meta.append(f"ticket: '{', '.join(card.labels)}'")
            if card.priority:
                meta.append(f"priority: '{_KANBAN_PRIORITY[card.priority]}'")
            suffix = f"@{{ {', '.join(meta)} }}" if meta else ""
            lines.append(f"  {card.id}[{card.title}]{suffix}")

    return finish("kanban", lines)

# ---------- user journey ----------

def serialize_user_journey(data: UserJourneyData) -> DiagramResult:
    lines: List[str] = ["journey", f"title {data.title}"]

    for stage in data.stages:
        lines.append(f"section {stage.name}")
        for step in stage.steps:
            actor = step.actor or data.actor
            lines.append(f"  {step.action}: {int(step.rating)}: {actor}")

    return finish("user_journey", lines)
