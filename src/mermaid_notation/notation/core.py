# src/mermaid_notation/notation/core.py
"""Core families: flowchart, sequence, class, state, ER, git history, pie."""
from __future__ import annotations

from typing import Dict, List, Set

from ..models.enums import (
    ClassRelationType,
    CommitType,
    ERConstraint,
    ERRelationType,
    InteractionType,
    ParticipantType,
    StateType,
)
from ..models.results import DiagramResult
from ..models.variants import (
    ClassData,
    ERData,
    FlowchartData,
    GitGraphData,
    PieData,
    SequenceData,
    SequenceInteraction,
    StateData,
    StateDefinition,
)
from .fmt import INDENT, arrow, finish, num, shaped, title_comment, val

# ---------- flowchart ----------

def serialize_flowchart(data: FlowchartData) -> DiagramResult:
    lines: List[str] = [f"flowchart {val(data.direction)}"]
    title_comment(lines, data.title)

    for node in data.nodes:
        s = shaped(node.id, node.label, node.shape)
        if node.style_class:
            s += f":::{node.style_class}"
        lines.append(f"{INDENT}{s}")

    for conn in data.connections:
        label = f"|{conn.label}|" if conn.label else ""
        lines.append(f"{INDENT}{conn.source} {arrow(conn.type)}{label} {conn.target}")

    for node in data.nodes:
        if node.style:
            lines.append(f"{INDENT}style {node.id} {node.style}")

    return finish("flowchart", lines)

# ---------- sequence ----------

_MESSAGE_ARROWS = {
    InteractionType.SOLID: "->>",
    InteractionType.DOTTED: "-->>",
    InteractionType.ASYNC: "-)",
}

def _interaction(i: SequenceInteraction) -> str:
    marker = "+" if i.activation else ""
    return f"{i.source}{_MESSAGE_ARROWS.get(i.type, '->>')}{marker}{i.target}: {i.message}"

def serialize_sequence(data: SequenceData) -> DiagramResult:
    lines: List[str] = ["sequenceDiagram"]
    if data.title:
        lines.append(f"{INDENT}title {data.title}")

    for p in data.participants:
        keyword = "actor" if p.type == ParticipantType.ACTOR else "participant"
        lines.append(f"{INDENT}{keyword} {p.id} as {p.label}")

    for i in data.interactions:
        lines.append(f"{INDENT}{_interaction(i)}")

    for note in data.notes:
        lines.append(f"{INDENT}Note {val(note.position)} {note.participant}: {note.text}")

    for loop in data.loops:
        lines.append(f"{INDENT}loop {loop.label}")
        lines.extend(f"{INDENT * 2}{_interaction(i)}" for i in loop.interactions)
        lines.append(f"{INDENT}end")

    for alt in data.alts:
        lines.append(f"{INDENT}alt {alt.condition}")
        lines.extend(f"{INDENT * 2}{_interaction(i)}" for i in alt.interactions)
        if alt.otherwise is not None:
            lines.append(f"{INDENT}else")
            lines.extend(f"{INDENT * 2}{_interaction(i)}" for i in alt.otherwise)
        lines.append(f"{INDENT}end")

    return finish("sequence", lines)

# ---------- class ----------

CLASS_RELATIONS: Dict[ClassRelationType, str] = {
    ClassRelationType.INHERITANCE: "<|--",
    ClassRelationType.COMPOSITION: "*--",
    ClassRelationType.AGGREGATION: "o--",
    ClassRelationType.ASSOCIATION: "-->",
    ClassRelationType.REALIZATION: "..|>",
    ClassRelationType.DEPENDENCY: "..>",
}

def serialize_class(data: ClassData) -> DiagramResult:
    lines: List[str] = ["classDiagram"]
    title_comment(lines, data.title)

    for cls in data.classes:
        if not cls.properties and not cls.methods:
            lines.append(f"{INDENT}class {cls.name}")
        else:
            lines.append(f"{INDENT}class {cls.name} {{")
            for prop in cls.properties:
                static = "$" if prop.static else ""
                lines.append(f"{INDENT * 2}{val(prop.visibility)}{prop.type} {prop.name}{static}")
            for m in cls.methods:
                ret = f" {m.return_type}" if m.return_type else ""
                abstract = "*" if m.abstract else ""
                static = "$" if m.static else ""
                params = ", ".join(m.parameters)
                lines.append(f"{INDENT * 2}{val(m.visibility)}{m.name}({params}){ret}{abstract}{static}")
            lines.append(f"{INDENT}}}")
        if cls.abstract:
            lines.append(f"{INDENT}<<abstract>> {cls.name}")
        if cls.interface:
            lines.append(f"{INDENT}<<interface>> {cls.name}")

    for rel in data.relationships:
        symbol = CLASS_RELATIONS.get(rel.type, "--")
        card = f' "{rel.multiplicity}"' if rel.multiplicity else ""
        label = f" : {rel.label}" if rel.label else ""
        lines.append(f"{INDENT}{rel.source} {symbol}{card} {rel.target}{label}")

    return finish("class", lines)

# ---------- state ----------

_STEREOTYPES = {
    StateType.CHOICE: "<<choice>>",
    StateType.FORK: "<<fork>>",
    StateType.JOIN: "<<join>>",
}

def _state_lines(state: StateDefinition, depth: int, lines: List[str]) -> None:
    pad = INDENT * depth
    if state.type == StateType.COMPOSITE or state.substates:
        lines.append(f"{pad}state {state.id} {{")
        for sub in state.substates:
            _state_lines(sub, depth + 1, lines)
        lines.append(f"{pad}}}")
    elif state.type in _STEREOTYPES:
        lines.append(f"{pad}state {state.id} {_STEREOTYPES[state.type]}")
    else:
        lines.append(f"{pad}{state.id} : {state.label}")

def serialize_state(data: StateData) -> DiagramResult:
    lines: List[str] = ["stateDiagram-v2"]
    title_comment(lines, data.title)

    if data.initial_state:
        lines.append(f"{INDENT}[*] --> {data.initial_state}")

    for state in data.states:
        _state_lines(state, 1, lines)

    for t in data.transitions:
        guard = f" [{t.guard}]" if t.guard else ""
        action = f" / {t.action}" if t.action else ""
        lines.append(f"{INDENT}{t.source} --> {t.target} : {t.trigger}{guard}{action}")

    if data.final_state:
        lines.append(f"{INDENT}{data.final_state} --> [*]")

    return finish("state", lines)

# ---------- entity relationship ----------

ER_RELATIONS: Dict[ERRelationType, str] = {
    ERRelationType.ONE_TO_ONE: "||--||",
    ERRelationType.ONE_TO_MANY: "||--o{",
    ERRelationType.MANY_TO_ONE: "}o--||",
    ERRelationType.MANY_TO_MANY: "}o--o{",
}

_KEY_CONSTRAINTS = (ERConstraint.PRIMARY_KEY, ERConstraint.FOREIGN_KEY, ERConstraint.UNIQUE_KEY)

def serialize_entity_relationship(data: ERData) -> DiagramResult:
    lines: List[str] = ["erDiagram"]
    title_comment(lines, data.title)

    for rel in data.relationships:
        lines.append(f'{INDENT}{rel.source} {ER_RELATIONS.get(rel.type, "||--||")} {rel.target} : "{rel.label}"')

    for entity in data.entities:
        lines.append("")
        lines.append(f"{INDENT}{entity.name} {{")
        for attr in entity.attributes:
            keys = [val(c) for c in attr.constraints if c in _KEY_CONSTRAINTS]
            other = [val(c) for c in attr.constraints if c not in _KEY_CONSTRAINTS]
            line = f"{INDENT * 2}{attr.type} {attr.name}"
            if keys:
                line += " " + ", ".join(keys)
            if other:
                line += f' "{", ".join(other)}"'
            lines.append(line)
        lines.append(f"{INDENT}}}")

    return finish("entity_relationship", lines)

# ---------- git history ----------

_COMMIT_TYPES = {
    CommitType.HIGHLIGHT: " type: HIGHLIGHT",
    CommitType.REVERSE: " type: REVERSE",
}

def serialize_git_history(data: GitGraphData) -> DiagramResult:
    lines: List[str] = ["gitGraph"]
    title_comment(lines, data.title)

    origins = {b.name: b.source for b in data.branches}
    created: Set[str] = {data.main_branch}
    current = data.main_branch

    def switch_to(branch: str) -> None:
        nonlocal current
        if branch == current:
            return
        if branch not in created:
            origin = origins.get(branch)
            if origin and origin != current:
                lines.append(f"{INDENT}checkout {origin}")
            lines.append(f"{INDENT}branch {branch}")
            created.add(branch)
        else:
            lines.append(f"{INDENT}checkout {branch}")
        current = branch

    for commit in data.commits:
        switch_to(commit.branch or data.main_branch)
        line = f'{INDENT}commit id: "{commit.id}"{_COMMIT_TYPES.get(commit.type, "")}'
        if commit.tag:
            line += f' tag: "{commit.tag}"'
        lines.append(line)

    for branch in data.branches:
        if branch.name not in created:
            switch_to(branch.name)

    for merge in data.merges:
        switch_to(merge.target)
        line = f"{INDENT}merge {merge.source}"
        if merge.id:
            line += f' id: "{merge.id}"'
        if merge.tag:
            line += f' tag: "{merge.tag}"'
        lines.append(line)

    return finish("git_history", lines)

# ---------- pie ----------

def serialize_pie(data: PieData) -> DiagramResult:
    if data.show_data:
        lines: List[str] = ["pie showData", f"{INDENT}title {data.title}"]
    else:
        lines = [f"pie title {data.title}"]
    for s in data.slices:
        lines.append(f'{INDENT}"{s.label}" : {num(s.value)}')
    return finish("pie", lines)
