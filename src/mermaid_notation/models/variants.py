# src/mermaid_notation/models/variants.py
"""
Input shapes for every supported diagram family.

Each family is a frozen pydantic model tagged by its ``kind`` field;
``DiagramVariant`` is the closed union over all of them. Fields that are
called ``from``/``to`` on the wire are exposed as ``source``/``target`` and
accept either name.
"""
from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field

from .enums import (
    ChartType,
    ClassRelationType,
    ClassVisibility,
    CommitType,
    ConnectionType,
    Direction,
    ElementType,
    ERConstraint,
    ERRelationType,
    FlowchartDirection,
    GanttTaskStatus,
    GroupType,
    InteractionType,
    JourneyRating,
    MindMapShape,
    NodeShape,
    NotePosition,
    ParticipantType,
    Priority,
    QuadrantNumber,
    RequirementRelationType,
    RequirementType,
    RiskLevel,
    ServiceType,
    StateType,
    VerifyMethod,
    AxisType,
)

Number = Union[int, float]

DiagramKind = Literal[
    "flowchart",
    "sequence",
    "class",
    "state",
    "entity_relationship",
    "git_history",
    "pie",
    "timeline",
    "gantt",
    "kanban",
    "user_journey",
    "architecture",
    "block",
    "packet",
    "mind_map",
    "quadrant",
    "tree_map",
    "flow_network",
    "xy_chart",
    "requirement",
]

DIAGRAM_KINDS: tuple[str, ...] = get_args(DiagramKind)

# First token of the notation each family emits.
FAMILY_KEYWORDS: Dict[str, str] = {
    "flowchart": "flowchart",
    "sequence": "sequenceDiagram",
    "class": "classDiagram",
    "state": "stateDiagram-v2",
    "entity_relationship": "erDiagram",
    "git_history": "gitGraph",
    "pie": "pie",
    "timeline": "timeline",
    "gantt": "gantt",
    "kanban": "kanban",
    "user_journey": "journey",
    "architecture": "architecture-beta",
    "block": "block-beta",
    "packet": "packet-beta",
    "mind_map": "mindmap",
    "quadrant": "quadrantChart",
    "tree_map": "treemap-beta",
    "flow_network": "sankey-beta",
    "xy_chart": "xychart-beta",
    "requirement": "requirementDiagram",
}


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=False)


# ---------- flowchart ----------

class FlowchartNode(_Value):
    id: str
    label: str
    shape: Optional[NodeShape] = None
    style: Optional[str] = None
    style_class: Optional[str] = Field(default=None, alias="class")

class FlowchartConnection(_Value):
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    label: Optional[str] = None
    type: Optional[ConnectionType] = None

class FlowchartData(_Value):
    kind: Literal["flowchart"] = "flowchart"
    title: Optional[str] = None
    direction: FlowchartDirection = FlowchartDirection.TOP_DOWN
    nodes: List[FlowchartNode] = Field(default_factory=list)
    connections: List[FlowchartConnection] = Field(default_factory=list)


# ---------- sequence ----------

class SequenceParticipant(_Value):
    id: str
    label: str
    type: ParticipantType = ParticipantType.PARTICIPANT

class SequenceInteraction(_Value):
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    message: str
    type: InteractionType = InteractionType.SOLID
    activation: bool = False

class SequenceNote(_Value):
    position: NotePosition
    participant: str
    text: str

class SequenceLoop(_Value):
    label: str
    interactions: List[SequenceInteraction] = Field(default_factory=list)

class SequenceAlt(_Value):
    condition: str
    interactions: List[SequenceInteraction] = Field(default_factory=list)
    otherwise: Optional[List[SequenceInteraction]] = Field(default=None, alias="else")

class SequenceData(_Value):
    kind: Literal["sequence"] = "sequence"
    title: Optional[str] = None
    participants: List[SequenceParticipant] = Field(default_factory=list)
    interactions: List[SequenceInteraction] = Field(default_factory=list)
    notes: List[SequenceNote] = Field(default_factory=list)
    loops: List[SequenceLoop] = Field(default_factory=list)
    alts: List[SequenceAlt] = Field(default_factory=list)


# ---------- class ----------

class ClassProperty(_Value):
    name: str
    type: str
    visibility: ClassVisibility = ClassVisibility.PUBLIC
    static: bool = False

class ClassMethod(_Value):
    name: str
    parameters: List[str] = Field(default_factory=list)
    return_type: Optional[str] = Field(default=None, alias="returnType")
    visibility: ClassVisibility = ClassVisibility.PUBLIC
    abstract: bool = False
    static: bool = False

class ClassDefinition(_Value):
    name: str
    properties: List[ClassProperty] = Field(default_factory=list)
    methods: List[ClassMethod] = Field(default_factory=list)
    abstract: bool = False
    interface: bool = False

class ClassRelationship(_Value):
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    type: ClassRelationType
    label: Optional[str] = None
    multiplicity: Optional[str] = None

class ClassData(_Value):
    kind: Literal["class"] = "class"
    title: Optional[str] = None
    classes: List[ClassDefinition] = Field(default_factory=list)
    relationships: List[ClassRelationship] = Field(default_factory=list)


# ---------- state ----------

class StateDefinition(_Value):
    id: str
    label: str
    type: StateType = StateType.NORMAL
    substates: List["StateDefinition"] = Field(default_factory=list)

class StateTransition(_Value):
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    trigger: str
    guard: Optional[str] = None
    action: Optional[str] = None

class StateData(_Value):
    kind: Literal["state"] = "state"
    title: Optional[str] = None
    states: List[StateDefinition] = Field(default_factory=list)
    transitions: List[StateTransition] = Field(default_factory=list)
    initial_state: Optional[str] = Field(default=None, alias="initialState")
    final_state: Optional[str] = Field(default=None, alias="finalState")


# ---------- entity relationship ----------

class ERAttribute(_Value):
    name: str
    type: str
    constraints: List[ERConstraint] = Field(default_factory=list)

class EREntity(_Value):
    name: str
    attributes: List[ERAttribute] = Field(default_factory=list)

class ERRelationship(_Value):
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    type: ERRelationType
    label: str

class ERData(_Value):
    kind: Literal["entity_relationship"] = "entity_relationship"
    title: Optional[str] = None
    entities: List[EREntity] = Field(default_factory=list)
    relationships: List[ERRelationship] = Field(default_factory=list)


# ---------- git history ----------

class GitCommit(_Value):
    id: str
    message: str = ""
    branch: Optional[str] = None
    tag: Optional[str] = None
    type: CommitType = CommitType.NORMAL

class GitBranch(_Value):
    name: str
    source: Optional[str] = Field(default=None, alias="from")

class GitMerge(_Value):
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    id: Optional[str] = None
    tag: Optional[str] = None

class GitGraphData(_Value):
    kind: Literal["git_history"] = "git_history"
    title: Optional[str] = None
    main_branch: str = Field(default="main", alias="mainBranch")
    commits: List[GitCommit] = Field(default_factory=list)
    branches: List[GitBranch] = Field(default_factory=list)
    merges: List[GitMerge] = Field(default_factory=list)


# ---------- pie ----------

class PieSlice(_Value):
    label: str
    value: Number
    color: Optional[str] = None

class PieData(_Value):
    kind: Literal["pie"] = "pie"
    title: str
    show_data: bool = Field(default=False, alias="showData")
    slices: List[PieSlice] = Field(default_factory=list)


# ---------- timeline ----------

class TimelineEntry(_Value):
    period: str
    events: List[str] = Field(default_factory=list)

class TimelineData(_Value):
    kind: Literal["timeline"] = "timeline"
    title: str
    entries: List[TimelineEntry] = Field(default_factory=list)


# ---------- gantt ----------

class GanttTask(_Value):
    name: str
    id: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    after: Optional[str] = None
    duration: Optional[str] = None
    status: Optional[GanttTaskStatus] = None

class GanttSection(_Value):
    name: str
    tasks: List[GanttTask] = Field(default_factory=list)

class GanttData(_Value):
    kind: Literal["gantt"] = "gantt"
    title: str
    date_format: Optional[str] = Field(default=None, alias="dateFormat")
    axis_format: Optional[str] = Field(default=None, alias="axisFormat")
    excludes: List[str] = Field(default_factory=list)
    sections: List[GanttSection] = Field(default_factory=list)


# ---------- kanban ----------

class KanbanCard(_Value):
    id: str
    title: str
    assignee: Optional[str] = None
    labels: List[str] = Field(default_factory=list)
    priority: Optional[Priority] = None

class KanbanColumn(_Value):
    name: str
    id: Optional[str] = None
    cards: List[KanbanCard] = Field(default_factory=list)
    limit: Optional[int] = None

class KanbanData(_Value):
    kind: Literal["kanban"] = "kanban"
    title: str
    columns: List[KanbanColumn] = Field(default_factory=list)


# ---------- user journey ----------

class JourneyStep(_Value):
    action: str
    rating: JourneyRating
    actor: str = ""

class JourneyStage(_Value):
    name: str
    steps: List[JourneyStep] = Field(default_factory=list)

class UserJourneyData(_Value):
    kind: Literal["user_journey"] = "user_journey"
    title: str
    actor: str = ""
    stages: List[JourneyStage] = Field(default_factory=list)


# ---------- architecture ----------

class ArchitectureGroup(_Value):
    id: str
    name: str
    type: GroupType = GroupType.CLOUD
    parent: Optional[str] = None

class ArchitectureService(_Value):
    id: str
    name: str
    type: ServiceType = ServiceType.SERVER
    group: Optional[str] = None

class ArchitectureConnection(_Value):
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    direction: Optional[Direction] = None
    label: Optional[str] = None

class ArchitectureData(_Value):
    kind: Literal["architecture"] = "architecture"
    title: Optional[str] = None
    groups: List[ArchitectureGroup] = Field(default_factory=list)
    services: List[ArchitectureService] = Field(default_factory=list)
    connections: List[ArchitectureConnection] = Field(default_factory=list)


# ---------- block ----------

class BlockDefinition(_Value):
    id: str
    label: str
    type: Optional[NodeShape] = None
    width: Optional[int] = None

class BlockConnection(_Value):
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    label: Optional[str] = None
    style: Optional[ConnectionType] = None

class BlockData(_Value):
    kind: Literal["block"] = "block"
    title: Optional[str] = None
    columns: Optional[int] = None
    blocks: List[BlockDefinition] = Field(default_factory=list)
    connections: List[BlockConnection] = Field(default_factory=list)


# ---------- packet ----------

class PacketBit(_Value):
    range: str
    label: str
    color: Optional[str] = None

class PacketData(_Value):
    kind: Literal["packet"] = "packet"
    title: Optional[str] = None
    bits: List[PacketBit] = Field(default_factory=list)


# ---------- mind map ----------

class MindMapNode(_Value):
    label: str
    children: List["MindMapNode"] = Field(default_factory=list)
    icon: Optional[str] = None
    shape: Optional[MindMapShape] = None

class MindMapData(_Value):
    kind: Literal["mind_map"] = "mind_map"
    title: Optional[str] = None
    root: MindMapNode


# ---------- quadrant ----------

class QuadrantAxis(_Value):
    label: Optional[str] = None
    left: str
    right: str

class QuadrantItem(_Value):
    label: str
    x: Number
    y: Number
    size: Optional[Number] = None
    color: Optional[str] = None

class QuadrantDefinition(_Value):
    number: QuadrantNumber
    label: str
    color: Optional[str] = None

class QuadrantData(_Value):
    kind: Literal["quadrant"] = "quadrant"
    title: str
    x_axis: QuadrantAxis = Field(alias="xAxis")
    y_axis: QuadrantAxis = Field(alias="yAxis")
    items: List[QuadrantItem] = Field(default_factory=list)
    quadrants: List[QuadrantDefinition] = Field(default_factory=list)


# ---------- tree map ----------

class TreeMapNode(_Value):
    name: str
    value: Optional[Number] = None
    children: List["TreeMapNode"] = Field(default_factory=list)
    color: Optional[str] = None

class TreeMapData(_Value):
    kind: Literal["tree_map"] = "tree_map"
    title: str
    root: TreeMapNode


# ---------- flow network (sankey) ----------

class SankeyFlow(_Value):
    source: str
    target: str
    value: Number
    label: Optional[str] = None

class SankeyData(_Value):
    kind: Literal["flow_network"] = "flow_network"
    title: Optional[str] = None
    flows: List[SankeyFlow] = Field(default_factory=list)


# ---------- xy chart ----------

class XYAxis(_Value):
    label: Optional[str] = None
    values: Optional[List[Union[int, float, str]]] = None
    min: Optional[Number] = None
    max: Optional[Number] = None
    type: Optional[AxisType] = None

class XYDataset(_Value):
    label: str = ""
    type: ChartType = ChartType.BAR
    data: List[Optional[Number]] = Field(default_factory=list)
    color: Optional[str] = None
    fill: bool = False

class XYChartData(_Value):
    kind: Literal["xy_chart"] = "xy_chart"
    title: str
    horizontal: bool = False
    x_axis: XYAxis = Field(default_factory=XYAxis, alias="xAxis")
    y_axis: XYAxis = Field(default_factory=XYAxis, alias="yAxis")
    datasets: List[XYDataset] = Field(default_factory=list)


# ---------- requirement ----------

class RequirementDefinition(_Value):
    id: str
    text: str
    name: Optional[str] = None
    type: Optional[RequirementType] = None
    risk: Optional[RiskLevel] = None
    verify_method: Optional[VerifyMethod] = Field(default=None, alias="verifyMethod")

class RequirementElement(_Value):
    id: str
    type: ElementType = ElementType.MODULE
    docref: Optional[str] = None

class RequirementRelationship(_Value):
    source: str
    target: str
    type: RequirementRelationType

class RequirementData(_Value):
    kind: Literal["requirement"] = "requirement"
    title: Optional[str] = None
    requirements: List[RequirementDefinition] = Field(default_factory=list)
    elements: List[RequirementElement] = Field(default_factory=list)
    relationships: List[RequirementRelationship] = Field(default_factory=list)


DiagramVariant = Annotated[
    Union[
        FlowchartData,
        SequenceData,
        ClassData,
        StateData,
        ERData,
        GitGraphData,
        PieData,
        TimelineData,
        GanttData,
        KanbanData,
        UserJourneyData,
        ArchitectureData,
        BlockData,
        PacketData,
        MindMapData,
        QuadrantData,
        TreeMapData,
        SankeyData,
        XYChartData,
        RequirementData,
    ],
    Field(discriminator="kind"),
]
