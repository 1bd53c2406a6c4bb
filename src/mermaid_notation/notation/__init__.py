from .analysis import (
    serialize_flow_network,
    serialize_mind_map,
    serialize_quadrant,
    serialize_requirement,
    serialize_tree_map,
    serialize_xy_chart,
)
from .core import (
    serialize_class,
    serialize_entity_relationship,
    serialize_flowchart,
    serialize_git_history,
    serialize_pie,
    serialize_sequence,
    serialize_state,
)
from .dispatch import SERIALIZERS, parse_variant, serialize
from .project import serialize_gantt, serialize_kanban, serialize_timeline, serialize_user_journey
from .technical import serialize_architecture, serialize_block, serialize_packet

__all__ = [
    "SERIALIZERS",
    "parse_variant",
    "serialize",
    "serialize_architecture",
    "serialize_block",
    "serialize_class",
    "serialize_entity_relationship",
    "serialize_flow_network",
    "serialize_flowchart",
    "serialize_gantt",
    "serialize_git_history",
    "serialize_kanban",
    "serialize_mind_map",
    "serialize_packet",
    "serialize_pie",
    "serialize_quadrant",
    "serialize_requirement",
    "serialize_sequence",
    "serialize_state",
    "serialize_timeline",
    "serialize_tree_map",
    "serialize_user_journey",
    "serialize_xy_chart",
]
