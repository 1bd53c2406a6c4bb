# src/mermaid_notation/notation/dispatch.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import InputError
from ..models.results import DiagramResult
from ..models.variants import DiagramVariant
from . import analysis, core, project, technical

log = logging.getLogger("mermaid.notation.serialize")

Serializer = Callable[[Any], DiagramResult]

SERIALIZERS: Dict[str, Serializer] = {
    "flowchart": core.serialize_flowchart,
    "sequence": core.serialize_sequence,
    "class": core.serialize_class,
    "state": core.serialize_state,
    "entity_relationship": core.serialize_entity_relationship,
    "git_history": core.serialize_git_history,
    "pie": core.serialize_pie,
    "timeline": project.serialize_timeline,
    "gantt": project.serialize_gantt,
    "kanban": project.serialize_kanban,
    "user_journey": project.serialize_user_journey,
    "architecture": technical.serialize_architecture,
    "block": technical.serialize_block,
    "packet": technical.serialize_packet,
    "mind_map": analysis.serialize_mind_map,
    "quadrant": analysis.serialize_quadrant,
    "tree_map": analysis.serialize_tree_map,
    "flow_network": analysis.serialize_flow_network,
    "xy_chart": analysis.serialize_xy_chart,
    "requirement": analysis.serialize_requirement,
}

_VARIANT_ADAPTER: TypeAdapter = TypeAdapter(DiagramVariant)

def _describe(errors: List[Dict[str, Any]], count: int) -> str:
    # first error as "path.to.field: reason"; the tagged-union branch name leads the loc
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    text = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    return text if count == 1 else f"{text} (+{count - 1} more)"

def parse_variant(payload: Mapping[str, Any]) -> BaseModel:
    """Validate a plain mapping against the variant union; raises InputError."""
    try:
        return _VARIANT_ADAPTER.validate_python(dict(payload))
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        raise InputError(
            f"invalid diagram payload: {_describe(errors, e.error_count())}",
            data={"kind": payload.get("kind"), "errors": errors},
        ) from e

def _invalid(kind: str, message: str) -> DiagramResult:
    return DiagramResult(definition="", type=kind, is_valid=False, error=message)

def serialize(variant: Union[BaseModel, Mapping[str, Any]]) -> DiagramResult:
    """
    Serialize any diagram variant. Never raises: malformed payloads and
    unexpected failures come back as an invalid DiagramResult.
    """
    kind = str(getattr(variant, "kind", None) or (variant.get("kind") if isinstance(variant, Mapping) else "") or "unknown")
    try:
        model = variant if isinstance(variant, BaseModel) else parse_variant(variant)
        fn = SERIALIZERS.get(getattr(model, "kind", ""))
        if fn is None:
            raise InputError(f"unsupported diagram kind: {kind}")
        return fn(model)
    except InputError as e:
        log.warning("serialize.rejected", extra={"kind": kind, "error": e.message})
        return _invalid(kind, e.message)
    except Exception as e:
        log.exception("serialize.failed", extra={"kind": kind})
        return _invalid(kind, f"{type(e).__name__}: {e}")
