# src/mermaid_notation/tools/mermaid_tools.py
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from ..engine.hosts import KrokiRenderHost
from ..engine.initializer import initialize_engine, is_engine_initialized
from ..engine.renderer import SafeRenderer, configure_default_host
from ..engine.sanity import sanitize_mermaid, validate
from ..engine.service import DiagramService
from ..errors import InputError, PreconditionFailure, handle_exception
from ..notation.dispatch import serialize
from ..settings import Settings
from ..utils.logging import preview

log = logging.getLogger("mermaid.notation.tools")

def register_mermaid_tools(mcp: FastMCP) -> None:
    settings = Settings.from_env()
    host = KrokiRenderHost.from_settings(settings)
    configure_default_host(host)
    service: Optional[DiagramService] = (
        DiagramService.from_settings(SafeRenderer(host), settings) if host is not None else None
    )
    engine_overrides = {"theme": settings.theme, "securityLevel": settings.security_level}

    log.info("tool.register", extra={
        "tools": ["diagram.mermaid.serialize", "diagram.mermaid.validate", "diagram.mermaid.render"],
        "render_host": host.endpoint if host else None,
        "cache_enabled": settings.cache_enabled,
        "cache_size": settings.cache_max_size,
    })

    @mcp.tool(name="diagram.mermaid.serialize", title="Serialize Diagram Data to Mermaid")
    async def diagram_mermaid_serialize(diagram: Dict[str, Any]) -> Dict[str, Any]:
        """
        Turn structured diagram data into Mermaid notation.
          - diagram: payload tagged by "kind" (flowchart, sequence, gantt, ...)
        """
        t0 = time.time()
        result = serialize(diagram)
        log.info("tool.response", extra={
            "tool": "serialize",
            "kind": result.type,
            "is_valid": result.is_valid,
            "len": len(result.definition),
            "took_ms": int((time.time() - t0) * 1000),
        })
        return result.model_dump()

    @mcp.tool(name="diagram.mermaid.validate", title="Validate Mermaid Notation")
    async def diagram_mermaid_validate(
        definition: str,
        suppress_errors: bool = False,
        strip_fences: bool = False,
    ) -> Dict[str, Any]:
        """
        Permissive check of Mermaid notation.
          - definition: notation text
          - suppress_errors: report valid even when errors were found
          - strip_fences: remove a surrounding markdown code fence first
        """
        text = sanitize_mermaid(definition) if strip_fences else definition
        out = validate(text, suppress_errors=suppress_errors).model_dump()
        if strip_fences:
            out["definition"] = text
        return out

    @mcp.tool(name="diagram.mermaid.render", title="Render Mermaid Notation to SVG")
    async def diagram_mermaid_render(
        definition: Optional[str] = None,
        diagram: Optional[Dict[str, Any]] = None,
        container_id: Optional[str] = None,
        use_cache: bool = True,
    ) -> Dict[str, Any]:
        """
        Render notation (or structured diagram data) to SVG.
        A failed render still returns fallback HTML describing the error.
        """
        try:
            if service is None:
                raise PreconditionFailure("No render host configured; set KROKI_URL")
            if not is_engine_initialized():
                await initialize_engine(engine_overrides)

            diagram_type = "unknown"
            if diagram is not None:
                serialized = serialize(diagram)
                if not serialized.definition:
                    raise InputError(serialized.error or "invalid diagram payload")
                definition, diagram_type = serialized.definition, serialized.type
            if definition is None:
                raise InputError("either 'definition' or 'diagram' is required")

            log.info("tool.request", extra={
                "tool": "render",
                "type": diagram_type,
                "definition_preview": preview(definition, 120),
            })
            result = await service.render(
                definition, diagram_type, cache=use_cache, container_id=container_id
            )
            return result.to_payload()
        except Exception as e:
            log.warning("tool.render.failed", extra={"error": str(e)})
            return handle_exception(e, default_message="render failed")
