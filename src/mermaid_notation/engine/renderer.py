# src/mermaid_notation/engine/renderer.py
from __future__ import annotations

import html
import logging
import random
import time
from typing import Callable, Optional

from ..errors import PreconditionFailure, RenderCollisionError, RenderFailure
from ..models.results import RenderResult
from ..utils.logging import preview, want_verbose_render
from .hosts import RenderHost
from .initializer import get_engine_config, initialize_engine, is_engine_initialized
from .sanity import validate

log = logging.getLogger("mermaid.notation.render")

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

def _token(rng: random.Random, n: int = 9) -> str:
    return "".join(rng.choice(_BASE36) for _ in range(n))

def _message(error: BaseException) -> str:
    return str(getattr(error, "message", None) or error) or type(error).__name__

def error_fallback(error: BaseException, definition: str) -> str:
    """Self-contained diagnostic block shown in place of a diagram that failed to render."""
    return (
        '<div class="mermaid-error" style="padding: 1rem; background: #fee; '
        'border: 1px solid #fcc; border-radius: 0.375rem; font-family: monospace;">'
        f"<strong>Mermaid Rendering Error:</strong><br/>{html.escape(_message(error))}<br/><br/>"
        "<details><summary>View Definition</summary>"
        '<pre style="padding: 0.5rem; background: white; border: 1px solid #ddd; '
        'border-radius: 0.25rem; overflow-x: auto;">'
        f"{html.escape(definition or '', quote=False)}</pre>"
        "</details></div>"
    )

class SafeRenderer:
    """
    Renders notation through a host without ever raising (construction aside).

    Each call draws into its own freshly generated container, so concurrent
    renders need no lock. A container collision gets exactly one retry under
    a new id; anything else becomes a failed RenderResult with fallback markup.
    """

    def __init__(
        self,
        host: Optional[RenderHost],
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if host is None:
            raise PreconditionFailure("Rendering requires a render host; none is configured")
        self.host = host
        self._rng = rng or random.SystemRandom()
        self._clock = clock or time.time

    def new_container_id(self, prefix: str = "mermaid") -> str:
        ms = int(self._clock() * 1000)
        return f"{prefix}-{ms}-{_token(self._rng)}-{_token(self._rng)}"

    async def _release(self, container_id: str) -> None:
        try:
            await self.host.release(container_id)
        except Exception as e:
            log.warning("render.release_failed", extra={"container_id": container_id, "error": str(e)})

    async def _attempt(self, container_id: str, definition: str) -> str:
        await self._release(container_id)  # stale scaffolding from an earlier render
        try:
            return await self.host.render(container_id, definition, get_engine_config())
        finally:
            await self._release(container_id)

    def _failed(self, error: BaseException, definition: str, container_id: Optional[str], retried: bool) -> RenderResult:
        log.warning("render.fallback", extra={
            "container_id": container_id,
            "error": _message(error),
            "error_type": type(error).__name__,
            "retried": retried,
        })
        return RenderResult(
            success=False,
            error=error,
            fallback=error_fallback(error, definition),
            container_id=container_id,
            retried=retried,
        )

    async def render(
        self,
        definition: str,
        container_id: Optional[str] = None,
        *,
        suppress_errors: bool = False,
    ) -> RenderResult:
        cid: Optional[str] = container_id
        t0 = time.time()
        try:
            if not is_engine_initialized():
                await initialize_engine()

            check = validate(definition, suppress_errors=suppress_errors)
            if check.warnings:
                log.info("render.validation_warnings", extra={"warnings": check.warnings})
            if not check.is_valid:
                raise RenderFailure(", ".join(check.errors), data={"errors": check.errors})

            cid = cid or self.new_container_id()
            if want_verbose_render():
                log.info("render.begin.verbose", extra={"container_id": cid, "definition": definition})
            else:
                log.info("render.begin", extra={"container_id": cid, "head": preview(definition, 80)})

            try:
                svg = await self._attempt(cid, definition)
                retried = False
            except RenderCollisionError as collision:
                retry_id = self.new_container_id("mermaid-retry")
                log.info("render.retry", extra={"container_id": cid, "retry_id": retry_id, "error": collision.message})
                cid = retry_id
                try:
                    svg = await self._attempt(retry_id, definition)
                except Exception as e:
                    return self._failed(e, definition, retry_id, retried=True)
                retried = True

            log.info("render.success", extra={
                "container_id": cid,
                "retried": retried,
                "svg_len": len(svg or ""),
                "took_ms": int((time.time() - t0) * 1000),
            })
            return RenderResult(success=True, artifact=svg, container_id=cid, retried=retried)
        except Exception as e:
            return self._failed(e, definition, cid, retried=False)

# ---------- process-wide default host ----------

_default_host: Optional[RenderHost] = None

def configure_default_host(host: Optional[RenderHost]) -> None:
    global _default_host
    _default_host = host

def get_default_host() -> Optional[RenderHost]:
    return _default_host

async def render(
    definition: str,
    container_id: Optional[str] = None,
    *,
    suppress_errors: bool = False,
) -> RenderResult:
    """Render through the configured default host; raises PreconditionFailure when there is none."""
    return await SafeRenderer(_default_host).render(
        definition, container_id, suppress_errors=suppress_errors
    )
