# src/mermaid_notation/engine/hosts.py
"""
Render hosts: whatever actually turns notation into SVG.

The renderer only talks to the ``RenderHost`` port. ``ContainerRegistryHost``
gives concrete hosts container bookkeeping (a container id may only be drawn
once until it is released) and ``KrokiRenderHost`` draws through a Kroki
server over HTTP.
"""
from __future__ import annotations

import abc
import logging
from typing import Optional, Protocol, Set, runtime_checkable

import httpx

from ..errors import RenderCollisionError, RenderFailure
from ..models.engine_config import EngineConfig
from ..settings import Settings
from ..utils.logging import preview
from .initializer import init_directive

log = logging.getLogger("mermaid.notation.hosts")

@runtime_checkable
class RenderHost(Protocol):
    async def render(self, container_id: str, definition: str, config: EngineConfig) -> str:
        """Draw the notation into the container and return SVG markup."""
        ...

    async def release(self, container_id: str) -> None:
        """Drop any scaffolding still bound to the container id."""
        ...

class ContainerRegistryHost(abc.ABC):
    """Tracks in-flight and drawn containers; a reused id raises RenderCollisionError."""

    def __init__(self) -> None:
        self._in_flight: Set[str] = set()
        self._drawn: Set[str] = set()

    def has_container(self, container_id: str) -> bool:
        return container_id in self._in_flight or container_id in self._drawn

    @property
    def active_containers(self) -> Set[str]:
        return set(self._in_flight | self._drawn)

    async def render(self, container_id: str, definition: str, config: EngineConfig) -> str:
        if self.has_container(container_id):
            raise RenderCollisionError(container_id)
        self._in_flight.add(container_id)
        try:
            svg = await self._draw(container_id, definition, config)
            self._drawn.add(container_id)
            return svg
        finally:
            self._in_flight.discard(container_id)

    async def release(self, container_id: str) -> None:
        self._drawn.discard(container_id)

    @abc.abstractmethod
    async def _draw(self, container_id: str, definition: str, config: EngineConfig) -> str:
        ...

class KrokiRenderHost(ContainerRegistryHost):
    """POSTs notation to {base_url}/mermaid/svg; the engine config travels as an init directive."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["KrokiRenderHost"]:
        if not settings.kroki_url:
            return None
        return cls(settings.kroki_url, timeout=settings.kroki_timeout)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/mermaid/svg"

    async def _draw(self, container_id: str, definition: str, config: EngineConfig) -> str:
        body = f"{init_directive(config)}\n{definition}"
        headers = {"content-type": "text/plain", "accept": "image/svg+xml"}
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport) as client:
                log.debug("kroki.request", extra={"url": self.endpoint, "container_id": container_id})
                r = await client.post(self.endpoint, content=body.encode("utf-8"), headers=headers)
        except httpx.HTTPError as e:
            raise RenderFailure(
                f"Kroki request failed: {e}",
                data={"url": self.endpoint, "container_id": container_id},
            ) from e

        if r.status_code != 200:
            raise RenderFailure(
                f"Kroki returned {r.status_code}: {preview(r.text, 200)}",
                data={"url": self.endpoint, "status": r.status_code, "container_id": container_id},
            )
        return r.text
