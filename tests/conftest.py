import asyncio
from typing import List, Optional

import pytest

from mermaid_notation.engine.hosts import ContainerRegistryHost
from mermaid_notation.engine.initializer import reset_engine
from mermaid_notation.engine.renderer import configure_default_host
from mermaid_notation.engine.sanity import KNOWN_DIAGRAM_TYPES, first_token
from mermaid_notation.errors import RenderFailure


class FakeHost(ContainerRegistryHost):
    """In-memory host: draws a stub SVG, optionally slowly, optionally rejecting."""

    def __init__(self, *, delay: float = 0.0, strict: bool = False, error: Optional[Exception] = None):
        super().__init__()
        self.delay = delay
        self.strict = strict
        self.error = error
        self.calls: List[str] = []
        self.released: List[str] = []
        self.configs: list = []

    async def _draw(self, container_id, definition, config):
        self.calls.append(container_id)
        self.configs.append(config)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.strict and first_token(definition) not in KNOWN_DIAGRAM_TYPES:
            raise RenderFailure("Parse error on line 1: No diagram type detected")
        return f'<svg id="{container_id}"><g/></svg>'

    async def release(self, container_id):
        self.released.append(container_id)
        await super().release(container_id)


@pytest.fixture(autouse=True)
def _clean_engine_state():
    reset_engine()
    configure_default_host(None)
    yield
    reset_engine()
    configure_default_host(None)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def strict_host() -> FakeHost:
    return FakeHost(strict=True)
