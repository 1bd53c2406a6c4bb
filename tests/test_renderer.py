import asyncio
import html
import random
import re

import pytest

from conftest import FakeHost
from mermaid_notation.engine.initializer import is_engine_initialized
from mermaid_notation.engine.renderer import (
    SafeRenderer,
    configure_default_host,
    error_fallback,
    render,
)
from mermaid_notation.errors import PreconditionFailure, RenderCollisionError, RenderFailure

ID_PATTERN = re.compile(r"^mermaid-\d+-[0-9a-z]{9}-[0-9a-z]{9}$")
RETRY_PATTERN = re.compile(r"^mermaid-retry-\d+-[0-9a-z]{9}-[0-9a-z]{9}$")

FLOW = "flowchart TD\n    A --> B"


def test_successful_render_returns_svg_only(host):
    result = asyncio.run(SafeRenderer(host).render(FLOW))

    assert result.success is True
    assert result.artifact.startswith("<svg")
    assert result.error is None
    assert result.fallback is None
    assert ID_PATTERN.match(result.container_id)
    assert result.retried is False
    assert is_engine_initialized()


def test_scaffolding_is_released_before_and_after(host):
    result = asyncio.run(SafeRenderer(host).render(FLOW, "chart-1"))
    assert result.container_id == "chart-1"
    assert host.released == ["chart-1", "chart-1"]
    assert not host.has_container("chart-1")


def test_rejected_notation_degrades_to_escaped_fallback(strict_host):
    result = asyncio.run(SafeRenderer(strict_host).render("completely-bogus-syntax"))

    assert result.success is False
    assert result.artifact is None
    assert isinstance(result.error, RenderFailure)
    assert 'class="mermaid-error"' in result.fallback
    assert "completely-bogus-syntax" in result.fallback
    assert "View Definition" in result.fallback


def test_fallback_escapes_markup_in_definition_and_message():
    definition = 'flowchart TD\n    A["<b>x</b>"] --> B & C'
    host = FakeHost(error=RenderFailure("bad <token> near '&'"))
    result = asyncio.run(SafeRenderer(host).render(definition))

    assert result.success is False
    assert html.escape(definition, quote=False) in result.fallback
    assert "<b>x</b>" not in result.fallback
    assert "<token>" not in result.fallback
    assert "bad &lt;token&gt;" in result.fallback


def test_empty_definition_fails_without_touching_host(host):
    result = asyncio.run(SafeRenderer(host).render("   "))
    assert result.success is False
    assert str(result.error) == "Definition is empty"
    assert host.calls == []


def test_suppress_errors_hands_empty_definition_to_host(host):
    result = asyncio.run(SafeRenderer(host).render("", suppress_errors=True))
    assert len(host.calls) == 1
    assert result.success is True


def test_unexpected_host_exception_is_contained():
    host = FakeHost(error=ValueError("engine crashed"))
    result = asyncio.run(SafeRenderer(host).render(FLOW))
    assert result.success is False
    assert isinstance(result.error, ValueError)
    assert "engine crashed" in result.fallback


def test_concurrent_renders_get_distinct_ids():
    host = FakeHost(delay=0.01)
    renderer = SafeRenderer(host)

    async def run():
        return await asyncio.gather(*(renderer.render(FLOW) for _ in range(10)))

    results = asyncio.run(run())
    assert all(r.success for r in results)
    assert len({r.container_id for r in results}) == 10
    assert not any(r.retried for r in results)


def test_forced_collision_recovers_through_single_retry():
    host = FakeHost(delay=0.01)
    renderer = SafeRenderer(host)

    async def run():
        return await asyncio.gather(
            renderer.render(FLOW, "fixed-id"),
            renderer.render(FLOW, "fixed-id"),
        )

    first, second = asyncio.run(run())
    assert first.success and second.success
    assert first.container_id == "fixed-id"
    assert second.retried is True
    assert RETRY_PATTERN.match(second.container_id)


def test_collision_on_retry_is_not_retried_again():
    host = FakeHost(error=RenderCollisionError("taken"))
    result = asyncio.run(SafeRenderer(host).render(FLOW))

    assert result.success is False
    assert result.retried is True
    assert isinstance(result.error, RenderCollisionError)
    assert "Duplicate id" in result.fallback
    assert len(host.calls) == 2


def test_container_ids_follow_injected_randomness_and_clock(host):
    a = SafeRenderer(host, rng=random.Random(7), clock=lambda: 1700000000.0)
    b = SafeRenderer(host, rng=random.Random(7), clock=lambda: 1700000000.0)

    cid = a.new_container_id()
    assert cid == b.new_container_id()
    assert cid.startswith("mermaid-1700000000000-")
    assert ID_PATTERN.match(cid)
    assert RETRY_PATTERN.match(a.new_container_id("mermaid-retry"))


def test_release_failures_do_not_break_rendering():
    class LeakyHost(FakeHost):
        async def release(self, container_id):
            raise RuntimeError("dom gone")

    result = asyncio.run(SafeRenderer(LeakyHost()).render(FLOW))
    assert result.success is True


def test_missing_host_is_a_precondition_failure():
    with pytest.raises(PreconditionFailure):
        SafeRenderer(None)
    with pytest.raises(PreconditionFailure):
        asyncio.run(render(FLOW))


def test_module_render_uses_default_host(host):
    configure_default_host(host)
    result = asyncio.run(render(FLOW, "abc"))
    assert result.success
    assert host.calls == ["abc"]


def test_error_fallback_is_self_contained():
    markup = error_fallback(RenderFailure("boom"), "pie title <x>")
    assert markup.startswith('<div class="mermaid-error"')
    assert markup.endswith("</details></div>")
    assert "<pre" in markup and "pie title &lt;x&gt;</pre>" in markup
