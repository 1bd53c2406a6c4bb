# src/mermaid_notation/engine/service.py
from __future__ import annotations

import asyncio
import hashlib
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..models.results import RenderResult, ValidationResult
from ..settings import Settings
from .initializer import reset_engine
from .renderer import SafeRenderer
from .sanity import validate

log = logging.getLogger("mermaid.notation.service")

BATCH_SIZE = 5
HIT_BONUS_SECONDS = 60.0

@dataclass
class CacheEntry:
    svg: str
    timestamp: float
    hit_count: int = 0

    @property
    def score(self) -> float:
        # every hit buys the entry another minute before eviction
        return self.timestamp + self.hit_count * HIT_BONUS_SECONDS

class DiagramService:
    """Render cache and batching in front of a SafeRenderer."""

    def __init__(
        self,
        renderer: SafeRenderer,
        *,
        max_cache_size: int = 100,
        cache_ttl: float = 15 * 60.0,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.renderer = renderer
        self.max_cache_size = max_cache_size
        self.cache_ttl = cache_ttl
        self._clock = clock or time.time
        self._cache: Dict[str, CacheEntry] = {}

    @classmethod
    def from_settings(cls, renderer: SafeRenderer, settings: Settings) -> "DiagramService":
        return cls(
            renderer,
            max_cache_size=settings.cache_max_size if settings.cache_enabled else 0,
            cache_ttl=settings.cache_ttl_seconds,
        )

    # ---------- cache ----------

    @staticmethod
    def cache_key(definition: str, diagram_type: str) -> str:
        digest = hashlib.sha256(f"{diagram_type}:{definition}".encode("utf-8")).hexdigest()
        return f"mermaid_{diagram_type}_{digest[:16]}"

    def _get(self, key: str) -> Optional[CacheEntry]:
        entry = self._cache.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp > self.cache_ttl:
            del self._cache[key]
            return None
        entry.hit_count += 1
        return entry

    def _put(self, key: str, svg: str) -> None:
        if self.max_cache_size <= 0:
            return
        if key not in self._cache and len(self._cache) >= self.max_cache_size:
            victim = min(self._cache, key=lambda k: self._cache[k].score)
            del self._cache[victim]
            log.debug("cache.evict", extra={"key": victim})
        self._cache[key] = CacheEntry(svg=svg, timestamp=self._clock())

    def clear_cache(self) -> None:
        cleared = len(self._cache)
        self._cache.clear()
        log.info("cache.cleared", extra={"items_cleared": cleared})

    def cache_stats(self) -> Dict[str, Any]:
        now = self._clock()
        entries = [
            {"key": k, "hits": e.hit_count, "age": now - e.timestamp}
            for k, e in self._cache.items()
        ]
        return {
            "size": len(self._cache),
            "total_hits": sum(e["hits"] for e in entries),
            "entries": entries,
        }

    # ---------- operations ----------

    async def render(
        self,
        definition: str,
        diagram_type: str,
        *,
        cache: bool = True,
        container_id: Optional[str] = None,
    ) -> RenderResult:
        key = self.cache_key(definition, diagram_type)
        if cache:
            hit = self._get(key)
            if hit is not None:
                log.info("cache.hit", extra={"type": diagram_type, "hit_count": hit.hit_count})
                return RenderResult(success=True, artifact=hit.svg)

        result = await self.renderer.render(definition, container_id)
        if cache and result.success and result.artifact:
            self._put(key, result.artifact)
        return result

    async def render_batch(self, items: List[Mapping[str, Any]]) -> Dict[str, RenderResult]:
        """Render {definition, type, id?} items, at most BATCH_SIZE at a time."""
        results: Dict[str, RenderResult] = {}
        for start in range(0, len(items), BATCH_SIZE):
            chunk = items[start:start + BATCH_SIZE]
            ids = [str(it.get("id") or f"diagram_{start + n}") for n, it in enumerate(chunk)]
            rendered = await asyncio.gather(*(
                self.render(it["definition"], it.get("type") or "unknown") for it in chunk
            ))
            results.update(zip(ids, rendered))
        log.info("render.batch", extra={
            "count": len(items),
            "failed": sum(1 for r in results.values() if not r.success),
        })
        return results

    def validate(self, definition: str) -> ValidationResult:
        return validate(definition)

    def reset(self) -> None:
        reset_engine()
        self.clear_cache()
        log.info("service.reset")
