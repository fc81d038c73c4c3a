"""Parallel loading of the four record sources.

Each source is fetched independently. A source that raises is logged
and replaced with an empty collection so the engine only ever sees
lists; the failure is reported through ``data_status``.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional

log = logging.getLogger(__name__)

SOURCE_NAMES = ("moods", "sessions", "journals", "assessments")

Fetcher = Callable[[], Awaitable[list]]


@dataclass
class SourceBundle:
    """Record collections for one user, plus per-source load status."""

    moods: list = field(default_factory=list)
    sessions: list = field(default_factory=list)
    journals: list = field(default_factory=list)
    assessments: list = field(default_factory=list)
    data_status: dict = field(default_factory=lambda: {name: "ok" for name in SOURCE_NAMES})

    @classmethod
    def from_collections(
        cls,
        moods: list,
        sessions: list,
        journals: list,
        assessments: list,
        failed_sources: Optional[list[str]] = None,
    ) -> "SourceBundle":
        """Build a bundle from already-fetched collections."""
        failed = set(failed_sources or [])
        return cls(
            moods=list(moods),
            sessions=list(sessions),
            journals=list(journals),
            assessments=list(assessments),
            data_status={name: "failed" if name in failed else "ok" for name in SOURCE_NAMES},
        )

    def counts(self) -> dict:
        return {name: len(getattr(self, name)) for name in SOURCE_NAMES}


async def load_sources(fetchers: Mapping[str, Fetcher]) -> SourceBundle:
    """
    Fetch every source concurrently.

    Args:
        fetchers: Source name -> zero-argument coroutine function returning
            the records, newest first. Missing sources count as failed.

    Returns:
        SourceBundle with empty lists in place of failed sources
    """
    async def _fetch(name: str) -> Any:
        fetcher = fetchers.get(name)
        if fetcher is None:
            raise LookupError(f"No fetcher configured for '{name}'")
        return await fetcher()

    results = await asyncio.gather(
        *(_fetch(name) for name in SOURCE_NAMES),
        return_exceptions=True,
    )

    bundle = SourceBundle()
    for name, result in zip(SOURCE_NAMES, results):
        if isinstance(result, BaseException):
            log.warning(f"[SOURCES] Failed to load {name}: {result}")
            bundle.data_status[name] = "failed"
            result = []
        setattr(bundle, name, list(result or []))

    log.debug(f"[SOURCES] Loaded {bundle.counts()} status={bundle.data_status}")
    return bundle
