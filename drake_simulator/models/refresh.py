"""Change-gated refresh of the result text."""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Protocol

from ..constants import APP_NAME
from .drake import format_result, project
from .store import ParameterStore

logger = logging.getLogger(APP_NAME)


class TextSink(Protocol):
    text: str


class RefreshOutcome(enum.Enum):
    SKIPPED = "skipped"
    RECOMPUTED = "recomputed"


class ResultRefresher:
    """Per-frame routine that rewrites the result sinks when the store changes.

    Remembers the last store version it wrote out, the way a scheduled system
    remembers the tick it last ran on. A change stays pending while no sink
    exists, so the first sink to appear is never stale.
    """

    def __init__(self) -> None:
        self.last_version = 0
        self.last_text: str | None = None

    def __call__(self, store: ParameterStore, sinks: Iterable[TextSink]) -> RefreshOutcome:
        sinks = list(sinks)
        if not store.is_changed_since(self.last_version) or not sinks:
            return RefreshOutcome.SKIPPED

        result = project(store.values)
        text = format_result(result)
        for sink in sinks:
            sink.text = text

        self.last_version = store.version
        self.last_text = text
        logger.info(f"Recomputed N = {text} (store version {store.version}, {len(sinks)} sink(s))")
        return RefreshOutcome.RECOMPUTED
