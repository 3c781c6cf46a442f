"""Simulator screen: parameter labels and the live Drake result."""

from __future__ import annotations

import logging

import pygame

from ..constants import APP_NAME, RESULT_TAG
from ..models.drake import ParameterDescriptor, default_descriptors, default_parameter_set
from ..models.refresh import RefreshOutcome, ResultRefresher
from ..models.store import ParameterStore
from ..ui.nodes import TextSpan, build_display_tree
from ..ui.text import FontCache, TreeRenderer

logger = logging.getLogger(APP_NAME)


class SimulatorScreen:
    """Static parameter table with a change-driven result line.

    Construction is the one-time setup: the store is populated and the
    display tree built. update() is the per-frame hook.
    """

    def __init__(
        self,
        store: ParameterStore | None = None,
        descriptors: list[ParameterDescriptor] | None = None,
        fonts: FontCache | None = None,
    ) -> None:
        self.store = store or ParameterStore(default_parameter_set())
        self.descriptors = descriptors if descriptors is not None else default_descriptors()
        self.root, self.result_span = build_display_tree(self.descriptors)
        self.refresher = ResultRefresher()
        self.renderer = TreeRenderer(fonts or FontCache())
        logger.info(
            f"Display tree built: {len(self.root.text_nodes())} text nodes, "
            f"{len(self.descriptors)} parameters"
        )

    @property
    def result_sinks(self) -> list[TextSpan]:
        return self.root.tagged_spans(RESULT_TAG)

    @property
    def result_text(self) -> str:
        return self.result_span.text

    def handle_events(self, event: pygame.event.Event) -> None:
        # Parameters are display-only; no input controls are wired up.
        pass

    def update(self, dt: float) -> RefreshOutcome:
        return self.refresher(self.store, self.result_sinks)

    def draw(self, surface: pygame.Surface) -> None:
        self.renderer.draw(surface, self.root)
