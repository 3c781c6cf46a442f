"""Drake Equation Simulator: application window and frame loop."""

from __future__ import annotations

import logging

import pygame

from .constants import APP_NAME, BACKGROUND, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, TITLE
from .screens.simulator import SimulatorScreen

logger = logging.getLogger(APP_NAME)


class Game:
    """Owns the window and drives the simulator screen once per frame."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True
        self.frame = 0

        # One-time setup: store + display tree. Missing fonts are fatal here.
        self.simulator = SimulatorScreen()
        self.simulator.renderer.preload(self.simulator.root)
        logger.info(f"Window opened: {SCREEN_WIDTH}x{SCREEN_HEIGHT} @ {FPS} FPS")

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0
                self._handle_events()
                self._update(dt)
                self._draw()
        finally:
            logger.info(f"Shutting down after {self.frame} frames")
            pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                return

            self.simulator.handle_events(event)

    def _update(self, dt: float) -> None:
        self.simulator.update(dt)
        self.frame += 1

    def _draw(self) -> None:
        self.screen.fill(BACKGROUND)
        self.simulator.draw(self.screen)
        pygame.display.flip()
