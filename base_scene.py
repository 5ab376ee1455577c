"""Shared scene base class for pygame simulations."""
from __future__ import annotations

import logging

import pygame

from simulation_config import SimulationConfig

logger = logging.getLogger(__name__)


class BaseScene:
    """Base class containing the frame loop shared by all scenes."""

    BG_COLOR = (0, 0, 0)

    def __init__(self, screen: pygame.Surface, config: SimulationConfig) -> None:
        self.screen = screen
        self.config = config
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 22)
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False

    def update(self) -> None:
        """Hook for subclasses to advance their simulation by one tick."""

    def draw(self) -> None:
        """Hook for subclasses to render their scene."""

    def run(self) -> None:
        """Frame loop: input, update, draw, at ``config.fps`` until stopped."""

        logger.info("Scene %s started (%s)", type(self).__name__, self.config.describe())
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break

            self.update()
            self.draw()
            pygame.display.flip()
            self.clock.tick(self.config.fps)
        logger.info("Scene %s stopped", type(self).__name__)
