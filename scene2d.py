"""Interactive 2D scene: place charges, watch field lines and a test charge."""
from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np
import pygame

from base_scene import BaseScene
from field import compute_field_magnitude
from objects import Vector
from simulation import ClearCharges, Event, FieldSimulation, FrameSnapshot, PlaceCharge, SpawnParticle
from simulation_config import ChargeSign, SimulationConfig


class FieldScene(BaseScene):
    """Translate pygame input into simulation events and draw each frame."""

    LINE_COLOR = (255, 255, 255, 180)
    ARROW_COLOR = (0, 255, 0, 200)
    POSITIVE_COLOR = (255, 80, 80)
    NEGATIVE_COLOR = (80, 80, 255)
    PARTICLE_COLOR = (255, 255, 0)
    TEXT_COLOR = (255, 255, 255)

    CHARGE_RADIUS = 7
    PARTICLE_RADIUS = 4
    ARROW_HEAD_LENGTH = 6.0
    ARROW_HEAD_ANGLE = 0.6

    def __init__(
        self,
        screen: pygame.Surface,
        config: SimulationConfig,
        simulation: Optional[FieldSimulation] = None,
    ) -> None:
        super().__init__(screen, config)
        self.simulation = simulation or FieldSimulation(config)
        self.viewport = config.viewport
        self.pending_events: List[Event] = []
        self.snapshot: Optional[FrameSnapshot] = None
        self.show_help = True

        self._background_surface: Optional[pygame.Surface] = None
        self._background_source: Optional[np.ndarray] = None
        # Lines and arrows are translucent, so they go through an alpha layer.
        self._overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)

    def handle_event(self, event: pygame.event.Event) -> None:
        super().handle_event(event)

        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = self.viewport.screen_to_world(*event.pos)
            if event.button == 1:
                self.pending_events.append(PlaceCharge(x, y, ChargeSign.POSITIVE))
            elif event.button == 3:
                self.pending_events.append(PlaceCharge(x, y, ChargeSign.NEGATIVE))
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_t:
                x, y = self.viewport.screen_to_world(*pygame.mouse.get_pos())
                self.pending_events.append(SpawnParticle(x, y))
            elif event.key == pygame.K_c:
                self.pending_events.append(ClearCharges())
            elif event.key == pygame.K_h:
                self.show_help = not self.show_help

    def update(self) -> None:
        events, self.pending_events = self.pending_events, []
        self.snapshot = self.simulation.tick(events)

    def draw(self) -> None:
        snapshot = self.snapshot
        if snapshot is None:
            self.screen.fill(self.BG_COLOR)
            return

        self._draw_background(snapshot)
        self._overlay.fill((0, 0, 0, 0))
        self._draw_field_lines(snapshot)
        self._draw_arrows(snapshot)
        self.screen.blit(self._overlay, (0, 0))
        self._draw_charges(snapshot)
        self._draw_particle(snapshot)
        self._draw_hud()

    def _draw_background(self, snapshot: FrameSnapshot) -> None:
        if snapshot.background is None:
            self.screen.fill(self.BG_COLOR)
            return
        if snapshot.background is not self._background_source:
            rgb = np.ascontiguousarray(snapshot.background[..., :3])
            self._background_surface = pygame.surfarray.make_surface(rgb)
            self._background_source = snapshot.background
        self.screen.blit(self._background_surface, (0, 0))

    def _draw_field_lines(self, snapshot: FrameSnapshot) -> None:
        for line in snapshot.field_lines:
            points = [self._to_screen(point) for point in line]
            pygame.draw.lines(self._overlay, self.LINE_COLOR, False, points, 1)

    def _draw_arrows(self, snapshot: FrameSnapshot) -> None:
        for start, end in snapshot.arrows:
            x1, y1 = self._to_screen(start)
            x2, y2 = self._to_screen(end)
            pygame.draw.line(self._overlay, self.ARROW_COLOR, (x1, y1), (x2, y2), 1)

            angle = math.atan2(y2 - y1, x2 - x1)
            for head_angle in (angle + self.ARROW_HEAD_ANGLE, angle - self.ARROW_HEAD_ANGLE):
                head = (
                    x2 - self.ARROW_HEAD_LENGTH * math.cos(head_angle),
                    y2 - self.ARROW_HEAD_LENGTH * math.sin(head_angle),
                )
                pygame.draw.line(self._overlay, self.ARROW_COLOR, (x2, y2), head, 1)

    def _draw_charges(self, snapshot: FrameSnapshot) -> None:
        for charge in snapshot.charges:
            color = self.NEGATIVE_COLOR if charge.q < 0 else self.POSITIVE_COLOR
            pygame.draw.circle(self.screen, color, self._to_screen(charge.position), self.CHARGE_RADIUS)

    def _draw_particle(self, snapshot: FrameSnapshot) -> None:
        if snapshot.particle is None:
            return
        pygame.draw.circle(
            self.screen, self.PARTICLE_COLOR, self._to_screen(snapshot.particle), self.PARTICLE_RADIUS
        )

    def _draw_hud(self) -> None:
        hud_lines: List[str] = []
        if self.show_help:
            hud_lines.extend(
                [
                    "Clic gauche : charge +, clic droit : charge -, T : charge test",
                    "Rouge : +q, Bleu : -q, Jaune : charge test",
                    "C : effacer les charges, H : aide, Échap : quitter",
                ]
            )

        mouse_pos = pygame.mouse.get_pos()
        if self.screen.get_rect().collidepoint(mouse_pos):
            x, y = self.viewport.screen_to_world(*mouse_pos)
            e_vec = self.simulation.field_at(x, y)
            hud_lines.append(
                f"x={x:.0f} y={y:.0f}  |E|={compute_field_magnitude(e_vec):.3f}"
                f"  Ex={e_vec[0]:.3f}  Ey={e_vec[1]:.3f}"
            )

        y_cursor = 10
        for line in hud_lines:
            surface = self.font.render(line, True, self.TEXT_COLOR)
            self.screen.blit(surface, (10, y_cursor))
            y_cursor += surface.get_height() + 4

    def _to_screen(self, point: Vector) -> Tuple[int, int]:
        sx, sy = self.viewport.world_to_screen(point[0], point[1])
        return int(sx), int(sy)
