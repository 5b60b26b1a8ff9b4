"""Arcade renderer for the shooter field and the swarm."""

from __future__ import annotations

import arcade

from astroflock.config import (
    BB_HEIGHT,
    BOID_DRAW_LENGTH,
    COLOR_AMBER,
    COLOR_AQUA,
    COLOR_CHARCOAL,
    COLOR_CORAL,
    COLOR_DEEP_TEAL,
    COLOR_FOG_GRAY,
    COLOR_NEAR_BLACK,
    COLOR_SLATE_GRAY,
    COLOR_SOFT_WHITE,
    FACING_TICK_LENGTH,
    FLAGS,
    FONT_SIZE_BAR,
    UI_STATUS_SEPARATOR,
)
from astroflock.core import ActorKind
from astroflock.game import BOID_KIND, EntityView, GameSession
from astroflock.runtime import Vec2, vector_from_angle, world_to_screen

ACTOR_COLORS = {
    ActorKind.PLAYER: COLOR_AQUA,
    ActorKind.OBSTACLE: COLOR_FOG_GRAY,
    ActorKind.PROJECTILE: COLOR_AMBER,
}


class Renderer:
    """Project world-space entities onto the window and draw them with Arcade primitives."""

    def __init__(self, session: GameSession, width: int, height: int):
        self.session = session
        self.width = int(width)
        self.height = int(height)
        self.show_actors = FLAGS.show_actors
        self.show_flock = FLAGS.show_flock
        self.status_text = arcade.Text(
            "",
            self.width / 2.0,
            BB_HEIGHT / 2.0,
            COLOR_SOFT_WHITE,
            FONT_SIZE_BAR,
            anchor_x="center",
            anchor_y="center",
        )

    def to_window(self, point: Vec2) -> tuple[float, float]:
        screen = world_to_screen(self.width, self.height, point)
        return screen.x, self.height - screen.y

    def draw_frame(self, window: arcade.Window, fps: float | None = None):
        window.clear(COLOR_CHARCOAL)

        if self.show_flock:
            for attractor in self.session.flock.attractors():
                x, y = self.to_window(attractor.position)
                arcade.draw_circle_outline(x, y, attractor.radius, COLOR_SLATE_GRAY, 1)

        for entity in self.session.entities():
            if entity.kind == BOID_KIND:
                if self.show_flock:
                    self._draw_heading_line(entity, BOID_DRAW_LENGTH, COLOR_CORAL)
            elif self.show_actors:
                self._draw_actor(entity)

        self._draw_status_bar(fps)

    def _draw_actor(self, entity: EntityView):
        x, y = self.to_window(entity.position)
        arcade.draw_circle_filled(x, y, entity.radius, ACTOR_COLORS[entity.kind])
        if entity.kind is ActorKind.PLAYER:
            self._draw_heading_line(entity, FACING_TICK_LENGTH, COLOR_DEEP_TEAL)

    def _draw_heading_line(self, entity: EntityView, length: float, color):
        tip = entity.position + vector_from_angle(entity.facing) * length
        x0, y0 = self.to_window(entity.position)
        x1, y1 = self.to_window(tip)
        arcade.draw_line(x0, y0, x1, y1, color, 2)

    def _draw_status_bar(self, fps: float | None):
        arcade.draw_lbwh_rectangle_filled(0, 0, self.width, BB_HEIGHT, COLOR_NEAR_BLACK)
        segments = [f"Score: {self.session.score}", f"Level: {self.session.level}"]
        if fps is not None:
            segments.append(f"FPS: {fps:.2f}")
        self.status_text.text = UI_STATUS_SEPARATOR.join(segments)
        self.status_text.draw()
