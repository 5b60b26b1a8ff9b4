"""Human-play loop for the shooter and swarm."""

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import logging

import arcade

from astroflock.config import FLAGS, FPS, WINDOW_TITLE, WORLD
from astroflock.core import InputState, SimulationEvent
from astroflock.game import GameSession
from astroflock.runtime import configure_logging, log_run_context
from astroflock.ui.renderer import Renderer

logger = logging.getLogger(__name__)


class HumanGame(arcade.Window):
    """Maps the keyboard onto an `InputState` and feeds the fixed-step session."""

    def __init__(self, session: GameSession | None = None):
        super().__init__(WORLD.width, WORLD.height, WINDOW_TITLE)
        self.session = session or GameSession()
        self.renderer = Renderer(self.session, WORLD.width, WORLD.height)
        self.input_state = InputState.neutral()
        self._left = False
        self._right = False
        self.fps = float(FPS)

    def on_update(self, delta_time: float):
        if delta_time > 0:
            self.fps = 0.9 * self.fps + 0.1 / delta_time
        for report in self.session.advance(delta_time, self.input_state):
            if SimulationEvent.OBSTACLE_DESTROYED in report.events:
                logger.debug("Obstacles hit: %d score=%d", report.hits, self.session.score)
            if report.game_over:
                logger.info("Game over! Score: %d", self.session.score)
                self.session.restart()
                break

    def on_draw(self):
        self.renderer.draw_frame(self, fps=self.fps)

    def _sync_x_axis(self):
        self.input_state.x_axis = float(self._right) - float(self._left)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.UP:
            self.input_state.y_axis = 1.0
        elif symbol == arcade.key.LEFT:
            self._left = True
        elif symbol == arcade.key.RIGHT:
            self._right = True
        elif symbol == arcade.key.SPACE:
            self.input_state.fire = True
        elif symbol == arcade.key.ESCAPE:
            self.close()
        self._sync_x_axis()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol == arcade.key.UP:
            self.input_state.y_axis = 0.0
        elif symbol == arcade.key.LEFT:
            self._left = False
        elif symbol == arcade.key.RIGHT:
            self._right = False
        elif symbol == arcade.key.SPACE:
            self.input_state.fire = False
        self._sync_x_axis()


def run_human() -> None:
    configure_logging(FLAGS.log_level)
    game = HumanGame()
    log_run_context(
        "play-human",
        {
            "fps": FPS,
            "boids": len(game.session.flock),
            "obstacles": len(game.session.actors.obstacles),
            "show_actors": FLAGS.show_actors,
            "show_flock": FLAGS.show_flock,
        },
    )
    arcade.run()


if __name__ == "__main__":
    run_human()
