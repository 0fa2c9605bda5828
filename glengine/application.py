"""The application layer: reacts to input and draws each frame."""

from __future__ import annotations

from typing import Any

from glengine.graphics import Graphics, SceneMatrices, Surface
from glengine.input import InputState

FULL_SCREEN = False
VSYNC_ENABLED = True
SCREEN_NEAR = 0.3
SCREEN_DEPTH = 1000.0

CLEAR_COLOR = (1.0, 1.0, 0.0, 1.0)
"""Colour the back buffer is cleared to each frame."""


class Application:
    """Runs one frame at a time until escape is pressed."""

    def __init__(self, graphics: Graphics) -> None:
        self.graphics: Graphics | None = graphics

    @classmethod
    def create(
        cls,
        surface: Surface,
        screen_width: int,
        screen_height: int,
        gl: Any = None,
    ) -> Application:
        """Set up graphics for ``surface`` with the engine's default settings."""
        graphics = Graphics(
            surface,
            screen_width,
            screen_height,
            SCREEN_NEAR,
            SCREEN_DEPTH,
            vsync=VSYNC_ENABLED,
            gl=gl,
        )
        return cls(graphics)

    @property
    def matrices(self) -> SceneMatrices:
        """The scene matrices of the active graphics."""
        return self._require_graphics().matrices

    def _require_graphics(self) -> Graphics:
        if self.graphics is None:
            raise RuntimeError("application has been shut down")
        return self.graphics

    def frame(self, input_state: InputState) -> bool:
        """Process one frame; return False when the application should stop."""
        if input_state.is_escape_pressed():
            return False
        return self.render()

    def render(self) -> bool:
        """Draw the scene and present it."""
        graphics = self._require_graphics()
        graphics.begin_scene(*CLEAR_COLOR)
        graphics.end_scene()
        return True

    def shutdown(self) -> None:
        """Release the graphics; safe to call more than once."""
        if self.graphics is not None:
            self.graphics.shutdown()
            self.graphics = None