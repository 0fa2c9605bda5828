"""Render state management on top of an OpenGL function table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Protocol

from glengine import matrix
from glengine.matrix import Matrix

GL_ZERO = 0
GL_ONE = 1
GL_DEPTH_BUFFER_BIT = 0x0100
GL_SRC_ALPHA = 0x0302
GL_ONE_MINUS_SRC_ALPHA = 0x0303
GL_BACK = 0x0405
GL_CW = 0x0900
GL_CULL_FACE = 0x0B44
GL_DEPTH_TEST = 0x0B71
GL_BLEND = 0x0BE2
GL_CLIP_DISTANCE0 = 0x3000
GL_COLOR_BUFFER_BIT = 0x4000
GL_FRAMEBUFFER = 0x8D40

FIELD_OF_VIEW = math.pi / 4.0


class Surface(Protocol):
    """A double-buffered drawing surface such as a window."""

    def flip(self) -> None: ...

    def set_vsync(self, vsync: bool) -> None: ...


@dataclass(frozen=True)
class SceneMatrices:
    """The world, projection and orthographic matrices of a scene."""

    world: Matrix
    projection: Matrix
    ortho: Matrix

    @staticmethod
    def from_screen(
        screen_width: float,
        screen_height: float,
        screen_near: float,
        screen_depth: float,
    ) -> SceneMatrices:
        """Build the scene matrices for a screen of the given size and depth range."""
        if screen_width <= 0 or screen_height <= 0:
            raise ValueError(
                f"screen size must be positive, got {screen_width}x{screen_height}"
            )
        if screen_depth == screen_near:
            raise ValueError("screen depth must differ from screen near")
        aspect = float(screen_width) / float(screen_height)
        return SceneMatrices(
            world=matrix.identity(),
            projection=matrix.perspective_fov(
                FIELD_OF_VIEW, aspect, screen_near, screen_depth
            ),
            ortho=matrix.ortho(
                float(screen_width), float(screen_height), screen_near, screen_depth
            ),
        )


class Graphics:
    """Owns the render state of one surface and the scene matrices."""

    def __init__(
        self,
        surface: Surface,
        screen_width: int,
        screen_height: int,
        screen_near: float,
        screen_depth: float,
        vsync: bool = True,
        gl: Any = None,
    ) -> None:
        if gl is None:
            from pyglet import gl as pyglet_gl

            gl = pyglet_gl
        self.matrices = SceneMatrices.from_screen(
            screen_width, screen_height, screen_near, screen_depth
        )
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._surface: Surface | None = surface
        self._gl = gl

        gl.glClearDepth(1.0)
        gl.glEnable(GL_DEPTH_TEST)
        gl.glFrontFace(GL_CW)
        gl.glEnable(GL_CULL_FACE)
        gl.glCullFace(GL_BACK)
        surface.set_vsync(bool(vsync))

    @property
    def closed(self) -> bool:
        """Whether :meth:`shutdown` has been called."""
        return self._surface is None

    def _require_open(self) -> Surface:
        if self._surface is None:
            raise RuntimeError("graphics has been shut down")
        return self._surface

    def begin_scene(self, red: float, green: float, blue: float, alpha: float) -> None:
        """Clear the colour and depth buffers to start a new frame."""
        self._require_open()
        self._gl.glClearColor(red, green, blue, alpha)
        self._gl.glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

    def end_scene(self) -> None:
        """Present the finished frame."""
        self._require_open().flip()

    def turn_zbuffer_on(self) -> None:
        """Enable depth testing."""
        self._require_open()
        self._gl.glEnable(GL_DEPTH_TEST)

    def turn_zbuffer_off(self) -> None:
        """Disable depth testing."""
        self._require_open()
        self._gl.glDisable(GL_DEPTH_TEST)

    def enable_alpha_blending(self) -> None:
        """Enable source-alpha blending."""
        self._require_open()
        self._gl.glEnable(GL_BLEND)
        self._gl.glBlendFuncSeparate(
            GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA, GL_ONE, GL_ZERO
        )

    def disable_alpha_blending(self) -> None:
        """Disable blending."""
        self._require_open()
        self._gl.glDisable(GL_BLEND)

    def set_back_buffer_render_target(self) -> None:
        """Render to the default framebuffer again."""
        self._require_open()
        self._gl.glBindFramebuffer(GL_FRAMEBUFFER, 0)

    def reset_viewport(self) -> None:
        """Make the viewport cover the whole screen."""
        self._require_open()
        self._gl.glViewport(0, 0, self.screen_width, self.screen_height)

    def enable_clipping(self) -> None:
        """Enable the first user clip plane."""
        self._require_open()
        self._gl.glEnable(GL_CLIP_DISTANCE0)

    def disable_clipping(self) -> None:
        """Disable the first user clip plane."""
        self._require_open()
        self._gl.glDisable(GL_CLIP_DISTANCE0)

    def shutdown(self) -> None:
        """Release the surface; later drawing calls raise RuntimeError."""
        self._surface = None