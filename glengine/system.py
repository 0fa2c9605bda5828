"""Window creation, the main loop and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from glengine.application import FULL_SCREEN, VSYNC_ENABLED, Application
from glengine.input import InputState

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_TITLE = "Engine"
REQUIRED_GL_MAJOR = 4


class EngineError(RuntimeError):
    """Raised when the window or rendering context cannot be set up."""


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release, identified by its X11 key symbol."""

    symbol: int
    pressed: bool


class Window(Protocol):
    """What the system needs from a native window."""

    width: int
    height: int

    @property
    def display_size(self) -> tuple[int, int]: ...

    def supports_gl_version(self, major: int) -> bool: ...

    def set_location(self, x: int, y: int) -> None: ...

    def set_vsync(self, vsync: bool) -> None: ...

    def flip(self) -> None: ...

    def next_key_event(self) -> KeyEvent | None: ...

    def close(self) -> None: ...


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class WindowSettings:
    """Size, title and mode of the main window."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    title: str = DEFAULT_TITLE
    full_screen: bool = FULL_SCREEN
    vsync: bool = VSYNC_ENABLED

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"window size must be positive, got {self.width}x{self.height}"
            )

    def centered_position(self, display_width: int, display_height: int) -> tuple[int, int]:
        """Return the top-left corner that centres the window on the display."""
        return (
            _div_toward_zero(display_width - self.width, 2),
            _div_toward_zero(display_height - self.height, 2),
        )


class _PygletWindow:
    """A pyglet window that queues key events for the main loop."""

    def __init__(self, settings: WindowSettings) -> None:
        import pyglet

        config = pyglet.gl.Config(
            double_buffer=True,
            depth_size=24,
            stencil_size=8,
            red_size=8,
            green_size=8,
            blue_size=8,
            alpha_size=8,
        )
        try:
            if settings.full_screen:
                self._window = pyglet.window.Window(
                    caption=settings.title,
                    fullscreen=True,
                    vsync=settings.vsync,
                    config=config,
                )
            else:
                self._window = pyglet.window.Window(
                    width=settings.width,
                    height=settings.height,
                    caption=settings.title,
                    vsync=settings.vsync,
                    config=config,
                )
        except pyglet.window.NoSuchConfigException as exc:
            raise EngineError(f"no suitable visual format: {exc}") from exc

        self._handled = pyglet.event.EVENT_HANDLED
        self._events: deque[KeyEvent] = deque()
        self._window.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_close=self._on_close,
        )

    def _on_key_press(self, symbol: int, modifiers: int) -> Any:
        self._events.append(KeyEvent(symbol, True))
        return self._handled

    def _on_key_release(self, symbol: int, modifiers: int) -> Any:
        self._events.append(KeyEvent(symbol, False))
        return self._handled

    def _on_close(self) -> Any:
        return self._handled

    @property
    def width(self) -> int:
        return self._window.width

    @property
    def height(self) -> int:
        return self._window.height

    @property
    def display_size(self) -> tuple[int, int]:
        screen = self._window.screen
        return screen.width, screen.height

    def supports_gl_version(self, major: int) -> bool:
        return bool(self._window.context.get_info().have_version(major))

    def set_location(self, x: int, y: int) -> None:
        self._window.set_location(x, y)

    def set_vsync(self, vsync: bool) -> None:
        self._window.set_vsync(vsync)

    def flip(self) -> None:
        self._window.flip()

    def next_key_event(self) -> KeyEvent | None:
        self._window.dispatch_events()
        return self._events.popleft() if self._events else None

    def close(self) -> None:
        self._window.close()


WindowFactory = Callable[[WindowSettings], Window]


class System:
    """Owns the window, the input state and the application."""

    def __init__(
        self,
        settings: WindowSettings | None = None,
        window_factory: WindowFactory | None = None,
        gl: Any = None,
    ) -> None:
        self.settings = settings if settings is not None else WindowSettings()
        factory = window_factory if window_factory is not None else _PygletWindow
        self.input: InputState | None = InputState()
        self.window: Window | None = factory(self.settings)
        self.application: Application | None = None
        try:
            self._prepare_window(self.window)
            self.application = Application.create(
                self.window, self.window.width, self.window.height, gl=gl
            )
        except Exception:
            self.shutdown()
            raise

    def _prepare_window(self, window: Window) -> None:
        if not window.supports_gl_version(REQUIRED_GL_MAJOR):
            raise EngineError(f"OpenGL {REQUIRED_GL_MAJOR} or newer is required")
        if not self.settings.full_screen:
            window.set_location(*self.settings.centered_position(*window.display_size))

    def __enter__(self) -> System:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _read_input(self, window: Window, input_state: InputState) -> None:
        event = window.next_key_event()
        if event is None:
            return
        if event.pressed:
            input_state.key_down(event.symbol)
        else:
            input_state.key_up(event.symbol)

    def run(self) -> None:
        """Run frames until the application asks to stop."""
        if self.window is None or self.application is None or self.input is None:
            raise RuntimeError("system has been shut down")
        while True:
            self._read_input(self.window, self.input)
            if not self.application.frame(self.input):
                break

    def shutdown(self) -> None:
        """Release the application and close the window; safe to call twice."""
        if self.application is not None:
            self.application.shutdown()
            self.application = None
        if self.window is not None:
            self.window.close()
            self.window = None
        self.input = None


def main(argv: Sequence[str] | None = None) -> int:
    """Open the engine window and run until escape is pressed."""
    parser = argparse.ArgumentParser(
        prog="glengine", description="Open a window and clear it each frame."
    )
    parser.parse_args(argv)
    try:
        system = System()
    except EngineError as exc:
        print(f"glengine: {exc}", file=sys.stderr)
        return 1
    with system:
        system.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())