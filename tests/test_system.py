from collections import deque

import pytest

from glengine.input import ESCAPE_KEYSYM
from glengine.system import (
    DEFAULT_HEIGHT,
    DEFAULT_TITLE,
    DEFAULT_WIDTH,
    EngineError,
    KeyEvent,
    System,
    WindowSettings,
    main,
)


class FakeGL:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if not name.startswith("gl"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))

        return record


class FakeWindow:
    def __init__(self, settings, events=(), display=(1920, 1080), gl_ok=True):
        self.settings = settings
        if settings.full_screen:
            self.width, self.height = display
        else:
            self.width, self.height = settings.width, settings.height
        self._display = display
        self._events = deque(events)
        self._gl_ok = gl_ok
        self.location = None
        self.vsync = None
        self.flips = 0
        self.closed = 0

    @property
    def display_size(self):
        return self._display

    def supports_gl_version(self, major):
        return self._gl_ok

    def set_location(self, x, y):
        self.location = (x, y)

    def set_vsync(self, vsync):
        self.vsync = vsync

    def flip(self):
        self.flips += 1

    def next_key_event(self):
        return self._events.popleft() if self._events else None

    def close(self):
        self.closed += 1


def make_system(settings=None, **window_kwargs):
    created = []
    gl = FakeGL()

    def factory(s):
        window = FakeWindow(s, **window_kwargs)
        created.append(window)
        return window

    system = System(settings, window_factory=factory, gl=gl)
    return system, created[0], gl


ESC_DOWN = KeyEvent(ESCAPE_KEYSYM, True)


def test_default_settings_match_source():
    settings = WindowSettings()
    assert (settings.width, settings.height) == (DEFAULT_WIDTH, DEFAULT_HEIGHT)
    assert (settings.width, settings.height) == (1024, 768)
    assert settings.title == DEFAULT_TITLE == "Engine"
    assert settings.full_screen is False
    assert settings.vsync is True


def test_centered_position_splits_margin_evenly():
    settings = WindowSettings(width=100, height=50)
    x, y = settings.centered_position(300, 250)
    assert 2 * x + settings.width == 300
    assert 2 * y + settings.height == 250


def test_centered_position_truncates_toward_zero():
    settings = WindowSettings(width=101, height=51)
    assert settings.centered_position(100, 50) == (0, 0)


def test_invalid_settings_rejected():
    with pytest.raises(ValueError):
        WindowSettings(width=0)


def test_system_centres_window_and_sets_up_graphics():
    system, window, gl = make_system(display=(1600, 1200))
    assert window.location == system.settings.centered_position(1600, 1200)
    assert window.vsync is True
    assert any(name == "glEnable" for name, _ in gl.calls)
    system.shutdown()


def test_full_screen_uses_display_size_and_is_not_moved():
    settings = WindowSettings(full_screen=True)
    system, window, _ = make_system(settings, display=(1280, 720))
    assert window.location is None
    assert system.application.graphics.screen_width == 1280
    assert system.application.graphics.screen_height == 720
    system.shutdown()


def test_old_gl_version_raises_and_closes_window():
    created = []

    def factory(s):
        window = FakeWindow(s, gl_ok=False)
        created.append(window)
        return window

    with pytest.raises(EngineError):
        System(window_factory=factory, gl=FakeGL())
    assert created[0].closed == 1


def test_run_renders_until_escape():
    system, window, gl = make_system(events=[None, None, ESC_DOWN])
    system.run()
    assert window.flips == 2
    clears = [args for name, args in gl.calls if name == "glClearColor"]
    assert clears[0] == (1.0, 1.0, 0.0, 1.0)
    system.shutdown()


def test_other_keys_do_not_stop_the_loop():
    events = [KeyEvent(97, True), KeyEvent(97, False), ESC_DOWN]
    system, window, _ = make_system(events=events)
    system.run()
    assert window.flips == 2
    system.shutdown()


def test_escape_release_clears_state():
    events = [ESC_DOWN]
    system, window, _ = make_system(events=events)
    system.input.key_down(ESCAPE_KEYSYM)
    system.input.key_up(ESCAPE_KEYSYM)
    system.run()
    assert system.input.is_escape_pressed() is True
    assert window.flips == 0
    system.shutdown()


def test_shutdown_is_idempotent_and_blocks_run():
    system, window, _ = make_system(events=[ESC_DOWN])
    system.shutdown()
    system.shutdown()
    assert window.closed == 1
    assert system.application is None
    with pytest.raises(RuntimeError):
        system.run()


def test_context_manager_shuts_down():
    system, window, _ = make_system(events=[ESC_DOWN])
    with system as entered:
        entered.run()
    assert window.closed == 1
    assert system.window is None


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2