import pytest

from hazel import log
from hazel.application import Application, Sandbox
from hazel.events import WindowCloseEvent, WindowResizeEvent
from hazel.window import Window, WindowData


class FakeWindow(Window):
    """Closes itself after a fixed number of updates."""

    def __init__(self, close_after):
        self.data = WindowData("Fake", 64, 48)
        self.close_after = close_after
        self.updates = 0

    def on_update(self):
        self.updates += 1
        if self.updates == self.close_after:
            self.data.emit_close()

    @property
    def width(self):
        return self.data.width

    @property
    def height(self):
        return self.data.height

    @property
    def vsync(self):
        return self.data.vsync

    def set_event_callback(self, callback):
        self.data.event_callback = callback


@pytest.fixture
def logs(capsys):
    log.init()
    return capsys


def test_run_stops_when_window_closes(logs):
    window = FakeWindow(close_after=3)
    app = Application(window)
    app.run()
    assert window.updates == 3
    assert app.running is False


def test_close_event_marks_handled(logs):
    app = Application(FakeWindow(close_after=1))
    event = WindowCloseEvent()
    app.on_event(event)
    assert event.handled is True
    assert app.running is False


def test_other_events_keep_running(logs):
    app = Application(FakeWindow(close_after=1))
    event = WindowResizeEvent(640, 480)
    app.on_event(event)
    assert event.handled is False
    assert app.running is True


def test_events_are_traced_to_core_logger(logs):
    app = Application(FakeWindow(close_after=1))
    app.on_event(WindowResizeEvent(640, 480))
    out = logs.readouterr().out
    assert "HAZEL: WindowResizeEvent: 640, 480" in out


def test_window_events_reach_application(logs):
    window = FakeWindow(close_after=1)
    app = Application(window)
    window.data.emit_close()
    assert app.running is False


def test_sandbox_is_an_application(logs):
    window = FakeWindow(close_after=2)
    app = Sandbox(window)
    app.run()
    assert isinstance(app, Application)
    assert window.updates == 2


def test_on_event_without_logging_raises(monkeypatch):
    monkeypatch.setattr(log, "_core", None)
    app = Application(FakeWindow(close_after=1))
    with pytest.raises(RuntimeError):
        app.on_event(WindowCloseEvent())