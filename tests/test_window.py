import pytest

from hazel.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from hazel.window import KeyAction, Window, WindowData, WindowProps


@pytest.fixture
def recorded():
    events = []
    data = WindowData("Test", 100, 50, event_callback=events.append)
    return data, events


def test_window_props_defaults():
    props = WindowProps()
    assert (props.title, props.width, props.height) == ("Hazel Engine", 1280, 720)


def test_window_props_custom():
    props = WindowProps("Editor", 800, 600)
    assert props.title == "Editor"
    assert (props.width, props.height) == (800, 600)


def test_resize_updates_size_and_reports(recorded):
    data, events = recorded
    data.emit_resize(300, 200)
    assert (data.width, data.height) == (300, 200)
    assert events == [WindowResizeEvent(300, 200)]


def test_resize_sees_new_size_inside_callback():
    seen = []
    data = WindowData("Test", 10, 10)

    def callback(event):
        seen.append((event, data.width, data.height))

    data.event_callback = callback
    data.emit_resize(40, 30)
    assert seen == [(WindowResizeEvent(40, 30), 40, 30)]
    assert (data.width, data.height) == (40, 30)


def test_close(recorded):
    data, events = recorded
    data.emit_close()
    assert events == [WindowCloseEvent()]


def test_key_press_release_repeat(recorded):
    data, events = recorded
    data.emit_key(65, KeyAction.PRESS)
    data.emit_key(65, KeyAction.REPEAT)
    data.emit_key(65, KeyAction.RELEASE)
    assert events == [KeyPressedEvent(65, 0), KeyPressedEvent(65, 1), KeyReleasedEvent(65)]


def test_key_accepts_raw_action_values(recorded):
    data, events = recorded
    data.emit_key(32, int(KeyAction.PRESS))
    assert events == [KeyPressedEvent(32, 0)]


def test_unknown_key_action_is_ignored(recorded):
    data, events = recorded
    data.emit_key(32, 99)
    assert events == []


def test_mouse_buttons(recorded):
    data, events = recorded
    data.emit_mouse_button(1, KeyAction.PRESS)
    data.emit_mouse_button(1, KeyAction.RELEASE)
    assert events == [MouseButtonPressedEvent(1), MouseButtonReleasedEvent(1)]


def test_mouse_button_repeat_is_ignored(recorded):
    data, events = recorded
    data.emit_mouse_button(2, KeyAction.REPEAT)
    assert events == []


def test_scroll_and_cursor(recorded):
    data, events = recorded
    data.emit_scroll(0.5, -1.5)
    data.emit_cursor(12.25, 7.75)
    assert events == [MouseScrolledEvent(0.5, -1.5), MouseMovedEvent(12.25, 7.75)]


def test_emit_without_callback_raises():
    data = WindowData("Test", 10, 10)
    with pytest.raises(RuntimeError):
        data.emit_close()


def test_window_interface_is_abstract():
    with pytest.raises(TypeError):
        Window()