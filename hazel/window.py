"""Platform-independent window interface and its pyglet-backed implementation."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

import pyglet

from hazel.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from hazel.log import core_logger

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    """What a new window is created with."""

    title: str = "Hazel Engine"
    width: int = 1280
    height: int = 720


class KeyAction(enum.IntEnum):
    """What happened to a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


def _action(value: Any) -> Optional[KeyAction]:
    try:
        return KeyAction(value)
    except ValueError:
        return None


@dataclass
class WindowData:
    """A window's state, and the translation of raw input into engine events."""

    title: str
    width: int
    height: int
    vsync: bool = False
    event_callback: Optional[EventCallback] = None

    def _emit(self, event: Event) -> None:
        if self.event_callback is None:
            raise RuntimeError("no event callback has been set on the window")
        self.event_callback(event)

    def emit_resize(self, width: int, height: int) -> None:
        """Record the new size, then report it."""
        event = WindowResizeEvent(width, height)
        self.width = event.width
        self.height = event.height
        self._emit(event)

    def emit_close(self) -> None:
        self._emit(WindowCloseEvent())

    def emit_key(self, key: int, action: Any) -> None:
        """Report a key press (repeat count 0), repeat (count 1) or release."""
        kind = _action(action)
        if kind is KeyAction.PRESS:
            self._emit(KeyPressedEvent(key, 0))
        elif kind is KeyAction.RELEASE:
            self._emit(KeyReleasedEvent(key))
        elif kind is KeyAction.REPEAT:
            self._emit(KeyPressedEvent(key, 1))

    def emit_mouse_button(self, button: int, action: Any) -> None:
        """Report a mouse button press or release; other actions are ignored."""
        kind = _action(action)
        if kind is KeyAction.PRESS:
            self._emit(MouseButtonPressedEvent(button))
        elif kind is KeyAction.RELEASE:
            self._emit(MouseButtonReleasedEvent(button))

    def emit_scroll(self, x_offset: float, y_offset: float) -> None:
        self._emit(MouseScrolledEvent(x_offset, y_offset))

    def emit_cursor(self, x: float, y: float) -> None:
        self._emit(MouseMovedEvent(x, y))


class Window(ABC):
    """A desktop window that reports its events through one callback."""

    @abstractmethod
    def on_update(self) -> None:
        """Process pending input and present the frame."""

    @property
    @abstractmethod
    def width(self) -> int: ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    @property
    @abstractmethod
    def vsync(self) -> bool: ...

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Route every event this window raises to ``callback``."""


class PygletWindow(Window):
    """A window backed by pyglet, cleared to magenta every frame."""

    CLEAR_COLOUR = (1.0, 0.0, 1.0, 1.0)

    def __init__(self, props: Optional[WindowProps] = None) -> None:
        props = props or WindowProps()
        self._data = WindowData(props.title, props.width, props.height)
        core_logger().info(
            "Creating window {0} ({1}, {2})", props.title, props.width, props.height
        )
        try:
            self._native = pyglet.window.Window(
                width=props.width,
                height=props.height,
                caption=props.title,
                resizable=True,
                vsync=True,
            )
        except Exception as exc:
            core_logger().error("Window error: {0}", exc)
            raise
        self.vsync = True
        self._install_handlers()

    def _install_handlers(self) -> None:
        data = self._data
        mouse = pyglet.window.mouse
        buttons = {mouse.LEFT: 0, mouse.RIGHT: 1, mouse.MIDDLE: 2}

        def on_resize(width: int, height: int) -> None:
            data.emit_resize(width, height)

        def on_close() -> bool:
            data.emit_close()
            return True

        def on_key_press(symbol: int, modifiers: int) -> bool:
            data.emit_key(symbol, KeyAction.PRESS)
            return True

        def on_key_release(symbol: int, modifiers: int) -> None:
            data.emit_key(symbol, KeyAction.RELEASE)

        def on_mouse_press(x: int, y: int, button: int, modifiers: int) -> None:
            data.emit_mouse_button(buttons.get(button, button), KeyAction.PRESS)

        def on_mouse_release(x: int, y: int, button: int, modifiers: int) -> None:
            data.emit_mouse_button(buttons.get(button, button), KeyAction.RELEASE)

        def on_mouse_scroll(x: int, y: int, scroll_x: float, scroll_y: float) -> None:
            data.emit_scroll(scroll_x, scroll_y)

        def on_mouse_motion(x: int, y: int, dx: int, dy: int) -> None:
            # Report positions from the top-left corner.
            data.emit_cursor(x, data.height - y)

        def on_mouse_drag(x: int, y: int, dx: int, dy: int, button: int, modifiers: int) -> None:
            data.emit_cursor(x, data.height - y)

        self._native.push_handlers(
            on_resize=on_resize,
            on_close=on_close,
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_mouse_press=on_mouse_press,
            on_mouse_release=on_mouse_release,
            on_mouse_scroll=on_mouse_scroll,
            on_mouse_motion=on_mouse_motion,
            on_mouse_drag=on_mouse_drag,
        )

    @property
    def title(self) -> str:
        return self._data.title

    @property
    def width(self) -> int:
        return self._data.width

    @property
    def height(self) -> int:
        return self._data.height

    @property
    def vsync(self) -> bool:
        return self._data.vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        if self._native is not None:
            self._native.set_vsync(bool(enabled))
        self._data.vsync = bool(enabled)

    def set_event_callback(self, callback: EventCallback) -> None:
        self._data.event_callback = callback

    def on_update(self) -> None:
        if self._native is None:
            raise RuntimeError("the window has been closed")
        pyglet.gl.glClearColor(*self.CLEAR_COLOUR)
        self._native.clear()
        self._native.dispatch_events()
        if self._native is not None:
            self._native.flip()

    def close(self) -> None:
        """Destroy the native window; further updates are an error."""
        if self._native is not None:
            self._native.close()
            self._native = None

    def __enter__(self) -> "PygletWindow":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_window(props: Optional[WindowProps] = None) -> Window:
    """Create the platform's window."""
    return PygletWindow(props)