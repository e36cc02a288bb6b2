"""Blocking event types and the dispatcher that routes them to handlers."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Callable, ClassVar, TypeVar


def bit(x: int) -> int:
    """Return an integer with only bit ``x`` set."""
    return 1 << x


class EventType(enum.Enum):
    """Every kind of event the engine can raise."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    MOUSE_BUTTON_PRESSED = 11
    MOUSE_BUTTON_RELEASED = 12
    MOUSE_MOVED = 13
    MOUSE_SCROLLED = 14

    @property
    def title(self) -> str:
        """The type's name in CamelCase, e.g. ``WindowClose``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class EventCategory(enum.IntFlag):
    """Bit flags grouping event types; an event may be in several."""

    NONE = 0
    APPLICATION = bit(0)
    INPUT = bit(1)
    KEYBOARD = bit(2)
    MOUSE = bit(3)
    MOUSE_BUTTON = bit(4)


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", float(value)))[0]


def _fmt_float(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base of all events; concrete subclasses set ``event_type``."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory.NONE
    handled: bool = False

    def __new__(cls, *args, **kwargs):
        if cls.event_type is EventType.NONE:
            raise TypeError(f"{cls.__name__} is abstract and cannot be instantiated")
        return super().__new__(cls)

    @property
    def name(self) -> str:
        return self.event_type.title

    def is_in_category(self, category: EventCategory) -> bool:
        """Return whether this event belongs to ``category``."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler if the handler's event class matches."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s type.

        The event's ``handled`` flag is set to the handler's result.
        Returns whether the handler was called.
        """
        if self.event.event_type is not event_class.event_type:
            return False
        self.event.handled = bool(func(self.event))  # type: ignore[arg-type]
        return True


# --- application events ----------------------------------------------------


@dataclass
class WindowResizeEvent(Event):
    width: int
    height: int

    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    def __post_init__(self) -> None:
        self.width = int(self.width)
        self.height = int(self.height)
        if self.width < 0 or self.height < 0:
            raise ValueError("window dimensions must not be negative")

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


# --- key events ------------------------------------------------------------


@dataclass
class KeyEvent(Event):
    """Abstract base for keyboard events."""

    key_code: int

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT


@dataclass
class KeyPressedEvent(KeyEvent):
    repeat_count: int

    event_type: ClassVar[EventType] = EventType.KEY_PRESSED

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


# --- mouse events ----------------------------------------------------------


@dataclass
class MouseMovedEvent(Event):
    x: float
    y: float

    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def __post_init__(self) -> None:
        self.x = _as_float32(self.x)
        self.y = _as_float32(self.y)

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_fmt_float(self.x)}, {_fmt_float(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    x_offset: float
    y_offset: float

    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def __post_init__(self) -> None:
        self.x_offset = _as_float32(self.x_offset)
        self.y_offset = _as_float32(self.y_offset)

    def __str__(self) -> str:
        return (
            f"MouseScrolledEvent: {_fmt_float(self.x_offset)}, "
            f"{_fmt_float(self.y_offset)}"
        )


@dataclass
class MouseButtonEvent(Event):
    """Abstract base for mouse button events."""

    button: int

    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"