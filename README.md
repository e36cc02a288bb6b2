# hazel

A small application framework for games and interactive programs. It is
made of four modules:

- `hazel.events` has the event classes (`WindowResizeEvent`,
  `WindowCloseEvent`, `AppTickEvent`, `AppUpdateEvent`, `AppRenderEvent`,
  `KeyPressedEvent`, `KeyReleasedEvent`, `MouseMovedEvent`,
  `MouseScrolledEvent`, `MouseButtonPressedEvent`,
  `MouseButtonReleasedEvent`). Each class has an `EventType` and a set of
  `EventCategory` flags. An `EventDispatcher` calls a handler when the
  event matches the handler's class. It also has the helper `bit(x)`.
- `hazel.log` has two named loggers. `core_logger()` returns the `HAZEL`
  logger for the engine and `client_logger()` returns the `APP` logger for
  application code. Call `init()` before you use either one. Until then they
  raise `RuntimeError`. Both write `[HH:MM:SS] name: message` lines to
  standard output at trace level. The lines are coloured by level when the
  output is a terminal. Messages use `str.format` placeholders:
  `client_logger().info("Hello {0}!", 5)`.
- `hazel.window` has the abstract `Window`, its pyglet implementation
  `PygletWindow`, `WindowProps` (the defaults are title `"Hazel Engine"` and
  a size of 1280×720), and `create_window(props)`. A window turns native
  input into events and passes each one to the callback given to
  `set_event_callback`:
  - A key press becomes `KeyPressedEvent(key, 0)`. A key repeat becomes
    `KeyPressedEvent(key, 1)`. A key release becomes `KeyReleasedEvent`.
  - Mouse buttons are numbered left 0, right 1, middle 2.
  - Cursor positions are measured from the top-left corner.
  - A resize updates the window's `width` and `height` before the event is
    reported.

  The translation itself lives in `WindowData` (`emit_resize`, `emit_close`,
  `emit_key`, `emit_mouse_button`, `emit_scroll`, `emit_cursor`). It can be
  used without a native window.
- `hazel.application` has `Application`, the sample `Sandbox`,
  `create_application()` and the `main()` entry point.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the sandbox

The package installs a command that starts the logging and prints two
greeting lines. It then opens an empty magenta window, which runs until you
close it:

```
hazel-sandbox
```

## Using the event system

```python
from hazel.events import (
    EventCategory,
    EventDispatcher,
    KeyPressedEvent,
    WindowCloseEvent,
)

event = KeyPressedEvent(65, 1)
print(event)                                      # KeyPressedEvent: 65 (1 repeats)
print(event.is_in_category(EventCategory.INPUT))  # True

dispatcher = EventDispatcher(event)
dispatcher.dispatch(WindowCloseEvent, lambda e: True)  # False: the type does not match
dispatcher.dispatch(KeyPressedEvent, lambda e: True)   # True; event.handled is now True
```

`KeyEvent`, `MouseButtonEvent` and `Event` itself are abstract bases. Trying
to create one raises `TypeError`.

## Writing an application

Subclass `Application` and call `run()`. By default the application creates
a window with `create_window()`. You can also pass in any `Window` of your
own. `Application.on_event` is the callback that receives every event. It
traces each event on the core logger, and a `WindowCloseEvent` ends the run
loop.

```python
from hazel import log
from hazel.application import Application


class MyGame(Application):
    pass


log.init()
log.client_logger().info("Starting")
MyGame().run()
```

## What it does not do

The framework only clears the window to magenta on each frame. It has no
rendering beyond that, no layers and no input polling. Events are handled
at once, as each one arrives, and are not queued. The window events for
focus, lost focus and window moves exist as `EventType` values, but no
event class raises them.