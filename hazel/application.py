"""The application loop, the sample client application and the entry point."""

from __future__ import annotations

from typing import Optional, Sequence

from hazel import log
from hazel.events import Event, EventDispatcher, WindowCloseEvent
from hazel.window import PygletWindow, Window, create_window


class Application:
    """Owns a window and runs until that window is closed."""

    def __init__(self, window: Optional[Window] = None) -> None:
        self.window = window if window is not None else create_window()
        self.window.set_event_callback(self.on_event)
        self.running = True

    def on_event(self, event: Event) -> None:
        """Trace every event and stop running when the window closes."""
        log.core_logger().trace("{0}", event)
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowCloseEvent, self._on_window_close)

    def run(self) -> None:
        """Update the window until the application stops running."""
        while self.running:
            self.window.on_update()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self.running = False
        return True


class Sandbox(Application):
    """The sample client application."""


def create_application() -> Application:
    """Create the client's application."""
    return Sandbox()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start logging, then create and run the client application."""
    log.init()
    log.core_logger().warn("Initialized Log!")
    a = 5
    log.client_logger().info("Hello {0}!", a)

    app = create_application()
    try:
        app.run()
    finally:
        if isinstance(app.window, PygletWindow):
            app.window.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())