"""Application framework with an event system, logging and a pyglet-backed windowed run loop."""

__version__ = "0.1.0"
__all__ = ["application", "events", "log", "window"]