"""Input handling module."""

from dialog_engine.input.handler import InputHandler, InputState, InputEvent

__all__ = [
    "InputHandler",
    "InputState",
    "InputEvent",
]
