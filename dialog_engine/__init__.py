"""
Dialog Engine

Infrastructure shared by the dialog framework: typed events, semantic
input actions, pygame input translation, data components and resource
loading.

Quick Start:
    from dialog_engine import EventBus, InputHandler, ResourceLoader

    bus = EventBus()
    input_handler = InputHandler(bus)
    loader = ResourceLoader("assets/Resources")
"""

__version__ = "0.1.0"
__author__ = "Developer"

from dialog_engine.core import (
    Component,
    EventBus,
    Event,
    Action,
)

from dialog_engine.input import InputHandler, InputEvent
from dialog_engine.resources import ResourceLoader, ResourceNotFoundError

__all__ = [
    # Components
    "Component",
    # Events
    "EventBus",
    "Event",
    # Input
    "InputHandler",
    "InputEvent",
    "Action",
    # Resources
    "ResourceLoader",
    "ResourceNotFoundError",
]
