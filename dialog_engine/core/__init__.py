"""
Core engine module.

Exports:
- Component: pydantic base for data-only containers
- EventBus, Event, EventHandler: Event system
- Action: Input actions
"""

from dialog_engine.core.component import Component
from dialog_engine.core.events import EventBus, Event, EventHandler
from dialog_engine.core.actions import Action

__all__ = [
    "Component",
    "EventBus",
    "Event",
    "EventHandler",
    "Action",
]
