"""
Framework components - collaborator protocols and their headless
implementations.
"""

from dialog_framework.components.dialog import (
    ChoiceSlot,
    ChoiceSlotView,
    DialogDisplay,
    DialogPresenter,
)
from dialog_framework.components.host import HostExclusivity, InputLock

__all__ = [
    # Dialog
    "ChoiceSlot",
    "ChoiceSlotView",
    "DialogDisplay",
    "DialogPresenter",
    # Host
    "HostExclusivity",
    "InputLock",
]
