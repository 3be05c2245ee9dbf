"""
Component base class for data containers.

Components hold the state that collaborators expose to the dialog
framework (what is on screen, whether host input is locked). Keeping
them as pydantic models gives:
- Validation on assignment
- Trivial serialization for debugging
- Explicit defaults

Usage:
    class ChoiceSlot(Component):
        label: str = ""
        active: bool = False
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Subclasses may expose small mutators that satisfy a collaborator
    protocol, but never hold references back into the dialog graph.
    """

    model_config = ConfigDict(
        # Callbacks are stored on some components
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )
