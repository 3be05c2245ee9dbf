"""
Dialog components - what the dialog manager writes to.

The dialog manager only talks to a ``DialogPresenter``: a speaker field,
a line field and a fixed number of choice slots. Any UI can satisfy the
protocol. ``DialogDisplay`` is the headless implementation: it keeps the
values in plain fields so a renderer (or a test) can read them.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from pydantic import Field

from dialog_engine.core.component import Component


class ChoiceSlotView(Protocol):
    """One selectable option slot (a button, a menu row)."""

    def activate(self, label: str, on_select: Callable[[], None]) -> None: ...

    def deactivate(self) -> None: ...


class DialogPresenter(Protocol):
    """Display surface of a conversation."""

    @property
    def slots(self) -> Sequence[ChoiceSlotView]: ...

    def set_speaker(self, text: str) -> None: ...

    def set_line(self, text: str) -> None: ...


class ChoiceSlot(Component):
    """
    Headless choice slot.

    Attributes:
        label: Option text shown on the slot
        active: Whether the slot is visible and selectable
        on_select: Callback bound by the active choice node
    """
    label: str = ""
    active: bool = False
    on_select: Optional[Callable[[], None]] = Field(default=None, exclude=True)

    def activate(self, label: str, on_select: Callable[[], None]) -> None:
        self.label = label
        self.on_select = on_select
        self.active = True

    def deactivate(self) -> None:
        self.label = ""
        self.on_select = None
        self.active = False

    def press(self) -> bool:
        """
        Simulate the player picking this slot.

        Returns:
            True if the slot was active and its callback ran
        """
        if not self.active or self.on_select is None:
            return False
        self.on_select()
        return True


class DialogDisplay(Component):
    """
    Headless dialog display.

    Attributes:
        speaker: Current speaker name
        line: Current line or prompt text
        slots: Fixed set of choice slots
    """
    speaker: str = ""
    line: str = ""
    slots: list[ChoiceSlot] = Field(default_factory=list)

    @classmethod
    def with_slots(cls, count: int) -> DialogDisplay:
        """Create a display with ``count`` choice slots."""
        return cls(slots=[ChoiceSlot() for _ in range(count)])

    def set_speaker(self, text: str) -> None:
        self.speaker = text

    def set_line(self, text: str) -> None:
        self.line = text

    @property
    def active_labels(self) -> list[str]:
        """Labels of the active slots, in slot order."""
        return [slot.label for slot in self.slots if slot.active]

    def press(self, index: int) -> bool:
        """Press slot ``index``."""
        return self.slots[index].press()
