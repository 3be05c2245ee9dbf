"""
Dialog graph nodes.

A conversation is a directed graph of two node kinds:
- LineNode: shows one line, then moves on to its successor (or ends)
- ChoiceNode: shows a prompt and waits for one of its options

Both expose the same operations (``present``, ``has_next``,
``next_node``) so the dialog manager never needs to know which kind it
is holding. ``DialogNode`` is the union of the two.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from functools import partial
from typing import TYPE_CHECKING, Callable, ClassVar, Optional, Union

from dialog_framework.dialog.errors import TooManyOptionsError

if TYPE_CHECKING:
    from dialog_framework.components.dialog import DialogPresenter


class NodeKind(Enum):
    """Tag telling the two node kinds apart."""
    LINE = auto()
    CHOICE = auto()


@dataclass(eq=False)
class LineNode:
    """A node that shows a single line of dialog."""
    name: str
    speaker: str = ""
    text: str = ""
    # Graphs may contain cycles, keep them out of repr
    successor: Optional[DialogNode] = field(default=None, repr=False)

    kind: ClassVar[NodeKind] = NodeKind.LINE

    def present(self, view: DialogPresenter, on_select: Callable[[int], None]) -> None:
        """Show the line. A line offers no choices, so every slot goes dark."""
        view.set_speaker(self.speaker)
        view.set_line(self.text)
        for slot in view.slots:
            slot.deactivate()

    def has_next(self) -> bool:
        # Advancing past a terminal line ends the conversation
        return True

    def next_node(self) -> Optional[DialogNode]:
        return self.successor

    @property
    def is_terminal(self) -> bool:
        return self.successor is None


@dataclass(eq=False)
class DialogOption:
    """One selectable answer of a choice node."""
    label: str
    target: DialogNode = field(repr=False)

    @property
    def target_name(self) -> str:
        return self.target.name


@dataclass(eq=False)
class ChoiceNode:
    """
    A node that asks the player to pick one of several options.

    Attributes:
        options: Answers in document order (at least one once built)
        chosen_index: Selected option, -1 while nothing is selected.
            Only meaningful while this node is the active node.
    """
    name: str
    speaker: str = ""
    text: str = ""
    options: list[DialogOption] = field(default_factory=list)
    chosen_index: int = -1

    kind: ClassVar[NodeKind] = NodeKind.CHOICE

    def present(self, view: DialogPresenter, on_select: Callable[[int], None]) -> None:
        """
        Show the prompt and bind one slot per option.

        Slot ``i`` calls ``on_select(i)`` when selected; slots beyond the
        options are deactivated.

        Raises:
            TooManyOptionsError: If the view has fewer slots than options.
                Raised before anything on the view is changed.
        """
        slots = view.slots
        if len(self.options) > len(slots):
            raise TooManyOptionsError(self.name, len(self.options), len(slots))

        self.chosen_index = -1
        view.set_speaker(self.speaker)
        view.set_line(self.text)

        for i, slot in enumerate(slots):
            if i < len(self.options):
                slot.activate(self.options[i].label, partial(on_select, i))
            else:
                slot.deactivate()

    def has_next(self) -> bool:
        return self.chosen_index >= 0

    def next_node(self) -> Optional[DialogNode]:
        if self.chosen_index < 0:
            return None
        return self.options[self.chosen_index].target


DialogNode = Union[LineNode, ChoiceNode]


@dataclass
class ConversationTree:
    """
    One fully linked graph built from one tree document.

    The tree owns every node allocated for it, in document order.
    """
    tree_id: str
    root: Optional[DialogNode] = None
    nodes: list[DialogNode] = field(default_factory=list, repr=False)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def is_empty(self) -> bool:
        return self.root is None
