"""
Dialog system - walks a conversation tree one node at a time.

The manager holds the single active-node cursor. It never parses
documents: it only walks trees the registry already owns, pushing text
to the presentation collaborator and holding the host lock while a
conversation is running.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Optional

from dialog_engine.core.actions import Action
from dialog_engine.core.events import Event, EventBus
from dialog_engine.input.handler import InputEvent
from dialog_framework.components.dialog import DialogPresenter
from dialog_framework.components.host import HostExclusivity
from dialog_framework.dialog.errors import (
    DialogStateError,
    IndexOutOfRangeError,
    TooManyOptionsError,
)
from dialog_framework.dialog.nodes import ChoiceNode, DialogNode, LineNode
from dialog_framework.dialog.registry import ConversationRegistry

logger = logging.getLogger(__name__)


class DialogEvent(Enum):
    """Conversation lifecycle events."""
    STARTED = auto()           # tree_id
    NODE_ENTERED = auto()      # tree_id, node
    CHOICE_SELECTED = auto()   # tree_id, node, index, label
    ENDED = auto()             # tree_id


class DialogManager:
    """
    Runs conversations.

    States:
    - Idle: no conversation (``current_node`` is None)
    - Active: ``current_node`` is the node on screen

    Usage:
        manager = DialogManager(registry, display, input_lock, bus)
        manager.start("intro")
        manager.advance()          # or press Action.ADVANCE
        manager.select_option(1)   # or press a choice slot
    """

    def __init__(
        self,
        registry: ConversationRegistry,
        view: DialogPresenter,
        host: HostExclusivity,
        events: Optional[EventBus] = None,
    ):
        self.registry = registry
        self.view = view
        self.host = host
        self.events = events

        self._current_node: Optional[DialogNode] = None
        self._current_tree_id: Optional[str] = None

        if events is not None:
            events.subscribe(InputEvent.ACTION_PRESSED, self._on_action)

    @property
    def is_active(self) -> bool:
        return self._current_node is not None

    @property
    def current_node(self) -> Optional[DialogNode]:
        return self._current_node

    @property
    def current_tree_id(self) -> Optional[str]:
        return self._current_tree_id

    def start(self, tree_id: str) -> None:
        """
        Show a conversation tree from its root.

        A conversation already running is dropped without an end notice.

        Raises:
            NotFoundError: If no tree is registered under ``tree_id``
            TooManyOptionsError: If the root offers more options than the
                view has slots; the manager state is left untouched
        """
        root = self.registry.lookup(tree_id)

        if self._current_node is not None:
            logger.debug(f"Dropping dialog {self._current_tree_id} to start {tree_id}")

        root.present(self.view, self._slot_callback(root))
        self._current_node = root
        self._current_tree_id = tree_id
        self.host.lock()

        logger.info(f"Dialog started: {tree_id}")
        self._publish(DialogEvent.STARTED, tree_id=tree_id)
        self._publish(DialogEvent.NODE_ENTERED, tree_id=tree_id, node=root.name)

    def select_option(self, index: int) -> None:
        """
        Pick option ``index`` of the active choice node and advance.

        Raises:
            DialogStateError: If no choice node is active
            IndexOutOfRangeError: If ``index`` is not a valid option
            TooManyOptionsError: If the option's target cannot be shown

        On any error the node's selection, the cursor and the display are
        left as they were and no event is published.
        """
        node = self._current_node
        if not isinstance(node, ChoiceNode):
            raise DialogStateError("No choice is being shown")

        if not 0 <= index < len(node.options):
            raise IndexOutOfRangeError(index, len(node.options))

        previous = node.chosen_index
        node.chosen_index = index
        try:
            next_node = self._present_next(node)
        except TooManyOptionsError:
            node.chosen_index = previous
            raise

        self._publish(
            DialogEvent.CHOICE_SELECTED,
            tree_id=self._current_tree_id,
            node=node.name,
            index=index,
            label=node.options[index].label,
        )
        self._move_to(next_node)

    def advance(self) -> None:
        """
        Move to the next node if the active node allows it.

        Does nothing while idle or while a choice is still unanswered.
        Passing a terminal node ends the conversation.
        """
        node = self._current_node
        if node is None or not node.has_next():
            return

        self._move_to(self._present_next(node))

    def render_tree(self, tree_id: str) -> str:
        """Debug listing of a registered tree, see ``render_tree``."""
        return render_tree(self.registry, tree_id)

    def _present_next(self, node: DialogNode) -> Optional[DialogNode]:
        """Present the successor of ``node`` without moving the cursor."""
        next_node = node.next_node()
        if next_node is not None:
            next_node.present(self.view, self._slot_callback(next_node))
        return next_node

    def _move_to(self, next_node: Optional[DialogNode]) -> None:
        if next_node is None:
            self._end()
            return

        self._current_node = next_node
        self._publish(DialogEvent.NODE_ENTERED, tree_id=self._current_tree_id, node=next_node.name)

    def _end(self) -> None:
        """Clear the display and release the host."""
        tree_id = self._current_tree_id
        self._current_node = None
        self._current_tree_id = None

        self.view.set_speaker("")
        self.view.set_line("")
        for slot in self.view.slots:
            slot.deactivate()
        self.host.unlock()

        logger.info(f"Dialog ended: {tree_id}")
        self._publish(DialogEvent.ENDED, tree_id=tree_id)

    def _slot_callback(self, node: DialogNode) -> Callable[[int], None]:
        def on_select(index: int) -> None:
            if node is not self._current_node:
                logger.debug(f"Ignoring stale choice slot {index} of {node.name}")
                return
            self.select_option(index)

        return on_select

    def _on_action(self, event: Event) -> None:
        if event.get('action') == Action.ADVANCE and self.is_active:
            self.advance()

    def _publish(self, event_type: DialogEvent, **data) -> None:
        if self.events is not None:
            self.events.publish(event_type, **data)


def render_tree(registry: ConversationRegistry, tree_id: str) -> str:
    """
    Describe a tree by following line successors from its root.

    Produces one line per node. Stops at the first choice node (which gets
    a line of its own), at a terminal line, or when a node repeats.
    Intended for debugging only; nothing is selected or presented.

    Raises:
        NotFoundError: If no tree is registered under ``tree_id``
    """
    lines = []
    seen: set[int] = set()
    node: Optional[DialogNode] = registry.get_tree(tree_id).root

    while node is not None and id(node) not in seen:
        seen.add(id(node))
        if isinstance(node, LineNode):
            lines.append(f"Show \"{node.text}\" from \"{node.speaker}\".")
            node = node.successor
        else:
            lines.append(
                f"Choice \"{node.text}\" from \"{node.speaker}\" ({len(node.options)} options)."
            )
            break

    return "\n".join(lines) + "\n" if lines else ""
