"""
Dialog module - branching conversation trees.

Provides:
- Pairs document loading (localization)
- Tree document parsing into linked node graphs
- A registry of loaded trees
- Step-by-step traversal driven by advance/choice events
"""

from dialog_framework.dialog.builder import GraphBuilder
from dialog_framework.dialog.database import DialogDatabase
from dialog_framework.dialog.errors import (
    DialogError,
    DialogStateError,
    DuplicateNodeError,
    EmptyChoiceError,
    IndexOutOfRangeError,
    NotFoundError,
    ParseError,
    TooManyOptionsError,
    TreeBuildError,
    UnresolvedReferenceError,
)
from dialog_framework.dialog.localization import LocalizationTable
from dialog_framework.dialog.nodes import (
    ChoiceNode,
    ConversationTree,
    DialogNode,
    DialogOption,
    LineNode,
    NodeKind,
)
from dialog_framework.dialog.registry import ConversationRegistry
from dialog_framework.dialog.settings import DialogSettings, load_settings
from dialog_framework.dialog.system import DialogEvent, DialogManager, render_tree

__all__ = [
    "GraphBuilder",
    "DialogDatabase",
    "LocalizationTable",
    "ConversationRegistry",
    "DialogManager",
    "DialogEvent",
    "render_tree",
    "DialogSettings",
    "load_settings",
    # Nodes
    "ChoiceNode",
    "ConversationTree",
    "DialogNode",
    "DialogOption",
    "LineNode",
    "NodeKind",
    # Errors
    "DialogError",
    "DialogStateError",
    "DuplicateNodeError",
    "EmptyChoiceError",
    "IndexOutOfRangeError",
    "NotFoundError",
    "ParseError",
    "TooManyOptionsError",
    "TreeBuildError",
    "UnresolvedReferenceError",
]
