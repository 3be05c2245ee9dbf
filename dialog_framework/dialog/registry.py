"""
Conversation registry - every loaded tree, by document name.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from dialog_framework.dialog.errors import NotFoundError
from dialog_framework.dialog.localization import LocalizationTable
from dialog_framework.dialog.nodes import ConversationTree, DialogNode

logger = logging.getLogger(__name__)


class ConversationRegistry:
    """
    Owns all conversation trees and the localization table.

    Trees are never unloaded. Registering a tree id again replaces the
    stored tree; sessions already walking the old tree keep their own
    cursor into it.
    """

    def __init__(self, localization: Optional[LocalizationTable] = None):
        self.localization = localization if localization is not None else LocalizationTable()
        self._trees: dict[str, ConversationTree] = {}

    def register(self, tree: ConversationTree) -> None:
        """Store a tree under its id."""
        if tree.tree_id in self._trees:
            logger.debug(f"Replacing dialog tree {tree.tree_id}")
        self._trees[tree.tree_id] = tree

    def lookup(self, tree_id: str) -> DialogNode:
        """
        Get the root node of a tree.

        Raises:
            NotFoundError: If the tree was never registered or is empty
        """
        root = self.get_tree(tree_id).root
        if root is None:
            raise NotFoundError(tree_id)
        return root

    def get_tree(self, tree_id: str) -> ConversationTree:
        try:
            return self._trees[tree_id]
        except KeyError:
            raise NotFoundError(tree_id) from None

    def tree_ids(self) -> list[str]:
        return list(self._trees)

    def __contains__(self, tree_id: str) -> bool:
        return tree_id in self._trees

    def __iter__(self) -> Iterator[ConversationTree]:
        return iter(self._trees.values())

    def __len__(self) -> int:
        return len(self._trees)
