"""
Dialog database - loads every configured document at startup.

Pairs documents are loaded first so tree text can be localized, then
every tree document is built and registered. A broken document is
logged and skipped; the others still load.
"""

from __future__ import annotations

import logging
from typing import Optional

from dialog_engine.resources.loader import ResourceLoader, ResourceNotFoundError
from dialog_framework.dialog.builder import GraphBuilder
from dialog_framework.dialog.errors import ParseError, TooManyOptionsError, TreeBuildError
from dialog_framework.dialog.nodes import ConversationTree
from dialog_framework.dialog.registry import ConversationRegistry
from dialog_framework.dialog.settings import DialogSettings
from dialog_framework.dialog.system import render_tree


class DialogDatabase:
    """
    Startup loader for dialog documents.

    Usage:
        database = DialogDatabase(load_settings("dialogs.json"))
        database.load_all()
        manager = DialogManager(database.registry, display, input_lock, bus)
    """

    def __init__(
        self,
        settings: DialogSettings,
        registry: Optional[ConversationRegistry] = None,
        loader: Optional[ResourceLoader] = None,
    ):
        self.settings = settings
        self.registry = registry if registry is not None else ConversationRegistry()
        self.loader = loader if loader is not None else ResourceLoader(settings.resource_root)

        self.logger = logging.getLogger(__name__)

    def load_all(self) -> list[str]:
        """
        Load every configured pairs and tree document.

        Returns:
            Ids of the trees that were registered
        """
        pairs = 0
        for name in self.settings.pair_files:
            try:
                pairs += self.load_pairs(name)
            except (ResourceNotFoundError, ParseError) as e:
                self.logger.error(f"Failed to load dialog pairs {name}: {e}")

        loaded = []
        for name in self.settings.tree_files:
            try:
                tree = self.load_tree(name)
            except (ResourceNotFoundError, ParseError, TreeBuildError, TooManyOptionsError) as e:
                self.logger.error(f"Failed to load dialog tree {name}: {e}")
                continue
            if tree is not None:
                loaded.append(tree.tree_id)

        self.logger.info(f"Loaded {pairs} dialog pairs, {len(loaded)} dialog trees.")
        return loaded

    def load_pairs(self, name: str) -> int:
        """Load one pairs document into the localization table."""
        text = self.loader.read_text(self.settings.pairs_name(name), self.settings.extension)
        return self.registry.localization.load(text, source=name)

    def load_tree(self, name: str) -> Optional[ConversationTree]:
        """
        Build and register one tree document.

        Returns:
            The registered tree, or None if the document had no usable node
        """
        text = self.loader.read_text(self.settings.tree_name(name), self.settings.extension)
        builder = GraphBuilder(self.registry.localization, max_options=self.settings.choice_slots)
        tree = builder.build(text, tree_id=name)

        if tree.is_empty:
            self.logger.warning(f"Dialog tree {name} has no nodes, not registering it")
            return None

        self.registry.register(tree)
        return tree

    def show_tree(self, tree_id: str) -> str:
        """Debug listing of a loaded tree."""
        return render_tree(self.registry, tree_id)
