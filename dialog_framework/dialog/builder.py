"""
Graph builder - turns a tree document into linked dialog nodes.

Tree documents are flat XML. Each child element is one node; its tag (or
its ``id`` attribute, when given) is the name other nodes use to refer
to it:

```
<dialog>
    <hello type="showdialog" who="Guard" next="ask">greeting</hello>
    <ask type="choicedialog" who="Guard"
         choice_0="Yes" choiceNode_0="yes"
         choice_1="No" choiceNode_1="no">ask_pass</ask>
    <yes type="showdialog" who="Guard">pass_granted</yes>
    <no type="showdialog" who="Guard" next="">pass_denied</no>
</dialog>
```

Body text is looked up in the localization table; unmapped text is shown
as written.

Nodes may refer to nodes defined later in the document, so building is
done in two passes: allocate every node first, then link references.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Optional

from dialog_framework.dialog.errors import (
    DuplicateNodeError,
    EmptyChoiceError,
    TooManyOptionsError,
    UnresolvedReferenceError,
)
from dialog_framework.dialog.localization import LocalizationTable
from dialog_framework.dialog.nodes import (
    ChoiceNode,
    ConversationTree,
    DialogNode,
    DialogOption,
    LineNode,
)
from dialog_framework.dialog.xmldoc import parse_document, element_text

logger = logging.getLogger(__name__)

SHOW_DIALOG = "showdialog"
CHOICE_DIALOG = "choicedialog"


class GraphBuilder:
    """
    Builds ConversationTrees from tree documents.

    Args:
        localization: Table used to resolve body text
        max_options: Upper bound on options per choice node (usually the
            number of presentation slots); None disables the check
    """

    CHOICE_ATTR_PATTERN = re.compile(r'^choice(?:Node)?_(\d+)$')

    def __init__(
        self,
        localization: Optional[LocalizationTable] = None,
        max_options: Optional[int] = None,
    ):
        self.localization = localization if localization is not None else LocalizationTable()
        self.max_options = max_options

    def build(self, document_text: str, tree_id: str = "<string>") -> ConversationTree:
        """
        Build one tree.

        Args:
            document_text: XML text of a tree document
            tree_id: Identifier of the resulting tree (the document name)

        Returns:
            The built tree; ``tree.root`` is None when the document holds
            no usable element.

        Raises:
            ParseError: Malformed XML
            UnresolvedReferenceError: A reference names no element of the document
            EmptyChoiceError: A choice element has no option pairs
            DuplicateNodeError: Two elements share an identifier
            TooManyOptionsError: A choice exceeds ``max_options``
        """
        document = parse_document(document_text, tree_id)

        registered: dict[str, DialogNode] = {}
        allocated = self._allocate(document, registered, tree_id)

        for element, node in allocated:
            self._link(element, node, registered)

        nodes = [node for _, node in allocated]
        root = nodes[0] if nodes else None

        logger.debug(f"Built dialog tree {tree_id} with {len(nodes)} nodes")
        return ConversationTree(tree_id=tree_id, root=root, nodes=nodes)

    # Pass 1

    def _allocate(
        self,
        document: ET.Element,
        registered: dict[str, DialogNode],
        tree_id: str,
    ) -> list[tuple[ET.Element, DialogNode]]:
        """Create one node per recognised element and register it by name."""
        allocated = []

        for element in document:
            kind = element.get("type", "").strip().lower()
            name = self._node_name(element)

            if kind == SHOW_DIALOG:
                node = LineNode(name=name)
            elif kind == CHOICE_DIALOG:
                node = ChoiceNode(name=name)
            else:
                logger.warning(f"Unknown dialog type \"{kind}\" for {name} in {tree_id}")
                continue

            node.speaker = element.get("who", "")
            node.text = self.localization.resolve(element_text(element))

            if name in registered:
                raise DuplicateNodeError(name)
            registered[name] = node
            allocated.append((element, node))

        return allocated

    # Pass 2

    def _link(
        self,
        element: ET.Element,
        node: DialogNode,
        registered: dict[str, DialogNode],
    ) -> None:
        """Turn textual references of one element into node references."""
        if isinstance(node, LineNode):
            next_name = element.get("next", "").strip()
            if next_name:
                node.successor = self._lookup(node.name, next_name, registered)
            return

        pairs = self._choice_pairs(element, node.name)
        if not pairs:
            raise EmptyChoiceError(node.name)
        if self.max_options is not None and len(pairs) > self.max_options:
            raise TooManyOptionsError(node.name, len(pairs), self.max_options)

        node.options = [
            DialogOption(label=label, target=self._lookup(node.name, target, registered))
            for label, target in pairs
        ]

    def _choice_pairs(self, element: ET.Element, name: str) -> list[tuple[str, str]]:
        """Read contiguous ``choice_i`` / ``choiceNode_i`` pairs from i = 0."""
        pairs = []
        while True:
            i = len(pairs)
            label = element.get(f"choice_{i}")
            target = element.get(f"choiceNode_{i}")
            if label is None or target is None:
                break
            pairs.append((label, target.strip()))

        leftovers = [
            attr for attr in element.attrib
            if (match := self.CHOICE_ATTR_PATTERN.match(attr)) and int(match.group(1)) >= len(pairs)
        ]
        if leftovers:
            logger.warning(f"Ignoring unpaired choice attributes on {name}: {', '.join(sorted(leftovers))}")

        return pairs

    @staticmethod
    def _lookup(source: str, target: str, registered: dict[str, DialogNode]) -> DialogNode:
        try:
            return registered[target]
        except KeyError:
            raise UnresolvedReferenceError(source, target) from None

    @staticmethod
    def _node_name(element: ET.Element) -> str:
        return element.get("id") or element.tag
