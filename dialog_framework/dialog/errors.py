"""
Dialog errors.

Load-time errors (ParseError, TreeBuildError and its subclasses) make a
single document unavailable. Traversal-time errors (NotFoundError,
IndexOutOfRangeError, TooManyOptionsError, DialogStateError) go back to
the caller and leave the running conversation as it was.
"""

from __future__ import annotations


class DialogError(Exception):
    """Base class for every dialog error."""


class ParseError(DialogError):
    """A document is not well-formed XML."""

    def __init__(self, source: str, message: str):
        super().__init__(f"Unable to parse \"{source}\": {message}")
        self.source = source
        self.message = message


class TreeBuildError(DialogError):
    """A tree document parsed but does not describe a valid graph."""


class UnresolvedReferenceError(TreeBuildError):
    """A ``next`` or ``choiceNode_i`` names an element not in the document."""

    def __init__(self, source: str, target: str):
        super().__init__(f"Node \"{source}\" refers to unknown node \"{target}\"")
        self.source = source
        self.target = target


class EmptyChoiceError(TreeBuildError):
    """A choice element declares no option pairs."""

    def __init__(self, source: str):
        super().__init__(f"Choice node \"{source}\" has no options")
        self.source = source


class DuplicateNodeError(TreeBuildError):
    """Two elements of one document share an identifier."""

    def __init__(self, name: str):
        super().__init__(f"Node \"{name}\" is defined more than once")
        self.name = name


class TooManyOptionsError(DialogError):
    """A choice node has more options than there are presentation slots."""

    def __init__(self, node: str, count: int, slots: int):
        super().__init__(
            f"Choice node \"{node}\" has {count} options but only {slots} slots are available"
        )
        self.node = node
        self.count = count
        self.slots = slots


class NotFoundError(DialogError, LookupError):
    """No conversation tree is registered under the requested id."""

    def __init__(self, tree_id: str):
        super().__init__(f"Dialog tree \"{tree_id}\" not found")
        self.tree_id = tree_id


class IndexOutOfRangeError(DialogError, IndexError):
    """An option index outside the active choice node's options."""

    def __init__(self, index: int, count: int):
        super().__init__(f"Option {index} out of range (node has {count} options)")
        self.index = index
        self.count = count


class DialogStateError(DialogError):
    """An operation was requested in a state that does not allow it."""
