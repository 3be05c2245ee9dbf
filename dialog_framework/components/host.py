"""
Host exclusivity - lets a conversation suspend unrelated input.

While a conversation is shown the dialog manager holds a lock on the
host, so that e.g. player movement can ignore input until it is released.
"""

from __future__ import annotations

from typing import Protocol

from dialog_engine.core.component import Component


class HostExclusivity(Protocol):
    """Something the dialog manager can lock and unlock."""

    def lock(self) -> None: ...

    def unlock(self) -> None: ...


class InputLock(Component):
    """
    Simple host lock.

    Hosts check ``locked`` before handling their own input (movement,
    menus). Locking twice and unlocking once releases it.

    Attributes:
        locked: Whether a conversation currently holds the host
    """
    locked: bool = False

    def lock(self) -> None:
        self.locked = True

    def unlock(self) -> None:
        self.locked = False
