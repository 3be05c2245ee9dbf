"""Resource loading module."""

from dialog_engine.resources.loader import ResourceLoader, ResourceNotFoundError

__all__ = [
    "ResourceLoader",
    "ResourceNotFoundError",
]
