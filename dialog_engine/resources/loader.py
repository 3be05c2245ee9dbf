"""
Resource loader.

Resolves document names (relative, without extension) under a resource
root and returns their text. Mirrors a "Resources" folder layout such as:

    Resources/
        Dialogs/
            Pairs/en.xml
            Trees/intro.xml
"""

import logging
from pathlib import Path


class ResourceNotFoundError(FileNotFoundError):
    """Raised when a named resource has no file behind it."""

    def __init__(self, name: str, path: Path):
        super().__init__(f"Resource \"{name}\" not found at {path}")
        self.name = name
        self.path = path


class ResourceLoader:
    """
    Reads text resources from a root directory.
    """

    def __init__(self, root: Path | str, encoding: str = "utf-8"):
        self._root = Path(root)
        self._encoding = encoding
        self.logger = logging.getLogger(__name__)

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, name: str, extension: str = "") -> Path:
        """Map a resource name to its path on disk."""
        path = self._root / name
        if extension and path.suffix != extension:
            path = path.with_name(path.name + extension)
        return path

    def exists(self, name: str, extension: str = "") -> bool:
        return self.resolve(name, extension).is_file()

    def read_text(self, name: str, extension: str = "") -> str:
        """
        Read a resource as text.

        Args:
            name: Resource name relative to the root (e.g. "Dialogs/Trees/intro")
            extension: Appended unless ``name`` already ends with it

        Raises:
            ResourceNotFoundError: If no file exists for the name
        """
        path = self.resolve(name, extension)
        if not path.is_file():
            raise ResourceNotFoundError(name, path)

        self.logger.debug(f"Reading resource {path}")
        with open(path, 'r', encoding=self._encoding) as f:
            return f.read()
