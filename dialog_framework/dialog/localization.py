"""
Localization table - text keys to display strings.

Pairs documents are flat XML:

```
<pairs>
    <greeting>Hello, traveller!</greeting>
    <farewell>Safe travels.</farewell>
</pairs>
```

The tag is the key and the element body is the text.
"""

from __future__ import annotations

import logging

from dialog_framework.dialog.xmldoc import parse_document, element_text

logger = logging.getLogger(__name__)


class LocalizationTable:
    """
    Key -> display text lookup, filled once at startup.

    Later loads overwrite earlier entries with the same key.
    """

    def __init__(self):
        self._entries: dict[str, str] = {}

    def load(self, document_text: str, source: str = "<string>") -> int:
        """
        Load every pair of a document.

        Args:
            document_text: XML text of a pairs document
            source: Document name used in error messages

        Returns:
            Number of entries read from the document

        Raises:
            ParseError: If the document is not well-formed. Nothing from
                the document is committed in that case.
        """
        root = parse_document(document_text, source)

        entries = {child.tag: element_text(child) for child in root}

        overwritten = self._entries.keys() & entries.keys()
        if overwritten:
            logger.debug(f"{source} overrides {len(overwritten)} existing keys")

        self._entries.update(entries)
        logger.info(f"Loaded {len(entries)} dialog pairs from {source}")
        return len(entries)

    def resolve(self, key: str) -> str:
        """Return the text for ``key``, or ``key`` itself if it is unknown."""
        return self._entries.get(key, key)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
