"""
Shared XML helpers for pairs and tree documents.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from dialog_framework.dialog.errors import ParseError


def parse_document(text: str, source: str = "<string>") -> ET.Element:
    """Parse document text and return its root element."""
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseError(source, str(e)) from e


def element_text(element: ET.Element) -> str:
    """All text inside an element, surrounding whitespace stripped."""
    return "".join(element.itertext()).strip()
