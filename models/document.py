from dataclasses import dataclass
from enum import Enum
from typing import Any

class ElementKind(Enum):
    """Kinds of page elements the font scanner distinguishes."""
    SHAPE = "shape"
    TABLE = "table"
    OTHER = "other"

@dataclass(frozen=True)
class TextRun:
    """
    A span of text sharing one style, as read from the document.

    Attributes:
        font_family: Font family name, or None when the document does not set one
        font_size: Font size in points, or None when unset
        length: Number of characters in the span
    """
    font_family: Any = None
    font_size: Any = None
    length: Any = 0
