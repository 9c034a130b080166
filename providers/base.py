# providers/base.py
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from models.document import ElementKind, TextRun
from models.layout import TableLayout

class TextBody(ABC):
    """Text content of a shape or table cell, readable as styled spans."""

    @property
    @abstractmethod
    def text(self) -> str:
        """Plain text of the whole body."""

    @property
    def supports_runs(self) -> bool:
        """Whether run-level iteration is available for this body."""
        return True

    @abstractmethod
    def runs(self) -> Iterable[TextRun]:
        """Yield one TextRun per styled run."""

    @abstractmethod
    def paragraphs(self) -> Iterable[TextRun]:
        """Yield one TextRun per paragraph, using paragraph-level style."""

class PageElement(ABC):
    """
    A placeable object on a page.

    Shapes implement ``text_body``; tables implement ``row_count``,
    ``column_count`` and ``cell``. The scanner relies on ``kind`` alone
    to choose between them.
    """

    kind: ElementKind = ElementKind.OTHER

    def text_body(self) -> TextBody:
        raise NotImplementedError(f"{self.kind.value} elements carry no text body")

    @property
    def row_count(self) -> int:
        raise NotImplementedError(f"{self.kind.value} elements have no rows")

    @property
    def column_count(self) -> int:
        raise NotImplementedError(f"{self.kind.value} elements have no columns")

    def cell(self, row: int, col: int) -> TextBody:
        raise NotImplementedError(f"{self.kind.value} elements have no cells")

class Page(ABC):
    """One page (slide) of a document."""

    @abstractmethod
    def elements(self) -> List[PageElement]:
        """Return the page's elements in document order."""

class DocumentProvider(ABC):
    """Read and write access to one open document."""

    @abstractmethod
    def pages(self) -> Sequence[Page]:
        """Return all pages in order; page numbers are 1-based positions."""

    @abstractmethod
    def page_width(self) -> float:
        """Return the usable page width in points."""

    @abstractmethod
    def insert_table(self, layout: TableLayout, page_index: int = 0) -> None:
        """
        Materialize a table layout on the given page.

        Either the whole table is inserted or, on error, nothing is left
        behind and the error is re-raised.
        """

    @abstractmethod
    def save(self, path: Optional[str] = None) -> str:
        """Write the document and return the path written."""
