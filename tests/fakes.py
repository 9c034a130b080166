"""In-memory document provider used to exercise the analysis pipeline."""

from typing import List, Optional

from models.document import ElementKind, TextRun
from models.layout import TableLayout
from providers.base import DocumentProvider, Page, PageElement, TextBody


class ExplodingRun:
    """A run whose every property raises, like a corrupt style record."""

    @property
    def font_family(self):
        raise RuntimeError("corrupt run")

    @property
    def font_size(self):
        raise RuntimeError("corrupt run")

    @property
    def length(self):
        raise RuntimeError("corrupt run")


class FakeBody(TextBody):
    def __init__(self, runs=(), text=None, paragraph_runs=(), supports_runs=True, fail_after=None):
        self._runs = list(runs)
        self._paragraph_runs = list(paragraph_runs)
        self._text = "sample text" if text is None else text
        self._supports_runs = supports_runs
        self._fail_after = fail_after

    @property
    def text(self) -> str:
        return self._text

    @property
    def supports_runs(self) -> bool:
        return self._supports_runs

    def runs(self):
        for index, run in enumerate(self._runs):
            if self._fail_after is not None and index >= self._fail_after:
                raise RuntimeError("run iteration failed")
            yield run

    def paragraphs(self):
        yield from self._paragraph_runs


class BrokenBody(TextBody):
    """A text body whose text cannot be read."""

    @property
    def text(self) -> str:
        raise RuntimeError("unreadable cell")

    def runs(self):
        return []

    def paragraphs(self):
        return []


class FakeShape(PageElement):
    kind = ElementKind.SHAPE

    def __init__(self, body: TextBody):
        self._body = body

    def text_body(self) -> TextBody:
        return self._body


class FakeTable(PageElement):
    """Table of bodies; a cell holding an exception raises it when read."""

    kind = ElementKind.TABLE

    def __init__(self, cells):
        self._cells = cells

    @property
    def row_count(self) -> int:
        return len(self._cells)

    @property
    def column_count(self) -> int:
        return len(self._cells[0]) if self._cells else 0

    def cell(self, row: int, col: int) -> TextBody:
        value = self._cells[row][col]
        if isinstance(value, Exception):
            raise value
        return value


class BrokenTable(PageElement):
    kind = ElementKind.TABLE

    @property
    def row_count(self) -> int:
        raise RuntimeError("malformed table")


class FakeOther(PageElement):
    kind = ElementKind.OTHER


class FakePage(Page):
    def __init__(self, *elements: PageElement):
        self._elements = list(elements)
        self.visits = 0

    def elements(self) -> List[PageElement]:
        self.visits += 1
        return list(self._elements)


class FakeDocument(DocumentProvider):
    def __init__(self, pages=(), width=720.0, fail_insert=False, fail_pages=False):
        self._pages = list(pages)
        self._width = width
        self.fail_insert = fail_insert
        self.fail_pages = fail_pages
        self.inserted: List[tuple] = []
        self.saved: List[Optional[str]] = []

    def pages(self):
        if self.fail_pages:
            raise IOError("provider unavailable")
        return self._pages

    def page_width(self) -> float:
        return self._width

    def insert_table(self, layout: TableLayout, page_index: int = 0) -> None:
        if self.fail_insert:
            raise RuntimeError("insert rejected")
        self.inserted.append((layout, page_index))

    def save(self, path: Optional[str] = None) -> str:
        self.saved.append(path)
        return path or "memory"


def shape(*runs: TextRun) -> FakeShape:
    """Shape holding the given runs."""
    return FakeShape(FakeBody(runs))


def run(family, size, length=5) -> TextRun:
    return TextRun(font_family=family, font_size=size, length=length)
