from typing import Callable, Iterable, Optional

from models.document import ElementKind
from models.fonts import ResolvedFont
from providers.base import PageElement, TextBody
from utils.logger import setup_logger
from analyzers.run_extractor import TextRunExtractor

logger = setup_logger(__name__)

class ElementFontScanner:
    """
    Walks the text-bearing units of one page element.

    Shapes are read as a single text body and tables cell by cell. Each
    resolved font is passed to the ``emit`` callback. Read errors are
    contained at the smallest unit possible: a failing run or cell is
    skipped, and a failing element is skipped as a whole, so the scan of
    sibling units and of the page always continues.
    """

    def __init__(self, extractor: Optional[TextRunExtractor] = None):
        self.extractor = extractor or TextRunExtractor()

    def scan(self, element: PageElement, emit: Callable[[ResolvedFont], None]) -> None:
        """
        Emit every font found in an element.

        Args:
            element: Page element to scan
            emit: Callback receiving each resolved font
        """
        try:
            kind = element.kind
            if kind is ElementKind.SHAPE:
                self._scan_body(element.text_body(), emit)
            elif kind is ElementKind.TABLE:
                self._scan_table(element, emit)
        except Exception as e:
            logger.warning(f"Skipping unreadable page element: {e}")

    def _scan_table(self, table: PageElement, emit: Callable[[ResolvedFont], None]) -> None:
        rows = table.row_count
        cols = table.column_count
        for row in range(rows):
            for col in range(cols):
                try:
                    self._scan_body(table.cell(row, col), emit)
                except Exception as e:
                    logger.debug(f"Skipping unreadable table cell ({row}, {col}): {e}")

    def _scan_body(self, body: TextBody, emit: Callable[[ResolvedFont], None]) -> None:
        text = body.text
        if not text or not text.strip():
            return

        spans = body.runs() if body.supports_runs else body.paragraphs()
        for run in self._materialize(spans):
            try:
                font = self.extractor.resolve(run)
            except Exception as e:
                logger.debug(f"Skipping unreadable text run: {e}")
                continue
            if font is not None:
                emit(font)

    def _materialize(self, spans: Iterable) -> list:
        """Collect spans eagerly, keeping those read before an iteration error."""
        collected = []
        try:
            for span in spans:
                collected.append(span)
        except Exception as e:
            logger.debug(f"Stopped reading text runs after {len(collected)}: {e}")
        return collected
