from typing import Dict, Optional, Set

from models.fonts import FontUsage, PageFontReport, ResolvedFont
from providers.base import Page
from utils.logger import setup_logger
from analyzers.element_scanner import ElementFontScanner

logger = setup_logger(__name__)

class PageFontAggregator:
    """Collects the distinct font families and sizes used on one page."""

    def __init__(self, scanner: Optional[ElementFontScanner] = None):
        self.scanner = scanner or ElementFontScanner()

    def aggregate(self, page: Page, page_number: int) -> Optional[PageFontReport]:
        """
        Scan every element of a page and deduplicate the fonts found.

        Families keep the order in which they were first seen; the sizes of
        each family are sorted ascending.

        Args:
            page: Page to scan
            page_number: 1-based number of the page

        Returns:
            PageFontReport, or None if the page has no text with a font
        """
        # Insertion ordered: family -> sizes
        sizes_by_family: Dict[str, Set[int]] = {}

        def add(font: ResolvedFont) -> None:
            sizes_by_family.setdefault(font.family, set()).add(font.size)

        for element in page.elements():
            self.scanner.scan(element, add)

        if not sizes_by_family:
            logger.debug(f"No fonts found on page {page_number}")
            return None

        fonts = tuple(
            FontUsage(font_family=family, sizes=tuple(sorted(sizes)))
            for family, sizes in sizes_by_family.items()
        )
        logger.debug(f"Page {page_number}: {len(fonts)} font families")
        return PageFontReport(page_number=page_number, fonts=fonts)
