from typing import Any, List, Optional, Sequence

from models.fonts import AggregateReport, PageFontReport
from providers.base import Page
from utils.logger import setup_logger
from utils.progress import ProgressTracker
from analyzers.page_aggregator import PageFontAggregator

logger = setup_logger(__name__)

def resolve_page_limit(limit: Any, total: int) -> int:
    """
    Return the number of leading pages to analyze.

    Anything other than an integer between 1 and ``total`` selects the
    full range.
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        return total
    if limit <= 0 or limit > total:
        return total
    return limit

class ReportBuilder:
    """Builds the aggregate font report over the leading pages of a document."""

    def __init__(self, aggregator: Optional[PageFontAggregator] = None,
                 show_progress: bool = False):
        """
        Initialize the report builder.

        Args:
            aggregator: Per-page aggregator
            show_progress: Print a progress counter while scanning pages
        """
        self.aggregator = aggregator or PageFontAggregator()
        self.show_progress = show_progress

    def build(self, pages: Sequence[Page], limit: Any = None) -> AggregateReport:
        """
        Aggregate fonts page by page.

        Pages past the effective limit are never visited.

        Args:
            pages: All pages of the document, in order
            limit: Number of leading pages to analyze; invalid values mean all

        Returns:
            AggregateReport holding only pages with fonts

        Raises:
            ValueError: If the document has no pages
        """
        total = len(pages)
        if total == 0:
            raise ValueError("Document has no pages to analyze.")

        count = resolve_page_limit(limit, total)
        logger.info(f"Analyzing {count} of {total} pages")

        progress = ProgressTracker(count, "Scanning pages") if self.show_progress else None
        reports: List[PageFontReport] = []
        for index in range(count):
            report = self.aggregator.aggregate(pages[index], index + 1)
            if report is not None:
                reports.append(report)
            if progress:
                progress.update()
        if progress:
            progress.complete()

        logger.info(f"Found fonts on {len(reports)} of {count} pages")
        return AggregateReport(pages=tuple(reports), pages_analyzed=count)
