# font_inventory.py
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from analyzers.element_scanner import ElementFontScanner
from analyzers.page_aggregator import PageFontAggregator
from analyzers.report_builder import ReportBuilder
from analyzers.run_extractor import TextRunExtractor
from models.fonts import AggregateReport
from models.outcome import Empty, Failure, Outcome, Success
from models.settings import AnalysisSettings
from providers.base import DocumentProvider
from providers.factory import open_document
from reports.csv_reporter import CSVReporter
from reports.markdown_reporter import MarkdownReporter
from reports.org_reporter import OrgReporter
from reports.table_layout import TableLayoutBuilder
from reports.text_reporter import TextReporter
from utils.config_loader import ConfigLoader
from utils.logger import setup_logger

logger = setup_logger(__name__)

class OutputFormat(Enum):
    """Supported output formats for file reports."""
    TXT = "txt"
    CSV = "csv"
    ORG = "org"
    MD = "md"

REPORTERS = {
    OutputFormat.TXT: TextReporter,
    OutputFormat.CSV: CSVReporter,
    OutputFormat.ORG: OrgReporter,
    OutputFormat.MD: MarkdownReporter,
}

class FontInventory:
    """
    Runs the font inventory of one document end to end.

    This class:
    1. Builds the per-page font report over the requested page range
    2. Lays out the summary table
    3. Hands the table to the document provider, on the first page
    4. Classifies the run as Success, Empty or Failure
    """

    def __init__(self, document: DocumentProvider, settings: Optional[AnalysisSettings] = None):
        """
        Initialize the font inventory.

        Args:
            document: Open document to analyze and write the table into
            settings: Analysis settings (defaults apply when omitted)
        """
        self.document = document
        self.settings = settings or AnalysisSettings()
        extractor = TextRunExtractor(self.settings.extraction)
        self.report_builder = ReportBuilder(
            PageFontAggregator(ElementFontScanner(extractor)),
            show_progress=self.settings.show_progress,
        )
        self.layout_builder = TableLayoutBuilder(self.settings.table)
        self.report: Optional[AggregateReport] = None
        self._running = False

    def run(self, limit: Any = None) -> Outcome:
        """
        Analyze the document and write the summary table.

        Args:
            limit: Number of leading pages to analyze; anything but a
                positive integer within range analyzes every page

        Returns:
            Success, Empty or Failure

        Raises:
            RuntimeError: If called while a run is already in progress
        """
        if self._running:
            raise RuntimeError("Font inventory is already running.")
        self._running = True
        try:
            return self._run(limit)
        except Exception as e:
            logger.error(f"Error during font inventory: {e}")
            return Failure(reason=str(e) or type(e).__name__)
        finally:
            self._running = False

    def _run(self, limit: Any) -> Outcome:
        self.report = None
        report = self.report_builder.build(self.document.pages(), limit)
        self.report = report

        if report.is_empty:
            logger.info(f"No fonts found in {report.pages_analyzed} pages; no table written")
            return Empty(pages_analyzed=report.pages_analyzed)

        layout = self.layout_builder.layout(report, self.document.page_width())
        self.document.insert_table(layout, page_index=0)
        self.document.save()
        logger.info(f"Summary table with {layout.row_count} rows written")
        return Success(pages_analyzed=report.pages_analyzed, rows_written=layout.row_count)

    def generate_reports(self, output_formats, output_stem: str = "font_inventory", source: str = "") -> None:
        """
        Write the last run's report in the requested file formats.

        Args:
            output_formats: Format names, e.g. ["txt", "csv"]
            output_stem: Output path without suffix
            source: Name of the analyzed document
        """
        if self.report is None:
            logger.warning("No report to export; run the inventory first")
            return

        for format_str in output_formats:
            try:
                format_enum = OutputFormat(format_str.lower())
            except ValueError:
                logger.error(f"Unsupported output format: {format_str}")
                continue
            reporter = REPORTERS[format_enum](self.report, source)
            output_path = f"{output_stem}.{format_enum.value}"
            reporter.generate_report(output_path)
            logger.info(f"Generated {format_enum.value} report: {output_path}")

def parse_page_limit(value: Optional[str]) -> Optional[int]:
    """Parse the page limit argument; anything but an integer means all pages."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring invalid page limit '{value}'; analyzing all pages")
        return None

def describe_outcome(outcome: Outcome) -> str:
    """Render an outcome as a one-line user notification."""
    if isinstance(outcome, Success):
        return (f"Font summary table added to the first page "
                f"({outcome.pages_analyzed} pages analyzed, {outcome.rows_written} rows).")
    if isinstance(outcome, Empty):
        return f"No fonts found in the {outcome.pages_analyzed} analyzed pages; no table was added."
    if isinstance(outcome, Failure):
        return f"Font inventory failed: {outcome.reason}"
    return str(outcome)

def main(argv=None) -> int:
    """Main entry point for the font inventory."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        logger.error("No document path provided.")
        print("Usage: python font_inventory.py <document_path> [page_limit] [config_path] [output_path]")
        return 1

    doc_path = args[0]
    limit = parse_page_limit(args[1] if len(args) > 1 else None)
    config_path = args[2] if len(args) > 2 else "config.json"
    output_path = args[3] if len(args) > 3 else None

    print("\nFont Inventory")
    print("=" * 50)

    try:
        settings = ConfigLoader.load_settings(config_path)
        document = open_document(doc_path, output_path, settings)
    except Exception as e:
        logger.error(f"Error opening document: {e}")
        print(f"\n{describe_outcome(Failure(reason=str(e)))}")
        return 1

    inventory = FontInventory(document, settings)
    outcome = inventory.run(limit)

    if not isinstance(outcome, Failure) and inventory.report is not None:
        print("\nFont Usage Analysis")
        print(inventory.report.get_formatted_summary())
        inventory.generate_reports(settings.output_format, source=Path(doc_path).name)

    print(f"\n{describe_outcome(outcome)}")
    print("=" * 50)
    return 1 if isinstance(outcome, Failure) else 0

if __name__ == "__main__":
    sys.exit(main())
