# reports/base_reporter.py
from abc import ABC, abstractmethod
from models.fonts import AggregateReport

class BaseReporter(ABC):
    """Base class for all report generators."""

    def __init__(self, report: AggregateReport, source: str = ""):
        """
        Initialize reporter with analysis results.

        Args:
            report: Aggregate font report to export
            source: Name of the analyzed document, shown in the report title
        """
        self.report = report
        self.source = source

    @property
    def title(self) -> str:
        return f"Font Inventory: {self.source}" if self.source else "Font Inventory"

    @abstractmethod
    def generate_report(self, output_path: str) -> None:
        """
        Generate and save the report.

        Args:
            output_path: Path where report should be saved
        """
        pass
