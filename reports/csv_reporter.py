# reports/csv_reporter.py
from .base_reporter import BaseReporter

class CSVReporter(BaseReporter):
    """Generates reports in CSV format, one row per page and font family."""

    def generate_report(self, output_path: str) -> None:
        """
        Generate a CSV format report.

        Args:
            output_path: Path where the CSV report should be saved
        """
        frame = self.report.to_frame()
        frame.to_csv(output_path, index=False, encoding='utf-8')
