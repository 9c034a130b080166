# reports/markdown_reporter.py
from datetime import datetime
from .base_reporter import BaseReporter

class MarkdownReporter(BaseReporter):
    """Generates reports in Markdown format."""

    def generate_report(self, output_path: str) -> None:
        """
        Generate a Markdown format report.

        Args:
            output_path: Path where the Markdown report should be saved
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(f"# {self.title}\n\n")
            f.write(f"* Pages analyzed: {self.report.pages_analyzed}\n")
            f.write(f"* Pages with text: {len(self.report)}\n")
            f.write(f"* Distinct families: {len(self.report.families())}\n")

            if not self.report.is_empty:
                f.write("\n## Font Usage by Page\n")
                f.write("| Page | Font Family | Sizes |\n")
                f.write("|------|-------------|-------|\n")
                for page in self.report:
                    for index, usage in enumerate(page.fonts):
                        label = str(page.page_number) if index == 0 else ""
                        sizes = ", ".join(str(size) for size in usage.sizes)
                        f.write(f"| {label} | {usage.font_family} | {sizes} |\n")

            f.write(f"\n---\n*Report generated on {self.get_timestamp()}*\n")

    def get_timestamp(self) -> str:
        """Get formatted timestamp for the report."""
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")
