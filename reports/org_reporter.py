# reports/org_reporter.py
from .base_reporter import BaseReporter

class OrgReporter(BaseReporter):
    """Generates reports in Org-mode format."""

    def generate_report(self, output_path: str) -> None:
        """
        Generate an Org-mode format report.

        Args:
            output_path: Path where the Org report should be saved
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(f"* {self.title}\n\n")
            f.write(f"- Pages analyzed: {self.report.pages_analyzed}\n")
            f.write(f"- Pages with text: {len(self.report)}\n")

            for page in self.report:
                f.write(f"\n** Page {page.page_number}\n")
                f.write("| Font Family | Sizes |\n")
                f.write("|-------------+-------|\n")
                for usage in page.fonts:
                    sizes = ", ".join(str(size) for size in usage.sizes)
                    f.write(f"| {usage.font_family} | {sizes} |\n")
