# reports/text_reporter.py
from .base_reporter import BaseReporter

class TextReporter(BaseReporter):
    """Generates reports in plain text format."""

    def generate_report(self, output_path: str) -> None:
        """
        Generate a plain text report.

        Args:
            output_path: Path where the text report should be saved
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(f"{self.title}\n")
            f.write("=" * len(self.title) + "\n\n")

            f.write("Font Usage by Page\n")
            f.write("------------------\n")
            f.write(self.report.get_formatted_summary())
            f.write("\n")

            families = self.report.families()
            if families:
                f.write("\nFamilies Used\n")
                f.write("-------------\n")
                for family in families:
                    f.write(f"- {family}\n")
