from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import pandas as pd

@dataclass(frozen=True)
class ResolvedFont:
    """
    Font family and point size resolved from one text run.

    Attributes:
        family: Font family name, never empty
        size: Font size in whole points, always positive
    """
    family: str
    size: int

    def __str__(self) -> str:
        return f"{self.family} {self.size}pt"

@dataclass(frozen=True)
class FontUsage:
    """
    One font family observed on a page together with every size it was used at.

    Attributes:
        font_family: Font family name
        sizes: Distinct sizes in ascending order
    """
    font_family: str
    sizes: Tuple[int, ...]

    def __str__(self) -> str:
        return f"{self.font_family}: {', '.join(str(size) for size in self.sizes)}"

@dataclass(frozen=True)
class PageFontReport:
    """
    Font usages of a single page, in the order families were first seen.

    Attributes:
        page_number: 1-based page (slide) number
        fonts: Font usages found on the page
    """
    page_number: int
    fonts: Tuple[FontUsage, ...]

@dataclass(frozen=True)
class AggregateReport:
    """
    Per-page font reports for the analyzed range of a document.

    Attributes:
        pages: Reports for pages with at least one font, ascending page order
        pages_analyzed: Number of pages visited, including pages without fonts
    """
    pages: Tuple[PageFontReport, ...] = field(default_factory=tuple)
    pages_analyzed: int = 0

    def __iter__(self) -> Iterator[PageFontReport]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    @property
    def is_empty(self) -> bool:
        return not self.pages

    @property
    def total_usages(self) -> int:
        """Number of (page, family) pairs, i.e. body rows of the summary table."""
        return sum(len(page.fonts) for page in self.pages)

    def families(self) -> List[str]:
        """Distinct font families across all pages, in first-seen order."""
        seen = {}
        for page in self.pages:
            for usage in page.fonts:
                seen.setdefault(usage.font_family, None)
        return list(seen)

    def to_frame(self) -> pd.DataFrame:
        """Flatten the report into one row per page and font family."""
        rows = [
            {
                "page": page.page_number,
                "font_family": usage.font_family,
                "sizes": ", ".join(str(size) for size in usage.sizes),
                "min_size": usage.sizes[0],
                "max_size": usage.sizes[-1],
            }
            for page in self.pages
            for usage in page.fonts
        ]
        return pd.DataFrame(
            rows, columns=["page", "font_family", "sizes", "min_size", "max_size"]
        )

    def get_formatted_summary(self) -> str:
        """Generate a formatted summary of font usage."""
        summary = [f"Pages analyzed: {self.pages_analyzed}"]

        if not self.pages:
            summary.append("No fonts detected.")
            return "\n".join(summary)

        summary.append(f"Pages with text: {len(self.pages)}")
        summary.append(f"Distinct families: {len(self.families())}")
        for page in self.pages:
            summary.append(f"\nPage {page.page_number}:")
            for usage in page.fonts:
                summary.append(f"  - {usage}")

        return "\n".join(summary)
