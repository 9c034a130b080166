from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

@dataclass(frozen=True)
class ExtractionPolicy:
    """
    Fallbacks applied when a text run's style cannot be read.

    Attributes:
        fallback_family: Family reported for runs without a usable font name
        fallback_size: Size reported for runs without a usable font size
    """
    fallback_family: str = "Default"
    fallback_size: int = 11

@dataclass(frozen=True)
class TableStyle:
    """
    Labels, colors and geometry of the generated summary table.

    Sizes are in points and colors are '#RRGGBB' strings.
    """
    page_header: str = "Slide"
    family_header: str = "Font Family"
    sizes_header: str = "Font Sizes"
    page_label: str = "Slide {number}"
    size_separator: str = ", "
    size_unit: str = " pt"
    header_font_size: int = 12
    body_font_size: int = 10
    header_fill: str = "#4A86E8"
    header_foreground: str = "#FFFFFF"
    body_foreground: str = "#000000"
    row_fills: Tuple[str, str] = ("#FFFFFF", "#F3F3F3")
    max_width: float = 500.0
    margin: float = 20.0
    row_height: float = 20.0

@dataclass(frozen=True)
class AnalysisSettings:
    """
    Immutable settings threaded through one font inventory run.

    Attributes:
        extraction: Fallback policy for unreadable run styles
        table: Style of the summary table
        chars_per_page: Characters per approximate page for Word documents
        output_format: File report formats to write after a run
        show_progress: Whether to print page scanning progress
    """
    extraction: ExtractionPolicy = field(default_factory=ExtractionPolicy)
    table: TableStyle = field(default_factory=TableStyle)
    chars_per_page: int = 1800
    output_format: Tuple[str, ...] = ("txt",)
    show_progress: bool = False

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "AnalysisSettings":
        """Build settings from a validated configuration dictionary."""
        table_config = dict(config.get("table", {}))
        if "row_fills" in table_config:
            table_config["row_fills"] = tuple(table_config["row_fills"])
        return cls(
            extraction=ExtractionPolicy(
                fallback_family=config["fallback_font_family"],
                fallback_size=config["fallback_font_size"],
            ),
            table=TableStyle(**table_config),
            chars_per_page=config["chars_per_page"],
            output_format=tuple(config["output_format"]),
            show_progress=config["show_progress"],
        )
