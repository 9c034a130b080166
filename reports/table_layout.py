# reports/table_layout.py
from typing import List, Optional

from models.fonts import AggregateReport, FontUsage
from models.layout import CellStyle, TableCell, TableLayout
from models.settings import TableStyle

COLUMN_COUNT = 3

class TableLayoutBuilder:
    """
    Turns an aggregate font report into a styled three-column grid.

    Columns are page label, font family and sizes. Row 0 is the header.
    The page label appears only on the first row of each page, leaving the
    following rows of that page blank in column 0. Body rows alternate
    between the two row fills by absolute row index.
    """

    def __init__(self, style: Optional[TableStyle] = None):
        self.style = style or TableStyle()

    def layout(self, report: AggregateReport, page_width: float) -> TableLayout:
        """
        Build the table layout for a report.

        Args:
            report: Aggregate report to render
            page_width: Width of the target page in points

        Returns:
            TableLayout with ``1 + report.total_usages`` rows
        """
        cells: List[TableCell] = self._header_cells()

        row = 1
        for page in report:
            for index, usage in enumerate(page.fonts):
                label = self.style.page_label.format(number=page.page_number) if index == 0 else ""
                cells.extend(self._body_cells(row, label, usage))
                row += 1

        return TableLayout(
            row_count=row,
            col_count=COLUMN_COUNT,
            cells=tuple(cells),
            width=self.table_width(page_width),
            row_height=self.style.row_height,
            left=self.style.margin,
            top=self.style.margin,
        )

    def table_width(self, page_width: float) -> float:
        """Fixed maximum width, never wider than the page minus its margins."""
        available = page_width - 2 * self.style.margin
        if available <= 0:
            available = page_width
        return min(self.style.max_width, available)

    def format_sizes(self, sizes) -> str:
        joined = self.style.size_separator.join(str(size) for size in sizes)
        return f"{joined}{self.style.size_unit}"

    def _header_cells(self) -> List[TableCell]:
        style = CellStyle(
            bold=True,
            font_size=self.style.header_font_size,
            fill_color=self.style.header_fill,
            foreground_color=self.style.header_foreground,
        )
        labels = (self.style.page_header, self.style.family_header, self.style.sizes_header)
        return [TableCell(0, col, text, style) for col, text in enumerate(labels)]

    def _body_cells(self, row: int, label: str, usage: FontUsage) -> List[TableCell]:
        style = CellStyle(
            bold=False,
            font_size=self.style.body_font_size,
            fill_color=self.style.row_fills[row % 2],
            foreground_color=self.style.body_foreground,
        )
        texts = (label, usage.font_family, self.format_sizes(usage.sizes))
        return [TableCell(row, col, text, style) for col, text in enumerate(texts)]
