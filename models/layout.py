from dataclasses import dataclass, field
from typing import List, Optional, Tuple

@dataclass(frozen=True)
class CellStyle:
    """
    Style directives for one table cell.

    Attributes:
        bold: Whether the cell text is bold
        font_size: Text size in points, or None to keep the document default
        fill_color: Background color as '#RRGGBB'
        foreground_color: Text color as '#RRGGBB'
    """
    bold: bool = False
    font_size: Optional[int] = None
    fill_color: Optional[str] = None
    foreground_color: Optional[str] = None

@dataclass(frozen=True)
class TableCell:
    """Content and style of the cell at (row, col)."""
    row: int
    col: int
    text: str
    style: CellStyle = field(default_factory=CellStyle)

@dataclass(frozen=True)
class TableLayout:
    """
    Abstract grid ready to be materialized as a table by a document provider.

    Attributes:
        row_count: Header row plus one row per font usage
        col_count: Always 3 (page label, family, sizes)
        cells: Cells in row-major order
        width: Table width in points
        row_height: Height of each row in points
        left: Horizontal offset from the page's left edge in points
        top: Vertical offset from the page's top edge in points
    """
    row_count: int
    col_count: int
    cells: Tuple[TableCell, ...]
    width: float
    row_height: float
    left: float = 0.0
    top: float = 0.0

    @property
    def height(self) -> float:
        return self.row_height * self.row_count

    @property
    def column_width(self) -> float:
        return self.width / self.col_count

    def cell(self, row: int, col: int) -> TableCell:
        return self.cells[row * self.col_count + col]

    def row(self, row: int) -> List[TableCell]:
        start = row * self.col_count
        return list(self.cells[start:start + self.col_count])
