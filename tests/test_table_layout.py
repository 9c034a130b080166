"""Unit tests for turning a font report into a styled table grid."""

from models.fonts import AggregateReport, FontUsage, PageFontReport
from models.settings import TableStyle
from reports.table_layout import TableLayoutBuilder


def two_page_report():
    return AggregateReport(
        pages=(
            PageFontReport(1, (FontUsage("Arial", (12,)),)),
            PageFontReport(2, (FontUsage("Times", (10, 14)), FontUsage("Arial", (9,)))),
        ),
        pages_analyzed=2,
    )


class TestRowsAndCells:
    def test_row_count_is_header_plus_usages(self):
        report = two_page_report()
        layout = TableLayoutBuilder().layout(report, 720)
        assert layout.row_count == 1 + report.total_usages == 4
        assert layout.col_count == 3
        assert len(layout.cells) == layout.row_count * 3

    def test_header_row(self):
        layout = TableLayoutBuilder().layout(two_page_report(), 720)
        header = layout.row(0)
        assert [cell.text for cell in header] == ["Slide", "Font Family", "Font Sizes"]
        for cell in header:
            assert cell.style.bold
            assert cell.style.font_size == 12
            assert cell.style.fill_color == "#4A86E8"
            assert cell.style.foreground_color == "#FFFFFF"

    def test_page_label_only_on_first_row_of_page(self):
        """Page 1 labels row 1; page 2 labels row 2 and leaves row 3 blank."""
        layout = TableLayoutBuilder().layout(two_page_report(), 720)
        assert [layout.cell(row, 0).text for row in (1, 2, 3)] == ["Slide 1", "Slide 2", ""]

    def test_family_and_sizes_columns(self):
        layout = TableLayoutBuilder().layout(two_page_report(), 720)
        assert [cell.text for cell in layout.row(2)] == ["Slide 2", "Times", "10, 14 pt"]
        assert layout.cell(3, 1).text == "Arial"
        assert layout.cell(3, 2).text == "9 pt"

    def test_row_fills_alternate_by_absolute_row(self):
        layout = TableLayoutBuilder().layout(two_page_report(), 720)
        fills = [layout.cell(row, 1).style.fill_color for row in (1, 2, 3)]
        assert fills == ["#F3F3F3", "#FFFFFF", "#F3F3F3"]
        assert not layout.cell(1, 0).style.bold

    def test_custom_labels_separator_and_unit(self):
        style = TableStyle(page_header="Page", page_label="p.{number}", size_separator="/", size_unit="")
        layout = TableLayoutBuilder(style).layout(two_page_report(), 720)
        assert layout.cell(0, 0).text == "Page"
        assert layout.cell(2, 0).text == "p.2"
        assert layout.cell(2, 2).text == "10/14"

    def test_empty_report_is_header_only(self):
        layout = TableLayoutBuilder().layout(AggregateReport(), 720)
        assert layout.row_count == 1


class TestGeometry:
    def test_width_capped_at_maximum(self):
        layout = TableLayoutBuilder().layout(two_page_report(), 960)
        assert layout.width == 500

    def test_width_never_exceeds_page(self):
        layout = TableLayoutBuilder().layout(two_page_report(), 400)
        assert layout.width == 360
        assert layout.width + layout.left <= 400

    def test_narrow_page_uses_page_width(self):
        layout = TableLayoutBuilder(TableStyle(margin=50)).layout(two_page_report(), 80)
        assert layout.width == 80

    def test_height_is_row_height_times_rows(self):
        layout = TableLayoutBuilder(TableStyle(row_height=18)).layout(two_page_report(), 720)
        assert layout.height == 18 * 4
        assert layout.left == layout.top == 20
