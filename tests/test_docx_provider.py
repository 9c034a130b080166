"""Tests for the python-docx document provider on documents built in tmp_path."""

import pytest
from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.shared import qn
from docx.shared import Length, Pt

from analyzers.report_builder import ReportBuilder
from font_inventory import FontInventory
from models.document import ElementKind
from models.fonts import FontUsage
from models.outcome import Success
from models.settings import AnalysisSettings
from providers.docx_provider import DocxDocument
from providers.factory import open_document
from reports.table_layout import TableLayoutBuilder


def add_paragraph(doc, text, family=None, size=None):
    paragraph = doc.add_paragraph()
    run = paragraph.add_run(text)
    if family:
        run.font.name = family
    if size:
        run.font.size = Pt(size)
    return paragraph


def build_document(path):
    doc = Document()
    add_paragraph(doc, "Introduction", "Arial", 16)
    add_paragraph(doc, "Some body text", "Georgia", 11)
    doc.add_page_break()
    table = doc.add_table(rows=2, cols=2)
    for row in range(2):
        for col in range(2):
            run = table.cell(row, col).paragraphs[0].add_run(f"r{row}c{col}")
            run.font.name = "Calibri"
            run.font.size = Pt(9 + col)
    add_paragraph(doc, "Closing words", "Arial", 16)
    doc.save(str(path))
    return str(path)


@pytest.fixture
def doc_path(tmp_path):
    return build_document(tmp_path / "report.docx")


class TestPagination:
    def test_page_break_starts_new_page(self, doc_path):
        pages = DocxDocument(doc_path).pages()
        assert len(pages) == 2
        # two paragraphs plus the page break paragraph
        assert [element.kind for element in pages[0].elements()] == [ElementKind.SHAPE] * 3
        assert [element.kind for element in pages[1].elements()] == [ElementKind.TABLE, ElementKind.SHAPE]

    def test_character_budget_splits_pages(self, tmp_path):
        path = tmp_path / "long.docx"
        doc = Document()
        for index in range(4):
            add_paragraph(doc, f"paragraph {index:02d} ", "Arial", 12)
        doc.save(str(path))
        pages = DocxDocument(str(path), chars_per_page=26).pages()
        assert [len(page.elements()) for page in pages] == [2, 2]


class TestReading:
    def test_report_over_document(self, doc_path):
        report = ReportBuilder().build(DocxDocument(doc_path).pages())
        assert report.pages[0].fonts == (FontUsage("Arial", (16,)), FontUsage("Georgia", (11,)))
        assert report.pages[1].fonts == (FontUsage("Calibri", (9, 10)), FontUsage("Arial", (16,)))

    def test_family_inherited_from_paragraph_style(self, tmp_path):
        path = tmp_path / "styled.docx"
        doc = Document()
        doc.styles["Normal"].font.name = "Cambria"
        doc.styles["Normal"].font.size = Pt(13)
        add_paragraph(doc, "Plain run")
        doc.save(str(path))
        report = ReportBuilder().build(DocxDocument(str(path)).pages())
        assert report.pages[0].fonts == (FontUsage("Cambria", (13,)),)

    def test_nested_table_runs_are_read(self, tmp_path):
        path = tmp_path / "nested.docx"
        doc = Document()
        outer = doc.add_table(rows=1, cols=1)
        inner = outer.cell(0, 0).add_table(rows=1, cols=1)
        run = inner.cell(0, 0).paragraphs[0].add_run("inner")
        run.font.name = "Courier"
        run.font.size = Pt(8)
        doc.save(str(path))
        report = ReportBuilder().build(DocxDocument(str(path)).pages())
        assert report.pages[0].fonts == (FontUsage("Courier", (8,)),)

    def test_hyperlink_runs_are_read(self, tmp_path):
        path = tmp_path / "linked.docx"
        doc = Document()
        paragraph = add_paragraph(doc, "See ", "Arial", 12)
        hyperlink = OxmlElement("w:hyperlink")
        hyperlink.set(qn("w:anchor"), "_top")
        run = paragraph.add_run("linked")
        run.font.name = "Courier"
        run.font.size = Pt(8)
        hyperlink.append(run._r)
        paragraph._p.append(hyperlink)
        doc.save(str(path))
        report = ReportBuilder().build(DocxDocument(str(path)).pages())
        assert report.pages[0].fonts == (FontUsage("Arial", (12,)), FontUsage("Courier", (8,)))

    def test_page_width_excludes_margins(self, doc_path):
        section = Document(doc_path).sections[0]
        width = DocxDocument(doc_path).page_width()
        assert width == pytest.approx(Length(section.page_width - section.left_margin - section.right_margin).pt)
        assert 0 < width < section.page_width.pt


class TestWriting:
    def test_table_inserted_at_document_start(self, doc_path, tmp_path):
        output = str(tmp_path / "out.docx")
        document = open_document(doc_path, output)
        outcome = FontInventory(document, AnalysisSettings(output_format=())).run()
        assert outcome == Success(pages_analyzed=2, rows_written=5)

        saved = Document(output)
        assert saved.element.body[0].tag == qn("w:tbl")
        table = saved.tables[0]
        assert len(table.rows) == 5
        assert [table.cell(row, 0).text for row in range(5)] == ["Slide", "Slide 1", "", "Slide 2", ""]
        assert table.cell(3, 2).text == "9, 10 pt"
        shading = table.cell(0, 0)._tc.tcPr.find(qn("w:shd"))
        assert shading.get(qn("w:fill")) == "4A86E8"

    def test_only_first_page_supported(self, doc_path):
        document = DocxDocument(doc_path)
        report = ReportBuilder().build(document.pages())
        layout = TableLayoutBuilder().layout(report, document.page_width())
        with pytest.raises(ValueError):
            document.insert_table(layout, page_index=1)
        assert len(document.document.tables) == 1
