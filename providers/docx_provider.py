# providers/docx_provider.py
from typing import Iterator, List, Optional

from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.shared import qn
from docx.shared import Length, Pt, RGBColor
from docx.table import Table
from docx.text.hyperlink import Hyperlink
from docx.text.paragraph import Paragraph

from models.document import ElementKind, TextRun
from models.layout import TableLayout
from providers.base import DocumentProvider, Page, PageElement, TextBody
from utils.logger import setup_logger

logger = setup_logger(__name__)

# Attributes of w:rFonts, in order of preference
FONT_ATTRIBUTES = ('w:ascii', 'w:hAnsi', 'w:cs', 'w:eastAsia')

def _run_font_name(run) -> Optional[str]:
    rPr = run._element.rPr
    if rPr is None or rPr.rFonts is None:
        return None
    for attribute in FONT_ATTRIBUTES:
        name = rPr.rFonts.get(qn(attribute))
        if name:
            return name
    return None

def _style_font(paragraph):
    style = paragraph.style
    return style.font if style is not None else None

class DocxRun:
    """A run whose font is read on access, inheriting from the paragraph style."""

    def __init__(self, run, paragraph: Paragraph):
        self._run = run
        self._paragraph = paragraph

    @property
    def font_family(self) -> Optional[str]:
        name = _run_font_name(self._run)
        if name:
            return name
        font = _style_font(self._paragraph)
        return font.name if font is not None else None

    @property
    def font_size(self) -> Optional[float]:
        size = self._run.font.size
        if size is None:
            font = _style_font(self._paragraph)
            size = font.size if font is not None else None
        return None if size is None else size.pt

    @property
    def length(self) -> int:
        return len(self._run.text)

def _paragraph_run(paragraph: Paragraph) -> TextRun:
    font = _style_font(paragraph)
    size = font.size if font is not None else None
    return TextRun(
        font_family=font.name if font is not None else None,
        font_size=None if size is None else size.pt,
        length=len(paragraph.text),
    )

class DocxTextBody(TextBody):
    """A paragraph, or the paragraphs of a table cell including nested tables."""

    def __init__(self, paragraphs: List[Paragraph], text: str):
        self._paragraphs = paragraphs
        self._text = text

    @classmethod
    def for_cell(cls, cell) -> "DocxTextBody":
        paragraphs = list(_cell_paragraphs(cell))
        return cls(paragraphs, "\n".join(paragraph.text for paragraph in paragraphs))

    @property
    def text(self) -> str:
        return self._text

    def runs(self) -> Iterator:
        for paragraph in self._paragraphs:
            for run in _paragraph_runs(paragraph):
                yield DocxRun(run, paragraph)

    def paragraphs(self) -> Iterator[TextRun]:
        for paragraph in self._paragraphs:
            yield _paragraph_run(paragraph)

def _paragraph_runs(paragraph: Paragraph) -> Iterator:
    # paragraph.runs leaves out runs inside w:hyperlink
    for item in paragraph.iter_inner_content():
        if isinstance(item, Hyperlink):
            yield from item.runs
        else:
            yield item

def _cell_paragraphs(cell) -> Iterator[Paragraph]:
    yield from cell.paragraphs
    for table in cell.tables:
        for row in table.rows:
            for nested in row.cells:
                yield from _cell_paragraphs(nested)

class DocxParagraph(PageElement):
    kind = ElementKind.SHAPE

    def __init__(self, paragraph: Paragraph):
        self._paragraph = paragraph

    def text_body(self) -> TextBody:
        return DocxTextBody([self._paragraph], self._paragraph.text)

class DocxTable(PageElement):
    kind = ElementKind.TABLE

    def __init__(self, table: Table):
        self._table = table

    @property
    def row_count(self) -> int:
        return len(self._table.rows)

    @property
    def column_count(self) -> int:
        return len(self._table.columns)

    def cell(self, row: int, col: int) -> TextBody:
        return DocxTextBody.for_cell(self._table.cell(row, col))

class DocxPage(Page):
    """A run of body blocks estimated to fall on one printed page."""

    def __init__(self, elements: List[PageElement]):
        self._elements = elements

    def elements(self) -> List[PageElement]:
        return list(self._elements)

def _table_text(table: Table) -> str:
    return "".join(cell.text for row in table.rows for cell in row.cells)

def _has_page_break(paragraph: Paragraph) -> bool:
    return bool(paragraph._p.xpath('.//w:br[@w:type="page"]'))

class DocxDocument(DocumentProvider):
    """
    Word document read and written through python-docx.

    Word files carry no page model, so pages are estimated: a new page
    starts after an explicit page break, or when the characters collected
    for the current page exceed ``chars_per_page``.
    """

    def __init__(self, path: str, output_path: Optional[str] = None,
                 chars_per_page: int = 1800):
        """
        Open a Word document.

        Args:
            path: Path of the .docx file to analyze
            output_path: Where ``save`` writes (defaults to ``path``)
            chars_per_page: Approximate characters per printed page
        """
        self.path = path
        self.output_path = output_path or path
        self.chars_per_page = chars_per_page
        self.document = Document(path)
        logger.info(f"Document loaded successfully. Found {len(self.document.paragraphs)} paragraphs.")

    def pages(self) -> List[Page]:
        pages: List[Page] = []
        current: List[PageElement] = []
        chars_on_page = 0

        for child in self.document.element.body.iterchildren():
            if child.tag == qn('w:p'):
                paragraph = Paragraph(child, self.document)
                element, text, breaks = DocxParagraph(paragraph), paragraph.text, _has_page_break(paragraph)
            elif child.tag == qn('w:tbl'):
                table = Table(child, self.document)
                element, text, breaks = DocxTable(table), _table_text(table), False
            else:
                continue

            if current and chars_on_page + len(text) > self.chars_per_page:
                pages.append(DocxPage(current))
                current, chars_on_page = [], 0
            current.append(element)
            chars_on_page += len(text)

            if breaks:
                pages.append(DocxPage(current))
                current, chars_on_page = [], 0

        if current:
            pages.append(DocxPage(current))
        return pages

    def page_width(self) -> float:
        section = self.document.sections[0]
        return Length(section.page_width - section.left_margin - section.right_margin).pt

    def insert_table(self, layout: TableLayout, page_index: int = 0) -> None:
        if page_index != 0:
            raise ValueError("Word documents only support inserting on the first page.")

        table = self.document.add_table(rows=layout.row_count, cols=layout.col_count)
        tbl = table._tbl
        try:
            self._fill_table(table, layout)
            body = self.document.element.body
            body.remove(tbl)
            body.insert(0, tbl)
        except Exception:
            parent = tbl.getparent()
            if parent is not None:
                parent.remove(tbl)
            logger.error("Table insertion failed; partial table removed")
            raise
        logger.info(f"Inserted {layout.row_count}x{layout.col_count} table at the start of the document")

    def _fill_table(self, table: Table, layout: TableLayout) -> None:
        table.autofit = False
        for column in table.columns:
            for cell in column.cells:
                cell.width = Pt(layout.column_width)
        for row in table.rows:
            row.height = Pt(layout.row_height)
        self._repeat_header(table.rows[0])

        for cell_layout in layout.cells:
            cell = table.cell(cell_layout.row, cell_layout.col)
            style = cell_layout.style
            run = cell.paragraphs[0].add_run(cell_layout.text)
            run.font.bold = style.bold
            if style.font_size is not None:
                run.font.size = Pt(style.font_size)
            if style.foreground_color:
                run.font.color.rgb = RGBColor.from_string(style.foreground_color.lstrip("#"))
            if style.fill_color:
                self._shade(cell, style.fill_color.lstrip("#"))

    def _repeat_header(self, row) -> None:
        trPr = row._tr.get_or_add_trPr()
        header = OxmlElement('w:tblHeader')
        header.set(qn('w:val'), 'true')
        trPr.append(header)

    def _shade(self, cell, fill: str) -> None:
        shd = OxmlElement('w:shd')
        shd.set(qn('w:val'), 'clear')
        shd.set(qn('w:color'), 'auto')
        shd.set(qn('w:fill'), fill.upper())
        cell._tc.get_or_add_tcPr().append(shd)

    def save(self, path: Optional[str] = None) -> str:
        target = path or self.output_path
        self.document.save(target)
        logger.info(f"Document saved to {target}")
        return target
