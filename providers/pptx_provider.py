# providers/pptx_provider.py
from typing import Iterable, Iterator, List, Optional

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.shapes.group import GroupShape
from pptx.util import Pt

from models.document import ElementKind, TextRun
from models.layout import TableLayout
from providers.base import DocumentProvider, Page, PageElement, TextBody
from utils.logger import setup_logger

logger = setup_logger(__name__)

def _typeface(rPr) -> Optional[str]:
    if rPr is None or rPr.latin is None:
        return None
    return rPr.latin.typeface

def _size_pt(rPr) -> Optional[float]:
    # sz is stored in hundredths of a point
    if rPr is None or rPr.sz is None:
        return None
    return rPr.sz / 100.0

def _default_rPr(paragraph):
    # Read pPr/defRPr directly; paragraph.font would add them to the XML
    pPr = paragraph._p.pPr
    return None if pPr is None else pPr.defRPr

class PptxRun:
    """A text run whose font properties are read only when accessed."""

    def __init__(self, run, paragraph):
        self._run = run
        self._paragraph = paragraph

    @property
    def font_family(self) -> Optional[str]:
        return _typeface(self._run._r.rPr) or _typeface(_default_rPr(self._paragraph))

    @property
    def font_size(self) -> Optional[float]:
        size = _size_pt(self._run._r.rPr)
        if size is None:
            size = _size_pt(_default_rPr(self._paragraph))
        return size

    @property
    def length(self) -> int:
        return len(self._run.text)

class PptxTextBody(TextBody):
    """Text frame of a shape or table cell."""

    def __init__(self, text_frame):
        self._text_frame = text_frame

    @property
    def text(self) -> str:
        return self._text_frame.text

    def runs(self) -> Iterator:
        for paragraph in self._text_frame.paragraphs:
            runs = paragraph.runs
            if runs:
                for run in runs:
                    yield PptxRun(run, paragraph)
            elif paragraph.text.strip():
                # Text held only in fields or line breaks
                yield self._paragraph_run(paragraph)

    def paragraphs(self) -> Iterator[TextRun]:
        for paragraph in self._text_frame.paragraphs:
            yield self._paragraph_run(paragraph)

    def _paragraph_run(self, paragraph) -> TextRun:
        rPr = _default_rPr(paragraph)
        return TextRun(
            font_family=_typeface(rPr),
            font_size=_size_pt(rPr),
            length=len(paragraph.text),
        )

class PptxShape(PageElement):
    kind = ElementKind.SHAPE

    def __init__(self, shape):
        self._shape = shape

    def text_body(self) -> TextBody:
        return PptxTextBody(self._shape.text_frame)

class PptxTable(PageElement):
    kind = ElementKind.TABLE

    def __init__(self, graphic_frame):
        self._table = graphic_frame.table

    @property
    def row_count(self) -> int:
        return len(self._table.rows)

    @property
    def column_count(self) -> int:
        return len(self._table.columns)

    def cell(self, row: int, col: int) -> TextBody:
        return PptxTextBody(self._table.cell(row, col).text_frame)

class PptxOther(PageElement):
    kind = ElementKind.OTHER

def _flatten(shapes) -> Iterable:
    for shape in shapes:
        if isinstance(shape, GroupShape):
            yield from _flatten(shape.shapes)
        else:
            yield shape

def _element_for(shape) -> PageElement:
    if getattr(shape, "has_table", False):
        return PptxTable(shape)
    if getattr(shape, "has_text_frame", False):
        return PptxShape(shape)
    return PptxOther()

class PptxPage(Page):
    """One slide; group shapes are flattened into their members."""

    def __init__(self, slide):
        self._slide = slide

    @property
    def slide(self):
        return self._slide

    def elements(self) -> List[PageElement]:
        return [_element_for(shape) for shape in _flatten(self._slide.shapes)]

class PptxDocument(DocumentProvider):
    """PowerPoint deck read and written through python-pptx."""

    def __init__(self, path: str, output_path: Optional[str] = None):
        """
        Open a presentation.

        Args:
            path: Path of the .pptx file to analyze
            output_path: Where ``save`` writes (defaults to ``path``)
        """
        self.path = path
        self.output_path = output_path or path
        self.presentation = Presentation(path)
        logger.info(f"Presentation loaded with {len(self.presentation.slides)} slides")

    def pages(self) -> List[Page]:
        return [PptxPage(slide) for slide in self.presentation.slides]

    def page_width(self) -> float:
        return self.presentation.slide_width.pt

    def insert_table(self, layout: TableLayout, page_index: int = 0) -> None:
        slide = self.presentation.slides[page_index]
        frame = slide.shapes.add_table(
            layout.row_count,
            layout.col_count,
            Pt(layout.left),
            Pt(layout.top),
            Pt(layout.width),
            Pt(layout.height),
        )
        try:
            self._fill_table(frame.table, layout)
        except Exception:
            element = frame._element
            element.getparent().remove(element)
            logger.error("Table insertion failed; partial table removed")
            raise
        logger.info(f"Inserted {layout.row_count}x{layout.col_count} table on slide {page_index + 1}")

    def _fill_table(self, table, layout: TableLayout) -> None:
        for column in table.columns:
            column.width = Pt(layout.column_width)
        for row in table.rows:
            row.height = Pt(layout.row_height)

        for cell_layout in layout.cells:
            cell = table.cell(cell_layout.row, cell_layout.col)
            style = cell_layout.style
            run = cell.text_frame.paragraphs[0].add_run()
            run.text = cell_layout.text
            run.font.bold = style.bold
            if style.font_size is not None:
                run.font.size = Pt(style.font_size)
            if style.foreground_color:
                run.font.color.rgb = RGBColor.from_string(style.foreground_color.lstrip("#"))
            if style.fill_color:
                cell.fill.solid()
                cell.fill.fore_color.rgb = RGBColor.from_string(style.fill_color.lstrip("#"))

    def save(self, path: Optional[str] = None) -> str:
        target = path or self.output_path
        self.presentation.save(target)
        logger.info(f"Presentation saved to {target}")
        return target
