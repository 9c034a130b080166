# providers/factory.py
from pathlib import Path
from typing import Optional

from models.settings import AnalysisSettings
from providers.base import DocumentProvider
from providers.docx_provider import DocxDocument
from providers.pptx_provider import PptxDocument

SUPPORTED_SUFFIXES = (".pptx", ".docx")

def default_output_path(path: str) -> str:
    """Return ``<stem>_fonts<suffix>`` next to the input file."""
    source = Path(path)
    return str(source.with_name(f"{source.stem}_fonts{source.suffix}"))

def open_document(path: str, output_path: Optional[str] = None,
                  settings: Optional[AnalysisSettings] = None) -> DocumentProvider:
    """
    Open a document with the provider matching its file suffix.

    Raises:
        ValueError: If the suffix is not supported
        FileNotFoundError: If the document doesn't exist
    """
    if not path:
        raise ValueError("Document path is required.")
    suffix = Path(path).suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported document type '{suffix}'; expected one of {', '.join(SUPPORTED_SUFFIXES)}")
    if not Path(path).is_file():
        raise FileNotFoundError(f"Document not found: {path}")

    settings = settings or AnalysisSettings()
    output_path = output_path or default_output_path(path)
    if suffix == ".pptx":
        return PptxDocument(path, output_path)
    return DocxDocument(path, output_path, chars_per_page=settings.chars_per_page)
