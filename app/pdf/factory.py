from typing import ClassVar

from app.config.settings import Settings
from app.logging.logger import Log
from app.pdf.base import BasePdfExtractor
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter
from app.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Picks the PDF text extractor named by ``pdf_engine``."""

    ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        extractor_cls = cls.ENGINES.get(engine)
        if extractor_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {cls.supported_engines()}"
            )
        if settings.pdf_min_text_chars < 0:
            raise ValueError("pdf_min_text_chars must not be negative")
        Log.debug(
            f"Using PDF engine {engine}",
            min_text_chars=settings.pdf_min_text_chars,
        )
        return extractor_cls(min_text_chars=settings.pdf_min_text_chars)

    @classmethod
    def supported_engines(cls) -> list[str]:
        return sorted(cls.ENGINES)
