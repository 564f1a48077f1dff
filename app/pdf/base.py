from abc import ABC, abstractmethod

from app.pdf.exceptions import NoReadableTextError, PdfExtractionError


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters.

    Adapters only implement ``_read_pages``; error wrapping and the
    readable-text threshold are shared.
    """

    ENGINE: str = ""

    def __init__(self, min_text_chars: int = 0) -> None:
        self._min_text_chars = min_text_chars

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Page texts joined by newlines, stripped.

        Raises:
            NoReadableTextError: if fewer than ``min_text_chars`` characters were found.
            PdfExtractionError: if the PDF cannot be parsed.
        """
        try:
            pages = self._read_pages(pdf_bytes)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"{self.ENGINE} extraction failed: {exc}") from exc

        text = "\n".join(pages).strip()
        if len(text) < self._min_text_chars:
            raise NoReadableTextError(
                f"No readable text found in PDF ({len(text)} chars, "
                f"need at least {self._min_text_chars})"
            )
        return text

    @abstractmethod
    def _read_pages(self, pdf_bytes: bytes) -> list[str]:
        """Return the text of every page, in page order."""
