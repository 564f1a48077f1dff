import pymupdf

from app.pdf.base import BasePdfExtractor


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    ENGINE = "pymupdf"

    def _read_pages(self, pdf_bytes: bytes) -> list[str]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            return [page.get_text() for page in doc]
