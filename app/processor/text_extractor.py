from app.ocr.base import BaseOcrEngine
from app.pdf.base import BasePdfExtractor
from app.processor.exceptions import FileReadError, UnsupportedMediaTypeError
from app.processor.file_storage import FileStorage
from app.processor.models import MEDIA_TYPE_IMAGE, MEDIA_TYPE_PDF, UploadedFile


class TextExtractor:
    """Reads an uploaded file and routes it to the extractor for its media type."""

    def __init__(
        self,
        file_storage: FileStorage,
        pdf_extractor: BasePdfExtractor,
        ocr_engine: BaseOcrEngine,
    ) -> None:
        self._file_storage = file_storage
        self._pdf_extractor = pdf_extractor
        self._ocr_engine = ocr_engine

    def extract(self, file: UploadedFile) -> str:
        """Return the text of one file.

        Raises:
            FileReadError: if the file cannot be read.
            UnsupportedMediaTypeError: if the media type has no extractor.
            PdfExtractionError: if PDF extraction fails or finds no readable text.
            OcrError: if OCR fails or recognizes no text.
        """
        if file.media_type not in (MEDIA_TYPE_PDF, MEDIA_TYPE_IMAGE):
            raise UnsupportedMediaTypeError(
                f"No extractor for media type '{file.media_type}'"
            )
        try:
            content = self._file_storage.read(file.path)
        except OSError as exc:
            raise FileReadError(f"Cannot read '{file.original_name}': {exc}") from exc

        if file.media_type == MEDIA_TYPE_PDF:
            return self._pdf_extractor.extract(content)
        return self._ocr_engine.recognize(content)
