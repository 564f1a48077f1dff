import io
from typing import ClassVar

import pytesseract
from PIL import Image, ImageEnhance, ImageFilter, ImageOps

from app.logging.logger import Log
from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import NoRecognizedTextError, OcrError


class TesseractAdapter(BaseOcrEngine):
    """Preprocesses the image with Pillow, then runs Tesseract OCR."""

    # A4 at 300 DPI
    TARGET_SIZE: ClassVar[tuple[int, int]] = (2480, 3508)
    BRIGHTNESS: ClassVar[float] = 1.1
    CONTRAST: ClassVar[float] = 1.2
    CHAR_WHITELIST: ClassVar[str] = (
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789.,-%/: "
    )
    PAGE_SEGMENTATION_MODE: ClassVar[int] = 6

    def __init__(self, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                prepared = self.preprocess(image)
            text = pytesseract.image_to_string(
                prepared,
                lang=self._language,
                config=self._tesseract_config(),
            )
        except Exception as exc:
            raise OcrError(f"tesseract OCR failed: {exc}") from exc

        text = text.strip()
        if not text:
            raise NoRecognizedTextError("No text could be extracted from the image")
        Log.debug(f"OCR recognized {len(text)} chars")
        return text

    @classmethod
    def preprocess(cls, image: Image.Image) -> Image.Image:
        """Resize to A4, lift brightness and contrast, sharpen, then normalize."""
        prepared = ImageOps.pad(image.convert("RGB"), cls.TARGET_SIZE, color="white")
        prepared = ImageEnhance.Brightness(prepared).enhance(cls.BRIGHTNESS)
        prepared = ImageEnhance.Contrast(prepared).enhance(cls.CONTRAST)
        prepared = prepared.filter(ImageFilter.SHARPEN)
        return ImageOps.autocontrast(prepared)

    @classmethod
    def _tesseract_config(cls) -> str:
        return (
            f"--psm {cls.PAGE_SEGMENTATION_MODE} "
            f"-c tessedit_char_whitelist=\"{cls.CHAR_WHITELIST}\""
        )
