from unittest.mock import patch

import pytest
from PIL import Image

from app.ocr.exceptions import NoRecognizedTextError, OcrError
from app.ocr.tesseract_adapter import TesseractAdapter


class TestPreprocess:
    def test_resizes_to_a4_at_300_dpi(self) -> None:
        image = Image.new("RGB", (600, 400), color="white")
        prepared = TesseractAdapter.preprocess(image)
        assert prepared.size == (2480, 3508)

    def test_converts_to_rgb(self) -> None:
        image = Image.new("L", (100, 100), color=128)
        prepared = TesseractAdapter.preprocess(image)
        assert prepared.mode == "RGB"

    def test_pads_with_white_background(self) -> None:
        image = Image.new("RGB", (1000, 100), color="black")
        prepared = TesseractAdapter.preprocess(image)
        assert prepared.getpixel((0, 0)) == (255, 255, 255)


class TestRecognize:
    def test_returns_stripped_text(self, sample_png_bytes: bytes) -> None:
        adapter = TesseractAdapter()
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string",
            return_value="  Amoxicillin 500mg\n",
        ):
            assert adapter.recognize(sample_png_bytes) == "Amoxicillin 500mg"

    def test_passes_language_whitelist_and_psm(self, sample_png_bytes: bytes) -> None:
        adapter = TesseractAdapter(language="deu")
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string",
            return_value="text",
        ) as mock_ocr:
            adapter.recognize(sample_png_bytes)
        kwargs = mock_ocr.call_args.kwargs
        assert kwargs["lang"] == "deu"
        assert "--psm 6" in kwargs["config"]
        assert "tessedit_char_whitelist=" in kwargs["config"]
        assert "0123456789.,-%/:" in kwargs["config"]

    def test_ocr_receives_preprocessed_image(self, sample_png_bytes: bytes) -> None:
        adapter = TesseractAdapter()
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string",
            return_value="text",
        ) as mock_ocr:
            adapter.recognize(sample_png_bytes)
        assert mock_ocr.call_args.args[0].size == (2480, 3508)

    def test_blank_result_raises_no_recognized_text(self, sample_png_bytes: bytes) -> None:
        adapter = TesseractAdapter()
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string",
            return_value="  \n ",
        ):
            with pytest.raises(NoRecognizedTextError, match="No text could be extracted"):
                adapter.recognize(sample_png_bytes)

    def test_invalid_image_raises_ocr_error(self) -> None:
        adapter = TesseractAdapter()
        with pytest.raises(OcrError, match="tesseract OCR failed"):
            adapter.recognize(b"not an image")

    def test_tesseract_failure_raises_ocr_error(self, sample_png_bytes: bytes) -> None:
        adapter = TesseractAdapter()
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_string",
            side_effect=RuntimeError("tesseract is not installed"),
        ):
            with pytest.raises(OcrError, match="not installed"):
                adapter.recognize(sample_png_bytes)
