from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from app.analyzer.base import BaseStructuredAnalyzer
from app.analyzer.factory import AnalyzerFactory
from app.config.settings import Settings
from app.processor.file_storage import FileStorage


@pytest.fixture()
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture()
def test_settings(upload_dir: Path) -> Settings:
    return Settings(
        _env_file=None,
        upload_dir=str(upload_dir),
        analyzer_provider="example",
    )


@pytest.fixture()
def file_storage(upload_dir: Path) -> FileStorage:
    return FileStorage(upload_dir)


@pytest.fixture()
def example_analyzer(test_settings: Settings) -> BaseStructuredAnalyzer:
    return AnalyzerFactory.create(test_settings)


@pytest.fixture()
def mock_tesseract() -> Generator[MagicMock, None, None]:
    """Replace the Tesseract binary; Pillow preprocessing still runs."""
    with patch("app.ocr.tesseract_adapter.pytesseract.image_to_string") as mock_ocr:
        mock_ocr.return_value = "Rx: Amoxicillin 500mg three times daily for 7 days"
        yield mock_ocr

