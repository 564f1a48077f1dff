import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_upload_policy(self) -> None:
        s = Settings()
        assert s.max_upload_files == 8
        assert s.max_upload_size_bytes == 10 * 1024 * 1024
        assert s.upload_field_name == "prescription"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"
        assert s.pdf_min_text_chars == 50

    def test_default_ocr_engine(self) -> None:
        s = Settings()
        assert s.ocr_engine == "tesseract"
        assert s.ocr_language == "eng"

    def test_default_analyzer_sampling(self) -> None:
        s = Settings()
        assert s.analyzer_provider == "gemini"
        assert s.analyzer_temperature == 0.1
        assert s.analyzer_top_p == 0.1
        assert s.analyzer_top_k == 16

    def test_original_text_hidden_by_default(self) -> None:
        s = Settings()
        assert s.expose_original_text is False


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_analyzer_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYZER_PROVIDER", "openai")
        monkeypatch.setenv("OPENAI_MODEL_NAME", "gpt-4o")
        s = Settings()
        assert s.analyzer_provider == "openai"
        assert s.openai_model_name == "gpt-4o"

    def test_loads_max_upload_files(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_FILES", "4")
        s = Settings()
        assert s.max_upload_files == 4

    def test_loads_expose_original_text(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPOSE_ORIGINAL_TEXT", "true")
        s = Settings()
        assert s.expose_original_text is True


class TestSettingsValidation:
    def test_invalid_api_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYZER_TEMPERATURE", "abc")
        with pytest.raises(ValidationError):
            Settings()
