from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3001

    upload_dir: str = "uploads"
    upload_field_name: str = "prescription"
    max_upload_files: int = 8
    max_upload_size_bytes: int = 10 * 1024 * 1024
    expose_original_text: bool = False

    pdf_engine: str = "pdfplumber"
    pdf_min_text_chars: int = 50

    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    analyzer_provider: str = "gemini"
    analyzer_temperature: float = 0.1
    analyzer_top_p: float = 0.1
    analyzer_top_k: int = 16

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-1.5-pro"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 30

    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
