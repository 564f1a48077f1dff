from typing import ClassVar

from app.analyzer.analyzer import StructuredAnalyzer
from app.analyzer.base import BaseStructuredAnalyzer
from app.analyzer.client_base import BaseAnalysisClient
from app.analyzer.example_client_adapter import ExampleClientAdapter
from app.analyzer.gemini_client_adapter import GeminiClientAdapter
from app.analyzer.openai_client_adapter import OpenAIClientAdapter
from app.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured structured analyzer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseStructuredAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analyzer_provider.lower()
        client = cls._create_client(provider, settings)
        return StructuredAnalyzer(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.analyzer_temperature,
            top_p=settings.analyzer_top_p,
            top_k=settings.analyzer_top_k,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return [
            "example",
            "gemini",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseAnalysisClient:
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            return GeminiClientAdapter(api_key=settings.gemini_api_key)
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
            )
        return OpenAIClientAdapter(
            api_key=settings.openai_compatible_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str:
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "analyzer_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown analyzer provider '{provider}'. "
            f"Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        if provider == "example":
            return "example"
        if provider == "gemini":
            return settings.gemini_model_name
        if provider == "openai":
            return settings.openai_model_name
        return settings.openai_compatible_model_name
