import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.analyzer.client_base import BaseAnalysisClient
from app.analyzer.exceptions import AnalysisBackendError, AnalysisBackendNetworkError


class GeminiClientAdapter(BaseAnalysisClient):
    """Analysis AI client adapter built on the Google Gen AI SDK."""

    def __init__(self, *, api_key: str) -> None:
        if not api_key:
            raise ValueError("gemini_api_key is required for analyzer_provider=gemini")
        self._client = genai.Client(api_key=api_key)

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        top_p: float,
        top_k: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        config = types.GenerateContentConfig(
            system_instruction=system_prompt or None,
            temperature=temperature,
            top_p=top_p,
            top_k=top_k,
        )
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=user_prompt,
                config=config,
            )
        except genai_errors.APIError as exc:
            raise AnalysisBackendNetworkError(f"AI provider API error: {exc}") from exc
        except httpx.HTTPError as exc:
            raise AnalysisBackendNetworkError(f"AI provider network error: {exc}") from exc

        # None when the candidate was blocked or carries no text parts
        content = response.text
        if not content:
            raise AnalysisBackendError("AI returned empty response")
        return content
