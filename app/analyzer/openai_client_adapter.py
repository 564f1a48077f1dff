import httpx
import openai

from app.analyzer.client_base import BaseAnalysisClient
from app.analyzer.exceptions import AnalysisBackendError, AnalysisBackendNetworkError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis AI client adapter built on OpenAI-compatible chat API.

    The chat completions API has no top-k parameter, so ``top_k`` is ignored.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

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
        _ = top_k
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                top_p=top_p,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisBackendNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise AnalysisBackendNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise AnalysisBackendError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisBackendError("AI returned empty response")
        return content
