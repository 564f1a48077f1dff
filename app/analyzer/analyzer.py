"""AI-backed structured analyzer for medical document text."""

from app.analyzer.base import BaseStructuredAnalyzer
from app.analyzer.client_base import BaseAnalysisClient
from app.analyzer.exceptions import AnalysisBackendError
from app.analyzer.prompt_builder import SYSTEM_PROMPT
from app.logging.logger import Log


class StructuredAnalyzer(BaseStructuredAnalyzer):
    """Calls an AI provider with low-temperature, low-diversity sampling."""

    MAX_TEMPERATURE = 0.2

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.1,
        top_p: float = 0.1,
        top_k: int = 16,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(self.MAX_TEMPERATURE, temperature))
        self._top_p = top_p
        self._top_k = top_k
        self._system_prompt = system_prompt

    def generate(self, prompt: str) -> str:
        Log.debug(f"Analysis prompt:\n{prompt}")
        try:
            raw_response = self._client.create_completion(
                model=self._model,
                temperature=self._temperature,
                top_p=self._top_p,
                top_k=self._top_k,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
        except AnalysisBackendError:
            raise
        except Exception as exc:
            raise AnalysisBackendError(f"AI provider call failed: {exc}") from exc
        Log.debug(f"AI raw response:\n{raw_response}")
        return raw_response
