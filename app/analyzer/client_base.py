from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific analysis AI clients."""

    @abstractmethod
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
        """Return provider response as plain text."""
