from abc import ABC, abstractmethod


class BaseStructuredAnalyzer(ABC):
    """Contract for the structured analysis backend."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Send one prompt to the AI provider and return its raw text response.

        Raises:
            AnalysisBackendError: on any provider failure. No retry is attempted.
        """
