"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from app.analyzer.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that returns a fixed analysis wrapped in prose.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "type": "lab_report",
        "date": "Not specified",
        "doctor": "Not specified",
        "lab_results": [],
        "medications": [],
        "summary": "Example analysis: no provider was called.",
    }

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
        _ = model, temperature, top_p, top_k, system_prompt, user_prompt
        return f"Here is the analysis:\n{json.dumps(self.DEFAULT_RESPONSE)}"
