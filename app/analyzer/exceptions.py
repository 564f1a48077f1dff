class AnalyzerError(Exception):
    """Base exception for all analyzer-related errors."""


class AnalysisBackendError(AnalyzerError):
    """Raised when the AI provider call fails or returns nothing usable."""


class AnalysisBackendNetworkError(AnalysisBackendError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class PromptTemplateError(AnalyzerError):
    """Raised when the analysis prompt template cannot be loaded or rendered."""


class ResponseParseError(AnalyzerError):
    """Raised when the provider response holds no decodable analysis object."""
