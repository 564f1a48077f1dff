from app.analyzer.analyzer import StructuredAnalyzer
from app.analyzer.base import BaseStructuredAnalyzer
from app.analyzer.factory import AnalyzerFactory
from app.analyzer.models import AnalysisResult, LabResult, Medication

__all__ = [
    "AnalysisResult",
    "AnalyzerFactory",
    "BaseStructuredAnalyzer",
    "LabResult",
    "Medication",
    "StructuredAnalyzer",
]
