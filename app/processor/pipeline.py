from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.analyzer.models import AnalysisResult
from app.processor.models import ExtractedFragment, UploadedFile


@dataclass(slots=True)
class PipelineContext:
    files: list[UploadedFile]
    fragments: list[ExtractedFragment] = field(default_factory=list)
    failed_files: list[str] = field(default_factory=list)
    combined_text: str = ""
    prompt: str = ""
    raw_response: str = ""
    result: AnalysisResult | None = None

    @property
    def file_count(self) -> int:
        return len(self.files)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
