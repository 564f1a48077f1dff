from pathlib import Path

from app.analyzer.base import BaseStructuredAnalyzer
from app.analyzer.factory import AnalyzerFactory
from app.analyzer.models import AnalysisResult
from app.analyzer.prompt_builder import PromptBuilder
from app.config.settings import Settings
from app.logging.logger import Log
from app.ocr.factory import OcrEngineFactory
from app.pdf.factory import PdfExtractorFactory
from app.processor.file_storage import FileStorage
from app.processor.models import UploadedFile
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    AnalyzeStep,
    CleanupUploadsStep,
    CombineTextStep,
    ExtractFragmentsStep,
    ParseResponseStep,
)
from app.processor.text_extractor import TextExtractor


class Processor:
    """Orchestrates the document analysis pipeline for one upload batch.

    Pipeline: extract -> combine -> analyze -> parse, then cleanup on every exit path.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        cleanup_step: PipelineStep,
    ) -> None:
        self._steps = steps
        self._cleanup_step = cleanup_step

    def process(self, files: list[UploadedFile]) -> AnalysisResult:
        """Analyze a batch of uploaded files.

        Raises:
            NoExtractableTextError: if no file yields any text.
            AnalysisBackendError: if the analyzer backend call fails.
        """
        context = self.run(files)
        if context.result is None:
            raise RuntimeError("Pipeline finished without producing a result")
        return context.result

    def run(self, files: list[UploadedFile]) -> PipelineContext:
        """Run every step, then delete the batch whatever the outcome."""
        Log.info(f"Processing {len(files)} files")
        context = PipelineContext(files=list(files))
        try:
            for step in self._steps:
                context = step.run(context)
        finally:
            self._cleanup_step.run(context)
        return context


def build_processor(
    settings: Settings,
    analyzer: BaseStructuredAnalyzer | None = None,
    file_storage: FileStorage | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if file_storage is None:
        file_storage = FileStorage(Path(settings.upload_dir))
    if analyzer is None:
        analyzer = AnalyzerFactory.create(settings)
    text_extractor = TextExtractor(
        file_storage=file_storage,
        pdf_extractor=PdfExtractorFactory.create(settings),
        ocr_engine=OcrEngineFactory.create(settings),
    )
    steps: list[PipelineStep] = [
        ExtractFragmentsStep(text_extractor),
        CombineTextStep(),
        AnalyzeStep(analyzer=analyzer, prompt_builder=PromptBuilder()),
        ParseResponseStep(),
    ]
    return Processor(steps=steps, cleanup_step=CleanupUploadsStep(file_storage))
