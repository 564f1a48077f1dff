from app.analyzer.base import BaseStructuredAnalyzer
from app.analyzer.prompt_builder import PromptBuilder
from app.analyzer.response_parser import parse_analysis_response
from app.logging.logger import Log
from app.ocr.exceptions import OcrError
from app.pdf.exceptions import PdfExtractionError
from app.processor.exceptions import NoExtractableTextError, ProcessorError
from app.processor.file_storage import FileStorage
from app.processor.models import DOCUMENT_SEPARATOR, ExtractedFragment
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.text_extractor import TextExtractor


class ExtractFragmentsStep(PipelineStep):
    """Extracts text file by file; a failing or empty file is skipped."""

    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        total = context.file_count
        for index, file in enumerate(context.files):
            Log.info(f"Processing file {index + 1}/{total}: {file.original_name}")
            try:
                text = self._text_extractor.extract(file)
            except (PdfExtractionError, OcrError, ProcessorError) as exc:
                Log.error(f"Error processing file {index + 1} ({file.original_name}): {exc}")
                context.failed_files.append(file.original_name)
                continue

            text = text.strip()
            if not text:
                Log.warning(f"No text extracted from file {index + 1}: {file.original_name}")
                context.failed_files.append(file.original_name)
                continue
            context.fragments.append(
                ExtractedFragment(index=index, media_type=file.media_type, text=text)
            )
        Log.info(f"Extracted text from {len(context.fragments)}/{total} files")
        return context


class CombineTextStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.fragments:
            raise NoExtractableTextError(
                "Could not extract text from any of the uploaded files"
            )
        combined = DOCUMENT_SEPARATOR.join(f.render() for f in context.fragments)
        if not combined.strip():
            raise NoExtractableTextError("No text could be extracted from the uploaded files")
        context.combined_text = combined
        Log.info(f"Combined {len(context.fragments)} documents into {len(combined)} chars")
        return context


class AnalyzeStep(PipelineStep):
    """Builds the prompt and makes the single call to the analyzer backend."""

    def __init__(self, analyzer: BaseStructuredAnalyzer, prompt_builder: PromptBuilder) -> None:
        self._analyzer = analyzer
        self._prompt_builder = prompt_builder

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.combined_text:
            raise ValueError("PipelineContext.combined_text must be set before analysis")
        context.prompt = self._prompt_builder.build(context.combined_text, context.file_count)
        context.raw_response = self._analyzer.generate(context.prompt)
        return context


class ParseResponseStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.result = parse_analysis_response(
            context.raw_response,
            combined_text=context.combined_text,
            documents_analyzed=context.file_count,
        )
        Log.info(
            f"Analysis complete: type={context.result.document_type}, "
            f"{len(context.result.lab_results)} lab results, "
            f"{len(context.result.medications)} medications, "
            f"{context.result.abnormal_flags} abnormal flags"
        )
        return context


class CleanupUploadsStep(PipelineStep):
    """Deletes every file of the batch; deletion errors are logged, never raised."""

    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    def run(self, context: PipelineContext) -> PipelineContext:
        for file in context.files:
            try:
                self._file_storage.delete(file.path)
            except Exception as exc:
                Log.error(f"Error cleaning up file {file.path}: {exc}")
        return context
