from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from app.analyzer.exceptions import AnalysisBackendError
from app.api.uploads import run_batch, store_uploads
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import NoExtractableTextError, UploadRejectedError
from app.processor.file_storage import FileStorage
from app.processor.processor import Processor

ORIGINAL_TEXT_LIMIT = 1000

router = APIRouter(prefix="/api")


def _failure(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    body: dict[str, object] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=body)


@router.get("/health", tags=["Health"])
def health_check() -> dict[str, str]:
    return {
        "status": "OK",
        "message": "TabCura API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/analyze/prescription", tags=["Analysis"])
async def analyze_prescription(request: Request) -> JSONResponse:
    """Upload up to 8 PDFs/images and return the structured analysis.

    Files are deleted after the run whether it succeeds or fails.
    """
    settings: Settings = request.app.state.settings
    processor: Processor = request.app.state.processor
    file_storage: FileStorage = request.app.state.file_storage

    form = await request.form()
    uploads = [
        item for item in form.getlist(settings.upload_field_name)
        if isinstance(item, UploadFile)
    ]
    if not uploads:
        return _failure(400, "No files uploaded")
    if len(uploads) > settings.max_upload_files:
        return _failure(400, f"Maximum {settings.max_upload_files} files allowed")

    try:
        files = await store_uploads(uploads, settings, file_storage)
    except UploadRejectedError as exc:
        Log.error(f"Upload error: {exc}")
        return _failure(400, "File upload error", str(exc))

    try:
        context = await run_batch(processor, files, file_storage)
    except NoExtractableTextError as exc:
        Log.warning(f"Document analysis rejected: {exc}")
        return _failure(400, str(exc), type(exc).__name__)
    except AnalysisBackendError as exc:
        Log.error(f"AI analysis error: {exc}")
        return _failure(500, "Failed to analyze documents with AI", str(exc))
    except Exception as exc:
        Log.exception(f"Error analyzing documents: {exc}")
        return _failure(500, str(exc) or "Error analyzing documents", repr(exc))

    if context.result is None:
        return _failure(500, "Error analyzing documents")
    analysis = context.result.to_dict()
    analysis["number_of_files_processed"] = len(files)
    if settings.expose_original_text:
        analysis["original_text"] = context.combined_text[:ORIGINAL_TEXT_LIMIT]
    return JSONResponse(status_code=200, content={"success": True, "analysis": analysis})
