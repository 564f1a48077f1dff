"""FastAPI application for medical document analysis."""

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import router
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.file_storage import FileStorage
from app.processor.processor import Processor, build_processor


def create_app(
    settings: Settings,
    processor: Processor | None = None,
    file_storage: FileStorage | None = None,
) -> FastAPI:
    """Build the FastAPI app with its processor wired in."""
    if file_storage is None:
        file_storage = FileStorage(Path(settings.upload_dir))
    if processor is None:
        processor = build_processor(settings, file_storage=file_storage)

    app = FastAPI(
        title="TabCura Document Analysis",
        description="Extracts lab results and prescriptions from uploaded medical documents",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.processor = processor
    app.state.file_storage = file_storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):  # type: ignore[no-untyped-def]
        response = await call_next(request)
        Log.info(f"{request.method} {request.url.path}", status=response.status_code)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={"message": "API endpoint not found", "path": request.url.path},
            )
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        Log.exception(f"Server error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred", "error": str(exc)},
        )

    app.include_router(router)
    return app
