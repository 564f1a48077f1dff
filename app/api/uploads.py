from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import UnsupportedMediaTypeError, UploadRejectedError
from app.processor.file_storage import FileStorage
from app.processor.models import UploadedFile, media_type_for
from app.processor.pipeline import PipelineContext
from app.processor.processor import Processor


async def store_uploads(
    uploads: list[UploadFile],
    settings: Settings,
    file_storage: FileStorage,
) -> list[UploadedFile]:
    """Save every upload to temporary storage, in request order.

    If any upload is rejected, files already saved for this request are deleted.

    Raises:
        UploadRejectedError: on an unsupported type or an oversized file.
    """
    saved: list[UploadedFile] = []
    try:
        for upload in uploads:
            saved.append(await _store_one(upload, settings, file_storage))
    except BaseException:
        discard_uploads(saved, file_storage)
        raise
    return saved


async def _store_one(
    upload: UploadFile,
    settings: Settings,
    file_storage: FileStorage,
) -> UploadedFile:
    name = upload.filename or "upload"
    mime_type = upload.content_type or ""
    try:
        media_type = media_type_for(mime_type)
    except UnsupportedMediaTypeError as exc:
        raise UploadRejectedError(str(exc)) from exc

    content = await upload.read()
    if len(content) > settings.max_upload_size_bytes:
        raise UploadRejectedError(
            f"File '{name}' is too large ({len(content)} bytes, "
            f"max {settings.max_upload_size_bytes})"
        )
    path = file_storage.save(content, name, settings.upload_field_name)
    return UploadedFile(
        path=path,
        media_type=media_type,
        original_name=name,
        size_bytes=len(content),
        mime_type=mime_type,
    )


def discard_uploads(files: list[UploadedFile], file_storage: FileStorage) -> None:
    for file in files:
        try:
            file_storage.delete(file.path)
        except Exception as exc:
            Log.error(f"Error removing file {file.path}: {exc}")


async def run_batch(
    processor: Processor,
    files: list[UploadedFile],
    file_storage: FileStorage,
) -> PipelineContext:
    """Run the pipeline in the threadpool.

    The processor deletes the batch itself once it starts. If the request is
    cancelled before the worker thread picks the run up, the files are
    discarded here instead.
    """
    try:
        return await run_in_threadpool(processor.run, files)
    except BaseException:
        discard_uploads(files, file_storage)
        raise
