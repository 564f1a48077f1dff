from dataclasses import dataclass
from pathlib import Path

from app.processor.exceptions import UnsupportedMediaTypeError

MEDIA_TYPE_PDF = "pdf"
MEDIA_TYPE_IMAGE = "image"

DOCUMENT_SEPARATOR = "\n\n=== Next Document ===\n\n"


def media_type_for(mime_type: str) -> str:
    """Map a MIME type to the media type that picks the text extractor.

    Raises:
        UnsupportedMediaTypeError: for anything other than PDF or image/*.
    """
    mime = mime_type.lower()
    if mime == "application/pdf":
        return MEDIA_TYPE_PDF
    if mime.startswith("image/"):
        return MEDIA_TYPE_IMAGE
    raise UnsupportedMediaTypeError(
        f"Invalid file type '{mime_type}'. Only PDF and image files are allowed."
    )


@dataclass(frozen=True)
class UploadedFile:
    """A temporarily stored upload, owned by one analysis run."""

    path: Path
    media_type: str
    original_name: str
    size_bytes: int
    mime_type: str = ""


@dataclass(frozen=True)
class ExtractedFragment:
    """Text extracted from one uploaded file."""

    index: int
    media_type: str
    text: str

    @property
    def label(self) -> str:
        kind = "PDF" if self.media_type == MEDIA_TYPE_PDF else "Image"
        return f"Document {self.index + 1} ({kind})"

    def render(self) -> str:
        return f"{self.label}: {self.text}"
