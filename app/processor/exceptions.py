class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class NoExtractableTextError(ProcessorError):
    """Raised when no file in a batch yields any text."""


class UnsupportedMediaTypeError(ProcessorError):
    """Raised when a file is neither a PDF nor an image."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""


class UploadRejectedError(ProcessorError):
    """Raised when an upload breaks the batch policy (count, size, type)."""
