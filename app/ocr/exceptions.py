class OcrError(Exception):
    """Raised when OCR fails on an image."""


class NoRecognizedTextError(OcrError):
    """Raised when OCR completes but recognizes no text."""
