class PdfExtractionError(Exception):
    """Raised when text cannot be extracted from a PDF."""


class NoReadableTextError(PdfExtractionError):
    """Raised when a PDF parses but holds too little text to analyze."""
