from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for all image OCR adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """Recognize text in an image.

        Args:
            image_bytes: Raw image file content (JPEG, PNG, ...).

        Returns:
            Recognized text, stripped.

        Raises:
            NoRecognizedTextError: if no text was recognized.
            OcrError: if the image cannot be decoded or OCR fails.
        """
