import secrets
import time
from pathlib import Path

from app.logging.logger import Log


def unique_file_name(field_name: str, original_name: str) -> str:
    """Build a collision-resistant name: {field}-{epoch_ms}-{random}{ext}"""
    suffix = Path(original_name).suffix.lower()
    return f"{field_name}-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"


class FileStorage:
    """Stores uploads under unique names in a local directory."""

    def __init__(self, upload_dir: Path) -> None:
        self._upload_dir = upload_dir

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def save(self, content: bytes, original_name: str, field_name: str) -> Path:
        """Write content to a new uniquely named file and return its path."""
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / unique_file_name(field_name, original_name)
        path.write_bytes(content)
        Log.debug(f"Stored upload '{original_name}' at {path} ({len(content)} bytes)")
        return path

    def read(self, path: Path) -> bytes:
        """Read file bytes.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return path.read_bytes()

    def delete(self, path: Path) -> None:
        """Remove a stored file. Already-missing files are ignored."""
        path.unlink(missing_ok=True)
