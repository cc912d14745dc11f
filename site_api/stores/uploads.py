"""Upload directory storage.

Uploaded files land in one flat directory (served at /uploads) under
"<random token>-<sanitized original name>". The token keeps concurrent
uploads of the same file from overwriting each other.
"""

import asyncio
import logging
from pathlib import Path
from uuid import uuid4

logger = logging.getLogger("uvicorn.error")

MAX_NAME_LENGTH = 100


def sanitize_filename(filename: str) -> str:
    """Reduce a client-supplied filename to a safe basename.

    Keeps alphanumerics, "-", "_" and "."; path separators and other
    characters become "_". Leading dots are dropped so the result is never
    hidden or a relative path component.
    """
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    safe = "".join(c if c.isalnum() or c in ("-", "_", ".") else "_" for c in name)
    safe = safe.lstrip(".")
    return safe[-MAX_NAME_LENGTH:] or "file"


class UploadStorage:
    """Writes uploaded bytes into a single directory."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def ensure_dir(self) -> Path:
        """Ensure upload directory exists."""
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    def make_name(self, original_filename: str) -> str:
        return f"{uuid4().hex}-{sanitize_filename(original_filename)}"

    async def save(self, original_filename: str, data: bytes) -> str:
        """Write ``data`` to the upload directory.

        Args:
            original_filename: Name the client sent.
            data: File content.

        Returns:
            Stored filename (relative to the upload directory).
        """
        self.ensure_dir()
        filename = self.make_name(original_filename)
        filepath = self.directory / filename
        await asyncio.to_thread(filepath.write_bytes, data)
        logger.info(f"Saved upload {filename} ({len(data)} bytes)")
        return filename
