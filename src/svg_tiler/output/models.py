"""
Module: output.models

Purpose:
    Exported file produced on demand from a render snapshot.

Key Classes:
    - ExportArtifact: Filename, MIME type and bytes of one export
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportArtifact:
    """
    One exported file (immutable, not cached).

    Attributes:
        filename: Download filename, e.g. "export.svg"
        mime_type: MIME type of ``data``
        data: Encoded file contents

    Example:
        >>> artifact = ExportArtifact("export.svg", "image/svg+xml", b"<svg/>")
        >>> artifact.save(Path("out"))
        PosixPath('out/export.svg')
    """

    filename: str
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        """Size of the encoded data in bytes."""
        return len(self.data)

    def save(self, directory: Path) -> Path:
        """
        Write the artifact into ``directory``, replacing any previous export.

        Returns:
            Path of the written file
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.data)
        logger.info(f"Saved {self.filename} ({self.size} bytes) to {directory}")
        return path
