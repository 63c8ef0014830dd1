"""
Writer for generated schema files.

An interrupted run never leaves a half-written schema file behind: the
content goes to a sibling temporary file that then replaces the target.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path


class AtomicWriter:
    """Writes files through a temporary sibling and an atomic rename."""

    def __init__(self, atomic: bool = True):
        """
        Args:
            atomic: Go through a temporary file (plain write when False)
        """
        self.atomic = atomic

    def write(self, path: Path, content: str) -> None:
        """
        Write content to path, creating missing parent directories.

        Raises:
            OSError: If the file cannot be written
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        if not self.atomic:
            path.write_text(content, encoding="utf-8")
            return

        # The rename is only atomic within one filesystem
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", text=True)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                tmp_file.write(content)
            tmp_path.replace(path)
        except BaseException:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise

    def write_if_not_exists(self, path: Path, content: str) -> bool:
        """
        Write content unless path already exists.

        Raises:
            FileExistsError: If path exists
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")
        self.write(path, content)
        return True
