"""
Local file system adapter implementation for file operations.
"""

import logging
import os

from typing_extensions import override

from mcp_edit_service.exceptions import FileRepositoryError
from mcp_edit_service.ports.files.file_repository_port import FileRepositoryPort

# Guards against looping forever if the directory keeps producing collisions
MAX_BACKUP_ATTEMPTS = 1000


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def resolve(self, path: str) -> str:
        return os.path.abspath(path)

    @override
    def is_accessible(self, path: str) -> bool:
        return os.access(path, os.R_OK | os.W_OK)

    @override
    def read_text(self, path: str) -> str:
        try:
            # newline="" keeps \r\n intact so backups are byte-exact
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError:
            raise FileRepositoryError(f"File is not valid UTF-8 text: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Failed to read {path}: {e.strerror or e}")

    @override
    def write_text(self, path: str, content: str) -> None:
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise FileRepositoryError(f"Failed to write {path}: {e.strerror or e}")

    @override
    def create_backup(self, path: str, content: str, timestamp_ms: int) -> str:
        stamp = timestamp_ms
        for _ in range(MAX_BACKUP_ATTEMPTS):
            backup_path = f"{path}.backup.{stamp}"
            try:
                # "x" refuses to reuse a name left by an earlier edit
                with open(backup_path, "x", encoding="utf-8", newline="") as f:
                    f.write(content)
            except FileExistsError:
                self._logger.debug(f"Backup name taken, advancing: {backup_path}")
                stamp += 1
                continue
            except OSError as e:
                raise FileRepositoryError(
                    f"Failed to create backup {backup_path}: {e.strerror or e}"
                )
            return backup_path
        raise FileRepositoryError(f"No free backup name for {path}")
