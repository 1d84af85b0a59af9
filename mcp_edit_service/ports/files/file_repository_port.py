"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def resolve(self, path: str) -> str:
        """
        Resolve a path against the process working directory.

        Args:
            path: Absolute or relative path

        Returns:
            Absolute path
        """
        pass

    @abstractmethod
    def is_accessible(self, path: str) -> bool:
        """
        Check that a file can be both read and written.

        Args:
            path: Path to check

        Returns:
            True if the file exists and is readable and writable
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read the whole content of a text file.

        Args:
            path: Path of the file to read

        Returns:
            File content, newlines untranslated

        Raises:
            FileRepositoryError: If the file cannot be read
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """
        Replace the full content of a text file.

        Args:
            path: Path of the file to write
            content: New content (UTF-8)

        Raises:
            FileRepositoryError: If the file cannot be written
        """
        pass

    @abstractmethod
    def create_backup(self, path: str, content: str, timestamp_ms: int) -> str:
        """
        Write content to a new sibling file named <path>.backup.<timestamp_ms>.

        An existing backup is never overwritten; the timestamp is advanced
        until an unused name is found.

        Args:
            path: Resolved path of the file being backed up
            content: Content to preserve
            timestamp_ms: Unix time in milliseconds

        Returns:
            Path of the created backup file

        Raises:
            FileRepositoryError: If the backup cannot be written
        """
        pass
