"""
Rewrite port interface for fast-apply models merging a condensed edit into a file.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class RewritePort(ABC):
    """Port interface for the external rewriting model."""

    @abstractmethod
    async def rewrite(self, original_code: str, code_edit: str) -> Optional[str]:
        """
        Reconstruct a full file from its current content and a condensed edit.

        Args:
            original_code: Full current content of the file
            code_edit: Changed lines with elision markers for unchanged spans

        Returns:
            The complete new file content, or None/empty if the model produced nothing

        Raises:
            RewriteError: If the call itself fails (network, auth, quota)
        """
        pass

    def get_model_info(self) -> dict[str, Any]:
        """
        Get information about the current model configuration.

        Returns:
            Dictionary with model configuration details
        """
        return {"provider": "Unknown", "model": "Unknown"}
