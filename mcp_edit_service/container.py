"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional

from mcp_edit_service.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from mcp_edit_service.adapters.llm.morph_adapter import MorphAdapter
from mcp_edit_service.config.settings import Settings
from mcp_edit_service.ports.files.file_repository_port import FileRepositoryPort
from mcp_edit_service.ports.llm.rewrite_port import RewritePort
from mcp_edit_service.ports.llm.tools_port import ToolsHandlerPort
from mcp_edit_service.use_cases.edit.apply_edit import ApplyEditUseCase
from mcp_edit_service.use_cases.tools.edit_tools import EditToolsHandler


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.

    Settings are built once at startup and handed in; nothing here reads the
    environment while requests are being served.
    """

    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None):
        self.settings = settings
        self._instances: dict[str, Any] = {}
        self._logger = logger or logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_rewrite_adapter(self) -> RewritePort:
        """
        Get rewrite adapter instance.

        Returns:
            RewritePort implementation
        """
        if "rewrite_adapter" not in self._instances:
            self._instances["rewrite_adapter"] = MorphAdapter(
                self.settings, logger=self._logger
            )
        return self._instances["rewrite_adapter"]

    def get_apply_edit_use_case(self) -> ApplyEditUseCase:
        """
        Get apply edit use case with injected dependencies.

        Returns:
            Configured ApplyEditUseCase
        """
        if "apply_edit_use_case" not in self._instances:
            self._instances["apply_edit_use_case"] = ApplyEditUseCase(
                self.get_file_repository(),
                self.get_rewrite_adapter(),
                logger=self._logger,
            )
        return self._instances["apply_edit_use_case"]

    def get_edit_tools_handler(self) -> ToolsHandlerPort:
        """
        Registry of the 'edit_file' tool backed by the apply edit use case.
        """
        if "edit_tools_handler" not in self._instances:
            self._instances["edit_tools_handler"] = EditToolsHandler(
                self.get_apply_edit_use_case(), logger=self._logger
            )
        return self._instances["edit_tools_handler"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
