"""
Use case applying a condensed edit to a file through the rewriting model.
"""

import logging
import time
from typing import Callable, Optional

from mcp_edit_service.entities.edit_request import EditRequest
from mcp_edit_service.entities.edit_result import EditFailure, EditResult, EditSuccess
from mcp_edit_service.exceptions import (
    AccessError,
    BackupError,
    CommitError,
    EditError,
    FileRepositoryError,
    RewriteError,
)
from mcp_edit_service.ports.files.file_repository_port import FileRepositoryPort
from mcp_edit_service.ports.llm.rewrite_port import RewritePort


def epoch_millis() -> int:
    return int(time.time() * 1000)


class ApplyEditUseCase:
    """
    Apply one edit request: read, rewrite, back up, commit.

    The target file is only touched after the model returned non-empty content
    and the backup has been written. Failures never raise; they are returned
    as EditFailure records.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        rewrite_adapter: RewritePort,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], int] = epoch_millis,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            rewrite_adapter: Adapter for the external rewriting model
            logger: Logger instance to use for logging
            clock: Returns the current Unix time in milliseconds (backup names)
        """
        self._file_repository = file_repository
        self._rewrite_adapter = rewrite_adapter
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock

    async def execute(self, request: EditRequest) -> EditResult:
        """
        Apply the edit described by the request.

        Args:
            request: Validated edit request

        Returns:
            EditSuccess, or EditFailure carrying the error kind and message
        """
        try:
            return await self._apply(request)
        except EditError as e:
            self._logger.warning(f"Edit of {request.target_file} failed ({e.kind}): {e}")
            return EditFailure(kind=e.kind, error=str(e))
        except Exception as e:
            self._logger.error(f"Unexpected error editing {request.target_file}: {e}")
            return EditFailure(kind="UnknownError", error=f"Failed to edit file: {e}")

    async def _apply(self, request: EditRequest) -> EditSuccess:
        target = request.target_file
        path = self._file_repository.resolve(target)
        self._logger.info(f"Applying edit to {path}: {request.instructions}")

        if not self._file_repository.is_accessible(path):
            raise AccessError(f"File not found or not accessible: {target}")
        try:
            original_code = self._file_repository.read_text(path)
        except FileRepositoryError as e:
            raise AccessError(f"File not found or not accessible: {target} ({e})")

        updated_code = await self._rewrite_adapter.rewrite(
            original_code, request.code_edit
        )
        if not updated_code:
            raise RewriteError("Failed to generate updated code from Morph API")

        try:
            backup_path = self._file_repository.create_backup(
                path, original_code, self._clock()
            )
        except FileRepositoryError as e:
            raise BackupError(f"Failed to create backup of {target}: {e}")
        self._logger.info(f"Backup created: {backup_path}")

        try:
            self._file_repository.write_text(path, updated_code)
        except FileRepositoryError as e:
            raise CommitError(
                f"Failed to write {target}: {e}. Original content is preserved in {backup_path}"
            )
        self._logger.info(f"Edit applied to {path}")

        return EditSuccess(
            message=f"Successfully applied edit to {target}: {request.instructions}",
            changes_applied=request.code_edit,
            backup_created=backup_path,
        )
