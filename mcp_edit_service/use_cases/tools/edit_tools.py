"""
Tool "edit_file" mapped to the apply-edit use case.
"""

import logging
from typing import Optional

from mcp_edit_service.entities.edit_request import (
    CODE_EDIT_DESCRIPTION,
    INSTRUCTIONS_DESCRIPTION,
    TARGET_FILE_DESCRIPTION,
    validate_edit_request,
)
from mcp_edit_service.entities.edit_result import EditFailure, to_envelope
from mcp_edit_service.exceptions import ValidationError
from mcp_edit_service.ports.llm.tools_port import ToolSpec, ToolsHandlerPort
from mcp_edit_service.use_cases.edit.apply_edit import ApplyEditUseCase

EDIT_FILE_TOOL = "edit_file"

EDIT_FILE_DESCRIPTION = """Use this tool to propose an edit to an existing file.

This will be read by a less intelligent model, which will quickly apply the edit. You should make it clear what the edit is, while also minimizing the unchanged code you write.
When writing the edit, you should specify each edit in sequence, with the special comment // ... existing code ... to represent unchanged code in between edited lines.

You should bias towards repeating as few lines of the original file as possible to convey the change.
NEVER show unmodified code in the edit, unless sufficient context of unchanged lines around the code you're editing is needed to resolve ambiguity.
If you plan on deleting a section, you must provide surrounding context to indicate the deletion.
DO NOT omit spans of pre-existing code without using the // ... existing code ... comment to indicate its absence.

You should specify the following arguments before the others: [target_file]"""


class EditToolsHandler(ToolsHandlerPort):
    """Handler for the file editing tool."""

    def __init__(
        self,
        apply_edit_uc: ApplyEditUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the edit tools handler.

        Args:
            apply_edit_uc: Use case applying one edit
            logger: Logger instance to use for logging
        """
        self._apply_edit_uc = apply_edit_uc
        self._logger = logger or logging.getLogger(__name__)

    def available_tools(self) -> list[ToolSpec]:
        return [
            {
                "name": EDIT_FILE_TOOL,
                "description": EDIT_FILE_DESCRIPTION,
                "parameters": {
                    "type": "object",
                    "properties": {
                        "target_file": {
                            "type": "string",
                            "description": TARGET_FILE_DESCRIPTION,
                        },
                        "instructions": {
                            "type": "string",
                            "description": INSTRUCTIONS_DESCRIPTION,
                        },
                        "code_edit": {
                            "type": "string",
                            "description": CODE_EDIT_DESCRIPTION,
                        },
                    },
                    "required": ["target_file", "instructions", "code_edit"],
                },
            }
        ]

    async def dispatch(self, name: str, arguments: dict[str, object]) -> str:
        if name != EDIT_FILE_TOOL:
            raise ValueError(f"Unknown tool: {name}")

        try:
            request = validate_edit_request(arguments)
        except ValidationError as e:
            self._logger.warning(f"Rejected {name} call: {e}")
            return to_envelope(EditFailure(kind=e.kind, error=str(e)))

        result = await self._apply_edit_uc.execute(request)
        return to_envelope(result)
