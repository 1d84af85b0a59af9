"""
Edit request entity and the validator turning raw tool arguments into it.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from mcp_edit_service.exceptions import ValidationError

TARGET_FILE_DESCRIPTION = (
    "The target file to modify. Always specify the target file as the first "
    "argument and use the relative path in the workspace of the file to edit"
)
INSTRUCTIONS_DESCRIPTION = "Single sentence describing the edit in first person"
CODE_EDIT_DESCRIPTION = (
    "Specify ONLY the precise lines of code that you wish to edit. NEVER specify "
    "or write out unchanged code. Instead, represent all unchanged code using the "
    "comment of the language you're editing in - example: // ... existing code ..."
)


class EditRequest(BaseModel):
    """A validated request to edit one file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    target_file: StrictStr = Field(
        ..., min_length=1, description=TARGET_FILE_DESCRIPTION
    )
    instructions: StrictStr = Field(
        ..., min_length=1, description=INSTRUCTIONS_DESCRIPTION
    )
    code_edit: StrictStr = Field(..., min_length=1, description=CODE_EDIT_DESCRIPTION)


@dataclass(frozen=True)
class FieldError:
    """One violation found while validating tool arguments."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class ParseResult:
    """Either a valid request or the list of every violation found."""

    request: Optional[EditRequest] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.request is not None and not self.errors


def _field_errors(exc: PydanticValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        name = ".".join(str(part) for part in loc) if loc else "arguments"
        errors.append(FieldError(name, err.get("msg", "invalid value")))
    return errors


def parse_edit_request(arguments: Any) -> ParseResult:
    """
    Parse raw tool arguments without raising.

    Args:
        arguments: Arbitrary value received from the tool call

    Returns:
        ParseResult holding the request, or every field violation
    """
    if arguments is None:
        arguments = {}
    try:
        return ParseResult(request=EditRequest.model_validate(arguments))
    except PydanticValidationError as e:
        return ParseResult(errors=_field_errors(e))


def validate_edit_request(arguments: Any) -> EditRequest:
    """
    Validate raw tool arguments into an EditRequest.

    Args:
        arguments: Arbitrary value received from the tool call

    Returns:
        The validated EditRequest

    Raises:
        ValidationError: Listing every missing or mistyped field
    """
    result = parse_edit_request(arguments)
    if result.request is not None and not result.errors:
        return result.request
    joined = ", ".join(str(e) for e in result.errors)
    raise ValidationError(f"Invalid arguments: {joined}", result.errors)
