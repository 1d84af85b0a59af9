"""
Result records produced for every edit request.
"""

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class EditSuccess:
    """The file was rewritten and its previous content backed up."""

    message: str
    changes_applied: str
    backup_created: str

    success = True

    def to_payload(self) -> dict[str, Any]:
        return {
            "success": True,
            "message": self.message,
            "changes_applied": self.changes_applied,
            "backup_created": self.backup_created,
        }


@dataclass(frozen=True)
class EditFailure:
    """The request failed; kind names the error class."""

    kind: str
    error: str

    success = False

    def to_payload(self) -> dict[str, Any]:
        return {"success": False, "error": self.error}


EditResult = Union[EditSuccess, EditFailure]


def to_envelope(result: EditResult) -> str:
    """Serialize a result to the JSON text returned to the caller."""
    return json.dumps(result.to_payload(), ensure_ascii=False)
