from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import ValidationError as PydanticValidationError

from domain import MAX_MESSAGE_LENGTH, Language, SarcasmLevel, ValidationError, allowed_values
from schemas import ReplyRequest


FIELD_ENUMS: Dict[str, type] = {
    "language": Language,
    "sarcasmLevel": SarcasmLevel,
}

# populate_by_name lets callers use the python attribute; errors always use the wire name.
FIELD_WIRE_NAMES: Dict[str, str] = {"sarcasm_level": "sarcasmLevel"}


def validate_reply_input(values: Mapping[str, Any]) -> ReplyRequest:
    """Check raw form values and build a ReplyRequest, or raise ValidationError."""
    if not isinstance(values, Mapping):
        raise ValidationError({"__root__": "must be an object with message, language and sarcasmLevel"})

    try:
        return ReplyRequest.model_validate(dict(values))
    except PydanticValidationError as exc:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            loc = error.get("loc") or ("__root__",)
            field = FIELD_WIRE_NAMES.get(str(loc[0]), str(loc[0]))
            errors.setdefault(field, _describe(field, error.get("type", "")))
        raise ValidationError(errors) from exc


def _describe(field: str, error_type: str) -> str:
    if error_type == "missing":
        return "is required"
    if field in FIELD_ENUMS:
        return "must be one of: " + ", ".join(allowed_values(FIELD_ENUMS[field]))
    if error_type == "string_too_short":
        return "must not be empty"
    if error_type == "string_too_long":
        return f"must not exceed {MAX_MESSAGE_LENGTH} characters"
    if error_type == "string_type":
        return "must be a string"
    return "is invalid"
