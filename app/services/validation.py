"""Validate request bodies against the auth schemas without raising."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    """Either ok with the parsed model, or not ok with a formatted message."""

    ok: bool
    data: ModelT | None = None
    message: str = ""


def _field_name(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Render pydantic error dicts as 'field: message' joined with ', ' (order preserved)."""
    return ", ".join(f"{_field_name(tuple(err.get('loc', ())))}: {err['msg']}" for err in errors)


def validate(schema: type[ModelT], body: Any) -> ValidationResult[ModelT]:
    """
    Match body against schema. The whole body conforms or the result is a failure;
    there is no partial parse.

    body is either the raw request bytes (or str), parsed as JSON here so that
    malformed JSON is an ordinary 'body: Invalid JSON ...' failure, or an
    already-decoded object.
    """
    try:
        if isinstance(body, (bytes, bytearray, str)):
            parsed = schema.model_validate_json(body)
        elif isinstance(body, dict):
            parsed = schema.model_validate(body)
        else:
            return ValidationResult(ok=False, message="body: Input should be a JSON object")
    except ValidationError as e:
        return ValidationResult(ok=False, message=format_validation_errors(e.errors()))
    return ValidationResult(ok=True, data=parsed)
