# spacebits/schemas/parsing.py
import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from spacebits.errors import DeserializationError

M = TypeVar("M", bound=BaseModel)


def parse_document(model: type[M], data: Any) -> M:
    """Validate already-decoded JSON into `model`, raising DeserializationError on mismatch."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DeserializationError(f"{model.__name__}: {_summarize(e)}") from e


def parse_json_bytes(model: type[M], body: bytes) -> M:
    """Decode UTF-8 JSON bytes and validate into `model`."""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DeserializationError(f"{model.__name__}: body is not valid UTF-8") from e
    try:
        data = json.loads(text)
    except ValueError as e:
        raise DeserializationError(f"{model.__name__}: body is not JSON ({e})") from e
    return parse_document(model, data)


def _summarize(e: ValidationError, limit: int = 3) -> str:
    parts = []
    for err in e.errors()[:limit]:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc or '<root>'}: {err.get('msg')}")
    more = e.error_count() - limit
    if more > 0:
        parts.append(f"(+{more} more)")
    return "; ".join(parts)
