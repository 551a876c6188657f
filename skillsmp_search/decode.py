"""Decode raw search response bodies."""

from pydantic import ValidationError

from .errors import DecodeError
from .models import ApiResponse


def decode(body: bytes | str) -> ApiResponse:
    """Parse a response body into an ApiResponse.

    Missing or null optional fields decode to None. Raises DecodeError when
    the body is not JSON or a present field has the wrong JSON type.
    """
    try:
        return ApiResponse.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Failed to parse response: {_summarize(e)}") from e


def _summarize(e: ValidationError) -> str:
    """One-line description of the first validation problem."""
    errors = e.errors(include_url=False)
    if not errors:
        return str(e)
    first = errors[0]
    loc = ".".join(str(part) for part in first["loc"])
    more = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{loc}: {first['msg']}{more}" if loc else f"{first['msg']}{more}"
