from typing import Any, Optional, Sequence

from pydantic import BaseModel

STATUS_OK = "ok"
STATUS_ERROR = "error"

# Public names for request fields in error messages
FIELD_NAMES = {
    "url": "URL",
    "alias": "Alias",
}


class Response(BaseModel):
    status: str
    error: Optional[str] = None


class AliasResponse(Response):
    alias: Optional[str] = None


def OK() -> Response:
    return Response(status=STATUS_OK)


def Error(msg: str) -> Response:
    return Response(status=STATUS_ERROR, error=msg)


def validation_error(errors: Sequence[dict[str, Any]]) -> Response:
    """Collapse pydantic error dicts into a single field-level message."""
    messages = []
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part != "body"]
        if err.get("type") == "json_invalid" or not loc or not isinstance(loc[0], str):
            return Error("failed to decode request")

        field = loc[0]
        name = FIELD_NAMES.get(field, field)
        if field == "url":
            if err.get("type") in ("missing", "string_too_short"):
                messages.append(f"field {name} is a required field")
            else:
                messages.append(f"field {name} is not a valid URL")
        else:
            messages.append(f"field {name} is invalid: {err.get('type')}")

    return Error(", ".join(messages))
