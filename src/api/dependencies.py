import json
from typing import Any

from fastapi import Request

from core.config import JSON_MEDIA_TYPE, MAX_BODY_BYTES
from core.errors import MalformedBodyError, PayloadTooLargeError


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _is_json_request(request: Request) -> bool:
    media_type = request.headers.get("content-type", "").split(";", 1)[0]
    return media_type.strip().lower() == JSON_MEDIA_TYPE


async def read_json_body(request: Request) -> Any:
    """Parses the raw request body as JSON.

    Only `application/json` bodies are parsed; any other media type, like an
    empty body, yields None so the handler can report it as invalid invoice
    data. Bodies over the size limit and bytes that do not parse are rejected
    here, before the handler runs.
    """
    if not _is_json_request(request):
        return None

    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > MAX_BODY_BYTES:
        raise PayloadTooLargeError()

    body = await request.body()
    if len(body) > MAX_BODY_BYTES:
        raise PayloadTooLargeError()
    if not body.strip():
        return None
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise MalformedBodyError() from e
