"""Request Body — reads form or JSON payloads into a plain dict.

Invariants:
    - application/json bodies must decode to an object, else FieldValidationError
    - Any other content type is parsed as form data (urlencoded or multipart)
    - An empty body yields {} so required-field checks report the missing field

Design Decisions:
    - Dependency over typed Body/Form params: the same endpoint serves HTML forms
      and JSON clients, and field validation stays in core/coerce_input.py
"""

import json

from fastapi import Request

from exercise_tracker.core.errors import FieldValidationError


async def read_payload(request: Request) -> dict:
    """FastAPI dependency returning the request body as a dict."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            raise FieldValidationError("Malformed JSON body", "body")
        if not isinstance(data, dict):
            raise FieldValidationError("JSON body must be an object", "body")
        return data
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
