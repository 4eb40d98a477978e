"""Helper utility functions."""

import json
from typing import Any, Dict

from fastapi import Request

from utils.logger import setup_logger

logger = setup_logger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_request_fields(request: Request) -> Dict[str, Any]:
    """Read a request body sent either as a form or as a JSON object.

    Unreadable or non-object bodies give an empty dict, leaving it to field
    validation to report what is missing.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Ignoring unreadable request body: {e}")
        return {}
    return data if isinstance(data, dict) else {}
