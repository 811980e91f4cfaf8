"""
Translation of Content API HTTP errors.

Structured JSON errors in the 4xx range are reported on stdout and treated
as handled; anything else is re-raised unchanged.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)


def _error_body(exc: HttpError) -> Optional[dict]:
    """Return the `error` object of a JSON error response, or None if absent."""
    content = exc.content
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    try:
        data = json.loads(content)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    return error if isinstance(error, dict) else None


def check_http_error(exc: HttpError) -> None:
    """
    Print the embedded errors of a 4xx JSON error response, or re-raise.

    Output for a handled error:
        There are 2 error(s)
        - [invalid] Invalid value for field 'price'
        - [required] Missing field 'title'
    """
    error = _error_body(exc)
    if error is None:
        raise exc

    code = error.get("code", exc.resp.status)
    if not isinstance(code, int) or not 400 <= code < 500:
        raise exc

    entries = error.get("errors") or []
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise exc

    logger.warning("Request failed with HTTP %d (%d error(s))", code, len(entries))
    print(f"There are {len(entries)} error(s)")
    for info in entries:
        print(f"- [{info.get('reason', '')}] {info.get('message', '')}")
