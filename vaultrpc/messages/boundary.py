"""Decode helpers that return failures as values instead of raising.

Servers answering on a live connection usually prefer a result tuple they can
log and act upon. Only DecodeError is converted; anything else is a bug and
propagates.
"""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger

from vaultrpc.messages.envelope import Request, Response
from vaultrpc.utils.exceptions import DecodeError

DecodeResult = tuple[bool, Any | None, dict[str, Any] | None]


def _decode_result(
    what: str,
    decode: Callable[[], Any],
    log_warning: Callable[..., None],
) -> DecodeResult:
    try:
        return True, decode(), None
    except DecodeError as exc:
        log_warning("Rejected {} with {}: {}", what, exc.code, exc.message)
        return False, None, exc.to_dict()


def decode_request_result(
    text: str | bytes,
    *,
    log_warning: Callable[..., None] = logger.warning,
) -> DecodeResult:
    """(True, Request, None) on success, (False, None, error dict) on a decode failure."""
    return _decode_result("request", lambda: Request.from_wire(text), log_warning)


def decode_response_result(
    text: str | bytes,
    expected: Any,
    *,
    log_warning: Callable[..., None] = logger.warning,
) -> DecodeResult:
    return _decode_result("response", lambda: Response.from_wire(text, expected), log_warning)
