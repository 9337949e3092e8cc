"""Vault protocol messages: per-role records and the request/response envelopes."""

from vaultrpc.messages import coordinator, cosigner, watchtower
from vaultrpc.messages.boundary import decode_request_result, decode_response_result
from vaultrpc.messages.envelope import (
    EXPECTED_RESULTS,
    REQUEST_PARAMS_VARIANTS,
    Request,
    RequestParams,
    Response,
    ResponseResult,
)
from vaultrpc.messages.ids import IdSource, SecureIdSource, SequentialIdSource

__all__ = [
    "EXPECTED_RESULTS",
    "IdSource",
    "REQUEST_PARAMS_VARIANTS",
    "Request",
    "RequestParams",
    "Response",
    "ResponseResult",
    "SecureIdSource",
    "SequentialIdSource",
    "coordinator",
    "cosigner",
    "decode_request_result",
    "decode_response_result",
    "watchtower",
]
