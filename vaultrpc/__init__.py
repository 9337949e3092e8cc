"""
Public API:
- Request, Response: JSONRPC-like envelopes with untagged params dispatch
- watchtower, coordinator, cosigner: per-role params/result records
- SecureIdSource, SequentialIdSource: correlation id sources
- Transaction, SpendTransaction and the key/signature/outpoint primitives
- VaultRpcError and its DecodeError / ProgrammingError families
"""

from loguru import logger

from vaultrpc.bitcoin import OutPoint, PublicKey, Signature, SpendTransaction, Transaction, Txid
from vaultrpc.messages import (
    Request,
    RequestParams,
    Response,
    ResponseResult,
    SecureIdSource,
    SequentialIdSource,
    coordinator,
    cosigner,
    watchtower,
)
from vaultrpc.utils.exceptions import DecodeError, ProgrammingError, VaultRpcError

logger.disable("vaultrpc")

__all__ = [
    "DecodeError",
    "OutPoint",
    "ProgrammingError",
    "PublicKey",
    "Request",
    "RequestParams",
    "Response",
    "ResponseResult",
    "SecureIdSource",
    "SequentialIdSource",
    "Signature",
    "SpendTransaction",
    "Transaction",
    "Txid",
    "VaultRpcError",
    "coordinator",
    "cosigner",
    "watchtower",
]

__version__ = "0.1.0"
