"""Utility functions for vaultrpc."""

from vaultrpc.utils.exceptions import (
    ConfigError,
    DecodeError,
    ErrorCategory,
    InvalidTransactionEncoding,
    MalformedHexPayload,
    MalformedKey,
    MalformedKeyOrSignature,
    MalformedOutPoint,
    MalformedSignature,
    MalformedText,
    MalformedTransaction,
    ProgrammingError,
    ShapeCollisionError,
    UnfinalizedTransactionError,
    UnknownShape,
    VaultRpcError,
)
from vaultrpc.utils.logging import configure_logging

__all__ = [
    "ConfigError",
    "DecodeError",
    "ErrorCategory",
    "InvalidTransactionEncoding",
    "MalformedHexPayload",
    "MalformedKey",
    "MalformedKeyOrSignature",
    "MalformedOutPoint",
    "MalformedSignature",
    "MalformedText",
    "MalformedTransaction",
    "ProgrammingError",
    "ShapeCollisionError",
    "UnfinalizedTransactionError",
    "UnknownShape",
    "VaultRpcError",
    "configure_logging",
]
