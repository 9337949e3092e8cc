"""
Exception hierarchy for vaultrpc.

Provides:
- Base exception class with error code, category and details
- Decode failures (always local and non-fatal to the process)
- Programming errors raised at construction time
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    FATAL = "fatal"


class VaultRpcError(Exception):
    """Base exception for all vaultrpc errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class DecodeError(VaultRpcError):
    """Received text could not be turned into a message value."""

    code = "DECODE_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(
            message,
            code=type(self).code,
            category=ErrorCategory.VALIDATION,
            details={k: v for k, v in details.items() if v is not None},
        )


class MalformedText(DecodeError):
    """Not valid JSON, or not a JSON object."""

    code = "MALFORMED_TEXT"


class UnknownShape(DecodeError):
    """Well-formed JSON that matches no known envelope or record shape."""

    code = "UNKNOWN_SHAPE"


class MalformedTransaction(DecodeError):
    """A transaction field could not be decoded."""

    code = "MALFORMED_TRANSACTION"


class MalformedHexPayload(MalformedTransaction):
    code = "MALFORMED_HEX_PAYLOAD"


class InvalidTransactionEncoding(MalformedTransaction):
    code = "INVALID_TRANSACTION_ENCODING"


class MalformedKeyOrSignature(DecodeError):
    code = "MALFORMED_KEY_OR_SIGNATURE"


class MalformedKey(MalformedKeyOrSignature):
    code = "MALFORMED_KEY"


class MalformedSignature(MalformedKeyOrSignature):
    code = "MALFORMED_SIGNATURE"


class MalformedOutPoint(DecodeError):
    """A txid or outpoint text is not in `<64 hex>` / `<64 hex>:<u32>` form."""

    code = "MALFORMED_OUTPOINT"


class ProgrammingError(VaultRpcError):
    """Caller defect detected while building a message. Never caught internally."""

    def __init__(self, message: str, code: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=code, category=ErrorCategory.FATAL, details=details)


class UnfinalizedTransactionError(ProgrammingError):
    def __init__(self, txid: str):
        super().__init__(
            f"spend transaction {txid} is not finalized",
            code="UNFINALIZED_TRANSACTION",
            details={"txid": txid},
        )


class ShapeCollisionError(ProgrammingError):
    """Two variants of an untagged union cannot be told apart on the wire."""

    def __init__(self, first: str, second: str):
        super().__init__(
            f"{first} and {second} share the same wire shape",
            code="SHAPE_COLLISION",
            details={"variants": [first, second]},
        )


class ConfigError(VaultRpcError):
    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="CONFIG_ERROR", category=ErrorCategory.FATAL, details=details)
