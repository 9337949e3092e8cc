"""Text codecs for binary payloads embedded in JSON messages."""

from __future__ import annotations

from typing import Any, Mapping

from vaultrpc.bitcoin.primitives import PublicKey, Signature
from vaultrpc.bitcoin.transaction import Transaction
from vaultrpc.utils.exceptions import MalformedHexPayload, MalformedKey, MalformedKeyOrSignature, MalformedSignature

SignatureMap = dict[PublicKey, Signature]


def encode_tx_hex(tx: Transaction) -> str:
    """Lowercase hex of the consensus serialization, no prefix."""
    return tx.serialize().hex()


def decode_tx_hex(value: Any) -> Transaction:
    """Parse a hex-encoded transaction.

    Raises MalformedHexPayload for bad hex and InvalidTransactionEncoding when
    the bytes are not a consensus-valid transaction.
    """
    if not isinstance(value, str):
        raise MalformedHexPayload("transaction must be a hex string")
    if len(value) % 2:
        raise MalformedHexPayload("odd-length hex payload", length=len(value))
    try:
        raw = bytes.fromhex(value)
    except ValueError as e:
        raise MalformedHexPayload(f"invalid hex payload: {e}") from e
    if len(raw) * 2 != len(value):
        raise MalformedHexPayload("hex payload contains whitespace")
    return Transaction.deserialize(raw)


def encode_signature_map(signatures: Mapping[PublicKey, Signature]) -> dict[str, str]:
    """Members in ascending order of the raw public key bytes."""
    return {pubkey.hex(): signatures[pubkey].hex() for pubkey in sorted(signatures)}


def decode_signature_map(value: Any) -> SignatureMap:
    if not isinstance(value, dict):
        raise MalformedKeyOrSignature("signatures must be a JSON object")
    decoded: SignatureMap = {}
    for key_hex, sig_hex in value.items():
        pubkey = PublicKey.from_hex(key_hex)
        if pubkey in decoded:
            raise MalformedKey("duplicate public key in signatures", pubkey=key_hex)
        if not isinstance(sig_hex, str):
            raise MalformedSignature("signature must be a hex string", pubkey=key_hex)
        decoded[pubkey] = Signature.from_hex(sig_hex)
    return decoded
