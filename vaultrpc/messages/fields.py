"""Pydantic field types for the values embedded in vault messages.

Each type validates either an already-built Python value or its wire text,
serializes back to the wire text, and declares its JSON kind so record shapes
can be compared without instantiating anything.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Mapping, TypeVar

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from vaultrpc.bitcoin.primitives import OutPoint, PublicKey, Signature, Txid
from vaultrpc.bitcoin.transaction import Transaction
from vaultrpc.messages.codecs import (
    SignatureMap,
    decode_signature_map,
    decode_tx_hex,
    encode_signature_map,
    encode_tx_hex,
)
from vaultrpc.utils.exceptions import MalformedOutPoint, MalformedSignature

V = TypeVar("V")


def _accept(cls: type[V], parse: Callable[[Any], V]) -> Callable[[Any], V]:
    def validate(value: Any) -> V:
        if isinstance(value, cls):
            return value
        return parse(value)

    return validate


def _validate_signature_map(value: Any) -> SignatureMap:
    if isinstance(value, Mapping) and all(
        isinstance(k, PublicKey) and isinstance(v, Signature) for k, v in value.items()
    ):
        return dict(value)
    return decode_signature_map(value)


def _validate_signature_list(value: Any) -> list[Signature]:
    if not isinstance(value, (list, tuple)):
        raise MalformedSignature("signatures must be a JSON array")
    return [sig if isinstance(sig, Signature) else Signature.from_hex(sig) for sig in value]


def _validate_outpoint_list(value: Any) -> list[OutPoint]:
    if not isinstance(value, (list, tuple)):
        raise MalformedOutPoint("deposit outpoints must be a JSON array")
    return [op if isinstance(op, OutPoint) else OutPoint.from_str(op) for op in value]


TxidField = Annotated[
    Txid,
    PlainValidator(_accept(Txid, Txid.from_hex)),
    PlainSerializer(lambda v: v.hex(), return_type=str),
    WithJsonSchema({"type": "string"}),
]

OutPointField = Annotated[
    OutPoint,
    PlainValidator(_accept(OutPoint, OutPoint.from_str)),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string"}),
]

OutPointListField = Annotated[
    list[OutPoint],
    PlainValidator(_validate_outpoint_list),
    PlainSerializer(lambda ops: [str(op) for op in ops], return_type=list[str]),
    WithJsonSchema({"type": "array", "items": {"type": "string"}}),
]

PublicKeyField = Annotated[
    PublicKey,
    PlainValidator(_accept(PublicKey, PublicKey.from_hex)),
    PlainSerializer(lambda v: v.hex(), return_type=str),
    WithJsonSchema({"type": "string"}),
]

SignatureField = Annotated[
    Signature,
    PlainValidator(_accept(Signature, Signature.from_hex)),
    PlainSerializer(lambda v: v.hex(), return_type=str),
    WithJsonSchema({"type": "string"}),
]

SignatureListField = Annotated[
    list[Signature],
    PlainValidator(_validate_signature_list),
    PlainSerializer(lambda sigs: [sig.hex() for sig in sigs], return_type=list[str]),
    WithJsonSchema({"type": "array", "items": {"type": "string"}}),
]

SignatureMapField = Annotated[
    SignatureMap,
    PlainValidator(_validate_signature_map),
    PlainSerializer(encode_signature_map, return_type=dict[str, str]),
    WithJsonSchema({"type": "object", "additionalProperties": {"type": "string"}}),
]

TransactionHexField = Annotated[
    Transaction,
    PlainValidator(_accept(Transaction, decode_tx_hex)),
    PlainSerializer(encode_tx_hex, return_type=str),
    WithJsonSchema({"type": "string"}),
]
