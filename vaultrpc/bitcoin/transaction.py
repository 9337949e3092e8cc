"""Consensus (de)serialization of Bitcoin transactions.

Only what vault messages need: parse, serialize and compute the txid. Script
contents are carried as opaque bytes and never interpreted.
"""

from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass, field

from vaultrpc.bitcoin.primitives import OutPoint, Txid
from vaultrpc.utils.exceptions import InvalidTransactionEncoding

SEGWIT_MARKER = 0x00
SEGWIT_FLAG = 0x01


def compact_size(n: int) -> bytes:
    """Bitcoin CompactSize unsigned integer."""
    if n < 0xFD:
        return struct.pack("<B", n)
    if n <= 0xFFFF:
        return b"\xfd" + struct.pack("<H", n)
    if n <= 0xFFFFFFFF:
        return b"\xfe" + struct.pack("<I", n)
    return b"\xff" + struct.pack("<Q", n)


class ByteReader:
    """Bounds-checked cursor over a consensus-serialized buffer."""

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.pos

    def take(self, n: int) -> bytes:
        if n > self.remaining:
            raise InvalidTransactionEncoding(
                f"unexpected end of data: wanted {n} bytes at offset {self.pos}, {self.remaining} left"
            )
        chunk = self.data[self.pos:self.pos + n]
        self.pos += n
        return chunk

    def unpack(self, fmt: str) -> int:
        return struct.unpack(fmt, self.take(struct.calcsize(fmt)))[0]

    def peek_byte(self) -> int:
        if not self.remaining:
            raise InvalidTransactionEncoding("unexpected end of data")
        return self.data[self.pos]

    def compact_size(self) -> int:
        prefix = self.unpack("<B")
        if prefix < 0xFD:
            return prefix
        fmt, minimum = {0xFD: ("<H", 0xFD), 0xFE: ("<I", 0x10000), 0xFF: ("<Q", 0x100000000)}[prefix]
        value = self.unpack(fmt)
        if value < minimum:
            raise InvalidTransactionEncoding("non-minimal CompactSize encoding")
        return value

    def var_bytes(self) -> bytes:
        return self.take(self.compact_size())

    def count(self, min_item_size: int) -> int:
        n = self.compact_size()
        if n * min_item_size > self.remaining:
            raise InvalidTransactionEncoding(f"item count {n} exceeds remaining data")
        return n


@dataclass(frozen=True, slots=True)
class TxIn:
    prevout: OutPoint
    script_sig: bytes = b""
    sequence: int = 0xFFFFFFFF
    witness: tuple[bytes, ...] = ()


@dataclass(frozen=True, slots=True)
class TxOut:
    value: int
    script_pubkey: bytes = b""


@dataclass(frozen=True, slots=True)
class Transaction:
    """A Bitcoin transaction, immutable once built."""

    version: int
    inputs: tuple[TxIn, ...] = field(default_factory=tuple)
    outputs: tuple[TxOut, ...] = field(default_factory=tuple)
    lock_time: int = 0

    def has_witness(self) -> bool:
        return any(txin.witness for txin in self.inputs)

    def serialize(self, include_witness: bool = True) -> bytes:
        """Consensus encoding.

        The extended (marker + flag) form is used when an input carries witness
        data, and for transactions without inputs, whose legacy form would be
        ambiguous with the marker byte.
        """
        extended = include_witness and (self.has_witness() or not self.inputs)
        parts = [struct.pack("<i", self.version)]
        if extended:
            parts.append(bytes([SEGWIT_MARKER, SEGWIT_FLAG]))
        parts.append(compact_size(len(self.inputs)))
        for txin in self.inputs:
            parts.append(txin.prevout.txid.raw)
            parts.append(struct.pack("<I", txin.prevout.vout))
            parts.append(compact_size(len(txin.script_sig)) + txin.script_sig)
            parts.append(struct.pack("<I", txin.sequence))
        parts.append(compact_size(len(self.outputs)))
        for txout in self.outputs:
            parts.append(struct.pack("<q", txout.value))
            parts.append(compact_size(len(txout.script_pubkey)) + txout.script_pubkey)
        if extended:
            for txin in self.inputs:
                parts.append(compact_size(len(txin.witness)))
                for item in txin.witness:
                    parts.append(compact_size(len(item)) + item)
        parts.append(struct.pack("<I", self.lock_time))
        return b"".join(parts)

    @classmethod
    def deserialize(cls, data: bytes) -> Transaction:
        """Parse a consensus-encoded transaction. The whole buffer must be consumed."""
        reader = ByteReader(data)
        version = reader.unpack("<i")
        extended = False
        if reader.peek_byte() == SEGWIT_MARKER:
            reader.take(1)
            flag = reader.unpack("<B")
            if flag != SEGWIT_FLAG:
                raise InvalidTransactionEncoding(f"unsupported segwit flag {flag:#04x}")
            extended = True

        inputs: list[tuple[OutPoint, bytes, int]] = []
        for _ in range(reader.count(41)):
            txid = Txid(reader.take(32))
            vout = reader.unpack("<I")
            script_sig = reader.var_bytes()
            sequence = reader.unpack("<I")
            inputs.append((OutPoint(txid, vout), script_sig, sequence))

        outputs: list[TxOut] = []
        for _ in range(reader.count(9)):
            value = reader.unpack("<q")
            outputs.append(TxOut(value=value, script_pubkey=reader.var_bytes()))

        witnesses: list[tuple[bytes, ...]] = [()] * len(inputs)
        if extended:
            for i in range(len(inputs)):
                witnesses[i] = tuple(reader.var_bytes() for _ in range(reader.count(1)))
            if inputs and not any(witnesses):
                raise InvalidTransactionEncoding("segwit flag set but no witness data")

        lock_time = reader.unpack("<I")
        if reader.remaining:
            raise InvalidTransactionEncoding(f"{reader.remaining} trailing bytes after transaction")

        return cls(
            version=version,
            inputs=tuple(
                TxIn(prevout=prevout, script_sig=script_sig, sequence=sequence, witness=witness)
                for (prevout, script_sig, sequence), witness in zip(inputs, witnesses)
            ),
            outputs=tuple(outputs),
            lock_time=lock_time,
        )

    def txid(self) -> Txid:
        digest = hashlib.sha256(hashlib.sha256(self.serialize(include_witness=False)).digest()).digest()
        return Txid(digest)

    def hex(self) -> str:
        return self.serialize().hex()
