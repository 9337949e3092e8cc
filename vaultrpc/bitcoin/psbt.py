"""Spend transactions as Partially Signed Bitcoin Transactions (BIP174).

Managers build and sign the spend transaction as a PSBT. Only a finalized PSBT
(every input carries its final scriptSig and/or witness) may be extracted into
the network transaction advertised to the coordinator.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from vaultrpc.bitcoin.transaction import Transaction, TxIn, ByteReader
from vaultrpc.utils.exceptions import InvalidTransactionEncoding

PSBT_MAGIC = b"psbt\xff"

PSBT_GLOBAL_UNSIGNED_TX = 0x00
PSBT_IN_FINAL_SCRIPTSIG = 0x07
PSBT_IN_FINAL_SCRIPTWITNESS = 0x08

PsbtMap = dict[bytes, bytes]


def _read_map(reader: ByteReader) -> PsbtMap:
    entries: PsbtMap = {}
    while True:
        key = reader.var_bytes()
        if not key:
            return entries
        if key in entries:
            raise InvalidTransactionEncoding(f"duplicate PSBT key {key.hex()}")
        entries[key] = reader.var_bytes()


def _parse_witness(value: bytes) -> tuple[bytes, ...]:
    reader = ByteReader(value)
    items = tuple(reader.var_bytes() for _ in range(reader.count(1)))
    if reader.remaining:
        raise InvalidTransactionEncoding("trailing bytes in final script witness")
    return items


@dataclass(frozen=True, slots=True)
class SpendTransaction:
    """A PSBT whose global unsigned transaction spends one or more unvault outputs."""

    unsigned_tx: Transaction
    global_map: PsbtMap
    input_maps: tuple[PsbtMap, ...]
    output_maps: tuple[PsbtMap, ...]

    @classmethod
    def from_psbt_bytes(cls, data: bytes) -> SpendTransaction:
        if not data.startswith(PSBT_MAGIC):
            raise InvalidTransactionEncoding("missing PSBT magic bytes")
        reader = ByteReader(data)
        reader.take(len(PSBT_MAGIC))
        global_map = _read_map(reader)
        raw_tx = global_map.get(bytes([PSBT_GLOBAL_UNSIGNED_TX]))
        if raw_tx is None:
            raise InvalidTransactionEncoding("PSBT has no unsigned transaction")
        unsigned_tx = Transaction.deserialize(raw_tx)
        if any(txin.script_sig or txin.witness for txin in unsigned_tx.inputs):
            raise InvalidTransactionEncoding("PSBT unsigned transaction has non-empty scripts")
        input_maps = tuple(_read_map(reader) for _ in unsigned_tx.inputs)
        output_maps = tuple(_read_map(reader) for _ in unsigned_tx.outputs)
        if reader.remaining:
            raise InvalidTransactionEncoding(f"{reader.remaining} trailing bytes after PSBT")
        return cls(unsigned_tx, global_map, input_maps, output_maps)

    @classmethod
    def from_psbt_str(cls, psbt_base64: str) -> SpendTransaction:
        try:
            data = base64.b64decode(psbt_base64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidTransactionEncoding(f"PSBT is not valid base64: {e}") from e
        return cls.from_psbt_bytes(data)

    def is_finalized(self) -> bool:
        """True when every input holds its final scriptSig or script witness."""
        if not self.input_maps:
            return False
        return all(
            bytes([PSBT_IN_FINAL_SCRIPTSIG]) in input_map or bytes([PSBT_IN_FINAL_SCRIPTWITNESS]) in input_map
            for input_map in self.input_maps
        )

    def extract_tx(self) -> Transaction:
        """Network transaction with final scripts and witnesses filled in.

        Inputs without final data are left empty, which is what an unfinalized
        PSBT yields.
        """
        inputs = []
        for txin, input_map in zip(self.unsigned_tx.inputs, self.input_maps):
            final_witness = input_map.get(bytes([PSBT_IN_FINAL_SCRIPTWITNESS]))
            inputs.append(
                TxIn(
                    prevout=txin.prevout,
                    script_sig=input_map.get(bytes([PSBT_IN_FINAL_SCRIPTSIG]), b""),
                    sequence=txin.sequence,
                    witness=_parse_witness(final_witness) if final_witness is not None else (),
                )
            )
        return Transaction(
            version=self.unsigned_tx.version,
            inputs=tuple(inputs),
            outputs=self.unsigned_tx.outputs,
            lock_time=self.unsigned_tx.lock_time,
        )
