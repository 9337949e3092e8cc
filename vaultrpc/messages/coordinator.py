"""Messages exchanged with the coordinator (synchronisation server)."""

from __future__ import annotations

from typing import Any, ClassVar, Sequence

from pydantic import ValidatorFunctionWrapHandler, field_validator

from vaultrpc.bitcoin.primitives import OutPoint
from vaultrpc.bitcoin.psbt import SpendTransaction
from vaultrpc.bitcoin.transaction import Transaction
from vaultrpc.messages.dispatch import WireRecord
from vaultrpc.messages.fields import (
    OutPointField,
    OutPointListField,
    PublicKeyField,
    SignatureField,
    SignatureMapField,
    TransactionHexField,
    TxidField,
)
from vaultrpc.utils.exceptions import InvalidTransactionEncoding, UnfinalizedTransactionError


class GetSigs(WireRecord):
    """Sent by a wallet to retrieve all signatures for a transaction."""

    METHOD: ClassVar[str] = "get_sigs"

    id: TxidField


class Sigs(WireRecord):
    """Response to get_sigs: a possibly incomplete mapping of public keys to the
    signatures required to verify the requested transaction."""

    signatures: SignatureMapField


class SetSpendTx(WireRecord):
    """Sent by a manager to advertise the spend transaction that will eventually be
    used for a specific unvault.

    Build it with `from_spend_tx`, which refuses unfinalized transactions. Every
    input of `transaction` must carry a scriptSig or a witness: a bare unsigned
    transaction raises UnfinalizedTransactionError when passed in directly and
    InvalidTransactionEncoding when received as wire text.
    """

    METHOD: ClassVar[str] = "set_spend_tx"

    deposit_outpoints: OutPointListField
    transaction: TransactionHexField

    @field_validator("transaction", mode="wrap")
    @classmethod
    def _require_signed_inputs(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Transaction:
        tx = handler(value)
        if tx.inputs and all(txin.script_sig or txin.witness for txin in tx.inputs):
            return tx
        txid = tx.txid().hex()
        if isinstance(value, Transaction):
            raise UnfinalizedTransactionError(txid)
        raise InvalidTransactionEncoding("spend transaction has inputs without scriptSig or witness", txid=txid)

    @classmethod
    def from_spend_tx(cls, deposit_outpoints: Sequence[OutPoint], tx: SpendTransaction) -> SetSpendTx:
        """Raises UnfinalizedTransactionError if `tx` was not finalized beforehand."""
        if not tx.is_finalized():
            raise UnfinalizedTransactionError(tx.unsigned_tx.txid().hex())
        return cls(deposit_outpoints=list(deposit_outpoints), transaction=tx.extract_tx())

    def wire_parts(self) -> tuple[list[OutPoint], Transaction]:
        return list(self.deposit_outpoints), self.transaction

    def spend_tx(self) -> Transaction:
        """The raw, fully signed spend transaction."""
        return self.transaction


class SetSpendResult(WireRecord):
    """`ack` is true if the coordinator claims to have stored the spend transaction."""

    ack: bool


class GetSpendTx(WireRecord):
    """Sent by a watchtower after an unvault event to learn about the spend transaction."""

    METHOD: ClassVar[str] = "get_spend_tx"

    deposit_outpoint: OutPointField


class SpendTx(WireRecord):
    transaction: TransactionHexField


class Sig(WireRecord):
    """Sent by a stakeholder to share, at any time, its signature for a transaction
    with all participants."""

    METHOD: ClassVar[str] = "sig"

    pubkey: PublicKeyField
    signature: SignatureField
    id: TxidField


class SigResult(WireRecord):
    """`ack` is true if the coordinator claims to have stored the signature."""

    ack: bool
