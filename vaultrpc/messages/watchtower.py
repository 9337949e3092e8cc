"""Messages exchanged between stakeholders and their watchtower(s)."""

from __future__ import annotations

from typing import ClassVar

from vaultrpc.messages.dispatch import WireRecord
from vaultrpc.messages.fields import OutPointField, SignatureMapField, TxidField


class Sig(WireRecord):
    """Sent by a stakeholder to share all the signatures of a revocation transaction
    with its watchtower.

    `signatures` must be a set of public keys and ALL|ANYONECANPAY ECDSA
    signatures sufficient to validate the revocation transaction.
    """

    METHOD: ClassVar[str] = "sig"

    signatures: SignatureMapField
    txid: TxidField
    deposit_outpoint: OutPointField


class SigResult(WireRecord):
    """Watchtower acknowledgement that it has enough signatures (and fees) to start
    guarding the vault with the revocation transaction."""

    ack: bool
    txid: TxidField
