"""Messages exchanged with the cosigning server(s)."""

from __future__ import annotations

from typing import ClassVar

from vaultrpc.messages.dispatch import WireRecord
from vaultrpc.messages.fields import SignatureListField, TransactionHexField


class SignRequest(WireRecord):
    """Sent by a manager to a cosigning server before unvaulting and spending a vault."""

    METHOD: ClassVar[str] = "sign"

    tx: TransactionHexField


class SignResult(WireRecord):
    signatures: SignatureListField
