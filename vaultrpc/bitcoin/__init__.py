"""Bitcoin values carried by vault messages."""

from vaultrpc.bitcoin.primitives import OutPoint, PublicKey, Signature, Txid
from vaultrpc.bitcoin.psbt import SpendTransaction
from vaultrpc.bitcoin.transaction import Transaction, TxIn, TxOut

__all__ = [
    "OutPoint",
    "PublicKey",
    "Signature",
    "SpendTransaction",
    "Transaction",
    "TxIn",
    "TxOut",
    "Txid",
]
