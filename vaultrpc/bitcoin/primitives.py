"""Fixed-format Bitcoin values carried by vault messages: txids, outpoints, keys and signatures."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import ec, utils
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from vaultrpc.utils.exceptions import MalformedKey, MalformedOutPoint, MalformedSignature

SECP256K1_N = int(
    "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141",
    16,
)

TXID_LEN = 32
COMPRESSED_PUBKEY_LEN = 33
U32_MAX = 0xFFFFFFFF


def _hex_to_bytes(value: str) -> bytes | None:
    """Strict lowercase/uppercase hex without prefix or whitespace; None when invalid."""
    if not isinstance(value, str) or len(value) % 2:
        return None
    try:
        raw = bytes.fromhex(value)
    except ValueError:
        return None
    # bytes.fromhex tolerates whitespace between bytes
    if len(raw) * 2 != len(value):
        return None
    return raw


@dataclass(frozen=True, slots=True)
class Txid:
    """Transaction id. Stored in internal byte order, displayed byte-reversed."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != TXID_LEN:
            raise MalformedOutPoint(f"txid must be {TXID_LEN} bytes, got {len(self.raw)}")

    @classmethod
    def zero(cls) -> Txid:
        return cls(bytes(TXID_LEN))

    @classmethod
    def from_hex(cls, value: str) -> Txid:
        raw = _hex_to_bytes(value)
        if raw is None or len(raw) != TXID_LEN:
            raise MalformedOutPoint("txid must be 64 hex characters", value=value)
        return cls(raw[::-1])

    def hex(self) -> str:
        return self.raw[::-1].hex()

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True, slots=True)
class OutPoint:
    """Reference to a transaction output: `<txid>:<vout>`."""

    txid: Txid
    vout: int

    def __post_init__(self) -> None:
        if not 0 <= self.vout <= U32_MAX:
            raise MalformedOutPoint(f"vout out of range: {self.vout}")

    @classmethod
    def from_str(cls, value: str) -> OutPoint:
        if not isinstance(value, str):
            raise MalformedOutPoint("outpoint must be a string")
        txid_hex, sep, vout_text = value.partition(":")
        if not sep or not (vout_text.isascii() and vout_text.isdigit()) or (len(vout_text) > 1 and vout_text[0] == "0"):
            raise MalformedOutPoint("outpoint must be '<txid>:<vout>'", value=value)
        return cls(Txid.from_hex(txid_hex), int(vout_text))

    def __str__(self) -> str:
        return f"{self.txid.hex()}:{self.vout}"


@dataclass(frozen=True, slots=True, order=True)
class PublicKey:
    """Compressed secp256k1 public key. Orders by its serialized bytes."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != COMPRESSED_PUBKEY_LEN or self.raw[0] not in (2, 3):
            raise MalformedKey("public key must be a 33-byte compressed point")
        try:
            ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), self.raw)
        except ValueError as e:
            raise MalformedKey(f"not a point on secp256k1: {e}") from e

    @classmethod
    def from_hex(cls, value: str) -> PublicKey:
        raw = _hex_to_bytes(value)
        if raw is None:
            raise MalformedKey("public key is not valid hex", value=value)
        return cls(raw)

    @classmethod
    def from_cryptography(cls, key: ec.EllipticCurvePublicKey) -> PublicKey:
        return cls(key.public_bytes(Encoding.X962, PublicFormat.CompressedPoint))

    @classmethod
    def from_secret(cls, secret: bytes) -> PublicKey:
        """Derive the public key of a 32-byte secret (tests and tooling)."""
        secret_int = int.from_bytes(secret, "big")
        if not 0 < secret_int < SECP256K1_N:
            raise MalformedKey("secret key out of range for secp256k1")
        private_key = ec.derive_private_key(secret_int, ec.SECP256K1())
        return cls.from_cryptography(private_key.public_key())

    def to_cryptography(self) -> ec.EllipticCurvePublicKey:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), self.raw)

    def hex(self) -> str:
        return self.raw.hex()

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True, slots=True)
class Signature:
    """ECDSA signature over secp256k1, kept as its canonical DER encoding."""

    r: int
    s: int

    def __post_init__(self) -> None:
        if not (0 < self.r < SECP256K1_N and 0 < self.s < SECP256K1_N):
            raise MalformedSignature("signature scalars out of range")

    @classmethod
    def from_der(cls, der: bytes) -> Signature:
        try:
            r, s = utils.decode_dss_signature(der)
        except ValueError as e:
            raise MalformedSignature(f"invalid DER signature: {e}") from e
        sig = cls(r, s)
        if sig.der() != der:
            raise MalformedSignature("signature is not strict DER")
        return sig

    @classmethod
    def from_compact(cls, compact: bytes) -> Signature:
        if len(compact) != 64:
            raise MalformedSignature("compact signatures are 64 bytes")
        return cls(int.from_bytes(compact[:32], "big"), int.from_bytes(compact[32:], "big"))

    @classmethod
    def from_hex(cls, value: str) -> Signature:
        raw = _hex_to_bytes(value)
        if raw is None:
            raise MalformedSignature("signature is not valid hex", value=value)
        return cls.from_der(raw)

    def der(self) -> bytes:
        return utils.encode_dss_signature(self.r, self.s)

    def hex(self) -> str:
        return self.der().hex()

    def __str__(self) -> str:
        return self.hex()
