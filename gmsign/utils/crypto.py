"""SM2 key material and signature primitives (GB/T 32918) built on gmssl."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from asn1crypto import algos
from gmssl import sm2

from gmsign.utils.hashing import sm3_digest

# GB/T 35276 default signer identity, "1234567812345678"
DEFAULT_SIGNER_ID = b"1234567812345678"
# ENTL holds the identity length in bits
MAX_SIGNER_ID_LENGTH = 0xFFFF // 8

_CURVE = sm2.default_ecc_table
_ORDER = int(_CURVE["n"], 16)
# hex digits per coordinate, which is also the byte length of x || y
_COORD_LEN = len(_CURVE["n"])
_POINT_LEN = 1 + _COORD_LEN


def check_signer_id(signer_id: bytes) -> bytes:
    """Return ``signer_id`` if its bit length fits the 16-bit ``ENTL`` field.

    Raises:
        ValueError: If the identity is empty, not bytes, or too long
    """
    if not isinstance(signer_id, (bytes, bytearray)):
        raise ValueError(f"SM2 signer ID must be bytes, not {type(signer_id).__name__}")
    if not signer_id:
        raise ValueError("SM2 signer ID must not be empty")
    if len(signer_id) > MAX_SIGNER_ID_LENGTH:
        raise ValueError(f"SM2 signer ID exceeds {MAX_SIGNER_ID_LENGTH} bytes")
    return bytes(signer_id)


def _new_engine(secret: int | None, public_key: bytes | None) -> sm2.CryptSM2:
    private_hex = "%064x" % secret if secret is not None else ""
    engine = sm2.CryptSM2(private_key=private_hex, public_key="")
    # Set directly: the constructor lstrip()s "04", which eats leading coordinate digits.
    engine.public_key = public_key[1:].hex() if public_key else ""
    return engine


def derive_public_key(secret: int) -> bytes:
    """Return the uncompressed public point ``04 || x || y`` for ``secret``."""
    if not 0 < secret < _ORDER - 1:
        raise ValueError("SM2 private key is outside the curve order")

    point = _new_engine(secret, None)._kg(secret, _CURVE["g"])
    if not point:
        raise ValueError("SM2 private key does not yield a public point")
    return b"\x04" + bytes.fromhex(point)


@dataclass(frozen=True, slots=True)
class SM2PrivateKey:
    """SM2 private scalar together with its public point."""

    secret: int
    public_key: bytes

    def __post_init__(self) -> None:
        if bytes(self.public_key) != derive_public_key(self.secret):
            raise ValueError("SM2 public key does not belong to the private key")

    @classmethod
    def from_secret(cls, secret: int) -> "SM2PrivateKey":
        return cls(secret=secret, public_key=derive_public_key(secret))

    @classmethod
    def from_hex(cls, value: str) -> "SM2PrivateKey":
        return cls.from_secret(int(value.strip(), 16))

    @classmethod
    def generate(cls) -> "SM2PrivateKey":
        return cls.from_secret(secrets.randbelow(_ORDER - 2) + 1)

    def __repr__(self) -> str:
        return f"SM2PrivateKey(public_key={self.public_key.hex()})"


def compute_z(public_key: bytes, signer_id: bytes = DEFAULT_SIGNER_ID) -> bytes:
    """Compute the signer hash ``Z = SM3(ENTL || ID || a || b || xG || yG || xA || yA)``."""
    if len(public_key) != _POINT_LEN or public_key[:1] != b"\x04":
        raise ValueError("SM2 public key must be an uncompressed point")

    signer_id = check_signer_id(signer_id)
    entl = (len(signer_id) * 8).to_bytes(2, "big")
    material = b"".join(
        [
            entl,
            signer_id,
            bytes.fromhex(_CURVE["a"]),
            bytes.fromhex(_CURVE["b"]),
            bytes.fromhex(_CURVE["g"]),
            public_key[1:],
        ]
    )
    return sm3_digest(material)


def _message_representative(
    message: bytes, public_key: bytes, signer_id: bytes
) -> bytes:
    return sm3_digest(compute_z(public_key, signer_id) + message)


def sm2_sign(
    key: SM2PrivateKey,
    message: bytes,
    *,
    signer_id: bytes = DEFAULT_SIGNER_ID,
) -> bytes:
    """Sign ``message`` with SM2-with-SM3 and return a DER ``SEQUENCE { r, s }``.

    A fresh random nonce is drawn for each call, so repeated signatures over
    the same message differ.

    Raises:
        ValueError: If the key is unusable or the engine rejects the nonce
    """
    e = _message_representative(message, key.public_key, signer_id)
    nonce = "%064x" % (secrets.randbelow(_ORDER - 1) + 1)

    raw = _new_engine(key.secret, key.public_key).sign(e, nonce)
    if not raw:
        raise ValueError("SM2 engine produced no signature")

    r = int(raw[:_COORD_LEN], 16)
    s = int(raw[_COORD_LEN:], 16)
    return algos.DSASignature({"r": r, "s": s}).dump()


def sm2_verify(
    public_key: bytes,
    message: bytes,
    signature: bytes,
    *,
    signer_id: bytes = DEFAULT_SIGNER_ID,
) -> bool:
    """Verify a DER SM2 signature over ``message`` against ``public_key``."""
    try:
        parsed = algos.DSASignature.load(signature)
        r = parsed["r"].native
        s = parsed["s"].native
    except (TypeError, ValueError):
        return False

    if not (0 < r < _ORDER and 0 < s < _ORDER):
        return False
    if len(public_key) != _POINT_LEN or public_key[:1] != b"\x04":
        return False

    try:
        e = _message_representative(message, public_key, signer_id)
    except ValueError:
        return False
    raw = "%064x%064x" % (r, s)
    return bool(_new_engine(None, public_key).verify(raw, e))
