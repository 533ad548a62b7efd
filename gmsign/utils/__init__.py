"""Utility modules for common operations."""

from gmsign.utils.crypto import DEFAULT_SIGNER_ID, SM2PrivateKey, sm2_sign, sm2_verify
from gmsign.utils.hashing import compute_sm3, compute_sm3_file, sm3_digest
from gmsign.utils.keys import load_certificate, load_sm2_private_key, parse_sm2_private_key
from gmsign.utils.streams import read_stream

__all__ = [
    "DEFAULT_SIGNER_ID",
    "SM2PrivateKey",
    "compute_sm3",
    "compute_sm3_file",
    "load_certificate",
    "load_sm2_private_key",
    "parse_sm2_private_key",
    "read_stream",
    "sm2_sign",
    "sm2_verify",
    "sm3_digest",
]
