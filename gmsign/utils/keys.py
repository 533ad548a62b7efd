"""Loading SM2 signing certificates and private keys from disk."""

from __future__ import annotations

import re
from pathlib import Path

from asn1crypto import keys, pem, x509
from asn1crypto.parser import parse

from gmsign.errors import InvalidArgument
from gmsign.utils.crypto import SM2PrivateKey

_HEX_KEY = re.compile(rb"^\s*(?:0x)?([0-9a-fA-F]{1,64})\s*$")
_OCTET_STRING_TAG = 4


def _read(path: Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise InvalidArgument(f"Cannot read {path}: {exc}") from exc


def load_certificate(path: Path) -> x509.Certificate:
    """Load a PEM or DER X.509 certificate.

    Raises:
        InvalidArgument: If the file is missing or not a certificate
    """
    data = _read(path)
    if pem.detect(data):
        type_name, _, data = pem.unarmor(data)
        if type_name != "CERTIFICATE":
            raise InvalidArgument(f"{path} holds a {type_name} block, not a CERTIFICATE")

    try:
        certificate = x509.Certificate.load(data)
        # asn1crypto parses lazily; touch the fields SignedData references
        _ = (certificate.serial_number, certificate.issuer.dump())
    except ValueError as exc:
        raise InvalidArgument(f"{path} is not a valid X.509 certificate: {exc}") from exc
    return certificate


def parse_sm2_private_key(data: bytes) -> SM2PrivateKey:
    """Parse an SM2 private key.

    Accepts PKCS#8 ``PRIVATE KEY`` and SEC1 ``EC PRIVATE KEY`` in PEM or
    DER form, or the bare private scalar in hexadecimal.

    Raises:
        InvalidArgument: If the key cannot be decoded
    """
    match = _HEX_KEY.match(data)
    if match:
        try:
            return SM2PrivateKey.from_hex(match.group(1).decode("ascii"))
        except ValueError as exc:
            raise InvalidArgument(f"Invalid SM2 private key: {exc}") from exc

    type_name = None
    if pem.detect(data):
        type_name, _, data = pem.unarmor(data)
        if type_name == "ENCRYPTED PRIVATE KEY":
            raise InvalidArgument("Encrypted private keys are not supported; decrypt the key first")
        if type_name not in ("PRIVATE KEY", "EC PRIVATE KEY"):
            raise InvalidArgument(f"Unsupported PEM block {type_name}")

    try:
        if type_name is None:
            # SEC1 places an OCTET STRING second, PKCS#8 an AlgorithmIdentifier
            _, _, _, _, contents, _ = parse(data, strict=True)
            _, _, _, header, body, trailer = parse(contents)
            offset = len(header) + len(body) + len(trailer)
            _, _, second_tag, _, _, _ = parse(contents[offset:])
            type_name = "EC PRIVATE KEY" if second_tag == _OCTET_STRING_TAG else "PRIVATE KEY"

        if type_name == "PRIVATE KEY":
            info = keys.PrivateKeyInfo.load(data)
            algorithm = info["private_key_algorithm"]["algorithm"].native
            if algorithm != "ec":
                raise InvalidArgument(f"Expected an SM2 (EC) private key, found {algorithm}")
            ec_key = info["private_key"].parsed
        else:
            ec_key = keys.ECPrivateKey.load(data)

        return SM2PrivateKey.from_secret(ec_key["private_key"].native)
    except InvalidArgument:
        raise
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"Invalid SM2 private key: {exc}") from exc


def load_sm2_private_key(path: Path) -> SM2PrivateKey:
    """Load an SM2 private key file; see :func:`parse_sm2_private_key`."""
    return parse_sm2_private_key(_read(path))
