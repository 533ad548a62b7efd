"""Signing identity shared by the signature containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from asn1crypto import x509
from cryptography import x509 as crypto_x509
from cryptography.hazmat.primitives.serialization import Encoding

from gmsign.errors import InvalidArgument
from gmsign.utils.crypto import SM2PrivateKey


def coerce_certificate(certificate: Any) -> x509.Certificate:
    """Normalise a caller-supplied certificate to an asn1crypto certificate.

    Accepts asn1crypto or cryptography certificates and DER bytes. Contents
    are not validated.

    Raises:
        InvalidArgument: If the certificate is missing, empty or of an
            unsupported type
    """
    if certificate is None:
        raise InvalidArgument("Signing certificate (certificate) must not be None")

    if isinstance(certificate, x509.Certificate):
        return certificate
    if isinstance(certificate, crypto_x509.Certificate):
        return x509.Certificate.load(certificate.public_bytes(Encoding.DER))
    if isinstance(certificate, (bytes, bytearray)):
        if not certificate:
            raise InvalidArgument("Signing certificate (certificate) must not be empty")
        try:
            loaded = x509.Certificate.load(bytes(certificate))
            _ = (loaded.serial_number, loaded.issuer.dump())
        except ValueError as exc:
            raise InvalidArgument(f"Signing certificate is not DER X.509: {exc}") from exc
        return loaded

    raise InvalidArgument(
        f"Unsupported certificate type {type(certificate).__name__}; "
        "pass an asn1crypto or cryptography certificate or DER bytes"
    )


@dataclass(frozen=True, slots=True)
class SigningIdentity:
    """Private key and the certificate of its public key."""

    certificate: x509.Certificate
    private_key: SM2PrivateKey

    @classmethod
    def create(cls, certificate: Any, private_key: Any) -> "SigningIdentity":
        """Check presence of both halves and build the identity.

        Raises:
            InvalidArgument: If either part is missing or unusable
        """
        if certificate is None:
            raise InvalidArgument("Signing certificate (certificate) must not be None")
        if private_key is None:
            raise InvalidArgument("Signing private key (private_key) must not be None")
        if not isinstance(private_key, SM2PrivateKey):
            raise InvalidArgument(
                f"Unsupported private key type {type(private_key).__name__}; expected SM2PrivateKey"
            )
        return cls(certificate=coerce_certificate(certificate), private_key=private_key)
