"""Signed-message assembly port interface."""

from typing import Protocol

from asn1crypto import x509


class SignedDataAssemblerPort(Protocol):
    """Port interface for packaging a signature into a signed-message encoding.

    Side effects: None (pure computation).
    """

    def assemble(self, digest: bytes, signature: bytes, certificate: x509.Certificate) -> bytes:
        """Package the signed digest, its signature and the signer certificate.

        Args:
            digest: Content that was signed
            signature: Signature value over ``digest``
            certificate: Certificate of the signing key

        Returns:
            DER encoding of the signed message
        """
        ...
