"""Signer port interface for cryptographic signing."""

from typing import Protocol


class SignerPort(Protocol):
    """Port interface for a private-key signature algorithm.

    Implementations are bound to one key and one named algorithm.

    Side effects: None (pure computation).
    """

    algorithm_oid: str

    def sign(self, data: bytes) -> bytes:
        """Sign data.

        Args:
            data: Data to sign

        Returns:
            Signature bytes

        Raises:
            SignatureComputationFailure: If the key cannot produce a signature
        """
        ...

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Verify signature.

        Args:
            data: Original data
            signature: Signature to verify

        Returns:
            True if signature is valid
        """
        ...
