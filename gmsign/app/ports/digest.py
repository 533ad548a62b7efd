"""Digest port interface for one-way hash providers."""

from typing import Protocol


class DigestPort(Protocol):
    """Port interface for a fixed one-way hash algorithm.

    Stateless: every call hashes the complete message it is given.

    Side effects: None (pure computation).
    """

    name: str
    oid: str
    digest_size: int

    def digest(self, data: bytes) -> bytes:
        """Hash data.

        Args:
            data: Complete message

        Returns:
            Digest of ``digest_size`` bytes
        """
        ...
