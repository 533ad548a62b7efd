"""Signature container port shared by every OFD signing variant."""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Protocol

from gmsign.app.ports.digest import DigestPort
from gmsign.cms.asn1 import GMObjectIdentifier


class SignatureKind(str, Enum):
    """Kind of signature node the OFD framework writes (``SigType``)."""

    SEAL = "Seal"
    SIGN = "Sign"


class SignatureContainerPort(Protocol):
    """Port interface for producing signature values inside an OFD document.

    Variants differ by governing standard: pure digital signatures return no
    seal, electronic-seal variants return the seal image structure.

    Side effects: Reads the supplied stream; never closes it.
    """

    def get_digest_algorithm(self) -> DigestPort:
        """Return the hash the framework uses to digest protected files."""
        ...

    def get_signature_algorithm_id(self) -> GMObjectIdentifier:
        """Return the identifier recorded as the signature method."""
        ...

    def sign(self, stream: BinaryIO, property_info: str | None = None) -> bytes:
        """Sign everything remaining in ``stream``.

        Args:
            stream: Data to sign, owned and closed by the caller
            property_info: Signature property metadata; variants that do not
                need it ignore it

        Returns:
            Encoded signature value

        Raises:
            InvalidArgument: If ``stream`` is missing
            IOFailure: If ``stream`` cannot be read completely
            SignatureComputationFailure: If signing fails
        """
        ...

    def get_seal(self) -> bytes | None:
        """Return the encoded seal, or None when the variant has no seal."""
        ...

    def get_signature_kind(self) -> SignatureKind:
        """Return the signature node kind for the produced value."""
        ...
