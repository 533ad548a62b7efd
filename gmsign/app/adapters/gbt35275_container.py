"""Digital-signature container producing GB/T 35275 ``SignedData`` values.

GM/T 0099-2020 7.2.2 b): when the signature type is a digital signature and
the algorithm is SM2, the signature value follows GB/T 35275. The protected
data is hashed with SM3, the digest is signed with SM2, and the digest,
signature and signer certificate are packaged as ``SignedData``.
"""

from __future__ import annotations

import logging
from typing import Any, BinaryIO

from asn1crypto import x509

from gmsign.app.adapters.gbt35275_assembler import GBT35275SignedDataAssembler
from gmsign.app.adapters.identity import SigningIdentity
from gmsign.app.adapters.sm2_signer import SM2SignerAdapter
from gmsign.app.adapters.sm3_digest import SM3DigestAdapter
from gmsign.app.ports import (
    DigestPort,
    SignatureContainerPort,
    SignatureKind,
    SignedDataAssemblerPort,
)
from gmsign.cms.asn1 import GMObjectIdentifier
from gmsign.errors import SignatureComputationFailure
from gmsign.utils.crypto import DEFAULT_SIGNER_ID
from gmsign.utils.streams import DEFAULT_CHUNK_SIZE, read_stream

logger = logging.getLogger(__name__)


class GBT35275SignatureContainer(SignatureContainerPort):
    """SM2/SM3 digital signature packaged per GB/T 35275.

    Holds no mutable state after construction, so one instance may sign
    from several threads at once.
    """

    def __init__(
        self,
        certificate: Any,
        private_key: Any,
        *,
        signer_id: bytes = DEFAULT_SIGNER_ID,
        assembler: SignedDataAssemblerPort | None = None,
        read_chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Create the container.

        Args:
            certificate: SM2 signing certificate (GB/T 20518), as an asn1crypto
                or cryptography certificate or DER bytes
            private_key: SM2 private key matching ``certificate``
            signer_id: SM2 signer identity hashed into ``Z``
            assembler: Signed-message encoder (GB/T 35275 by default)
            read_chunk_size: Chunk size used when draining input streams

        Raises:
            InvalidArgument: If the certificate or private key is missing, or
                ``signer_id`` does not fit the SM2 ``ENTL`` field
        """
        self._identity = SigningIdentity.create(certificate, private_key)
        self._digest = SM3DigestAdapter()
        self._signer = SM2SignerAdapter(self._identity.private_key, signer_id=signer_id)
        self._assembler = assembler or GBT35275SignedDataAssembler()
        self._read_chunk_size = read_chunk_size

    @property
    def certificate(self) -> x509.Certificate:
        return self._identity.certificate

    def get_digest_algorithm(self) -> DigestPort:
        return self._digest

    def get_signature_algorithm_id(self) -> GMObjectIdentifier:
        return GMObjectIdentifier("sm2_sign_with_sm3")

    def sign(self, stream: BinaryIO, property_info: str | None = None) -> bytes:
        """Sign the remaining contents of ``stream``.

        ``property_info`` is ignored by this variant.

        Returns:
            DER-encoded ``SignedData``
        """
        digest = self._digest.digest(read_stream(stream, self._read_chunk_size))

        try:
            signature = self._signer.sign(digest)
        except SignatureComputationFailure:
            logger.warning("SM2 signing failed for digest %s", digest.hex(), exc_info=True)
            raise

        try:
            encoded = self._assembler.assemble(digest, signature, self._identity.certificate)
        except (TypeError, ValueError) as exc:
            logger.warning("SignedData assembly failed: %s", exc)
            raise SignatureComputationFailure(f"Failed to assemble SignedData: {exc}") from exc

        logger.debug("Signed SM3 digest %s into %d-byte SignedData", digest.hex(), len(encoded))
        return encoded

    def get_seal(self) -> bytes | None:
        """Digital signatures carry no seal."""
        return None

    def get_signature_kind(self) -> SignatureKind:
        return SignatureKind.SIGN
