"""Plain SM2 digital-signature container."""

from __future__ import annotations

import logging
from typing import Any, BinaryIO

from asn1crypto import x509

from gmsign.app.adapters.identity import SigningIdentity
from gmsign.app.adapters.sm2_signer import SM2SignerAdapter
from gmsign.app.adapters.sm3_digest import SM3DigestAdapter
from gmsign.app.ports import DigestPort, SignatureContainerPort, SignatureKind
from gmsign.cms.asn1 import GMObjectIdentifier
from gmsign.errors import SignatureComputationFailure
from gmsign.utils.crypto import DEFAULT_SIGNER_ID
from gmsign.utils.streams import DEFAULT_CHUNK_SIZE, read_stream

logger = logging.getLogger(__name__)


class DigitalSignContainer(SignatureContainerPort):
    """Signs the data itself with SM2-with-SM3 and returns the bare signature.

    The output is a DER ``SEQUENCE { r, s }`` without a signed-message
    wrapper; verifiers locate the certificate through the OFD signature file.
    """

    def __init__(
        self,
        certificate: Any,
        private_key: Any,
        *,
        signer_id: bytes = DEFAULT_SIGNER_ID,
        read_chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._identity = SigningIdentity.create(certificate, private_key)
        self._digest = SM3DigestAdapter()
        self._signer = SM2SignerAdapter(self._identity.private_key, signer_id=signer_id)
        self._read_chunk_size = read_chunk_size

    @property
    def certificate(self) -> x509.Certificate:
        return self._identity.certificate

    def get_digest_algorithm(self) -> DigestPort:
        return self._digest

    def get_signature_algorithm_id(self) -> GMObjectIdentifier:
        return GMObjectIdentifier("sm2_sign_with_sm3")

    def sign(self, stream: BinaryIO, property_info: str | None = None) -> bytes:
        data = read_stream(stream, self._read_chunk_size)
        try:
            signature = self._signer.sign(data)
        except SignatureComputationFailure:
            logger.warning("SM2 signing failed for %d bytes of input", len(data), exc_info=True)
            raise

        logger.debug("Signed %d bytes with SM2", len(data))
        return signature

    def get_seal(self) -> bytes | None:
        return None

    def get_signature_kind(self) -> SignatureKind:
        return SignatureKind.SIGN
