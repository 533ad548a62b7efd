"""SM2-with-SM3 signer adapter."""

from __future__ import annotations

from gmsign.app.ports import SignerPort
from gmsign.cms import oids
from gmsign.errors import InvalidArgument, SignatureComputationFailure
from gmsign.utils.crypto import (
    DEFAULT_SIGNER_ID,
    SM2PrivateKey,
    check_signer_id,
    sm2_sign,
    sm2_verify,
)


class SM2SignerAdapter(SignerPort):
    """Signs with one SM2 private key using the SM3 signer hash (``Z``).

    Signatures are DER ``SEQUENCE { r, s }`` and randomized per call.
    """

    algorithm_oid = oids.SM2_SIGN_WITH_SM3

    def __init__(self, private_key: SM2PrivateKey, *, signer_id: bytes = DEFAULT_SIGNER_ID) -> None:
        self._private_key = private_key
        try:
            self._signer_id = check_signer_id(signer_id)
        except ValueError as exc:
            raise InvalidArgument(f"Invalid SM2 signer ID: {exc}") from exc

    @property
    def public_key(self) -> bytes:
        return self._private_key.public_key

    def sign(self, data: bytes) -> bytes:
        try:
            return sm2_sign(self._private_key, data, signer_id=self._signer_id)
        except (TypeError, ValueError) as exc:
            raise SignatureComputationFailure(f"SM2 signing failed: {exc}") from exc

    def verify(self, data: bytes, signature: bytes) -> bool:
        return sm2_verify(
            self._private_key.public_key, data, signature, signer_id=self._signer_id
        )
