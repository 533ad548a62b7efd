"""Verification of GB/T 35275 ``SignedData`` produced by the signature containers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from asn1crypto import core, x509

from gmsign.cms.asn1 import SignedData, SignerInfo
from gmsign.cms.builder import load_signed_data
from gmsign.utils.crypto import DEFAULT_SIGNER_ID, sm2_verify
from gmsign.utils.hashing import SM3_DIGEST_SIZE, sm3_digest

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VerificationResult:
    """Outcome of checking a ``SignedData`` value."""

    valid: bool
    reason: str | None = None
    digest: bytes | None = None
    certificate: x509.Certificate | None = None

    def __bool__(self) -> bool:
        return self.valid


def _find_signer_certificate(signed_data: SignedData, signer_info: SignerInfo) -> x509.Certificate:
    certificates = signed_data["certificates"]
    if isinstance(certificates, core.Void) or len(certificates) == 0:
        raise ValueError("SignedData carries no certificates")

    sid = signer_info["issuer_and_serial_number"]
    issuer = sid["issuer"].dump()
    serial = sid["serial_number"].native
    for certificate in certificates:
        if certificate.serial_number == serial and certificate.issuer.dump() == issuer:
            return certificate
    raise ValueError("No embedded certificate matches the signer's issuer and serial number")


def verify_signed_data(
    encoded: bytes,
    content: bytes | None = None,
    *,
    signer_id: bytes = DEFAULT_SIGNER_ID,
) -> VerificationResult:
    """Check an encoded ``SignedData`` against its embedded certificate.

    Args:
        encoded: DER ``SignedData``, bare or wrapped in ``ContentInfo``
        content: Original bytes; when given, the embedded digest must equal
            their SM3 digest
        signer_id: SM2 signer identity used when the signature was made

    Returns:
        VerificationResult; never raises for malformed input
    """
    try:
        signed_data = load_signed_data(encoded)
        digest = signed_data["content_info"]["content"].native
        signer_info = signed_data["signer_infos"][0]
        digest_algorithm = signer_info["digest_algorithm"]["algorithm"].native
        signature = signer_info["encrypted_digest"].native
        certificate = _find_signer_certificate(signed_data, signer_info)
        public_key = certificate.public_key["public_key"].native
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        logger.debug("Rejecting malformed SignedData: %s", exc)
        return VerificationResult(False, reason=f"Malformed SignedData: {exc}")

    if digest_algorithm != "sm3":
        return VerificationResult(
            False, reason=f"Unsupported digest algorithm {digest_algorithm}", digest=digest
        )
    if not isinstance(digest, bytes) or len(digest) != SM3_DIGEST_SIZE:
        return VerificationResult(False, reason="Embedded content is not an SM3 digest")

    if content is not None and sm3_digest(content) != digest:
        return VerificationResult(
            False,
            reason="Embedded digest does not match the supplied content",
            digest=digest,
            certificate=certificate,
        )

    if not sm2_verify(public_key, digest, signature, signer_id=signer_id):
        return VerificationResult(
            False,
            reason="SM2 signature does not verify against the embedded certificate",
            digest=digest,
            certificate=certificate,
        )

    return VerificationResult(True, digest=digest, certificate=certificate)
