"""Assembly of GB/T 35275 ``SignedData`` from a digest, signature and certificate."""

from __future__ import annotations

from asn1crypto import cms, x509
from asn1crypto.parser import parse

from gmsign.cms.asn1 import ContentInfo, SignedData, SignerInfo

_OBJECT_IDENTIFIER_TAG = 6


def build_signed_data(
    plaintext: bytes,
    signature: bytes,
    certificate: x509.Certificate,
) -> SignedData:
    """Build a single-signer ``SignedData``.

    The signed content is carried inline as a ``data`` ``ContentInfo``;
    for OFD signatures that content is the SM3 digest of the protected
    files rather than the files themselves.

    Args:
        plaintext: The content that was signed
        signature: DER-encoded SM2 signature value over ``plaintext``
        certificate: Signer certificate, embedded and referenced by
            issuer and serial number

    Returns:
        SignedData structure ready for ``dump()``
    """
    sm3 = {"algorithm": "sm3"}

    signer_info = SignerInfo(
        {
            "version": 1,
            "issuer_and_serial_number": cms.IssuerAndSerialNumber(
                {
                    "issuer": certificate.issuer,
                    "serial_number": certificate.serial_number,
                }
            ),
            "digest_algorithm": sm3,
            "digest_encryption_algorithm": {"algorithm": "sm2_sign"},
            "encrypted_digest": signature,
        }
    )

    return SignedData(
        {
            "version": 1,
            "digest_algorithms": [sm3],
            "content_info": {"content_type": "data", "content": plaintext},
            "certificates": [certificate],
            "signer_infos": [signer_info],
        }
    )


def wrap_content_info(signed_data: SignedData) -> ContentInfo:
    """Wrap ``signed_data`` in a ``signedData`` ``ContentInfo``."""
    return ContentInfo({"content_type": "signed_data", "content": signed_data})


def load_signed_data(encoded: bytes) -> SignedData:
    """Parse DER ``SignedData``, accepting the bare or ``ContentInfo``-wrapped form.

    Raises:
        ValueError: If the encoding is not a GB/T 35275 ``SignedData``
    """
    _, _, _, _, contents, _ = parse(encoded, strict=True)
    _, _, first_tag, _, _, _ = parse(contents)

    if first_tag != _OBJECT_IDENTIFIER_TAG:
        return SignedData.load(encoded)

    content_info = ContentInfo.load(encoded)
    content_type = content_info["content_type"].native
    if content_type != "signed_data":
        raise ValueError(f"ContentInfo carries {content_type}, expected signed_data")
    return content_info["content"].untag()
