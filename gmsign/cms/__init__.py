"""GB/T 35275 cryptographic message syntax for SM2 signatures."""

from gmsign.cms.asn1 import (
    AlgorithmIdentifier,
    ContentInfo,
    GMObjectIdentifier,
    SignedData,
    SignerInfo,
)
from gmsign.cms.builder import build_signed_data, load_signed_data, wrap_content_info
from gmsign.cms.verify import VerificationResult, verify_signed_data

__all__ = [
    "AlgorithmIdentifier",
    "ContentInfo",
    "GMObjectIdentifier",
    "SignedData",
    "SignerInfo",
    "VerificationResult",
    "build_signed_data",
    "load_signed_data",
    "verify_signed_data",
    "wrap_content_info",
]
