"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .digital_sign_container import DigitalSignContainer
from .gbt35275_assembler import GBT35275SignedDataAssembler
from .gbt35275_container import GBT35275SignatureContainer
from .identity import SigningIdentity, coerce_certificate
from .sm2_signer import SM2SignerAdapter
from .sm3_digest import SM3DigestAdapter

__all__ = [
    "DigitalSignContainer",
    "GBT35275SignatureContainer",
    "GBT35275SignedDataAssembler",
    "SM2SignerAdapter",
    "SM3DigestAdapter",
    "SigningIdentity",
    "coerce_certificate",
]
