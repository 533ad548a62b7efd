"""Port interfaces for the gmsign application layer.

These protocol interfaces define contracts for adapters.
Signature containers depend on these ports, never on concrete providers.
"""

__all__ = [
    "DigestPort",
    "SignatureContainerPort",
    "SignatureKind",
    "SignedDataAssemblerPort",
    "SignerPort",
]

from gmsign.app.ports.digest import DigestPort
from gmsign.app.ports.signature_container import SignatureContainerPort, SignatureKind
from gmsign.app.ports.signed_data import SignedDataAssemblerPort
from gmsign.app.ports.signer import SignerPort
