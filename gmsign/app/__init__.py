"""Application layer for gmsign.

Signature containers live behind ports; services orchestrate them and keep
file I/O out of the cryptographic code.
"""

__all__ = [
    "SigningResult",
    "SigningService",
]

from gmsign.app.signing_service import SigningResult, SigningService
