"""SM3 digest adapter backed by gmssl."""

from __future__ import annotations

from gmsign.app.ports import DigestPort
from gmsign.cms import oids
from gmsign.utils.hashing import SM3_DIGEST_SIZE, sm3_digest


class SM3DigestAdapter(DigestPort):
    """GB/T 32905 SM3, 256-bit digest."""

    name = "SM3"
    oid = oids.SM3
    digest_size = SM3_DIGEST_SIZE

    def digest(self, data: bytes) -> bytes:
        return sm3_digest(data)

    def __repr__(self) -> str:
        return f"SM3DigestAdapter(oid={self.oid})"
