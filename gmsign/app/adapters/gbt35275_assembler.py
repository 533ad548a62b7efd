"""GB/T 35275 ``SignedData`` assembler adapter."""

from __future__ import annotations

from asn1crypto import x509

from gmsign.app.ports import SignedDataAssemblerPort
from gmsign.cms.builder import build_signed_data, wrap_content_info


class GBT35275SignedDataAssembler(SignedDataAssemblerPort):
    """Encodes ``{digest, signature, certificate}`` as DER ``SignedData``.

    OFD signature values are the bare ``SignedData``; ``wrap_content_info``
    produces the ``ContentInfo`` form some verifiers expect instead.
    """

    def __init__(self, *, wrap_content_info: bool = False) -> None:
        self.wrap_content_info = wrap_content_info

    def assemble(self, digest: bytes, signature: bytes, certificate: x509.Certificate) -> bytes:
        signed_data = build_signed_data(digest, signature, certificate)
        if self.wrap_content_info:
            return wrap_content_info(signed_data).dump()
        return signed_data.dump()
