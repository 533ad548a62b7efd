"""Signing service that applies a signature container to files on disk."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from gmsign.app.ports import SignatureContainerPort, SignatureKind
from gmsign.errors import IOFailure

logger = logging.getLogger(__name__)


class SigningResult(BaseModel):
    """Metadata describing a signature written to disk."""

    input_path: Path
    output_path: Path
    signature_kind: SignatureKind
    digest_algorithm: str = Field(..., description="Name of the hash used by the container")
    signature_algorithm: str = Field(..., description="Dotted OID of the signature method")
    digest: str = Field(..., description="Hex digest of the input under digest_algorithm")
    size: int = Field(..., ge=1, description="Length of the encoded signature value")


class SigningService:
    """Signs files and byte strings with one configured container.

    The container owns the cryptography; this service owns file handling.
    """

    def __init__(self, container: SignatureContainerPort):
        """Initialize signing service.

        Args:
            container: Signature container used for every request
        """
        self.container = container

    def sign_bytes(self, data: bytes, *, property_info: str | None = None) -> bytes:
        """Sign an in-memory byte string."""
        return self.container.sign(io.BytesIO(data), property_info)

    def sign_file(
        self,
        input_path: Path,
        output_path: Path,
        *,
        property_info: str | None = None,
    ) -> SigningResult:
        """Sign ``input_path`` and write the signature value to ``output_path``.

        Raises:
            IOFailure: If the input cannot be read or the output written
            SignatureComputationFailure: If the container fails to sign
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        try:
            data = input_path.read_bytes()
        except OSError as exc:
            raise IOFailure(f"Cannot read {input_path}: {exc}") from exc

        value = self.sign_bytes(data, property_info=property_info)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(value)
        except OSError as exc:
            raise IOFailure(f"Cannot write signature to {output_path}: {exc}") from exc

        digest_port = self.container.get_digest_algorithm()
        result = SigningResult(
            input_path=input_path,
            output_path=output_path,
            signature_kind=self.container.get_signature_kind(),
            digest_algorithm=digest_port.name,
            signature_algorithm=self.container.get_signature_algorithm_id().dotted,
            digest=digest_port.digest(data).hex(),
            size=len(value),
        )
        logger.info("Signed %s -> %s (%d bytes)", input_path, output_path, len(value))
        return result
