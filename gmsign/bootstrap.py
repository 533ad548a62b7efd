"""Application bootstrap wiring settings, signing identity, and containers."""

from __future__ import annotations

from dataclasses import dataclass

from gmsign.app import SigningService
from gmsign.app.adapters import (
    DigitalSignContainer,
    GBT35275SignatureContainer,
    GBT35275SignedDataAssembler,
)
from gmsign.app.ports import SignatureContainerPort
from gmsign.config import Settings, get_settings
from gmsign.utils.keys import load_certificate, load_sm2_private_key


class SigningIdentityNotConfiguredError(RuntimeError):
    """Raised when signing is attempted without a certificate or private key on disk."""

    pass


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI layer."""

    settings: Settings
    signature_container: SignatureContainerPort
    signing_service: SigningService


def create_signature_container(settings: Settings) -> SignatureContainerPort:
    """Load the configured identity and build the configured container.

    Raises:
        SigningIdentityNotConfiguredError: If the certificate or key file is absent
        InvalidArgument: If either file cannot be decoded
    """
    certificate_path = settings.get_certificate_path()
    private_key_path = settings.get_private_key_path()

    missing = [str(path) for path in (certificate_path, private_key_path) if not path.exists()]
    if missing:
        raise SigningIdentityNotConfiguredError(
            "Signing identity not found: "
            + ", ".join(missing)
            + ". Pass --cert/--key or set GMSIGN_CERTIFICATE_PATH and GMSIGN_PRIVATE_KEY_PATH."
        )

    certificate = load_certificate(certificate_path)
    private_key = load_sm2_private_key(private_key_path)

    if settings.container == "digital":
        return DigitalSignContainer(
            certificate,
            private_key,
            signer_id=settings.get_signer_id(),
            read_chunk_size=settings.read_chunk_size,
        )

    return GBT35275SignatureContainer(
        certificate,
        private_key,
        signer_id=settings.get_signer_id(),
        assembler=GBT35275SignedDataAssembler(wrap_content_info=settings.wrap_content_info),
        read_chunk_size=settings.read_chunk_size,
    )


def bootstrap_application(settings: Settings | None = None) -> ApplicationContainer:
    """Instantiate adapters and services for CLI consumption."""

    active_settings = settings or get_settings()

    signature_container = create_signature_container(active_settings)
    signing_service = SigningService(signature_container)

    return ApplicationContainer(
        settings=active_settings,
        signature_container=signature_container,
        signing_service=signing_service,
    )
