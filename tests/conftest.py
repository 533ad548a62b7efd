"""Pytest configuration and fixtures."""

import shutil
import tempfile
from collections.abc import Callable, Generator
from datetime import datetime, timezone
from pathlib import Path

import pytest
from asn1crypto import keys, pem, x509

from gmsign.cms import oids
from gmsign.config import Settings
from gmsign.utils.crypto import SM2PrivateKey, sm2_sign

# GM/T 0003.5 sample signing key
SAMPLE_PRIVATE_KEY_HEX = "3945208F7B2144B13F36E38AC6D39F95889393692860B51A42FB81EF4DF7C5B8"


def issue_test_certificate(
    private_key: SM2PrivateKey,
    *,
    common_name: str = "gmsign test signer",
    serial_number: int = 0x2021_0809,
) -> x509.Certificate:
    """Build a self-signed SM2 certificate for ``private_key``."""
    name = x509.Name.build(
        {
            "country_name": "CN",
            "organization_name": "gmsign",
            "common_name": common_name,
        }
    )
    tbs = x509.TbsCertificate(
        {
            "version": "v3",
            "serial_number": serial_number,
            "signature": {"algorithm": oids.SM2_SIGN_WITH_SM3},
            "issuer": name,
            "validity": {
                "not_before": x509.Time(
                    name="utc_time", value=datetime(2024, 1, 1, tzinfo=timezone.utc)
                ),
                "not_after": x509.Time(
                    name="utc_time", value=datetime(2034, 1, 1, tzinfo=timezone.utc)
                ),
            },
            "subject": name,
            "subject_public_key_info": {
                "algorithm": {
                    "algorithm": "ec",
                    "parameters": keys.ECDomainParameters(name="named", value=oids.SM2_CURVE),
                },
                "public_key": private_key.public_key,
            },
        }
    )
    certificate = x509.Certificate(
        {
            "tbs_certificate": tbs,
            "signature_algorithm": {"algorithm": oids.SM2_SIGN_WITH_SM3},
            "signature_value": sm2_sign(private_key, tbs.dump()),
        }
    )
    return x509.Certificate.load(certificate.dump())


def sec1_private_key(private_key: SM2PrivateKey) -> keys.ECPrivateKey:
    """Encode ``private_key`` as a SEC1 ``ECPrivateKey``."""
    return keys.ECPrivateKey(
        {
            "version": "ecPrivkeyVer1",
            "private_key": private_key.secret,
            "parameters": keys.ECDomainParameters(name="named", value=oids.SM2_CURVE),
            "public_key": private_key.public_key,
        }
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(scope="session")
def sm2_key() -> SM2PrivateKey:
    """Fixed SM2 signing key."""
    return SM2PrivateKey.from_hex(SAMPLE_PRIVATE_KEY_HEX)


@pytest.fixture(scope="session")
def sm2_certificate(sm2_key: SM2PrivateKey) -> x509.Certificate:
    """Self-signed SM2 certificate for :func:`sm2_key`."""
    return issue_test_certificate(sm2_key)


@pytest.fixture
def issue_certificate() -> Callable[..., x509.Certificate]:
    """Expose the certificate builder to tests that need extra signers."""
    return issue_test_certificate


@pytest.fixture
def sm2_ec_private_key(sm2_key: SM2PrivateKey) -> keys.ECPrivateKey:
    """SEC1 encoding of :func:`sm2_key`."""
    return sec1_private_key(sm2_key)


@pytest.fixture
def identity_files(
    temp_dir: Path, sm2_key: SM2PrivateKey, sm2_certificate: x509.Certificate
) -> tuple[Path, Path]:
    """Write the test certificate and PKCS#8 key as PEM files."""
    cert_path = temp_dir / "signer.crt"
    key_path = temp_dir / "signer.key"

    cert_path.write_bytes(pem.armor("CERTIFICATE", sm2_certificate.dump()))
    pkcs8 = keys.PrivateKeyInfo.wrap(sec1_private_key(sm2_key), "ec")
    key_path.write_bytes(pem.armor("PRIVATE KEY", pkcs8.dump()))
    return cert_path, key_path


@pytest.fixture
def sample_document(temp_dir: Path) -> Path:
    """Create a sample OFD signature description file."""
    file_path = temp_dir / "Signature.xml"
    file_path.write_bytes(
        b'<?xml version="1.0" encoding="UTF-8"?>'
        b'<ofd:SignedInfo xmlns:ofd="http://www.ofdspec.org/2016">'
        b"<ofd:SignatureMethod>1.2.156.10197.1.501</ofd:SignatureMethod>"
        b"</ofd:SignedInfo>"
    )
    return file_path


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated gmsign settings scoped to tests."""

    import gmsign.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    config_dir = temp_dir / "appconfig"
    config_dir.mkdir(parents=True, exist_ok=True)

    settings = config_module.Settings(
        config_dir=config_dir,
    )
    config_module.set_settings(settings)
    try:
        yield settings
    finally:
        config_module.set_settings(original_settings)
