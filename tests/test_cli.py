"""CLI integration smoke tests."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from gmsign import __version__
from gmsign.cli import app
from gmsign.utils.hashing import compute_sm3

runner = CliRunner()


def _sign(document: Path, identity_files: tuple[Path, Path], *extra: str):
    cert_path, key_path = identity_files
    return runner.invoke(
        app,
        ["sign", str(document), "--cert", str(cert_path), "--key", str(key_path), *extra],
    )


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_sign_then_verify(
    sample_document: Path, identity_files: tuple[Path, Path], override_settings
) -> None:
    """`gmsign sign` writes SignedData that `gmsign verify` accepts."""
    result = _sign(sample_document, identity_files)

    assert result.exit_code == 0, result.output
    assert "Signature written to" in result.stdout
    assert compute_sm3(sample_document.read_bytes()) in result.stdout

    signature_path = sample_document.with_name(sample_document.name + ".sig")
    assert signature_path.exists()

    verified = runner.invoke(
        app, ["verify", str(signature_path), "--input", str(sample_document)]
    )
    assert verified.exit_code == 0, verified.output
    assert "Signature is valid" in verified.stdout


def test_sign_json_output(
    sample_document: Path, identity_files: tuple[Path, Path], temp_dir: Path, override_settings
) -> None:
    output_path = temp_dir / "SignedValue.dat"

    result = _sign(sample_document, identity_files, "--output", str(output_path), "--json")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["signature_algorithm"] == "1.2.156.10197.1.501"
    assert payload["signature_kind"] == "Sign"
    assert payload["digest_algorithm"] == "SM3"
    assert Path(payload["output_path"]) == output_path


def test_verify_detects_tampering(
    sample_document: Path, identity_files: tuple[Path, Path], temp_dir: Path, override_settings
) -> None:
    output_path = temp_dir / "SignedValue.dat"
    assert _sign(sample_document, identity_files, "-o", str(output_path)).exit_code == 0

    sample_document.write_bytes(sample_document.read_bytes() + b"<!-- edited -->")
    result = runner.invoke(app, ["verify", str(output_path), "-i", str(sample_document), "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["valid"] is False
    assert "does not match" in payload["reason"]


def test_sign_without_identity_exits_2(sample_document: Path, override_settings) -> None:
    result = runner.invoke(app, ["sign", str(sample_document)])

    assert result.exit_code == 2
    assert not sample_document.with_name(sample_document.name + ".sig").exists()


def test_sign_rejects_unknown_container(
    sample_document: Path, identity_files: tuple[Path, Path], override_settings
) -> None:
    result = _sign(sample_document, identity_files, "--container", "pkcs7")

    assert result.exit_code == 2


def test_digest_command(sample_document: Path, override_settings) -> None:
    result = runner.invoke(app, ["digest", str(sample_document)])

    assert result.exit_code == 0
    assert result.stdout.strip() == compute_sm3(sample_document.read_bytes())


def test_info_command(identity_files: tuple[Path, Path], override_settings) -> None:
    cert_path, key_path = identity_files
    override_settings.certificate_path = cert_path
    override_settings.private_key_path = key_path

    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0, result.output
    assert "sm2_sign_with_sm3 (1.2.156.10197.1.501)" in result.stdout
    assert "SM3 (1.2.156.10197.1.401)" in result.stdout
    assert "Signature kind: Sign" in result.stdout
