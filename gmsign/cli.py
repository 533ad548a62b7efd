"""gmsign CLI application with Typer."""

import json
import logging
from pathlib import Path
from typing import Annotated, get_args

import typer

from gmsign import __version__
from gmsign.bootstrap import SigningIdentityNotConfiguredError, bootstrap_application
from gmsign.cms import verify_signed_data
from gmsign.config import ContainerName, get_settings, set_settings
from gmsign.errors import GMSignError
from gmsign.utils.hashing import compute_sm3_file

app = typer.Typer(
    name="gmsign",
    help="SM2/SM3 signature containers for OFD document signing (GB/T 35275)",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"gmsign version {__version__}")
        raise typer.Exit()


def _fail(message: str, code: int = 1) -> None:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", help="Override config directory"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (debug, info, warning, error)"),
    ] = None,
) -> None:
    """gmsign - SM2 digital signatures for OFD documents."""
    # Update settings with CLI flags
    settings = get_settings()
    if config_dir:
        settings.config_dir = config_dir
    if log_level:
        settings.log_level = log_level.lower()
    set_settings(settings)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("sign")
def sign(
    input_path: Annotated[
        Path,
        typer.Argument(help="File to sign", exists=True, dir_okay=False, readable=True),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Signature output (defaults to INPUT.sig)"),
    ] = None,
    cert: Annotated[
        Path | None,
        typer.Option("--cert", help="SM2 signing certificate (PEM or DER)"),
    ] = None,
    key: Annotated[
        Path | None,
        typer.Option("--key", help="SM2 private key (PEM, DER or hex)"),
    ] = None,
    container: Annotated[
        str | None,
        typer.Option("--container", help="Signature container: gbt35275 or digital"),
    ] = None,
    property_info: Annotated[
        str | None,
        typer.Option("--property-info", help="Signature property metadata passed to the container"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output result as JSON"),
    ] = False,
) -> None:
    """Sign a file and write the signature value.

    Example:
        gmsign sign Doc_0/Signs/Sign_0/Signature.xml --cert user.crt --key user.key
    """
    settings = get_settings()
    if cert:
        settings.certificate_path = cert
    if key:
        settings.private_key_path = key
    if container:
        if container not in get_args(ContainerName):
            _fail(f"Unknown container {container!r}; choose gbt35275 or digital", code=2)
        settings.container = container

    try:
        application = bootstrap_application(settings)
    except (SigningIdentityNotConfiguredError, GMSignError) as exc:
        _fail(str(exc), code=2)

    output_path = output or input_path.with_name(input_path.name + ".sig")
    try:
        result = application.signing_service.sign_file(
            input_path, output_path, property_info=property_info
        )
    except GMSignError as exc:
        _fail(str(exc))

    if json_output:
        typer.echo(result.model_dump_json(indent=2))
        return

    typer.secho(f"✅ Signature written to {result.output_path}", fg=typer.colors.GREEN)
    typer.echo(f"Algorithm: {result.signature_algorithm} ({result.signature_kind.value})")
    typer.echo(f"{result.digest_algorithm}: {result.digest}")


@app.command("verify")
def verify(
    signed: Annotated[
        Path,
        typer.Argument(help="GB/T 35275 SignedData file", exists=True, dir_okay=False),
    ],
    input_path: Annotated[
        Path | None,
        typer.Option(
            "--input", "-i", help="Original file; its SM3 digest must match", exists=True
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output result as JSON"),
    ] = False,
) -> None:
    """Verify a SignedData value against its embedded certificate."""
    settings = get_settings()
    content = input_path.read_bytes() if input_path else None
    result = verify_signed_data(
        signed.read_bytes(), content, signer_id=settings.get_signer_id()
    )

    if json_output:
        payload = {
            "valid": result.valid,
            "reason": result.reason,
            "digest": result.digest.hex() if result.digest else None,
        }
        typer.echo(json.dumps(payload, indent=2))
    elif result.valid:
        typer.secho("✅ Signature is valid.", fg=typer.colors.GREEN)
        typer.echo(f"SM3: {result.digest.hex()}")
    else:
        typer.secho(f"❌ Signature verification failed: {result.reason}", fg=typer.colors.RED)

    if not result.valid:
        raise typer.Exit(code=1)


@app.command("digest")
def digest(
    input_path: Annotated[
        Path,
        typer.Argument(help="File to hash", exists=True, dir_okay=False, readable=True),
    ],
) -> None:
    """Print the SM3 digest of a file."""
    settings = get_settings()
    typer.echo(compute_sm3_file(input_path, chunk_size=settings.read_chunk_size))


@app.command("info")
def info() -> None:
    """Show the configured container and its algorithm identifiers."""
    settings = get_settings()
    try:
        application = bootstrap_application(settings)
    except (SigningIdentityNotConfiguredError, GMSignError) as exc:
        _fail(str(exc), code=2)

    container = application.signature_container
    algorithm = container.get_signature_algorithm_id()
    digest_port = container.get_digest_algorithm()

    typer.echo(f"Container: {settings.container}")
    typer.echo(f"Signature kind: {container.get_signature_kind().value}")
    typer.echo(f"Signature algorithm: {algorithm.native} ({algorithm.dotted})")
    typer.echo(f"Digest algorithm: {digest_port.name} ({digest_port.oid})")
    typer.echo(f"Certificate: {settings.get_certificate_path()}")


if __name__ == "__main__":
    app()
