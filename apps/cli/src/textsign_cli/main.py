from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from textsign import facade, registry
from textsign.codec import write_key_bytes
from textsign.config import default_scheme, log_level, parse_log_level
from textsign.errors import TextSignError
from textsign.interfaces import Scheme
from textsign.loader import load_adapters

app = typer.Typer(add_completion=False, help="Sign and verify text or files with blake3 or ed25519")

log = logging.getLogger(__name__)

EXIT_ERROR = 1


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=EXIT_ERROR)


def _scheme(value: Optional[Scheme]) -> Scheme:
    if value is not None:
        return value
    try:
        return default_scheme()
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--format")


def _existing_file(value: str) -> str:
    if value == "-" or Path(value).is_file():
        return value
    raise typer.BadParameter(f"file does not exist: {value}")


def _key_file(value: str) -> str:
    if Path(value).is_file():
        return value
    raise typer.BadParameter(f"key file does not exist: {value}")


def _existing_dir(value: Path) -> Path:
    if value.is_dir():
        return value
    raise typer.BadParameter(f"path does not exist or is not a directory: {value}")


@app.callback()
def main(
    level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR); overrides TEXTSIGN_LOG_LEVEL.",
    ),
) -> None:
    """Text signing toolbox."""
    try:
        resolved = parse_log_level(level, "--log-level") if level is not None else log_level()
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def sign(
    input_path: str = typer.Option("-", "--input", "-i", callback=_existing_file, help="File to sign, '-' reads stdin."),
    key_path: str = typer.Option(..., "--key", "-k", callback=_key_file, help="Key file path."),
    scheme: Optional[Scheme] = typer.Option(None, "--format", "-f", help="Signing scheme (default: TEXTSIGN_SCHEME or blake3)."),
) -> None:
    """Sign a file or stdin and print the signature."""
    try:
        signature = facade.sign(input_path, key_path, _scheme(scheme))
    except TextSignError as exc:
        _fail(exc)
    typer.echo(signature)


@app.command()
def verify(
    input_path: str = typer.Option("-", "--input", "-i", callback=_existing_file, help="File to verify, '-' reads stdin."),
    key_path: str = typer.Option(..., "--key", "-k", callback=_key_file, help="Key file path."),
    sig: str = typer.Option(..., "--sig", "-s", help="Signature text (URL-safe base64, no padding)."),
    scheme: Optional[Scheme] = typer.Option(None, "--format", "-f", help="Signing scheme (default: TEXTSIGN_SCHEME or blake3)."),
) -> None:
    """Verify a signature over a file or stdin; prints true or false."""
    try:
        ok = facade.verify(input_path, key_path, sig, _scheme(scheme))
    except TextSignError as exc:
        _fail(exc)
    typer.echo("true" if ok else "false")


@app.command()
def generate(
    output: Path = typer.Option(..., "--output", "-o", callback=_existing_dir, help="Directory to write key files into."),
    scheme: Optional[Scheme] = typer.Option(None, "--format", "-f", help="Signing scheme (default: TEXTSIGN_SCHEME or blake3)."),
) -> None:
    """Generate key material and write it into OUTPUT."""
    try:
        artifacts = facade.generate_keys(_scheme(scheme))
        for artifact in artifacts:
            path = write_key_bytes(output / artifact.filename, artifact.data)
            log.info("wrote %s key to %s", artifact.role, path)
            typer.echo(str(path))
    except TextSignError as exc:
        _fail(exc)


@app.command()
def schemes() -> None:
    """List registered signing schemes."""
    load_adapters()
    for name, adapter_cls in registry.list().items():
        typer.echo(f"- {name} (signature: {adapter_cls.signature_size} bytes)")


def app_main():
    app()


if __name__ == "__main__":
    app_main()
