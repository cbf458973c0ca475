from __future__ import annotations
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from signify_nacl import fileops
from signify_nacl.errors import SignifyError
from signify_nacl.logutil import setup_logging
from signify_nacl.settings import settings

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Sign and verify messages and JSON documents with NaCl (ed25519) keys.",
)
err = Console(stderr=True)


def _fail(e: SignifyError) -> None:
    err.print(f"[red]{type(e).__name__}[/red]: {escape(str(e))}", highlight=False)
    raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: $SIGNIFY_LOG_LEVEL or WARNING)"
    ),
):
    setup_logging(log_level or settings.log_level)


def generate(
    public_key_file: str = typer.Option("-", "-p", help="public key file"),
    private_key_file: str = typer.Option("-", "-s", help="secret key file"),
):
    """Generate a keypair."""
    try:
        fileops.generate_key_files(public_key_file, private_key_file)
    except SignifyError as e:
        _fail(e)
    if public_key_file not in ("", "-") and private_key_file not in ("", "-"):
        err.print(f"[green]Wrote keys to {public_key_file} and {private_key_file}[/green]")


def sign(
    private_key_file: Optional[str] = typer.Option(None, "-s", help="secret key file"),
    private_key: Optional[str] = typer.Option(None, "-S", help="secret key"),
    env: str = typer.Option(
        settings.private_key_env,
        "--env",
        help="environment variable to read the private key from",
    ),
    message_file: str = typer.Option("-", "-m", help="message file"),
    signed_file: str = typer.Option("-", "-x", help="signed message file to write to"),
    json_mode: bool = typer.Option(
        False, "--json", help="message is a JSON object; embed the signature as naclSig"
    ),
):
    """Sign a message."""
    try:
        fileops.sign_file(
            private_key=private_key,
            private_key_file=private_key_file,
            private_key_env=env,
            signed_file=signed_file,
            message_file=message_file,
            json_mode=json_mode,
        )
    except SignifyError as e:
        _fail(e)


def verify(
    public_key_file: Optional[str] = typer.Option(None, "-p", help="public key file"),
    public_key: Optional[str] = typer.Option(None, "-P", help="public key"),
    env: str = typer.Option(
        settings.public_key_env,
        "--env",
        help="environment variable to read the public key from",
    ),
    signed_file: str = typer.Option("-", "-x", help="signed message file to read from"),
    message_file: str = typer.Option("-", "-m", help="file to write the verified message to"),
    json_mode: bool = typer.Option(
        False, "--json", help="signed message is a JSON document with a naclSig key"
    ),
):
    """Verify a signed message and output the message."""
    try:
        fileops.verify_file(
            public_key=public_key,
            public_key_file=public_key_file,
            public_key_env=env,
            signed_file=signed_file,
            message_file=message_file,
            json_mode=json_mode,
        )
    except SignifyError as e:
        _fail(e)


for _fn, _names in (
    (generate, ("generate", "gen", "g")),
    (sign, ("sign", "sig", "s")),
    (verify, ("verify", "ver", "v")),
):
    app.command(_names[0])(_fn)
    for _alias in _names[1:]:
        app.command(_alias, hidden=True)(_fn)


# command words accepted as flags, as in the old signify-nacl tool
_COMMAND_FLAGS = {"-G": "generate", "-S": "sign", "-V": "verify"}


def command_args(argv: List[str]) -> List[str]:
    args = list(argv)
    if args and args[0] in _COMMAND_FLAGS:
        args[0] = _COMMAND_FLAGS[args[0]]
    return args


def cli(argv: Optional[List[str]] = None) -> None:
    app(args=command_args(sys.argv[1:] if argv is None else argv), prog_name="signify-nacl")


if __name__ == "__main__":
    cli()
