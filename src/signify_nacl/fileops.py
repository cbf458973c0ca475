"""File and stream plumbing around the signing core.

Paths of ``""`` or ``"-"`` stand for stdin/stdout. Keys are taken from an
explicit value first, then a file, then an environment variable.
"""
from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Tuple

from .crypto import generate_keypair, open_signed, sign
from .errors import KeySourceError, SignatureMismatch, SignifyIOError
from .keys import PrivateKey, PublicKey
from .settings import settings
from .sign_json import sign_json, verify_json

logger = logging.getLogger(__name__)


def _is_std(path: Optional[str]) -> bool:
    return not path or path == "-"


def resolve_key_text(
    value: Optional[str] = None,
    path: Optional[str] = None,
    env: Optional[str] = None,
    *,
    what: str = "key",
) -> str:
    """Return key text from ``value``, else file ``path``, else ``$env``."""
    if value:
        return value.strip()
    if path:
        try:
            text = Path(path).read_text(encoding="ascii")
        except (OSError, UnicodeDecodeError) as e:
            raise SignifyIOError(f"read {what} from {path!r}: {e}") from e
        logger.debug("read %s from %s", what, path)
        return text.strip()
    if env:
        text = os.environ.get(env, "")
        if text:
            logger.debug("read %s from $%s", what, env)
            return text.strip()
    raise KeySourceError(f"no {what} given (value, file or ${env or '?'})")


def load_private_key(
    value: Optional[str] = None,
    path: Optional[str] = None,
    env: Optional[str] = None,
) -> PrivateKey:
    if env is None:
        env = settings.private_key_env
    return PrivateKey.parse(resolve_key_text(value, path, env, what="private key"))


def load_public_key(
    value: Optional[str] = None,
    path: Optional[str] = None,
    env: Optional[str] = None,
) -> PublicKey:
    if env is None:
        env = settings.public_key_env
    return PublicKey.parse(resolve_key_text(value, path, env, what="public key"))


def read_input(path: Optional[str], what: str = "message") -> bytes:
    try:
        if _is_std(path):
            return sys.stdin.buffer.read()
        return Path(path).read_bytes()
    except OSError as e:
        raise SignifyIOError(f"read {what} from {path!r}: {e}") from e


def write_output(
    path: Optional[str], data: bytes, mode: Optional[int] = None, what: str = "output"
) -> None:
    if mode is None:
        mode = settings.output_mode
    try:
        if _is_std(path):
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
            return
        p = Path(path)
        fd = os.open(p, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
    except OSError as e:
        raise SignifyIOError(f"write {what} to {path!r}: {e}") from e
    logger.info("wrote %s (%d bytes) to %s", what, len(data), path)


def generate_key_files(
    public_key_file: Optional[str] = "-", private_key_file: Optional[str] = "-"
) -> Tuple[PublicKey, PrivateKey]:
    """Generate a keypair and write both keys as text.

    The public key file is created read-only for everyone, the private key
    file read-only for the owner. ``-`` prints the key text on its own line.
    """
    pub, priv = generate_keypair()
    for path, key, mode, what in (
        (public_key_file, pub, settings.public_key_mode, "public key"),
        (private_key_file, priv, settings.private_key_mode, "private key"),
    ):
        text = str(key)
        if _is_std(path):
            write_output(path, (text + "\n").encode("ascii"), what=what)
        else:
            write_output(path, text.encode("ascii"), mode=mode, what=what)
    logger.info("generated keypair %r", pub)
    return pub, priv


def sign_file(
    private_key: Optional[str] = None,
    private_key_file: Optional[str] = None,
    private_key_env: Optional[str] = None,
    signed_file: Optional[str] = "-",
    message_file: Optional[str] = "-",
    json_mode: bool = False,
) -> bytes:
    """Sign ``message_file`` and write the result to ``signed_file``.

    Without ``json_mode`` the output is the combined ``signature || message``
    form; with it, the message must be a JSON object and gets a trailing
    ``naclSig`` key.
    """
    priv = load_private_key(private_key, private_key_file, private_key_env)
    msg = read_input(message_file, "message")
    if json_mode:
        out = sign_json(priv, msg)
    else:
        out = sign(priv, msg)
    write_output(signed_file, out, what="signed message")
    return out


def verify_file(
    public_key: Optional[str] = None,
    public_key_file: Optional[str] = None,
    public_key_env: Optional[str] = None,
    signed_file: Optional[str] = "-",
    message_file: Optional[str] = "-",
    json_mode: bool = False,
) -> bytes:
    """Verify ``signed_file`` and write the recovered message to ``message_file``.

    Nothing is written when verification fails.
    """
    pub = load_public_key(public_key, public_key_file, public_key_env)
    signed = read_input(signed_file, "signed message")
    if json_mode:
        out = verify_json(pub, signed)
    else:
        out, ok = open_signed(pub, signed)
        if not ok:
            raise SignatureMismatch("signature mismatch")
    write_output(message_file, out, what="message")
    return out
