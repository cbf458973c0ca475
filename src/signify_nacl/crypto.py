from __future__ import annotations
import base64
from typing import TYPE_CHECKING, Tuple

import nacl.exceptions
import nacl.signing

if TYPE_CHECKING:
    from .keys import PrivateKey, PublicKey

SIGNATURE_SIZE = 64


def B64(b: bytes) -> str:
    """Base64-encode bytes to ASCII string."""
    return base64.b64encode(b).decode("ascii")


def B64D(s: str) -> bytes:
    """Decode base64 ASCII string to bytes with strict validation."""
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except Exception as e:
        raise ValueError("invalid base64") from e


def _signing_key(private_key: "PrivateKey") -> nacl.signing.SigningKey:
    # the libsodium secret key is seed || public key; the public half is
    # always rederived from the seed
    return nacl.signing.SigningKey(bytes(private_key)[:32])


def generate_keypair() -> Tuple["PublicKey", "PrivateKey"]:
    """Generate a fresh (PublicKey, PrivateKey) pair from the system RNG."""
    from .keys import PrivateKey, PublicKey

    sk = nacl.signing.SigningKey.generate()
    pk = sk.verify_key.encode()
    return PublicKey(pk), PrivateKey(sk.encode() + pk)


def sign(private_key: "PrivateKey", message: bytes) -> bytes:
    """Return the combined form: 64-byte signature followed by ``message``."""
    return bytes(_signing_key(private_key).sign(bytes(message)))


def open_signed(public_key: "PublicKey", signed_message: bytes) -> Tuple[bytes, bool]:
    """Check a combined signed message and split off the signature.

    Returns ``(message, True)`` when valid and ``(b"", False)`` otherwise.
    Truncated or corrupted input is reported as invalid, never raised.
    """
    signed_message = bytes(signed_message)
    if len(signed_message) < SIGNATURE_SIZE:
        return b"", False
    try:
        vk = nacl.signing.VerifyKey(bytes(public_key))
        return vk.verify(signed_message), True
    except (nacl.exceptions.CryptoError, ValueError, TypeError):
        return b"", False


def sign_detached(private_key: "PrivateKey", message: bytes) -> bytes:
    return _signing_key(private_key).sign(bytes(message)).signature


def verify_detached(public_key: "PublicKey", message: bytes, signature: bytes) -> bool:
    vk = nacl.signing.VerifyKey(bytes(public_key))
    try:
        vk.verify(bytes(message), bytes(signature))
        return True
    except (nacl.exceptions.CryptoError, ValueError, TypeError):
        return False
