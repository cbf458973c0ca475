from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

import nacl.signing

from .crypto import B64, B64D
from .errors import BadLength, BadPrefix, KeyDecodeError

PUBLIC_PREFIX = "nacl"
PRIVATE_PREFIX = "NACL-SECRET-KEY-"

PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 64


def encode_key(prefix: str, key: bytes) -> str:
    """Return ``prefix`` followed by the padded standard base64 of ``key``."""
    return prefix + B64(key)


def decode_key(text: str, prefix: str, length: int) -> bytes:
    """Decode key text produced by :func:`encode_key`.

    Only the shape is checked (prefix, base64 body, byte count); whether the
    bytes form a usable key is left to the signature primitive. Line breaks in
    the body are ignored so that key files ending in a newline still parse.
    """
    if not text.startswith(prefix):
        raise BadPrefix(f"got {text[:len(prefix)]!r} wanted {prefix!r}")
    body = text[len(prefix):].replace("\r", "").replace("\n", "")
    try:
        key = B64D(body)
    except (ValueError, UnicodeEncodeError) as e:
        raise KeyDecodeError(f"key body after {prefix!r} is not base64") from e
    if len(key) != length:
        raise BadLength(f"got {len(key)} wanted {length}")
    return key


@dataclass(frozen=True)
class _Key:
    data: bytes

    prefix: ClassVar[str]
    size: ClassVar[int]

    def __post_init__(self):
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError("key data must be bytes")
        data = bytes(self.data)
        if len(data) != self.size:
            raise BadLength(f"got {len(data)} wanted {self.size}")
        object.__setattr__(self, "data", data)

    @classmethod
    def parse(cls, text: str):
        return cls(decode_key(text, cls.prefix, cls.size))

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return encode_key(self.prefix, self.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.fingerprint()})"

    def fingerprint(self) -> str:
        return B64(self.data)[:8]


class PublicKey(_Key):
    """Ed25519 verification key (32 bytes), text form ``nacl<base64>``."""

    prefix = PUBLIC_PREFIX
    size = PUBLIC_KEY_SIZE

    def open(self, signed_message: bytes):
        from .crypto import open_signed

        return open_signed(self, signed_message)

    def verify_detached(self, message: bytes, signature: bytes) -> bool:
        from .crypto import verify_detached

        return verify_detached(self, message, signature)

    def verify_json(self, signed: bytes) -> bytes:
        from .sign_json import verify_json

        return verify_json(self, signed)


class PrivateKey(_Key):
    """Ed25519 signing key in the libsodium layout: seed (32) || public key (32).

    The text form is ``NACL-SECRET-KEY-<base64>``.
    """

    prefix = PRIVATE_PREFIX
    size = PRIVATE_KEY_SIZE

    @property
    def seed(self) -> bytes:
        return self.data[:32]

    @property
    def public_key(self) -> PublicKey:
        # derived from the seed, which is what signing uses; the stored half
        # is not trusted
        return PublicKey(nacl.signing.SigningKey(self.seed).verify_key.encode())

    def __repr__(self) -> str:
        # never show secret material, only the public half
        return f"PrivateKey(public={self.public_key.fingerprint()})"

    def sign(self, message: bytes) -> bytes:
        from .crypto import sign

        return sign(self, message)

    def sign_detached(self, message: bytes) -> bytes:
        from .crypto import sign_detached

        return sign_detached(self, message)

    def sign_json(self, document: bytes) -> bytes:
        from .sign_json import sign_json

        return sign_json(self, document)
