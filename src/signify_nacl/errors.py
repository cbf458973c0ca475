from __future__ import annotations
from typing import Optional


class SignifyError(ValueError):
    """Base class for every error raised by signify_nacl."""


class BadPrefix(SignifyError):
    """Key text does not start with the expected prefix."""


class BadLength(SignifyError):
    """Decoded key material has the wrong number of bytes."""


class KeyDecodeError(SignifyError):
    """Key text body is not valid base64."""


class BadFormat(SignifyError):
    """Signed JSON document cannot be understood."""


class NotAnObject(BadFormat):
    """Document handed to sign_json does not end with a closing brace."""


class SignatureMismatch(SignifyError):
    """Cryptographic verification failed.

    ``payload`` holds the bytes that were checked, when there are any, so the
    caller can report on them. They must not be trusted.
    """

    def __init__(self, message: str, payload: Optional[bytes] = None):
        super().__init__(message)
        self.payload = payload


class KeySourceError(SignifyError):
    """No key was given as a value, a file or an environment variable."""


class SignifyIOError(SignifyError):
    """Reading or writing key or message material failed."""
