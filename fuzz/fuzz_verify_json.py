"""Fuzz harness for signed JSON verification.

Arbitrary bytes go through verify_json with a fixed key. The only acceptable
outcomes are a returned payload, BadFormat or SignatureMismatch; anything else
is a crash. Every few inputs the bytes are signed first so the valid path and
single-bit tampering get exercised too.
"""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from signify_nacl.crypto import generate_keypair
    from signify_nacl.errors import BadFormat, NotAnObject, SignatureMismatch
    from signify_nacl.sign_json import verify_json, sign_json


PUB, PRIV = generate_keypair()


def TestOneInput(data: bytes):  # noqa: N802 (Atheris entrypoint)
    if data and data[0] % 3 == 0:
        try:
            signed = bytearray(sign_json(PRIV, data[1:]))
        except NotAnObject:
            return
        flip = data[-1] % 2 == 0
        if flip:
            signed[data[-1] % len(signed)] ^= 0x01
        try:
            payload = verify_json(PUB, bytes(signed))
        except (BadFormat, SignatureMismatch):
            if not flip:
                raise
            return
        assert payload == data[1:].rstrip()
        return

    try:
        verify_json(PUB, data)
    except (BadFormat, SignatureMismatch):
        return


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
