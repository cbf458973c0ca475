"""Fuzz harness for key text parsing.

Parsing must either return a key that encodes back to an equivalent text or
raise one of the codec errors.
"""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from signify_nacl.errors import BadLength, BadPrefix, KeyDecodeError
    from signify_nacl.keys import PrivateKey, PublicKey


def TestOneInput(data: bytes):  # noqa: N802 (Atheris entrypoint)
    fdp = atheris.FuzzedDataProvider(data)
    cls = PublicKey if fdp.ConsumeBool() else PrivateKey
    text = fdp.ConsumeUnicodeNoSurrogates(200)
    try:
        key = cls.parse(text)
    except (BadPrefix, BadLength, KeyDecodeError):
        return
    assert cls.parse(str(key)) == key


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
