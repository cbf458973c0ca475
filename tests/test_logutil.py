import logging

from signify_nacl.keys import PublicKey
from signify_nacl.logutil import RedactingFilter, redact


def _record(msg, *args):
    return logging.LogRecord("signify_nacl.test", logging.INFO, __file__, 1, msg, args, None)


def test_redacts_secret_key_text(keypair):
    _, priv = keypair
    rec = _record("loaded %s", str(priv))
    assert RedactingFilter().filter(rec)
    assert rec.getMessage() == "loaded NACL-SECRET-KEY-***"


def test_redacts_assignments():
    assert redact("key=abc password=hunter2 other=1") == "key=*** password=*** other=1"


def test_public_key_text_kept():
    pub = PublicKey(bytes(32))
    assert redact(f"pub {pub}") == f"pub {pub}"
