from __future__ import annotations
import logging

from pydantic import ValidationError

from .crypto import B64, B64D, sign_detached, verify_detached
from .errors import BadFormat, NotAnObject, SignatureMismatch
from .models import SignatureFragment

logger = logging.getLogger(__name__)

NACL_SIG_MARKER = b',"naclSig":"'

# len(b',"naclSig":"' + 88 base64 chars + b'"}')
JSON_OVERHEAD = 102


def sign_json(private_key, document: bytes) -> bytes:
    """Sign serialized JSON without re-encoding it.

    Follows https://perkeep.org/doc/json-signing/#signing::

        J == any valid JSON serialization of an object
        T == J, with trailing whitespace removed, then the final '}' removed
        S == base64 detached signature of T
        C == T + ',"naclSig":"' + S + '"}' + '\\n'

    Raises NotAnObject if the trimmed document does not end with ``}``.
    """
    trimmed = bytes(document).rstrip()
    if not trimmed.endswith(b"}"):
        raise NotAnObject("document does not end with '}'")
    payload = trimmed[:-1]
    if NACL_SIG_MARKER in payload:
        logger.debug("payload already contains %r; appending another signature", NACL_SIG_MARKER)
    sig = sign_detached(private_key, payload)
    return b"".join((payload, NACL_SIG_MARKER, B64(sig).encode("ascii"), b'"}\n'))


def verify_json(public_key, signed: bytes) -> bytes:
    """Verify a document produced by :func:`sign_json` and return its payload.

    Follows https://perkeep.org/doc/json-signing/#verifying: the signature is
    taken from the last ``,"naclSig":"`` in the document and checked against
    the bytes before it. The returned payload is those bytes plus ``}``.

    The payload itself must not end with the literal ``,"naclSig":"``
    fragment; earlier occurrences (nested objects) are fine.

    Raises BadFormat when no usable signature is found and SignatureMismatch
    (carrying ``payload``) when the signature does not match. ``signed`` is
    never modified.
    """
    signed = bytes(signed)
    i = signed.rfind(NACL_SIG_MARKER)
    if i < 0:
        raise BadFormat(f"no {NACL_SIG_MARKER.decode()!r} in document")
    before = signed[:i]
    fragment = b"{" + signed[i + 1:]
    try:
        sig_b64 = SignatureFragment.model_validate_json(fragment).nacl_sig
    except ValidationError as e:
        raise BadFormat(f"signature fragment: {e.error_count()} error(s)") from e
    if not sig_b64:
        raise BadFormat(f"empty signature in {fragment!r}")
    try:
        sig = B64D(sig_b64)
    except ValueError as e:
        raise BadFormat("signature is not base64") from e

    payload = before + b"}"
    if verify_detached(public_key, before, sig):
        return payload
    logger.debug("signature mismatch over %d payload bytes", len(before))
    raise SignatureMismatch("signature mismatch", payload=payload)
