import pytest

from signify_nacl.crypto import (
    SIGNATURE_SIZE,
    generate_keypair,
    open_signed,
    sign,
    sign_detached,
    verify_detached,
)
from signify_nacl.keys import PrivateKey

MESSAGE = "árvíztűrő tükörfúrógép".encode("utf-8")


def test_generate_keypair_shapes():
    pub, priv = generate_keypair()
    assert len(bytes(pub)) == 32
    assert len(bytes(priv)) == 64
    assert priv.public_key == pub


def test_sign_open_round_trip(keypair):
    pub, priv = keypair
    signed = sign(priv, MESSAGE)
    assert len(signed) == len(MESSAGE) + SIGNATURE_SIZE
    assert signed[SIGNATURE_SIZE:] == MESSAGE
    assert open_signed(pub, signed) == (MESSAGE, True)


def test_sign_empty_message(keypair):
    pub, priv = keypair
    assert open_signed(pub, sign(priv, b"")) == (b"", True)


@pytest.mark.parametrize("index", [0, 31, 63, 64, -1])
def test_open_detects_bit_flip(keypair, index):
    pub, priv = keypair
    signed = bytearray(sign(priv, MESSAGE))
    signed[index] ^= 0x01
    assert open_signed(pub, bytes(signed)) == (b"", False)


@pytest.mark.parametrize("data", [b"", b"x", bytes(63)])
def test_open_truncated_input(keypair, data):
    pub, _ = keypair
    assert open_signed(pub, data) == (b"", False)


def test_open_with_other_key(keypair, other_keypair):
    _, priv = keypair
    other_pub, _ = other_keypair
    assert open_signed(other_pub, sign(priv, MESSAGE)) == (b"", False)


def test_detached(keypair, other_keypair):
    pub, priv = keypair
    sig = sign_detached(priv, MESSAGE)
    assert len(sig) == SIGNATURE_SIZE
    assert verify_detached(pub, MESSAGE, sig)
    assert not verify_detached(pub, MESSAGE + b"!", sig)
    assert not verify_detached(other_keypair[0], MESSAGE, sig)


def test_detached_malformed_signature(keypair):
    pub, _ = keypair
    assert not verify_detached(pub, MESSAGE, b"")
    assert not verify_detached(pub, MESSAGE, bytes(65))


def test_combined_signature_matches_detached(keypair):
    _, priv = keypair
    assert sign(priv, MESSAGE)[:SIGNATURE_SIZE] == sign_detached(priv, MESSAGE)


def test_key_methods(keypair):
    pub, priv = keypair
    assert pub.open(priv.sign(MESSAGE)) == (MESSAGE, True)
    assert pub.verify_detached(MESSAGE, priv.sign_detached(MESSAGE))


def test_cross_check_with_cryptography(keypair, crypto_keys):
    pub, priv = keypair
    # ours verified by cryptography
    crypto_keys.public.verify(sign_detached(priv, MESSAGE), MESSAGE)
    # cryptography's verified by ours
    assert verify_detached(pub, MESSAGE, crypto_keys.private.sign(MESSAGE))


def test_mismatched_public_half_is_ignored(keypair, other_keypair):
    pub, priv = keypair
    other_pub, _ = other_keypair
    odd = PrivateKey(priv.seed + bytes(other_pub))
    assert odd.public_key == pub
    sig = odd.sign_detached(MESSAGE)
    assert verify_detached(odd.public_key, MESSAGE, sig)
    assert not verify_detached(other_pub, MESSAGE, sig)
    assert open_signed(odd.public_key, odd.sign(MESSAGE)) == (MESSAGE, True)
