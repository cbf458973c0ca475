import os
import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519

# Ensure the 'src' directory is on sys.path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Keep a developer's own key variables out of the tests
for _name in ("NACL_PRIVATE_KEY", "NACL_PUBLIC_KEY"):
    os.environ.pop(_name, None)

from signify_nacl.crypto import generate_keypair  # noqa: E402


class CryptographyKeys:
    """The same keypair as cryptography objects, an independent ed25519 implementation."""

    def __init__(self, private_key):
        self.private = ed25519.Ed25519PrivateKey.from_private_bytes(private_key.seed)
        self.public = ed25519.Ed25519PublicKey.from_public_bytes(
            bytes(private_key.public_key)
        )


@pytest.fixture(scope="session")
def keypair():
    return generate_keypair()


@pytest.fixture(scope="session")
def other_keypair():
    return generate_keypair()


@pytest.fixture
def crypto_keys(keypair):
    return CryptographyKeys(keypair[1])
