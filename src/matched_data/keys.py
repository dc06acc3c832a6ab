"""Key pair generation and key conversion for matched data."""

import base64
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .types import InvalidKeyError, PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE


RandomSource = Callable[[int], bytes]


@dataclass(frozen=True)
class KeyPair:
    """Raw X25519 key pair."""
    private_key: bytes  # 32 bytes
    public_key: bytes  # 32 bytes

    def to_dict(self) -> Dict[str, str]:
        """Base64 encoded representation used for key pair output."""
        return {
            "private_key": base64.b64encode(self.private_key).decode("ascii"),
            "public_key": base64.b64encode(self.public_key).decode("ascii"),
        }


def generate_private_key(random_source: Optional[RandomSource] = None) -> X25519PrivateKey:
    """
    Generate a fresh X25519 private key.

    Args:
        random_source: Optional callable returning n random bytes. When omitted
                       the OS CSPRNG is used.

    Returns:
        New private key
    """
    if random_source is None:
        return X25519PrivateKey.generate()

    return X25519PrivateKey.from_private_bytes(random_source(PRIVATE_KEY_SIZE))


def generate_key_pair(random_source: Optional[RandomSource] = None) -> KeyPair:
    """
    Generate a public-private key pair.

    Args:
        random_source: Optional callable returning n random bytes, for
                       reproducible fixtures. Defaults to the OS CSPRNG.

    Returns:
        KeyPair with raw private and public key bytes
    """
    private_key = generate_private_key(random_source)
    return KeyPair(
        private_key=private_key_to_bytes(private_key),
        public_key=public_key_to_bytes(private_key.public_key()),
    )


def private_key_from_bytes(data: bytes) -> X25519PrivateKey:
    """
    Construct an X25519 private key from raw bytes.

    Every 32-byte string is a valid X25519 scalar once clamped, so the length
    is the only domain restriction.

    Raises:
        InvalidKeyError: If the key has the wrong length
    """
    if len(data) != PRIVATE_KEY_SIZE:
        raise InvalidKeyError(f"expected {PRIVATE_KEY_SIZE} bytes, got {len(data)}")

    try:
        return X25519PrivateKey.from_private_bytes(bytes(data))
    except ValueError:
        raise InvalidKeyError() from None


def private_key_to_bytes(private_key: X25519PrivateKey) -> bytes:
    """Convert X25519 private key to raw bytes."""
    return private_key.private_bytes_raw()


def public_key_from_bytes(data: bytes) -> X25519PublicKey:
    """
    Create X25519 public key from raw bytes.

    Raises:
        InvalidKeyError: If the key has the wrong length
    """
    if len(data) != PUBLIC_KEY_SIZE:
        raise InvalidKeyError(f"expected {PUBLIC_KEY_SIZE} bytes, got {len(data)}", kind="public")
    return X25519PublicKey.from_public_bytes(bytes(data))


def public_key_to_bytes(public_key: X25519PublicKey) -> bytes:
    """Convert X25519 public key to raw bytes."""
    return public_key.public_bytes_raw()


def public_key_for(private_key: X25519PrivateKey) -> bytes:
    """Raw public key belonging to a private key."""
    return public_key_to_bytes(private_key.public_key())
