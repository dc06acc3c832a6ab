"""Encryption and decryption of matched data (suite 3)."""

import logging

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from pyhpke import AEADId, CipherSuite, KDFId, KEMId

from .envelope import EncryptedData
from .keys import private_key_to_bytes
from .types import DecryptionFailedError, EncryptionError, InvalidKeyError, PUBLIC_KEY_SIZE, TAG_SIZE

logger = logging.getLogger(__name__)

# DHKEM(X25519, HKDF-SHA256), HKDF-SHA256, ChaCha20-Poly1305
SUITE = CipherSuite.new(
    KEMId.DHKEM_X25519_HKDF_SHA256,
    KDFId.HKDF_SHA256,
    AEADId.CHACHA20_POLY1305,
)


def decrypt_data(
    encrypted_data: EncryptedData,
    private_key: X25519PrivateKey,
) -> bytes:
    """
    Decrypt encrypted data with the recipient's private key.

    Decapsulation and tag failures raise the same error, so callers cannot
    tell which step rejected the input.

    Args:
        encrypted_data: The decoded encrypted data
        private_key: Recipient's X25519 private key

    Returns:
        Plaintext, the same length as the ciphertext

    Raises:
        DecryptionFailedError: If decapsulation or authentication fails
    """
    logger.debug("Decrypting %d byte ciphertext", len(encrypted_data.ciphertext))

    skr = SUITE.kem.deserialize_private_key(private_key_to_bytes(private_key))

    try:
        # Decapsulate and derive the shared secret, then the AEAD context
        context = SUITE.create_recipient_context(encrypted_data.encapped_key, skr)
        plaintext = context.open(encrypted_data.ciphertext + encrypted_data.tag, aad=b"")
    except Exception:
        logger.debug("Decryption rejected")
        raise DecryptionFailedError() from None

    return plaintext


def encrypt_data(public_key: bytes, plaintext: bytes) -> EncryptedData:
    """
    Encrypt plaintext for a recipient under a fresh ephemeral key.

    Args:
        public_key: Recipient's raw X25519 public key (32 bytes)
        plaintext: Bytes to encrypt

    Returns:
        EncryptedData with a fresh encapsulated key

    Raises:
        InvalidKeyError: If the public key has the wrong length
        EncryptionError: If the recipient key cannot be used
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise InvalidKeyError(
            f"expected {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}", kind="public"
        )

    try:
        pkr = SUITE.kem.deserialize_public_key(bytes(public_key))
        encapped_key, context = SUITE.create_sender_context(pkr)
        sealed = context.seal(bytes(plaintext), aad=b"")
    except Exception as e:
        raise EncryptionError(f"Encryption failed: {e}") from e

    return EncryptedData(
        encapped_key=bytes(encapped_key),
        ciphertext=sealed[:-TAG_SIZE],
        tag=sealed[-TAG_SIZE:],
    )
