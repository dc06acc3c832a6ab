"""Suite selection by envelope version byte."""

import logging
from typing import Union

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .crypto import decrypt_data, encrypt_data
from .envelope import EncryptedData, decode_encrypted_data, encode_envelope, split_version
from .keys import private_key_from_bytes, public_key_to_bytes
from .types import SUITE_VERSION, SUPPORTED_VERSIONS, UnsupportedVersionError

logger = logging.getLogger(__name__)


class SuiteV3:
    """X25519 KEM, HKDF-SHA256, ChaCha20-Poly1305 with a length-prefixed ciphertext."""

    version = SUITE_VERSION

    def decode(self, payload: bytes) -> EncryptedData:
        return decode_encrypted_data(payload)

    def encode(self, encrypted_data: EncryptedData) -> bytes:
        return encode_envelope(self.version, encrypted_data)

    def decrypt(self, encrypted_data: EncryptedData, private_key: X25519PrivateKey) -> bytes:
        return decrypt_data(encrypted_data, private_key)

    def encrypt(self, public_key: bytes, plaintext: bytes) -> EncryptedData:
        return encrypt_data(public_key, plaintext)


SUITE_V3 = SuiteV3()


def select_suite(version: int) -> SuiteV3:
    """
    Return the suite for a version byte.

    Raises:
        UnsupportedVersionError: If the version is unknown
    """
    if version == SUITE_VERSION:
        return SUITE_V3

    raise UnsupportedVersionError(version, SUPPORTED_VERSIONS)


def decrypt_matched_data(
    private_key: Union[X25519PrivateKey, bytes],
    data: bytes,
) -> bytes:
    """
    Decrypt a versioned envelope.

    The version byte is checked before any other byte is decoded, because the
    remaining layout depends on the suite.

    Args:
        private_key: Recipient private key, as a key object or 32 raw bytes
        data: Envelope bytes (version byte + encrypted data)

    Returns:
        Plaintext bytes

    Raises:
        InvalidKeyError: If raw private key bytes are invalid
        MalformedEnvelopeError: If the envelope cannot be decoded
        UnsupportedVersionError: If the version byte is unknown
        DecryptionFailedError: If decryption fails
    """
    if not isinstance(private_key, X25519PrivateKey):
        private_key = private_key_from_bytes(private_key)

    version, payload = split_version(data)
    suite = select_suite(version)
    logger.debug("Envelope suite %d, %d byte payload", version, len(payload))

    encrypted_data = suite.decode(payload)
    return suite.decrypt(encrypted_data, private_key)


def encrypt_matched_data(
    public_key: Union[X25519PublicKey, bytes],
    plaintext: bytes,
    version: int = SUITE_VERSION,
) -> bytes:
    """
    Encrypt plaintext into a versioned envelope.

    Args:
        public_key: Recipient public key, as a key object or 32 raw bytes
        plaintext: Bytes to encrypt
        version: Suite version to produce

    Returns:
        Envelope bytes

    Raises:
        InvalidKeyError: If raw public key bytes are invalid
        UnsupportedVersionError: If the version is unknown
        EncryptionError: If encryption fails
    """
    if isinstance(public_key, X25519PublicKey):
        public_key = public_key_to_bytes(public_key)

    suite = select_suite(version)
    return suite.encode(suite.encrypt(public_key, plaintext))
