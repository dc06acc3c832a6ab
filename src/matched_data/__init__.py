"""
matched-data - Decryption of encrypted matched data

Python implementation of the matched data envelope using HPKE
(X25519 + HKDF-SHA256 + ChaCha20-Poly1305).
"""

__version__ = "0.1.0"

from .keys import (
    KeyPair,
    generate_key_pair,
    private_key_from_bytes,
    private_key_to_bytes,
    public_key_from_bytes,
    public_key_to_bytes,
    public_key_for,
)
from .envelope import (
    EncryptedData,
    encode_encrypted_data,
    decode_encrypted_data,
    encode_envelope,
    split_version,
)
from .crypto import encrypt_data, decrypt_data
from .suites import select_suite, encrypt_matched_data, decrypt_matched_data
from .codec import decode_base64, encode_base64
from .types import (
    SUITE_VERSION,
    SUPPORTED_VERSIONS,
    MatchedDataError,
    InvalidKeyError,
    MalformedEnvelopeError,
    UnsupportedVersionError,
    DecryptionFailedError,
    CodecInputError,
    EncryptionError,
)

__all__ = [
    # Keys
    "KeyPair",
    "generate_key_pair",
    "private_key_from_bytes",
    "private_key_to_bytes",
    "public_key_from_bytes",
    "public_key_to_bytes",
    "public_key_for",
    # Envelope
    "EncryptedData",
    "encode_encrypted_data",
    "decode_encrypted_data",
    "encode_envelope",
    "split_version",
    # Crypto
    "encrypt_data",
    "decrypt_data",
    # Suites
    "select_suite",
    "encrypt_matched_data",
    "decrypt_matched_data",
    # Codec
    "decode_base64",
    "encode_base64",
    # Constants
    "SUITE_VERSION",
    "SUPPORTED_VERSIONS",
    # Errors
    "MatchedDataError",
    "InvalidKeyError",
    "MalformedEnvelopeError",
    "UnsupportedVersionError",
    "DecryptionFailedError",
    "CodecInputError",
    "EncryptionError",
]
