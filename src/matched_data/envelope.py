"""Envelope encoding and decoding for encrypted matched data."""

import struct
from dataclasses import dataclass
from typing import Tuple

from .types import (
    LENGTH_PREFIX_SIZE,
    MalformedEnvelopeError,
    PUBLIC_KEY_SIZE,
    TAG_SIZE,
    VERSION_SIZE,
)


# Minimum payload size after the version byte (empty ciphertext)
MIN_PAYLOAD_SIZE = PUBLIC_KEY_SIZE + LENGTH_PREFIX_SIZE + TAG_SIZE


@dataclass(frozen=True)
class EncryptedData:
    """Encrypted matched data, without its version byte."""
    encapped_key: bytes  # 32 bytes
    ciphertext: bytes  # variable, same length as the plaintext
    tag: bytes  # 16 bytes


def split_version(data: bytes) -> Tuple[int, bytes]:
    """
    Split the leading suite version byte off an envelope.

    Raises:
        MalformedEnvelopeError: If data is empty
    """
    if len(data) < VERSION_SIZE:
        raise MalformedEnvelopeError("envelope is empty")

    return data[0], bytes(data[VERSION_SIZE:])


def encode_encrypted_data(encrypted_data: EncryptedData) -> bytes:
    """
    Encode encrypted data to bytes.

    Format (56-byte overhead + ciphertext):
        [0-31]     encappedKey (32 bytes)
        [32-39]    ciphertext length (uint64, little-endian)
        [40..n]    ciphertext (variable)
        [n..n+16]  tag (16 bytes)

    Args:
        encrypted_data: EncryptedData to encode

    Returns:
        Encoded bytes
    """
    if len(encrypted_data.encapped_key) != PUBLIC_KEY_SIZE:
        raise MalformedEnvelopeError(
            f"encapped key must be {PUBLIC_KEY_SIZE} bytes, got {len(encrypted_data.encapped_key)}"
        )
    if len(encrypted_data.tag) != TAG_SIZE:
        raise MalformedEnvelopeError(
            f"tag must be {TAG_SIZE} bytes, got {len(encrypted_data.tag)}"
        )

    return (
        encrypted_data.encapped_key
        + struct.pack("<Q", len(encrypted_data.ciphertext))
        + encrypted_data.ciphertext
        + encrypted_data.tag
    )


def decode_encrypted_data(data: bytes) -> EncryptedData:
    """
    Decode bytes into encrypted data.

    The whole input must be consumed: missing or trailing bytes are an error.

    Args:
        data: Encoded bytes, without the version byte

    Returns:
        Decoded EncryptedData

    Raises:
        MalformedEnvelopeError: If data does not match the layout
    """
    if len(data) < MIN_PAYLOAD_SIZE:
        raise MalformedEnvelopeError(
            f"data too short: {len(data)} bytes (minimum {MIN_PAYLOAD_SIZE})"
        )

    offset = 0
    encapped_key = data[offset : offset + PUBLIC_KEY_SIZE]
    offset += PUBLIC_KEY_SIZE

    (ciphertext_length,) = struct.unpack_from("<Q", data, offset)
    offset += LENGTH_PREFIX_SIZE

    expected = offset + ciphertext_length + TAG_SIZE
    if len(data) < expected:
        raise MalformedEnvelopeError(
            f"ciphertext length {ciphertext_length} exceeds available data"
        )
    if len(data) > expected:
        raise MalformedEnvelopeError(f"{len(data) - expected} trailing bytes")

    ciphertext = data[offset : offset + ciphertext_length]
    offset += ciphertext_length

    tag = data[offset : offset + TAG_SIZE]

    return EncryptedData(
        encapped_key=bytes(encapped_key),
        ciphertext=bytes(ciphertext),
        tag=bytes(tag),
    )


def encode_envelope(version: int, encrypted_data: EncryptedData) -> bytes:
    """Prefix encoded encrypted data with its suite version byte."""
    return bytes([version]) + encode_encrypted_data(encrypted_data)
