"""Type definitions and constants for matched data decryption."""

from typing import Sequence


# Envelope constants
SUITE_VERSION = 0x03
SUPPORTED_VERSIONS = (SUITE_VERSION,)
VERSION_SIZE = 1
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 32
LENGTH_PREFIX_SIZE = 8
TAG_SIZE = 16


class MatchedDataError(Exception):
    """Base exception for matched data errors."""
    pass


class InvalidKeyError(MatchedDataError):
    """Key bytes have the wrong length or are not a valid X25519 key."""

    def __init__(self, reason: str = "invalid key", kind: str = "private") -> None:
        self.kind = kind
        super().__init__(f"Provided {kind} key is invalid: {reason}")


class MalformedEnvelopeError(MatchedDataError):
    """Envelope bytes do not match the layout of the declared suite."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Provided matched data is invalid: {reason}")


class UnsupportedVersionError(MatchedDataError):
    """Suite version byte is not recognized."""

    def __init__(self, got: int, supported: Sequence[int] = SUPPORTED_VERSIONS) -> None:
        self.got = got
        self.supported = tuple(supported)
        expected = ", ".join(f"'{v}'" for v in self.supported)
        super().__init__(
            f"Encryption format not supported, expected {expected}, got '{got}'"
        )


class DecryptionFailedError(MatchedDataError):
    """Decapsulation or tag verification failed."""

    def __init__(self) -> None:
        super().__init__("Failed to decrypt matched data")


class CodecInputError(MatchedDataError):
    """Boundary text could not be decoded into bytes."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"Provided {what} is not base64 encoded")


class EncryptionError(MatchedDataError):
    """Encryption failed."""
    pass
