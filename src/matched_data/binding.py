"""
String-in, string-out adapter for embedding in another runtime.

Mirrors the command line tool: base64 decode, call the core, format the
result. Failures surface as `BindingError` with the same message.
"""

from typing import Dict

from .codec import decode_base64
from .keys import generate_key_pair, private_key_from_bytes
from .suites import decrypt_matched_data
from .types import MatchedDataError


class BindingError(MatchedDataError):
    """Raised at the binding boundary when an operation fails."""
    pass


def decrypt(private_key: str, matched_data: str) -> str:
    """
    Decrypt base64 encoded matched data with a base64 encoded private key.

    Returns:
        Plaintext decoded as UTF-8, with invalid sequences replaced

    Raises:
        BindingError: If any step fails
    """
    try:
        key = private_key_from_bytes(decode_base64(private_key, "private key"))
        envelope = decode_base64(matched_data, "matched data")
        plaintext = decrypt_matched_data(key, envelope)
    except MatchedDataError as e:
        raise BindingError(str(e)) from e

    return plaintext.decode("utf-8", errors="replace")


def keypair() -> Dict[str, str]:
    """Generate a key pair as `{"private_key": ..., "public_key": ...}`."""
    return generate_key_pair().to_dict()
