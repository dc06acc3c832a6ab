"""Base64 text encoding at the boundary of the core."""

import base64
import binascii
from typing import Union

from .types import CodecInputError


def decode_base64(text: Union[str, bytes], what: str) -> bytes:
    """
    Strictly decode canonical, padded standard base64.

    Surrounding whitespace (such as the newline after a line read from stdin)
    is ignored.

    Args:
        text: Base64 text
        what: Name of the input, used in the error message

    Raises:
        CodecInputError: If text is not valid base64
    """
    if isinstance(text, str):
        try:
            text = text.strip().encode("ascii")
        except UnicodeEncodeError:
            raise CodecInputError(what) from None
    else:
        text = text.strip()

    try:
        decoded = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        raise CodecInputError(what) from None

    # Only canonical padded encodings are accepted
    if base64.b64encode(decoded) != text:
        raise CodecInputError(what)

    return decoded


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard base64 text."""
    return base64.b64encode(data).decode("ascii")
