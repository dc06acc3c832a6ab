"""Test vectors for matched data."""

# Recipient key pair (base64)
PRIVATE_KEY_B64 = "uBS5eBttHrqkdY41kbZPdvYnNz8Vj0TvKIUpjB1y/GA="
PUBLIC_KEY_B64 = "Ycig/Zr/pZmklmFUN99nr+taURlYItL91g+NcHGYpB8="

# Suite 3 envelope encrypted to PUBLIC_KEY_B64
MATCHED_DATA_B64 = (
    "AzTY6FHajXYXuDMUte82wrd+1n5CEHPoydYiyd3FMg5IEQAAAAAAAAA0lOhGXBclw8pW"
    "U5jbbYuepSIJN5JohTtZekLliJBlVWk="
)
MATCHED_DATA = b"test matched data"

# Suite 3 envelope encrypted to PUBLIC_KEY_B64 with ephemeral private key 0x07 * 32
FIXED_EPHEMERAL_PUBLIC_KEY_HEX = "13be4feaeaf204c7fd3358fc9c00721881d174278128227ec674f37f7fe97b6d"
FIXED_EPHEMERAL_PLAINTEXT = b"hello matched data"
FIXED_EPHEMERAL_MATCHED_DATA_B64 = (
    "AxO+T+rq8gTH/TNY/JwAchiB0XQngSgifsZ0839/6XttEgAAAAAAAAD38xr0TmS09rY0"
    "l90KteVxxt2MrM38m0oAlNSBL4DgK0tp"
)

# Envelope in the retired version 2 format
V2_MATCHED_DATA_B64 = (
    "Ah0Ax4UEtSQg/bVSJHcgIwbLoNNKGbcwpL2BdCPJEYx1EQAAAAAAAAAsrRpY63jVlKas"
    "h1iJ2bYh6+TQtedI380nnmZAWYgZMIU="
)

# Plaintexts covering edge cases
TEST_PAYLOADS = {
    "empty": b"",
    "single_byte": b"X",
    "text": b"GET /login?user=admin' OR 1=1 --",
    "binary": bytes(range(256)),
    "utf8": "Café 你好 👋".encode("utf-8"),
    "large": b"A" * 1_000_000,
}


def fixed_source(value: int):
    """Random source returning the same byte for every request."""
    return lambda n: bytes([value]) * n

