"""
Command line interface for matched data.

    matched-data generate-key-pair
    matched-data decrypt -d <base64 envelope> -k <base64 private key>

Exit status is 0 on success, 1 when the operation fails and 2 on usage errors.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .codec import decode_base64
from .config import CliConfig, DecryptOutputFormat, KeyPairOutputFormat, configure_logging
from .keys import generate_key_pair, private_key_from_bytes
from .suites import decrypt_matched_data
from .types import MatchedDataError

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2

STDIN_MARKER = "-"
FILE_PREFIX = "@"


class InputReadError(MatchedDataError):
    """Raised when an input cannot be read from a file or stdin."""

    def __init__(self, what: str) -> None:
        super().__init__(f"Failed to read {what}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matched-data",
        description="Generate key pairs and decrypt encrypted matched data",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    keygen = subparsers.add_parser("generate-key-pair", help="Generates a public-private key pair")
    keygen.add_argument(
        "-o",
        "--output-format",
        choices=[f.value for f in KeyPairOutputFormat],
        default=KeyPairOutputFormat.JSON.value,
        metavar="format",
        help="Output format of key pair",
    )

    decrypt = subparsers.add_parser("decrypt", help="Decrypts data")
    decrypt.add_argument(
        "-d",
        "--matched-data",
        required=True,
        help="Base64 encoded encrypted matched data ('-' for stdin, '@path' for a file)",
    )
    key_source = decrypt.add_mutually_exclusive_group(required=True)
    key_source.add_argument("-k", "--private-key", help="Base64 encoded private key")
    key_source.add_argument(
        "--private-key-stdin",
        action="store_true",
        help="Whether to read the private key from stdin",
    )
    key_source.add_argument("--private-key-file", metavar="path", help="File holding the private key")
    decrypt.add_argument(
        "-o",
        "--output-format",
        choices=[f.value for f in DecryptOutputFormat],
        default=DecryptOutputFormat.UTF8_LOSSY.value,
        metavar="format",
        help="Output format of matched data",
    )

    return parser


def _read_file(path: str, what: str) -> str:
    try:
        return Path(path).read_text()
    except (OSError, UnicodeDecodeError):
        raise InputReadError(what) from None


def _read_stdin(what: str, whole: bool) -> str:
    try:
        return sys.stdin.read() if whole else sys.stdin.readline()
    except (OSError, UnicodeDecodeError):
        raise InputReadError(what) from None


def _resolve_matched_data(value: str) -> str:
    if value == STDIN_MARKER:
        return _read_stdin("matched data from stdin", whole=True)
    if value.startswith(FILE_PREFIX):
        return _read_file(value[len(FILE_PREFIX):], "matched data file")
    return value


def _resolve_private_key(args: argparse.Namespace) -> str:
    if args.private_key_stdin:
        return _read_stdin("private key from stdin", whole=False)
    if args.private_key_file:
        return _read_file(args.private_key_file, "private key file")
    return args.private_key


def cmd_generate_key_pair(args: argparse.Namespace) -> None:
    key_pair = generate_key_pair()

    if KeyPairOutputFormat(args.output_format) is KeyPairOutputFormat.JSON:
        print(json.dumps(key_pair.to_dict(), indent=2))


def cmd_decrypt(args: argparse.Namespace) -> None:
    private_key_text = _resolve_private_key(args)
    matched_data_text = _resolve_matched_data(args.matched_data)

    private_key = private_key_from_bytes(decode_base64(private_key_text, "private key"))
    envelope = decode_base64(matched_data_text, "matched data")

    matched_data = decrypt_matched_data(private_key, envelope)

    if DecryptOutputFormat(args.output_format) is DecryptOutputFormat.RAW:
        out = sys.stdout.buffer
        out.write(matched_data)
        out.flush()
    else:
        print(matched_data.decode("utf-8", errors="replace"))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (
        args.command == "decrypt"
        and args.private_key_stdin
        and args.matched_data == STDIN_MARKER
    ):
        parser.error("the private key and matched data cannot both be read from stdin")

    configure_logging(CliConfig.from_env(), verbose=args.verbose)

    try:
        if args.command == "generate-key-pair":
            cmd_generate_key_pair(args)
        else:
            cmd_decrypt(args)
    except MatchedDataError as e:
        logger.debug("%s failed: %s", args.command, type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return 0
