"""Main CLI entry point for ipmitext."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .. import __version__
from ..codec import decode_bcd_plus, decode_packed6, encode_bcd_plus, encode_packed6
from ..config import CliConfig
from ..exceptions import IpmiTextError
from ..fields import TypeCode, decode_field, encode_field
from ..utils import zero_checksum
from .demo import run_demo

logger = logging.getLogger(__name__)

CODECS = ("bcd", "packed6")
FIELD_TYPES = {"bcd": TypeCode.BCD_PLUS, "packed6": TypeCode.PACKED6}


def _parse_hex(text: str) -> bytes:
    """Parse hex input such as ``"12 3b 45"`` or ``"0x123b45"``."""
    cleaned = text.strip()
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    cleaned = cleaned.replace(":", " ")
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise ValueError(f"Invalid hex input {text!r}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ipmitext CLI."""
    parser = argparse.ArgumentParser(
        prog="ipmitext",
        description="ipmitext: IPMI FRU/SDR text codecs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ipmitext encode bcd 123-456-7.890       Encode text as BCD Plus
  ipmitext decode packed6 29dca6 --trim   Decode packed 6-bit ASCII
  ipmitext checksum "01 02 03"            Zero checksum of a block
  ipmitext field encode "IPMITOOL 12"     Encode a FRU type/length field
  ipmitext demo                           Print sample encodings
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ipmitext {__version__}",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--hex-width",
        metavar="N",
        type=int,
        default=16,
        help="Bytes per hex dump line (default: 16)",
    )
    parser.add_argument("--upper", action="store_true", help="Print upper-case hex digits")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode = commands.add_parser("encode", help="Encode text")
    encode.add_argument("codec", choices=CODECS)
    encode.add_argument("text")

    decode = commands.add_parser("decode", help="Decode hex bytes")
    decode.add_argument("codec", choices=CODECS)
    decode.add_argument("data", metavar="HEX")
    decode.add_argument("--trim", action="store_true", help="Strip trailing spaces")
    decode.add_argument(
        "--length",
        metavar="N",
        type=int,
        help="Character count of the original text (packed6 only)",
    )

    checksum = commands.add_parser("checksum", help="Calculate a zero checksum")
    checksum.add_argument("data", metavar="HEX")
    checksum.add_argument("--start", metavar="N", type=int, default=0)
    checksum.add_argument("--count", metavar="N", type=int, default=None)

    field = commands.add_parser("field", help="Encode or decode FRU type/length fields")
    field_commands = field.add_subparsers(dest="field_command", metavar="ACTION", required=True)
    field_encode = field_commands.add_parser("encode", help="Encode text as a field")
    field_encode.add_argument("text")
    field_encode.add_argument("--type", choices=CODECS, default=None, dest="field_type")
    field_decode = field_commands.add_parser("decode", help="Decode a field")
    field_decode.add_argument("data", metavar="HEX")

    commands.add_parser("demo", help="Print sample encodings")

    return parser


def _run_encode(args: argparse.Namespace, config: CliConfig) -> None:
    if args.codec == "bcd":
        data, padded = encode_bcd_plus(args.text)
        print(config.format_hex(data))
        print(f"padded: {'true' if padded else 'false'}")
    else:
        print(config.format_hex(encode_packed6(args.text)))


def _run_decode(args: argparse.Namespace, config: CliConfig) -> None:
    data = _parse_hex(args.data)
    if args.codec == "bcd":
        if args.length is not None:
            raise ValueError("--length applies to packed6 only")
        text = decode_bcd_plus(data, trim=config.trim)
    else:
        text = decode_packed6(data, trim=config.trim, length=args.length)
    print(repr(text))


def _run_checksum(args: argparse.Namespace, config: CliConfig) -> None:
    value = zero_checksum(_parse_hex(args.data), args.start, args.count)
    digits = f"{value:02X}" if config.uppercase else f"{value:02x}"
    print(f"0x{digits} ({value})")


def _run_field(args: argparse.Namespace, config: CliConfig) -> None:
    if args.field_command == "encode":
        type_code = FIELD_TYPES[args.field_type] if args.field_type else None
        print(config.format_hex(encode_field(args.text, type_code)))
    else:
        field = decode_field(_parse_hex(args.data))
        print(f"{field.type_code.name} {field.text!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the ipmitext CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = CliConfig.from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "encode": _run_encode,
        "decode": _run_decode,
        "checksum": _run_checksum,
        "field": _run_field,
        "demo": run_demo,
    }

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    logger.debug("Running %s command", args.command)
    try:
        handlers[args.command](args, config)
    except (IpmiTextError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
