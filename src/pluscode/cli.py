"""
Command-line interface for pluscode.

Provides commands for encoding, decoding, shortening and recovering codes.
"""

import argparse
import sys
from typing import Optional

from .alphabet import GRID_COLUMNS, GRID_ROWS, GRID_SIZE_DEGREES, PAIR_CODE_LENGTH
from .codec import (
    compute_latitude_precision,
    decode,
    encode,
    recover_nearest,
    shorten,
)
from .errors import InvalidLength, OpenLocationCodeError
from .validate import is_full, is_short, is_valid


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pluscode",
        description="Encode and decode Open Location Codes",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Encode command
    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode a location into a code",
    )
    encode_parser.add_argument("latitude", type=float, help="Latitude in degrees")
    encode_parser.add_argument("longitude", type=float, help="Longitude in degrees")
    encode_parser.add_argument(
        "-l", "--length",
        type=int,
        default=PAIR_CODE_LENGTH,
        help=f"Number of significant characters (default: {PAIR_CODE_LENGTH})",
    )

    # Decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a full code into its area",
    )
    decode_parser.add_argument("code", help="Full code")

    # Shorten command
    shorten_parser = subparsers.add_parser(
        "shorten",
        help="Shorten a full code relative to a reference location",
    )
    shorten_parser.add_argument("code", help="Full code")
    shorten_parser.add_argument("latitude", type=float, help="Reference latitude")
    shorten_parser.add_argument("longitude", type=float, help="Reference longitude")

    # Recover command
    recover_parser = subparsers.add_parser(
        "recover",
        help="Recover the full code nearest a reference location",
    )
    recover_parser.add_argument("code", help="Short code")
    recover_parser.add_argument("latitude", type=float, help="Reference latitude")
    recover_parser.add_argument("longitude", type=float, help="Reference longitude")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check codes against the code grammar",
    )
    validate_parser.add_argument("codes", nargs="+", help="Codes to check")

    # Info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show cell dimensions for a code length",
    )
    info_parser.add_argument(
        "-l", "--length",
        type=int,
        default=PAIR_CODE_LENGTH,
        help=f"Number of significant characters (default: {PAIR_CODE_LENGTH})",
    )

    return parser


def cmd_encode(args: argparse.Namespace) -> int:
    """Handle the encode command."""
    print(encode(args.latitude, args.longitude, args.length))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Handle the decode command."""
    area = decode(args.code)
    print(f"Area for {args.code.upper()}:")
    print(f"  Latitude: {area.latitude_lo} .. {area.latitude_hi}")
    print(f"  Longitude: {area.longitude_lo} .. {area.longitude_hi}")
    print(f"  Center: {area.latitude_center}, {area.longitude_center}")
    print(f"  Code length: {area.code_length}")
    return 0


def cmd_shorten(args: argparse.Namespace) -> int:
    """Handle the shorten command."""
    print(shorten(args.code, args.latitude, args.longitude))
    return 0


def cmd_recover(args: argparse.Namespace) -> int:
    """Handle the recover command."""
    print(recover_nearest(args.code, args.latitude, args.longitude))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    all_valid = True
    for code in args.codes:
        valid = is_valid(code)
        all_valid = all_valid and valid
        print(
            f"{code}: valid={valid} short={is_short(code)} full={is_full(code)}"
        )
    return 0 if all_valid else 1


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command."""
    n = args.length
    if n < 2 or (n < 8 and n % 2 == 1):
        raise InvalidLength(n)

    if n <= PAIR_CODE_LENGTH:
        height = width = compute_latitude_precision(n)
    else:
        height = GRID_SIZE_DEGREES / GRID_ROWS ** (n - PAIR_CODE_LENGTH)
        width = GRID_SIZE_DEGREES / GRID_COLUMNS ** (n - PAIR_CODE_LENGTH)

    print(f"Cell dimensions for code length {n}:")
    print(f"  Latitude: {height} degrees")
    print(f"  Longitude: {width} degrees")
    print(f"  Pair characters: {min(n, PAIR_CODE_LENGTH)}")
    print(f"  Grid characters: {max(0, n - PAIR_CODE_LENGTH)}")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "encode": cmd_encode,
        "decode": cmd_decode,
        "shorten": cmd_shorten,
        "recover": cmd_recover,
        "validate": cmd_validate,
        "info": cmd_info,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except OpenLocationCodeError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
