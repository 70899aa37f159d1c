"""
Bytesize command line.

    bytesize parse "1.5 GB"
    bytesize parse "2 КБ" --locale ru
    bytesize --locale ru format 2048 --long-units
    bytesize locales
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import sys
from pathlib import Path
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .config import Settings, get_settings, load_settings
from .formatter import format_with_locale
from .parser import parse_with_locale
from .sizes import ByteSize
from .units import supported_locales


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bytesize", description="Parse and format human-readable byte sizes.")
    _add_common_options(parser, default=None)

    # Same options after the subcommand name, an omitted one keeps the top-level value
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, default=argparse.SUPPRESS)

    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", parents=[common], help="Print the number of bytes in a size string.")
    parse_cmd.add_argument("text", help='Size string, e.g. "1.5 GB".')

    format_cmd = commands.add_parser(
        "format",
        parents=[common],
        help="Print a byte count in human-readable form.",
    )
    format_cmd.add_argument("size", metavar=ByteSize.TYPE_NAME, help="Number of bytes or a size string.")
    format_cmd.add_argument("--format", dest="number_format", default=None, help='Number format, e.g. "%%.1f".')
    format_cmd.add_argument("--unit", default="", help="Fixed unit instead of the best fit, e.g. MB.")
    format_cmd.add_argument(
        "--long-units",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use long unit names like 'megabytes'.",
    )

    commands.add_parser("locales", parents=[common], help="List supported locales.")
    return parser


def _add_common_options(parser: argparse.ArgumentParser, default) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=default,
        help="TOML file with a [bytesize] table of settings.",
    )
    parser.add_argument(
        "--locale",
        default=default,
        help="Locale for units, one of: " + ", ".join(supported_locales()),
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _resolve_settings(args)

        if args.command == "parse":
            print(int(parse_with_locale(args.text, settings.locale)))
        elif args.command == "format":
            size = _to_size(args.size, settings)
            number_format = settings.number_format if args.number_format is None else args.number_format
            long_units = settings.long_units if args.long_units is None else args.long_units
            print(format_with_locale(size, number_format, args.unit, long_units, settings.locale))
        elif args.command == "locales":
            for locale in supported_locales():
                print(locale)
    except (ValueError, OSError) as exc:
        parser.error(str(exc))

    return 0


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if args.config is not None:
        settings = load_settings(args.config, base=settings)
    if args.locale is not None:
        # Explicit locale on the command line is validated, not silently ignored
        settings = settings.replace(locale=args.locale)
    return settings


def _to_size(text: str, settings: Settings) -> ByteSize:
    if text.strip().isdecimal():
        return ByteSize(int(text))
    return parse_with_locale(text, settings.locale)


if __name__ == "__main__":
    sys.exit(main())
