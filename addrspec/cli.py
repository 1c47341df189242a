#!/usr/bin/env python

"""
CLI interface to addrspec
"""

from argparse import ArgumentParser
from configparser import ConfigParser
import logging
import sys
from typing import Iterable, List, Optional

from addrspec import __version__
from addrspec.formatter import find_formatter, available_formatters
from addrspec.lint import AddressLinter

DEFAULT_CONFIG = {
    "output_format": "text",
    "show_notes": "False",
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgumentParser(description="Check email addresses.")
    parser.set_defaults(output_format=None, show_notes=False, verbose=False, debug=False)

    parser.add_argument(
        "addresses",
        nargs="*",
        help="addresses to check; read one per line from stdin if none are given",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        action="store",
        dest="output_format",
        choices=available_formatters(),
        help="output format",
    )
    parser.add_argument(
        "-n",
        "--notes",
        action="store_true",
        dest="show_notes",
        help="show notes about each address",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="explain each note",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        dest="debug",
        help="log debugging information to stderr",
    )
    parser.add_argument(
        "-c", "--config", dest="config_file", help="configuration file"
    )
    parser.add_argument("--version", action="version", version=__version__)
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    config_parser = ConfigParser()
    config_parser.read_dict({"addrspec": DEFAULT_CONFIG})
    if args.config_file and not config_parser.read(args.config_file):
        parser.error(f"can't read configuration file {args.config_file}")
    config = config_parser["addrspec"]

    try:
        show_notes = args.show_notes or config.getboolean("show_notes")
    except ValueError:
        parser.error(f"show_notes must be a boolean, not {config['show_notes']!r}")

    output_format = args.output_format or config.get("output_format")
    if output_format not in available_formatters():
        parser.error(
            f"output_format must be one of {', '.join(available_formatters())}, "
            f"not {output_format!r}"
        )

    formatter = find_formatter(output_format)(
        config,
        output,
        {
            "tty_out": sys.stdout.isatty(),
            "show_notes": show_notes or args.verbose,
            "verbose": args.verbose,
        },
    )

    all_valid = True
    formatter.start_output()
    try:
        for instr in args.addresses or read_addresses(sys.stdin):
            linter = AddressLinter()
            if linter.check(instr) is None:
                all_valid = False
            formatter.feed(instr, linter)
    except UnicodeDecodeError as why:
        formatter.error_output(f"Can't read input: {why}")
        formatter.finish_output()
        return 2
    formatter.finish_output()
    return 0 if all_valid else 1


def read_addresses(lines: Iterable[str]) -> Iterable[str]:
    "One address per line; blank lines are skipped."
    for line in lines:
        line = line.rstrip("\r\n")
        if line:
            yield line


def output(out: str) -> None:
    sys.stdout.write(out)


if __name__ == "__main__":
    sys.exit(main())
