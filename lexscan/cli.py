"""
Command line front end: scan a file and dump its tokens.

Examples:
    lexscan script.lua                      # Lua is the default language
    lexscan --config mylang.json src.txt    # Language from a JSON file
    lexscan --partial broken.lua            # Dump tokens even on error

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ScannerConfig
from .errors import ConfigError, ScanError
from .languages import available_languages, get_language
from .scanner import Scanner
from .data import ScannerData

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexscan",
        description="Scan a source file with a configurable lexer and dump the tokens",
    )
    parser.add_argument("input", help="source file to scan")

    language = parser.add_mutually_exclusive_group()
    language.add_argument("-l", "--language", default="lua",
                          help=f"built-in language ({', '.join(available_languages())}) [default: lua]")
    language.add_argument("-c", "--config", metavar="JSON",
                          help="load the language configuration from a JSON file")

    parser.add_argument("--encoding", default="utf-8",
                        help="encoding of the input file [default: utf-8]")
    parser.add_argument("--partial", action="store_true",
                        help="dump the tokens recognized before a scan error")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s")

    try:
        if args.config is not None:
            config = ScannerConfig.from_json_file(args.config)
        else:
            config = get_language(args.language)
    except ConfigError as err:
        parser.error(str(err.diagnostic).strip())
    except OSError as err:
        parser.error(str(err))

    try:
        with open(args.input, "rb") as f:
            raw = f.read()
    except OSError as err:
        parser.error(str(err))

    data = ScannerData()
    try:
        Scanner().run(raw, config, data, encoding=args.encoding)
    except UnicodeDecodeError as err:
        parser.error(f"cannot decode {args.input} as {args.encoding}: {err}")
    except ScanError as err:
        if args.partial:
            data.dump(sys.stdout)
        print(err.diagnostic.render(data.source, args.input), file=sys.stderr)
        return 1

    data.dump(sys.stdout)
    logger.debug("Dumped %d tokens from %s", len(data), args.input)
    return 0


if __name__ == "__main__":
    sys.exit(main())
