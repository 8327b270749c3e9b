"""CLI: showexpr [FILE] [--format repr|json|source]"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ParserConfig, CLI_DEFAULT_MAX_DEPTH, MAX_DEPTH_ENV
from .lexer.errors import ShowExprError
from .parser import parse_string, dump_json, to_source


logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showexpr",
        description="Parse show-style output into an expression tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
    showexpr dump.txt                      # Print the tree as Python reprs
    echo 'Just [1, 2]' | showexpr --format json
    showexpr dump.txt --warnings           # Also report unbalanced input

The nesting limit defaults to ${MAX_DEPTH_ENV}, or {CLI_DEFAULT_MAX_DEPTH}.
        """
    )

    parser.add_argument('file', nargs='?', default='-',
                        help='Input file (default: stdin)')
    parser.add_argument('--format', choices=('repr', 'json', 'source'), default='repr',
                        help='Output format (default: repr)')
    parser.add_argument('--max-depth', type=int, default=None,
                        help='Maximum bracket nesting depth')
    parser.add_argument('--warnings', action='store_true',
                        help='Print warnings for unbalanced or unterminated input')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")

    return parser


def _read_input(path: str) -> str:
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the showexpr command"""

    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ParserConfig.from_env(
            max_depth=args.max_depth,
            filename="<stdin>" if args.file == '-' else args.file,
        )
        if config.max_depth is None:
            config = config.with_max_depth(CLI_DEFAULT_MAX_DEPTH)

        source = _read_input(args.file)
        result = parse_string(source, config)

    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 1
    except UnicodeDecodeError as e:
        logger.error("%s is not valid UTF-8: %s", args.file, e)
        return 1
    except ShowExprError as e:
        # ConfigError and ParseError both land here
        print(str(e), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    if args.format == 'json':
        print(dump_json(result.exprs))
    elif args.format == 'source':
        print(to_source(result.exprs))
    else:
        for expr in result.exprs:
            print(repr(expr))

    if args.warnings:
        for warning in result.warnings:
            print(str(warning), end="", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
