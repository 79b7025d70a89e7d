"""Command-line interface for regex-lexer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from regex_lexer.config.loader import load_config
from regex_lexer.core.errors import LexerError, NoMatchError
from regex_lexer.core.tokens import Token
from regex_lexer.editor.lexer import RuleSetLexer

logger = logging.getLogger("regex_lexer")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_NO_MATCH = 2


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="regex-lexer",
        description="Tokenize text with an ordered table of regular expression rules",
        epilog="Example: regex-lexer --rules calc.yaml input.txt",
    )

    parser.add_argument(
        "--rules",
        "-r",
        type=Path,
        required=True,
        metavar="FILE",
        help="YAML rule file",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in directory of additional rule files",
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=("text", "json", "color"),
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--theme",
        "-t",
        metavar="NAME",
        help="Theme used by --format color",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version="%(prog)s 0.1.0",
    )

    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="File to tokenize (default: stdin)",
    )

    return parser.parse_args(args)


def format_token(token: Token) -> str:
    """Format a token as a tab-separated line."""
    return f"{token.label}\t[{token.start}, {token.end})\t{token.text!r}"


def token_to_dict(token: Token) -> dict[str, object]:
    return {"label": token.label, "start": token.start, "end": token.end, "text": token.text}


def write_tokens(tokens: list[Token], output_format: str, out: TextIO) -> None:
    """Write collected tokens in the requested format."""
    if output_format == "json":
        json.dump([token_to_dict(token) for token in tokens], out, indent=2)
        out.write("\n")
    else:
        for token in tokens:
            out.write(format_token(token) + "\n")


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load rules
    try:
        config = load_config(parsed.rules, parsed.config_dir)
        ruleset = config.build_ruleset()
    except (LexerError, OSError) as e:
        print(f"Error loading rules: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    # Read input
    try:
        source = parsed.input.read_text(encoding="utf-8") if parsed.input else sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if parsed.format == "color":
        lexer = RuleSetLexer(ruleset, config.get_theme(parsed.theme))
        fragments, error = lexer.scan_fragments(source)
        print_formatted_text(FormattedText(fragments), style=lexer.get_style(), end="")
        if error is not None:
            print(f"Error: {error}", file=sys.stderr)
            return EXIT_NO_MATCH
        return EXIT_OK

    tokens: list[Token] = []
    status = EXIT_OK
    try:
        for token in ruleset.scan(source):
            tokens.append(token)
    except NoMatchError as e:
        logger.debug("Scan stopped after %d tokens", len(tokens))
        print(f"Error: {e}", file=sys.stderr)
        status = EXIT_NO_MATCH

    write_tokens(tokens, parsed.format, sys.stdout)
    return status


if __name__ == "__main__":
    sys.exit(main())
