"""
CLI - Command-line interface for the JSON formatter.

Commands:
- format: Repair, validate and re-indent a JSON file or stdin
- specs: List the available spec profiles
- example: Print a sample document to try the formatter on
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .api import build_pipeline
from .core.config import AppConfig, load_config
from .core.specs import DEFAULT_SPEC_TABLE, SKIP_VALIDATION
from .formatter.canonicalizer import IndentStyle
from .formatter.pipeline import FormatRequest, FormatFailure, trim_input
from .utils.logger import setup_logging, get_logger, LogContext

logger = get_logger(__name__)


EXAMPLE_DOCUMENT = {
    "store": {
        "book": [
            {
                "category": "reference",
                "author": "Nigel Rees",
                "title": "Sayings of the Century",
                "price": 8.95,
            },
            {
                "category": "fiction",
                "author": "Evelyn Waugh",
                "title": "Sword of Honour",
                "price": 12.99,
            },
            {
                "category": "fiction",
                "author": "J. R. R. Tolkien",
                "title": "The Lord of the Rings",
                "isbn": "0-395-19395-8",
                "price": 22.99,
            },
        ],
        "bicycle": {
            "color": "red",
            "price": 19.95,
        },
    }
}


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    DIM = "\033[2m"


def color(text: str, color_code: str) -> str:
    """Apply color to text when stderr is a terminal."""
    if not sys.stderr.isatty():
        return text
    return f"{color_code}{text}{Colors.RESET}"


def print_messages(title: str, items: List[str], color_code: str) -> None:
    """Print a titled bullet list to stderr."""
    if not items:
        return
    print(color(title, Colors.BOLD + color_code), file=sys.stderr)
    for item in items:
        print(f"  {color('•', color_code)} {item}", file=sys.stderr)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="jsonfmt",
        description="Repair, validate and format JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s format data.json -t "4 Space Tab"
  %(prog)s format broken.json --fix -s "RFC 4627" -o fixed.json
  cat data.json | %(prog)s format - -t Compact
  %(prog)s specs
        """,
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (YAML)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    fmt_parser = subparsers.add_parser("format", help="Format a JSON document")
    fmt_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input JSON file, or - for stdin (default: -)",
    )
    fmt_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output JSON file (default: stdout)",
    )
    fmt_parser.add_argument(
        "-t", "--template",
        help=f"Indentation template: {', '.join(IndentStyle.names())}",
    )
    fmt_parser.add_argument(
        "-s", "--spec",
        choices=DEFAULT_SPEC_TABLE.names(),
        help="Specification to validate against",
    )
    fmt_parser.add_argument(
        "--fix",
        action="store_true",
        default=None,
        help="Attempt to repair common mistakes before parsing",
    )
    fmt_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when spec validation reports errors",
    )

    subparsers.add_parser("specs", help="List specification profiles")
    subparsers.add_parser("example", help="Print an example JSON document")

    return parser.parse_args(argv)


def read_input(source: str) -> str:
    """Read input text from a file path or stdin."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    if path.suffix.lower() != ".json":
        logger.warning(f"Input file does not have a .json extension: {path}")
    return path.read_text(encoding="utf-8-sig")


def format_command(args: argparse.Namespace, config: AppConfig) -> int:
    """
    Run the format pipeline for the CLI.

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    text = read_input(args.input)
    if not trim_input(text):
        print(color("Please provide some JSON data", Colors.RED), file=sys.stderr)
        return 1

    request = FormatRequest(
        text=text,
        spec_name=args.spec or config.formatter.default_spec,
        indent_style=args.template or config.formatter.default_template,
        repair=config.formatter.repair if args.fix is None else args.fix,
    )

    pipeline = build_pipeline(config)
    with LogContext(logger, "Formatting JSON", spec=request.spec_name, template=request.indent_style):
        result = pipeline.run(request)

    if isinstance(result, FormatFailure):
        print(color("✗ JSON Parse Error", Colors.BOLD + Colors.RED), file=sys.stderr)
        print_messages("Error:", [result.error], Colors.RED)
        print_messages("Attempted Fixes:", result.fixes, Colors.BLUE)
        print_messages("Warnings:", result.warnings, Colors.YELLOW)
        return 1

    if result.valid:
        suffix = f" ({result.spec})" if result.spec else ""
        print(color(f"✓ Valid JSON{suffix}", Colors.BOLD + Colors.GREEN), file=sys.stderr)
    else:
        print(color("✗ Invalid JSON", Colors.BOLD + Colors.RED), file=sys.stderr)

    print_messages("Fixes Applied:", result.fixes, Colors.GREEN)
    print_messages("Errors:", result.errors, Colors.RED)
    print_messages("Warnings:", result.warnings, Colors.YELLOW)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(result.formatted + "\n", encoding="utf-8")
        logger.info(f"Output written to: {args.output}")
    else:
        print(result.formatted)

    if args.strict and not result.valid:
        return 1
    return 0


def specs_command() -> int:
    """Print the spec profiles and their flags."""
    for profile in DEFAULT_SPEC_TABLE:
        flags = ", ".join(
            f"{key}={value}" for key, value in profile.to_dict().items() if key != "name"
        )
        print(f"{profile.name}: {flags}")
    print(f"{SKIP_VALIDATION}: no checks")
    return 0


def example_command() -> int:
    print(json.dumps(EXAMPLE_DOCUMENT, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(color(f"[ERROR] {e}", Colors.RED), file=sys.stderr)
        return 1

    log_level = "DEBUG" if args.verbose else config.logging.level
    setup_logging(
        level=log_level,
        format_string=config.logging.format,
        log_file=config.logging.file,
    )

    if args.command is None:
        print("usage: jsonfmt {format,specs,example} ...", file=sys.stderr)
        return 1

    try:
        if args.command == "format":
            return format_command(args, config)
        elif args.command == "specs":
            return specs_command()
        elif args.command == "example":
            return example_command()
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
