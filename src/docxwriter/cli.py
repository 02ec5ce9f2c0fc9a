"""Command-line interface for docxwriter.

Usage::

    docxwriter input.md                      # writes input.docx
    docxwriter input.md -o output.docx       # explicit output path
    docxwriter input.md --style academic     # use academic preset
    docxwriter input.md --page-numbers       # add a page-number footer
    docxwriter --list-styles                 # list available presets
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docxwriter import __version__
from docxwriter.converter import Converter
from docxwriter.errors import DocxError
from docxwriter.logger import get_logger, set_verbose
from docxwriter.style_manager import StyleManager

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docxwriter",
        description="Convert Markdown files to Word (.docx) documents.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the Markdown file to convert.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output DOCX file path. Defaults to <input>.docx.",
    )
    parser.add_argument(
        "-s", "--style",
        default="default",
        choices=StyleManager.PRESETS,
        help="Style preset (default: %(default)s).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--page-numbers",
        action="store_true",
        help="Add a footer with the current page number and page count.",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="List available style presets and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_styles:
        print("Available style presets:")
        for preset in StyleManager.PRESETS:
            print(f"  - {preset}")
        return 0

    if not args.input:
        parser.error("the following argument is required: input")

    set_verbose(args.verbose)

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.with_suffix(".docx")

    if args.verbose:
        print(f"Input:  {input_path}")
        print(f"Output: {output_path}")
        print(f"Style:  {args.style}")

    try:
        converter = Converter(style_preset=args.style, page_numbers=args.page_numbers)
        converter.convert_file(input_path, output_path, encoding=args.encoding)
    except (DocxError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Done. {output_path.stat().st_size} bytes written.")
    else:
        print(f"Converted: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
