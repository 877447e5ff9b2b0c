"""
CLI interface for the ISBN barcode maker.

Usage:
    python -m isbn_barcode <isbn> [options]

Options:
    --addon CODE          5-digit add-on (EAN-5)
    --bar-height MM       Full guard-bar height in mm (default 15)
    --dpi N               Output DPI recorded in the document (default 600)
    --addon-offset MM     Vertical shift of the add-on block in mm
    -o, --output PATH     Write the EPS to PATH (a directory gets the default name)
    --json                Print the result record as JSON
    --settings            Print the %SETTINGS block of the generated document
    -v, --verbose         Debug logging
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .generator import (
    BarcodeRequest,
    BarcodeResult,
    DEFAULT_BAR_HEIGHT_MM,
    DEFAULT_DPI,
    DEFAULT_ADDON_OFFSET_MM,
    default_filename,
    generate_barcode,
    save_eps,
)
from .formatters.eps_reader import read_settings


def format_result(result: BarcodeResult, show_settings: bool = False) -> str:
    """Format a result for terminal display."""
    lines = [
        "=" * 60,
        "ISBN Barcode Result",
        "=" * 60,
        f"Success: {result.success}",
        f"Message: {result.message}",
    ]

    if result.error_code:
        lines.append(f"Error Code: {result.error_code.value}")
    if result.file_path:
        lines.append(f"File: {result.file_path}")

    if show_settings and result.eps_content:
        lines.extend([
            "",
            "Settings:",
            "-" * 40,
        ])
        for key, value in read_settings(result.eps_content).items():
            lines.append(f"  {key}: {value}")

    return '\n'.join(lines)


def _resolve_output(output: str, request: BarcodeRequest) -> Path:
    path = Path(output)
    if path.is_dir() or output.endswith(("/", "\\")):
        return path / default_filename(request.isbn, request.addon)
    return path


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='isbn_barcode',
        description='Generate EPS barcodes for ISBN-13 with optional EAN-5 add-on'
    )

    parser.add_argument(
        'isbn',
        help='13-digit ISBN / EAN-13'
    )

    parser.add_argument(
        '--addon',
        default='',
        help='5-digit add-on code (EAN-5)'
    )

    parser.add_argument(
        '--bar-height',
        type=float,
        default=DEFAULT_BAR_HEIGHT_MM,
        help='Full guard-bar height in mm'
    )

    parser.add_argument(
        '--dpi',
        type=int,
        default=DEFAULT_DPI,
        help='Output DPI recorded in the document metadata'
    )

    parser.add_argument(
        '--addon-offset',
        type=float,
        default=DEFAULT_ADDON_OFFSET_MM,
        help='Vertical offset of the add-on block in mm'
    )

    parser.add_argument(
        '-o', '--output',
        default=None,
        help='Write the EPS to this file or directory instead of stdout'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output the result record as JSON'
    )

    parser.add_argument(
        '--settings',
        action='store_true',
        help='Show the settings block of the generated document'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    request = BarcodeRequest(
        isbn=args.isbn,
        addon=args.addon,
        bar_height_mm=args.bar_height,
        dpi=args.dpi,
        addon_offset_mm=args.addon_offset,
    )
    result = generate_barcode(request)

    if result.success and args.output:
        saved = save_eps(result.eps_content, _resolve_output(args.output, request))
        if saved.success:
            saved.eps_content = result.eps_content
        result = saved

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif result.success and not args.output and not args.settings:
        sys.stdout.write(result.eps_content)
    else:
        print(format_result(result, show_settings=args.settings))

    return 0 if result.success else 1


if __name__ == '__main__':
    sys.exit(main())
