#!/usr/bin/env python3
"""
Simple CLI for generating a folder of barcodes from a CSV file.

Usage:
    python make_barcodes.py books.csv out/

The CSV needs an "isbn" column; "addon", "bar_height_mm", "dpi" and
"addon_offset_mm" are optional.

Output:
    One EPS per row in the output folder, and a JSON summary on stdout
"""

import json
import sys

from isbn_barcode.batch import load_batch_csv, run_batch


def main():
    """Main CLI entry point."""
    if len(sys.argv) < 3:
        print("Usage: python make_barcodes.py <input.csv> <output_dir>")
        print("\nExample:")
        print('  python make_barcodes.py books.csv out/')
        sys.exit(1)

    csv_path, output_dir = sys.argv[1], sys.argv[2]

    try:
        df = load_batch_csv(csv_path)
    except (OSError, ValueError) as e:
        # Output error as JSON for consistency
        error_output = {
            "error": str(e),
            "input": csv_path
        }
        print(json.dumps(error_output, ensure_ascii=False, indent=2))
        sys.exit(1)

    summary = run_batch(df, output_dir)
    print(json.dumps(summary.to_dict(orient="records"), ensure_ascii=False, indent=2))

    if not summary["success"].all():
        sys.exit(1)


if __name__ == "__main__":
    main()
