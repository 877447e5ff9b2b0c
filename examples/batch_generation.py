"""
Demo: Batch Generation

Builds a small batch in memory, writes the barcodes to a temporary folder
and prints the summary table.
"""

import io
import tempfile

from isbn_barcode.batch import load_batch_csv, run_batch


BATCH_CSV = """isbn,addon,bar_height_mm,dpi,addon_offset_mm
9780306406157,,,,
9780306406157,12345,20,1200,0.3
9788969930460,13590,,,
9780306406158,,,,
"""


def demo_batch():
    print("=" * 80)
    print("  BATCH GENERATION DEMO")
    print("=" * 80)

    df = load_batch_csv(io.StringIO(BATCH_CSV))
    with tempfile.TemporaryDirectory() as out_dir:
        summary = run_batch(df, out_dir)
        print(summary[["isbn", "addon", "success", "error_code", "message"]].to_string(index=False))


if __name__ == "__main__":
    demo_batch()
