"""
Demo: Basic Barcode Generation

Generates an ISBN barcode with and without an EAN-5 add-on, shows the
settings block and geometry, and demonstrates the failure results.
"""

from isbn_barcode import (
    BarcodeRequest,
    encode_ean13,
    encode_ean5,
    ean5_check_digit,
    generate_barcode,
    read_document,
    read_settings,
)


def demo_generation():
    """Generate the same ISBN with and without an add-on."""

    print("=" * 80)
    print("  BARCODE GENERATION DEMO")
    print("=" * 80)

    requests = [
        ("ISBN only", BarcodeRequest(isbn="9780306406157", dpi=300)),
        ("ISBN + add-on", BarcodeRequest(isbn="9780306406157", addon="12345")),
        ("Add-on raised 0.5 mm", BarcodeRequest(isbn="9780306406157", addon="12345", addon_offset_mm=0.5)),
    ]

    for title, request in requests:
        print(f"\n{title}")
        print("-" * 80)
        result = generate_barcode(request)
        print(f"Result: {result.message}")

        doc = read_document(result.eps_content)
        print(f"Bounding box: {doc.bounding_box}  (hi-res {doc.hires_bounding_box})")
        print(f"Bars: {len(doc.bars)}  Digits: {''.join(t.text for t in doc.texts)}")
        print("\nSettings:")
        for key, value in read_settings(result.eps_content).items():
            print(f"  {key:15s}: {value}")


def demo_modules():
    """Show the raw module sequences."""

    print("\n\n" + "=" * 80)
    print("  MODULE SEQUENCES")
    print("=" * 80)

    ean13 = encode_ean13("9780306406157")
    ean5 = encode_ean5("12345")
    print(f"\nEAN-13 ({len(ean13)} modules): {''.join(map(str, ean13))}")
    print(f"EAN-5  ({len(ean5)} modules): {''.join(map(str, ean5))}")
    print(f"EAN-5 check digit for 12345: {ean5_check_digit('12345')}")


def demo_failures():
    """Show failure results."""

    print("\n\n" + "=" * 80)
    print("  FAILURES")
    print("=" * 80)

    for isbn, addon in [("9780306406158", ""), ("978030640615", ""), ("9780306406157", "123")]:
        result = generate_barcode(BarcodeRequest(isbn=isbn, addon=addon))
        print(f"\n{isbn!r} + {addon!r}: [{result.error_code.value}] {result.message}")


if __name__ == "__main__":
    demo_generation()
    demo_modules()
    demo_failures()
