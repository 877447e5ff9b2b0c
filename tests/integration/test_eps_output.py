"""
Tests for EPS document output.

Ensures the generated document is byte-stable:
- Header with integer and high-resolution bounding boxes
- %SETTINGS block (Add-On line only when an add-on is present)
- Fixed-precision bar and text lines in emission order
- Readable back by eps_reader and renderable as SVG
"""

import pytest
from isbn_barcode import eps_to_svg, generate_eps, read_document, read_settings


ISBN = "9780306406157"


@pytest.fixture
def eps():
    return generate_eps(ISBN, bar_height_mm=15.0, dpi=300)


@pytest.fixture
def eps_addon():
    return generate_eps(ISBN, addon="12345", bar_height_mm=15.0, dpi=300)


class TestHeader:
    """Test the EPS header and settings block."""

    def test_header_lines(self, eps):
        lines = eps.split("\n")
        assert lines[:6] == [
            "%!PS-Adobe-2.0 EPSF-1.2",
            "%%BoundingBox: 0 0 106 48",
            "%%HiResBoundingBox: 0 0 105.70394 47.03528",
            "%%Creator: ISBN Barcode Maker",
            "%%EndComments",
            "",
        ]

    def test_settings_block(self, eps):
        lines = eps.split("\n")
        start = lines.index("%SETTINGS")
        assert lines[start:start + 14] == [
            "%SETTINGS",
            "% Color: CMYK",
            "% Background: 0.000 0.000 0.000 0.000",
            "% Foreground: 0.000 0.000 0.000 1.000",
            "% Human Readable: Yes",
            "% Text Font: Arial",
            "% Output DPI: 300",
            "% Symbology: ISBN",
            "% Value: 9780306406157",
            "% X-Dimension: 0.33000000 mm",
            "% Bar Height: 15.00000000 mm",
            "% Add-On Offset: 0.0000 mm",
            "",
            "/bd {bind def} bind def",
        ]

    def test_addon_settings_line(self, eps_addon):
        settings = read_settings(eps_addon)
        assert settings["Add-On"] == "12345"
        assert "% Add-On: 12345" in eps_addon.split("\n")

    def test_no_addon_line_without_addon(self, eps):
        assert "Add-On:" not in eps
        assert "Add-On" not in read_settings(eps)

    def test_addon_bounding_box(self, eps_addon):
        assert "%%BoundingBox: 0 0 162 48\n" in eps_addon
        assert "%%HiResBoundingBox: 0 0 161.88661 47.03528\n" in eps_addon

    def test_graphics_state(self, eps):
        lines = eps.split("\n")
        assert "2.83464567 2.83464567 sc" in lines
        assert "0.000 0.000 0.000 1.000 setcmykcolor" in lines
        assert "/ArialMT findfont 3.1750000 scalefont setfont" in lines

    def test_dpi_only_changes_metadata(self):
        low = generate_eps(ISBN, dpi=300).split("\n")
        high = generate_eps(ISBN, dpi=1200).split("\n")
        diff = [(a, b) for a, b in zip(low, high) if a != b]
        assert diff == [("% Output DPI: 300", "% Output DPI: 1200")]


class TestPrimitives:
    """Test bar and text lines."""

    def test_first_text_is_leading_digit(self, eps):
        body = eps.split("setfont\n", 1)[1].split("\n")
        assert body[0] == "n 0.7725 0.0847 m (9) s c"

    def test_start_guard_bar(self, eps):
        body = eps.split("setfont\n", 1)[1].split("\n")
        assert body[1] == "n 3.6300 1.0930 m 3.6300 16.0930 l 3.9600 16.0930 l 3.9600 1.0930 l f c"

    def test_first_data_bar(self, eps):
        assert "n 4.9500 2.7430 m 4.9500 16.0930 l 5.2800 16.0930 l 5.2800 2.7430 l f c\n" in eps

    def test_end_guard_bar(self, eps):
        assert "n 34.6500 1.0930 m 34.6500 16.0930 l 34.9800 16.0930 l 34.9800 1.0930 l f c\n" in eps

    def test_primitive_counts(self, eps):
        lines = eps.split("\n")
        assert sum(1 for l in lines if l.endswith(" l f c")) == 51
        assert sum(1 for l in lines if l.endswith(" s c")) == 13

    def test_group_digits(self, eps):
        assert "n 4.8225 0.0847 m (7) s c\n" in eps
        assert "n 20.3325 0.0847 m (4) s c\n" in eps

    def test_addon_primitives(self, eps_addon):
        lines = eps_addon.split("\n")
        assert sum(1 for l in lines if l.endswith(" l f c")) == 51 + 22
        assert sum(1 for l in lines if l.endswith(" s c")) == 18
        assert "n 37.2900 1.0930 m 37.2900 12.5033 l 37.6200 12.5033 l 37.6200 1.0930 l f c" in lines
        assert "n 38.8125 12.9180 m (1) s c" in lines

    def test_trailer(self, eps):
        assert eps.endswith("l f c\nshowpage\n")

    def test_deterministic(self):
        first = generate_eps(ISBN, addon="12345", bar_height_mm=22.86, dpi=600, addon_offset_mm=0.3)
        second = generate_eps(ISBN, addon="12345", bar_height_mm=22.86, dpi=600, addon_offset_mm=0.3)
        assert first == second


class TestReadBack:
    """Test eps_reader and the SVG preview."""

    def test_read_settings(self, eps):
        settings = read_settings(eps)
        assert settings["Value"] == ISBN
        assert settings["Output DPI"] == "300"
        assert settings["Bar Height"] == "15.00000000 mm"
        assert settings["Human Readable"] == "Yes"

    def test_read_document(self, eps_addon):
        doc = read_document(eps_addon)
        assert doc.bounding_box == (162, 48)
        assert doc.hires_bounding_box == pytest.approx((161.88661, 47.03528))
        assert doc.scale == pytest.approx(2.83464567)
        assert doc.font_size == pytest.approx(3.175)
        assert len(doc.bars) == 73
        assert "".join(t.text for t in doc.texts) == ISBN + "12345"
        assert doc.bars[0].width == pytest.approx(0.33)
        assert doc.bars[0].top == pytest.approx(16.093)

    def test_read_document_without_header(self):
        doc = read_document("not an eps")
        assert doc.bounding_box is None
        assert doc.bars == []
        assert doc.settings == {}

    def test_svg_preview(self, eps):
        svg = eps_to_svg(eps)
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert svg.endswith("</svg>")
        assert svg.count('fill="#000000"/>') == 51
        assert svg.count("<text ") == 13

    def test_svg_preview_empty_document(self):
        assert eps_to_svg("") == ""
