"""
Tests for the command line interface.
"""

import json

from isbn_barcode import generate_eps
from isbn_barcode.__main__ import format_result, main
from isbn_barcode.generator import BarcodeRequest, generate_barcode


class TestMain:
    """Test main() with argv."""

    def test_eps_to_stdout(self, capsys):
        assert main(["9780306406157", "--dpi", "300"]) == 0
        out = capsys.readouterr().out
        assert out == generate_eps("9780306406157", dpi=300)

    def test_json_output(self, capsys):
        assert main(["9780306406157", "--addon", "12345", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["success"] is True
        assert data["error_code"] is None
        assert "% Add-On: 12345" in data["eps_content"]

    def test_invalid_isbn(self, capsys):
        assert main(["9780306406158"]) == 1
        out = capsys.readouterr().out
        assert "Success: False" in out
        assert "Error Code: INVALID_CHECK_DIGIT" in out

    def test_invalid_addon_json(self, capsys):
        assert main(["9780306406157", "--addon", "123", "--json"]) == 1
        assert json.loads(capsys.readouterr().out)["error_code"] == "INVALID_ADDON"

    def test_non_finite_bar_height(self, capsys):
        assert main(["9780306406157", "--bar-height", "nan", "--json"]) == 1
        assert json.loads(capsys.readouterr().out)["error_code"] == "INVALID_SETTING"

    def test_output_file(self, capsys, tmp_path):
        target = tmp_path / "barcode.eps"
        assert main(["9780306406157", "-o", str(target), "--bar-height", "20"]) == 0
        assert "% Bar Height: 20.00000000 mm" in target.read_text(encoding="utf-8")
        assert f"File: {target}" in capsys.readouterr().out

    def test_output_directory(self, capsys, tmp_path):
        assert main(["9780306406157", "--addon", "12345", "-o", str(tmp_path)]) == 0
        assert (tmp_path / "isbn_9780306406157_12345.eps").exists()

    def test_settings(self, capsys):
        assert main(["9780306406157", "--addon-offset", "0.5", "--settings"]) == 0
        out = capsys.readouterr().out
        assert "Settings:" in out
        assert "  Value: 9780306406157" in out
        assert "  Add-On Offset: 0.5000 mm" in out


class TestFormatResult:

    def test_success_without_settings(self):
        result = generate_barcode(BarcodeRequest(isbn="9780306406157"))
        text = format_result(result)
        assert "Message: Barcode generated." in text
        assert "Settings:" not in text
