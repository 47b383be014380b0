"""Tests for furman_plots.export."""

import json
import logging

import pytest

from furman_plots.colors import Color
from furman_plots.errors import UnknownPaletteError, UnsupportedFormatError
from furman_plots.export import ExportFormat, export_palette, to_hsl
from furman_plots.palettes import PALETTE_TABLE


class TestHex:
    @pytest.mark.parametrize("name", list(PALETTE_TABLE))
    def test_matches_stored_colors(self, name):
        lines = export_palette(name, "hex").splitlines()
        assert lines == PALETTE_TABLE[name].hex

    def test_interpolated(self):
        lines = export_palette("sequential1", "hex", n=5).splitlines()
        assert len(lines) == 5
        assert lines[0] == "#aadeeb"
        assert lines[-1] == "#4169e1"


class TestRgb:
    def test_format(self):
        assert export_palette("cool", "rgb").splitlines() == [
            "rgb(102, 153, 51)",
            "rgb(170, 222, 235)",
            "rgb(84, 88, 90)",
        ]


class TestHsl:
    def test_achromatic(self):
        assert to_hsl(Color("#c0c0c0")) == (0, 0, 75)
        assert to_hsl(Color("#000000")) == (0, 0, 0)

    def test_primary(self):
        assert to_hsl(Color("#ff0000")) == (0, 100, 50)
        assert to_hsl(Color("#0000ff")) == (240, 100, 50)

    def test_brand_purple(self):
        assert to_hsl(Color("#582c83")) == (270, 50, 34)

    def test_halves_round_up(self):
        # hue is exactly 0.5 degrees
        assert to_hsl(Color.from_rgb(120, 1, 0)) == (1, 100, 24)
        # saturation is exactly 2.5%
        assert to_hsl(Color.from_rgb(41, 40, 39)) == (30, 3, 16)

    def test_format(self):
        lines = export_palette("gray", "hsl").splitlines()
        assert lines[1] == "hsl(0, 0%, 96%)"


class TestCss:
    def test_cool_block(self):
        css = export_palette("cool", "css")
        assert css.startswith(":root {")
        assert css.endswith("}")
        props = [line for line in css.splitlines() if "--furman-" in line]
        assert props == [
            "  --furman-green: #669933;",
            "  --furman-light-blue: #aadeeb;",
            "  --furman-gray: #54585a;",
        ]

    def test_unnamed_colors(self):
        css = export_palette("sequential2", "css", n=4)
        assert "--furman-sequential2_1: #f5f5f5;" in css
        assert "--furman-sequential2_4: #201547;" in css

    def test_accepts_enum(self):
        assert export_palette("cool", ExportFormat.CSS) == export_palette("cool", "CSS")


class TestJson:
    def test_structure(self):
        data = json.loads(export_palette("evaluate", "json"))
        assert data == {
            "palette_name": "evaluate",
            "colors": {"red": "#e3322b", "yellow": "#f2be1a", "green": "#669933"},
        }

    def test_interpolated_keys(self):
        data = json.loads(export_palette("divergent1", "json", n=5))
        assert list(data["colors"]) == [f"divergent1_{i}" for i in range(1, 6)]


class TestErrors:
    def test_unsupported_format(self):
        with pytest.raises(UnsupportedFormatError) as exc:
            export_palette("main", "xml")
        assert "css" in str(exc.value)

    def test_unknown_palette(self):
        with pytest.raises(UnknownPaletteError):
            export_palette("nonexistent", "hex")


class TestWriteFile:
    def test_writes_and_returns_text(self, tmp_path, caplog):
        path = tmp_path / "cool.css"
        with caplog.at_level(logging.INFO, logger="furman_plots.export"):
            text = export_palette("cool", "css", path=path)
        assert path.read_text(encoding="utf-8") == text + "\n"
        assert "cool" in caplog.text

    def test_bad_format_writes_nothing(self, tmp_path):
        path = tmp_path / "out.txt"
        with pytest.raises(UnsupportedFormatError):
            export_palette("cool", "pdf", path=path)
        assert not path.exists()
