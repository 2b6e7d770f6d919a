"""Tests for the export module."""

import os
import tempfile

import pytest
from PIL import Image, ImageFont

from treapviz.export import (
    BRANCH_GLYPH_FONTS,
    TreeExporter,
    covers_branch_glyphs,
    measure_cell,
)

SAMPLE = " B\n ╱╲\nA C"


def first_loadable_font(size):
    for candidate in BRANCH_GLYPH_FONTS:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    return None


class TestSaveTxt:
    """Tests for text export."""

    def test_writes_utf8(self, tmp_path):
        path = tmp_path / "tree.txt"
        TreeExporter().save_txt(SAMPLE, str(path))
        assert path.read_text(encoding="utf-8") == SAMPLE

    def test_empty(self, tmp_path):
        path = tmp_path / "empty.txt"
        TreeExporter().save_txt("", str(path))
        assert path.read_text(encoding="utf-8") == ""


class TestFonts:
    """Tests for font selection and cell measurement."""

    def test_cell_fits_branch_glyphs(self):
        font = TreeExporter().load_font(16)
        width, height = measure_cell(font)

        for glyph in ("╱", "╲"):
            assert font.getlength(glyph) <= width
            assert font.getbbox(glyph)[3] <= height

    def test_known_font_covers_glyphs(self):
        font = first_loadable_font(16)
        if font is None:
            pytest.skip("no monospace font with box drawing installed")
        assert covers_branch_glyphs(font)

    def test_selected_font_covers_glyphs_when_available(self):
        if first_loadable_font(16) is None:
            pytest.skip("no monospace font with box drawing installed")
        assert covers_branch_glyphs(TreeExporter().load_font(16))

    def test_unknown_font_falls_back(self):
        font = TreeExporter(default_font="No Such Font 123").load_font(16)
        assert font.getlength("M") > 0


class TestSavePng:
    """Tests for PNG export."""

    def test_creates_image(self):
        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            output_path = f.name

        try:
            TreeExporter().save_png(SAMPLE, output_path)
            assert os.path.exists(output_path)
            with Image.open(output_path) as img:
                assert img.format == "PNG"
        finally:
            if os.path.exists(output_path):
                os.unlink(output_path)

    def test_size_follows_block(self, tmp_path):
        """Image is the block's cells plus padding on each side."""
        exporter = TreeExporter()
        cell_width, cell_height = measure_cell(exporter.load_font(16 * 2))
        path = tmp_path / "tree.png"

        exporter.save_png(SAMPLE, str(path), padding=5, scale=2)

        with Image.open(path) as img:
            assert img.size == (3 * cell_width + 20, 3 * cell_height + 20)

    def test_taller_block_taller_image(self, tmp_path):
        exporter = TreeExporter()
        short = tmp_path / "short.png"
        tall = tmp_path / "tall.png"

        exporter.save_png("A", str(short), scale=1)
        exporter.save_png("  C\n ╱\n B\n╱\nA", str(tall), scale=1)

        with Image.open(short) as a, Image.open(tall) as b:
            assert b.size[1] > a.size[1]
            assert b.size[0] > a.size[0]

    def test_glyphs_are_drawn(self, tmp_path):
        path = tmp_path / "glyph.png"
        TreeExporter().save_png("╱", str(path), padding=0, scale=1)

        with Image.open(path) as img:
            darkest, _ = img.convert("L").getextrema()
            assert darkest < 255

    def test_colors(self, tmp_path):
        path = tmp_path / "dark.png"
        TreeExporter().save_png(SAMPLE, str(path), bg_color="#000000", fg_color="#FFFFFF")

        with Image.open(path) as img:
            assert img.convert("RGB").getpixel((0, 0)) == (0, 0, 0)

    def test_empty_block(self, tmp_path):
        path = tmp_path / "empty.png"
        TreeExporter().save_png("", str(path), padding=0)

        with Image.open(path) as img:
            assert img.size == (1, 1)
