"""
File export functionality for rendered trees.

This module handles saving rendered trees to files:
- Text files (.txt) - The block exactly as rendered
- PNG images - Every character drawn into a fixed grid cell, so branch
  diagonals stay on the columns they occupy in the text

Fonts are chosen for their coverage of the branch glyphs; a font without
them would draw the diagonals as placeholder boxes.
"""

import math
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .debug import BlockInspector
from .geometry import BRANCH_CHARS

# Monospace fonts known to ship U+2571/U+2572
BRANCH_GLYPH_FONTS = [
    "DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "NotoSansMono-Regular.ttf",
    "/usr/share/fonts/truetype/noto/NotoSansMono-Regular.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "/Library/Fonts/Andale Mono.ttf",
    "C:/Windows/Fonts/consola.ttf",
    "C:/Windows/Fonts/CascadiaMono.ttf",
]

# Characters whose extents decide the grid cell
CELL_SAMPLE = "Mg0,:" + "".join(BRANCH_CHARS.values())


def _glyph_image(font, char: str) -> Image.Image:
    right, bottom = font.getbbox(char)[2:]
    img = Image.new("L", (max(1, math.ceil(right)), max(1, math.ceil(bottom))), 0)
    ImageDraw.Draw(img).text((0, 0), char, font=font, fill=255)
    return img


def covers_branch_glyphs(font) -> bool:
    """
    Check whether a font draws both branch glyphs.

    Missing glyphs all render as the same placeholder, so a font covers
    them when the two diagonals produce different, non-blank images.
    """
    left = _glyph_image(font, BRANCH_CHARS["left"])
    right = _glyph_image(font, BRANCH_CHARS["right"])
    if left.getbbox() is None or right.getbbox() is None:
        return False
    return left.tobytes() != right.tobytes()


def measure_cell(font) -> Tuple[int, int]:
    """
    Size of one character cell as (width, height) in pixels.

    The width is the widest advance among label and branch characters; the
    height reaches from the drawing origin to the lowest ink, so stacked
    diagonals meet without clipping.
    """
    width = max(font.getlength(char) for char in CELL_SAMPLE)
    height = max(font.getbbox(char)[3] for char in CELL_SAMPLE)
    return max(1, math.ceil(width)), max(1, math.ceil(height))


class TreeExporter:
    """
    Exports rendered trees to various file formats.

    Attributes:
        default_font: Default font name or path for PNG export.
    """

    def __init__(self, default_font: Optional[str] = None):
        """
        Initialize the exporter.

        Args:
            default_font: Default font name or path for PNG export
                (e.g., "DejaVuSansMono.ttf").
        """
        self.default_font = default_font

    def save_txt(self, rendered: str, filename: str) -> None:
        """
        Save a rendered tree to a text file.

        Args:
            rendered: The rendered tree.
            filename: Output filename (should end in .txt).
        """
        Path(filename).write_text(rendered, encoding="utf-8")

    def save_png(
        self,
        rendered: str,
        filename: str,
        font_size: int = 16,
        bg_color: str = "#FFFFFF",
        fg_color: str = "#000000",
        padding: int = 20,
        font: Optional[str] = None,
        scale: int = 2,
    ) -> None:
        """
        Save a rendered tree as a PNG image.

        The image is exactly the block's width by height in grid cells plus
        padding. Blank cells are skipped.

        Args:
            rendered: The rendered tree.
            filename: Output filename (should end in .png).
            font_size: Font size in points (higher = higher resolution).
            bg_color: Background color as hex string (e.g., "#FFFFFF").
            fg_color: Foreground/text color as hex string (e.g., "#000000").
            padding: Padding around the tree in pixels.
            font: Font name or path (overrides default_font if provided).
            scale: Resolution multiplier for crisp output (default 2 for retina).

        Example:
            >>> exporter = TreeExporter()
            >>> exporter.save_png(pretty(root), "treap.png", font_size=24)
        """
        block = BlockInspector(rendered)
        loaded_font = self.load_font(font_size * scale, font or self.default_font)
        cell_width, cell_height = measure_cell(loaded_font)
        margin = padding * scale

        size = (
            max(1, block.width * cell_width + 2 * margin),
            max(1, block.height * cell_height + 2 * margin),
        )
        img = Image.new("RGB", size, bg_color)
        draw = ImageDraw.Draw(img)

        for y, row in enumerate(block.rows):
            for x, char in enumerate(row):
                if char.isspace():
                    continue
                draw.text(
                    (margin + x * cell_width, margin + y * cell_height),
                    char,
                    font=loaded_font,
                    fill=fg_color,
                )

        img.save(Path(filename), "PNG")

    def load_font(self, font_size: int, font_name: Optional[str] = None):
        """
        Load the font used to draw a tree.

        The requested font wins when it loads at all. Otherwise the first
        known font that covers the branch glyphs is used, then any font that
        loaded, then Pillow's default.

        Args:
            font_size: Font size in pixels.
            font_name: Optional font name or path.

        Returns:
            A PIL font object.
        """
        candidates: List[str] = [font_name] if font_name else []
        candidates.extend(BRANCH_GLYPH_FONTS)

        fallback = None
        for index, candidate in enumerate(candidates):
            try:
                loaded = ImageFont.truetype(candidate, font_size)
            except OSError:
                continue
            if (index == 0 and font_name) or covers_branch_glyphs(loaded):
                return loaded
            if fallback is None:
                fallback = loaded

        if fallback is not None:
            return fallback
        return ImageFont.load_default(size=font_size)
