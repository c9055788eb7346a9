"""Deterministic pixel-art images for plots.

Each plot id maps to a 10x10 grid of palette colors:

1. Every cell in the left half (columns 0-4) draws a value in ``[0, 1)``
   from ``seeded_random(plot_id + row * 100 + col)``.
2. The value picks a color: below 0.6 primary, below 0.9 secondary,
   otherwise tertiary.
3. Columns 0-4 are mirrored onto columns 9-5, so every image is
   left-right symmetric.

The grid is rendered as a 100x100 SVG (one 10-unit ``rect`` per cell,
row-major) and wrapped in an inline ``data:`` URI. No I/O, no caching:
the same id always yields byte-identical output.
"""

from __future__ import annotations

import math
from html import escape
from urllib.parse import quote

from plotctl.domain.types import Palette

GRID_SIZE = 10
PIXEL_SIZE = 10
DATA_URI_PREFIX = "data:image/svg+xml;charset=utf-8,"

# Upper bounds for the 60/30/10 color split.
_THRESHOLDS: tuple[tuple[float, Palette], ...] = (
    (0.6, Palette.PRIMARY),
    (0.9, Palette.SECONDARY),
)

# Characters encodeURIComponent leaves alone beyond quote()'s defaults.
_URI_SAFE = "!*'()"

ColorMatrix = tuple[tuple[Palette, ...], ...]


def seeded_random(seed: float) -> float:
    """Fractional part of ``sin(seed) * 10000``, a non-cryptographic hash."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def pick_color(value: float) -> Palette:
    for bound, color in _THRESHOLDS:
        if value < bound:
            return color
    return Palette.TERTIARY


def color_matrix(plot_id: int) -> ColorMatrix:
    """Build the symmetric color grid for *plot_id*."""
    half = GRID_SIZE // 2
    rows: list[tuple[Palette, ...]] = []
    for row in range(GRID_SIZE):
        left = [pick_color(seeded_random(plot_id + row * 100 + col)) for col in range(half)]
        rows.append(tuple(left + left[::-1]))
    return tuple(rows)


def render_svg(matrix: ColorMatrix) -> str:
    """Render *matrix* as an SVG document, one ``rect`` per cell."""
    size = GRID_SIZE * PIXEL_SIZE
    parts = [f'<svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg">']
    for y, row in enumerate(matrix):
        for x, color in enumerate(row):
            parts.append(
                f'<rect x="{x * PIXEL_SIZE}" y="{y * PIXEL_SIZE}" '
                f'width="{PIXEL_SIZE}" height="{PIXEL_SIZE}" fill="{color.value}" />'
            )
    parts.append("</svg>")
    return "".join(parts)


def to_data_uri(svg: str) -> str:
    return DATA_URI_PREFIX + quote(svg, safe=_URI_SAFE)


def synthesize(plot_id: int) -> str:
    """Return the inline SVG data URI for *plot_id*."""
    return to_data_uri(render_svg(color_matrix(plot_id)))


def placeholder(label: str) -> str:
    """Grey 100x100 image with a centred *label*, for ids without artwork."""
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">'
        '<rect width="100" height="100" fill="#f0f0f0"/>'
        '<text x="50" y="50" font-family="Arial" font-size="15" '
        'text-anchor="middle" dominant-baseline="middle">'
        f"{escape(label)}</text></svg>"
    )
    return to_data_uri(svg)
