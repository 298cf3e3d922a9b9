"""Hex color extraction and shorthand-aware recoloring for raw SVG text.

Everything here works on the source text with regexes, not on a parsed XML tree.
Colors are reported in normalized form (lower-case ``#rrggbb``) and sorted by
BT.601 luma so palettes read dark-to-light.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.models.theme import ColorMapping, HexColor, SvgFile

logger = logging.getLogger(__name__)

# Inkscape/Sodipodi editor state and <metadata> blocks carry hex-looking tokens
# (page colors, RDF ids) that are never painted. The self-closing form is bounded
# to a single tag so it cannot run into the next element.
_NAMEDVIEW_SELFCLOSE_RE = re.compile(r"<sodipodi:namedview\b[^>]*/>")
_NAMEDVIEW_BLOCK_RE = re.compile(
    r"<sodipodi:namedview\b[^>]*>.*?</sodipodi:namedview\s*>", re.DOTALL
)
_METADATA_RE = re.compile(r"<metadata.*?</metadata>", re.DOTALL)

# #RRGGBB or #RGB, never followed by another hex digit
_HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}(?![0-9a-fA-F])|#[0-9a-fA-F]{3}(?![0-9a-fA-F])")
_VALID_HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def is_hex_color(value: str) -> bool:
    """True for ``#rgb`` or ``#rrggbb`` in any case."""
    return isinstance(value, str) and _VALID_HEX_RE.fullmatch(value) is not None


def normalize_hex(value: str) -> HexColor:
    """Lower-case a hex color and expand ``#rgb`` shorthand to ``#rrggbb``."""
    lower = value.lower()
    if len(lower) == 4:
        r, g, b = lower[1], lower[2], lower[3]
        return f"#{r}{r}{g}{g}{b}{b}"
    return lower


def luminance(hex_color: HexColor) -> float:
    """Perceived brightness 0-255 (ITU-R BT.601 weights)."""
    r = int(hex_color[1:3], 16)
    g = int(hex_color[3:5], 16)
    b = int(hex_color[5:7], 16)
    return 0.299 * r + 0.587 * g + 0.114 * b


def to_short_hex(hex_color: HexColor) -> str | None:
    """Return the ``#rgb`` form of ``#rrggbb`` when every channel pair repeats."""
    if len(hex_color) != 7:
        return None
    if hex_color[1] == hex_color[2] and hex_color[3] == hex_color[4] and hex_color[5] == hex_color[6]:
        return f"#{hex_color[1]}{hex_color[3]}{hex_color[5]}"
    return None


def _strip_editor_metadata(svg_content: str) -> str:
    cleaned = _NAMEDVIEW_SELFCLOSE_RE.sub("", svg_content)
    cleaned = _NAMEDVIEW_BLOCK_RE.sub("", cleaned)
    return _METADATA_RE.sub("", cleaned)


def _sort_by_luminance(colors: Iterable[HexColor]) -> list[HexColor]:
    # Equal luma falls back to the hex string so output is deterministic
    return sorted(colors, key=lambda c: (luminance(c), c))


def _collect(svg_content: str) -> set[HexColor]:
    cleaned = _strip_editor_metadata(svg_content)
    return {normalize_hex(m.group(0)) for m in _HEX_COLOR_RE.finditer(cleaned)}


def extract_colors(svg_content: str) -> list[HexColor]:
    """Distinct hex colors used in an SVG, darkest first.

    Shorthand and upper-case spellings of the same color collapse to a single
    ``#rrggbb`` entry. Colors that only appear inside ``<metadata>`` or a
    ``<sodipodi:namedview>`` block are ignored.
    """
    colors = _sort_by_luminance(_collect(svg_content))
    logger.debug("Extracted %d colors from %d chars of SVG", len(colors), len(svg_content))
    return colors


def extract_colors_from_multiple(svgs: Iterable[SvgFile]) -> list[HexColor]:
    """Union of :func:`extract_colors` over several files, darkest first."""
    all_colors: set[HexColor] = set()
    file_count = 0
    for svg in svgs:
        all_colors |= _collect(svg.content)
        file_count += 1
    logger.debug("Extracted %d distinct colors from %d SVG files", len(all_colors), file_count)
    return _sort_by_luminance(all_colors)


def _replace_all_insensitive(text: str, search: str, replacement: str) -> tuple[str, int]:
    pattern = re.compile(re.escape(search) + r"(?![0-9a-fA-F])", re.IGNORECASE)
    return pattern.subn(lambda _m: replacement, text)


def replace_color_in_svg(svg: str, original_hex: HexColor, replacement_hex: HexColor) -> str:
    """Replace every spelling of ``original_hex`` in ``svg`` with ``replacement_hex``.

    Matching is case-insensitive and refuses tokens followed by another hex digit,
    so ``#aabbcc`` never rewrites the prefix of ``#aabbccdd``. When the original
    has a ``#rgb`` shorthand, shorthand occurrences are rewritten too, using the
    replacement's shorthand if it has one.
    """
    original = normalize_hex(original_hex)
    replacement = normalize_hex(replacement_hex)

    result, count = _replace_all_insensitive(svg, original, replacement)

    short_original = to_short_hex(original)
    if short_original:
        short_replacement = to_short_hex(replacement) or replacement
        result, short_count = _replace_all_insensitive(result, short_original, short_replacement)
        count += short_count

    logger.debug("Replaced %s -> %s (%d occurrences)", original, replacement, count)
    return result


def apply_color_mappings(svg: str, mappings: Iterable[ColorMapping]) -> str:
    """Apply each mapping in order; later mappings see earlier replacements."""
    result = svg
    for mapping in mappings:
        result = replace_color_in_svg(result, mapping.original, mapping.replacement)
    return result
