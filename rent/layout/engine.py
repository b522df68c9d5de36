"""Font-size heuristic fitting a paragraph's longest line to the viewport."""

from __future__ import annotations

from ..models.layout import LayoutResult

# A line of REFERENCE_CHARS characters fills 1/WIDTH_FRACTION of the viewport.
REFERENCE_CHARS = 8.0
WIDTH_FRACTION = 3.0
FONT_CAP_RATIO = 0.025
MARGIN_RATIO = 0.01


def longest_line(text: str) -> int:
    """Character count of the longest newline-delimited line, at least 1."""
    return max(1, max(len(line) for line in text.split("\n")))


def layout(text: str, viewport_width: float) -> LayoutResult:
    """Compute font size and margin for a paragraph at ``viewport_width``.

    Line width is approximated by character count rather than glyph
    metrics, so the result is cheap enough to recompute every frame.
    Font size scales inversely with the longest line, capped at
    ``viewport_width * FONT_CAP_RATIO``.
    """
    width = max(0.0, float(viewport_width))
    upper_limit = width * FONT_CAP_RATIO
    font_size = width / WIDTH_FRACTION * (REFERENCE_CHARS / longest_line(text))
    return LayoutResult(
        font_size=min(font_size, upper_limit),
        margin=width * MARGIN_RATIO,
    )
