"""Text utilities: grapheme segmentation, length measurement, truncation.

Widths are counted in grapheme clusters: one cluster occupies one surface
cell. Wide (East Asian) characters are not measured specially.
"""

from __future__ import annotations

from typing import Literal

import grapheme

Align = Literal["left", "center", "right"]

ALIGNMENTS: tuple[Align, ...] = ("left", "center", "right")

ELLIPSIS = "…"


# ---------------------------------------------------------------------------
# Grapheme segmentation
# ---------------------------------------------------------------------------


class _GraphemeSegmenter:
    """Thin wrapper around ``grapheme.graphemes``."""

    @staticmethod
    def segment(text: str) -> list[str]:
        return list(grapheme.graphemes(text))


def get_segmenter() -> _GraphemeSegmenter:
    """Return a grapheme segmenter instance."""
    return _GraphemeSegmenter()


def graphemes(text: str) -> list[str]:
    """Split *text* into grapheme clusters."""
    if not text:
        return []
    if text.isascii():
        return list(text)
    return get_segmenter().segment(text)


def text_length(text: str) -> int:
    """Number of displayed characters (grapheme clusters) in *text*."""
    if not text:
        return 0
    if text.isascii():
        return len(text)
    return grapheme.length(text)


def check_align(align: str) -> Align:
    """Validate an alignment name."""
    if align not in ALIGNMENTS:
        raise ValueError(f"Unknown alignment {align!r}, expected one of {ALIGNMENTS}")
    return align  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# truncate_to_width
# ---------------------------------------------------------------------------


def truncate_to_width(text: str, max_width: int, ellipsis: str = ELLIPSIS) -> str:
    """Truncate *text* to at most *max_width* displayed characters.

    When the text is longer, its tail is cut and *ellipsis* takes the place
    of the last characters that still fit (the ellipsis counts towards the
    width).
    """
    if max_width <= 0:
        return ""

    clusters = graphemes(text)
    if len(clusters) <= max_width:
        return text

    marker = graphemes(ellipsis)
    keep = max_width - len(marker)
    if keep <= 0:
        return "".join(marker[:max_width])
    return "".join(clusters[:keep]) + ellipsis


def align_offset(length: int, max_width: int, align: Align) -> int:
    """Column offset at which text of *length* starts inside *max_width*."""
    if length >= max_width:
        return 0
    if align == "center":
        return (max_width - length) // 2
    if align == "right":
        return max_width - length
    return 0
