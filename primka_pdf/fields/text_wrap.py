"""
Greedy text wrapping for fixed-width table cells.

Words are packed onto a line while the measured width fits; a word that is
wider than the whole column on its own is split character by character, and
its trailing fragment starts the next line's accumulation.

`measure` is any callable returning the rendered width of a string (already
bound to a font and size), so wrapping stays a pure function of text, width
and font metrics.
"""

from __future__ import annotations

from typing import Callable, List

Measure = Callable[[str], float]


def _split_word(word: str, max_width: float, measure: Measure, lines: List[str]) -> str:
    """Append full-width fragments of `word` to `lines`; return the unfilled tail."""
    piece = ""
    for ch in word:
        candidate = piece + ch
        if measure(candidate) <= max_width:
            piece = candidate
        else:
            if piece:
                lines.append(piece)
            piece = ch
    return piece


def wrap(text: str, max_width: float, measure: Measure) -> List[str]:
    """Wrap `text` into lines no wider than `max_width`. Never returns an empty list."""
    words = (text or "").split()
    if not words:
        return [""]

    lines: List[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if measure(candidate) <= max_width:
            current = candidate
            continue

        if current:
            lines.append(current)
        if measure(word) > max_width:
            current = _split_word(word, max_width, measure, lines)
        else:
            current = word

    if current:
        lines.append(current)
    return lines or [""]


def height_for(text: str, width: float, measure: Measure, line_height: float) -> float:
    """Height of `text` once wrapped to `width`."""
    return len(wrap(text, width, measure)) * line_height
