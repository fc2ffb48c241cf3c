"""
Layout helpers (pure geometry on client rects).

- rect_center(r): geometric center of a rect.
- rect_area(r): width * height.
- intersect(a, b): overlapping box, or None when they only touch or miss.
- contains(a, b): b sits inside a (edges may coincide).
- finger_area(r, finger_size): finger-sized square centered on r.

Keeps coordinate math out of the detector.
"""

from typing import Optional, Tuple

from tapaudit.models.schemas import Rect


def rect_center(r: Rect) -> Tuple[float, float]:
    return ((r.left + r.right) / 2.0, (r.top + r.bottom) / 2.0)


def rect_area(r: Rect) -> float:
    return r.width * r.height


def intersect(a: Rect, b: Rect) -> Optional[Rect]:
    """Zero-width or zero-height overlaps count as no overlap."""
    left = max(a.left, b.left)
    right = min(a.right, b.right)
    top = max(a.top, b.top)
    bottom = min(a.bottom, b.bottom)
    if right <= left or bottom <= top:
        return None
    return Rect(
        left=left,
        top=top,
        right=right,
        bottom=bottom,
        width=right - left,
        height=bottom - top,
    )


def contains(a: Rect, b: Rect) -> bool:
    return (
        a.left <= b.left
        and a.top <= b.top
        and a.right >= b.right
        and a.bottom >= b.bottom
    )


def finger_area(r: Rect, finger_size: float) -> Rect:
    cx, cy = rect_center(r)
    half = finger_size / 2.0
    return Rect(
        left=cx - half,
        top=cy - half,
        right=cx + half,
        bottom=cy + half,
        width=finger_size,
        height=finger_size,
    )
