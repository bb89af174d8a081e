"""Drawing and timing helpers: alpha blending, blit clipping, frame delay."""

from __future__ import annotations

import time
from typing import Callable, Optional, Tuple


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class DelayTimer:
    """Report milliseconds elapsed since the previous call.

    ``clock`` returns the current time in milliseconds; the first call to
    :meth:`delay` returns 0.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else _monotonic_ms
        self._last: Optional[int] = None

    def delay(self) -> int:
        """Return the time since the last call, or 0 on the first call."""
        now = self._clock()
        if self._last is None:
            self._last = now
            return 0
        elapsed = now - self._last
        self._last = now
        return elapsed


def blend_pixel(src: int, dst: int) -> int:
    """Blend an ``0xAARRGGBB`` source pixel over an ``0xRRGGBB`` destination.

    Each channel is ``s*a/255 + d*(255-a)/255`` in integer arithmetic; the
    result carries no alpha.
    """
    alpha = (src >> 24) & 0xFF
    inverse = 255 - alpha
    result = 0
    for shift in (16, 8, 0):
        s = (src >> shift) & 0xFF
        d = (dst >> shift) & 0xFF
        result |= (s * alpha // 255 + d * inverse // 255) << shift
    return result


def clip_region(
    x: int, y: int, width: int, height: int, win_width: int, win_height: int
) -> Optional[Tuple[int, int, int, int, int, int]]:
    """Clip an image placed at (x, y) to a window.

    Returns ``(dest_x, dest_y, src_x, src_y, w, h)`` describing the visible
    part of the image and where it lands, or ``None`` if nothing is visible.
    """
    src_x = src_y = 0
    if y < 0:
        src_y = -y
        height += y
        y = 0
    elif y >= win_height or x >= win_width:
        return None
    elif y + height > win_height:
        height = win_height - y

    if x < 0:
        src_x = -x
        width += x
        x = 0

    if x > win_width - width:
        width = win_width - x

    if width <= 0 or height <= 0:
        return None
    return x, y, src_x, src_y, width, height