"""Angle computation, rotation, and angular gap selection.

All functions are pure and total: degenerate input (coincident points, an
empty set of directions) yields a deterministic value instead of raising.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from graph_canvas.geometry.types import Point

TWO_PI: float = 2 * math.pi

# Direction returned when no occupied directions constrain the choice.
DEFAULT_LOOP_ANGLE: float = 0.0


def angle(a: Point, b: Point) -> float:
    """Direction in radians from ``a`` to ``b``, in ``(-pi, pi]``.

    Coincident points give ``atan2(0, 0) == 0.0``.
    """
    return math.atan2(b.y - a.y, b.x - a.x)


def rotate_point(p: Point, center: Point, theta: float) -> Point:
    """Rotate ``p`` around ``center`` by ``theta`` radians."""
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    dx = p.x - center.x
    dy = p.y - center.y
    return Point(
        center.x + dx * cos_t - dy * sin_t,
        center.y + dx * sin_t + dy * cos_t,
    )


def normalize_angle(theta: float) -> float:
    """Map an angle into ``(-pi, pi]``."""
    wrapped = math.fmod(theta, TWO_PI)
    if wrapped <= -math.pi:
        wrapped += TWO_PI
    elif wrapped > math.pi:
        wrapped -= TWO_PI
    return wrapped


def largest_angular_space(origin: Point, points: Iterable[Point]) -> float:
    """Return the angle bisecting the widest unoccupied gap around ``origin``.

    Each point in ``points`` occupies the direction from ``origin`` toward
    it. Directions are sorted on ``[0, 2pi)`` and the gap between each
    consecutive pair is measured, including the wrap-around gap from the
    last direction back to the first. On a tie the gap met first in
    ascending order wins.

    Args:
        origin: The point the directions radiate from.
        points: Points implying occupied directions.

    Returns:
        The bisector of the largest gap, normalised to ``(-pi, pi]``, or
        ``DEFAULT_LOOP_ANGLE`` when no direction is occupied.
    """
    # -tiny % 2pi == 2pi; directions stay in [0, 2pi).
    directions = sorted(d if d < TWO_PI else 0.0 for d in (angle(origin, p) % TWO_PI for p in points))
    if not directions:
        return DEFAULT_LOOP_ANGLE

    gaps = [(lo, hi - lo) for lo, hi in zip(directions, directions[1:])]
    gaps.append((directions[-1], directions[0] + TWO_PI - directions[-1]))

    best_start, best_gap = gaps[0]
    for start, gap in gaps[1:]:
        if gap > best_gap:
            best_start, best_gap = start, gap

    return normalize_angle(best_start + best_gap / 2)


def arc_sweep(start_angle: float, end_angle: float, anticlockwise: bool = False) -> float:
    """Signed sweep of an arc traced from ``start_angle`` to ``end_angle``.

    Clockwise (in y-down surface coordinates) sweeps are positive. A span of
    a full turn or more is clamped to exactly one turn.
    """
    if anticlockwise:
        span = start_angle - end_angle
        if span >= TWO_PI:
            return -TWO_PI
        return -(span % TWO_PI)
    span = end_angle - start_angle
    if span >= TWO_PI:
        return TWO_PI
    return span % TWO_PI
