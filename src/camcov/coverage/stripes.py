from __future__ import annotations

from typing import List, Sequence, Tuple

from camcov.models import DiscreteRect, Stripe


IntInterval = Tuple[int, int]


def collect_boundaries(d_min: int, d_max: int, rects: Sequence[DiscreteRect]) -> List[int]:
    """Distance values where a stripe may start.

    Each rect contributes its start, one past its end, and its midpoint.
    The midpoint splits stripes inside partially overlapping rects so the
    containment test below re-evaluates membership there.
    """
    boundaries = {d_min, d_max + 1}
    for r in rects:
        boundaries.add(r.d_min)
        boundaries.add(r.d_max + 1)
        boundaries.add((r.d_min + r.d_max) // 2)
    return sorted(boundaries)


def build_stripes(boundaries: Sequence[int]) -> List[Stripe]:
    return [Stripe(a, b - 1) for a, b in zip(boundaries, boundaries[1:])]


def active_rects(stripe: Stripe, rects: Sequence[DiscreteRect]) -> List[DiscreteRect]:
    return [r for r in rects if r.d_min <= stripe.start and r.d_max >= stripe.end]


def merge_intervals(intervals: Sequence[IntInterval]) -> List[IntInterval]:
    """Merge overlapping or integer-adjacent intervals ([5,10] + [11,15] -> [5,15])."""
    if not intervals:
        return []

    ordered = sorted(intervals, key=lambda iv: iv[0])
    merged: List[List[int]] = [list(ordered[0])]
    for start, end in ordered[1:]:
        last = merged[-1]
        if start <= last[1] + 1:
            last[1] = max(last[1], end)
        else:
            merged.append([start, end])
    return [(s, e) for s, e in merged]


def is_range_covered(merged: Sequence[IntInterval], target: IntInterval) -> bool:
    # one contiguous block has to span the whole target
    lo, hi = target
    return any(s <= lo and e >= hi for s, e in merged)


def check_stripe(stripe: Stripe, l_min: int, l_max: int, rects: Sequence[DiscreteRect]) -> bool:
    active = active_rects(stripe, rects)
    if not active:
        return False
    merged = merge_intervals([(r.l_min, r.l_max) for r in active])
    return is_range_covered(merged, (l_min, l_max))
