"""
Panesnap partition inference.

Recovers a canonical split tree from a flat set of pane rectangles using
bisecting-line analysis. Only lines that cut the whole region qualify, so
every tiling produced by recursive full-span cuts maps to exactly one tree
no matter which split order originally built it.
"""

import bisect
import logging
from typing import Iterable

from .bounds import compute_bounds
from .types import Bounds, InvalidInput, LayoutTree, Leaf, Orientation, Rect, Split

logger = logging.getLogger(__name__)


def infer_layout(
    rects: Iterable[Rect],
    axis: Orientation = Orientation.HORIZONTAL
) -> LayoutTree:
    """
    Infer the split tree of a gapless tiling.

    Args:
        rects: Pane rectangles forming a gapless tiling.
        axis: Orientation tried first at the root.

    Returns:
        Leaf for a single rect, otherwise a Split whose orientation
        alternates with depth.

    Raises:
        InvalidInput: If ``rects`` is empty or is not a guillotine tiling.
    """
    rects = list(rects)
    if not rects:
        raise InvalidInput("cannot infer a layout from an empty rectangle set")
    return _infer(rects, axis, retried=False)


def full_span_cuts(rects: list[Rect], bounds: Bounds, axis: Orientation) -> list[int]:
    """
    Separator coordinates along ``axis`` that bisect the whole region.

    A candidate ``c`` qualifies when the rects ending at ``c - 1`` cover the
    full cross-section, each contributing its length plus one divider cell.
    """
    full = bounds.span(axis) + 1
    cuts = []
    for c in bounds.cuts(axis)[1:]:
        covered = sum(r.span(axis) + 1 for r in rects if r.trailing(axis) == c - 1)
        if covered == full:
            cuts.append(c)
    return cuts


def _partition(rects: list[Rect], axis: Orientation, cuts: list[int]) -> list[list[Rect]]:
    groups: list[list[Rect]] = [[] for _ in range(len(cuts) + 1)]
    for rect in rects:
        groups[bisect.bisect_right(cuts, rect.leading(axis))].append(rect)
    return [group for group in groups if group]


def _infer(rects: list[Rect], axis: Orientation, retried: bool) -> LayoutTree:
    if len(rects) == 1:
        return Leaf(rects[0])

    bounds = compute_bounds(rects)
    groups = _partition(rects, axis, full_span_cuts(rects, bounds, axis))

    if len(groups) == 1:
        if retried:
            raise InvalidInput(
                f"no full-span cut across {len(rects)} rects; not a guillotine tiling"
            )
        logger.debug(f"no {axis.value} cut across {len(rects)} rects, retrying")
        return _infer(rects, axis.opposite, retried=True)

    return Split(axis, [_infer(group, axis.opposite, retried=False) for group in groups])
