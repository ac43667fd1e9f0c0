"""
Panesnap bounds analysis.

Computes the enclosing box of a rectangle set and the candidate separator
coordinates on each axis.
"""

from typing import Iterable

from .types import Bounds, Extent, InvalidInput, LayoutTree, Rect, iter_leaves


def compute_bounds(rects: Iterable[Rect]) -> Bounds:
    """
    Compute bounds of a rectangle set.

    The separator sets hold, per axis, the coordinate just outside each
    rect edge, so they always include the region's own outer boundary.

    Args:
        rects: Non-empty rectangle set.

    Returns:
        Bounds with sorted unique ``xs`` / ``ys``.

    Raises:
        InvalidInput: If ``rects`` is empty.
    """
    rects = list(rects)
    if not rects:
        raise InvalidInput("cannot compute bounds of an empty rectangle set")

    xs: set[int] = set()
    ys: set[int] = set()
    for rect in rects:
        xs.update((rect.left - 1, rect.right + 1))
        ys.update((rect.top - 1, rect.bottom + 1))

    return Bounds(
        left=min(r.left for r in rects),
        right=max(r.right for r in rects),
        top=min(r.top for r in rects),
        bottom=max(r.bottom for r in rects),
        xs=sorted(xs),
        ys=sorted(ys),
    )


def layout_bounds(tree: LayoutTree) -> Bounds:
    """Bounds of every leaf in a tree."""
    return compute_bounds(leaf.rect for leaf in iter_leaves(tree))


def layout_extent(tree: LayoutTree) -> Extent:
    """Workspace extent a tree was captured at."""
    bounds = layout_bounds(tree)
    return Extent(rows=bounds.bottom, cols=bounds.right)
