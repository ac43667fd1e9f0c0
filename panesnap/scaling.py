"""
Panesnap layout scaling.

Proportionally remaps a captured layout onto a workspace of another size.
"""

from dataclasses import replace

from .types import Extent, LayoutTree, Leaf, Rect, Split


def scale_coordinate(value: int, old_max: int, new_max: int) -> int:
    """
    Map one 1-based coordinate from ``old_max`` cells to ``new_max`` cells.

    The far edge maps exactly onto the new far edge so floor division never
    leaves a gap there.
    """
    if value == old_max:
        return new_max
    return (value - 1) * new_max // old_max + 1


def scale_rect(rect: Rect, old: Extent, new: Extent) -> Rect:
    return replace(
        rect,
        left=scale_coordinate(rect.left, old.cols, new.cols),
        right=scale_coordinate(rect.right, old.cols, new.cols),
        top=scale_coordinate(rect.top, old.rows, new.rows),
        bottom=scale_coordinate(rect.bottom, old.rows, new.rows),
    )


def scale_layout(tree: LayoutTree, old_extent: Extent, new_extent: Extent) -> LayoutTree:
    """
    Scale every leaf of a tree to a new workspace extent.

    Args:
        tree: Layout to scale. Never mutated.
        old_extent: Extent the tree was captured at, usually
            ``layout_extent(tree)``.
        new_extent: Target workspace extent.

    Returns:
        A new tree, or ``tree`` itself when the extents are equal.
    """
    if old_extent == new_extent:
        return tree
    return _scale(tree, old_extent, new_extent)


def _scale(tree: LayoutTree, old: Extent, new: Extent) -> LayoutTree:
    if isinstance(tree, Leaf):
        return Leaf(scale_rect(tree.rect, old, new))
    return Split(tree.orientation, [_scale(child, old, new) for child in tree.children])
