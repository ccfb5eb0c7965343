"""Drag-over tracking for a drop target with nested child elements."""

from typing import Any, Callable, Optional


def is_descendant(node: Any, root: Any, parent_of: Callable[[Any], Any]) -> bool:
    """Return True if node is root or sits anywhere below it.

    Walks the parent chain from node upwards using parent_of. A node of None
    is never a descendant.
    """
    while node is not None:
        if node is root:
            return True
        node = parent_of(node)
    return False


class DragState:
    """
    Tracks whether a drag is currently hovering the drop target.

    Leaving the target only clears the state when the element the pointer
    moved into is outside the target. Crossing into a child element keeps it.
    """

    def __init__(self):
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def enter(self) -> bool:
        self._active = True
        return self._active

    def over(self) -> bool:
        if not self._active:
            self._active = True
        return self._active

    def leave(self, related_target: Optional[Any], contains: Callable[[Any], bool]) -> bool:
        if related_target is None or not contains(related_target):
            self._active = False
        return self._active

    def drop(self) -> bool:
        self._active = False
        return self._active
