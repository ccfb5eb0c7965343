from core.drag_state import DragState, is_descendant


class Node:
    def __init__(self, parent=None):
        self.parent = parent


def _parent(node):
    return node.parent


def test_is_descendant_walks_parent_chain():
    window = Node()
    zone = Node(window)
    label = Node(zone)
    icon = Node(label)
    sibling = Node(window)

    assert is_descendant(zone, zone, _parent)
    assert is_descendant(label, zone, _parent)
    assert is_descendant(icon, zone, _parent)
    assert not is_descendant(sibling, zone, _parent)
    assert not is_descendant(window, zone, _parent)
    assert not is_descendant(None, zone, _parent)


def test_leave_into_child_keeps_drag_active():
    zone = Node()
    child = Node(zone)
    state = DragState()

    state.enter()
    state.leave(child, lambda n: is_descendant(n, zone, _parent))

    assert state.active


def test_leave_outside_clears_drag():
    window = Node()
    zone = Node(window)
    outside = Node(window)
    state = DragState()

    state.enter()
    state.leave(outside, lambda n: is_descendant(n, zone, _parent))

    assert not state.active


def test_leave_without_related_target_clears_drag():
    state = DragState()
    state.enter()
    assert state.leave(None, lambda n: True) is False


def test_over_is_idempotent_and_drop_resets():
    state = DragState()
    assert not state.active
    state.over()
    state.over()
    assert state.active
    state.drop()
    assert not state.active
