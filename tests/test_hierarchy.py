import pytest

from scenegraph.enums import EnumCallOrder, EnumDirection
from scenegraph.linked.hierarchy import Hierarchy


def same(actual, expected):
    actual = list(actual)
    return len(actual) == len(expected) and all(x is y for x, y in zip(actual, expected))


def wire(nodes):
    """Link five nodes as root -> (a -> (a1, a2), b) and return them."""
    root, a, a1, a2, b = nodes
    root.append_child(a)
    a.append_child(a1)
    a.append_child(a2)
    root.append_child(b)
    return root, a, a1, a2, b


def test_append_and_prepend_order():
    root, a, b, c = Hierarchy(), Hierarchy(), Hierarchy(), Hierarchy()
    assert root.append_child(b) is b
    root.append_child(c)
    assert root.prepend_child(a) is a
    assert same(root.children(), [a, b, c])
    assert root.first_child is a
    assert root.last_child is c
    assert all(child.parent is root for child in root.children())


def test_empty_node_navigation():
    node = Hierarchy()
    assert node.parent is None
    assert node.first_child is None
    assert node.last_child is None
    assert node.next_sibling is None
    assert node.prev_sibling is None
    assert node.root is None
    assert node.child_at(0) is None


def test_siblings():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    assert root.child_at(0) is a
    assert a.next_sibling is b
    assert b.prev_sibling is a
    assert a.prev_sibling is None
    assert b.next_sibling is None


def test_child_at():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    assert a.child_at(0) is a1
    assert a.child_at(1) is a2
    assert a.child_at(-1) is a2
    assert a.child_at(-2) is a1
    assert a.child_at(2) is None
    assert a.child_at(-3) is None


def test_root():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    assert a1.root is root
    assert b.root is root
    assert root.root is None


def test_least_common_ancestor():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    assert a1.least_common_ancestor(a2) is a
    assert a1.least_common_ancestor(b) is root
    assert b.least_common_ancestor(a1) is root
    assert a.least_common_ancestor(a1) is a
    assert a1.least_common_ancestor(a1) is a1
    assert a1.least_common_ancestor(Hierarchy()) is None


def test_least_common_ancestor_none_raises():
    root, *_ = wire([Hierarchy() for _ in range(5)])
    with pytest.raises(ValueError):
        root.least_common_ancestor(None)


def test_walk_pre_order():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    visited = list(root.walk(EnumDirection.FIRST_TO_LAST, EnumCallOrder.PRE_ORDER))
    assert all(order is EnumCallOrder.PRE_ORDER for order, _ in visited)
    assert same((n for _, n in visited), [a, a1, a2, b])


def test_walk_post_order():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    visited = list(root.walk(EnumDirection.FIRST_TO_LAST, EnumCallOrder.POST_ORDER))
    assert all(order is EnumCallOrder.POST_ORDER for order, _ in visited)
    assert same((n for _, n in visited), [a1, a2, a, b])


def test_walk_last_to_first():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    pre = list(root.walk(EnumDirection.LAST_TO_FIRST, EnumCallOrder.PRE_ORDER))
    post = list(root.walk(EnumDirection.LAST_TO_FIRST, EnumCallOrder.POST_ORDER))
    assert [order for order, _ in pre] == [EnumCallOrder.PRE_ORDER] * 4
    assert [order for order, _ in post] == [EnumCallOrder.POST_ORDER] * 4
    assert [id(n) for _, n in pre] == [id(b), id(a), id(a2), id(a1)]
    assert [id(n) for _, n in post] == [id(b), id(a2), id(a1), id(a)]


def test_walk_both_orders():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    pre, post = EnumCallOrder.PRE_ORDER, EnumCallOrder.POST_ORDER
    visited = list(root.walk(EnumDirection.FIRST_TO_LAST, pre | post))
    assert [o for o, _ in visited] == [pre, pre, post, pre, post, post, pre, post]
    assert same((n for _, n in visited), [a, a1, a1, a2, a2, a, b, b])


def test_walk_excludes_self_and_stops_early():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    seen = []
    for _, node in root.walk(EnumDirection.FIRST_TO_LAST, EnumCallOrder.PRE_ORDER):
        seen.append(node)
        if node is a1:
            break
    assert same(seen, [a, a1])
    assert list(Hierarchy().walk()) == []


def test_insert_child_at():
    root, a, b, c, d, e, f = (Hierarchy() for _ in range(7))
    root.append_child(b)
    root.append_child(d)
    assert root.insert_child_at(c, 1) is c
    root.insert_child_at(e, 10)
    root.insert_child_at(a, -10)
    assert same(root.children(), [a, b, c, d, e])
    root.insert_child_at(f, -1)
    assert same(root.children(), [a, b, c, d, e, f])


def test_insert_after_and_before():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    x, y = Hierarchy(), Hierarchy()
    assert a.insert_after(x) is x
    assert a.insert_before(y) is y
    assert same(root.children(), [y, a, x, b])
    assert x.parent is root
    assert y.parent is root


def test_insert_sibling_without_parent_raises():
    with pytest.raises(ValueError):
        Hierarchy().insert_after(Hierarchy())
    with pytest.raises(ValueError):
        Hierarchy().insert_before(Hierarchy())


def test_replace_child():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    new = Hierarchy()
    removed = root.replace_child(a, new)
    assert removed is a
    assert a.parent is None
    assert same(a.children(), [a1, a2])
    assert same(root.children(), [new, b])
    assert new.parent is root


def test_replace_child_detaches_new_node():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    assert root.replace_child(b, a2) is b
    assert same(a.children(), [a1])
    assert same(root.children(), [a, a2])
    assert a2.parent is root


def test_replace_child_not_a_child_raises():
    root, *_ = wire([Hierarchy() for _ in range(5)])
    with pytest.raises(ValueError):
        root.replace_child(Hierarchy(), Hierarchy())


def test_remove_child_at():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    removed = root.remove_child_at(-1)
    assert removed is b
    assert removed.parent is None
    assert same(root.children(), [a])
    assert root.remove_child_at(5) is None


def test_remove_from_parent():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    assert a1.remove_from_parent() is a1
    assert a1.parent is None
    assert same(a.children(), [a2])
    with pytest.raises(ValueError):
        a1.remove_from_parent()


def test_remove_all_children():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    root.remove_all_children()
    assert list(root.children()) == []
    assert a.parent is None
    assert b.parent is None


def test_append_node_with_parent_raises():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    with pytest.raises(ValueError):
        root.append_child(a1)


def test_append_ancestor_raises():
    root, a, a1, a2, b = wire([Hierarchy() for _ in range(5)])
    with pytest.raises(ValueError):
        a1.append_child(a.remove_from_parent())
    with pytest.raises(ValueError):
        root.append_child(root)