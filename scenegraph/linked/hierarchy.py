"""A tree of nodes that own their children in order."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from scenegraph.enums import EnumCallOrder, EnumDirection


class Hierarchy:
    """Base class for tree nodes.

    A node has at most one parent and an ordered list of children.
    Subclass it to give nodes a payload::

        class Node(Hierarchy):
            ...
    """

    def __init__(self) -> None:
        self._parent: Optional[Hierarchy] = None
        self._children: list[Hierarchy] = []

    # Navigation

    @property
    def parent(self) -> Optional[Hierarchy]:
        """The node's parent, or None for a top-level node."""
        return self._parent

    @property
    def next_sibling(self) -> Optional[Hierarchy]:
        """The sibling that follows this node, or None."""
        if self._parent is None:
            return None
        siblings = self._parent._children
        position = self._parent._index_of(self)
        return siblings[position + 1] if position + 1 < len(siblings) else None

    @property
    def prev_sibling(self) -> Optional[Hierarchy]:
        """The sibling that precedes this node, or None."""
        if self._parent is None:
            return None
        position = self._parent._index_of(self)
        return self._parent._children[position - 1] if position > 0 else None

    @property
    def first_child(self) -> Optional[Hierarchy]:
        """The first child, or None if the node has no children."""
        return self._children[0] if self._children else None

    @property
    def last_child(self) -> Optional[Hierarchy]:
        """The last child, or None if the node has no children."""
        return self._children[-1] if self._children else None

    def children(self) -> Iterator[Hierarchy]:
        """Iterate over the direct children, first to last."""
        return iter(list(self._children))

    def child_at(self, index: int) -> Optional[Hierarchy]:
        """Return the child at ``index``; negative indices count from the end.

        Returns None when the index is out of range.
        """
        if -len(self._children) <= index < len(self._children):
            return self._children[index]
        return None

    @property
    def root(self) -> Optional[Hierarchy]:
        """The topmost ancestor, or None if this node has no parent."""
        node = self._parent
        if node is None:
            return None
        while node._parent is not None:
            node = node._parent
        return node

    def least_common_ancestor(self, node: Hierarchy) -> Optional[Hierarchy]:
        """Return the deepest node that is an ancestor of both nodes.

        A node counts as its own ancestor. Returns None if the nodes are
        in different trees.
        """
        if node is None:
            raise ValueError("node must not be None")
        own_line = {id(n) for n in self._self_and_ancestors()}
        for candidate in node._self_and_ancestors():
            if id(candidate) in own_line:
                return candidate
        return None

    def walk(
        self,
        direction: EnumDirection = EnumDirection.FIRST_TO_LAST,
        call_order: EnumCallOrder = EnumCallOrder.PRE_ORDER,
    ) -> Iterator[tuple[EnumCallOrder, Hierarchy]]:
        """Traverse all descendants depth first.

        Yields ``(EnumCallOrder.PRE_ORDER, node)`` before a node's children
        and ``(EnumCallOrder.POST_ORDER, node)`` after them, for whichever
        orders ``call_order`` holds. Stop early by leaving the loop.
        """
        pre = EnumCallOrder.PRE_ORDER in call_order
        post = EnumCallOrder.POST_ORDER in call_order
        stack: list[tuple[Optional[Hierarchy], Iterator[Hierarchy]]] = [
            (None, self._ordered_children(direction))
        ]
        while stack:
            owner, pending = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                if owner is not None and post:
                    yield EnumCallOrder.POST_ORDER, owner
                continue
            if pre:
                yield EnumCallOrder.PRE_ORDER, child
            stack.append((child, child._ordered_children(direction)))

    # Modification

    def append_child(self, child: Hierarchy) -> Hierarchy:
        """Add ``child`` after the last child and return it."""
        self._check_insertable(child, self)
        child._parent = self
        self._children.append(child)
        return child

    def prepend_child(self, child: Hierarchy) -> Hierarchy:
        """Add ``child`` before the first child and return it."""
        self._check_insertable(child, self)
        child._parent = self
        self._children.insert(0, child)
        return child

    def insert_child_at(self, child: Hierarchy, index: int) -> Hierarchy:
        """Insert ``child`` at ``index`` and return it.

        A non-negative index inserts before the child found there, or
        appends when there is none. A negative index inserts after the
        child found there, or prepends when there is none.
        """
        node = self.child_at(index)
        if index >= 0:
            return node._insert_sibling(child, 0) if node is not None else self.append_child(child)
        return node._insert_sibling(child, 1) if node is not None else self.prepend_child(child)

    def insert_after(self, sibling: Hierarchy) -> Hierarchy:
        """Insert ``sibling`` right after this node and return it."""
        return self._insert_sibling(sibling, 1)

    def insert_before(self, sibling: Hierarchy) -> Hierarchy:
        """Insert ``sibling`` right before this node and return it."""
        return self._insert_sibling(sibling, 0)

    def replace_child(self, node_to_replace: Hierarchy, new_node: Hierarchy) -> Hierarchy:
        """Put ``new_node`` in the place of a child and return the detached child.

        ``new_node`` is first detached from any parent it has.
        """
        if node_to_replace is None or new_node is None:
            raise ValueError("nodes must not be None")
        if node_to_replace._parent is not self:
            raise ValueError("node to replace is not a child of this node")
        if new_node is node_to_replace:
            raise ValueError("a node cannot replace itself")
        if new_node._parent is not None:
            new_node._detach()
        self._check_insertable(new_node, self)
        position = self._index_of(node_to_replace)
        self._children[position] = new_node
        new_node._parent = self
        node_to_replace._parent = None
        return node_to_replace

    def remove_child_at(self, index: int) -> Optional[Hierarchy]:
        """Detach and return the child at ``index``, or None if there is none."""
        child = self.child_at(index)
        if child is None:
            return None
        return child._detach()

    def remove_from_parent(self) -> Hierarchy:
        """Detach this node from its parent and return it."""
        if self._parent is None:
            raise ValueError("node has no parent")
        return self._detach()

    def remove_all_children(self) -> None:
        """Detach every child."""
        for child in self._children:
            child._parent = None
        self._children.clear()

    # Helpers

    def _index_of(self, child: Hierarchy) -> int:
        return next(i for i, node in enumerate(self._children) if node is child)

    def _ordered_children(self, direction: EnumDirection) -> Iterator[Hierarchy]:
        snapshot = list(self._children)
        if direction is EnumDirection.LAST_TO_FIRST:
            return reversed(snapshot)
        return iter(snapshot)

    def _self_and_ancestors(self) -> Iterator[Hierarchy]:
        node: Optional[Hierarchy] = self
        while node is not None:
            yield node
            node = node._parent

    def _detach(self) -> Hierarchy:
        parent = self._parent
        if parent is not None:
            del parent._children[parent._index_of(self)]
            self._parent = None
        return self

    def _insert_sibling(self, sibling: Hierarchy, offset: int) -> Hierarchy:
        parent = self._parent
        if parent is None:
            raise ValueError("node has no parent")
        self._check_insertable(sibling, parent)
        sibling._parent = parent
        parent._children.insert(parent._index_of(self) + offset, sibling)
        return sibling

    @staticmethod
    def _check_insertable(node: Hierarchy, new_parent: Hierarchy) -> None:
        if node is None:
            raise ValueError("node must not be None")
        if node._parent is not None:
            raise ValueError("node already has a parent")
        if any(ancestor is node for ancestor in new_parent._self_and_ancestors()):
            raise ValueError("node cannot be placed inside itself")