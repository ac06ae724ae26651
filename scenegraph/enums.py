"""Enumerations shared by tree traversal code."""

from __future__ import annotations

import enum


class EnumDirection(enum.Enum):
    """Order in which sibling nodes are visited."""

    FIRST_TO_LAST = enum.auto()
    LAST_TO_FIRST = enum.auto()


class EnumCallOrder(enum.Flag):
    """When a visitor is called relative to a node's children.

    The flags combine: ``PRE_ORDER | POST_ORDER`` calls the visitor both
    before and after the children of a node are visited.
    """

    PRE_ORDER = 1 << 0
    POST_ORDER = 1 << 1