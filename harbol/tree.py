"""N-ary tree whose nodes each carry one value and an ordered list of children."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class Tree:
    """A tree node holding ``value`` and any number of child nodes.

    ``len(node)`` is the number of direct children and iterating a node
    yields those children in insertion order.
    """

    __slots__ = ("value", "_kids")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._kids: list[Tree] = []

    @property
    def children(self) -> tuple[Tree, ...]:
        """The direct children, in order."""
        return tuple(self._kids)

    def set(self, value: Any) -> None:
        """Replace the value held by this node."""
        if value is None:
            raise ValueError("a tree node cannot be set to None")
        self.value = value

    def insert_value(self, value: Any) -> Tree:
        """Append a new child holding ``value`` and return it."""
        if value is None:
            raise ValueError("cannot insert a child without a value")
        node = Tree(value)
        self._kids.append(node)
        return node

    def insert_node(self, node: Tree) -> None:
        """Append an existing node as a child."""
        if not isinstance(node, Tree):
            raise TypeError(f"expected a Tree, got {type(node).__name__}")
        if node.value is None:
            raise ValueError("cannot insert a node that holds no value")
        self._kids.append(node)

    def remove_node(self, node: Tree) -> None:
        """Remove the child that is ``node`` itself and clear it."""
        for index, kid in enumerate(self._kids):
            if kid is node:
                self.remove_index(index)
                return
        raise ValueError("node is not a child of this tree")

    def remove_index(self, index: int) -> None:
        """Remove and clear the child at ``index``."""
        if not 0 <= index < len(self._kids):
            raise IndexError(f"child index {index} out of range")
        kid = self._kids.pop(index)
        kid.clear()

    def remove_value(self, value: Any) -> None:
        """Remove and clear the first child whose value equals ``value``."""
        for index, kid in enumerate(self._kids):
            if kid.value == value:
                self.remove_index(index)
                return
        raise ValueError(f"no child holds {value!r}")

    def node_at(self, index: int) -> Tree:
        """The child at ``index``."""
        if not 0 <= index < len(self._kids):
            raise IndexError(f"child index {index} out of range")
        return self._kids[index]

    def node_by_value(self, value: Any) -> Optional[Tree]:
        """The first child whose value equals ``value``, or None."""
        return next((kid for kid in self._kids if kid.value == value), None)

    def clear(self) -> None:
        """Drop the value and every descendant."""
        self.value = None
        for kid in self._kids:
            kid.clear()
        self._kids.clear()

    def __len__(self) -> int:
        return len(self._kids)

    def __iter__(self) -> Iterator[Tree]:
        return iter(list(self._kids))

    def __repr__(self) -> str:
        return f"Tree({self.value!r}, children={len(self._kids)})"