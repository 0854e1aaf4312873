"""
DOM - tree model for rosezip

A rose tree of Nodes. Each Node holds a value, an ordered list of children
it owns, and a weak reference back to its parent.

Key invariant: a Node appears in exactly one parent's children list, and its
parent reference points back at that parent. Children are only ever appended.
"""

from __future__ import annotations

import sys
import weakref
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TextIO, TypeVar

from .config import get_config

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")

NOT_FOUND = -1  # find_branch result when no child matches, as str.find


def build_value(factory: Callable[..., T] | None, *args: Any, **kwargs: Any) -> T | None:
    """
    Build a node value from constructor arguments.

    With a factory, the value is factory(*args, **kwargs). Without one, no
    arguments give None and a single positional argument is the value itself.
    """
    if factory is not None:
        return factory(*args, **kwargs)
    if kwargs:
        raise TypeError(f"keyword arguments need a factory, got {sorted(kwargs)}")
    if not args:
        return None
    if len(args) > 1:
        raise TypeError(f"expected at most one value without a factory, got {len(args)}")
    return args[0]


@dataclass(eq=False, init=False, repr=False)
class Node(Generic[T]):
    """
    A node in the tree. Compares by identity.

    Children are only added through append_child, which keeps every
    child's parent reference pointing back at its owner.
    """
    value: T
    children: list[Node[T]] = field(default_factory=list)
    parent_ref: weakref.ref[Node[T]] | None = None

    def __init__(self, value: T, parent: Node[T] | None = None):
        self.value = value
        self.children = []
        self.parent_ref = weakref.ref(parent) if parent is not None else None

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, children=<{len(self.children)}>)"

    @property
    def parent(self) -> Node[T] | None:
        if self.parent_ref is None:
            return None
        return self.parent_ref()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        """Number of ancestors between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def index(self) -> int | None:
        """Position of this node in its parent's children, None at the root."""
        parent = self.parent
        if parent is None:
            return None
        for i, sibling in enumerate(parent.children):
            if sibling is self:
                return i
        return None

    def append_child(self, *args: Any, factory: Callable[..., T] | None = None, **kwargs: Any) -> Node[T]:
        """Append a child built from args and return it for chaining."""
        # Build first so a failing factory leaves children untouched
        value = build_value(factory, *args, **kwargs)
        child = Node(value, parent=self)
        self.children.append(child)
        return child

    def find_branch(self, predicate: Callable[[T], Any]) -> int:
        """Index of the first child whose value satisfies predicate, else NOT_FOUND."""
        for i, child in enumerate(self.children):
            if predicate(child.value):
                return i
        return NOT_FOUND

    def foreach_child(self, fn: Callable[[T], Any]) -> None:
        for child in self.children:
            fn(child.value)

    def map_children(self, fn: Callable[[T], R]) -> list[R]:
        return [fn(child.value) for child in self.children]

    def fold_children(self, fn: Callable[[T, A], A], init: A = None) -> A:
        """Left fold over child values: acc = fn(value, acc), starting from init."""
        acc = init
        for child in self.children:
            acc = fn(child.value, acc)
        return acc

    def depth_first(self) -> Iterator[Node[T]]:
        """Traverse subtree depth-first, yielding self then children."""
        stack: list[Node[T]] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def breadth_first(self) -> Iterator[Node[T]]:
        """Traverse subtree breadth-first."""
        queue: deque[Node[T]] = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    def format_tree(self, depth: int = 0, indent: int | None = None) -> list[str]:
        """
        Render the subtree as lines, pre-order.

        Each value is right-aligned in a field of depth * indent characters;
        values wider than the field are kept whole.
        """
        if indent is None:
            indent = get_config().render.indent
        lines = []
        stack: list[tuple[Node[T], int]] = [(self, depth)]
        while stack:
            node, level = stack.pop()
            lines.append(str(node.value).rjust(level * indent))
            stack.extend((child, level + 1) for child in reversed(node.children))
        return lines

    def print_tree(self, out: TextIO | None = None, depth: int = 0, indent: int | None = None) -> None:
        if out is None:
            out = sys.stdout
        for line in self.format_tree(depth, indent):
            out.write(line + "\n")
