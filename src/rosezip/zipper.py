"""
Zipper - a rose tree with a movable cursor.

The zipper owns the root Node and keeps a cursor on the "current" Node,
initially the root. The cursor moves one step at a time: up to the parent,
or down into an existing child. New branches are appended at the cursor,
which then moves onto them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TextIO, TypeVar

from .dom import Node, build_value

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")


class ZipperError(Exception):
    """Base class for navigation failures."""


class CannotStepBack(ZipperError):
    """Raised when stepping back from the root."""

    def __init__(self):
        super().__init__("zipper.step_back: cannot step back from the root")


class InvalidBranch(ZipperError):
    """Raised when step_forward gets an index outside the current children."""

    def __init__(self, branch: int, available: int):
        self.branch = branch
        self.available = available
        if branch < 0:
            hint = "possibly did not check the result of find_branch"
        else:
            hint = "use only the result of find_branch"
        super().__init__(
            f"zipper.step_forward: invalid branch id {branch} "
            f"({available} available); {hint}"
        )


class Zipper(Generic[T]):
    """Cursor over a tree it owns."""

    def __init__(self, *args: Any, factory: Callable[..., T] | None = None, **kwargs: Any):
        self.factory = factory
        self._root: Node[T] = Node(build_value(factory, *args, **kwargs))
        self._current: Node[T] = self._root

    def __repr__(self) -> str:
        return f"<Zipper root={self._root.value!r} current={self._current.value!r} depth={self.depth}>"

    @property
    def root(self) -> Node[T]:
        return self._root

    @property
    def node(self) -> Node[T]:
        """The focused node."""
        return self._current

    @property
    def value(self) -> T:
        return self._current.value

    @property
    def depth(self) -> int:
        return self._current.depth

    # Moving up

    def can_step_back(self) -> bool:
        return self._current is not self._root

    def step_back(self, n: int = 1) -> None:
        """
        Move the cursor to its parent n times.

        Raises CannotStepBack at the root. Steps already taken are kept, so
        a failure leaves the cursor on the root.
        """
        if n < 0:
            raise ValueError(f"Step count must be >= 0, got {n}")
        for _ in range(n):
            if not self.can_step_back():
                raise CannotStepBack()
            parent = self._current.parent
            assert parent is not None  # root owns every ancestor
            self._current = parent

    # Moving down

    def can_step_forward(self) -> bool:
        return bool(self._current.children)

    def find_branch(self, predicate: Callable[[T], Any]) -> int:
        return self._current.find_branch(predicate)

    def step_forward(self, branch: int) -> None:
        available = len(self._current.children)
        if not 0 <= branch < available:
            raise InvalidBranch(branch, available)
        self._current = self._current.children[branch]

    def enter_new_branch(self, *args: Any, factory: Callable[..., T] | None = None, **kwargs: Any) -> None:
        """Append a child built from args to the focused node and move onto it."""
        self._current = self._current.append_child(*args, factory=factory or self.factory, **kwargs)

    def available_branches(self) -> tuple[Node[T], ...]:
        return tuple(self._current.children)

    # Traversals over the focused node's children

    def map_branches(self, fn: Callable[[T], R]) -> list[R]:
        return self._current.map_children(fn)

    def foreach_branch(self, fn: Callable[[T], Any]) -> None:
        self._current.foreach_child(fn)

    def fold_branches(self, fn: Callable[[T, A], A], init: A = None) -> A:
        return self._current.fold_children(fn, init)

    # Rendering

    def format_tree(self, indent: int | None = None) -> list[str]:
        return self._root.format_tree(0, indent)

    def print_tree(self, out: TextIO | None = None, indent: int | None = None) -> None:
        """Pretty-print the whole tree from the root, whatever the cursor."""
        self._root.print_tree(out, 0, indent)
