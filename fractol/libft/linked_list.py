"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list holding contents in insertion order."""

    def __init__(self, contents: Iterable[Any] = ()):
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content):
        """Put ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content):
        """Put ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self):
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any], delete: Optional[Callable[[Any], Any]] = None):
        """A new list of ``func(content)`` for every content.

        If ``func`` fails part way, ``delete`` is called on every content
        already produced before the error is raised again.
        """
        result = LinkedList()
        try:
            for node in self._nodes():
                result.add_back(func(node.content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, handing each content to ``delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"