"""A singly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Release = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


def _require_content(content: Any) -> Any:
    if content is None:
        raise ValueError("list nodes cannot hold None")
    return content


class LinkedList:
    """Singly linked list of non-None contents."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the start of the list and return its node."""
        node = Node(_require_content(content), self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end of the list and return its node."""
        node = Node(_require_content(content))
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, release: Release = None) -> None:
        """Empty the list, passing every content to release first when given."""
        if release is not None:
            for node in self._nodes():
                release(node.content)
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], release: Release = None) -> "LinkedList":
        """Return a new list of func applied to every content.

        If func yields None, the contents built so far are passed to release,
        and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(release)
                raise ValueError("mapping produced None, which a list cannot hold")
            result.push_back(mapped)
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"