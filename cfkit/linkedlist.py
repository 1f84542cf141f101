"""Doubly linked list with stable node handles."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterator, Optional


class Node:
    """A node of a :class:`LinkedList` holding one data item."""

    __slots__ = ("data", "prev", "next", "_owner")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.prev: Node = self
        self.next: Node = self
        self._owner: Optional[LinkedList] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList:
    """Circular doubly linked list around a sentinel node."""

    def __init__(self) -> None:
        self._sentinel = Node()
        self._size = 0

    def _anchor(self, node: Optional[Node]) -> Node:
        if node is None:
            return self._sentinel
        if node._owner is not self:
            raise ValueError("node does not belong to this list")
        return node

    def _link(self, prev: Node, nxt: Node, data: Any) -> Node:
        node = Node(data)
        node._owner = self
        node.prev = prev
        node.next = nxt
        prev.next = node
        nxt.prev = node
        self._size += 1
        return node

    def insert_before(self, node: Optional[Node], data: Any) -> Node:
        """Insert ``data`` before ``node``; None means the end of the list."""
        anchor = self._anchor(node)
        return self._link(anchor.prev, anchor, data)

    def insert_after(self, node: Optional[Node], data: Any) -> Node:
        """Insert ``data`` after ``node``; None means the front of the list."""
        anchor = self._anchor(node)
        return self._link(anchor, anchor.next, data)

    def erase(self, node: Node) -> None:
        """Unlink ``node`` from the list."""
        node = self._anchor(node)
        if node is self._sentinel:
            return
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node
        node._owner = None
        self._size -= 1

    def push_back(self, data: Any) -> Node:
        """Append ``data`` at the end."""
        return self.insert_before(None, data)

    def push_front(self, data: Any) -> Node:
        """Insert ``data`` at the front."""
        return self.insert_after(None, data)

    def head(self) -> Any:
        """Return the first data item, or None when empty."""
        first = self._sentinel.next
        return None if first is self._sentinel else first.data

    def tail(self) -> Any:
        """Return the last data item, or None when empty."""
        last = self._sentinel.prev
        return None if last is self._sentinel else last.data

    def find(
        self, data: Any, eq: Optional[Callable[[Any, Any], bool]] = None
    ) -> Optional[Node]:
        """Return the first node whose data matches ``data``, or None."""
        match = eq if eq is not None else operator.eq
        for node in self.nodes():
            if match(data, node.data):
                return node
        return None

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from front to back."""
        node = self._sentinel.next
        while node is not self._sentinel:
            following = node.next
            yield node
            node = following

    def clear(self) -> None:
        """Remove every node."""
        for node in list(self.nodes()):
            node.prev = node.next = node
            node._owner = None
        self._sentinel.prev = self._sentinel.next = self._sentinel
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data