"""
Ordered handle list used to hold the vertex and edge sets.

A doubly linked list that hands back a stable node for each inserted
element, so an element can later be removed in O(1) without scanning.
"""

import logging
from typing import Any, Iterator, Optional

from .exceptions import InvalidHandleError

logger = logging.getLogger(__name__)


class pynode:
    """Stable handle to one element stored in a pyhandlelist."""

    __slots__ = ("element", "prev", "next", "owner")

    def __init__(self, element: Any, owner: "pyhandlelist"):
        self.element = element
        self.prev: Optional["pynode"] = None
        self.next: Optional["pynode"] = None
        self.owner: Optional["pyhandlelist"] = owner

    def __repr__(self) -> str:
        return f"pynode({self.element!r})"


class pyhandlelist:
    """
    Doubly linked sequence with handle-based removal.

    Supports:
    - Appending at the tail (returns the new handle)
    - O(1) removal by handle
    - Emptiness checks and forward iteration in insertion order
    """

    def __init__(self):
        self._head: Optional[pynode] = None
        self._tail: Optional[pynode] = None
        self._size = 0

    def insert_last(self, element: Any) -> pynode:
        """
        Append an element at the tail of the list.

        Args:
            element: Object to store

        Returns:
            Handle of the new node
        """
        node = pynode(element, self)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def remove(self, node: pynode) -> Any:
        """
        Unlink a node from the list.

        Args:
            node: Handle returned by insert_last

        Returns:
            The element the node held

        Raises:
            InvalidHandleError: If the node is not currently in this list
        """
        if node is None or node.owner is not self:
            raise InvalidHandleError(f"Node {node!r} does not belong to this list")

        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev

        node.prev = node.next = None
        node.owner = None
        self._size -= 1
        return node.element

    def first(self) -> Optional[pynode]:
        return self._head

    def last(self) -> Optional[pynode]:
        return self._tail

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.element
            node = node.next

    def __repr__(self) -> str:
        return f"pyhandlelist({list(self)!r})"
