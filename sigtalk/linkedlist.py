"""A minimal singly linked list.

A list is represented by its head node, with ``None`` as the empty list.
Operations that change where a list starts return the new head instead of
updating it in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = [
    "Node",
    "from_iterable",
    "last",
    "size",
    "add_front",
    "add_back",
    "iterate",
    "mapped",
    "delete_one",
    "clear",
]


@dataclass(eq=False)
class Node:
    """One link in the chain: a payload and the node that follows it."""

    content: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of this node and of every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node.content
            node = node.next

    def nodes(self) -> Iterator["Node"]:
        """Yield this node and every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next


def _require_callable(name: str, func: Any) -> None:
    if not callable(func):
        raise TypeError(f"{name} must be callable")


def from_iterable(items: Iterable[Any]) -> Optional[Node]:
    """Build a list holding ``items`` in order; an empty iterable gives ``None``."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for item in items:
        node = Node(item)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def last(head: Optional[Node]) -> Optional[Node]:
    """The final node of the list, or ``None`` for an empty list."""
    if head is None:
        return None
    node = head
    while node.next is not None:
        node = node.next
    return node


def size(head: Optional[Node]) -> int:
    """Number of nodes in the list."""
    if head is None:
        return 0
    return sum(1 for _ in head.nodes())


def add_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put ``node`` before ``head`` and return the new head.

    With no node to add, the list is returned unchanged.
    """
    if node is None:
        return head
    node.next = head
    return node


def add_back(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Append ``node`` after the last node and return the head.

    An empty list becomes ``node`` itself.
    """
    if node is None:
        return head
    tail = last(head)
    if tail is None:
        return node
    tail.next = node
    return head


def iterate(head: Optional[Node], func: Callable[[Any], Any]) -> None:
    """Call ``func`` on the content of every node, in order."""
    _require_callable("func", func)
    if head is None:
        return
    for content in head:
        func(content)


def mapped(
    head: Optional[Node],
    func: Callable[[Any], Any],
    delete: Callable[[Any], Any],
) -> Optional[Node]:
    """A new list whose contents are ``func`` applied to each content.

    If ``func`` raises part way, ``delete`` is called on every content already
    produced, the partial list is discarded and the exception propagates.
    """
    _require_callable("func", func)
    _require_callable("delete", delete)
    if head is None:
        return None
    new_head: Optional[Node] = None
    tail: Optional[Node] = None
    try:
        for content in head:
            node = Node(func(content))
            if tail is None:
                new_head = node
            else:
                tail.next = node
            tail = node
    except BaseException:
        clear(new_head, delete)
        raise
    return new_head


def delete_one(node: Optional[Node], delete: Callable[[Any], Any]) -> None:
    """Release one node: call ``delete`` on its content and detach it.

    The node that followed it is left untouched.
    """
    _require_callable("delete", delete)
    if node is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


def clear(head: Optional[Node], delete: Callable[[Any], Any]) -> None:
    """Release every node of the list; the caller's head is then empty (``None``)."""
    _require_callable("delete", delete)
    node = head
    while node is not None:
        following = node.next
        delete_one(node, delete)
        node = following