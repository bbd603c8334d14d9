"""Singly linked lists and the operations defined on them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a list holding ``values`` in order; ``None`` when empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def _values(head: Optional[ListNode]) -> list[int]:
    return list(head) if head is not None else []


def _add_least_significant_first(a: list[int], b: list[int]) -> list[int]:
    digits = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return digits


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    digits = _add_least_significant_first(_values(l1), _values(l2))
    return ListNode.from_values(digits)


def add_two_numbers_forward(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, most significant digit first."""
    digits = _add_least_significant_first(
        _values(l1)[::-1], _values(l2)[::-1]
    )
    return ListNode.from_values(reversed(digits))


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("list is shorter than n")
        fast = fast.next
    assert head is not None
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next
    slow.next = slow.next.next  # type: ignore[union-attr]
    return head


def merge_nodes(head: Optional[ListNode]) -> ListNode:
    """Collapse each run of values between zeros into one node holding its sum.

    The list is expected to start and end with a zero.
    """
    rest = _values(head)[1:]
    if rest and rest[-1] != 0:
        raise ValueError("list must end with a zero")
    sums = [0]
    for position, value in enumerate(rest, start=1):
        if value:
            sums[-1] += value
        elif position < len(rest):
            sums.append(0)
    result = ListNode.from_values(sums)
    assert result is not None
    return result