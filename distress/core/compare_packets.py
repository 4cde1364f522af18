"""Packet Ordering — the total order used to rank pairs and sort the corpus.

Rules, applied in order:
    1. number vs number: numeric comparison
    2. list vs list: first differing position decides (recursively)
    3. all compared positions equal: shorter list is LESS; same length is EQUAL
    4. number vs list: promote the number to a one-element list, then rules 2-3

Invariants:
    - compare_packets is total, antisymmetric and transitive over parsed packets
    - Ordering values are -1/0/1 so they plug into functools.cmp_to_key
    - sort_packets is stable: equal packets keep input order
"""

from enum import Enum
from functools import cmp_to_key
from typing import Iterable

from distress.core.packet import Element, Packet, is_number


class Ordering(int, Enum):
    """Three-way comparison result."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _sign(delta: int) -> Ordering:
    return Ordering((delta > 0) - (delta < 0))


def compare_packets(left: Element, right: Element) -> Ordering:
    """Three-way compare two elements. Pure, no IO."""
    if is_number(left) and is_number(right):
        return _sign(left - right)
    if is_number(left):
        left = (left,)
    if is_number(right):
        right = (right,)

    for left_item, right_item in zip(left, right):
        order = compare_packets(left_item, right_item)
        if order is not Ordering.EQUAL:
            return order
    return _sign(len(left) - len(right))


def is_ordered(left: Element, right: Element) -> bool:
    """True when left sorts strictly before right."""
    return compare_packets(left, right) is Ordering.LESS


packet_sort_key = cmp_to_key(compare_packets)


def sort_packets(packets: Iterable[Packet]) -> list[Packet]:
    """Stable sort under compare_packets."""
    return sorted(packets, key=packet_sort_key)
