"""Batch Evaluation — pairwise count (part 1) and decoder key (part 2).

Invariants:
    - Pairs are consecutive packets (2i, 2i+1) in input order, indexed from 1
    - An odd packet count is malformed input, never silently truncated
    - Divider positions are 1-based ranks in the corpus sorted with the dividers
      inserted ahead of the input, so a divider precedes any packet equal to it
    - All functions are pure and deterministic

Design Decisions:
    - decoder_key counts packets below each divider instead of sorting:
      O(n * dividers) comparisons, same answer as a stable sort + lookup
    - PuzzleAnswer as frozen dataclass: core stays free of pydantic,
      schemas convert at the API boundary
"""

from dataclasses import dataclass
from math import prod
from typing import Sequence

from distress.core.compare_packets import Ordering, compare_packets, is_ordered
from distress.core.errors import UnpairedPacketError
from distress.core.packet import Packet

DIVIDER_PACKETS: tuple[Packet, ...] = (((2,),), ((6,),))


@dataclass(frozen=True)
class PuzzleAnswer:
    """Both answers plus the corpus shape they were computed from."""
    part1: int
    part2: int
    packet_count: int
    pair_count: int


def group_pairs(packets: Sequence[Packet]) -> list[tuple[Packet, Packet]]:
    """Group consecutive packets into (left, right) pairs."""
    if len(packets) % 2:
        raise UnpairedPacketError(len(packets))
    return list(zip(packets[::2], packets[1::2]))


def sum_ordered_pair_indices(packets: Sequence[Packet]) -> int:
    """Part 1: sum of 1-based pair indices whose left packet sorts first."""
    return sum(
        index
        for index, (left, right) in enumerate(group_pairs(packets), start=1)
        if is_ordered(left, right)
    )


def divider_positions(
    packets: Sequence[Packet],
    dividers: Sequence[Packet] = DIVIDER_PACKETS,
) -> list[int]:
    """1-based position of each divider once dividers and packets are sorted together."""
    positions = []
    for i, divider in enumerate(dividers):
        below = sum(1 for packet in packets if is_ordered(packet, divider))
        for j, other in enumerate(dividers):
            if j == i:
                continue
            order = compare_packets(other, divider)
            if order is Ordering.LESS or (order is Ordering.EQUAL and j < i):
                below += 1
        positions.append(below + 1)
    return positions


def decoder_key(
    packets: Sequence[Packet],
    dividers: Sequence[Packet] = DIVIDER_PACKETS,
) -> int:
    """Part 2: product of the dividers' sorted positions."""
    return prod(divider_positions(packets, dividers))


def solve(
    packets: Sequence[Packet],
    dividers: Sequence[Packet] = DIVIDER_PACKETS,
) -> PuzzleAnswer:
    """Compute both answers for an already-parsed corpus."""
    return PuzzleAnswer(
        part1=sum_ordered_pair_indices(packets),
        part2=decoder_key(packets, dividers),
        packet_count=len(packets),
        pair_count=len(packets) // 2,
    )
