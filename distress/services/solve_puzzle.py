"""Puzzle Service — parse a whole input text and run the batch evaluations.

Invariants:
    - Input is parsed completely before any evaluation (no partial answers)
    - MalformedInputError propagates unchanged, tagged with its source
    - Dividers default to the configured divider_packets

Design Decisions:
    - Thin shell over core: settings + logging live here, math stays pure
    - Callers (CLI, API) own error presentation; the service only re-raises
"""

import logging
from typing import Sequence

from distress.config import get_settings
from distress.core.compare_packets import Ordering, compare_packets, sort_packets
from distress.core.errors import MalformedInputError
from distress.core.evaluate_packets import PuzzleAnswer, solve
from distress.core.packet import Packet
from distress.core.parse_packet import parse_packet, parse_packets

logger = logging.getLogger(__name__)


def _resolve_dividers(dividers: Sequence[Packet] | None) -> Sequence[Packet]:
    return dividers if dividers is not None else get_settings().dividers()


def load_packets(text: str, source: str | None = None) -> list[Packet]:
    """Parse a whole corpus, tagging any failure with its source."""
    try:
        return parse_packets(text)
    except MalformedInputError as exc:
        exc.context.source = source
        raise


def solve_corpus(
    packets: Sequence[Packet],
    dividers: Sequence[Packet] | None = None,
    source: str | None = None,
) -> PuzzleAnswer:
    """Compute part 1 and part 2 for already-parsed packets."""
    try:
        answer = solve(packets, _resolve_dividers(dividers))
    except MalformedInputError as exc:
        exc.context.source = source
        raise
    logger.info(
        "Solved packet corpus",
        extra={
            "source": source,
            "packet_count": answer.packet_count,
            "pair_count": answer.pair_count,
            "part1": answer.part1,
            "part2": answer.part2,
        },
    )
    return answer


def solve_text(
    text: str,
    dividers: Sequence[Packet] | None = None,
    source: str | None = None,
) -> PuzzleAnswer:
    """Parse a corpus and compute part 1 and part 2."""
    return solve_corpus(load_packets(text, source), dividers, source)


def sort_corpus(
    packets: Sequence[Packet],
    dividers: Sequence[Packet] | None = None,
) -> list[Packet]:
    """Dividers plus every packet, in sorted order."""
    ordered = sort_packets([*_resolve_dividers(dividers), *packets])
    logger.debug("Sorted packet corpus", extra={"packet_count": len(packets)})
    return ordered


def compare_text(left: str, right: str) -> Ordering:
    """Compare two packet lines."""
    return compare_packets(parse_packet(left), parse_packet(right))
