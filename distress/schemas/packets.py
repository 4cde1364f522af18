"""Packet Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - SolveRequest.text: at most 1,000,000 chars (whole corpus in one body)
    - CompareRequest.left/right: non-empty after stripping
    - Responses mirror core results 1:1 (no derived fields added here)

Design Decisions:
    - Packets travel as text, not JSON arrays: the parser is the single validator
    - Literal type for CompareResponse.ordering: Pydantic handles validation natively
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from distress.core.compare_packets import Ordering
from distress.core.evaluate_packets import PuzzleAnswer

MAX_INPUT_CHARS = 1_000_000

_ORDERING_NAMES: dict[Ordering, Literal["less", "equal", "greater"]] = {
    Ordering.LESS: "less",
    Ordering.EQUAL: "equal",
    Ordering.GREATER: "greater",
}


class SolveRequest(BaseModel):
    """Whole puzzle input: packet lines separated by blank lines."""
    text: str = Field(max_length=MAX_INPUT_CHARS)


class SolveResponse(BaseModel):
    """Both answers for a corpus."""
    part1: int
    part2: int
    packet_count: int = Field(ge=0)
    pair_count: int = Field(ge=0)

    @classmethod
    def from_answer(cls, answer: PuzzleAnswer) -> "SolveResponse":
        return cls(
            part1=answer.part1,
            part2=answer.part2,
            packet_count=answer.packet_count,
            pair_count=answer.pair_count,
        )


class CompareRequest(BaseModel):
    """Two single-line packets."""
    left: str = Field(min_length=1, max_length=MAX_INPUT_CHARS)
    right: str = Field(min_length=1, max_length=MAX_INPUT_CHARS)

    @field_validator("left", "right")
    @classmethod
    def strip_packet(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("packet cannot be empty or whitespace")
        return v


class CompareResponse(BaseModel):
    """Three-way comparison result."""
    ordering: Literal["less", "equal", "greater"]
    in_order: bool

    @classmethod
    def from_ordering(cls, ordering: Ordering) -> "CompareResponse":
        return cls(
            ordering=_ORDERING_NAMES[ordering],
            in_order=ordering is Ordering.LESS,
        )
