"""Packet Routes — solve a corpus or compare two packets over HTTP.

Invariants:
    - Bodies validated by Pydantic before reaching the handler
    - Malformed packet text surfaces as DistressError → 400 envelope (global handler)
    - Handlers are pure delegations to services/solve_puzzle
"""

import logging

from fastapi import APIRouter

from distress.schemas.packets import (
    CompareRequest, CompareResponse, SolveRequest, SolveResponse,
)
from distress.services.solve_puzzle import compare_text, solve_text

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/packets", tags=["packets"])


@router.post("/solve", response_model=SolveResponse)
async def solve_packets(body: SolveRequest):
    """Compute part 1 and part 2 for a whole corpus."""
    answer = solve_text(body.text, source="api")
    return SolveResponse.from_answer(answer)


@router.post("/compare", response_model=CompareResponse)
async def compare_packet_pair(body: CompareRequest):
    """Three-way compare two packets."""
    return CompareResponse.from_ordering(compare_text(body.left, body.right))
