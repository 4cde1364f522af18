"""Packet Schemas — field validation at the API boundary.

Invariants:
    - SolveRequest accepts empty text (empty corpus is valid) but caps length
    - CompareRequest strips and rejects blank packets
    - Responses convert from core results without loss
"""

import pytest
from pydantic import ValidationError

from distress.core.compare_packets import Ordering
from distress.core.evaluate_packets import PuzzleAnswer
from distress.schemas.packets import (
    MAX_INPUT_CHARS,
    CompareRequest,
    CompareResponse,
    SolveRequest,
    SolveResponse,
)


# --- SolveRequest -------------------------------------------------------------

def test_solve_request_accepts_empty_text():
    assert SolveRequest(text="").text == ""


def test_solve_request_max_length_enforced():
    with pytest.raises(ValidationError):
        SolveRequest(text="[" * (MAX_INPUT_CHARS + 1))


def test_solve_request_requires_text():
    with pytest.raises(ValidationError):
        SolveRequest()


# --- SolveResponse ------------------------------------------------------------

def test_solve_response_from_answer():
    answer = PuzzleAnswer(part1=13, part2=140, packet_count=16, pair_count=8)
    resp = SolveResponse.from_answer(answer)
    assert resp.model_dump() == {
        "part1": 13, "part2": 140, "packet_count": 16, "pair_count": 8,
    }


# --- CompareRequest -----------------------------------------------------------

def test_compare_request_strips_whitespace():
    req = CompareRequest(left="  [1] ", right="[2]\n")
    assert req.left == "[1]"
    assert req.right == "[2]"


def test_compare_request_rejects_blank_packet():
    with pytest.raises(ValidationError):
        CompareRequest(left="   ", right="[1]")


def test_compare_request_rejects_empty_packet():
    with pytest.raises(ValidationError):
        CompareRequest(left="[1]", right="")


# --- CompareResponse ----------------------------------------------------------

def test_compare_response_from_less():
    resp = CompareResponse.from_ordering(Ordering.LESS)
    assert resp.ordering == "less"
    assert resp.in_order is True


def test_compare_response_from_equal_and_greater():
    assert CompareResponse.from_ordering(Ordering.EQUAL).model_dump() == {
        "ordering": "equal", "in_order": False,
    }
    assert CompareResponse.from_ordering(Ordering.GREATER).ordering == "greater"
