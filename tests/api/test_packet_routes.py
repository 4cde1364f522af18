"""Packet Routes — solve and compare over HTTP, including error envelopes.

Invariants:
    - Malformed packet text → 400 with the DistressError envelope
    - Body validation failures → 400 VALIDATION_ERROR with field details
"""


# ─── POST /api/v1/packets/solve ──────────────────────────────────

async def test_solve_sample(client, sample_text):
    res = await client.post("/api/v1/packets/solve", json={"text": sample_text})
    assert res.status_code == 200
    assert res.json() == {
        "part1": 13, "part2": 140, "packet_count": 16, "pair_count": 8,
    }


async def test_solve_empty_corpus(client):
    res = await client.post("/api/v1/packets/solve", json={"text": ""})
    assert res.status_code == 200
    assert res.json()["part1"] == 0
    assert res.json()["part2"] == 2


async def test_solve_malformed_packet_returns_400(client):
    res = await client.post("/api/v1/packets/solve", json={"text": "[1]\n[2,]\n"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "MALFORMED_PACKET"
    assert error["category"] == "validation"
    assert error["context"]["line_number"] == 2
    assert error["context"]["column"] == 4
    assert error["context"]["source"] == "api"


async def test_solve_overlong_number_returns_400(client):
    text = "[1]\n[" + "9" * 5000 + "]\n"
    res = await client.post("/api/v1/packets/solve", json={"text": text})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "MALFORMED_PACKET"
    assert error["context"]["line_number"] == 2
    assert error["context"]["column"] == 2


async def test_solve_unpaired_returns_400(client):
    res = await client.post("/api/v1/packets/solve", json={"text": "[1]\n"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "UNPAIRED_PACKET"


async def test_solve_missing_text_is_validation_error(client):
    res = await client.post("/api/v1/packets/solve", json={})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "body.text"


# ─── POST /api/v1/packets/compare ────────────────────────────────

async def test_compare_in_order(client):
    res = await client.post(
        "/api/v1/packets/compare", json={"left": "[[1],[2,3,4]]", "right": "[[1],4]"},
    )
    assert res.status_code == 200
    assert res.json() == {"ordering": "less", "in_order": True}


async def test_compare_promotion_is_equal(client):
    res = await client.post(
        "/api/v1/packets/compare", json={"left": "[5]", "right": "[[5]]"},
    )
    assert res.json() == {"ordering": "equal", "in_order": False}


async def test_compare_out_of_order(client):
    res = await client.post(
        "/api/v1/packets/compare", json={"left": "[9]", "right": "[[8,7,6]]"},
    )
    assert res.json()["ordering"] == "greater"


async def test_compare_malformed_packet_returns_400(client):
    res = await client.post(
        "/api/v1/packets/compare", json={"left": "[1", "right": "[1]"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MALFORMED_PACKET"


async def test_compare_blank_packet_is_validation_error(client):
    res = await client.post(
        "/api/v1/packets/compare", json={"left": " ", "right": "[1]"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
