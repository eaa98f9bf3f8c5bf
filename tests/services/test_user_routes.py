"""User Routes — POST/GET /api/users over HTTP.

Invariants:
    - Form and JSON bodies both accepted
    - Success: 200 {username, _id}; failures use {"error": ..., "code": ...}
    - Duplicate username → 409, missing username → 400
"""


async def test_create_user_from_form(client):
    res = await client.post("/api/users", data={"username": "fcc_test"})
    assert res.status_code == 200
    body = res.json()
    assert list(body) == ["username", "_id"]
    assert body["username"] == "fcc_test"
    assert isinstance(body["_id"], str) and body["_id"]


async def test_create_user_from_json(client):
    res = await client.post("/api/users", json={"username": "json_user"})
    assert res.status_code == 200
    assert res.json()["username"] == "json_user"


async def test_create_user_missing_username(client):
    res = await client.post("/api/users", data={})
    assert res.status_code == 400
    assert res.json() == {"error": "Username is required", "code": "VALIDATION_ERROR"}


async def test_create_user_malformed_json(client):
    res = await client.post(
        "/api/users", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"


async def test_create_user_duplicate(client):
    await client.post("/api/users", data={"username": "dup"})
    res = await client.post("/api/users", data={"username": "dup"})
    assert res.status_code == 409
    assert res.json() == {"error": "Username already exists", "code": "DUPLICATE_RESOURCE"}

    listed = (await client.get("/api/users")).json()
    assert [u["username"] for u in listed] == ["dup"]


async def test_list_users(client):
    created = []
    for name in ("u1", "u2", "u3"):
        created.append((await client.post("/api/users", data={"username": name})).json())

    res = await client.get("/api/users")
    assert res.status_code == 200
    listed = res.json()
    assert len(listed) == 3
    assert all(list(u) == ["username", "_id"] for u in listed)
    assert {u["_id"] for u in listed} == {u["_id"] for u in created}


async def test_list_users_empty(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == []


async def test_create_user_username_too_long(client):
    res = await client.post("/api/users", data={"username": "a" * 256})
    assert res.status_code == 400
    assert res.json() == {
        "error": "Username must be at most 255 characters", "code": "VALIDATION_ERROR",
    }
