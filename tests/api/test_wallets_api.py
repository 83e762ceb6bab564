from decimal import Decimal


async def create_user(client, username="alice"):
    res = await client.post("/api/users", json={"username": username})
    return res.json()["id"]


async def test_create_wallet(client):
    user_id = await create_user(client)

    res = await client.post("/api/wallets", json={"userId": user_id, "balance": "150.25"})

    assert res.status_code == 201
    body = res.json()
    assert body["userId"] == user_id
    assert Decimal(body["balance"]) == Decimal("150.25")
    assert body["currency"] == "INR"
    assert body["status"] == "ACTIVE"


async def test_create_wallet_with_nested_user(client):
    user_id = await create_user(client)

    res = await client.post("/api/wallets", json={"user": {"id": user_id}, "balance": 0, "currency": "INR"})

    assert res.status_code == 201
    assert res.json()["userId"] == user_id


async def test_second_wallet_conflicts(client):
    user_id = await create_user(client)
    await client.post("/api/wallets", json={"userId": user_id})

    res = await client.post("/api/wallets", json={"userId": user_id, "balance": "10"})

    assert res.status_code == 409
    assert res.headers["X-Error-Kind"] == "ALREADY_EXISTS"
    assert len((await client.get("/api/wallets")).json()) == 1


async def test_wallet_for_missing_user(client):
    res = await client.post("/api/wallets", json={"userId": 12})

    assert res.status_code == 404


async def test_negative_opening_balance(client):
    user_id = await create_user(client)

    res = await client.post("/api/wallets", json={"userId": user_id, "balance": "-1"})

    assert res.status_code == 400


async def test_get_wallet_by_id_and_user(client, api_wallet):
    wallet = await api_wallet(balance="10")

    by_id = await client.get(f"/api/wallets/{wallet['id']}")
    by_user = await client.get(f"/api/wallets/user/{wallet['userId']}")

    assert by_id.json() == by_user.json()
    assert (await client.get("/api/wallets/999")).status_code == 404
    assert (await client.get("/api/wallets/user/999")).status_code == 404


async def test_update_status(client, api_wallet):
    wallet = await api_wallet()

    res = await client.put(f"/api/wallets/{wallet['id']}/status", json={"status": "INACTIVE"})

    assert res.status_code == 200
    assert res.json()["status"] == "INACTIVE"
    bad = await client.put(f"/api/wallets/{wallet['id']}/status", json={"status": "FROZEN"})
    assert bad.status_code == 400
    missing = await client.put("/api/wallets/999/status", json={"status": "ACTIVE"})
    assert missing.status_code == 404
