"""POST /api/transactions and the transaction read endpoints."""

from decimal import Decimal

import pytest


async def post_txn(client, wallet_id, type_, amount, **extra):
    return await client.post(
        "/api/transactions",
        json={"walletId": wallet_id, "type": type_, "amount": amount, **extra},
    )


async def balance(client, wallet_id):
    res = await client.get(f"/api/wallets/{wallet_id}")
    assert res.status_code == 200
    return Decimal(res.json()["balance"])


async def test_credit_returns_created_transaction(client, api_wallet):
    wallet = await api_wallet()

    res = await post_txn(client, wallet["id"], "CREDIT", "1000", category="Salary")

    assert res.status_code == 201
    body = res.json()
    assert body["walletId"] == wallet["id"]
    assert body["type"] == "CREDIT"
    assert Decimal(body["amount"]) == Decimal("1000")
    assert body["status"] == "COMPLETED"
    assert body["category"] == "Salary"
    assert body["referenceId"].startswith("CR-")
    assert body["transactionDate"]
    assert await balance(client, wallet["id"]) == Decimal("1000")


async def test_walkthrough(client, api_wallet):
    wallet = await api_wallet()
    wid = wallet["id"]

    assert (await post_txn(client, wid, "CREDIT", 1000)).status_code == 201

    overdraft = await post_txn(client, wid, "DEBIT", "1500")
    assert overdraft.status_code == 422
    assert overdraft.headers["X-Error-Kind"] == "INSUFFICIENT_FUNDS"
    assert await balance(client, wid) == Decimal("1000")

    assert (await post_txn(client, wid, "DEBIT", "400")).status_code == 201
    assert (await post_txn(client, wid, "CREDIT", "200")).status_code == 201
    assert await balance(client, wid) == Decimal("800")

    history = (await client.get(f"/api/transactions/wallet/{wid}")).json()
    assert [row["type"] for row in history] == ["CREDIT", "DEBIT", "CREDIT"]
    assert [Decimal(row["amount"]) for row in history] == [Decimal("200"), Decimal("400"), Decimal("1000")]


@pytest.mark.parametrize("amount", ["0", "-50", "10.999"])
async def test_invalid_amount_is_400(client, api_wallet, amount):
    wallet = await api_wallet(balance="100")

    res = await post_txn(client, wallet["id"], "CREDIT", amount)

    assert res.status_code == 400
    assert res.headers["X-Error-Kind"] == "INVALID_ARGUMENT"
    assert await balance(client, wallet["id"]) == Decimal("100")


async def test_unknown_wallet_is_404(client):
    res = await post_txn(client, 31337, "CREDIT", "10")

    assert res.status_code == 404
    assert "31337" in res.json()["detail"]


async def test_inactive_wallet_is_400(client, api_wallet):
    wallet = await api_wallet(balance="100")
    await client.put(f"/api/wallets/{wallet['id']}/status", json={"status": "INACTIVE"})

    res = await post_txn(client, wallet["id"], "DEBIT", "10")

    assert res.status_code == 400
    assert res.headers["X-Error-Kind"] == "INVALID_STATE"


@pytest.mark.parametrize(
    "payload",
    [
        {"walletId": 1, "type": "REFUND", "amount": "10"},
        {"walletId": 1, "type": "CREDIT", "amount": "ten"},
        {"type": "CREDIT", "amount": "10"},
    ],
)
async def test_malformed_body_is_400(client, payload):
    res = await client.post("/api/transactions", json=payload)

    assert res.status_code == 400
    body = res.json()
    assert body["detail"] == "Invalid request data"
    assert body["errors"]


async def test_nested_wallet_reference_is_accepted(client, api_wallet):
    wallet = await api_wallet()

    res = await client.post(
        "/api/transactions",
        json={"wallet": {"id": wallet["id"]}, "type": "CREDIT", "amount": 25.5, "referenceId": "CR-1"},
    )

    assert res.status_code == 201
    assert res.json()["referenceId"] == "CR-1"
    assert Decimal(res.json()["amount"]) == Decimal("25.5")


async def test_get_transaction(client, api_wallet):
    wallet = await api_wallet()
    created = (await post_txn(client, wallet["id"], "CREDIT", "5")).json()

    first = await client.get(f"/api/transactions/{created['id']}")
    second = await client.get(f"/api/transactions/{created['id']}")

    assert first.status_code == 200
    assert first.json() == second.json() == created
    assert (await client.get("/api/transactions/999")).status_code == 404


async def test_history_paging_and_missing_wallet(client, api_wallet):
    wallet = await api_wallet()
    for amount in ("1", "2", "3"):
        await post_txn(client, wallet["id"], "CREDIT", amount)

    page = await client.get(f"/api/transactions/wallet/{wallet['id']}", params={"limit": 1, "offset": 1})

    assert [Decimal(row["amount"]) for row in page.json()] == [Decimal("2")]
    assert (await client.get("/api/transactions/wallet/999")).status_code == 404
    assert (await client.get(f"/api/transactions/wallet/{wallet['id']}", params={"limit": 0})).status_code == 400


async def test_large_credit_round_trips_exactly(client, api_wallet):
    wallet = await api_wallet()

    res = await post_txn(client, wallet["id"], "CREDIT", "12345678901234567.89")

    assert res.status_code == 201
    assert Decimal(res.json()["amount"]) == Decimal("12345678901234567.89")
    assert await balance(client, wallet["id"]) == Decimal("12345678901234567.89")
    fetched = await client.get(f"/api/transactions/{res.json()['id']}")
    assert Decimal(fetched.json()["amount"]) == Decimal("12345678901234567.89")


async def test_credit_past_maximum_balance_is_rejected(client, api_wallet):
    wallet = await api_wallet(balance="99999999999999999.99")

    res = await post_txn(client, wallet["id"], "CREDIT", "0.01")

    assert res.status_code == 400
    assert res.headers["X-Error-Kind"] == "INVALID_ARGUMENT"
    assert await balance(client, wallet["id"]) == Decimal("99999999999999999.99")
