#!/usr/bin/env python3
"""
Replay the basic wallet scenarios against a running DigiWallet server.

Example:
    python scripts/wallet_smoke.py --server http://127.0.0.1:8080
"""

from __future__ import annotations

import argparse
import json
import sys
import time
import urllib.error
import urllib.request
from decimal import Decimal
from typing import Any, Optional


class SmokeFailure(Exception):
    pass


def http_json(method: str, url: str, payload: Optional[dict[str, Any]] = None,
              timeout: int = 15) -> tuple[int, Any]:
    data = json.dumps(payload).encode("utf-8") if payload is not None else None
    req = urllib.request.Request(url, data=data, headers={"Content-Type": "application/json"}, method=method)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            body = resp.read()
            return resp.status, json.loads(body.decode("utf-8")) if body else None
    except urllib.error.HTTPError as exc:
        body = exc.read()
        try:
            return exc.code, json.loads(body.decode("utf-8"))
        except ValueError:
            return exc.code, body.decode(errors="ignore")


class WalletClient:
    def __init__(self, server: str) -> None:
        self.base = server.rstrip("/") + "/api"

    def call(self, method: str, path: str, payload: Optional[dict[str, Any]] = None,
             expect: int = 200) -> Any:
        status, body = http_json(method, self.base + path, payload)
        print(f"[api] {method} {path} -> {status}")
        if status != expect:
            raise SmokeFailure(f"{method} {path}: expected {expect}, got {status} {body}")
        return body

    def balance(self, wallet_id: int) -> Decimal:
        return Decimal(str(self.call("GET", f"/wallets/{wallet_id}")["balance"]))

    def history(self, wallet_id: int) -> list[dict[str, Any]]:
        return self.call("GET", f"/transactions/wallet/{wallet_id}")

    def transact(self, wallet_id: int, kind: str, amount: str, expect: int = 201) -> Any:
        return self.call(
            "POST",
            "/transactions",
            {"walletId": wallet_id, "type": kind, "amount": amount, "category": "Smoke"},
            expect=expect,
        )


def check(condition: bool, message: str) -> None:
    if not condition:
        raise SmokeFailure(message)
    print(f"[ok] {message}")


def run(client: WalletClient, username: str) -> None:
    client.call("GET", "/health")

    user = client.call("POST", "/users", {"username": username, "fullName": "Smoke Test"}, expect=201)
    wallet = client.call("POST", "/wallets", {"userId": user["id"], "balance": "0"}, expect=201)
    wallet_id = wallet["id"]

    # 1. credit on a fresh wallet
    client.transact(wallet_id, "CREDIT", "1000")
    check(client.balance(wallet_id) == Decimal("1000"), "credit 1000 -> balance 1000")
    check(len(client.history(wallet_id)) == 1, "one transaction recorded")

    # 2. overdraft is rejected and changes nothing
    client.transact(wallet_id, "DEBIT", "1500", expect=422)
    check(client.balance(wallet_id) == Decimal("1000"), "rejected debit leaves balance at 1000")
    check(len(client.history(wallet_id)) == 1, "rejected debit writes no transaction")

    # 3. debit then credit
    client.transact(wallet_id, "DEBIT", "400")
    client.transact(wallet_id, "CREDIT", "200")
    check(client.balance(wallet_id) == Decimal("800"), "1000 - 400 + 200 = 800")
    check(len(client.history(wallet_id)) == 3, "three transactions recorded")

    # 4. one wallet per user
    client.call("POST", "/wallets", {"userId": user["id"]}, expect=409)

    # 5. non-positive amounts
    client.transact(wallet_id, "CREDIT", "0", expect=400)
    client.transact(wallet_id, "DEBIT", "-50", expect=400)
    check(client.balance(wallet_id) == Decimal("800"), "invalid amounts leave balance unchanged")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run wallet smoke scenarios against a DigiWallet server")
    parser.add_argument("--server", default="http://127.0.0.1:8080", help="DigiWallet server base URL")
    parser.add_argument(
        "--username",
        default=None,
        help="Username for the throwaway user (defaults to a timestamped name)",
    )
    args = parser.parse_args()

    username = args.username or f"smoke_{int(time.time())}"
    try:
        run(WalletClient(args.server), username)
    except SmokeFailure as exc:
        sys.exit(f"[fail] {exc}")
    except urllib.error.URLError as exc:
        sys.exit(f"[fail] server unreachable: {exc.reason}")

    print("[done] all scenarios passed")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit("aborted by user")
