"""Shared pytest helpers for wallet client tests."""

import json

import httpx

from monero_wallet.client import WalletClient

WALLET_URL = "http://wallet.test:18082/json_rpc"
USERNAME = "monero"
PASSWORD = "hunter2"
ADDRESS = "4AdUndXHHZ6cfufTMvppY6JwXNouMBzSkbLYfpAV5Usx3skxNgYeYTRj5UzqtReoS44qo9mtmXCqY45DJ852K5Jv2684Rge"
TXID = "c36258a276018c3a4bc1f195a7fb530f50cd63a4fa765fb7c6f7f49fc051762a"

DIGEST_CHALLENGE = 'Digest realm="monero-rpc", nonce="dcd98b7102dd2f0e8b11d0f600bfb0c093", qop="auth", algorithm=MD5'


def rpc_result(result: dict) -> httpx.Response:
    """Create a 200 JSON-RPC response carrying ``result``."""
    return httpx.Response(200, json={"id": "0", "jsonrpc": "2.0", "result": result})


def request_body(request: httpx.Request) -> dict:
    return json.loads(request.content)


def make_client(handler) -> WalletClient:
    """Create a WalletClient with MockTransport."""
    transport = httpx.MockTransport(handler)
    return WalletClient(
        WALLET_URL,
        USERNAME,
        PASSWORD,
        http_client=httpx.AsyncClient(transport=transport),
    )
