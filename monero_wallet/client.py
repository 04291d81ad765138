"""Async client for the monero-wallet-rpc JSON-RPC interface."""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from monero_wallet.errors import DecodeError, ProtocolError, RPCError, TransportError
from monero_wallet.models import (
    AddressResult,
    Balance,
    BalanceResult,
    HeightResult,
    RPCRequest,
    Transfer,
    TransferEntry,
    TransfersParams,
    TransfersResult,
    TransferStatus,
)

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)


class WalletClient:
    """Async client for a monero-wallet-rpc daemon.

    Usage:
        async with WalletClient("http://localhost:18082/json_rpc", "user", "pass") as wallet:
            balance = await wallet.get_balance()
            print(balance.balance, balance.unlocked_balance)
    """

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._url = url
        self._username = username
        self._auth = httpx.DigestAuth(username, password)
        self._owns_client = http_client is None
        if http_client is None:
            kwargs: dict[str, Any] = {}
            if timeout is not None:
                kwargs["timeout"] = timeout
            http_client = httpx.AsyncClient(**kwargs)
        self._client = http_client

    @property
    def url(self) -> str:
        return self._url

    @property
    def username(self) -> str:
        return self._username

    async def __aenter__(self) -> "WalletClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._owns_client:
            await self._client.aclose()

    # -----------------------------------------------------------------
    # Internal HTTP helpers
    # -----------------------------------------------------------------

    async def _request(
        self,
        method: str,
        result_type: type[ResultT],
        params: Optional[BaseModel] = None,
    ) -> ResultT:
        """POST a JSON-RPC call and decode its ``result`` into ``result_type``."""
        body = RPCRequest(
            method=method,
            params=params.model_dump(by_alias=True) if params is not None else None,
        ).model_dump(exclude_none=True)

        logger.debug("wallet rpc call %s -> %s", method, self._url)
        try:
            response = await self._client.post(
                self._url,
                json=body,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                auth=self._auth,
            )
        except httpx.RequestError as exc:
            raise TransportError(method, f"{method}: request failed: {exc}") from exc

        if response.status_code != 200:
            logger.warning("wallet rpc %s returned status %d", method, response.status_code)
            raise ProtocolError(method, response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(method, f"{method}: response is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise DecodeError(method, f"{method}: response is not a JSON object")

        error = payload.get("error")
        if error:
            if not isinstance(error, dict):
                raise DecodeError(method, f"{method}: malformed error object")
            err = RPCError.from_response(method, error)
            logger.warning("wallet rpc %s failed: %s (code %s)", method, err.message, err.code)
            raise err

        try:
            result = result_type.model_validate(payload.get("result"))
        except ValidationError as exc:
            raise DecodeError(
                method, f"{method}: unexpected result shape: {exc.error_count()} error(s)"
            ) from exc
        logger.debug("wallet rpc %s decoded %r", method, result)
        return result

    # -----------------------------------------------------------------
    # Wallet API
    # -----------------------------------------------------------------

    async def get_address(self) -> str:
        """getaddress -- Get the address of the wallet in session.

        The address is returned as sent by the daemon; it is not validated.
        """
        result = await self._request("getaddress", AddressResult)
        return result.address

    async def get_balance(self) -> Balance:
        """getbalance -- Get the total and unlocked balance in XMR."""
        result = await self._request("getbalance", BalanceResult)
        return Balance.from_result(result)

    async def get_height(self) -> int:
        """getheight -- Get the wallet's current block height."""
        result = await self._request("getheight", HeightResult)
        return result.height

    async def get_transfers(
        self,
        *,
        incoming: bool = True,
        outgoing: bool = True,
        pending: bool = True,
        failed: bool = True,
    ) -> list[Transfer]:
        """get_transfers -- List the wallet's transfers, most recent first.

        Args:
            incoming: Include received transfers.
            outgoing: Include sent transfers.
            pending: Include transfers not yet in a block.
            failed: Include transfers that failed to relay.

        Returns:
            Transfers of every requested category, sorted by timestamp
            descending. Equal timestamps keep the category order incoming,
            outgoing, pending, failed, then the daemon's order.
        """
        params = TransfersParams(
            incoming=incoming, outgoing=outgoing, pending=pending, failed=failed
        )
        result = await self._request("get_transfers", TransfersResult, params)

        categories: list[tuple[TransferStatus, list[TransferEntry]]] = [
            ("incoming", result.incoming),
            ("outgoing", result.outgoing),
            ("pending", result.pending),
            ("failed", result.failed),
        ]
        transfers = [
            Transfer.from_entry(entry, status)
            for status, entries in categories
            for entry in entries
        ]
        # sorted() is stable with reverse=True, so ties keep concatenation order.
        return sorted(transfers, key=attrgetter("timestamp"), reverse=True)
