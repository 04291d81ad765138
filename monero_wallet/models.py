"""Pydantic v2 models for monero-wallet-rpc request/response data."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator

ATOMIC_UNITS_PER_XMR = 10**12

UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TransferStatus = Literal["incoming", "outgoing", "pending", "failed"]


def atomic_to_xmr(amount: int) -> float:
    """Convert an amount in atomic units to XMR."""
    return float(amount) / ATOMIC_UNITS_PER_XMR


# ---------------------------------------------------------------------------
# Wire models
# ---------------------------------------------------------------------------


class RPCRequest(BaseModel):
    """Request body POSTed to the wallet RPC endpoint."""

    method: str
    params: Optional[dict[str, Any]] = None


class AddressResult(BaseModel):
    """Result of ``getaddress``."""

    address: str

    model_config = {"strict": True}


class BalanceResult(BaseModel):
    """Result of ``getbalance``, in atomic units."""

    balance: int = Field(ge=0, le=UINT64_MAX)
    unlocked_balance: int = Field(ge=0, le=UINT64_MAX)

    model_config = {"strict": True}


class HeightResult(BaseModel):
    """Result of ``getheight``."""

    height: int = Field(ge=INT64_MIN, le=INT64_MAX)

    model_config = {"strict": True}


class TransfersParams(BaseModel):
    """Params of ``get_transfers``; every flag is always sent."""

    incoming: bool = Field(alias="in")
    outgoing: bool = Field(alias="out")
    pending: bool
    failed: bool

    model_config = {"populate_by_name": True}


class TransferEntry(BaseModel):
    """A single transfer as listed by ``get_transfers``."""

    txid: str
    payment_id: str = ""
    height: int = Field(default=0, ge=0, le=UINT64_MAX)
    timestamp: int = Field(ge=0, le=UINT64_MAX)
    amount: int = Field(ge=0, le=UINT64_MAX)
    fee: int = Field(default=0, ge=0, le=UINT64_MAX)
    note: str = ""

    model_config = {"strict": True}


class TransfersResult(BaseModel):
    """Result of ``get_transfers``.

    The daemon only includes the categories that were asked for and that
    have entries, so each list is optional and defaults to empty.
    """

    incoming: list[TransferEntry] = Field(default_factory=list, alias="in")
    outgoing: list[TransferEntry] = Field(default_factory=list, alias="out")
    pending: list[TransferEntry] = Field(default_factory=list)
    failed: list[TransferEntry] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @field_validator("incoming", "outgoing", "pending", "failed", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# ---------------------------------------------------------------------------
# Public result models
# ---------------------------------------------------------------------------


class Balance(BaseModel):
    """Wallet balance in XMR."""

    # Total balance of the wallet.
    balance: float
    # Funds deep enough in the chain to be considered safe to spend.
    unlocked_balance: float

    model_config = {"frozen": True}

    @classmethod
    def from_result(cls, result: BalanceResult) -> "Balance":
        return cls(
            balance=atomic_to_xmr(result.balance),
            unlocked_balance=atomic_to_xmr(result.unlocked_balance),
        )


class Transfer(BaseModel):
    """A transfer of the wallet, amounts in XMR."""

    id: str
    amount: float
    fee: float
    status: TransferStatus
    timestamp: int

    model_config = {"frozen": True}

    @classmethod
    def from_entry(cls, entry: TransferEntry, status: TransferStatus) -> "Transfer":
        return cls(
            id=entry.txid,
            amount=atomic_to_xmr(entry.amount),
            fee=atomic_to_xmr(entry.fee),
            status=status,
            timestamp=entry.timestamp,
        )
