"""monero-wallet -- async client for the monero-wallet-rpc daemon."""

from monero_wallet.client import WalletClient
from monero_wallet.errors import (
    DecodeError,
    ProtocolError,
    RPCError,
    TransportError,
    WalletError,
)
from monero_wallet.models import (
    ATOMIC_UNITS_PER_XMR,
    Balance,
    Transfer,
    atomic_to_xmr,
)

__version__ = "0.1.0"

__all__ = [
    "WalletClient",
    "WalletError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    "RPCError",
    "Balance",
    "Transfer",
    "ATOMIC_UNITS_PER_XMR",
    "atomic_to_xmr",
]
