"""Error types raised by the wallet RPC client."""

from __future__ import annotations

from typing import Any, Optional


class WalletError(Exception):
    """Base class for every failure of a wallet RPC call."""

    def __init__(self, method: str, message: str) -> None:
        super().__init__(message)
        self.method = method
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(method={self.method!r}, message={self.message!r})"


class TransportError(WalletError):
    """The HTTP request could not be sent (DNS, TCP, TLS, timeout)."""


class ProtocolError(WalletError):
    """The wallet RPC answered with an HTTP status other than 200."""

    def __init__(self, method: str, status_code: int) -> None:
        super().__init__(method, f"{method}: returned invalid status code {status_code}")
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"ProtocolError(method={self.method!r}, status_code={self.status_code})"


class DecodeError(WalletError):
    """The response body is not JSON or does not match the expected result."""


class RPCError(WalletError):
    """The daemon rejected the call with a JSON-RPC error object."""

    def __init__(self, method: str, code: Optional[int], message: str) -> None:
        super().__init__(method, message)
        self.code = code

    @classmethod
    def from_response(cls, method: str, error: dict[str, Any]) -> "RPCError":
        """Create RPCError from the ``error`` member of a response body."""
        return cls(
            method,
            code=error.get("code"),
            message=error.get("message", "Unknown error"),
        )

    def __repr__(self) -> str:
        return f"RPCError(method={self.method!r}, code={self.code!r}, message={self.message!r})"
