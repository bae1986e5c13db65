"""Error kinds and exceptions for the Monaco protocol client.

Every failure that ends up in a ``ClientResponse`` is a ``MonacoError``.
Foreign exceptions raised by the RPC transport or the SDK are mapped onto
the closed ``ErrorKind`` set by ``as_client_error``.
"""

import asyncio
from enum import Enum
from typing import Optional

import httpx
from solana.exceptions import SolanaRpcException


class ErrorKind(str, Enum):
    """Closed set of failure kinds a client response can carry."""

    ACCOUNT_NOT_FOUND = "AccountNotFound"
    INVALID_ACCOUNT_DATA = "InvalidAccountData"
    DERIVATION_FAILED = "DerivationFailed"
    RPC_ERROR = "RpcError"
    RPC_TIMEOUT = "RpcTimeout"
    INVALID_INPUT = "InvalidInput"
    UPSTREAM = "Upstream"


class MonacoError(Exception):
    """Base exception for all Monaco client errors."""

    kind: ErrorKind = ErrorKind.UPSTREAM

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class AccountNotFoundError(MonacoError):
    """Raised when an account is not found on-chain."""

    kind = ErrorKind.ACCOUNT_NOT_FOUND

    def __init__(self, address: str, cause: Optional[BaseException] = None):
        self.address = address
        super().__init__(f"Account not found: {address}", cause)


class InvalidAccountDataError(MonacoError):
    """Raised when account data cannot be deserialized."""

    kind = ErrorKind.INVALID_ACCOUNT_DATA

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"Invalid account data: {message}", cause)


class InvalidDiscriminatorError(InvalidAccountDataError):
    """Raised when account data has an invalid discriminator."""

    def __init__(self, expected: bytes, actual: bytes):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid discriminator: expected {expected!r}, got {actual!r}"
        )


class DerivationFailedError(MonacoError):
    """Raised when a program address cannot be derived from its seeds."""

    kind = ErrorKind.DERIVATION_FAILED

    def __init__(self, account: str, cause: Optional[BaseException] = None):
        self.account = account
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Could not derive {account} PDA{detail}", cause)


class RpcError(MonacoError):
    """Raised when the RPC node request fails."""

    kind = ErrorKind.RPC_ERROR

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"RPC error: {message}", cause)


class RpcTimeoutError(RpcError):
    """Raised when the RPC node does not answer in time."""

    kind = ErrorKind.RPC_TIMEOUT

    def __init__(self, cause: Optional[BaseException] = None):
        MonacoError.__init__(self, "RPC request timed out", cause)


class InvalidInputError(MonacoError):
    """Raised when a caller-supplied argument is invalid."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str):
        super().__init__(f"Invalid input: {message}")


class InvalidOutcomeError(InvalidInputError):
    """Raised when an outcome index is outside the market's outcomes."""

    def __init__(self, outcome_index: int, num_outcomes: int):
        self.outcome_index = outcome_index
        self.num_outcomes = num_outcomes
        super().__init__(
            f"outcome index {outcome_index} out of range "
            f"(market has {num_outcomes} outcomes)"
        )


class InvalidStakeError(InvalidInputError):
    """Raised when a stake cannot be converted to a token amount."""

    def __init__(self, stake: object):
        self.stake = stake
        super().__init__(f"stake {stake!r} is not a finite decimal amount")


class UpstreamError(MonacoError):
    """Wraps an unclassified exception raised by a dependency."""

    kind = ErrorKind.UPSTREAM

    def __init__(self, cause: BaseException):
        super().__init__(f"{type(cause).__name__}: {cause}", cause)


def as_client_error(error: BaseException) -> MonacoError:
    """Map any exception onto a ``MonacoError`` of the matching kind."""
    if isinstance(error, MonacoError):
        return error
    if isinstance(error, asyncio.TimeoutError):
        return RpcTimeoutError(error)
    if isinstance(error, SolanaRpcException):
        # solana-py raises these "from" the underlying httpx error
        if isinstance(error.__cause__, httpx.TimeoutException):
            return RpcTimeoutError(error)
        return RpcError(getattr(error, "error_msg", None) or repr(error.__cause__), error)
    return UpstreamError(error)
