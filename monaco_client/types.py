"""Type definitions for the Monaco protocol client."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, List, Optional, TypedDict, TypeVar

from solders.pubkey import Pubkey
from spl.token.core import MintInfo

T = TypeVar("T")


class MarketStatus(IntEnum):
    """Lifecycle status of a market."""

    INITIALIZING = 0
    OPEN = 1
    LOCKED = 2
    READY_FOR_SETTLEMENT = 3
    SETTLED = 4
    COMPLETE = 5


@dataclass
class Market:
    """Market account data."""

    authority: Pubkey
    event_account: Pubkey
    mint_account: Pubkey
    market_status: MarketStatus
    market_type: str
    decimal_limit: int
    published: bool
    suspended: bool
    market_outcomes: List[str]
    market_winning_outcome_index: Optional[int]
    market_lock_timestamp: int
    market_settle_timestamp: Optional[int]
    title: str
    escrow_account_bump: int


# ============================================================================
# RESPONSE DATA SHAPES
# ============================================================================


class FindPdaResponse(TypedDict):
    """A derived program address."""

    pda: Pubkey


class GetAccount(TypedDict, Generic[T]):
    """A fetched account together with its address."""

    public_key: Pubkey
    account: T


class MarketAccountsForCreateBetOrder(TypedDict):
    """Addresses and market record needed to place a bet order."""

    escrow_pda: Pubkey
    market_outcome_pda: Pubkey
    market_outcome_pool_pda: Pubkey
    market_position_pda: Pubkey
    market: Market


class StakeInteger(TypedDict):
    """A stake expressed in the token's smallest unit."""

    stake_integer: int


__all__ = [
    "MarketStatus",
    "Market",
    "MintInfo",
    "FindPdaResponse",
    "GetAccount",
    "MarketAccountsForCreateBetOrder",
    "StakeInteger",
]
