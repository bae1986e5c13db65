"""Monaco client - Python helpers for the Monaco betting protocol on Solana.

Derives program addresses, fetches market and mint state, and wraps every
outcome in a uniform ``ClientResponse``.

Example:
    from monaco_client import MonacoProgram, get_market_accounts

    async with MonacoProgram.connect(wallet, rpc_url) as program:
        accounts = await get_market_accounts(program, market_pk, True, 0, 2.5)
        if not accounts.success:
            print(accounts.errors)
"""

__version__ = "0.1.0"

# ============================================================================
# PROGRAM HANDLE
# ============================================================================

from .program import MonacoProgram, Program

# ============================================================================
# RESPONSES
# ============================================================================

from .response import ClientResponse, ResponseFactory

# ============================================================================
# LOOKUPS AND HELPERS
# ============================================================================

from .accounts import deserialize_market
from .helpers import get_market_accounts, ui_stake_to_integer
from .markets import get_market, get_mint_info
from .pda import (
    find_escrow_pda,
    find_market_matching_pool_pda,
    find_market_outcome_pda,
    find_market_position_pda,
)

# ============================================================================
# CONSTANTS, TYPES AND ERRORS
# ============================================================================

from .constants import (
    DEFAULT_RPC_URL,
    DEVNET_RPC_URL,
    MARKET_DISCRIMINATOR,
    ODDS_DECIMALS,
    PROGRAM_ID,
    SEED_ESCROW,
)
from .errors import (
    AccountNotFoundError,
    DerivationFailedError,
    ErrorKind,
    InvalidAccountDataError,
    InvalidDiscriminatorError,
    InvalidInputError,
    InvalidOutcomeError,
    InvalidStakeError,
    MonacoError,
    RpcError,
    RpcTimeoutError,
    UpstreamError,
    as_client_error,
)
from .types import (
    FindPdaResponse,
    GetAccount,
    Market,
    MarketAccountsForCreateBetOrder,
    MarketStatus,
    MintInfo,
    StakeInteger,
)
from .utils import account_discriminator, format_odds, ui_amount_to_integer

__all__ = [
    "__version__",
    # Program
    "MonacoProgram",
    "Program",
    # Responses
    "ClientResponse",
    "ResponseFactory",
    # Lookups and helpers
    "deserialize_market",
    "get_market",
    "get_mint_info",
    "get_market_accounts",
    "ui_stake_to_integer",
    "find_escrow_pda",
    "find_market_outcome_pda",
    "find_market_matching_pool_pda",
    "find_market_position_pda",
    # Constants
    "DEFAULT_RPC_URL",
    "DEVNET_RPC_URL",
    "MARKET_DISCRIMINATOR",
    "ODDS_DECIMALS",
    "PROGRAM_ID",
    "SEED_ESCROW",
    # Errors
    "ErrorKind",
    "MonacoError",
    "AccountNotFoundError",
    "InvalidAccountDataError",
    "InvalidDiscriminatorError",
    "DerivationFailedError",
    "RpcError",
    "RpcTimeoutError",
    "InvalidInputError",
    "InvalidOutcomeError",
    "InvalidStakeError",
    "UpstreamError",
    "as_client_error",
    # Types
    "MarketStatus",
    "Market",
    "MintInfo",
    "FindPdaResponse",
    "GetAccount",
    "MarketAccountsForCreateBetOrder",
    "StakeInteger",
    # Utils
    "account_discriminator",
    "format_odds",
    "ui_amount_to_integer",
]
