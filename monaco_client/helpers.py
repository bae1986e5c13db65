"""Multi-step helpers built on the lookup and PDA functions."""

import asyncio
import logging
from decimal import Decimal
from typing import Union

from solders.pubkey import Pubkey

from .errors import InvalidOutcomeError, InvalidStakeError
from .markets import get_market, get_mint_info
from .pda import (
    find_escrow_pda,
    find_market_matching_pool_pda,
    find_market_outcome_pda,
    find_market_position_pda,
)
from .program import Program
from .response import ClientResponse, ResponseFactory
from .types import MarketAccountsForCreateBetOrder, StakeInteger
from .utils import ui_amount_to_integer

logger = logging.getLogger(__name__)


async def get_market_accounts(
    program: Program,
    market_pk: Pubkey,
    backing: bool,
    market_outcome_index: int,
    odds: Union[int, float, str, Decimal],
) -> ClientResponse[MarketAccountsForCreateBetOrder]:
    """Return the PDAs and market record needed to create a bet order.

    Args:
        program: Program handle bound to an RPC connection and wallet
        market_pk: Address of the market
        backing: True to back the outcome, False to lay it
        market_outcome_index: Index of the chosen outcome in the market
        odds: Odds of the bet order

    Returns:
        ClientResponse with ``escrow_pda``, ``market_outcome_pda``,
        ``market_outcome_pool_pda``, ``market_position_pda`` and ``market``

    Example:
        market_pk = Pubkey.from_string("7o1PXyYZtBBDFZf9cEhHopn2C9R4G6GaPwFAxaNWM33D")
        accounts = await get_market_accounts(program, market_pk, True, 0, 5.9)
    """
    response = ResponseFactory()
    market = await get_market(program, market_pk)

    if not market.success:
        response.add_errors(market.errors)
        return response.body

    account = market.data["account"]
    outcomes = account.market_outcomes
    if not 0 <= market_outcome_index < len(outcomes):
        response.add_error(InvalidOutcomeError(market_outcome_index, len(outcomes)))
        return response.body
    outcome = outcomes[market_outcome_index]

    # Independent derivations, run together
    outcome_pda, outcome_pool_pda, position_pda, escrow_pda = await asyncio.gather(
        find_market_outcome_pda(program, market_pk, outcome),
        find_market_matching_pool_pda(program, market_pk, outcome, odds, backing),
        find_market_position_pda(program, market_pk, program.wallet_pubkey),
        find_escrow_pda(program, market_pk),
    )

    failed = [
        r for r in (outcome_pda, outcome_pool_pda, position_pda, escrow_pda)
        if not r.success
    ]
    if failed:
        for sub_response in failed:
            response.add_errors(sub_response.errors)
        return response.body

    response.add_response_data(
        {
            "escrow_pda": escrow_pda.data["pda"],
            "market_outcome_pda": outcome_pda.data["pda"],
            "market_outcome_pool_pda": outcome_pool_pda.data["pda"],
            "market_position_pda": position_pda.data["pda"],
            "market": account,
        }
    )
    return response.body


async def ui_stake_to_integer(
    program: Program,
    stake: Union[int, float, str, Decimal],
    market_pk: Pubkey,
) -> ClientResponse[StakeInteger]:
    """Convert a UI stake into the market token's smallest unit.

    Example: a stake of 20 on a market whose token has 9 decimals gives
    ``{"stake_integer": 20_000_000_000}``.
    """
    response = ResponseFactory()

    # Reject bad input before spending any RPC calls
    try:
        ui_amount_to_integer(stake, 0)
    except InvalidStakeError as e:
        response.add_error(e)
        return response.body

    market = await get_market(program, market_pk)
    if not market.success:
        response.add_errors(market.errors)
        return response.body

    mint_info = await get_mint_info(program, market.data["account"].mint_account)
    if not mint_info.success:
        response.add_errors(mint_info.errors)
        return response.body

    stake_integer = ui_amount_to_integer(stake, mint_info.data["decimals"])
    logger.debug(f"Stake {stake} -> {stake_integer} for market {market_pk}")
    response.add_response_data({"stake_integer": stake_integer})
    return response.body
