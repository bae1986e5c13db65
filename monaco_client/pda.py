"""PDA (Program Derived Address) finders for the Monaco protocol.

Each finder returns a ``ClientResponse[FindPdaResponse]``; a derivation
failure, including seeds that cannot be encoded, is reported as a single
``DerivationFailedError`` and leaves ``pda`` unset.
"""

import logging
from decimal import Decimal
from typing import Callable, List, Union

from solders.pubkey import Pubkey

from .constants import ODDS_DECIMALS, SEED_ESCROW
from .errors import DerivationFailedError
from .program import Program
from .response import ClientResponse, ResponseFactory
from .types import FindPdaResponse
from .utils import encode_bool, encode_str, format_odds

logger = logging.getLogger(__name__)


async def _find_pda(
    program: Program, account: str, build_seeds: Callable[[], List[bytes]]
) -> ClientResponse[FindPdaResponse]:
    response = ResponseFactory()
    try:
        pda = await program.find_program_address(build_seeds())
        logger.debug(f"Derived {account} PDA {pda}")
        response.add_response_data({"pda": pda})
    except Exception as e:
        logger.warning(f"Failed to derive {account} PDA: {e}")
        response.add_error(DerivationFailedError(account, e))
    return response.body


async def find_escrow_pda(
    program: Program, market_pk: Pubkey
) -> ClientResponse[FindPdaResponse]:
    """Derive the escrow account PDA for a market.

    Seeds: ["escrow", market]
    """
    return await _find_pda(
        program, "escrow", lambda: [SEED_ESCROW, bytes(market_pk)]
    )


async def find_market_outcome_pda(
    program: Program, market_pk: Pubkey, market_outcome: str
) -> ClientResponse[FindPdaResponse]:
    """Derive the PDA of one outcome of a market.

    Seeds: [market, outcome title]
    """
    return await _find_pda(
        program,
        "market outcome",
        lambda: [bytes(market_pk), encode_str(market_outcome)],
    )


async def find_market_matching_pool_pda(
    program: Program,
    market_pk: Pubkey,
    market_outcome: str,
    odds: Union[int, float, str, Decimal],
    backing: bool,
) -> ClientResponse[FindPdaResponse]:
    """Derive the matching pool PDA for an outcome at given odds and side.

    Seeds: [market, outcome title, odds ("%.3f"), "true" | "false"]
    """
    return await _find_pda(
        program,
        "market matching pool",
        lambda: [
            bytes(market_pk),
            encode_str(market_outcome),
            encode_str(format_odds(odds, ODDS_DECIMALS)),
            encode_bool(backing),
        ],
    )


async def find_market_position_pda(
    program: Program, market_pk: Pubkey, purchaser_pk: Pubkey
) -> ClientResponse[FindPdaResponse]:
    """Derive the PDA of a purchaser's position in a market.

    Seeds: [purchaser, market]
    """
    return await _find_pda(
        program,
        "market position",
        lambda: [bytes(purchaser_pk), bytes(market_pk)],
    )
