"""On-chain state lookups returning client responses."""

import logging

from solders.pubkey import Pubkey

from .program import Program
from .response import ClientResponse, ResponseFactory
from .types import GetAccount, Market

logger = logging.getLogger(__name__)


async def get_market(
    program: Program, market_pk: Pubkey
) -> ClientResponse[GetAccount[Market]]:
    """Fetch a market account.

    Args:
        program: Program handle bound to an RPC connection
        market_pk: Address of the market

    Returns:
        ClientResponse whose data is ``{"public_key": market_pk, "account": Market}``
    """
    response = ResponseFactory()
    try:
        market = await program.fetch_market(market_pk)
        response.add_response_data({"public_key": market_pk, "account": market})
    except Exception as e:
        logger.warning(f"Failed to fetch market {market_pk}: {e}")
        response.add_error(e)
    return response.body


async def get_mint_info(program: Program, mint_pk: Pubkey) -> ClientResponse[dict]:
    """Fetch the mint info (decimals, supply, authorities) of an SPL token.

    The fields of the mint record are merged into the response data, e.g.
    ``response.data["decimals"]``.
    """
    response = ResponseFactory()
    try:
        mint_info = await program.fetch_mint_info(mint_pk)
        response.add_response_data(mint_info._asdict())
    except Exception as e:
        logger.warning(f"Failed to fetch mint info {mint_pk}: {e}")
        response.add_error(e)
    return response.body
