"""Program handle used by every Monaco client helper."""

import logging
from typing import Optional, Protocol, Sequence

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from spl.token.async_client import AsyncToken
from spl.token.constants import TOKEN_PROGRAM_ID

from .accounts import deserialize_market
from .constants import DEFAULT_RPC_URL, PROGRAM_ID
from .errors import AccountNotFoundError, InvalidAccountDataError
from .types import Market, MintInfo

logger = logging.getLogger(__name__)

MAX_SEEDS = 16
MAX_SEED_LEN = 32


class Program(Protocol):
    """Capabilities the helpers need from a program handle.

    ``MonacoProgram`` is the RPC-backed implementation; tests substitute
    their own objects.
    """

    @property
    def program_id(self) -> Pubkey: ...

    @property
    def wallet_pubkey(self) -> Pubkey: ...

    async def find_program_address(self, seeds: Sequence[bytes]) -> Pubkey: ...

    async def fetch_market(self, market_pk: Pubkey) -> Market: ...

    async def fetch_mint_info(self, mint_pk: Pubkey) -> MintInfo: ...


class MonacoProgram:
    """Async handle for the Monaco program.

    Example:
        ```python
        async with MonacoProgram.connect(wallet, DEVNET_RPC_URL) as program:
            market = await get_market(program, market_pk)
        ```
    """

    def __init__(
        self,
        connection: AsyncClient,
        wallet: Keypair,
        program_id: Pubkey = PROGRAM_ID,
    ):
        """Initialize the program handle.

        Args:
            connection: Solana RPC async client
            wallet: Keypair of the wallet placing bets (used for position PDAs)
            program_id: Monaco program ID (defaults to mainnet)
        """
        self.connection = connection
        self.wallet = wallet
        self._program_id = program_id

    @classmethod
    def connect(
        cls,
        wallet: Keypair,
        rpc_url: str = DEFAULT_RPC_URL,
        program_id: Pubkey = PROGRAM_ID,
        commitment: Optional[Commitment] = None,
        timeout: Optional[float] = 10,
    ) -> "MonacoProgram":
        """Create a handle with its own ``AsyncClient``."""
        connection = AsyncClient(rpc_url, commitment=commitment, timeout=timeout)
        return cls(connection, wallet, program_id)

    async def __aenter__(self) -> "MonacoProgram":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying RPC connection."""
        await self.connection.close()

    @property
    def program_id(self) -> Pubkey:
        return self._program_id

    @property
    def wallet_pubkey(self) -> Pubkey:
        return self.wallet.pubkey()

    # =========================================================================
    # Address Derivation
    # =========================================================================

    async def find_program_address(self, seeds: Sequence[bytes]) -> Pubkey:
        """Derive the canonical program address for ``seeds``.

        Raises:
            ValueError: If there are too many seeds or a seed is too long
        """
        if len(seeds) > MAX_SEEDS:
            raise ValueError(f"{len(seeds)} seeds given, max {MAX_SEEDS}")
        for seed in seeds:
            if len(seed) > MAX_SEED_LEN:
                raise ValueError(f"seed is {len(seed)} bytes, max {MAX_SEED_LEN}")
        pda, _ = Pubkey.find_program_address(list(seeds), self._program_id)
        return pda

    # =========================================================================
    # Account Fetchers
    # =========================================================================

    async def fetch_market(self, market_pk: Pubkey) -> Market:
        """Fetch and deserialize a market account by its address."""
        logger.debug(f"Fetching market {market_pk}")
        response = await self.connection.get_account_info(market_pk)

        if response.value is None:
            raise AccountNotFoundError(str(market_pk))
        if response.value.owner != self._program_id:
            raise InvalidAccountDataError(
                f"{market_pk} is owned by {response.value.owner}, not {self._program_id}"
            )

        return deserialize_market(response.value.data)

    async def fetch_mint_info(self, mint_pk: Pubkey) -> MintInfo:
        """Fetch the SPL mint metadata (decimals, supply, authorities)."""
        logger.debug(f"Fetching mint info {mint_pk}")
        token = AsyncToken(self.connection, mint_pk, TOKEN_PROGRAM_ID, self.wallet)
        try:
            return await token.get_mint_info()
        except ValueError as e:
            if "Failed to find" in str(e):
                raise AccountNotFoundError(str(mint_pk), e)
            raise InvalidAccountDataError(str(e), e)
        except AttributeError as e:
            # spl-token reports a foreign owner as AttributeError
            raise InvalidAccountDataError(str(e), e)
