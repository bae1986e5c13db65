"""Account deserialization for the Monaco protocol client."""

from .constants import MARKET_DISCRIMINATOR
from .errors import InvalidAccountDataError, InvalidDiscriminatorError
from .types import Market, MarketStatus
from .utils import ByteReader


def _validate_discriminator(data: bytes, expected: bytes, name: str) -> None:
    """Validate account discriminator."""
    if len(data) < 8:
        raise InvalidAccountDataError(f"{name} data too short: {len(data)} bytes")
    actual = bytes(data[:8])
    if actual != expected:
        raise InvalidDiscriminatorError(expected, actual)


def deserialize_market(data: bytes) -> Market:
    """Deserialize a Market account.

    Layout (Borsh, variable length):
    - [0..8]: discriminator (sha256("account:Market")[:8])
    - authority (Pubkey)
    - event_account (Pubkey)
    - mint_account (Pubkey)
    - market_status (u8)
    - market_type (String: u32 length + utf-8)
    - decimal_limit (u8)
    - published (bool)
    - suspended (bool)
    - market_outcomes (Vec<String>)
    - market_winning_outcome_index (Option<u16>)
    - market_lock_timestamp (i64)
    - market_settle_timestamp (Option<i64>)
    - title (String)
    - escrow_account_bump (u8)
    """
    _validate_discriminator(data, MARKET_DISCRIMINATOR, "Market")

    reader = ByteReader(data, offset=8)
    authority = reader.read_pubkey()
    event_account = reader.read_pubkey()
    mint_account = reader.read_pubkey()

    status_raw = reader.read_u8()
    try:
        market_status = MarketStatus(status_raw)
    except ValueError:
        raise InvalidAccountDataError(f"unknown market status {status_raw}")

    return Market(
        authority=authority,
        event_account=event_account,
        mint_account=mint_account,
        market_status=market_status,
        market_type=reader.read_string(),
        decimal_limit=reader.read_u8(),
        published=reader.read_bool(),
        suspended=reader.read_bool(),
        market_outcomes=reader.read_vec(reader.read_string),
        market_winning_outcome_index=reader.read_option(reader.read_u16),
        market_lock_timestamp=reader.read_i64(),
        market_settle_timestamp=reader.read_option(reader.read_i64),
        title=reader.read_string(),
        escrow_account_bump=reader.read_u8(),
    )
