"""Utility functions for the Monaco protocol client."""

import struct
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable, List, Optional, TypeVar, Union

from Crypto.Hash import SHA256
from solders.pubkey import Pubkey

from .errors import InvalidAccountDataError, InvalidStakeError

T = TypeVar("T")

UiAmount = Union[int, float, str, Decimal]


def sha256(data: bytes) -> bytes:
    """Compute the sha256 hash of data."""
    return SHA256.new(data).digest()


def account_discriminator(account_name: str) -> bytes:
    """Return the 8-byte Anchor discriminator for an account type.

    Anchor prefixes every account with ``sha256("account:<Name>")[:8]``.
    """
    return sha256(f"account:{account_name}".encode())[:8]


# ============================================================================
# SEED ENCODING
# ============================================================================


def encode_str(value: str) -> bytes:
    """Encode a string seed as UTF-8."""
    return value.encode("utf-8")


def encode_bool(value: bool) -> bytes:
    """Encode a boolean seed the way the program does ("true" / "false")."""
    return b"true" if value else b"false"


def format_odds(odds: Union[int, float, str, Decimal], decimals: int = 3) -> str:
    """Render odds with a fixed number of decimal places.

    Matching pools are keyed by this string, so 2, 2.0 and "2.000" all map
    to "2.000". Floats are rounded from their exact binary value, as the
    program's JavaScript clients do with ``toFixed``: 2.0005 is stored as
    2.000499... and renders as "2.000".
    """
    quantum = Decimal(1).scaleb(-decimals)
    value = Decimal(odds) if isinstance(odds, float) else Decimal(str(odds))
    if not value.is_finite():
        raise ValueError(f"odds must be finite, got {odds!r}")
    return format(value.quantize(quantum, rounding=ROUND_HALF_UP), "f")


# ============================================================================
# AMOUNTS
# ============================================================================


def ui_amount_to_integer(amount: UiAmount, decimals: int) -> int:
    """Convert a human-readable token amount to its smallest integer unit.

    Example: 20 with 9 decimals -> 20_000_000_000. Digits beyond the token's
    precision are truncated toward zero.

    Raises:
        InvalidStakeError: If the amount is not a finite decimal
    """
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise InvalidStakeError(amount)
    if not value.is_finite():
        raise InvalidStakeError(amount)
    return int(value.scaleb(decimals))


# ============================================================================
# ACCOUNT DECODING
# ============================================================================


class ByteReader:
    """Sequential little-endian reader for Borsh-encoded account data."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = bytes(data)
        self.offset = offset

    def _take(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            raise InvalidAccountDataError(
                f"need {size} bytes at offset {self.offset}, "
                f"only {len(self.data) - self.offset} left"
            )
        chunk = self.data[self.offset:end]
        self.offset = end
        return chunk

    def read_u8(self) -> int:
        return self._take(1)[0]

    def read_u16(self) -> int:
        return struct.unpack("<H", self._take(2))[0]

    def read_u32(self) -> int:
        return struct.unpack("<I", self._take(4))[0]

    def read_i64(self) -> int:
        return struct.unpack("<q", self._take(8))[0]

    def read_bool(self) -> bool:
        value = self.read_u8()
        if value > 1:
            raise InvalidAccountDataError(f"invalid bool byte {value}")
        return value == 1

    def read_pubkey(self) -> Pubkey:
        return Pubkey.from_bytes(self._take(32))

    def read_string(self) -> str:
        length = self.read_u32()
        raw = self._take(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidAccountDataError(f"invalid utf-8 string: {e}")

    def read_option(self, read: Callable[[], T]) -> Optional[T]:
        """Read a Borsh Option: a 0/1 tag followed by the value when present."""
        tag = self.read_u8()
        if tag == 0:
            return None
        if tag != 1:
            raise InvalidAccountDataError(f"invalid option tag {tag}")
        return read()

    def read_vec(self, read: Callable[[], T]) -> List[T]:
        """Read a Borsh Vec: a u32 length followed by the items."""
        length = self.read_u32()
        return [read() for _ in range(length)]
