"""Tests for utility functions."""

import struct
from decimal import Decimal

import pytest
from solders.pubkey import Pubkey

from monaco_client import (
    MARKET_DISCRIMINATOR,
    InvalidAccountDataError,
    InvalidStakeError,
    account_discriminator,
    format_odds,
    ui_amount_to_integer,
)
from monaco_client.utils import ByteReader, encode_bool, encode_str, sha256


class TestDiscriminator:
    def test_market_discriminator(self):
        assert MARKET_DISCRIMINATOR == sha256(b"account:Market")[:8]
        assert len(MARKET_DISCRIMINATOR) == 8

    def test_different_accounts_differ(self):
        assert account_discriminator("Market") != account_discriminator("MarketOutcome")

    def test_sha256_known_vector(self):
        assert sha256(b"").hex() == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )


class TestSeedEncoding:
    def test_encode_bool(self):
        assert encode_bool(True) == b"true"
        assert encode_bool(False) == b"false"

    def test_encode_str(self):
        assert encode_str("Draw") == b"Draw"


class TestFormatOdds:
    @pytest.mark.parametrize(
        "odds, expected",
        [
            (2, "2.000"),
            (2.0, "2.000"),
            (5.9, "5.900"),
            ("1.2345", "1.235"),
            (Decimal("3.14159"), "3.142"),
            (1.001, "1.001"),
        ],
    )
    def test_three_decimals(self, odds, expected):
        assert format_odds(odds) == expected

    def test_custom_precision(self):
        assert format_odds(2.5, decimals=1) == "2.5"

    def test_float_rounds_from_binary_value(self):
        # 2.0005 is stored as 2.000499999...
        assert format_odds(2.0005) == "2.000"

    def test_decimal_string_rounds_half_up(self):
        assert format_odds("2.0005") == "2.001"

    @pytest.mark.parametrize("odds", [float("nan"), float("inf"), "NaN"])
    def test_non_finite_odds(self, odds):
        with pytest.raises(ValueError):
            format_odds(odds)


class TestUiAmountToInteger:
    def test_whole_stake(self):
        assert ui_amount_to_integer(20, 9) == 20_000_000_000

    def test_fractional_stake_is_exact(self):
        assert ui_amount_to_integer(0.1, 9) == 100_000_000
        assert ui_amount_to_integer("1.5", 6) == 1_500_000

    def test_sub_unit_digits_are_truncated(self):
        assert ui_amount_to_integer("1.23456789", 2) == 123

    def test_zero_decimals(self):
        assert ui_amount_to_integer(7, 0) == 7

    @pytest.mark.parametrize("stake", ["abc", float("nan"), float("inf"), "", None])
    def test_invalid_stake(self, stake):
        with pytest.raises(InvalidStakeError):
            ui_amount_to_integer(stake, 9)


class TestByteReader:
    def test_reads_in_sequence(self):
        key = Pubkey.new_unique()
        data = (
            bytes([7])
            + struct.pack("<H", 513)
            + struct.pack("<q", -5)
            + bytes([1])
            + bytes(key)
            + struct.pack("<I", 2)
            + b"hi"
        )
        reader = ByteReader(data)

        assert reader.read_u8() == 7
        assert reader.read_u16() == 513
        assert reader.read_i64() == -5
        assert reader.read_bool() is True
        assert reader.read_pubkey() == key
        assert reader.read_string() == "hi"
        assert reader.offset == len(data)

    def test_option(self):
        reader = ByteReader(bytes([0, 1]) + struct.pack("<H", 3))

        assert reader.read_option(reader.read_u16) is None
        assert reader.read_option(reader.read_u16) == 3

    def test_vec(self):
        data = struct.pack("<I", 2) + struct.pack("<I", 1) + b"a" + struct.pack("<I", 1) + b"b"
        reader = ByteReader(data)

        assert reader.read_vec(reader.read_string) == ["a", "b"]

    def test_underflow_raises(self):
        reader = ByteReader(bytes(3))

        with pytest.raises(InvalidAccountDataError):
            reader.read_i64()

    def test_invalid_option_tag(self):
        with pytest.raises(InvalidAccountDataError):
            ByteReader(bytes([2])).read_option(lambda: None)

    def test_invalid_bool(self):
        with pytest.raises(InvalidAccountDataError):
            ByteReader(bytes([5])).read_bool()
