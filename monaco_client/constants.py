"""Constants for the Monaco protocol client."""

from solders.pubkey import Pubkey

from .utils import account_discriminator

# ============================================================================
# PROGRAM IDS
# ============================================================================

PROGRAM_ID = Pubkey.from_string("monacoUXKtUi6vKsQwaLyxmXKSievfNWEcYXTgkbCih")

# ============================================================================
# RPC
# ============================================================================

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
DEVNET_RPC_URL = "https://api.devnet.solana.com"

# ============================================================================
# PDA SEEDS
# ============================================================================

SEED_ESCROW = b"escrow"

# Matching pools are keyed by odds rendered with this many decimal places
ODDS_DECIMALS = 3

# ============================================================================
# ACCOUNT DISCRIMINATORS
# ============================================================================

MARKET_DISCRIMINATOR = account_discriminator("Market")
