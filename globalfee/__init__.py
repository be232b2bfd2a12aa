"""Chain-wide minimum gas prices, their parameters and genesis, and the fee check that enforces them."""

__version__ = "0.1.0"

__all__ = ["ante", "coins", "fee_utils", "module", "params", "querier"]