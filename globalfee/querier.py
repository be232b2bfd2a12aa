"""Read-only queries against the module's parameters."""

from __future__ import annotations

from typing import Protocol

from globalfee.coins import DecCoin
from globalfee.params import PARAM_STORE_KEY_MIN_GAS_PRICES


class ParamSource(Protocol):
    """The read-only part of a parameter store that queries need."""

    def has(self, key: bytes) -> bool: ...

    def get(self, key: bytes) -> object: ...


class Querier:
    """Answers queries about the global minimum gas prices."""

    def __init__(self, param_source: ParamSource):
        self.param_source = param_source

    def minimum_gas_prices(self) -> list[DecCoin]:
        """Return the stored minimum gas prices, or an empty list if none are set."""
        if self.param_source.has(PARAM_STORE_KEY_MIN_GAS_PRICES):
            return list(self.param_source.get(PARAM_STORE_KEY_MIN_GAS_PRICES))
        return []