"""Module parameters, genesis state and the parameter store."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from globalfee.coins import DecCoin, validate_denom

MODULE_NAME = "globalfee"
QUERIER_ROUTE = MODULE_NAME
PARAM_STORE_KEY_MIN_GAS_PRICES = b"MinimumGasPricesParam"


class ParamsValidationError(ValueError):
    """Raised when parameters or genesis data are invalid."""


def validate_dec_coins(coins) -> None:
    """Check coins are sorted, non-negative, with valid and unique denominations."""
    low_denom = ""
    seen: set[str] = set()
    for position, coin in enumerate(coins):
        if coin.denom in seen:
            raise ParamsValidationError(f"duplicate denomination {coin.denom}")
        try:
            validate_denom(coin.denom)
        except ValueError as err:
            raise ParamsValidationError(str(err)) from err
        if position != 0 and coin.denom <= low_denom:
            raise ParamsValidationError(f"denomination {coin.denom} is not sorted")
        if coin.is_negative():
            raise ParamsValidationError(f"coin {coin.amount} amount is negative")
        low_denom = coin.denom
        seen.add(coin.denom)


def validate_minimum_gas_prices(value: object) -> None:
    """Check that ``value`` is a valid sequence of decimal coins."""
    if not isinstance(value, (list, tuple)) or not all(
        isinstance(coin, DecCoin) for coin in value
    ):
        raise ParamsValidationError(
            f"invalid type: {type(value).__name__}, expected a sequence of DecCoin"
        )
    validate_dec_coins(value)


@dataclass
class Params:
    """The module's parameter set."""

    minimum_gas_prices: list[DecCoin] = field(default_factory=list)

    def validate_basic(self) -> None:
        validate_minimum_gas_prices(self.minimum_gas_prices)

    def to_dict(self) -> dict[str, Any]:
        return {
            "minimum_gas_prices": [
                {"denom": coin.denom, "amount": f"{coin.amount:.18f}"}
                for coin in self.minimum_gas_prices
            ]
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Params":
        entries = data.get("minimum_gas_prices") or []
        return cls(
            minimum_gas_prices=[DecCoin(entry["denom"], entry["amount"]) for entry in entries]
        )


def default_params() -> Params:
    return Params(minimum_gas_prices=[])


@dataclass
class GenesisState:
    """The module's genesis state."""

    params: Params = field(default_factory=Params)

    def to_json(self) -> str:
        return json.dumps({"params": self.params.to_dict()})

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "GenesisState":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("genesis state must be a JSON object")
        params_data = data.get("params") or {}
        if not isinstance(params_data, dict):
            raise ValueError("genesis params must be a JSON object")
        return cls(params=Params.from_dict(params_data))


def default_genesis_state() -> GenesisState:
    return GenesisState(params=default_params())


def genesis_state_from_app_state(app_state: Mapping[str, Union[str, bytes, None]]) -> GenesisState:
    """Return this module's genesis state from the raw application genesis map."""
    raw = app_state.get(MODULE_NAME)
    if raw is None:
        return GenesisState()
    return GenesisState.from_json(raw)


def validate_genesis(state: GenesisState) -> None:
    try:
        state.params.validate_basic()
    except ParamsValidationError as err:
        raise ParamsValidationError(f"globalfee params: {err}") from err


Validator = Callable[[object], None]


class ParamSubspace:
    """An in-memory parameter store keyed by byte strings."""

    def __init__(self, name: str = MODULE_NAME, validators: Optional[Mapping[bytes, Validator]] = None):
        self.name = name
        if validators is None:
            validators = {PARAM_STORE_KEY_MIN_GAS_PRICES: validate_minimum_gas_prices}
        self._validators = dict(validators)
        self._store: dict[bytes, object] = {}

    def has(self, key: bytes) -> bool:
        return key in self._store

    def get(self, key: bytes) -> object:
        if key not in self._store:
            raise KeyError(key)
        value = self._store[key]
        return list(value) if isinstance(value, list) else value

    def set(self, key: bytes, value: object) -> None:
        validator = self._validators.get(key)
        if validator is not None:
            validator(value)
        self._store[key] = list(value) if isinstance(value, (list, tuple)) else value

    def set_param_set(self, params: Params) -> None:
        self.set(PARAM_STORE_KEY_MIN_GAS_PRICES, params.minimum_gas_prices)

    def get_param_set(self) -> Params:
        return Params(minimum_gas_prices=self.get(PARAM_STORE_KEY_MIN_GAS_PRICES))