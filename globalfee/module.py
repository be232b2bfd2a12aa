"""The module's genesis handling and query wiring."""

from __future__ import annotations

import json
from typing import Optional, Union

from globalfee.params import (
    MODULE_NAME,
    GenesisState,
    ParamsValidationError,
    ParamSubspace,
    default_genesis_state,
)
from globalfee.querier import Querier


def _decode_genesis(message: Union[str, bytes]) -> GenesisState:
    try:
        return GenesisState.from_json(message)
    except json.JSONDecodeError as err:
        raise ValueError(f"invalid genesis JSON: {err}") from err
    except (KeyError, TypeError) as err:
        raise ValueError(f"malformed genesis state: {err}") from err


class AppModule:
    """Ties the module's parameter store to genesis import, export and queries."""

    def __init__(self, param_space: Optional[ParamSubspace] = None):
        self.param_space = param_space if param_space is not None else ParamSubspace(MODULE_NAME)

    def name(self) -> str:
        return MODULE_NAME

    def default_genesis(self) -> str:
        return default_genesis_state().to_json()

    def validate_genesis(self, message: Union[str, bytes]) -> None:
        """Decode and validate a genesis message, raising ValueError if it is invalid."""
        state = _decode_genesis(message)
        try:
            state.params.validate_basic()
        except ParamsValidationError as err:
            raise ParamsValidationError(f"params: {err}") from err

    def init_genesis(self, message: Union[str, bytes]) -> None:
        """Store the parameters carried by a genesis message."""
        state = _decode_genesis(message)
        self.param_space.set_param_set(state.params)

    def export_genesis(self) -> str:
        """Return the stored parameters as a genesis message."""
        return GenesisState(params=self.param_space.get_param_set()).to_json()

    def querier(self) -> Querier:
        return Querier(self.param_space)

    def consensus_version(self) -> int:
        return 1