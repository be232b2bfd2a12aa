"""Fee checks run against transactions before they are admitted to the mempool."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Any, Callable, Iterable, Sequence

from globalfee.coins import (
    Coin,
    DecCoin,
    denoms_subset_of,
    is_any_gte,
    sort_coins,
)
from globalfee.fee_utils import (
    combined_fee_requirement,
    get_non_zero_fees,
    split_coins_by_denoms,
)
from globalfee.params import PARAM_STORE_KEY_MIN_GAS_PRICES
from globalfee.querier import ParamSource

KEY_BOND_DENOM = b"BondDenom"


class FeeError(Exception):
    """Raised when a transaction's fee cannot be checked or is rejected."""


class InsufficientFeeError(FeeError):
    """Raised when a transaction's fee is too low or in unexpected denominations."""


@dataclass
class Context:
    """The execution context a fee check runs in."""

    is_check_tx: bool = True
    min_gas_prices: list[DecCoin] = field(default_factory=list)
    chain_id: str = ""


@dataclass
class FeeTx:
    """A transaction carrying a fee, a gas limit and its messages.

    Messages are given either as their type URLs or as objects with a
    ``type_url`` attribute.
    """

    fee: list[Coin] = field(default_factory=list)
    gas: int = 0
    msgs: list[Any] = field(default_factory=list)


AnteHandler = Callable[[Context, Any, bool], Context]


def _msg_type_url(msg: Any) -> str:
    if isinstance(msg, str):
        return msg
    return msg.type_url


def _format_coins(coins: Iterable[Coin]) -> str:
    return ",".join(str(coin) for coin in coins)


def _fees_for_gas(prices: Iterable[DecCoin], gas: int) -> list[Coin]:
    """Return ceil(price * gas) for every price, sorted by denomination."""
    fees = []
    with localcontext() as ctx:
        ctx.prec = 200
        gas_dec = Decimal(gas)
        for price in prices:
            fees.append(Coin(price.denom, math.ceil(price.amount * gas_dec)))
    return sort_coins(fees)


def get_min_gas_price(min_gas_prices: Sequence[DecCoin], gas_limit: int) -> list[Coin]:
    """Return the local minimum fees for ``gas_limit``; empty if all prices are zero."""
    if all(price.is_zero() for price in min_gas_prices):
        return []
    return _fees_for_gas(min_gas_prices, gas_limit)


class FeeDecorator:
    """Rejects transactions whose fee does not meet the global and local minimums.

    Transactions made only of bypass message types, within the gas limit for
    such transactions, may pay no fee; any fee they do pay must still be in an
    accepted denomination.
    """

    def __init__(
        self,
        bypass_min_fee_msg_types: Sequence[str],
        global_min_fee: ParamSource,
        staking_subspace: ParamSource,
        max_total_bypass_min_fee_msg_gas_usage: int,
    ):
        self.bypass_min_fee_msg_types = list(bypass_min_fee_msg_types)
        self.global_min_fee = global_min_fee
        self.staking_subspace = staking_subspace
        self.max_total_bypass_min_fee_msg_gas_usage = max_total_bypass_min_fee_msg_gas_usage

    def ante_handle(
        self, ctx: Context, tx: Any, simulate: bool, next_handler: AnteHandler
    ) -> Context:
        if not isinstance(tx, FeeTx):
            raise FeeError("Tx must implement the FeeTx interface")

        if not ctx.is_check_tx or simulate:
            return next_handler(ctx, tx, simulate)

        fee_coins = sort_coins(tx.fee)
        gas = tx.gas

        required_global_fees = self.get_global_fee(gas)
        local_fees = get_min_gas_price(ctx.min_gas_prices, gas)

        combined = combined_fee_requirement(required_global_fees, local_fees)
        if not combined:
            raise FeeError("required fees are not setup.")

        non_zero_required, zero_required_denoms = get_non_zero_fees(combined)
        fee_non_zero_denom, fee_zero_denom = split_coins_by_denoms(
            fee_coins, zero_required_denoms
        )

        if not denoms_subset_of(fee_non_zero_denom, non_zero_required):
            raise InsufficientFeeError(
                "fee is not a subset of required fees; got "
                f"{_format_coins(fee_coins)}, required: {_format_coins(combined)}"
            )

        within_gas_limit = gas <= self.max_total_bypass_min_fee_msg_gas_usage
        allowed_to_bypass = self.contains_only_bypass_min_fee_msgs(tx.msgs) and within_gas_limit

        if not allowed_to_bypass and not fee_zero_denom:
            if not fee_coins and zero_required_denoms:
                return next_handler(ctx, tx, simulate)
            if not is_any_gte(fee_non_zero_denom, non_zero_required):
                raise InsufficientFeeError(
                    f"insufficient fees; got: {_format_coins(fee_coins)} "
                    f"required: {_format_coins(combined)}"
                )

        return next_handler(ctx, tx, simulate)

    def get_global_fee(self, gas: int) -> list[Coin]:
        """Return the global fees for ``gas``, sorted; a zero bond-denom fee if none are set."""
        prices: list[DecCoin] = []
        if self.global_min_fee.has(PARAM_STORE_KEY_MIN_GAS_PRICES):
            prices = list(self.global_min_fee.get(PARAM_STORE_KEY_MIN_GAS_PRICES))
        if not prices:
            prices = self.default_zero_global_fee()
        return _fees_for_gas(prices, gas)

    def default_zero_global_fee(self) -> list[DecCoin]:
        """Return a zero price in the staking bond denomination."""
        bond_denom = self._bond_denom()
        if not bond_denom:
            raise FeeError("empty staking bond denomination")
        return [DecCoin(bond_denom, Decimal(0))]

    def _bond_denom(self) -> str:
        if self.staking_subspace.has(KEY_BOND_DENOM):
            return str(self.staking_subspace.get(KEY_BOND_DENOM))
        return ""

    def contains_only_bypass_min_fee_msgs(self, msgs: Iterable[Any]) -> bool:
        """True if every message's type is one of the bypass message types."""
        return all(_msg_type_url(msg) in self.bypass_min_fee_msg_types for msg in msgs)


def chain_ante_decorators(*args: FeeDecorator) -> AnteHandler:
    """Chain decorators into one handler that returns the final context."""
    return _handler_at(tuple(args), 0)


def _handler_at(decorators: tuple[FeeDecorator, ...], index: int) -> AnteHandler:
    """Return the handler that runs the decorators from ``index`` onwards."""

    def handler(ctx: Context, tx: Any, simulate: bool) -> Context:
        if index >= len(decorators):
            return ctx
        return decorators[index].ante_handle(
            ctx, tx, simulate, _handler_at(decorators, index + 1)
        )

    return handler