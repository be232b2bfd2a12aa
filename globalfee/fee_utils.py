"""Helpers for combining and splitting fee requirements."""

from __future__ import annotations

from bisect import bisect_left
from typing import Collection, Optional, Sequence

from globalfee.coins import Coin, sort_coins


def contain_zero_coins(coins: Sequence[Coin]) -> bool:
    """True if ``coins`` is empty or holds at least one zero coin."""
    if not coins:
        return True
    return any(coin.is_zero() for coin in coins)


def find(coins: Sequence[Coin], denom: str) -> Optional[Coin]:
    """Return the coin of ``denom`` from coins sorted by denomination, or None."""
    position = bisect_left(coins, denom, key=lambda coin: coin.denom)
    if position < len(coins) and coins[position].denom == denom:
        return coins[position]
    return None


def combined_fee_requirement(
    global_fees: Sequence[Coin], min_gas_prices: Sequence[Coin]
) -> list[Coin]:
    """Combine global fees with local minimum fees, keeping the higher amount per denom.

    Only denominations of the global fees are kept. An empty global fee yields
    an empty requirement when local minimum fees are set.
    """
    if not min_gas_prices:
        return list(global_fees)
    if not global_fees:
        return []

    combined = []
    for fee in global_fees:
        local = find(min_gas_prices, fee.denom)
        combined.append(local if local is not None and local.amount > fee.amount else fee)
    return sort_coins(combined)


def split_coins_by_denoms(
    fee_coins: Sequence[Coin], denoms: Collection[str]
) -> tuple[list[Coin], list[Coin]]:
    """Split coins into those whose denom is not in ``denoms`` and those whose denom is."""
    outside = [coin for coin in fee_coins if coin.denom not in denoms]
    inside = [coin for coin in fee_coins if coin.denom in denoms]
    return sort_coins(outside), sort_coins(inside)


def get_non_zero_fees(fees: Sequence[Coin]) -> tuple[list[Coin], set[str]]:
    """Return the non-zero fees, sorted, and the denominations of the zero fees."""
    non_zero = [fee for fee in fees if not fee.is_zero()]
    zero_denoms = {fee.denom for fee in fees if fee.is_zero()}
    return sort_coins(non_zero), zero_denoms