"""Coin and decimal coin values, with the set operations fee checks rely on."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence, TypeVar, Union

DEC_PRECISION = 18

_DENOM_PATTERN = r"[a-zA-Z][a-zA-Z0-9/:._-]{2,127}"
_DENOM_RE = re.compile(rf"^{_DENOM_PATTERN}$")
_DEC_COIN_RE = re.compile(rf"^([0-9]+(?:\.[0-9]+)?|\.[0-9]+)\s*({_DENOM_PATTERN})$")

AnyCoin = Union["Coin", "DecCoin"]
_C = TypeVar("_C", "Coin", "DecCoin")


def validate_denom(denom: str) -> None:
    """Raise ValueError unless ``denom`` is a well-formed denomination."""
    if not isinstance(denom, str) or not _DENOM_RE.match(denom):
        raise ValueError(f"invalid denom: {denom}")


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as err:
            raise ValueError(f"invalid decimal amount: {value!r}") from err
    if not result.is_finite():
        raise ValueError(f"invalid decimal amount: {value!r}")
    return result


@dataclass(frozen=True)
class Coin:
    """An integer amount of a single denomination."""

    denom: str
    amount: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"coin amount must be an integer, got {self.amount!r}")
        validate_denom(self.denom)
        if self.amount < 0:
            raise ValueError(f"negative coin amount: {self.amount}")

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


@dataclass(frozen=True)
class DecCoin:
    """A decimal amount of a single denomination; not validated on creation."""

    denom: str
    amount: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))

    def is_negative(self) -> bool:
        return self.amount < 0

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount:.{DEC_PRECISION}f}{self.denom}"


def sort_coins(coins: Iterable[_C]) -> list[_C]:
    """Return the coins as a new list ordered by denomination."""
    return sorted(coins, key=lambda coin: coin.denom)


def coins_equal(a: Sequence[AnyCoin], b: Sequence[AnyCoin]) -> bool:
    """Tell whether two coin collections hold the same denominations and amounts."""
    if len(a) != len(b):
        return False
    return all(
        x.denom == y.denom and x.amount == y.amount
        for x, y in zip(sort_coins(a), sort_coins(b))
    )


def _amount_of(coins: Iterable[AnyCoin], denom: str) -> Union[int, Decimal]:
    for coin in coins:
        if coin.denom == denom:
            return coin.amount
    return 0


def is_any_gte(coins: Sequence[Coin], required: Sequence[Coin]) -> bool:
    """True if some coin meets or exceeds a non-zero required amount of its denom."""
    if not required:
        return False
    for coin in coins:
        needed = _amount_of(required, coin.denom)
        if needed != 0 and coin.amount >= needed:
            return True
    return False


def denoms_subset_of(coins: Sequence[Coin], other: Sequence[Coin]) -> bool:
    """True if every denomination of ``coins`` has a non-zero amount in ``other``."""
    if len(coins) > len(other):
        return False
    return all(_amount_of(other, coin.denom) != 0 for coin in coins)


def _parse_dec_coin(text: str) -> DecCoin:
    match = _DEC_COIN_RE.match(text.strip())
    if not match:
        raise ValueError(f"invalid decimal coin expression: {text}")
    amount_text, denom = match.groups()
    _, _, fraction = amount_text.partition(".")
    if len(fraction) > DEC_PRECISION:
        raise ValueError(f"too much precision in amount: {amount_text}")
    return DecCoin(denom, Decimal(amount_text))


def parse_dec_coins(text: str) -> list[DecCoin]:
    """Parse a comma-separated list such as ``0.01uatom,1stake``.

    Zero amounts are dropped, the result is sorted, and duplicates are rejected.
    """
    text = text.strip()
    if not text:
        return []
    parsed = [_parse_dec_coin(part) for part in text.split(",")]
    coins = sort_coins(coin for coin in parsed if not coin.is_zero())
    seen: set[str] = set()
    for coin in coins:
        if coin.denom in seen:
            raise ValueError(f"duplicate denomination {coin.denom}")
        seen.add(coin.denom)
    return coins