import pytest

from globalfee.coins import Coin, coins_equal, sort_coins
from globalfee.fee_utils import (
    combined_fee_requirement,
    contain_zero_coins,
    find,
    get_non_zero_fees,
    split_coins_by_denoms,
)

zero_coin1 = Coin("photon", 0)
zero_coin2 = Coin("stake", 0)
zero_coin3 = Coin("quark", 0)
coin1 = Coin("photon", 1)
coin2 = Coin("stake", 2)
coin3 = Coin("quark", 3)
coin1_high = Coin("photon", 10)
coin2_high = Coin("stake", 20)
coin_new_denom1 = Coin("Newphoton", 1)
coin_new_denom2 = Coin("Newstake", 1)


@pytest.mark.parametrize(
    "coins, expected",
    [
        ([], True),
        ([coin1, coin2], False),
        ([coin1, zero_coin2], True),
        ([zero_coin1, zero_coin2, coin3], True),
        ([zero_coin1, zero_coin2], True),
    ],
)
def test_contain_zero_coins(coins, expected):
    assert contain_zero_coins(coins) is expected


coins_empty = []
coins_non_empty = sort_coins([coin1, coin2])
coins_non_empty_high = sort_coins([coin1_high, coin2_high])
coins_non_empty_one_high = sort_coins([coin1_high, coin2])
coins_new_denom = sort_coins([coin_new_denom1, coin_new_denom2])
coins_new_old_denom = sort_coins([coin1, coin_new_denom1])
coins_new_old_denom_high = sort_coins([coin1_high, coin_new_denom1])
coins_contain_zero = sort_coins([coin1, zero_coin2])
coins_contain_zero_new_denom = sort_coins([coin1, zero_coin3])
coins_all_zero = sort_coins([zero_coin1, zero_coin2])


@pytest.mark.parametrize(
    "global_fees, min_fees, combined",
    [
        (coins_empty, coins_empty, coins_empty),
        (coins_empty, coins_non_empty, coins_empty),
        (coins_non_empty, coins_non_empty, coins_non_empty),
        (coins_non_empty, coins_non_empty_high, coins_non_empty_high),
        (coins_non_empty, coins_non_empty_one_high, coins_non_empty_one_high),
        (coins_non_empty, coins_new_denom, coins_non_empty),
        (coins_non_empty, coins_new_old_denom, coins_non_empty),
        (coins_non_empty, coins_new_old_denom_high, [coin1_high, coin2]),
        (coins_contain_zero, coins_non_empty, [coin1, coin2]),
        (coins_contain_zero, coins_contain_zero, coins_contain_zero),
        (coins_contain_zero, coins_contain_zero_new_denom, coins_contain_zero),
        (coins_all_zero, coins_all_zero, coins_all_zero),
        (coins_all_zero, coins_contain_zero_new_denom, [coin1, zero_coin2]),
        (coins_all_zero, coins_contain_zero, coins_contain_zero),
    ],
)
def test_combined_fee_requirement(global_fees, min_fees, combined):
    assert combined_fee_requirement(global_fees, min_fees) == combined


photon = Coin("photon", 1)
uatom = Coin("uatom", 1)
fee_coins = sort_coins([photon, uatom])


@pytest.mark.parametrize(
    "coins, denoms, expected_non_zero, expected_zero",
    [
        (fee_coins, set(), fee_coins, []),
        (fee_coins, {"stake"}, fee_coins, []),
        (fee_coins, {"uatom"}, [photon], [uatom]),
        (fee_coins, {"uatom", "photon"}, [], fee_coins),
        ([], {"uatom", "photon"}, [], []),
    ],
)
def test_split_coins_by_denoms(coins, denoms, expected_non_zero, expected_zero):
    non_zero, zero = split_coins_by_denoms(coins, denoms)
    assert non_zero == expected_non_zero
    assert zero == expected_zero


photon0 = Coin("photon", 0)
uatom0 = Coin("uatom", 0)
photon1 = Coin("photon", 1)
uatom1 = Coin("uatom", 1)


@pytest.mark.parametrize(
    "global_fees, zero_denoms, non_zero_fees",
    [
        ([], set(), []),
        (sort_coins([photon1, uatom1]), set(), sort_coins([photon1, uatom1])),
        (sort_coins([photon0, uatom0]), {"photon", "uatom"}, []),
        (sort_coins([photon0, uatom1]), {"photon"}, [uatom1]),
    ],
)
def test_get_non_zero_fees(global_fees, zero_denoms, non_zero_fees):
    non_zero, zero_map = get_non_zero_fees(global_fees)
    assert coins_equal(non_zero, non_zero_fees)
    assert zero_map == zero_denoms


def test_find_present_and_absent():
    coins = sort_coins([coin1, coin2, coin3])
    assert find(coins, "quark") == coin3
    assert find(coins, "photon") == coin1
    assert find(coins, "stake") == coin2
    assert find(coins, "uatom") is None
    assert find(coins, "aaa") is None


def test_find_empty_and_single():
    assert find([], "photon") is None
    assert find([coin1], "photon") == coin1
    assert find([coin1], "stake") is None