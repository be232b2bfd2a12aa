# globalfee

`globalfee` enforces a chain-wide minimum fee on transactions. It combines
the global minimum gas prices, which are stored as module parameters, with a
validator's local minimum gas prices. A transaction passes only if it pays
enough in an accepted denomination. Transactions made only of configured
bypass message types may pay no fee, as long as their gas limit stays at or
under a set maximum.

## Modules

- `globalfee.coins`: the `Coin` (integer amount) and `DecCoin` (decimal
  amount) values, and the helpers `validate_denom`, `sort_coins`,
  `coins_equal`, `is_any_gte`, `denoms_subset_of` and `parse_dec_coins`.
  `parse_dec_coins("0.01uatom,1stake")` drops zero amounts, sorts the coins
  by denomination and rejects duplicates.
- `globalfee.params`: `Params` (with `validate_basic`, `to_dict` and
  `from_dict`), `default_params`, `validate_minimum_gas_prices`,
  `validate_dec_coins`, `GenesisState` (with `to_json` and `from_json`),
  `default_genesis_state`, `genesis_state_from_app_state`,
  `validate_genesis`, and `ParamSubspace`, an in-memory parameter store.
  Invalid parameters raise `ParamsValidationError`.
- `globalfee.fee_utils`: `combined_fee_requirement`, `contain_zero_coins`,
  `find`, `split_coins_by_denoms` and `get_non_zero_fees`.
- `globalfee.querier`: `Querier.minimum_gas_prices()` returns the stored
  global minimum gas prices, or an empty list when none are set.
- `globalfee.module`: `AppModule` produces the default genesis JSON, validates
  it, imports it into a `ParamSubspace`, exports it again and hands out a
  `Querier`.
- `globalfee.ante`: `FeeDecorator`, `Context`, `FeeTx`, `get_min_gas_price`
  and `chain_ante_decorators`. A rejected fee raises `InsufficientFeeError`.
  Other failures raise `FeeError`, for example a transaction that is not a
  `FeeTx`, or no global fee and no bond denomination.

## Example

```python
from globalfee.ante import (
    KEY_BOND_DENOM, Context, FeeDecorator, FeeTx, InsufficientFeeError,
    chain_ante_decorators,
)
from globalfee.coins import Coin, parse_dec_coins
from globalfee.params import Params, ParamSubspace

global_params = ParamSubspace()
global_params.set_param_set(Params(parse_dec_coins("0.001uatom")))

staking = ParamSubspace("staking", validators={})
staking.set(KEY_BOND_DENOM, "uatom")

decorator = FeeDecorator(
    ["/ibc.core.channel.v1.MsgRecvPacket"], global_params, staking, 1_000_000
)
handler = chain_ante_decorators(decorator)
ctx = Context(min_gas_prices=parse_dec_coins("0.002uatom"))

# Global fee is 200uatom and local fee is 400uatom, so 400uatom is required.
tx = FeeTx(fee=[Coin("uatom", 400)], gas=200_000,
           msgs=["/cosmos.bank.v1beta1.MsgSend"])
handler(ctx, tx, False)

try:
    handler(ctx, FeeTx(fee=[Coin("uatom", 300)], gas=200_000,
                       msgs=["/cosmos.bank.v1beta1.MsgSend"]), False)
except InsufficientFeeError as err:
    print(err)
```

A message can be given as its type URL string or as any object with a
`type_url` attribute.

## What it does not do

This package is a library. It has no command-line tool for querying minimum
gas prices, and it does not serve gRPC or REST queries. It has no persistent
storage either: `ParamSubspace` keeps parameters in memory only. It does not
decode or sign transactions. Callers build `FeeTx` values themselves.

## Installing

```
pip install .
pip install ".[test]"
```

## Running the tests

```
pytest
```