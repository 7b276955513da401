from sampler_mocks.quotes.deterministic import (
    address_to_bytes,
    get_deterministic_buy_quote,
    get_deterministic_rate,
    get_deterministic_sell_quote,
    get_deterministic_token_decimals,
    hash_to_uint,
    is_same_address,
    salt_to_bytes,
)

__all__ = [
    "address_to_bytes",
    "get_deterministic_buy_quote",
    "get_deterministic_rate",
    "get_deterministic_sell_quote",
    "get_deterministic_token_decimals",
    "hash_to_uint",
    "is_same_address",
    "salt_to_bytes",
]
