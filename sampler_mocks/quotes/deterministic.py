"""
Deterministic quotes for mocked liquidity sources.

Every value here is a pure function of keccak256 hashes of its inputs, so a
sampler under test sees the same rates and token decimals on every run:

- token decimals depend on the token only (WETH is pinned to 18)
- rates depend on the ordered triple (salt, sell token, buy token)
- sell and buy quotes scale an amount by the rate and the decimals of both tokens

Arithmetic follows uint256 semantics: products wrap at 2**256 and divisions
truncate, evaluated left to right. A buy quote of a sell quote does not always
return the original amount.
"""

from typing import Union

from hexbytes import HexBytes
from web3 import Web3

from sampler_mocks.consts import (
    MAX_DECIMALS,
    MAX_RATE,
    MIN_DECIMALS,
    MIN_RATE,
    NATIVE_DECIMALS,
    RATE_DENOMINATOR,
    UINT256_MODULUS,
    WETH_ADDRESS,
)

SaltLike = Union[bytes, str]


def address_to_bytes(address: Union[bytes, str]) -> HexBytes:
    """Return the 20 raw bytes of an address given as hex string or bytes."""
    raw = HexBytes(address)
    if len(raw) != 20:
        raise ValueError(f"Address must be 20 bytes, got {len(raw)}")
    return raw


def salt_to_bytes(salt: SaltLike) -> HexBytes:
    raw = HexBytes(salt)
    if len(raw) != 32:
        raise ValueError(f"Salt must be 32 bytes, got {len(raw)}")
    return raw


def hash_to_uint(*parts: bytes) -> int:
    """keccak256 of the packed parts, read as a big-endian uint256."""
    return int.from_bytes(Web3.keccak(b"".join(parts)), "big")


def _check_uint256(value: int, name: str) -> None:
    if value < 0 or value >= UINT256_MODULUS:
        raise ValueError(f"{name} is out of uint256 range")


def _mul(a: int, b: int) -> int:
    return (a * b) % UINT256_MODULUS


def is_same_address(a: Union[bytes, str], b: Union[bytes, str]) -> bool:
    return address_to_bytes(a) == address_to_bytes(b)


def get_deterministic_token_decimals(token: Union[bytes, str], weth_address: str = WETH_ADDRESS) -> int:
    """Decimals of a token, in [MIN_DECIMALS, MAX_DECIMALS) unless it is WETH."""
    if is_same_address(token, weth_address):
        return NATIVE_DECIMALS
    seed = hash_to_uint(address_to_bytes(token))
    return seed % (MAX_DECIMALS - MIN_DECIMALS) + MIN_DECIMALS


def get_deterministic_rate(salt: SaltLike, sell_token: Union[bytes, str], buy_token: Union[bytes, str]) -> int:
    """
    Fixed-point rate (buy units per sell unit, scaled by RATE_DENOMINATOR).

    The rate is not symmetric: rate(salt, a, b) is unrelated to rate(salt, b, a).

    Args:
        salt: 32-byte protocol or instance salt
        sell_token: Address of the token being sold
        buy_token: Address of the token being bought

    Returns:
        int: Rate in [MIN_RATE, MAX_RATE)
    """
    seed = hash_to_uint(salt_to_bytes(salt), address_to_bytes(sell_token), address_to_bytes(buy_token))
    return seed % (MAX_RATE - MIN_RATE) + MIN_RATE


def get_deterministic_sell_quote(
    salt: SaltLike,
    sell_token: Union[bytes, str],
    buy_token: Union[bytes, str],
    sell_amount: int,
    weth_address: str = WETH_ADDRESS,
) -> int:
    """
    Amount of buy_token received for selling sell_amount of sell_token.

    Computes sell_amount * rate * 10^buy_decimals / 10^sell_decimals / RATE_DENOMINATOR.
    """
    _check_uint256(sell_amount, "sell_amount")
    sell_base = 10 ** get_deterministic_token_decimals(sell_token, weth_address)
    buy_base = 10 ** get_deterministic_token_decimals(buy_token, weth_address)
    rate = get_deterministic_rate(salt, sell_token, buy_token)
    return _mul(_mul(sell_amount, rate), buy_base) // sell_base // RATE_DENOMINATOR


def get_deterministic_buy_quote(
    salt: SaltLike,
    sell_token: Union[bytes, str],
    buy_token: Union[bytes, str],
    buy_amount: int,
    weth_address: str = WETH_ADDRESS,
) -> int:
    """
    Amount of sell_token required to buy buy_amount of buy_token.

    Computes buy_amount * RATE_DENOMINATOR * 10^sell_decimals / rate / 10^buy_decimals.
    """
    _check_uint256(buy_amount, "buy_amount")
    sell_base = 10 ** get_deterministic_token_decimals(sell_token, weth_address)
    buy_base = 10 ** get_deterministic_token_decimals(buy_token, weth_address)
    rate = get_deterministic_rate(salt, sell_token, buy_token)
    return _mul(_mul(buy_amount, RATE_DENOMINATOR), sell_base) // rate // buy_base
