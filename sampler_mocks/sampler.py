"""
Deterministic stand-ins for the data-dependent parts of an ERC20 bridge sampler.

The sampler under test normally reads order fill state and token decimals from
the chain. Here both come from keccak256 hashes, and the liquidity sources it
samples are the mocked adapters.
"""

from typing import Iterable, Optional, Sequence

import logging

from eth_abi import encode

from sampler_mocks.adapters import Eth2Dai, KyberNetwork, UniswapExchangeFactoryMock, UniswapV2Router01
from sampler_mocks.config import MockConfig
from sampler_mocks.fail_trigger import FailTrigger, fail_trigger
from sampler_mocks.quotes import get_deterministic_token_decimals, hash_to_uint
from sampler_mocks.types import LimitOrder

logger = logging.getLogger("sampler_mocks.sampler")


class DeterministicSampler:
    """Owns one instance of every mocked liquidity source, sharing a config and fail trigger."""

    def __init__(self, config: Optional[MockConfig] = None, trigger: Optional[FailTrigger] = None):
        self.config = config if config is not None else MockConfig()
        self.trigger = trigger if trigger is not None else fail_trigger

        self.uniswap = UniswapExchangeFactoryMock(self.config, self.trigger)
        self.uniswap_v2_router = UniswapV2Router01(self.config, self.trigger)
        self.eth2dai = Eth2Dai(self.config, self.trigger)
        self.kyber = KyberNetwork(self.config, self.trigger)

    def create_token_exchanges(self, token_addresses: Iterable[str]) -> None:
        self.uniswap.create_token_exchanges(token_addresses)

    def get_limit_order_fillable_taker_amount(self, order: LimitOrder) -> int:
        """
        Remaining fillable taker amount of a limit order.

        Derived from keccak256(abi.encode(order.salt)) modulo the order's taker
        amount. An order with a zero taker amount is unfillable.
        """
        if order.taker_amount == 0:
            return 0
        return hash_to_uint(encode(["uint256"], [order.salt])) % order.taker_amount

    def get_limit_order_fillable_taker_amounts(self, orders: Sequence[LimitOrder]) -> list[int]:
        return [self.get_limit_order_fillable_taker_amount(order) for order in orders]

    def get_limit_order_fillable_maker_amounts(self, orders: Sequence[LimitOrder]) -> list[int]:
        """Fillable maker amounts, scaled down from the fillable taker amounts (rounding down)."""
        maker_amounts = []
        for order in orders:
            taker_fillable = self.get_limit_order_fillable_taker_amount(order)
            if taker_fillable == 0:
                maker_amounts.append(0)
                continue
            maker_amounts.append(taker_fillable * order.maker_amount // order.taker_amount)
        logger.debug(f"Fillable maker amounts for {len(orders)} orders: {maker_amounts}")
        return maker_amounts

    def get_token_decimals(self, token_address: str) -> int:
        return get_deterministic_token_decimals(token_address, self.config.weth_address)
