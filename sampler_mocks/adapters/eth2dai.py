"""Eth2Dai (Oasis matching market) quoting functions backed by deterministic quotes."""

from typing import Optional

from hexbytes import HexBytes

from sampler_mocks.adapters.common import (
    get_adapter_logger,
    resolve_config,
    resolve_trigger,
    revert_if_should_fail,
)
from sampler_mocks.config import MockConfig
from sampler_mocks.consts import ETH2DAI_SALT
from sampler_mocks.fail_trigger import FailTrigger
from sampler_mocks.quotes import get_deterministic_buy_quote, get_deterministic_sell_quote


class Eth2Dai:
    ABI_METHODS = {
        "getBuyAmount": "get_buy_amount",
        "getPayAmount": "get_pay_amount",
    }

    def __init__(
        self,
        config: Optional[MockConfig] = None,
        trigger: Optional[FailTrigger] = None,
        salt: bytes = ETH2DAI_SALT,
    ):
        self.config = resolve_config(config)
        self.trigger = resolve_trigger(trigger)
        self.salt = HexBytes(salt)
        self.logger = get_adapter_logger(self)

    def get_buy_amount(self, buy_token: str, pay_token: str, pay_amount: int) -> int:
        """Amount of buy_token received for paying pay_amount of pay_token."""
        revert_if_should_fail(self.trigger, self.logger, "getBuyAmount")
        buy_amount = get_deterministic_sell_quote(
            self.salt, pay_token, buy_token, pay_amount, self.config.weth_address
        )
        self.logger.debug(f"getBuyAmount({buy_token}, {pay_token}, {pay_amount}) -> {buy_amount}")
        return buy_amount

    def get_pay_amount(self, pay_token: str, buy_token: str, buy_amount: int) -> int:
        """Amount of pay_token needed to receive buy_amount of buy_token."""
        revert_if_should_fail(self.trigger, self.logger, "getPayAmount")
        pay_amount = get_deterministic_buy_quote(
            self.salt, pay_token, buy_token, buy_amount, self.config.weth_address
        )
        self.logger.debug(f"getPayAmount({pay_token}, {buy_token}, {buy_amount}) -> {pay_amount}")
        return pay_amount
