"""Uniswap V2 router quoting functions backed by deterministic quotes."""

from typing import Optional, Sequence

from hexbytes import HexBytes

from sampler_mocks.adapters.common import (
    get_adapter_logger,
    resolve_config,
    resolve_trigger,
    revert_if_should_fail,
    validate_path,
)
from sampler_mocks.config import MockConfig
from sampler_mocks.consts import UNISWAP_V2_SALT
from sampler_mocks.fail_trigger import FailTrigger
from sampler_mocks.quotes import get_deterministic_buy_quote, get_deterministic_sell_quote


class UniswapV2Router01:
    """Multi-hop router. Returns the amount at every hop of the path, endpoints included."""

    ABI_METHODS = {
        "getAmountsOut": "get_amounts_out",
        "getAmountsIn": "get_amounts_in",
    }

    def __init__(
        self,
        config: Optional[MockConfig] = None,
        trigger: Optional[FailTrigger] = None,
        salt: bytes = UNISWAP_V2_SALT,
    ):
        self.config = resolve_config(config)
        self.trigger = resolve_trigger(trigger)
        self.salt = HexBytes(salt)
        self.logger = get_adapter_logger(self)

    def get_amounts_out(self, amount_in: int, path: Sequence[str]) -> list[int]:
        """
        Walk the path forward, selling each hop's output into the next hop.

        Args:
            amount_in: Amount of path[0] sold
            path: Token addresses, at least two

        Returns:
            list[int]: amounts[i] is the amount of path[i]; amounts[0] == amount_in

        Raises:
            PathTooShortError: If the path has fewer than two tokens
            FailTriggeredError: If the fail trigger is armed
        """
        tokens = validate_path(path)
        revert_if_should_fail(self.trigger, self.logger, "getAmountsOut")

        amounts = [0] * len(tokens)
        amounts[0] = amount_in
        for i in range(len(tokens) - 1):
            amounts[i + 1] = get_deterministic_sell_quote(
                self.salt, tokens[i], tokens[i + 1], amounts[i], self.config.weth_address
            )

        self.logger.debug(f"getAmountsOut({amount_in}, {tokens}) -> {amounts}")
        return amounts

    def get_amounts_in(self, amount_out: int, path: Sequence[str]) -> list[int]:
        """
        Walk the path backward from the known output amount, buying each hop.

        Args:
            amount_out: Amount of path[-1] bought
            path: Token addresses, at least two

        Returns:
            list[int]: amounts[i] is the amount of path[i]; amounts[-1] == amount_out

        Raises:
            PathTooShortError: If the path has fewer than two tokens
            FailTriggeredError: If the fail trigger is armed
        """
        tokens = validate_path(path)
        revert_if_should_fail(self.trigger, self.logger, "getAmountsIn")

        amounts = [0] * len(tokens)
        amounts[-1] = amount_out
        for i in range(len(tokens) - 1, 0, -1):
            amounts[i - 1] = get_deterministic_buy_quote(
                self.salt, tokens[i - 1], tokens[i], amounts[i], self.config.weth_address
            )

        self.logger.debug(f"getAmountsIn({amount_out}, {tokens}) -> {amounts}")
        return amounts
