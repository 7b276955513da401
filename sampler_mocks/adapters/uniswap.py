"""Uniswap V1 exchange and exchange factory backed by deterministic quotes."""

from typing import Iterable, Optional

import threading

from hexbytes import HexBytes
from web3 import Web3

from sampler_mocks.adapters.common import (
    get_adapter_logger,
    resolve_config,
    resolve_trigger,
    revert_if_should_fail,
)
from sampler_mocks.config import MockConfig
from sampler_mocks.consts import UNISWAP_BASE_SALT, ZERO_ADDRESS
from sampler_mocks.fail_trigger import FailTrigger
from sampler_mocks.quotes import address_to_bytes, get_deterministic_buy_quote, get_deterministic_sell_quote


class UniswapExchange:
    """
    A single-token Uniswap V1 exchange.

    Quotes use an instance salt, keccak256(UNISWAP_BASE_SALT ++ token), so two
    exchanges never share rates. The native side is always the configured WETH.
    """

    ABI_METHODS = {
        "getEthToTokenInputPrice": "get_eth_to_token_input_price",
        "getEthToTokenOutputPrice": "get_eth_to_token_output_price",
        "getTokenToEthInputPrice": "get_token_to_eth_input_price",
        "getTokenToEthOutputPrice": "get_token_to_eth_output_price",
        "tokenAddress": "get_token_address",
    }

    def __init__(
        self,
        token_address: str,
        config: Optional[MockConfig] = None,
        trigger: Optional[FailTrigger] = None,
    ):
        self.token_address = Web3.to_checksum_address(token_address)
        self.config = resolve_config(config)
        self.trigger = resolve_trigger(trigger)
        self.salt = HexBytes(Web3.keccak(UNISWAP_BASE_SALT + address_to_bytes(self.token_address)))
        # Stand-in for the deployment address
        self.address = Web3.to_checksum_address(self.salt[-20:])
        self.logger = get_adapter_logger(self)

    def get_token_address(self) -> str:
        return self.token_address

    def get_eth_to_token_input_price(self, eth_sold: int) -> int:
        """Tokens bought for selling eth_sold WETH."""
        revert_if_should_fail(self.trigger, self.logger, "getEthToTokenInputPrice")
        tokens_bought = get_deterministic_sell_quote(
            self.salt, self.config.weth_address, self.token_address, eth_sold, self.config.weth_address
        )
        self.logger.debug(f"getEthToTokenInputPrice({eth_sold}) on {self.token_address} -> {tokens_bought}")
        return tokens_bought

    def get_eth_to_token_output_price(self, tokens_bought: int) -> int:
        """WETH to sell for buying tokens_bought tokens."""
        revert_if_should_fail(self.trigger, self.logger, "getEthToTokenOutputPrice")
        eth_sold = get_deterministic_buy_quote(
            self.salt, self.config.weth_address, self.token_address, tokens_bought, self.config.weth_address
        )
        self.logger.debug(f"getEthToTokenOutputPrice({tokens_bought}) on {self.token_address} -> {eth_sold}")
        return eth_sold

    def get_token_to_eth_input_price(self, tokens_sold: int) -> int:
        """WETH bought for selling tokens_sold tokens."""
        revert_if_should_fail(self.trigger, self.logger, "getTokenToEthInputPrice")
        eth_bought = get_deterministic_sell_quote(
            self.salt, self.token_address, self.config.weth_address, tokens_sold, self.config.weth_address
        )
        self.logger.debug(f"getTokenToEthInputPrice({tokens_sold}) on {self.token_address} -> {eth_bought}")
        return eth_bought

    def get_token_to_eth_output_price(self, eth_bought: int) -> int:
        """Tokens to sell for buying eth_bought WETH."""
        revert_if_should_fail(self.trigger, self.logger, "getTokenToEthOutputPrice")
        tokens_sold = get_deterministic_buy_quote(
            self.salt, self.token_address, self.config.weth_address, eth_bought, self.config.weth_address
        )
        self.logger.debug(f"getTokenToEthOutputPrice({eth_bought}) on {self.token_address} -> {tokens_sold}")
        return tokens_sold


class UniswapExchangeFactoryMock:
    """Creates one UniswapExchange per token on request and keeps it for its lifetime."""

    ABI_METHODS = {
        "getExchange": "get_exchange_address",
        "createTokenExchanges": "create_token_exchanges",
    }

    def __init__(self, config: Optional[MockConfig] = None, trigger: Optional[FailTrigger] = None):
        self.config = resolve_config(config)
        self.trigger = resolve_trigger(trigger)
        self._exchanges_by_token: dict[str, UniswapExchange] = {}
        self._lock = threading.Lock()
        self.logger = get_adapter_logger(self)

    def create_token_exchanges(self, token_addresses: Iterable[str]) -> None:
        """Create exchanges for tokens that do not have one yet. Existing exchanges are kept."""
        with self._lock:
            for token_address in token_addresses:
                token_address = Web3.to_checksum_address(token_address)
                if token_address in self._exchanges_by_token:
                    continue
                exchange = UniswapExchange(token_address, self.config, self.trigger)
                self._exchanges_by_token[token_address] = exchange
                self.logger.debug(f"Created exchange {exchange.address} for token {token_address}")

    def get_exchange(self, token_address: str) -> Optional[UniswapExchange]:
        with self._lock:
            return self._exchanges_by_token.get(Web3.to_checksum_address(token_address))

    def get_exchange_address(self, token_address: str) -> str:
        """Exchange address for a token, or the zero address if none was created."""
        exchange = self.get_exchange(token_address)
        return exchange.address if exchange is not None else ZERO_ADDRESS
