"""
Sampler mocks - deterministic liquidity sources for testing ERC20 bridge samplers.

This package provides:
- quotes: keccak-derived token decimals, rates and sell/buy quotes
- adapters: Uniswap V1/V2, Kyber and Eth2Dai quoting interfaces over those quotes
- fail_trigger: a process-wide switch that makes every quote fail on demand
- sampler: deterministic overrides for a sampler's order and decimals lookups
- abi_dispatch: calldata-level access to the adapters through the protocol ABIs
"""

from sampler_mocks._version import SDK_VERSION
from sampler_mocks.abi_dispatch import ContractCallDispatcher, decode_revert_reason, encode_revert_reason
from sampler_mocks.adapters import Eth2Dai, KyberNetwork, UniswapExchange, UniswapExchangeFactoryMock, UniswapV2Router01
from sampler_mocks.config import MockConfig, get_config, get_network_addresses, load_contract_abis
from sampler_mocks.exceptions import (
    FailTriggeredError,
    InvalidChainIdError,
    PathTooShortError,
    SamplerMockError,
    UnknownFunctionError,
)
from sampler_mocks.fail_trigger import FailTrigger, fail_trigger
from sampler_mocks.quotes import (
    get_deterministic_buy_quote,
    get_deterministic_rate,
    get_deterministic_sell_quote,
    get_deterministic_token_decimals,
)
from sampler_mocks.sampler import DeterministicSampler
from sampler_mocks.types import LimitOrder, ProcessWithRate, TradeType

__all__ = [
    "SDK_VERSION",
    # Quotes
    "get_deterministic_buy_quote",
    "get_deterministic_rate",
    "get_deterministic_sell_quote",
    "get_deterministic_token_decimals",
    # Adapters
    "Eth2Dai",
    "KyberNetwork",
    "UniswapExchange",
    "UniswapExchangeFactoryMock",
    "UniswapV2Router01",
    # Sampler
    "DeterministicSampler",
    # ABI dispatch
    "ContractCallDispatcher",
    "decode_revert_reason",
    "encode_revert_reason",
    # Fail trigger
    "FailTrigger",
    "fail_trigger",
    # Config
    "MockConfig",
    "get_config",
    "get_network_addresses",
    "load_contract_abis",
    # Exceptions
    "FailTriggeredError",
    "InvalidChainIdError",
    "PathTooShortError",
    "SamplerMockError",
    "UnknownFunctionError",
    # Types
    "LimitOrder",
    "ProcessWithRate",
    "TradeType",
]
