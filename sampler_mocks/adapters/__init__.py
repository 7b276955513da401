from sampler_mocks.adapters.eth2dai import Eth2Dai
from sampler_mocks.adapters.interfaces import (
    Eth2DaiQuotes,
    KyberHintHandler,
    KyberNetworkProxy,
    UniswapExchangeFactory,
    UniswapExchangeQuotes,
    UniswapV2RouterQuotes,
)
from sampler_mocks.adapters.kyber import KyberNetwork
from sampler_mocks.adapters.uniswap import UniswapExchange, UniswapExchangeFactoryMock
from sampler_mocks.adapters.uniswap_v2 import UniswapV2Router01

__all__ = [
    # Adapters
    "Eth2Dai",
    "KyberNetwork",
    "UniswapExchange",
    "UniswapExchangeFactoryMock",
    "UniswapV2Router01",
    # Interfaces
    "Eth2DaiQuotes",
    "KyberHintHandler",
    "KyberNetworkProxy",
    "UniswapExchangeFactory",
    "UniswapExchangeQuotes",
    "UniswapV2RouterQuotes",
]
