"""
Read-only quoting interfaces of the mocked protocols.

Each protocol is a capability contract; an adapter may implement several.
Method names are snake_case renderings of the on-chain ABI names.
"""

from typing import Optional, Protocol, Sequence, runtime_checkable

from hexbytes import HexBytes

from sampler_mocks.types import ProcessWithRate, TradeType


@runtime_checkable
class UniswapExchangeQuotes(Protocol):
    """Uniswap V1 exchange pricing functions."""

    def get_eth_to_token_input_price(self, eth_sold: int) -> int: ...

    def get_eth_to_token_output_price(self, tokens_bought: int) -> int: ...

    def get_token_to_eth_input_price(self, tokens_sold: int) -> int: ...

    def get_token_to_eth_output_price(self, eth_bought: int) -> int: ...


@runtime_checkable
class UniswapExchangeFactory(Protocol):
    def get_exchange(self, token_address: str) -> Optional[UniswapExchangeQuotes]: ...

    def get_exchange_address(self, token_address: str) -> str: ...


@runtime_checkable
class UniswapV2RouterQuotes(Protocol):
    def get_amounts_out(self, amount_in: int, path: Sequence[str]) -> list[int]: ...

    def get_amounts_in(self, amount_out: int, path: Sequence[str]) -> list[int]: ...


@runtime_checkable
class KyberNetworkProxy(Protocol):
    """Rate queries of IKyberNetworkProxy."""

    def get_expected_rate(self, from_token: str, to_token: str, src_qty: int) -> tuple[int, int]: ...

    def get_expected_rate_after_fee(
        self, from_token: str, to_token: str, src_qty: int, fee_bps: int, hint: bytes
    ) -> int: ...


@runtime_checkable
class KyberHintHandler(Protocol):
    """Hint building and reserve discovery of IKyberHintHandler / IKyberStorage."""

    def build_token_to_eth_hint(
        self,
        token_src: str,
        token_to_eth_type: TradeType,
        token_to_eth_reserve_ids: Sequence[bytes],
        token_to_eth_split_bps: Sequence[int],
    ) -> HexBytes: ...

    def build_eth_to_token_hint(
        self,
        token_dest: str,
        eth_to_token_type: TradeType,
        eth_to_token_reserve_ids: Sequence[bytes],
        eth_to_token_split_bps: Sequence[int],
    ) -> HexBytes: ...

    def build_token_to_token_hint(
        self,
        token_src: str,
        token_to_eth_type: TradeType,
        token_to_eth_reserve_ids: Sequence[bytes],
        token_to_eth_split_bps: Sequence[int],
        token_dest: str,
        eth_to_token_type: TradeType,
        eth_to_token_reserve_ids: Sequence[bytes],
        eth_to_token_split_bps: Sequence[int],
    ) -> HexBytes: ...

    def get_trading_reserves(
        self, token_src: str, token_dest: str, is_token_to_token: bool, hint: bytes
    ) -> tuple[list[HexBytes], list[int], ProcessWithRate]: ...

    def get_reserve_id(self, reserve: str) -> HexBytes: ...

    def reserves_per_token_src(self, token_address: str, index: int) -> str: ...


@runtime_checkable
class Eth2DaiQuotes(Protocol):
    """Oasis/Eth2Dai matching market pricing functions."""

    def get_buy_amount(self, buy_token: str, pay_token: str, pay_amount: int) -> int: ...

    def get_pay_amount(self, pay_token: str, buy_token: str, buy_amount: int) -> int: ...
