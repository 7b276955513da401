"""Kyber network proxy, hint handler and storage backed by deterministic rates."""

from typing import Optional, Sequence

from eth_abi import encode
from hexbytes import HexBytes
from web3 import Web3

from sampler_mocks.adapters.common import (
    get_adapter_logger,
    resolve_config,
    resolve_native_token,
    resolve_trigger,
    revert_if_should_fail,
)
from sampler_mocks.config import MockConfig
from sampler_mocks.consts import KYBER_ETH_ADDRESS, KYBER_SALT, KYBER_SYNTHETIC_RESERVE_ID
from sampler_mocks.fail_trigger import FailTrigger
from sampler_mocks.quotes import address_to_bytes, get_deterministic_rate
from sampler_mocks.types import ProcessWithRate, TradeType


class KyberNetwork:
    """
    One object playing the Kyber network proxy, hint handler and storage.

    Hints only carry the tokens, trade types and reserve selections are ignored.
    Reserve discovery always answers with one synthetic reserve and no split, so
    callers never need per-reserve rates.
    """

    ABI_METHODS = {
        "getExpectedRate": "get_expected_rate",
        "getExpectedRateAfterFee": "get_expected_rate_after_fee",
        "buildTokenToEthHint": "build_token_to_eth_hint",
        "buildEthToTokenHint": "build_eth_to_token_hint",
        "buildTokenToTokenHint": "build_token_to_token_hint",
        "getTradingReserves": "get_trading_reserves",
        "getReserveId": "get_reserve_id",
        "reservesPerTokenSrc": "reserves_per_token_src",
    }

    ETH_ADDRESS = KYBER_ETH_ADDRESS

    def __init__(
        self,
        config: Optional[MockConfig] = None,
        trigger: Optional[FailTrigger] = None,
        salt: bytes = KYBER_SALT,
    ):
        self.config = resolve_config(config)
        self.trigger = resolve_trigger(trigger)
        self.salt = HexBytes(salt)
        self.logger = get_adapter_logger(self)

    # Hint handler

    def build_token_to_eth_hint(
        self,
        token_src: str,
        token_to_eth_type: TradeType = TradeType.BEST_OF_ALL,
        token_to_eth_reserve_ids: Sequence[bytes] = (),
        token_to_eth_split_bps: Sequence[int] = (),
    ) -> HexBytes:
        return HexBytes(encode(["address"], [Web3.to_checksum_address(token_src)]))

    def build_eth_to_token_hint(
        self,
        token_dest: str,
        eth_to_token_type: TradeType = TradeType.BEST_OF_ALL,
        eth_to_token_reserve_ids: Sequence[bytes] = (),
        eth_to_token_split_bps: Sequence[int] = (),
    ) -> HexBytes:
        return HexBytes(encode(["address"], [Web3.to_checksum_address(token_dest)]))

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
    ) -> HexBytes:
        tokens = [Web3.to_checksum_address(token_src), Web3.to_checksum_address(token_dest)]
        return HexBytes(encode(["address", "address"], tokens))

    # Storage

    def get_trading_reserves(
        self, token_src: str, token_dest: str, is_token_to_token: bool, hint: bytes
    ) -> tuple[list[HexBytes], list[int], ProcessWithRate]:
        return [KYBER_SYNTHETIC_RESERVE_ID], [], ProcessWithRate.NOT_REQUIRED

    def get_reserve_id(self, reserve: str) -> HexBytes:
        """Reserve ID for a reserve address: the address left-aligned in 32 bytes."""
        return HexBytes(address_to_bytes(reserve) + b"\x00" * 12)

    def reserves_per_token_src(self, token_address: str, index: int) -> str:
        return Web3.to_checksum_address(token_address)

    # Network proxy

    def get_expected_rate(self, from_token: str, to_token: str, src_qty: int) -> tuple[int, int]:
        """
        Deterministic IKyberNetworkProxy.getExpectedRate().

        Returns:
            tuple: (expected_rate, worst_rate). The worst rate is never set and is always 0.
        """
        revert_if_should_fail(self.trigger, self.logger, "getExpectedRate")
        expected_rate = self._get_rate(from_token, to_token)
        self.logger.debug(f"getExpectedRate({from_token}, {to_token}, {src_qty}) -> {expected_rate}")
        return expected_rate, 0

    def get_expected_rate_after_fee(
        self, from_token: str, to_token: str, src_qty: int, fee_bps: int, hint: bytes
    ) -> int:
        """Deterministic IKyberNetworkProxy.getExpectedRateAfterFee(). Fee and hint are ignored."""
        revert_if_should_fail(self.trigger, self.logger, "getExpectedRateAfterFee")
        expected_rate = self._get_rate(from_token, to_token)
        self.logger.debug(f"getExpectedRateAfterFee({from_token}, {to_token}, {src_qty}) -> {expected_rate}")
        return expected_rate

    def _get_rate(self, from_token: str, to_token: str) -> int:
        weth_address = self.config.weth_address
        from_token = resolve_native_token(from_token, self.ETH_ADDRESS, weth_address)
        to_token = resolve_native_token(to_token, self.ETH_ADDRESS, weth_address)
        return get_deterministic_rate(self.salt, from_token, to_token)
