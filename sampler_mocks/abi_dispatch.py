"""
ABI-level access to the mocked contracts.

A sampler under test talks to liquidity sources through calldata. The
dispatcher decodes that calldata against the protocol ABI, calls the mapped
adapter method and ABI-encodes the result, so callers see exactly the return
data (or revert data) a deployed contract would produce.
"""

from typing import Any, Optional

import logging

from eth_abi import decode, encode
from hexbytes import HexBytes
from web3 import Web3

from sampler_mocks.adapters import Eth2Dai, KyberNetwork, UniswapExchange, UniswapExchangeFactoryMock, UniswapV2Router01
from sampler_mocks.config import load_contract_abis
from sampler_mocks.exceptions import SamplerMockError, UnknownFunctionError

logger = logging.getLogger("sampler_mocks.abi_dispatch")

ERROR_SELECTOR = HexBytes(Web3.keccak(text="Error(string)")[:4])

ADAPTER_ABI_KEYS = {
    UniswapExchange: "uniswap_exchange_abi",
    UniswapExchangeFactoryMock: "uniswap_exchange_factory_abi",
    UniswapV2Router01: "uniswap_v2_router_abi",
    KyberNetwork: "kyber_network_abi",
    Eth2Dai: "eth2dai_abi",
}


def function_signature(abi_entry: dict) -> str:
    input_types = ",".join(item["type"] for item in abi_entry["inputs"])
    return f"{abi_entry['name']}({input_types})"


def function_selector(abi_entry: dict) -> HexBytes:
    return HexBytes(Web3.keccak(text=function_signature(abi_entry))[:4])


def encode_revert_reason(reason: str) -> HexBytes:
    """Revert data for `revert(reason)`: Error(string) selector followed by the encoded reason."""
    return HexBytes(ERROR_SELECTOR + encode(["string"], [reason]))


def decode_revert_reason(revert_data: bytes) -> Optional[str]:
    revert_data = HexBytes(revert_data)
    if revert_data[:4] != ERROR_SELECTOR:
        return None
    (reason,) = decode(["string"], revert_data[4:])
    return reason


class ContractCallDispatcher:
    """Routes raw calldata to the adapter method implementing the called ABI function."""

    def __init__(self, adapter: Any, abi: list[dict]):
        self.adapter = adapter
        self._functions_by_selector: dict[bytes, dict] = {}
        self._functions_by_name: dict[str, dict] = {}

        for entry in abi:
            if entry.get("type") != "function":
                continue
            if entry["name"] not in adapter.ABI_METHODS:
                raise UnknownFunctionError(
                    f"{adapter.__class__.__name__} does not implement {function_signature(entry)}"
                )
            self._functions_by_selector[bytes(function_selector(entry))] = entry
            self._functions_by_name[entry["name"]] = entry

    @classmethod
    def for_adapter(cls, adapter: Any) -> "ContractCallDispatcher":
        """Create a dispatcher using the bundled ABI of the adapter's protocol."""
        abi_key = ADAPTER_ABI_KEYS[type(adapter)]
        return cls(adapter, load_contract_abis()[abi_key])

    def encode_call(self, fn_name: str, *args: Any) -> HexBytes:
        entry = self._get_function(fn_name)
        input_types = [item["type"] for item in entry["inputs"]]
        return HexBytes(function_selector(entry) + encode(input_types, list(args)))

    def decode_result(self, fn_name: str, return_data: bytes) -> tuple:
        entry = self._get_function(fn_name)
        output_types = [item["type"] for item in entry["outputs"]]
        return decode(output_types, HexBytes(return_data))

    def call(self, calldata: bytes) -> HexBytes:
        """
        Execute calldata against the adapter.

        Args:
            calldata: 4-byte function selector followed by ABI-encoded arguments

        Returns:
            HexBytes: ABI-encoded return values

        Raises:
            UnknownFunctionError: If the selector matches no function of the ABI
            SamplerMockError: Whatever the adapter raises, e.g. FailTriggeredError
        """
        calldata = HexBytes(calldata)
        selector = bytes(calldata[:4])
        entry = self._functions_by_selector.get(selector)
        if entry is None:
            raise UnknownFunctionError(f"Unknown function selector 0x{selector.hex()}")

        input_types = [item["type"] for item in entry["inputs"]]
        args = decode(input_types, calldata[4:])
        method = getattr(self.adapter, self.adapter.ABI_METHODS[entry["name"]])
        result = method(*args)

        output_types = [item["type"] for item in entry["outputs"]]
        if not output_types:
            values: list = []
        elif len(output_types) == 1:
            values = [result]
        else:
            values = list(result)
        return HexBytes(encode(output_types, values))

    def try_call(self, calldata: bytes) -> tuple[bool, HexBytes]:
        """Like call(), but returns (False, revert data) instead of raising mock errors."""
        try:
            return True, self.call(calldata)
        except SamplerMockError as e:
            logger.debug(f"Call to {self.adapter.__class__.__name__} reverted: {e.reason}")
            return False, encode_revert_reason(e.reason)

    def _get_function(self, fn_name: str) -> dict:
        entry = self._functions_by_name.get(fn_name)
        if entry is None:
            raise UnknownFunctionError(f"{self.adapter.__class__.__name__} has no function {fn_name}")
        return entry
