"""Gathering configuration from environment variables and ABIs"""

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from web3 import Web3

from sampler_mocks.consts import WETH_ADDRESS
from sampler_mocks.exceptions import InvalidChainIdError

MAINNET_CHAIN_ID = 1
KOVAN_CHAIN_ID = 42
GANACHE_CHAIN_ID = 1337

ABI_FILES = {
    "uniswap_exchange_abi": "UniswapExchange.json",
    "uniswap_exchange_factory_abi": "UniswapExchangeFactory.json",
    "uniswap_v2_router_abi": "UniswapV2Router01.json",
    "kyber_network_abi": "KyberNetwork.json",
    "eth2dai_abi": "Eth2Dai.json",
}


def get_network_addresses(chain_id: int) -> dict:
    """Get network-specific deployment addresses."""
    if chain_id == MAINNET_CHAIN_ID:
        return {
            "weth_address": WETH_ADDRESS,
        }
    elif chain_id == KOVAN_CHAIN_ID:
        return {
            "weth_address": Web3.to_checksum_address("0xd0a1e359811322d97991e03f863a0c30c2cf029c"),
        }
    elif chain_id == GANACHE_CHAIN_ID:
        return {
            "weth_address": Web3.to_checksum_address("0x0b1ba0af832d7c05fd64161e0db78e85978e8082"),
        }
    else:
        raise InvalidChainIdError(f"Invalid chain id {chain_id}! Supported: 1 (mainnet), 42 (Kovan), 1337 (Ganache).")


def load_contract_abis() -> dict:
    """Load the ABIs of every mocked protocol contract."""
    current_dir = os.path.dirname(os.path.abspath(__file__))
    abis_dir = os.path.join(current_dir, "abis")

    abis = {}
    for key, file_name in ABI_FILES.items():
        with open(os.path.join(abis_dir, file_name), encoding="utf-8") as f:
            abis[key] = json.load(f)

    return abis


@dataclass(frozen=True)
class MockConfig:
    """Configuration shared by all adapters of one sampler deployment."""

    chain_id: int = MAINNET_CHAIN_ID
    weth_address: str = WETH_ADDRESS

    @property
    def is_mainnet(self) -> bool:
        return self.chain_id == MAINNET_CHAIN_ID

    @classmethod
    def for_chain(cls, chain_id: int) -> "MockConfig":
        network_config = get_network_addresses(chain_id)
        return cls(chain_id=chain_id, weth_address=network_config["weth_address"])

    @classmethod
    def from_env(cls) -> "MockConfig":
        """Create a config instance from environment variables."""
        load_dotenv()

        chain_id = int(os.environ.get("CHAIN_ID", MAINNET_CHAIN_ID))
        return cls.for_chain(chain_id)


def get_config() -> MockConfig:
    """Get configuration from environment."""
    return MockConfig.from_env()
