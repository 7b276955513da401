"""Constants shared by the deterministic quote engine and the protocol adapters."""

from hexbytes import HexBytes

# Fixed-point rate representation: one unit of rate is 10^18.
RATE_DENOMINATOR = 10**18
MIN_RATE = RATE_DENOMINATOR // 100
MAX_RATE = 100 * RATE_DENOMINATOR

MIN_DECIMALS = 4
MAX_DECIMALS = 20
NATIVE_DECIMALS = 18

UINT256_MODULUS = 2**256

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Canonical wrapped native asset on mainnet.
WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"

# Kyber's marker for the native asset.
KYBER_ETH_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

# Giving this address a balance forces every quote to fail.
FAILURE_ADDRESS = "0xe9dB8717BC5DFB20aaf538b4a5a02B7791FF430C"
FAIL_TRIGGERED_REASON = "FAIL_TRIGGERED"
PATH_TOO_SHORT_REASON = "PATH_TOO_SHORT"

# Per-protocol salts
UNISWAP_BASE_SALT = HexBytes("0x1d6a6a0506b0b4a554b907546558042f9da05efe61f3b5f5e6ef2bc3dbd5c839")
UNISWAP_V2_SALT = HexBytes("0xadc7fcb33c735913b8635927e66896b356a53a912ab2ceff929e60a04b53b3c1")
KYBER_SALT = HexBytes("0x0ff3ca9d46195c39f9a12afb74207b4970349fb3cfb1e459bbf170298d326bc7")
ETH2DAI_SALT = HexBytes("0xb713b61bb9bb2958a0f5d1534b21e94fc68c4c0c034b0902ed844f2f6cd1b4f7")

# Synthetic reserve returned by Kyber reserve discovery: bytes32(uint256(1)).
KYBER_SYNTHETIC_RESERVE_ID = HexBytes((1).to_bytes(32, "big"))
