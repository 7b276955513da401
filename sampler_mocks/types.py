from typing import Optional

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from web3 import Web3

from sampler_mocks.consts import ZERO_ADDRESS


class TradeType(IntEnum):
    """Kyber trade routing strategies. The mock accepts and ignores them."""

    BEST_OF_ALL = 0
    MASK_IN = 1
    MASK_OUT = 2
    SPLIT = 3


class ProcessWithRate(IntEnum):
    """Whether Kyber reserves must be queried for per-reserve rates."""

    NOT_REQUIRED = 0
    REQUIRED = 1


class LimitOrder(BaseModel):
    """A native limit order as seen by the sampler."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    maker_token: str = Field(alias="makerToken")
    taker_token: str = Field(alias="takerToken")
    maker_amount: int = Field(alias="makerAmount", ge=0)
    taker_amount: int = Field(alias="takerAmount", ge=0)
    taker_token_fee_amount: int = Field(default=0, alias="takerTokenFeeAmount", ge=0)
    maker: str = Field(default=ZERO_ADDRESS)
    taker: str = Field(default=ZERO_ADDRESS)
    sender: str = Field(default=ZERO_ADDRESS)
    fee_recipient: str = Field(default=ZERO_ADDRESS, alias="feeRecipient")
    pool: str = Field(default="0x" + "00" * 32, description="Liquidity pool identifier (bytes32)")
    expiry: int = Field(default=0, ge=0)
    salt: int = Field(ge=0, lt=2**256, description="Order nonce; seeds the fillable amount")
    signature: Optional[str] = Field(default=None)

    @field_validator("maker_token", "taker_token", "maker", "taker", "sender", "fee_recipient")
    @classmethod
    def checksum_address(cls, value: str) -> str:
        return Web3.to_checksum_address(value)
