"""Helpers shared by every protocol adapter."""

from typing import Optional, Sequence

import logging

from web3 import Web3

from sampler_mocks.config import MockConfig
from sampler_mocks.exceptions import FailTriggeredError, PathTooShortError
from sampler_mocks.fail_trigger import FailTrigger, fail_trigger
from sampler_mocks.quotes import is_same_address


def get_adapter_logger(adapter: object) -> logging.Logger:
    return logging.getLogger(f"sampler_mocks.{adapter.__class__.__name__}")


def resolve_config(config: Optional[MockConfig]) -> MockConfig:
    return config if config is not None else MockConfig()


def resolve_trigger(trigger: Optional[FailTrigger]) -> FailTrigger:
    return trigger if trigger is not None else fail_trigger


def revert_if_should_fail(trigger: FailTrigger, logger: logging.Logger, operation: str) -> None:
    """Fail the operation before any computation if the trigger is armed."""
    try:
        trigger.revert_if_should_fail()
    except FailTriggeredError:
        logger.debug(f"{operation} rejected: fail trigger armed")
        raise


def resolve_native_token(token: str, native_alias: str, weth_address: str) -> str:
    """Replace a protocol's native asset marker with the canonical wrapped native token."""
    if is_same_address(token, native_alias):
        return weth_address
    return Web3.to_checksum_address(token)


def validate_path(path: Sequence[str]) -> list[str]:
    if len(path) < 2:
        raise PathTooShortError()
    return [Web3.to_checksum_address(token) for token in path]
