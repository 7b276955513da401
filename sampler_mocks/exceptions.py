"""Custom exceptions for the sampler mocks."""

from sampler_mocks.consts import FAIL_TRIGGERED_REASON, PATH_TOO_SHORT_REASON


class SamplerMockError(Exception):
    """Base exception for mock operations. The message is the on-chain revert reason."""

    @property
    def reason(self) -> str:
        return str(self.args[0]) if self.args else ""


class FailTriggeredError(SamplerMockError):
    """Raised by every quote operation while the fail trigger is armed."""

    def __init__(self, reason: str = FAIL_TRIGGERED_REASON):
        super().__init__(reason)


class PathTooShortError(SamplerMockError):
    """Raised when a multi-hop path has fewer than two assets."""

    def __init__(self, reason: str = PATH_TOO_SHORT_REASON):
        super().__init__(reason)


class InvalidChainIdError(SamplerMockError):
    """Raised when an unsupported chain ID is provided."""


class UnknownFunctionError(SamplerMockError):
    """Raised when calldata does not match any function of a mocked contract."""
