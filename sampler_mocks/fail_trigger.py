"""Process-wide switch that makes every quote operation fail on demand."""

import logging
import threading

from sampler_mocks.consts import FAILURE_ADDRESS
from sampler_mocks.exceptions import FailTriggeredError

logger = logging.getLogger("sampler_mocks.fail_trigger")


class FailTrigger:
    """
    Sentinel balance that, while non-zero, fails every quote.

    Adapters call revert_if_should_fail() before doing any work. The balance
    stays until disarm() is called.
    """

    def __init__(self, address: str = FAILURE_ADDRESS):
        self.address = address
        self._balance = 0
        self._lock = threading.Lock()

    @property
    def balance(self) -> int:
        with self._lock:
            return self._balance

    def arm(self, funding_amount: int = 1) -> None:
        """Fund the sentinel address."""
        if funding_amount <= 0:
            raise ValueError("funding_amount must be positive")
        with self._lock:
            self._balance += funding_amount
        logger.info(f"Fail trigger armed: {self.address} funded with {funding_amount}")

    def disarm(self) -> None:
        with self._lock:
            self._balance = 0
        logger.info(f"Fail trigger disarmed: {self.address}")

    def is_armed(self) -> bool:
        return self.balance != 0

    def revert_if_should_fail(self) -> None:
        if self.is_armed():
            raise FailTriggeredError()


# Shared by every adapter that is not given its own trigger
fail_trigger = FailTrigger()
