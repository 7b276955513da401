"""
Pytest fixtures for the sampler mocks test suite.

Golden values in the tests were computed by hand-evaluating the keccak256
hash-mod-range formulas for the token addresses in tests.helpers.
"""

import logging

import pytest

from sampler_mocks import DeterministicSampler, FailTrigger, fail_trigger

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


@pytest.fixture(autouse=True)
def disarmed_global_trigger():
    """Every test starts and ends with the process-wide trigger disarmed."""
    fail_trigger.disarm()
    yield fail_trigger
    fail_trigger.disarm()


@pytest.fixture
def trigger():
    """A trigger private to one test."""
    return FailTrigger()


@pytest.fixture
def sampler(trigger):
    return DeterministicSampler(trigger=trigger)
