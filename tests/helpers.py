"""Shared constants and helpers for the sampler mocks tests."""

from contextlib import contextmanager
from unittest.mock import patch

from sampler_mocks.quotes import deterministic

TOKEN_A = "0x1111111111111111111111111111111111111111"
TOKEN_B = "0x2222222222222222222222222222222222222222"
TOKEN_C = "0x3333333333333333333333333333333333333333"


@contextmanager
def count_quote_computations():
    """Count keccak-derived values computed by the quote engine while the block runs."""
    with patch.object(deterministic, "hash_to_uint", wraps=deterministic.hash_to_uint) as spy:
        yield spy
