import pytest
from eth_abi import encode

from sampler_mocks import (
    ContractCallDispatcher,
    DeterministicSampler,
    UnknownFunctionError,
    decode_revert_reason,
    encode_revert_reason,
)
from sampler_mocks.abi_dispatch import function_selector, function_signature
from sampler_mocks.consts import KYBER_SALT, ZERO_ADDRESS
from sampler_mocks.quotes import get_deterministic_rate
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C


@pytest.fixture
def router_dispatcher(sampler):
    return ContractCallDispatcher.for_adapter(sampler.uniswap_v2_router)


def test_selectors_match_protocol_abi(router_dispatcher):
    calldata = router_dispatcher.encode_call("getAmountsOut", 1000, [TOKEN_A, TOKEN_B])
    assert calldata[:4].hex().removeprefix("0x") == "d06ca61f"
    calldata = router_dispatcher.encode_call("getAmountsIn", 1000, [TOKEN_A, TOKEN_B])
    assert calldata[:4].hex().removeprefix("0x") == "1f00ca74"


def test_function_signature():
    entry = {"name": "getExchange", "inputs": [{"name": "tokenAddress", "type": "address"}]}
    assert function_signature(entry) == "getExchange(address)"
    assert function_selector(entry).hex().removeprefix("0x") == "06f2bf62"


def test_get_amounts_out_over_calldata(router_dispatcher):
    calldata = router_dispatcher.encode_call("getAmountsOut", 10**4, [TOKEN_A, TOKEN_B, TOKEN_C])
    return_data = router_dispatcher.call(calldata)

    assert bytes(return_data) == encode(["uint256[]"], [[10**4, 6624305, 4075734614107037582]])
    (amounts,) = router_dispatcher.decode_result("getAmountsOut", return_data)
    assert list(amounts) == [10**4, 6624305, 4075734614107037582]


def test_fail_trigger_reverts_with_reason(router_dispatcher, trigger):
    trigger.arm()
    calldata = router_dispatcher.encode_call("getAmountsIn", 1000, [TOKEN_A, TOKEN_B])

    success, return_data = router_dispatcher.try_call(calldata)

    assert not success
    assert return_data == encode_revert_reason("FAIL_TRIGGERED")
    assert decode_revert_reason(return_data) == "FAIL_TRIGGERED"


def test_short_path_reverts_with_reason(router_dispatcher):
    success, return_data = router_dispatcher.try_call(router_dispatcher.encode_call("getAmountsOut", 1, [TOKEN_A]))
    assert not success
    assert decode_revert_reason(return_data) == "PATH_TOO_SHORT"


def test_revert_data_layout():
    revert_data = encode_revert_reason("FAIL_TRIGGERED")
    assert revert_data[:4].hex().removeprefix("0x") == "08c379a0"
    assert decode_revert_reason(b"\x00" * 36) is None


def test_unknown_selector(router_dispatcher):
    with pytest.raises(UnknownFunctionError):
        router_dispatcher.call(bytes.fromhex("deadbeef") + encode(["uint256"], [1]))
    with pytest.raises(UnknownFunctionError):
        router_dispatcher.encode_call("swapExactTokensForTokens", 1)


def test_factory_over_calldata(sampler):
    dispatcher = ContractCallDispatcher.for_adapter(sampler.uniswap)

    (exchange_address,) = dispatcher.decode_result(
        "getExchange", dispatcher.call(dispatcher.encode_call("getExchange", TOKEN_A))
    )
    assert exchange_address == ZERO_ADDRESS

    assert dispatcher.call(dispatcher.encode_call("createTokenExchanges", [TOKEN_A])) == b""
    (exchange_address,) = dispatcher.decode_result(
        "getExchange", dispatcher.call(dispatcher.encode_call("getExchange", TOKEN_A))
    )
    assert exchange_address.lower() == sampler.uniswap.get_exchange(TOKEN_A).address.lower()


def test_exchange_over_calldata(sampler):
    sampler.create_token_exchanges([TOKEN_A])
    exchange = sampler.uniswap.get_exchange(TOKEN_A)
    dispatcher = ContractCallDispatcher.for_adapter(exchange)

    return_data = dispatcher.call(dispatcher.encode_call("getTokenToEthInputPrice", 10**4))
    assert dispatcher.decode_result("getTokenToEthInputPrice", return_data) == (17868652132318934258,)
    return_data = dispatcher.call(dispatcher.encode_call("tokenAddress"))
    (token_address,) = dispatcher.decode_result("tokenAddress", return_data)
    assert token_address.lower() == TOKEN_A


def test_kyber_over_calldata(sampler):
    dispatcher = ContractCallDispatcher.for_adapter(sampler.kyber)

    return_data = dispatcher.call(dispatcher.encode_call("getExpectedRate", TOKEN_A, TOKEN_B, 10**18))
    assert dispatcher.decode_result("getExpectedRate", return_data) == (
        get_deterministic_rate(KYBER_SALT, TOKEN_A, TOKEN_B),
        0,
    )

    return_data = dispatcher.call(dispatcher.encode_call("getTradingReserves", TOKEN_A, TOKEN_B, False, b""))
    reserve_ids, split_values_bps, process_with_rate = dispatcher.decode_result("getTradingReserves", return_data)
    assert list(reserve_ids) == [(1).to_bytes(32, "big")]
    assert list(split_values_bps) == []
    assert process_with_rate == 0

    hint_calldata = dispatcher.encode_call("buildTokenToEthHint", TOKEN_A, 3, [b"\x01" * 32], [10000])
    (hint,) = dispatcher.decode_result("buildTokenToEthHint", dispatcher.call(hint_calldata))
    assert hint == encode(["address"], [TOKEN_A])


def test_eth2dai_over_calldata():
    sampler = DeterministicSampler()
    dispatcher = ContractCallDispatcher.for_adapter(sampler.eth2dai)
    return_data = dispatcher.call(dispatcher.encode_call("getBuyAmount", TOKEN_B, TOKEN_A, 10**4))
    expected = sampler.eth2dai.get_buy_amount(TOKEN_B, TOKEN_A, 10**4)
    assert dispatcher.decode_result("getBuyAmount", return_data) == (expected,)


def test_dispatcher_requires_every_abi_function(sampler):
    abi = [{"type": "function", "name": "swap", "inputs": [], "outputs": []}]
    with pytest.raises(UnknownFunctionError):
        ContractCallDispatcher(sampler.eth2dai, abi)
