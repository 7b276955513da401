import pytest

from sampler_mocks import FailTriggeredError, UniswapExchange, UniswapExchangeFactoryMock
from sampler_mocks.adapters import UniswapExchangeFactory, UniswapExchangeQuotes
from sampler_mocks.consts import WETH_ADDRESS, ZERO_ADDRESS
from sampler_mocks.quotes import get_deterministic_buy_quote, get_deterministic_sell_quote
from tests.helpers import TOKEN_A, TOKEN_B, count_quote_computations

pytestmark = pytest.mark.adapters

EXCHANGE_A_SALT = "0x4af5515242ac6301c5e9d88691f48c20a08540299b7247a6ccb807c696bfde88"
EXCHANGE_A_ADDRESS = "0x91f48C20a08540299B7247a6ccB807C696BfDE88"


@pytest.fixture
def exchange(trigger):
    return UniswapExchange(TOKEN_A, trigger=trigger)


def test_exchange_implements_quote_interface(exchange):
    assert isinstance(exchange, UniswapExchangeQuotes)


def test_exchange_salt_and_address(exchange):
    assert exchange.salt.hex().removeprefix("0x") == EXCHANGE_A_SALT[2:]
    assert exchange.address == EXCHANGE_A_ADDRESS
    assert exchange.get_token_address() == TOKEN_A


def test_token_to_eth_input_price_golden_value(exchange):
    assert exchange.get_token_to_eth_input_price(10**4) == 17868652132318934258


def test_directional_quotes(exchange):
    salt = exchange.salt
    assert exchange.get_eth_to_token_input_price(10**18) == get_deterministic_sell_quote(
        salt, WETH_ADDRESS, TOKEN_A, 10**18
    )
    assert exchange.get_eth_to_token_output_price(10**4) == get_deterministic_buy_quote(
        salt, WETH_ADDRESS, TOKEN_A, 10**4
    )
    assert exchange.get_token_to_eth_input_price(10**4) == get_deterministic_sell_quote(
        salt, TOKEN_A, WETH_ADDRESS, 10**4
    )
    assert exchange.get_token_to_eth_output_price(10**18) == get_deterministic_buy_quote(
        salt, TOKEN_A, WETH_ADDRESS, 10**18
    )


def test_exchanges_for_different_tokens_are_decorrelated(trigger):
    exchange_a = UniswapExchange(TOKEN_A, trigger=trigger)
    exchange_b = UniswapExchange(TOKEN_B, trigger=trigger)
    assert exchange_a.salt != exchange_b.salt
    assert exchange_a.address != exchange_b.address


@pytest.mark.parametrize(
    "method",
    [
        "get_eth_to_token_input_price",
        "get_eth_to_token_output_price",
        "get_token_to_eth_input_price",
        "get_token_to_eth_output_price",
    ],
)
def test_armed_trigger_fails_every_quote(exchange, trigger, method):
    trigger.arm()
    with count_quote_computations() as computations:
        with pytest.raises(FailTriggeredError):
            getattr(exchange, method)(10**18)
    assert computations.call_count == 0


def test_exchange_uses_global_trigger_by_default(disarmed_global_trigger):
    exchange = UniswapExchange(TOKEN_A)
    disarmed_global_trigger.arm()
    with pytest.raises(FailTriggeredError):
        exchange.get_token_to_eth_input_price(1)


def test_factory_implements_interface(trigger):
    assert isinstance(UniswapExchangeFactoryMock(trigger=trigger), UniswapExchangeFactory)


def test_factory_creates_exchange_once(trigger):
    factory = UniswapExchangeFactoryMock(trigger=trigger)
    factory.create_token_exchanges([TOKEN_A])
    first = factory.get_exchange(TOKEN_A)

    factory.create_token_exchanges([TOKEN_A, TOKEN_B])
    assert factory.get_exchange(TOKEN_A) is first
    assert factory.get_exchange(TOKEN_B) is not None
    assert factory.get_exchange(TOKEN_B) is not first


def test_factory_lookup_is_case_insensitive(trigger):
    factory = UniswapExchangeFactoryMock(trigger=trigger)
    factory.create_token_exchanges([WETH_ADDRESS.lower()])
    assert factory.get_exchange(WETH_ADDRESS) is factory.get_exchange(WETH_ADDRESS.lower())


def test_factory_unknown_token(trigger):
    factory = UniswapExchangeFactoryMock(trigger=trigger)
    assert factory.get_exchange(TOKEN_A) is None
    assert factory.get_exchange_address(TOKEN_A) == ZERO_ADDRESS


def test_factory_exchange_address(trigger):
    factory = UniswapExchangeFactoryMock(trigger=trigger)
    factory.create_token_exchanges([TOKEN_A])
    assert factory.get_exchange_address(TOKEN_A) == EXCHANGE_A_ADDRESS


def test_factory_exchanges_share_trigger(trigger):
    factory = UniswapExchangeFactoryMock(trigger=trigger)
    factory.create_token_exchanges([TOKEN_A])
    trigger.arm()
    with pytest.raises(FailTriggeredError):
        factory.get_exchange(TOKEN_A).get_eth_to_token_input_price(1)
