import logging

from sampler_mocks import ContractCallDispatcher, DeterministicSampler, LimitOrder, decode_revert_reason, get_config

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


def main():
    """
    Example script showing the quotes a sampler under test would observe.
    """

    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Load configuration (CHAIN_ID from .env, mainnet by default)
    config = get_config()
    sampler = DeterministicSampler(config=config)

    # Token decimals are derived from the token address only
    for token in (WETH, DAI, USDC):
        print(f"Decimals of {token}: {sampler.get_token_decimals(token)}")

    # Uniswap V1: exchanges exist once created
    sampler.create_token_exchanges([DAI])
    dai_exchange = sampler.uniswap.get_exchange(DAI)
    print(f"DAI exchange at {dai_exchange.address}: 1 WETH buys {dai_exchange.get_eth_to_token_input_price(10**18)}")

    # Uniswap V2: every hop amount along the path
    amounts = sampler.uniswap_v2_router.get_amounts_out(10**18, [WETH, DAI, USDC])
    print(f"getAmountsOut(1 WETH, WETH -> DAI -> USDC) = {amounts}")

    # Kyber: the native marker is treated as WETH
    expected_rate, _ = sampler.kyber.get_expected_rate(sampler.kyber.ETH_ADDRESS, USDC, 10**18)
    print(f"Kyber ETH -> USDC rate: {expected_rate / 1e18}")

    # Native orders: deterministic fillable amounts
    order = LimitOrder(makerToken=DAI, takerToken=WETH, makerAmount=3000 * 10**18, takerAmount=10**18, salt=42)
    print(f"Fillable taker amount: {sampler.get_limit_order_fillable_taker_amount(order)}")

    # Arm the fail trigger and watch a call revert at the ABI level
    router = ContractCallDispatcher.for_adapter(sampler.uniswap_v2_router)
    sampler.trigger.arm()
    success, return_data = router.try_call(router.encode_call("getAmountsIn", 10**18, [WETH, DAI]))
    print(f"getAmountsIn while armed: success={success}, reason={decode_revert_reason(return_data)}")
    sampler.trigger.disarm()


if __name__ == "__main__":
    main()
