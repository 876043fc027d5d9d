import pytest

from swap_sdk import ChainId, Token
from tests.constants import DAI_ADDRESS, USDC_ADDRESS, WETH_ADDRESS


@pytest.fixture
def weth() -> Token:
    return Token(ChainId.MAINNET, WETH_ADDRESS, 18, "WETH", "Wrapped Ether")


@pytest.fixture
def usdc() -> Token:
    return Token(ChainId.MAINNET, USDC_ADDRESS, 6, "USDC", "USD Coin")


@pytest.fixture
def dai() -> Token:
    return Token(ChainId.MAINNET, DAI_ADDRESS, 18, "DAI", "Dai Stablecoin")
