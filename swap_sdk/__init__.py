from swap_sdk.base.errors import (
    BaseError,
    ChainNotSupported,
    ConfigurationError,
    IdenticalAddress,
    InvalidAddress,
    InvalidDecimals,
    MismatchedChain,
)
from swap_sdk.entities import ETHER, WETH, Currency, NativeCurrency, Token, currency_equals, get_wrapped_native, sort_pair
from swap_sdk.network import ChainId
from swap_sdk.utility import validate_and_parse_address

__all__ = [
    "BaseError",
    "ChainId",
    "ChainNotSupported",
    "ConfigurationError",
    "Currency",
    "ETHER",
    "IdenticalAddress",
    "InvalidAddress",
    "InvalidDecimals",
    "MismatchedChain",
    "NativeCurrency",
    "Token",
    "WETH",
    "currency_equals",
    "get_wrapped_native",
    "sort_pair",
    "validate_and_parse_address",
]
