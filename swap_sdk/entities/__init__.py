from swap_sdk.entities.currency import ETHER, NativeCurrency
from swap_sdk.entities.token import Currency, Token, currency_equals, sort_pair
from swap_sdk.entities.registry import WETH, get_wrapped_native
