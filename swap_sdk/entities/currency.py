from dataclasses import dataclass
from typing import Optional

from swap_sdk.base.errors import InvalidDecimals

MAX_DECIMALS = 255  # uint8


def validate_decimals(decimals: int) -> int:
    """ Checks that decimals fit into uint8 """

    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
        raise InvalidDecimals(f"{decimals} is not a uint8")

    return decimals


@dataclass(frozen=True, eq=False)
class NativeCurrency:
    """
    A chain's native gas asset. Instances are singletons and are compared by identity.
    The only instance used by the SDK is ETHER.
    """

    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        validate_decimals(self.decimals)

    def __repr__(self) -> str:
        return f"NativeCurrency({self.symbol}, {self.decimals})"


ETHER = NativeCurrency(18, 'BNB', 'BNB')
