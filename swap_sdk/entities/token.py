from dataclasses import dataclass
from typing import Optional, Tuple, Union

from swap_sdk.base.errors import IdenticalAddress, MismatchedChain
from swap_sdk.entities.currency import NativeCurrency, validate_decimals
from swap_sdk.network.chain import ChainId
from swap_sdk.utility.address import validate_and_parse_address


@dataclass(frozen=True, eq=False)
class Token:
    """
    Represents an ERC20 token with a unique address and some metadata.

    The address is stored in its checksummed form. Only chain_id and address take part
    in equality and hashing, so tokens with different metadata may still be equal.
    """

    chain_id: ChainId
    address: str
    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None
    project_link: Optional[str] = None

    def __post_init__(self) -> None:
        validate_decimals(self.decimals)
        object.__setattr__(self, 'address', validate_and_parse_address(self.address))

    def equals(self, other: 'Token') -> bool:
        """ Returns true if the two tokens have the same chain_id and address """

        # short circuit on identity
        if self is other:
            return True

        return self.chain_id == other.chain_id and self.address == other.address

    def sorts_before(self, other: 'Token') -> bool:
        """
        Returns true if the address of this token sorts before the address of the other token.

        Raises MismatchedChain if the tokens are on different chains and
        IdenticalAddress if the tokens have the same address.
        """

        if self.chain_id != other.chain_id:
            raise MismatchedChain(f"Can't sort tokens from {self.chain_id} and {other.chain_id}")
        if self.address == other.address:
            raise IdenticalAddress(f"Can't sort token {self.address} against itself")

        return self.address.lower() < other.address.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented

        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.chain_id, self.address))

    def __repr__(self) -> str:
        return f"Token({self.chain_id}, {self.symbol}, {self.address})"


Currency = Union[NativeCurrency, Token]


def currency_equals(currency_a: Currency, currency_b: Currency) -> bool:
    """ Compares two currencies for equality """

    if isinstance(currency_a, Token) and isinstance(currency_b, Token):
        return currency_a.equals(currency_b)
    if isinstance(currency_a, Token) or isinstance(currency_b, Token):
        return False

    return currency_a is currency_b


def sort_pair(token_a: Token, token_b: Token) -> Tuple[Token, Token]:
    """ Returns the two tokens in their canonical pair order """

    if token_a.sorts_before(token_b):
        return token_a, token_b

    return token_b, token_a
