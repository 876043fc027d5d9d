import argparse
import logging
import sys
from typing import Any, List, Optional

from swap_sdk.base.errors import ChainNotSupported, IdenticalAddress, InvalidAddress, ValidationError
from swap_sdk.config import ConfigurationHelper
from swap_sdk.entities import WETH, Token, get_wrapped_native, sort_pair
from swap_sdk.logger import setup_logger
from swap_sdk.network import ChainId
from swap_sdk.utility import validate_and_parse_address

logger = logging.getLogger(__name__)

CHAIN_CHOICES = [chain.name.lower() for chain in ChainId]


def _format_token(token: Token) -> str:
    return f"{token.chain_id.name} {token.symbol} {token.address} ({token.name}, {token.decimals} decimals)"


class SwapSdkCli:

    def __init__(self) -> None:
        config = ConfigurationHelper()
        config.check_configuration()

        setup_logger(config.get_log_level())

    def main(self, argv: Optional[List[str]] = None) -> None:
        parser = argparse.ArgumentParser(description="swap-sdk CLI")
        subparsers = parser.add_subparsers(title="subcommands", dest="subcommand")

        self._create_checksum_parser(subparsers)
        self._create_weth_parser(subparsers)
        self._create_sort_parser(subparsers)

        args = parser.parse_args(argv)
        if hasattr(args, "func"):
            args.func(args)
        else:
            parser.print_help()

    def checksum(self, args: argparse.Namespace) -> None:
        try:
            address = validate_and_parse_address(args.address)
        except InvalidAddress as ex:
            logger.error(str(ex))
            sys.exit(1)

        print(address)

    def wrapped_native(self, args: argparse.Namespace) -> None:
        if args.chain is None:
            for token in WETH.values():
                print(_format_token(token))
            return

        try:
            token = get_wrapped_native(ChainId[args.chain.upper()])
        except ChainNotSupported as ex:
            logger.error(str(ex))
            sys.exit(1)

        print(_format_token(token))

    def sort(self, args: argparse.Namespace) -> None:
        chain_id = ChainId[args.chain.upper()]

        try:
            token_a = Token(chain_id, args.address_a, args.decimals)
            token_b = Token(chain_id, args.address_b, args.decimals)
            token_0, token_1 = sort_pair(token_a, token_b)
        except (ValidationError, IdenticalAddress) as ex:
            logger.error(str(ex))
            sys.exit(1)

        print(token_0.address)
        print(token_1.address)

    def _create_checksum_parser(self, subparsers: Any) -> None:
        checksum_parser = subparsers.add_parser("checksum", help="Validate an address and print its checksummed form")
        checksum_parser.add_argument("address", help="Contract address")

        checksum_parser.set_defaults(func=self.checksum)

    def _create_weth_parser(self, subparsers: Any) -> None:
        weth_parser = subparsers.add_parser("weth", help="Show the wrapped native currency of a chain")
        weth_parser.add_argument("chain", nargs="?", choices=CHAIN_CHOICES,
                                 help="Chain name. All active chains are shown if omitted")

        weth_parser.set_defaults(func=self.wrapped_native)

    def _create_sort_parser(self, subparsers: Any) -> None:
        sort_parser = subparsers.add_parser("sort", help="Print two token addresses in canonical pair order")
        sort_parser.add_argument("chain", choices=CHAIN_CHOICES, help="Chain of both tokens")
        sort_parser.add_argument("address_a", help="First token address")
        sort_parser.add_argument("address_b", help="Second token address")
        sort_parser.add_argument("--decimals", type=int, default=18, dest="decimals",
                                 help="Decimals of both tokens")

        sort_parser.set_defaults(func=self.sort)


def main() -> None:
    app = SwapSdkCli()
    app.main()
