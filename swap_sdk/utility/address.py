import logging

from web3 import Web3

from swap_sdk.base.errors import InvalidAddress

logger = logging.getLogger(__name__)


def _is_mixed_case(address: str) -> bool:
    digits = address[2:] if address[:2].lower() == '0x' else address
    return digits != digits.lower() and digits != digits.upper()


def validate_and_parse_address(address: str) -> str:
    """ Validates an address and returns its checksummed form """

    if not isinstance(address, str) or not Web3.is_address(address):
        raise InvalidAddress(f"{address} is not a valid address")

    # mixed case means the caller claims a checksum, it has to be right
    if _is_mixed_case(address) and not Web3.is_checksum_address(address):
        raise InvalidAddress(f"{address} has an invalid checksum")

    checksummed_address = Web3.to_checksum_address(address)
    if address != checksummed_address:
        logger.warning(f"{address} is not checksummed")

    return checksummed_address
