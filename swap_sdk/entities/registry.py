import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from swap_sdk.base.errors import ChainNotSupported
from swap_sdk.config import SUPPORTED_WRAPPED_CHAINS, ConfigurationHelper
from swap_sdk.entities.token import Token
from swap_sdk.network import CHAIN_CONSTANTS, ChainId

logger = logging.getLogger(__name__)


def build_wrapped_native_registry(chains: Iterable[ChainId]) -> Mapping[ChainId, Token]:
    """ Builds a read-only chain_id -> wrapped native token mapping from chain constants """

    chains = list(chains)
    ConfigurationHelper.check_chains_list(chains)

    registry = {}
    for chain_id in chains:
        constants = CHAIN_CONSTANTS[chain_id]
        registry[chain_id] = Token(
            chain_id,
            constants.WRAPPED_CONTRACT_ADDRESS,
            constants.WRAPPED_DECIMALS,
            constants.WRAPPED_SYMBOL,
            constants.WRAPPED_NAME,
            constants.PROJECT_LINK
        )
        logger.debug(f"{constants.NAME} wrapped native token registered: {registry[chain_id]}")

    return MappingProxyType(registry)


WETH = build_wrapped_native_registry(SUPPORTED_WRAPPED_CHAINS)


def get_wrapped_native(chain_id: ChainId) -> Token:
    if chain_id not in WETH:
        raise ChainNotSupported(f"{chain_id} has no wrapped native currency")

    return WETH[chain_id]
