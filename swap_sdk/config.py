import logging
import os
from typing import Optional, Sequence

from dotenv import load_dotenv

from swap_sdk.base.errors import ConfigurationError
from swap_sdk.network import CHAIN_CONSTANTS, ChainId

load_dotenv()

# Chains with an active wrapped native currency entry
SUPPORTED_WRAPPED_CHAINS = [
    ChainId.MAINNET,
    # ChainId.TESTNET,
    # ChainId.ASTAR,
    # ChainId.SHIDEN,
    # ChainId.FANTOM,
    # ChainId.ONE,
    # ChainId.XDAI,
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# -------- Utility class --------
class ConfigurationHelper:
    @staticmethod
    def check_chains_list(chains: Optional[Sequence[ChainId]] = None) -> None:
        chains = SUPPORTED_WRAPPED_CHAINS if chains is None else chains

        if len(chains) == 0:
            raise ConfigurationError('Supported chain list is empty. Unable to run with such a configuration')
        if len(set(chains)) != len(chains):
            raise ConfigurationError('Supported chain list contains duplicates. Check configuration settings')

        for chain_id in chains:
            if chain_id not in CHAIN_CONSTANTS:
                raise ConfigurationError(f"{chain_id} has no constants. Check configuration settings")

    @staticmethod
    def get_log_level() -> int:
        level = logging.getLevelName(LOG_LEVEL)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {LOG_LEVEL}. Check configuration settings")

        return level

    @staticmethod
    def check_configuration() -> None:
        ConfigurationHelper.check_chains_list()
        ConfigurationHelper.get_log_level()
