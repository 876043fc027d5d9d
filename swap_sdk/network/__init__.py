from swap_sdk.network.chain import ChainId
from swap_sdk.network.constants import CHAIN_CONSTANTS
