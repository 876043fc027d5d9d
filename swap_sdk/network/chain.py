from enum import IntEnum


class ChainId(IntEnum):
    MAINNET = 56
    TESTNET = 97
    ASTAR = 592
    SHIDEN = 336
    FANTOM = 250
    ONE = 1666600000
    XDAI = 100
