from swap_sdk.network.chain import ChainId


class MainnetConstants:
    NAME = "Mainnet"
    NATIVE_TOKEN = "BNB"
    CHAIN_ID = ChainId.MAINNET

    # Wrapped native token
    WRAPPED_CONTRACT_ADDRESS = "0xAeaaf0e2c81Af264101B9129C00F4440cCF0F720"
    WRAPPED_DECIMALS = 18
    WRAPPED_SYMBOL = "WBNB"
    WRAPPED_NAME = "Wrapped BNB"
    PROJECT_LINK = "https://www.binance.org"


class TestnetConstants:
    NAME = "Testnet"
    NATIVE_TOKEN = "BNB"
    CHAIN_ID = ChainId.TESTNET

    # Wrapped native token
    WRAPPED_CONTRACT_ADDRESS = "0xaE8E19eFB41e7b96815649A6a60785e1fbA84C1e"
    WRAPPED_DECIMALS = 18
    WRAPPED_SYMBOL = "WBNB"
    WRAPPED_NAME = "Wrapped BNB"
    PROJECT_LINK = "https://www.binance.org"


class AstarConstants:
    NAME = "Astar"
    NATIVE_TOKEN = "ASTR"
    CHAIN_ID = ChainId.ASTAR

    # Wrapped native token
    WRAPPED_CONTRACT_ADDRESS = "0xAeaaf0e2c81Af264101B9129C00F4440cCF0F720"
    WRAPPED_DECIMALS = 18
    WRAPPED_SYMBOL = "wASTR"
    WRAPPED_NAME = "Wrapped ASTR"
    PROJECT_LINK = "https://www.binance.org"


class ShidenConstants:
    NAME = "Shiden"
    NATIVE_TOKEN = "SDN"
    CHAIN_ID = ChainId.SHIDEN

    # Wrapped native token
    WRAPPED_CONTRACT_ADDRESS = "0xaE8E19eFB41e7b96815649A6a60785e1fbA84C1e"
    WRAPPED_DECIMALS = 18
    WRAPPED_SYMBOL = "WSDN"
    WRAPPED_NAME = "Wrapped SDN"
    PROJECT_LINK = ""


class FantomConstants:
    NAME = "Fantom"
    NATIVE_TOKEN = "FTM"
    CHAIN_ID = ChainId.FANTOM

    # Wrapped native token
    WRAPPED_CONTRACT_ADDRESS = "0x21be370d5312f44cb42ce377bc9b8a0cef1a4c83"
    WRAPPED_DECIMALS = 18
    WRAPPED_SYMBOL = "WFTM"
    WRAPPED_NAME = "Wrapped FTM"
    PROJECT_LINK = "https://fantom.foundation"


class HarmonyConstants:
    NAME = "Harmony"
    NATIVE_TOKEN = "ONE"
    CHAIN_ID = ChainId.ONE

    # Wrapped native token
    WRAPPED_CONTRACT_ADDRESS = "0xcf664087a5bb0237a0bad6742852ec6c8d69a27a"
    WRAPPED_DECIMALS = 18
    WRAPPED_SYMBOL = "WONE"
    WRAPPED_NAME = "Wrapped ONE"
    PROJECT_LINK = "https://harmony.one/"


class XDaiConstants:
    NAME = "xDai"
    NATIVE_TOKEN = "XDAI"
    CHAIN_ID = ChainId.XDAI

    # Wrapped native token
    WRAPPED_CONTRACT_ADDRESS = "0xe91D153E0b41518A2Ce8Dd3D7944Fa863463a97d"
    WRAPPED_DECIMALS = 18
    WRAPPED_SYMBOL = "WXDAI"
    WRAPPED_NAME = "Wrapped XDAI"
    PROJECT_LINK = ""


CHAIN_CONSTANTS = {
    ChainId.MAINNET: MainnetConstants,
    ChainId.TESTNET: TestnetConstants,
    ChainId.ASTAR: AstarConstants,
    ChainId.SHIDEN: ShidenConstants,
    ChainId.FANTOM: FantomConstants,
    ChainId.ONE: HarmonyConstants,
    ChainId.XDAI: XDaiConstants,
}
