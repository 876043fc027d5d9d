import logging

import pytest

from swap_sdk.cli import SwapSdkCli
from swap_sdk.logger import CONSOLE_HANDLER_NAME
from tests.constants import USDC_ADDRESS, WBNB_ADDRESS, WETH_ADDRESS


@pytest.fixture
def cli() -> SwapSdkCli:
    return SwapSdkCli()


def test_checksum(cli, capsys) -> None:
    cli.main(["checksum", USDC_ADDRESS.lower()])

    assert capsys.readouterr().out.strip() == USDC_ADDRESS


def test_checksum_invalid_address(cli) -> None:
    with pytest.raises(SystemExit) as ex:
        cli.main(["checksum", "0x1234"])

    assert ex.value.code == 1


def test_weth_for_chain(cli, capsys) -> None:
    cli.main(["weth", "mainnet"])

    out = capsys.readouterr().out
    assert WBNB_ADDRESS in out
    assert "WBNB" in out


def test_weth_for_all_chains(cli, capsys) -> None:
    cli.main(["weth"])

    assert capsys.readouterr().out.strip().splitlines() == [
        f"MAINNET WBNB {WBNB_ADDRESS} (Wrapped BNB, 18 decimals)"
    ]


def test_weth_for_disabled_chain(cli) -> None:
    with pytest.raises(SystemExit) as ex:
        cli.main(["weth", "fantom"])

    assert ex.value.code == 1


def test_sort(cli, capsys) -> None:
    cli.main(["sort", "mainnet", WETH_ADDRESS, USDC_ADDRESS.lower()])

    assert capsys.readouterr().out.split() == [USDC_ADDRESS, WETH_ADDRESS]


def test_sort_identical_addresses(cli) -> None:
    with pytest.raises(SystemExit) as ex:
        cli.main(["sort", "mainnet", WETH_ADDRESS, WETH_ADDRESS.lower()])

    assert ex.value.code == 1


def test_no_subcommand_prints_help(cli, capsys) -> None:
    cli.main([])

    assert "subcommands" in capsys.readouterr().out


def test_sort_invalid_decimals(cli) -> None:
    with pytest.raises(SystemExit) as ex:
        cli.main(["sort", "mainnet", WETH_ADDRESS, USDC_ADDRESS, "--decimals", "300"])

    assert ex.value.code == 1


def test_console_handler_is_installed_once() -> None:
    SwapSdkCli()
    root = logging.getLogger()
    count = len(root.handlers)

    SwapSdkCli()
    SwapSdkCli()

    assert len(root.handlers) == count
    assert [h.get_name() for h in root.handlers].count(CONSOLE_HANDLER_NAME) == 1
