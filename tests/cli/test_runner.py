"""Tests for CLIRunner command routing."""

from unittest.mock import AsyncMock, patch

import pytest

from pkgverify import __version__
from pkgverify.cli.runner import CLIRunner
from pkgverify.config import ConfigManager


@pytest.fixture
def runner(config_manager: ConfigManager) -> CLIRunner:
    with patch("pkgverify.cli.runner.update_logger_from_config"):
        return CLIRunner(config_manager)


class TestCLIRunner:
    """Test CLIRunner."""

    def test_loads_config_on_init(
        self, runner: CLIRunner, config_manager: ConfigManager
    ) -> None:
        assert runner.global_config["snap"]["batch_size"] == 5
        assert config_manager.settings_file.exists()
        assert set(runner.command_handlers) == {"check", "lookup"}

    @pytest.mark.asyncio
    async def test_version(
        self, runner: CLIRunner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert await runner.run(["--version"]) == 0
        assert capsys.readouterr().out.strip() == __version__

    @pytest.mark.asyncio
    async def test_no_command(
        self, runner: CLIRunner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert await runner.run([]) == 1
        assert "No command specified" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_routes_to_handler(self, runner: CLIRunner) -> None:
        handler = runner.command_handlers["lookup"]
        with patch.object(
            handler, "execute", new=AsyncMock(return_value=0)
        ) as execute:
            exit_code = await runner.run(["lookup", "vlc"])

        assert exit_code == 0
        args = execute.await_args.args[0]
        assert args.packages == ["vlc"]
