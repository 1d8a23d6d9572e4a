from typing import cast

import pytest
from cyclopts import App
from pytest_mock import MockerFixture

from gitprompt.cli import CLIContext
from gitprompt.cli._commands import register_commands
from gitprompt.cli._shared import ExitCode, exit_with_error
from gitprompt.config import Config


class TestCommandRegistration:
    def test_register_commands_registers_subcommands(
        self, mocker: MockerFixture
    ) -> None:
        mock_app = mocker.MagicMock(spec=App)
        register_commands(mock_app)

        assert cast("int", mock_app.command.call_count) == 3  # pyright: ignore[reportAny]
        mock_app.default.assert_called_once()  # pyright: ignore[reportAny]


class TestCLIContext:
    @pytest.fixture(autouse=True)
    def reset_context(self) -> None:
        CLIContext.reset()

    def test_default_context_uses_defaults(self) -> None:
        ctx = CLIContext.get_current()

        assert ctx.config.prompt.prefix == "("
        assert ctx.color
        assert ctx.logger is None

    def test_set_current(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}), quiet=True)
        CLIContext.set_current(ctx)

        assert CLIContext.get_current() is ctx

        CLIContext.reset()
        assert CLIContext.get_current() is not ctx

    def test_no_color_flag_disables_color(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}), no_color=True)

        assert not ctx.color

    def test_config_can_disable_color(self) -> None:
        ctx = CLIContext(config=Config.from_dict({"prompt": {"color": False}}))

        assert not ctx.color


class TestExitWithError:
    def test_prints_and_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            exit_with_error("HEAD is [broken]", ExitCode.STATE_ERROR)

        assert exc_info.value.code == 2
        assert "HEAD is [broken]" in capsys.readouterr().err

    def test_quiet_exits_silently(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            exit_with_error("boom", quiet=True)

        assert exc_info.value.code == ExitCode.INTERNAL_ERROR
        assert capsys.readouterr().err == ""
