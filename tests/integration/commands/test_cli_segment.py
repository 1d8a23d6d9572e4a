from collections.abc import Callable
from pathlib import Path

import pytest

from gitprompt.cli._shared import ExitCode
from tests.conftest import GitRepo


class TestSegmentCommand:
    def test_branch(
        self,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        git_repo.commit()

        gitprompt_cli("--no-color", "--path", str(git_repo.path))

        assert capsys.readouterr().out == "(main)\n"

    def test_runs_in_current_directory(
        self,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        git_repo.commit()
        monkeypatch.chdir(git_repo.path)

        gitprompt_cli("--no-color")

        assert capsys.readouterr().out == "(main)\n"

    def test_merge_in_progress(
        self,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        commit_id = git_repo.commit()
        git_repo.write_marker("MERGE_HEAD", f"{commit_id}\n")

        gitprompt_cli("--no-color", "--path", str(git_repo.path))

        assert capsys.readouterr().out == f"(mrg :{commit_id[:7]} main)\n"

    def test_detached_head(
        self,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        commit_id = git_repo.commit()
        git_repo.detach(commit_id)

        gitprompt_cli("--no-color", "--path", str(git_repo.path))

        assert capsys.readouterr().out == f"(:{commit_id[:7]})\n"

    def test_interactive_rebase(
        self,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        git_repo.commit()
        git_repo.write_marker("rebase-merge/head-name", "refs/heads/topic\n")
        git_repo.write_marker("rebase-merge/msgnum", "3\n")
        git_repo.write_marker("rebase-merge/end", "7\n")

        gitprompt_cli("--no-color", "--path", str(git_repo.path))

        assert capsys.readouterr().out == "(rbs topic 3/7 main)\n"

    def test_outside_repository_prints_nothing(
        self,
        tmp_path: Path,
        gitprompt_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = gitprompt_cli_with_exit_code("--path", str(tmp_path))

        assert exit_code == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_verbose_reports_missing_repository(
        self,
        tmp_path: Path,
        gitprompt_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = gitprompt_cli_with_exit_code("--verbose", "--path", str(tmp_path))

        assert exit_code == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Not inside a git repository" in captured.err

    def test_malformed_marker_exits_with_state_error(
        self,
        git_repo: GitRepo,
        gitprompt_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        git_repo.commit()
        git_repo.write_marker("MERGE_HEAD", "not-a-commit\n")

        exit_code = gitprompt_cli_with_exit_code("--path", str(git_repo.path))

        assert exit_code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_quiet_suppresses_error_message(
        self,
        git_repo: GitRepo,
        gitprompt_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        git_repo.commit()
        git_repo.write_marker("MERGE_HEAD", "not-a-commit\n")

        exit_code = gitprompt_cli_with_exit_code(
            "--quiet", "--path", str(git_repo.path)
        )

        assert exit_code == 2
        assert capsys.readouterr().err == ""

    def test_colored_output(
        self,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        git_repo.commit()
        git_repo.write_marker("BISECT_LOG")

        gitprompt_cli("--path", str(git_repo.path))

        out = capsys.readouterr().out
        assert "\x1b[31m" in out
        assert "\x1b[32m" in out
        assert "bsc" in out

    def test_color_disabled_in_config(
        self,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("GITPROMPT_PROMPT__COLOR", "false")
        git_repo.commit()

        gitprompt_cli("--path", str(git_repo.path))

        assert capsys.readouterr().out == "(main)\n"


class TestSegmentConfiguration:
    def test_delimiters_from_config_file(
        self,
        tmp_path: Path,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config_file = tmp_path / "gitprompt.toml"
        config_file.write_text('[prompt]\nprefix = "["\nsuffix = "]"\n')
        git_repo.commit()

        gitprompt_cli(
            "--no-color", "--config", str(config_file), "--path", str(git_repo.path)
        )

        assert capsys.readouterr().out == "[main]\n"

    def test_abbrev_from_environment(
        self,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("GITPROMPT_PROMPT__ABBREV", "12")
        commit_id = git_repo.commit()
        git_repo.detach(commit_id)

        gitprompt_cli("--no-color", "--path", str(git_repo.path))

        assert capsys.readouterr().out == f"(:{commit_id[:12]})\n"

    def test_missing_config_file_exits(
        self,
        tmp_path: Path,
        gitprompt_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = gitprompt_cli_with_exit_code(
            "--config", str(tmp_path / "missing.toml")
        )

        assert exit_code == ExitCode.LOAD_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Config file not found" in captured.err

    def test_strict_config_error_exits(
        self,
        tmp_path: Path,
        git_repo: GitRepo,
        gitprompt_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        git_repo.commit()
        config_file = tmp_path / "config.toml"
        config_file.write_text("[prompt]\nabbrev = 2\n")
        monkeypatch.setenv("GITPROMPT_STRICT_CONFIG", "1")

        exit_code = gitprompt_cli_with_exit_code(
            "--config", str(config_file), "--path", str(git_repo.path)
        )

        assert exit_code == ExitCode.LOAD_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "prompt.abbrev" in captured.err

    def test_quiet_hides_config_errors(
        self,
        tmp_path: Path,
        gitprompt_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = gitprompt_cli_with_exit_code(
            "--quiet", "--config", str(tmp_path / "missing.toml")
        )

        assert exit_code == ExitCode.LOAD_ERROR
        assert capsys.readouterr().err == ""

    def test_writes_log_file_when_configured(
        self,
        tmp_path: Path,
        git_repo: GitRepo,
        gitprompt_cli: Callable[..., None],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        log_file = tmp_path / "logs" / "gitprompt.log"
        monkeypatch.setenv("GITPROMPT_LOGGING__FILE", str(log_file))
        monkeypatch.setenv("GITPROMPT_LOGGING__LEVEL", "debug")
        git_repo.commit()

        gitprompt_cli("--no-color", "--path", str(git_repo.path))

        content = log_file.read_text()
        assert "head_resolved" in content
        assert "snapshot_taken" in content
