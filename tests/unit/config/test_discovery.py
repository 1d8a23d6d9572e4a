from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from gitprompt.config import ConfigSourceName, discover_sources, get_user_config_path


class TestGetUserConfigPath:
    def test_follows_xdg_config_home(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_user_config_path() == tmp_path / "gitprompt" / "config.toml"


class TestDiscoverSources:
    def test_default_sources(self, fs: FakeFilesystem) -> None:
        sources = discover_sources()

        assert [s.name for s in sources] == [
            ConfigSourceName.ENV,
            ConfigSourceName.USER,
            ConfigSourceName.DEFAULT,
        ]
        assert sources[1].path == get_user_config_path()
        assert sources[1].exists is False

    def test_user_file_exists(self, fs: FakeFilesystem) -> None:
        fs.create_file(get_user_config_path())

        sources = discover_sources()

        assert sources[1].exists is True

    def test_explicit_file_replaces_user_file(self, fs: FakeFilesystem) -> None:
        fs.create_file("/custom.toml")

        sources = discover_sources(config_path=Path("/custom.toml"))

        names = [s.name for s in sources]
        assert ConfigSourceName.USER not in names
        assert sources[1].name == ConfigSourceName.FILE
        assert sources[1].exists is True

    def test_cli_source_first(self, fs: FakeFilesystem) -> None:
        overrides = {"prompt": {"color": False}}

        sources = discover_sources(
            include_env=False, include_cli=True, cli_overrides=overrides
        )

        assert sources[0].name == ConfigSourceName.CLI
        assert sources[0].values == overrides
        assert ConfigSourceName.ENV not in [s.name for s in sources]
