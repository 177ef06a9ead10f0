"""Tests for StrextSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from strext.config.settings import StrextSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("STREXT_CONFIG", "STREXT_VERBOSE", "STREXT_DIGEST__STRICT"):
        monkeypatch.delenv(name, raising=False)


class TestStrextSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = StrextSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.layout.font_path is None
        assert settings.layout.font_size == 14.0
        assert settings.digest.strict is False
        assert settings.jsonconv.indent == 2
        assert settings.pinyin.head_fallback == "#"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = StrextSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "strext.toml"
        toml.write_text('[layout]\nfont_path = "/fonts/a.ttf"\nfont_size = 18\n')
        settings = StrextSettings.from_cli(search_from=tmp_path)
        assert settings.layout.font_path == "/fonts/a.ttf"
        assert settings.layout.font_size == 18.0
        assert settings.config_path == toml

    def test_sparse_override(self, tmp_path: Path) -> None:
        """Only overridden fields change — rest keeps defaults."""
        (tmp_path / "strext.toml").write_text("[jsonconv]\nindent = 4\n")
        settings = StrextSettings.from_cli(search_from=tmp_path)
        assert settings.jsonconv.indent == 4
        assert settings.jsonconv.ensure_ascii is False

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "strext.toml").write_text("")
        settings = StrextSettings.from_cli(search_from=tmp_path)
        assert settings.digest.strict is False

    def test_walk_up_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "strext.toml").write_text("[digest]\nstrict = true\n")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        settings = StrextSettings.from_cli(search_from=child)
        assert settings.digest.strict is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[pinyin]\nhead_fallback = "?"\n')
        settings = StrextSettings.from_cli(config_path=str(custom))
        assert settings.pinyin.head_fallback == "?"
        assert settings.config_path == custom

    def test_missing_explicit_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            StrextSettings.from_cli(config_path=str(tmp_path / "absent.toml"))

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "strext.toml").write_text("[layout\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            StrextSettings.from_cli(search_from=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = StrextSettings.from_cli(
            search_from=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "strext.toml").write_text("verbose = true\n")
        settings = StrextSettings.from_cli(search_from=tmp_path, verbose=False)
        assert settings.verbose is False


class TestEnvVars:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "strext.toml").write_text("[digest]\nstrict = false\n")
        monkeypatch.setenv("STREXT_DIGEST__STRICT", "true")
        settings = StrextSettings.from_cli(search_from=tmp_path)
        assert settings.digest.strict is True

    def test_top_level_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STREXT_VERBOSE", "true")
        settings = StrextSettings.from_cli(search_from=tmp_path)
        assert settings.verbose is True
