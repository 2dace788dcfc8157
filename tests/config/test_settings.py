"""Tests for BlogSettings: unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from blogctl.config.settings import BlogSettings


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BLOGCTL_CONFIG", raising=False)


class TestBlogSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = BlogSettings.from_cli(site_root=tmp_path)
        assert settings.site_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.site.name == "my-blog"
        assert settings.content_root == tmp_path / "content"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = BlogSettings.from_cli(site_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "blogctl.toml").write_text(
            '[site]\nname = "notes"\ncontent_dir = "posts"\n[markdown]\ntables = false\n'
        )
        settings = BlogSettings.from_cli(site_root=tmp_path)
        assert settings.site.name == "notes"
        assert settings.content_root == tmp_path / "posts"
        assert settings.markdown.tables is False
        assert settings.markdown.strikethrough is True  # default preserved

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "blogctl.toml").write_text("")
        settings = BlogSettings.from_cli(site_root=tmp_path)
        assert settings.site.name == "my-blog"
        assert settings.config_path == tmp_path / "blogctl.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[site]\nname = "custom"\n')
        settings = BlogSettings.from_cli(config_path=str(custom), site_root=tmp_path)
        assert settings.site.name == "custom"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "blogctl.toml").write_text("[site\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BlogSettings.from_cli(site_root=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = BlogSettings.from_cli(
            site_root=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "blogctl.toml").write_text("verbose = true\n")
        settings = BlogSettings.from_cli(site_root=tmp_path, verbose=False)
        assert settings.verbose is False


class TestSiteRootResolution:
    def test_site_root_from_toml_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """When no explicit root, use the parent of the discovered blogctl.toml."""
        subdir = tmp_path / "content" / "posts"
        subdir.mkdir(parents=True)
        (tmp_path / "blogctl.toml").write_text("")
        monkeypatch.chdir(subdir)
        settings = BlogSettings.from_cli()
        assert settings.site_root == tmp_path.resolve()

    def test_site_root_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        settings = BlogSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.site_root == Path.cwd()


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BLOGCTL_QUIET", "true")
        settings = BlogSettings.from_cli(site_root=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "blogctl.toml").write_text('[site]\nname = "toml"\ncontent_dir = "posts"\n')
        monkeypatch.setenv("BLOGCTL_SITE__CONTENT_DIR", "pages")
        settings = BlogSettings.from_cli(site_root=tmp_path)
        assert settings.site.content_dir == "pages"
        assert settings.site.name == "toml"
