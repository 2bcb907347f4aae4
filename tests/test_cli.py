"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from navlinks.cli import cli


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "navlinks.toml"
    path.write_text("")
    return path


@pytest.fixture
def paths_file(tmp_path: Path, site_paths: list[str]) -> Path:
    path = tmp_path / "paths.txt"
    path.write_text("# site pages\n" + "\n".join(site_paths) + "\n\n")
    return path


class TestListCommand:
    """Tests for the list command."""

    def test__paths_file__renders_list(self, tmp_path: Path, config_file: Path) -> None:
        """Render one item per line, skipping blanks and comments."""
        source = tmp_path / "links.txt"
        source.write_text("/a.html\n\n# comment\n/b.html\n")

        runner = CliRunner()
        result = runner.invoke(
            cli, ["list", str(source), "-c", str(config_file), "-u", "/a.html"]
        )

        assert result.exit_code == 0
        assert result.output == (
            '<ul><li><em>A</em></li>\n<li><a href="/b.html">B</a></li>\n</ul>\n'
        )

    def test__stdin__read_by_default(self, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["list", "-c", str(config_file)], input="/a.html\n")

        assert result.exit_code == 0
        assert '<a href="/a.html">A</a>' in result.output


class TestTreeCommand:
    """Tests for the tree command."""

    def test__json_tree__renders_nested(self, tmp_path: Path, config_file: Path) -> None:
        source = tmp_path / "tree.json"
        source.write_text(json.dumps(["/a/", ["/a/b.html"]]))

        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(source), "-c", str(config_file)])

        assert result.exit_code == 0
        assert '<ul><li><a href="/a/b.html">B</a></li>' in result.output

    def test__invalid_json__fails(self, tmp_path: Path, config_file: Path) -> None:
        source = tmp_path / "tree.json"
        source.write_text("[")

        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(source), "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test__not_a_list__fails(self, tmp_path: Path, config_file: Path) -> None:
        source = tmp_path / "tree.json"
        source.write_text('{"a": 1}')

        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(source), "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Link tree must be a JSON array" in result.output

    def test__invalid_entry__fails(self, tmp_path: Path, config_file: Path) -> None:
        source = tmp_path / "tree.json"
        source.write_text("[1]")

        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(source), "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Expected a path or a list of paths" in result.output


class TestFullTreeCommand:
    """Tests for the full-tree command."""

    def test__paths__site_map(self, paths_file: Path, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["full-tree", str(paths_file), "-c", str(config_file)])

        assert result.exit_code == 0
        assert result.output.startswith('<ul><li><a href="/">Home</a>\n')
        assert "/tray/toys/ball.html" in result.output

    def test__options__override_config(self, paths_file: Path, tmp_path: Path) -> None:
        """Command-line options take precedence over the config file."""
        config = tmp_path / "custom.toml"
        config.write_text('[site]\nhide = "foo"\n')

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["full-tree", str(paths_file), "-c", str(config), "--hide", "tray", "--end-depth", "1"],
        )

        assert result.exit_code == 0
        assert "/foo/" in result.output
        assert "/tray/" not in result.output

    def test__config_labels__used(self, paths_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[site.labels]\n"/" = "Start"\n\n[format]\nprefix_url = "/docs"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["full-tree", str(paths_file), "-c", str(config)])

        assert result.exit_code == 0
        assert '<a href="/docs/">Start</a>' in result.output

    def test__invalid_pattern__fails(self, paths_file: Path, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["full-tree", str(paths_file), "-c", str(config_file), "--hide", "("]
        )

        assert result.exit_code == 1
        assert "Invalid path pattern" in result.output


class TestBreadcrumbCommand:
    """Tests for the breadcrumb command."""

    def test__url__trail(self, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["breadcrumb", "/foo/bar.html", "-c", str(config_file)])

        assert result.exit_code == 0
        assert result.output == (
            '<p><a href="/">Home</a> &gt; <a href="/foo/">Foo</a> &gt; <em>Bar</em>\n</p>\n'
        )


    def test__current_url_option__rejected(self, config_file: Path) -> None:
        """The trail is always for the URL argument."""
        runner = CliRunner()
        result = runner.invoke(
            cli, ["breadcrumb", "/foo/bar.html", "-c", str(config_file), "-u", "/other.html"]
        )

        assert result.exit_code == 2
        assert "No such option" in result.output


class TestNavCommands:
    """Tests for the nav-tree and nav-bar commands."""

    def test__nav_tree__trimmed_to_current_page(
        self, paths_file: Path, config_file: Path
    ) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["nav-tree", str(paths_file), "-c", str(config_file), "-u", "/foo/wibble.html"],
        )

        assert result.exit_code == 0
        assert "<li><em>Wibble</em></li>" in result.output
        assert "/tray/nav.html" not in result.output

    def test__nav_bar__levels(self, paths_file: Path, config_file: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["nav-bar", str(paths_file), "-c", str(config_file), "-u", "/foo/wibble.html"],
        )

        assert result.exit_code == 0
        assert "<li>[Foo] :\n" in result.output
        assert "<em>Wibble</em></li>" in result.output

    def test__nav_bar__config_format_for_view(self, paths_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[format.nav_bar]\nitem_sep = " | "\n')

        runner = CliRunner()
        result = runner.invoke(
            cli, ["nav-bar", str(paths_file), "-c", str(config), "-u", "/foo/"]
        )

        assert result.exit_code == 0
        assert '<a href="/fooish.html">Fooish</a> | <a href="/bringle/">Bringle</a>' in result.output


class TestConfigErrors:
    """Tests for configuration errors."""

    def test__invalid_config__fails(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.toml"
        config.write_text('[format]\ncolour = "red"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["breadcrumb", "/a.html", "-c", str(config)])

        assert result.exit_code == 1
        assert "format.colour is not a known format option" in result.output
