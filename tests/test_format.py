"""Tests for formatting presets and overrides."""

import pytest
from navlinks.format import VIEWS, FormatConfig


class TestPreset:
    """Tests for FormatConfig.preset()."""

    def test__every_view__has_preset(self) -> None:
        for view in VIEWS:
            assert isinstance(FormatConfig.preset(view), FormatConfig)

    def test__breadcrumb__paragraph_with_separators(self) -> None:
        config = FormatConfig.preset("breadcrumb")

        assert config.links_head == "<p>"
        assert config.tree_sep == " &gt; "
        assert config.pre_item == ""

    def test__nav_bar__strong_parents(self) -> None:
        config = FormatConfig.preset("nav_bar")

        assert config.pre_current_parent == "<strong>"
        assert config.item_sep == " :\n"

    def test__unknown_view__raises_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown view: 'sitemap'"):
            FormatConfig.preset("sitemap")


class TestWithOverrides:
    """Tests for FormatConfig.with_overrides()."""

    def test__override__replaces_field(self) -> None:
        """Overrides replace only the named fragments."""
        config = FormatConfig().with_overrides(links_head="<ol>", links_foot="</ol>")

        assert config.links_head == "<ol>"
        assert config.links_foot == "</ol>"
        assert config.pre_item == "<li>"

    def test__unknown_option__raises_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown format option: colour"):
            FormatConfig().with_overrides(colour="red")

    def test__non_string__raises_error(self) -> None:
        with pytest.raises(ValueError, match="Format option pre_item must be a string"):
            FormatConfig().with_overrides(pre_item=3)  # type: ignore[arg-type]
