"""Tests for path filtering."""

import pytest
from navlinks.core.context import CurrentContext
from navlinks.core.expansion import extract_all_paths
from navlinks.core.filtering import compile_pattern, filter_paths


@pytest.fixture
def expanded(site_paths: list[str]) -> list[str]:
    return extract_all_paths(site_paths, preserve_order=True)


class TestCompilePattern:
    """Tests for compile_pattern()."""

    def test__empty__none(self) -> None:
        assert compile_pattern(None) is None
        assert compile_pattern("") is None

    def test__invalid__raises_error(self) -> None:
        """Report invalid regular expressions as ValueError."""
        with pytest.raises(ValueError, match="Invalid path pattern"):
            compile_pattern("(")


class TestHide:
    """Tests for hide and nohide patterns."""

    def test__hide__drops_matches(self, expanded: list[str]) -> None:
        result = filter_paths(expanded, CurrentContext(), hide="tray")

        assert not any("tray" in path for path in result)
        assert "/foo/" in result

    def test__nohide__overrides_hide(self, expanded: list[str]) -> None:
        """Paths matching nohide are kept even if hidden."""
        result = filter_paths(expanded, CurrentContext(), hide="tray", nohide="nav")

        assert "/tray/nav.html" in result
        assert "/tray/tea_tray.html" not in result

    def test__nohide_alone__keeps_everything(self, expanded: list[str]) -> None:
        result = filter_paths(expanded, CurrentContext(), nohide="nav")

        assert result == expanded


class TestDepth:
    """Tests for start_depth and end_depth."""

    def test__start_depth__drops_shallower(self, expanded: list[str]) -> None:
        result = filter_paths(expanded, CurrentContext(), start_depth=2)

        assert "/" not in result
        assert "/foo/" not in result
        assert "/foo/bar/" in result

    def test__end_depth__drops_deeper(self, expanded: list[str]) -> None:
        result = filter_paths(expanded, CurrentContext(), end_depth=1)

        assert result == ["/", "/foo/", "/fooish.html", "/bringle/", "/tray/"]

    def test__end_depth_zero__no_limit(self, expanded: list[str]) -> None:
        assert filter_paths(expanded, CurrentContext(), end_depth=0) == expanded

    def test__smaller_end_depth__subset(self, expanded: list[str]) -> None:
        """Lowering end_depth never adds paths."""
        context = CurrentContext.from_url("/tray/toys/")
        shallow = filter_paths(expanded, context, start_depth=1, end_depth=2, do_navbar=True)
        deep = filter_paths(expanded, context, start_depth=1, end_depth=3, do_navbar=True)

        assert set(shallow) <= set(deep)


class TestNavbar:
    """Tests for navigation filtering around the current page."""

    def test__content_page__siblings_and_top_level(self, expanded: list[str]) -> None:
        """Keep ancestors, siblings and the top level of a content page."""
        context = CurrentContext.from_url("/foo/wibble.html")

        result = filter_paths(
            expanded, context, start_depth=1, end_depth=2, do_navbar=True
        )

        assert result == [
            "/foo/",
            "/foo/bar/",
            "/foo/wibble.html",
            "/fooish.html",
            "/bringle/",
            "/tray/",
        ]

    def test__index_page__children_shown(self, expanded: list[str]) -> None:
        """Keep the children of an index page."""
        context = CurrentContext.from_url("/tray/")

        result = filter_paths(
            expanded, context, start_depth=1, end_depth=2, do_navbar=True
        )

        assert result == [
            "/foo/",
            "/fooish.html",
            "/bringle/",
            "/tray/",
            "/tray/nav.html",
            "/tray/tea_tray.html",
            "/tray/toys/",
        ]

    def test__no_current_url__no_navbar_filtering(self, expanded: list[str]) -> None:
        result = filter_paths(expanded, CurrentContext(), do_navbar=True)

        assert result == expanded

    def test__order_preserved(self, expanded: list[str]) -> None:
        """Filtering keeps the input order."""
        context = CurrentContext.from_url("/tray/toys/ball.html")

        result = filter_paths(expanded, context, start_depth=1, do_navbar=True)

        assert result == [path for path in expanded if path in result]

    def test__index_page__sibling_prefix_not_a_child(self) -> None:
        """A directory sharing a name prefix is not inside the current one."""
        paths = extract_all_paths(["/foo/a.html", "/fooish/x.html"], preserve_order=True)
        context = CurrentContext.from_url("/foo/")

        result = filter_paths(paths, context, start_depth=1, end_depth=2, do_navbar=True)

        assert result == ["/foo/", "/foo/a.html", "/fooish/"]

    def test__content_page__parent_prefix_not_a_sibling(self) -> None:
        """Siblings of the page's directory must sit in the same parent."""
        paths = extract_all_paths(
            ["/foo/bar/page.html", "/foo/baz/", "/fooish/qux/"],
            preserve_order=True,
        )
        context = CurrentContext.from_url("/foo/bar/page.html")

        result = filter_paths(paths, context, start_depth=1, end_depth=3, do_navbar=True)

        assert "/foo/baz/" in result
        assert "/fooish/qux/" not in result
