"""Shared test fixtures."""

import pytest


@pytest.fixture
def sample_paths() -> list[str]:
    """A small site with pages at several depths."""
    return [
        "/foo/bar/baz.html",
        "/fooish.html",
        "/bringle/",
        "/tray/nav.html",
        "/tray/tea_tray.html",
    ]


@pytest.fixture
def site_paths() -> list[str]:
    """A site deep enough to show navigation trimming."""
    return [
        "/foo/bar/baz.html",
        "/foo/bar/thing.html",
        "/foo/wibble.html",
        "/fooish.html",
        "/bringle/",
        "/tray/nav.html",
        "/tray/tea_tray.html",
        "/tray/toys/",
        "/tray/toys/ball.html",
    ]


@pytest.fixture
def sample_labels() -> dict[str, str]:
    return {
        "/tray/nav.html": "Navigation",
        "/foo/bar/baz.html": "Bazzy",
    }
