"""CLI interface for navlinks.

Command-line tool for rendering link lists, site maps, breadcrumbs and
navigation bars from a list of site paths.
"""

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn, TextIO, TypeVar

import click

from navlinks.config import Config
from navlinks.links import (
    render_breadcrumb,
    render_explicit_tree,
    render_flat_list,
    render_full_tree,
    render_nav_bar,
    render_nav_tree,
)

F = TypeVar("F", bound=Callable[..., None])


def _common_options(func: F) -> F:
    func = click.option(
        "--current-url",
        "-u",
        default=None,
        help="URL of the page being rendered",
    )(func)
    return _config_options(func)


def _config_options(func: F) -> F:
    func = click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable debug logging on stderr",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, path_type=Path, dir_okay=False),
        default=None,
        help="Path to configuration file (default: auto-discover navlinks.toml)",
    )(func)
    return func


def _filter_options(func: F) -> F:
    func = click.option(
        "--preserve-order/--sort",
        default=None,
        help="Keep the input order of paths instead of sorting (overrides config)",
    )(func)
    func = click.option(
        "--start-depth",
        type=int,
        default=None,
        help="Start at this depth (0 is the root)",
    )(func)
    func = click.option(
        "--nohide",
        default=None,
        help="Regular expression for paths to keep even if hidden (overrides config)",
    )(func)
    func = click.option(
        "--hide",
        default=None,
        help="Regular expression for paths to leave out (overrides config)",
    )(func)
    return func


@click.group()
def cli() -> None:
    """navlinks - smart HTML link lists, trees, breadcrumbs and navbars."""


@cli.command("list")
@click.argument("paths_file", type=click.File("r"), default="-")
@_common_options
def list_command(
    paths_file: TextIO,
    config_path: Path | None,
    current_url: str | None,
    verbose: bool,
) -> None:
    """Render a flat list of links, one URL per line of PATHS_FILE."""
    config = _load_config(config_path, verbose)
    paths = _read_paths(paths_file)
    _emit(
        render_flat_list(
            paths,
            current_url,
            labels=config.site.labels,
            descriptions=config.site.descriptions,
            format_config=config.format_for("link_list"),
        )
    )


@cli.command("tree")
@click.argument("tree_file", type=click.File("r"), default="-")
@_common_options
def tree_command(
    tree_file: TextIO,
    config_path: Path | None,
    current_url: str | None,
    verbose: bool,
) -> None:
    """Render nested links from a JSON array of URLs and nested arrays."""
    config = _load_config(config_path, verbose)
    try:
        link_tree = json.load(tree_file)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in {tree_file.name}: {e}")
    if not isinstance(link_tree, list):
        _fail("Link tree must be a JSON array")

    _emit(
        _guarded(
            render_explicit_tree,
            link_tree,
            current_url,
            labels=config.site.labels,
            descriptions=config.site.descriptions,
            format_config=config.format_for("link_tree"),
        )
    )


@cli.command("full-tree")
@click.argument("paths_file", type=click.File("r"), default="-")
@_common_options
@_filter_options
@click.option(
    "--end-depth",
    type=int,
    default=0,
    help="End at this depth (default: 0, no limit)",
)
def full_tree_command(
    paths_file: TextIO,
    config_path: Path | None,
    current_url: str | None,
    verbose: bool,
    hide: str | None,
    nohide: str | None,
    start_depth: int | None,
    preserve_order: bool | None,
    end_depth: int,
) -> None:
    """Render a site map of every page and directory in PATHS_FILE."""
    config = _load_config(config_path, verbose)
    paths = _read_paths(paths_file)
    _emit(
        _guarded(
            render_full_tree,
            paths,
            current_url,
            labels=config.site.labels,
            descriptions=config.site.descriptions,
            hide=hide if hide is not None else config.site.hide,
            nohide=nohide if nohide is not None else config.site.nohide,
            start_depth=start_depth if start_depth is not None else 0,
            end_depth=end_depth,
            preserve_order=_preserve_order(preserve_order, config, default=False),
            format_config=config.format_for("full_tree"),
        )
    )


@cli.command("breadcrumb")
@click.argument("url")
@_config_options
def breadcrumb_command(
    url: str,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Render a breadcrumb trail from the site root down to URL."""
    config = _load_config(config_path, verbose)
    _emit(
        _guarded(
            render_breadcrumb,
            url,
            labels=config.site.labels,
            descriptions=config.site.descriptions,
            hide=config.site.hide,
            nohide=config.site.nohide,
            format_config=config.format_for("breadcrumb"),
        )
    )


@cli.command("nav-tree")
@click.argument("paths_file", type=click.File("r"), default="-")
@_common_options
@_filter_options
@click.option(
    "--end-depth",
    type=int,
    default=None,
    help="End at this depth (default: derived from the current URL)",
)
def nav_tree_command(
    paths_file: TextIO,
    config_path: Path | None,
    current_url: str | None,
    verbose: bool,
    hide: str | None,
    nohide: str | None,
    start_depth: int | None,
    preserve_order: bool | None,
    end_depth: int | None,
) -> None:
    """Render a nested navigation tree around the current URL."""
    config = _load_config(config_path, verbose)
    paths = _read_paths(paths_file)
    _emit(
        _guarded(
            render_nav_tree,
            paths,
            current_url,
            labels=config.site.labels,
            descriptions=config.site.descriptions,
            hide=hide if hide is not None else config.site.hide,
            nohide=nohide if nohide is not None else config.site.nohide,
            start_depth=start_depth if start_depth is not None else 1,
            end_depth=end_depth,
            preserve_order=_preserve_order(preserve_order, config, default=True),
            format_config=config.format_for("nav_tree"),
        )
    )


@cli.command("nav-bar")
@click.argument("paths_file", type=click.File("r"), default="-")
@_common_options
@_filter_options
def nav_bar_command(
    paths_file: TextIO,
    config_path: Path | None,
    current_url: str | None,
    verbose: bool,
    hide: str | None,
    nohide: str | None,
    start_depth: int | None,
    preserve_order: bool | None,
) -> None:
    """Render a multi-level navigation bar around the current URL."""
    config = _load_config(config_path, verbose)
    paths = _read_paths(paths_file)
    _emit(
        _guarded(
            render_nav_bar,
            paths,
            current_url,
            labels=config.site.labels,
            descriptions=config.site.descriptions,
            hide=hide if hide is not None else config.site.hide,
            nohide=nohide if nohide is not None else config.site.nohide,
            start_depth=start_depth if start_depth is not None else 1,
            preserve_order=_preserve_order(preserve_order, config, default=True),
            format_config=config.format_for("nav_bar"),
        )
    )


def _load_config(config_path: Path | None, verbose: bool) -> Config:
    """Configure logging and load configuration, exiting on invalid config.

    Args:
        config_path: Explicit config file, or None to auto-discover
        verbose: Log debug messages

    Returns:
        Loaded configuration
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


def _read_paths(source: TextIO) -> list[str]:
    """Read one path per line, skipping blank lines and # comments."""
    paths: list[str] = []
    for line in source:
        path = line.strip()
        if path and not path.startswith("#"):
            paths.append(path)
    return paths


def _preserve_order(option: bool | None, config: Config, *, default: bool) -> bool:
    if option is not None:
        return option
    if config.site.preserve_order is not None:
        return config.site.preserve_order
    return default


def _guarded(render: Callable[..., str], *args: object, **kwargs: object) -> str:
    """Call a render function, turning invalid input into a CLI error."""
    try:
        return render(*args, **kwargs)
    except (TypeError, ValueError) as e:
        _fail(str(e))


def _emit(html: str) -> None:
    if html:
        click.echo(html)


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
