"""Configuration management for navlinks.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from navlinks.format import FIELD_NAMES, VIEWS, FormatConfig

CONFIG_FILENAME = "navlinks.toml"


@dataclass
class SiteConfig:
    """Site-wide link settings."""

    hide: str | None = None
    nohide: str | None = None
    preserve_order: bool | None = None
    labels: dict[str, str] = field(default_factory=dict)
    descriptions: dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Application configuration."""

    site: SiteConfig
    format: dict[str, str] = field(default_factory=dict)
    views: dict[str, dict[str, str]] = field(default_factory=dict)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for navlinks.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(site=SiteConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        site = cls._parse_site(data.get("site"))
        format_options, views = cls._parse_format(data.get("format"))

        return cls(
            site=site,
            format=format_options,
            views=views,
            config_path=path,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        hide = data.get("hide")
        if hide is not None and not isinstance(hide, str):
            raise ValueError("site.hide must be a string")

        nohide = data.get("nohide")
        if nohide is not None and not isinstance(nohide, str):
            raise ValueError("site.nohide must be a string")

        preserve_order = data.get("preserve_order")
        if preserve_order is not None and not isinstance(preserve_order, bool):
            raise ValueError("site.preserve_order must be a boolean")

        labels = cls._parse_string_table(data.get("labels"), "site.labels")
        descriptions = cls._parse_string_table(data.get("descriptions"), "site.descriptions")

        return SiteConfig(
            hide=hide,
            nohide=nohide,
            preserve_order=preserve_order,
            labels=labels,
            descriptions=descriptions,
        )

    @classmethod
    def _parse_format(cls, data: object) -> tuple[dict[str, str], dict[str, dict[str, str]]]:
        """Parse format section and its per-view subsections.

        Args:
            data: Raw format section data

        Returns:
            Tuple of (options for every view, options keyed by view)
        """
        if data is None:
            return {}, {}

        if not isinstance(data, dict):
            raise ValueError("format section must be a dictionary")

        options: dict[str, str] = {}
        views: dict[str, dict[str, str]] = {}
        for key, value in data.items():
            if isinstance(value, dict):
                if key not in VIEWS:
                    raise ValueError(f"format.{key} is not a known view")
                views[key] = cls._parse_format_options(value, f"format.{key}")
            else:
                options.update(cls._parse_format_options({key: value}, "format"))
        return options, views

    @classmethod
    def _parse_format_options(cls, data: dict[str, object], section: str) -> dict[str, str]:
        options: dict[str, str] = {}
        for key, value in data.items():
            if key not in FIELD_NAMES:
                raise ValueError(f"{section}.{key} is not a known format option")
            if not isinstance(value, str):
                raise ValueError(f"{section}.{key} must be a string")
            options[key] = value
        return options

    @classmethod
    def _parse_string_table(cls, data: object, section: str) -> dict[str, str]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{section} must be a dictionary")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ValueError(f"{section}.{key} must be a string")
        return dict(data)

    def format_for(self, view: str) -> FormatConfig:
        """Resolve formatting for a view.

        The view's preset is overridden by [format], then by [format.<view>].

        Args:
            view: One of navlinks.format.VIEWS

        Returns:
            FormatConfig for the view

        Raises:
            ValueError: If view is unknown
        """
        preset = FormatConfig.preset(view)
        overrides = {**self.format, **self.views.get(view, {})}
        return preset.with_overrides(**overrides)
