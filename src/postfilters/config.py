"""Configuration management for postfilters.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

CONFIG_FILENAME = "postfilters.toml"


@dataclass
class SiteConfig:
    """Site-wide values normally found in Jekyll's _config.yml."""

    files_url: str | None = None


@dataclass
class Config:
    """Application configuration."""

    site: SiteConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Read site settings for the CLI.

        An explicit config_path must exist. Without one, the nearest
        postfilters.toml above the working directory is used; when there is
        none, files_url stays unset.

        Raises:
            FileNotFoundError: If config_path is given but missing
            ValueError: If the file is not valid TOML or has wrong value types
        """
        if config_path is None:
            config_path = cls._discover_config()
            if config_path is None:
                return cls(site=SiteConfig())
        elif not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        return cls._load_from_file(config_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Return the closest postfilters.toml in the working directory or an ancestor."""
        cwd = Path.cwd()
        for directory in (cwd, *cwd.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Parse a postfilters.toml file.

        Raises:
            ValueError: If the TOML is malformed or a value has the wrong type
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        site = cls._parse_site(data.get("site"))
        return cls(site=site, config_path=path)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section."""
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        files_url = data.get("files_url")
        if files_url is not None and not isinstance(files_url, str):
            raise ValueError("site.files_url must be a string")

        return SiteConfig(files_url=files_url)

    def with_overrides(self, *, files_url: str | None = None) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config.
        """
        if files_url is None:
            return self
        return replace(self, site=replace(self.site, files_url=files_url))
