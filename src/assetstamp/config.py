"""Configuration management for assetstamp.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from assetstamp.includer import Includer
from assetstamp.resolver import VersionMode

CONFIG_FILENAME = "assetstamp.toml"


@dataclass
class AssetsConfig:
    """Asset directory and URL versioning configuration."""

    base_dir: Path = field(default_factory=lambda: Path("static"))
    mode: VersionMode = VersionMode.QUERY
    url_prefix: str = ""


@dataclass
class Config:
    """Application configuration."""

    assets: AssetsConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for assetstamp.toml in current directory and parents.

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
            return cls(assets=AssetsConfig())

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
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
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        assets = cls._parse_assets(data.get("assets"), path.parent)
        return cls(assets=assets, config_path=path)

    @classmethod
    def _parse_assets(cls, data: object, config_dir: Path) -> AssetsConfig:
        """Parse assets configuration section.

        Args:
            data: Raw assets section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            AssetsConfig instance
        """
        if data is None:
            return AssetsConfig(base_dir=config_dir / "static")

        if not isinstance(data, dict):
            raise ValueError("assets section must be a dictionary")

        base_dir = data.get("base_dir", "static")
        if not isinstance(base_dir, str):
            raise ValueError("assets.base_dir must be a string")

        mode_raw = data.get("mode", "query")
        if not isinstance(mode_raw, str):
            raise ValueError("assets.mode must be a string")
        try:
            mode = VersionMode(mode_raw)
        except ValueError:
            raise ValueError(
                f'assets.mode must be "query" or "filename", got "{mode_raw}"',
            ) from None

        url_prefix = data.get("url_prefix", "")
        if not isinstance(url_prefix, str):
            raise ValueError("assets.url_prefix must be a string")

        return AssetsConfig(
            base_dir=config_dir / base_dir,
            mode=mode,
            url_prefix=url_prefix,
        )

    def with_overrides(
        self,
        *,
        base_dir: Path | None = None,
        mode: VersionMode | None = None,
        url_prefix: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config.

        Returns:
            New Config instance with overrides applied
        """
        assets = replace(
            self.assets,
            base_dir=base_dir if base_dir is not None else self.assets.base_dir,
            mode=mode if mode is not None else self.assets.mode,
            url_prefix=url_prefix if url_prefix is not None else self.assets.url_prefix,
        )
        return replace(self, assets=assets)

    def includer(self) -> Includer:
        """Build an Includer for the configured asset directory."""
        return Includer(
            self.assets.base_dir,
            filename_method=self.assets.mode is VersionMode.FILENAME,
            url_prefix=self.assets.url_prefix,
        )
