"""Cache-busted asset URL resolution.

Maps a relative asset path to a URL whose version token is the file's
modification time, so browsers can cache assets indefinitely and still
pick up changes:

    css/app.css  ->  css/app.css?v=1700000000     (query mode)
    css/app.css  ->  css/app.1700000000.css       (filename mode)
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


class VersionMode(StrEnum):
    """Where the version token is placed in the URL."""

    QUERY = "query"
    FILENAME = "filename"


class AssetNotFoundError(FileNotFoundError):
    """Asset does not exist under the base directory.

    Also raised when the asset path points outside the base directory.
    """

    def __init__(self, asset_path: str, base_path: Path) -> None:
        self.asset_path = asset_path
        self.base_path = base_path
        super().__init__(
            f'Unable to locate the asset "{asset_path}" in the "{base_path}" directory.',
        )


@dataclass(frozen=True)
class ResolvedAsset:
    """Asset path split into URL parts plus its modification time."""

    directory: str
    stem: str
    extension: str
    mtime: int

    def url(self, mode: VersionMode) -> str:
        """Build the versioned URL for the given mode.

        Assets without an extension get no trailing dot.
        """
        suffix = f".{self.extension}" if self.extension else ""
        if mode is VersionMode.FILENAME:
            return f"{self.directory}{self.stem}.{self.mtime}{suffix}"
        return f"{self.directory}{self.stem}{suffix}?v={self.mtime}"


def _split_asset_path(asset_path: str) -> tuple[str, str, str]:
    """Split an asset path into (directory, stem, extension).

    The directory is "" for bare filenames, "/" for files at the root and
    otherwise carries a trailing slash. A leading or trailing dot belongs to
    the stem, so "archive." keeps its dot in the URL.
    """
    pure = PurePosixPath(asset_path)
    parent = str(pure.parent)
    if parent == ".":
        directory = ""
    elif parent == "/":
        directory = "/"
    else:
        directory = f"{parent}/"

    head, dot, tail = pure.name.rpartition(".")
    if dot and head and tail:
        return directory, head, tail
    return directory, pure.name, ""


def _locate(base_path: Path, asset_path: str) -> Path:
    """Return the file backing asset_path, or raise AssetNotFoundError."""
    candidate = base_path / asset_path.lstrip("/")

    try:
        inside = candidate.resolve().is_relative_to(base_path.resolve())
        is_file = candidate.is_file()
    except (OSError, ValueError) as e:
        logger.warning(f"Invalid asset path {asset_path!r}: {e}")
        raise AssetNotFoundError(asset_path, base_path) from e

    if not inside:
        logger.warning(f"Asset path escapes base directory: {asset_path}")
        raise AssetNotFoundError(asset_path, base_path)

    if not is_file:
        raise AssetNotFoundError(asset_path, base_path)

    return candidate


def inspect_asset(base_path: str | Path, asset_path: str) -> ResolvedAsset:
    """Locate an asset and split it into URL parts.

    Args:
        base_path: Directory under which assets live
        asset_path: Path relative to base_path (e.g., "css/app.css")

    Returns:
        ResolvedAsset with the file's integer mtime

    Raises:
        AssetNotFoundError: If no file exists at the location or the path
            leaves base_path
    """
    base = Path(base_path)
    file_path = _locate(base, asset_path)
    mtime = int(file_path.stat().st_mtime)
    directory, stem, extension = _split_asset_path(asset_path)
    return ResolvedAsset(
        directory=directory,
        stem=stem,
        extension=extension,
        mtime=mtime,
    )


def resolve(
    base_path: str | Path,
    asset_path: str,
    mode: VersionMode | str = VersionMode.QUERY,
) -> str:
    """Create a cache-busted URL for an asset.

    Args:
        base_path: Directory under which assets live
        asset_path: Path relative to base_path (e.g., "css/app.css")
        mode: "query" appends ?v=<mtime>, "filename" inserts .<mtime>
            before the extension

    Returns:
        Versioned URL relative to the asset root

    Raises:
        AssetNotFoundError: If the asset cannot be located
        ValueError: If mode is not a known version mode
    """
    version_mode = VersionMode(mode)
    asset = inspect_asset(base_path, asset_path)
    url = asset.url(version_mode)
    logger.debug(f"Resolved asset {asset_path} -> {url}")
    return url


class AssetUrlResolver:
    """Resolver bound to one asset directory and version mode."""

    def __init__(
        self,
        base_path: str | Path,
        mode: VersionMode | str = VersionMode.QUERY,
        url_prefix: str = "",
    ) -> None:
        """Initialize resolver.

        Args:
            base_path: Directory under which assets live
            mode: Version token placement
            url_prefix: String prepended to every URL (e.g., "/static/")

        Raises:
            ValueError: If mode is not a known version mode
        """
        self._base_path = Path(base_path)
        self._mode = VersionMode(mode)
        self._url_prefix = url_prefix

    @property
    def base_path(self) -> Path:
        """Asset root directory."""
        return self._base_path

    @property
    def mode(self) -> VersionMode:
        """Version token placement."""
        return self._mode

    def locate(self, asset_path: str) -> Path:
        """Return the filesystem path of an asset.

        Raises:
            AssetNotFoundError: If the asset cannot be located
        """
        return _locate(self._base_path, asset_path)

    def resolve(self, asset_path: str) -> str:
        """Return the versioned URL for an asset, with url_prefix applied."""
        return self._url_prefix + resolve(self._base_path, asset_path, self._mode)
