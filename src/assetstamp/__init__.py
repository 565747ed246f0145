"""Cache-busted asset URLs and HTML tags for Jinja2 templates."""

from assetstamp.includer import Includer
from assetstamp.resolver import (
    AssetNotFoundError,
    AssetUrlResolver,
    ResolvedAsset,
    VersionMode,
    resolve,
)

__all__ = [
    "AssetNotFoundError",
    "AssetUrlResolver",
    "Includer",
    "ResolvedAsset",
    "VersionMode",
    "resolve",
]
