"""Jinja2 extension exposing asset helpers to templates.

Usage:
    env = Environment(loader=..., autoescape=True)
    Includer("static").register(env)

    {{ link_css("css/app.css") }}
    {{ link_js("js/app.js", {"defer": none}) }}
"""

import logging
from collections.abc import Callable
from pathlib import Path

from jinja2 import Environment
from markupsafe import Markup

from assetstamp.resolver import AssetUrlResolver, VersionMode
from assetstamp.tags import (
    Attrs,
    inline_script,
    inline_style,
    link_tag,
    script_tag,
)

logger = logging.getLogger(__name__)

PRELOAD_CSS_ATTRS: dict[str | int, object] = {
    "rel": "preload",
    "as": "style",
    "onload": "this.onload=null;this.rel='stylesheet'",
}


class Includer:
    """Asset URL and tag helpers bound to one asset directory."""

    def __init__(
        self,
        path: str | Path,
        filename_method: bool = False,
        url_prefix: str = "",
    ) -> None:
        """Initialize includer.

        Args:
            path: Directory containing the assets
            filename_method: Embed the version in the filename instead of
                a query parameter
            url_prefix: String prepended to every generated URL
        """
        mode = VersionMode.FILENAME if filename_method else VersionMode.QUERY
        self._resolver = AssetUrlResolver(path, mode=mode, url_prefix=url_prefix)

    @property
    def resolver(self) -> AssetUrlResolver:
        """Underlying URL resolver."""
        return self._resolver

    def asset_url(self, url: str) -> str:
        """Return the cache-busted URL for an asset."""
        return self._resolver.resolve(url)

    def link_css(self, url: str, attrs: Attrs | None = None) -> Markup:
        """Return a stylesheet ``<link>`` tag.

        Adds ``rel="stylesheet"`` unless attrs supply a rel.
        """
        merged: dict[str | int, object] = {}
        if not attrs or "rel" not in attrs:
            merged["rel"] = "stylesheet"
        if attrs:
            merged.update(attrs)
        return Markup(link_tag(self.asset_url(url), merged))

    def preload_css(self, url: str, attrs: Attrs | None = None) -> Markup:
        """Return a ``<link rel="preload">`` that switches to a stylesheet on load."""
        merged = dict(PRELOAD_CSS_ATTRS)
        if attrs:
            merged.update(attrs)
        return self.link_css(url, merged)

    def link_js(self, url: str, attrs: Attrs | None = None) -> Markup:
        """Return an external ``<script>`` tag."""
        return Markup(script_tag(self.asset_url(url), attrs))

    def inline_css(self, url: str) -> Markup:
        """Return the stylesheet contents inside a ``<style>`` block."""
        return Markup(inline_style(self._read(url)))

    def inline_js(self, url: str) -> Markup:
        """Return the script contents inside a ``<script>`` block."""
        return Markup(inline_script(self._read(url)))

    def _read(self, url: str) -> str:
        file_path = self._resolver.locate(url)
        logger.debug(f"Inlining asset {file_path}")
        return file_path.read_bytes().decode("utf-8")

    def functions(self) -> dict[str, Callable[..., str]]:
        """Template function names mapped to their implementations."""
        return {
            "asset_url": self.asset_url,
            "link_css": self.link_css,
            "link_js": self.link_js,
            "inline_css": self.inline_css,
            "inline_js": self.inline_js,
            "preload_css": self.preload_css,
        }

    def register(self, env: Environment) -> None:
        """Install the template functions as globals of a Jinja2 environment."""
        env.globals.update(self.functions())
