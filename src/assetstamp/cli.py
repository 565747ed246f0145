"""CLI interface for assetstamp.

Command-line tool for printing cache-busted asset URLs and tags.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from assetstamp.config import Config
from assetstamp.resolver import VersionMode

TAG_KINDS = ("css", "preload-css", "js", "inline-css", "inline-js")

_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover assetstamp.toml)",
)
_base_dir_option = click.option(
    "--base-dir",
    "-b",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Asset directory (overrides config)",
)
_mode_option = click.option(
    "--mode",
    "-m",
    type=click.Choice([m.value for m in VersionMode]),
    default=None,
    help="Version token placement (overrides config, default: query)",
)
_prefix_option = click.option(
    "--prefix",
    default=None,
    help="URL prefix, e.g. /static/ (overrides config)",
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)


@click.group()
def cli() -> None:
    """assetstamp - cache-busted asset URLs and tags."""


def _load_config(
    config_path: Path | None,
    base_dir: Path | None,
    mode: str | None,
    prefix: str | None,
    verbose: bool,
) -> Config:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    config = Config.load(config_path)
    return config.with_overrides(
        base_dir=base_dir,
        mode=VersionMode(mode) if mode is not None else None,
        url_prefix=prefix,
    )


def _parse_attrs(raw: tuple[str, ...]) -> dict[str | int, object]:
    """Parse KEY=VALUE pairs; a bare KEY becomes a valueless attribute."""
    attrs: dict[str | int, object] = {}
    for item in raw:
        key, sep, value = item.partition("=")
        if not key:
            raise click.BadParameter(f"Invalid attribute: {item!r}", param_hint="--attr")
        attrs[key] = value if sep else None
    return attrs


def _fail(error: Exception) -> NoReturn:
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    sys.exit(1)


@cli.command()
@click.argument("asset")
@_config_option
@_base_dir_option
@_mode_option
@_prefix_option
@_verbose_option
def url(
    asset: str,
    config_path: Path | None,
    base_dir: Path | None,
    mode: str | None,
    prefix: str | None,
    verbose: bool,
) -> None:
    """Print the cache-busted URL of ASSET."""
    try:
        config = _load_config(config_path, base_dir, mode, prefix, verbose)
        click.echo(config.includer().asset_url(asset))
    except (FileNotFoundError, ValueError) as e:
        _fail(e)


@cli.command()
@click.argument("kind", type=click.Choice(TAG_KINDS))
@click.argument("asset")
@click.option(
    "--attr",
    "-a",
    "raw_attrs",
    multiple=True,
    help="Tag attribute as KEY=VALUE, or KEY alone (repeatable)",
)
@_config_option
@_base_dir_option
@_mode_option
@_prefix_option
@_verbose_option
def tag(
    kind: str,
    asset: str,
    raw_attrs: tuple[str, ...],
    config_path: Path | None,
    base_dir: Path | None,
    mode: str | None,
    prefix: str | None,
    verbose: bool,
) -> None:
    """Print an HTML tag for ASSET.

    KIND selects the tag: css, preload-css, js, inline-css or inline-js.
    """
    attrs = _parse_attrs(raw_attrs)
    if attrs and kind.startswith("inline-"):
        raise click.UsageError("Inline tags do not take attributes")

    try:
        includer = _load_config(config_path, base_dir, mode, prefix, verbose).includer()
        if kind == "css":
            output = includer.link_css(asset, attrs)
        elif kind == "preload-css":
            output = includer.preload_css(asset, attrs)
        elif kind == "js":
            output = includer.link_js(asset, attrs)
        elif kind == "inline-css":
            output = includer.inline_css(asset)
        else:
            output = includer.inline_js(asset)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)

    click.echo(output)


if __name__ == "__main__":
    cli()
