"""HTML tag builders for stylesheet and script assets.

Attribute values are JSON-quoted, not HTML-escaped. Only pass trusted
values.
"""

import json
from collections.abc import Mapping

Attrs = Mapping[str | int, object]


def serialize_attrs(attrs: Attrs | None) -> str:
    """Render an attribute mapping as a space-separated string.

    Rules, per entry:
        - None value renders the bare key (``disabled``)
        - integer key renders the value as a standalone token
        - otherwise ``key="value"`` with the JSON-encoded value

    Args:
        attrs: Attribute mapping, rendered in insertion order

    Returns:
        Attribute string without leading or trailing whitespace
    """
    if not attrs:
        return ""

    parts: list[str] = []
    for key, value in attrs.items():
        if value is None:
            parts.append(str(key))
        elif isinstance(key, int):
            parts.append(str(value))
        else:
            encoded = json.dumps(value, ensure_ascii=False)
            if isinstance(value, str):
                encoded = encoded[1:-1]
            parts.append(f'{key}="{encoded}"')
    return " ".join(parts)


def _open_tag(name: str, attrs: Attrs | None, trailing: str) -> str:
    attr_string = serialize_attrs(attrs)
    if attr_string:
        return f"<{name} {attr_string} {trailing}>"
    return f"<{name} {trailing}>"


def link_tag(url: str, attrs: Attrs | None = None) -> str:
    """Build a ``<link>`` tag pointing at url."""
    return _open_tag("link", attrs, f'href="{url}"')


def script_tag(url: str, attrs: Attrs | None = None) -> str:
    """Build an external ``<script>`` tag pointing at url."""
    return _open_tag("script", attrs, f'type="text/javascript" src="{url}"') + "</script>"


def inline_style(contents: str) -> str:
    """Wrap stylesheet contents in a ``<style>`` block."""
    return f'<style type="text/css">\n    {contents}\n</style>'


def inline_script(contents: str) -> str:
    """Wrap script contents in a ``<script>`` block."""
    return f'<script type="text/javascript">\n    {contents}\n</script>'
