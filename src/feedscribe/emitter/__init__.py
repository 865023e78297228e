"""Format emitters.

Each emitter maps the data model onto one wire format:

- `render_rss2` -> `XmlDocument` rooted at `<rss version="2.0">`
- `render_atom1` -> `XmlDocument` rooted at `<feed>`
- `render_json1` -> JSON Feed 1.0 dict

Example:
    >>> from feedscribe.emitter import render_atom1, render_json1, render_rss2
    >>> callable(render_rss2) and callable(render_atom1) and callable(render_json1)
    True
"""

from feedscribe.emitter.atom1 import render_atom1
from feedscribe.emitter.json1 import render_json1
from feedscribe.emitter.media import MediaBlock, build_media_block
from feedscribe.emitter.namespaces import Namespace, Namespaces
from feedscribe.emitter.rss2 import render_rss2, select_author

__all__ = [
    "MediaBlock",
    "Namespace",
    "Namespaces",
    "build_media_block",
    "render_atom1",
    "render_json1",
    "render_rss2",
    "select_author",
]
