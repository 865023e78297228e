"""Document tree and renderers.

The XML emitters build a small attributed tree of `Element` nodes wrapped in
an `XmlDocument`; `render_xml` turns it into markup. Unlike
`xml.etree.ElementTree`, the tree keeps namespace prefixes literally
(`media:group`, `atom:link`), preserves attribute insertion order, and can
mark text as CDATA, which is what feed readers expect for HTML payloads.

The JSON emitter produces a plain dict, rendered by `render_json`.

Example:
    >>> from feedscribe.document import Element, XmlDocument, render_xml
    >>> root = Element("rss", {"version": "2.0"})
    >>> channel = root.add("channel")
    >>> _ = channel.add("title", "A & B")
    >>> _ = channel.add("description", "<p>hi</p>", cdata=True)
    >>> print(render_xml(XmlDocument(root)))
    <?xml version="1.0" encoding="utf-8"?>
    <rss version="2.0">
        <channel>
            <title>A &amp; B</title>
            <description><![CDATA[<p>hi</p>]]></description>
        </channel>
    </rss>
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any
from xml.sax.saxutils import escape

from feedscribe.core.exceptions import RenderError

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
DEFAULT_XML_INDENT = "    "
DEFAULT_JSON_INDENT = 4

_ATTR_ENTITIES = {'"': "&quot;", "'": "&apos;"}

JsonDocument = dict[str, Any]


@dataclass
class Element:
    """XML element with ordered attributes.

    `text` is written escaped, or verbatim inside a CDATA section when
    `cdata` is set. Attributes whose value is None are not written.
    """

    name: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    text: str | None = None
    cdata: bool = False

    def add(
        self,
        name: str,
        text: Any = None,
        attrs: dict[str, Any] | None = None,
        *,
        cdata: bool = False,
    ) -> Element:
        """Create a child element, append it and return it."""
        child = Element(
            name,
            dict(attrs or {}),
            text=None if text is None else str(text),
            cdata=cdata,
        )
        self.children.append(child)
        return child

    def append(self, child: Element) -> Element:
        self.children.append(child)
        return child

    def extend(self, children: Iterable[Element]) -> None:
        self.children.extend(children)

    def find(self, name: str) -> Element | None:
        """First direct child with the given name."""
        return next((c for c in self.children if c.name == name), None)

    def findall(self, name: str) -> list[Element]:
        """All direct children with the given name, in document order."""
        return [c for c in self.children if c.name == name]

    def iter(self, name: str | None = None) -> Iterator[Element]:
        """Depth-first walk over this element and its descendants."""
        if name is None or self.name == name:
            yield self
        for child in self.children:
            yield from child.iter(name)


@dataclass
class XmlDocument:
    """Root element of an XML feed document."""

    root: Element

    def to_string(self, indent: str = DEFAULT_XML_INDENT) -> str:
        return render_xml(self, indent=indent)


def format_attr_value(value: Any) -> str:
    """Attribute value as text: booleans are lowercase, the rest `str()`."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _start_tag(element: Element) -> str:
    parts = [element.name]
    for key, value in element.attrs.items():
        if value is None:
            continue
        parts.append(f'{key}="{escape(format_attr_value(value), _ATTR_ENTITIES)}"')
    return "<" + " ".join(parts)


def _body(element: Element) -> str:
    if element.text is None:
        return ""
    if element.cdata:
        # "]]>" cannot appear inside a CDATA section; split it across two.
        return "<![CDATA[" + element.text.replace("]]>", "]]]]><![CDATA[>") + "]]>"
    return escape(element.text)


def _write(element: Element, depth: int, indent: str, lines: list[str]) -> None:
    pad = indent * depth
    start = _start_tag(element)
    if not element.children:
        if element.text is None:
            lines.append(f"{pad}{start}/>")
        else:
            lines.append(f"{pad}{start}>{_body(element)}</{element.name}>")
        return

    lines.append(f"{pad}{start}>{_body(element)}")
    for child in element.children:
        _write(child, depth + 1, indent, lines)
    lines.append(f"{pad}</{element.name}>")


def render_xml(document: XmlDocument, *, indent: str = DEFAULT_XML_INDENT) -> str:
    """Serialize an XML document, declaration first.

    Args:
        document: Document to serialize.
        indent: Indent unit per nesting level. An empty string writes the
            tree on a single line.

    Returns:
        UTF-8 ready markup text.
    """
    lines: list[str] = []
    _write(document.root, 0, indent, lines)
    separator = "\n" if indent else ""
    return XML_DECLARATION + "\n" + separator.join(lines)


def render_json(document: JsonDocument, *, indent: int = DEFAULT_JSON_INDENT) -> str:
    """Serialize a JSON Feed document.

    Raises:
        RenderError: If the document holds values JSON cannot represent,
            typically an extension payload supplied by the caller.
    """
    try:
        return json.dumps(document, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.debug(f"JSON serialization failed: {e}")
        raise RenderError(
            f"Feed document is not JSON serializable: {e}",
            format="json1",
            cause=e,
        ) from e
