"""Optional XML namespaces and the accumulator that tracks their use.

Emitters return a `Namespaces` value alongside every fragment they build and
merge them explicitly; the root element declares exactly the namespaces that
end up in the merged value.

Example:
    >>> from feedscribe.emitter.namespaces import Namespace, Namespaces
    >>> used = Namespaces.of(Namespace.MEDIA) | Namespaces.of(Namespace.DC)
    >>> used.declarations()
    {'xmlns:dc': 'http://purl.org/dc/elements/1.1/', 'xmlns:media': 'http://search.yahoo.com/mrss/'}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Namespace(str, Enum):
    """Optional namespaces an RSS 2.0 document may declare, by prefix."""

    ATOM = "atom"
    CONTENT = "content"
    DC = "dc"
    MEDIA = "media"

    @property
    def uri(self) -> str:
        return NAMESPACE_URIS[self]


NAMESPACE_URIS: dict[Namespace, str] = {
    Namespace.ATOM: "http://www.w3.org/2005/Atom",
    Namespace.CONTENT: "http://purl.org/rss/1.0/modules/content/",
    Namespace.DC: "http://purl.org/dc/elements/1.1/",
    Namespace.MEDIA: "http://search.yahoo.com/mrss/",
}


@dataclass(frozen=True)
class Namespaces:
    """Immutable set of namespaces used by a fragment."""

    used: frozenset[Namespace] = field(default_factory=frozenset)

    @classmethod
    def of(cls, *namespaces: Namespace) -> Namespaces:
        return cls(frozenset(namespaces))

    def __or__(self, other: Namespaces) -> Namespaces:
        return Namespaces(self.used | other.used)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self.used

    def __bool__(self) -> bool:
        return bool(self.used)

    def declarations(self) -> dict[str, str]:
        """`xmlns:<prefix>` attributes for the used namespaces, sorted by key."""
        attrs = {f"xmlns:{ns.value}": ns.uri for ns in self.used}
        return dict(sorted(attrs.items()))
