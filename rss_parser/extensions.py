"""Extension namespace resolvers (Atom, Dublin Core)."""

from collections.abc import Callable
from enum import Enum
from xml.etree.ElementTree import Element


class Namespace(str, Enum):
    """Supported extension namespace URIs."""

    ATOM = "http://www.w3.org/2005/Atom"
    DUBLIN_CORE = "http://purl.org/dc/elements/1.1/"


Resolver = Callable[[Element], str | None]


def split_tag(tag: str) -> tuple[str | None, str]:
    """Split an ElementTree tag into (namespace URI, local name).

    ElementTree spells namespaced tags as ``{uri}local``; tags without a
    namespace come back with ``None`` as the URI.
    """
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return None, tag


def resolve_atom(element: Element) -> str | None:
    """Return the href of an Atom link element."""
    return element.get("href")


def resolve_dublin_core(element: Element) -> str | None:
    """Return the text of a Dublin Core element (e.g. dc:creator)."""
    return element.text


RESOLVERS: dict[Namespace, Resolver] = {
    Namespace.ATOM: resolve_atom,
    Namespace.DUBLIN_CORE: resolve_dublin_core,
}


def resolve(namespace: Namespace, element: Element) -> str | None:
    """Extract the value of ``element`` using the resolver for ``namespace``."""
    return RESOLVERS[namespace](element)
