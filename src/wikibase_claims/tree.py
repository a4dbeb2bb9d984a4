"""Generic tree interface consumed by the decoders.

The Wikibase API's XML output is a direct projection of its JSON output:
scalar members become attributes, object members become child elements and
list members become repeated child elements. Decoders only rely on the
``Node`` protocol below, so the same code reads either shape.
"""

import xml.etree.ElementTree as ET
from typing import Any, Iterator, Optional, Protocol

from wikibase_claims.exceptions import MalformedValue, UnexpectedNodeShape


class Node(Protocol):
    """Interface for a parsed tree node."""

    @property
    def name(self) -> str:
        ...

    def get(self, attribute: str) -> Optional[str]:
        """Return the attribute value, or None when the attribute is absent."""
        ...

    def children(self) -> Iterator["Node"]:
        """Iterate over child elements in document order."""
        ...


class ElementNode:
    """Node backed by an ``xml.etree.ElementTree`` element."""

    def __init__(self, element: ET.Element):
        self.element = element

    @property
    def name(self) -> str:
        return self.element.tag

    def get(self, attribute: str) -> Optional[str]:
        return self.element.get(attribute)

    def children(self) -> Iterator["ElementNode"]:
        for child in self.element:
            yield ElementNode(child)

    def __repr__(self) -> str:
        return f"ElementNode({self.name!r})"


# JSON members keyed by property id, and the element name XML gives each entry
# below its <property id="..."> wrapper.
PROPERTY_KEYED_MEMBERS = {"claims": "claim", "qualifiers": "qualifiers", "snaks": "snak"}

# JSON list members that XML wraps in one element, and the element name of each entry.
WRAPPED_LIST_MEMBERS = {"references": "reference"}


class WireNode:
    """Node backed by a decoded wire (JSON) object.

    Property-keyed maps (``{"P10": [...]}``) are read as ``<property id="P10">``
    children and ``references`` as one node holding a ``reference`` child per
    group, so a claim reads the same as its XML form.
    """

    def __init__(self, name: str, data: Any, property_keyed: Optional[bool] = None):
        self._name = name
        self.data = data
        if property_keyed is None:
            property_keyed = name in PROPERTY_KEYED_MEMBERS
        self.property_keyed = property_keyed

    @property
    def name(self) -> str:
        return self._name

    def get(self, attribute: str) -> Optional[str]:
        if not isinstance(self.data, dict):
            return None
        value = self.data.get(attribute)
        if value is None or isinstance(value, (dict, list)):
            return None
        if isinstance(value, bool):
            return "1" if value else "0"
        return str(value)

    def children(self) -> Iterator["WireNode"]:
        if not isinstance(self.data, dict):
            return
        if self.property_keyed:
            entry_name = PROPERTY_KEYED_MEMBERS.get(self._name, self._name)
            for property_id, entries in self.data.items():
                yield WireNode("property", {"id": property_id, entry_name: entries}, property_keyed=False)
            return
        for key, value in self.data.items():
            if isinstance(value, dict):
                yield WireNode(key, value, property_keyed=key in PROPERTY_KEYED_MEMBERS)
            elif isinstance(value, list):
                if key in WRAPPED_LIST_MEMBERS:
                    yield WireNode(key, {WRAPPED_LIST_MEMBERS[key]: value}, property_keyed=False)
                    continue
                for item in value:
                    yield WireNode(key, item, property_keyed=False)

    def __repr__(self) -> str:
        return f"WireNode({self.name!r})"


def parse_xml(text: str) -> ElementNode:
    return ElementNode(ET.fromstring(text))


def first_child(node: Node) -> Optional[Node]:
    return next(iter(node.children()), None)


def find_child(node: Node, name: str) -> Optional[Node]:
    for child in node.children():
        if child.name == name:
            return child
    return None


def children_named(node: Node, name: str) -> Iterator[Node]:
    return (child for child in node.children() if child.name == name)


def require_attribute(node: Node, attribute: str) -> str:
    value = node.get(attribute)
    if value is None:
        raise MalformedValue(f"<{node.name}> is missing required attribute '{attribute}'")
    return value


def expect_name(node: Node, name: str) -> None:
    if node.name != name:
        raise UnexpectedNodeShape(f"Expected <{name}> node, got <{node.name}>")
