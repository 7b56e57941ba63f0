"""Lightweight XML-shaped document tree used for reporting.

``TNode`` knows nothing about tests or results: it is an element name, an
optional text value, a dict of string attributes and an ordered list of child
nodes. Nodes and results render themselves into it; consumers either walk the
tree directly or take its ``outer_xml``.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterator
from xml.sax.saxutils import escape, quoteattr

# Characters outside the XML 1.0 Char production.
_VALID_RANGES = [(0x20, 0xD7FF), (0xE000, 0xFFFD), (0x10000, 0x10FFFF)]
_INVALID_XML_CHARS = re.compile(
    "[^\t\n\r" + "".join(f"{chr(lo)}-{chr(hi)}" for lo, hi in _VALID_RANGES) + "]"
)
_FILTER = re.compile(r"^(?P<name>[^\[\]]+)(?:\[@(?P<attr>[\w\-]+)=(?P<quote>['\"])(?P<value>.*?)(?P=quote)\])?$")


def escape_invalid_xml_characters(text: str) -> str:
    """Replace characters XML cannot carry with a ``\\uXXXX`` spelling."""
    return _INVALID_XML_CHARS.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


class TNode:
    def __init__(self, name: str, value: str | None = None, value_is_cdata: bool = False) -> None:
        self.name = name
        self.value = escape_invalid_xml_characters(value) if value is not None else None
        self.value_is_cdata = value_is_cdata
        self.attributes: dict[str, str] = {}
        self.child_nodes: list[TNode] = []

    @classmethod
    def from_xml(cls, text: str) -> TNode:
        """Parse an XML fragment into a TNode tree.

        Raises ValueError if *text* is not well-formed.
        """
        try:
            element = ET.fromstring(text)
        except ET.ParseError as e:
            raise ValueError(f"Invalid XML: {e}") from e
        return cls._from_element(element)

    @classmethod
    def _from_element(cls, element: ET.Element) -> TNode:
        text = element.text
        if text is not None and not text.strip() and len(element):
            text = None
        node = cls(element.tag, text)
        for key, value in element.attrib.items():
            node.add_attribute(key, value)
        for child in element:
            node.child_nodes.append(cls._from_element(child))
        return node

    @property
    def first_child(self) -> TNode | None:
        return self.child_nodes[0] if self.child_nodes else None

    def add_element(self, name: str, value: str | None = None) -> TNode:
        """Create a child element, append it and return it."""
        child = TNode(name, value)
        self.child_nodes.append(child)
        return child

    def add_element_with_cdata(self, name: str, value: str) -> TNode:
        child = TNode(name, value, value_is_cdata=True)
        self.child_nodes.append(child)
        return child

    def add_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = escape_invalid_xml_characters(value)

    def select_single_node(self, path: str) -> TNode | None:
        return next(self._select(path), None)

    def select_nodes(self, path: str) -> list[TNode]:
        """Return descendants matching a ``a/b[@attr='v']`` style path."""
        return list(self._select(path))

    def _select(self, path: str) -> Iterator[TNode]:
        steps = [step for step in path.split("/") if step]
        current: list[TNode] = [self]
        for step in steps:
            match = _FILTER.match(step)
            if match is None:
                raise ValueError(f"Unsupported path step: '{step}'")
            name, attr, value = match.group("name"), match.group("attr"), match.group("value")
            current = [
                child
                for node in current
                for child in node.child_nodes
                if (name == "*" or child.name == name)
                and (attr is None or child.attributes.get(attr) == value)
            ]
        return iter(current)

    @property
    def outer_xml(self) -> str:
        parts: list[str] = []
        self._write(parts)
        return "".join(parts)

    def _write(self, parts: list[str]) -> None:
        parts.append(f"<{self.name}")
        for key, value in self.attributes.items():
            parts.append(f" {key}={quoteattr(value)}")
        if self.value is None and not self.child_nodes:
            parts.append(" />")
            return
        parts.append(">")
        if self.value is not None:
            if self.value_is_cdata:
                # "]]>" cannot appear inside a CDATA section; split it across two.
                parts.append("<![CDATA[" + self.value.replace("]]>", "]]]]><![CDATA[>") + "]]>")
            else:
                parts.append(escape(self.value))
        for child in self.child_nodes:
            child._write(parts)
        parts.append(f"</{self.name}>")

    def __repr__(self) -> str:
        return f"TNode({self.name!r}, attributes={self.attributes!r}, children={len(self.child_nodes)})"
