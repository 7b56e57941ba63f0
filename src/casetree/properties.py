"""Multi-valued metadata attached to test nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from casetree.tnode import TNode


class PropertyNames:
    DESCRIPTION = "Description"
    CATEGORY = "Category"
    SKIP_REASON = "_SKIPREASON"


class PropertyBag:
    """Ordered mapping of property name to a list of values."""

    def __init__(self) -> None:
        self._inner: dict[str, list[Any]] = {}

    def add(self, key: str, value: Any) -> None:
        self._inner.setdefault(key, []).append(value)

    def set(self, key: str, value: Any) -> None:
        self._inner[key] = [value]

    def get(self, key: str) -> Any | None:
        """Return the first value stored under *key*, or None."""
        values = self._inner.get(key)
        return values[0] if values else None

    def __getitem__(self, key: str) -> list[Any]:
        return list(self._inner.get(key, []))

    def __contains__(self, key: object) -> bool:
        return key in self._inner

    def __iter__(self) -> Iterator[str]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def add_to_xml(self, parent_node: TNode, recursive: bool) -> TNode:
        properties = parent_node.add_element("properties")
        for key, values in self._inner.items():
            for value in values:
                prop = properties.add_element("property")
                prop.add_attribute("name", key)
                prop.add_attribute("value", str(value))
        return properties
