"""Abstract test node shared by test cases and suites."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence

from casetree.parameters import NO_ARGUMENTS
from casetree.properties import PropertyBag
from casetree.randomizer import Randomizer
from casetree.states import RunState
from casetree.tnode import TNode

if TYPE_CHECKING:
    from casetree.descriptors import MethodInfo, TypeInfo
    from casetree.results.base import TestResult

_next_id = itertools.count(1000)


class Test(ABC):
    """A node in the test tree.

    Identity (``id``, ``name``, ``full_name``, ``seed``) is fixed when the node
    is constructed. Subclasses decide whether they hold children, what result
    type they produce and how they render themselves.
    """

    __test__ = False

    # Prepended to every generated id, e.g. to keep ids unique across runs.
    id_prefix: str = ""

    test_type: str = "Test"

    def __init__(
        self,
        name: str,
        full_name: str | None = None,
        *,
        type_info: TypeInfo | None = None,
        method: MethodInfo | None = None,
    ) -> None:
        self._id = f"{self.id_prefix}{next(_next_id)}"
        self._name = name
        self._full_name = full_name if full_name is not None else name
        self._seed = Randomizer.random_seed()
        self.type_info = type_info
        self.method = method
        self.run_state = RunState.RUNNABLE
        self.properties = PropertyBag()
        self.parent: Test | None = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def class_name(self) -> str | None:
        return self.type_info.full_name if self.type_info is not None else None

    @property
    def method_name(self) -> str | None:
        return None

    @property
    def arguments(self) -> Sequence[Any]:
        return NO_ARGUMENTS

    @property
    @abstractmethod
    def has_children(self) -> bool: ...

    @property
    @abstractmethod
    def tests(self) -> Sequence[Test]: ...

    @property
    @abstractmethod
    def test_case_count(self) -> int: ...

    @property
    @abstractmethod
    def xml_element_name(self) -> str: ...

    @abstractmethod
    def make_result(self) -> TestResult:
        """Return a fresh, unpopulated result for this node."""
        ...

    @abstractmethod
    def add_to_xml(self, parent_node: TNode, recursive: bool) -> TNode:
        """Render this node as a new child of *parent_node* and return it."""
        ...

    def to_xml(self, recursive: bool = True) -> TNode:
        return self.add_to_xml(TNode("dummy"), recursive)

    def populate_test_node(self, this_node: TNode, recursive: bool) -> None:
        this_node.add_attribute("id", self.id)
        this_node.add_attribute("name", self.name)
        this_node.add_attribute("fullname", self.full_name)
        if self.method_name is not None:
            this_node.add_attribute("methodname", self.method_name)
        if self.class_name is not None:
            this_node.add_attribute("classname", self.class_name)
        this_node.add_attribute("runstate", self.run_state.value)

        if len(self.properties) > 0:
            self.properties.add_to_xml(this_node, recursive)

    def __lt__(self, other: Test) -> bool:
        return self.full_name < other.full_name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.full_name!r} id={self.id}>"
