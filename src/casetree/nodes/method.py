from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence, cast

from casetree.nodes.base import Test
from casetree.parameters import NO_ARGUMENTS
from casetree.results.case import TestCaseResult

if TYPE_CHECKING:
    from casetree.descriptors import MethodInfo
    from casetree.parameters import TestParameters
    from casetree.tnode import TNode

_NO_TESTS: tuple[Test, ...] = ()


class TestMethod(Test):
    """A single test case implemented as a method.

    When *parent_suite* is given, the full name is built from the parent's full
    name instead of the declaring type. This keeps fixture arguments, which only
    the parent knows about, in the case's full name.
    """

    test_type = "TestMethod"

    def __init__(
        self,
        method: MethodInfo,
        parent_suite: Test | None = None,
        *,
        parameters: TestParameters | None = None,
        name: str | None = None,
    ) -> None:
        name = name if name is not None else method.name
        super().__init__(
            name,
            f"{method.type_info.full_name}.{name}",
            type_info=method.type_info,
            method=method,
        )
        if parent_suite is not None:
            self._full_name = f"{parent_suite.full_name}.{self.name}"

        self.parameters = parameters
        if parameters is not None:
            parameters.apply_to_test(self)

    @property
    def test_method(self) -> MethodInfo:
        """The method descriptor; unlike ``Test.method`` it is never None."""
        return cast("MethodInfo", self.method)

    @property
    def method_name(self) -> str:
        return self.test_method.name

    @property
    def arguments(self) -> Sequence[Any]:
        return self.parameters.arguments if self.parameters is not None else NO_ARGUMENTS

    @property
    def has_expected_result(self) -> bool:
        return getattr(self.parameters, "has_expected_result", False)

    @property
    def expected_result(self) -> Any | None:
        return getattr(self.parameters, "expected_result", None)

    @property
    def has_children(self) -> bool:
        return False

    @property
    def tests(self) -> Sequence[Test]:
        return _NO_TESTS

    @property
    def test_case_count(self) -> int:
        return 1

    @property
    def xml_element_name(self) -> str:
        return "test-case"

    def make_result(self) -> TestCaseResult:
        return TestCaseResult(self)

    def add_to_xml(self, parent_node: TNode, recursive: bool) -> TNode:
        this_node = parent_node.add_element(self.xml_element_name)

        self.populate_test_node(this_node, recursive)

        this_node.add_attribute("seed", str(self.seed))

        return this_node
