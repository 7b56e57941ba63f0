"""Composite nodes: suites, fixtures and parameterized groupings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from casetree.naming import TestNameGenerator
from casetree.nodes.base import Test
from casetree.parameters import NO_ARGUMENTS
from casetree.randomizer import Randomizer
from casetree.results.suite import TestSuiteResult

if TYPE_CHECKING:
    from casetree.descriptors import MethodInfo, TypeInfo
    from casetree.parameters import TestParameters
    from casetree.tnode import TNode


class TestSuite(Test):
    """A node that groups other nodes."""

    test_type = "TestSuite"

    def __init__(
        self,
        name: str,
        full_name: str | None = None,
        *,
        parent_suite: Test | None = None,
        parameters: TestParameters | None = None,
        type_info: TypeInfo | None = None,
        method: MethodInfo | None = None,
    ) -> None:
        if full_name is None and parent_suite is not None:
            full_name = f"{parent_suite.full_name}.{name}"
        super().__init__(name, full_name, type_info=type_info, method=method)
        self._tests: list[Test] = []
        self.maintain_test_order = False
        self.parameters = parameters
        if parameters is not None:
            parameters.apply_to_test(self)

    @property
    def arguments(self) -> Sequence[Any]:
        return self.parameters.arguments if self.parameters is not None else NO_ARGUMENTS

    def add(self, test: Test) -> None:
        test.parent = self
        self._tests.append(test)

    def sort(self) -> None:
        """Order children by full name unless the suite keeps declaration order."""
        if not self.maintain_test_order:
            self._tests.sort(key=lambda t: t.full_name)

    def shuffle(self, randomizer: Randomizer | None = None) -> None:
        """Reorder children pseudo-randomly; the suite's seed is used by default."""
        randomizer = randomizer or Randomizer(self.seed)
        self._tests = randomizer.shuffle(self._tests)

    @property
    def has_children(self) -> bool:
        return len(self._tests) > 0

    @property
    def tests(self) -> Sequence[Test]:
        return tuple(self._tests)

    @property
    def test_case_count(self) -> int:
        return sum(test.test_case_count for test in self._tests)

    @property
    def xml_element_name(self) -> str:
        return "test-suite"

    def make_result(self) -> TestSuiteResult:
        return TestSuiteResult(self)

    def add_to_xml(self, parent_node: TNode, recursive: bool) -> TNode:
        this_node = parent_node.add_element(self.xml_element_name)
        this_node.add_attribute("type", self.test_type)

        self.populate_test_node(this_node, recursive)
        this_node.add_attribute("testcasecount", str(self.test_case_count))

        if recursive:
            for test in self._tests:
                test.add_to_xml(this_node, recursive)

        return this_node


class TestFixture(TestSuite):
    """Suite bound to a class, optionally instantiated with fixture arguments.

    Fixture arguments become part of the name: ``Calculator(1,2)``.
    """

    test_type = "TestFixture"

    def __init__(
        self,
        type_info: TypeInfo,
        parameters: TestParameters | None = None,
        *,
        name_generator: TestNameGenerator | None = None,
    ) -> None:
        name = type_info.name
        if parameters is not None and parameters.test_name:
            name = parameters.test_name
        elif parameters is not None and parameters.original_arguments:
            generator = name_generator or TestNameGenerator()
            name = generator.get_fixture_name(type_info, parameters.original_arguments)
        full_name = f"{type_info.namespace}.{name}" if type_info.namespace else name
        super().__init__(name, full_name, parameters=parameters, type_info=type_info)


class ParameterizedFixtureSuite(TestSuite):
    """Groups the instances of one fixture class built with different arguments."""

    test_type = "ParameterizedFixture"

    def __init__(self, type_info: TypeInfo) -> None:
        super().__init__(type_info.name, type_info.full_name, type_info=type_info)


class ParameterizedMethodSuite(TestSuite):
    """Groups the test cases generated from one method's parameter sets."""

    test_type = "ParameterizedMethod"

    def __init__(self, method: MethodInfo, parent_suite: Test | None = None) -> None:
        prefix = parent_suite.full_name if parent_suite is not None else method.type_info.full_name
        super().__init__(
            method.name,
            f"{prefix}.{method.name}",
            type_info=method.type_info,
            method=method,
        )
        self.maintain_test_order = True

    @property
    def method_name(self) -> str | None:
        return self.method.name if self.method is not None else None
