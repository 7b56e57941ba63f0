from __future__ import annotations

from casetree.results.base import TestResult
from casetree.tnode import TNode


class TestSuiteResult(TestResult):
    """Result of a composite node; counts are summed over child results."""

    def add_result(self, result: TestResult) -> None:
        self._children.append(result)

    @property
    def assert_count(self) -> int:
        """Asserts made by the suite itself plus those of every child, read live."""
        return self._own_assert_count + sum(child.assert_count for child in self._children)

    @assert_count.setter
    def assert_count(self, value: int) -> None:
        self._own_assert_count = value

    @property
    def has_children(self) -> bool:
        return len(self._children) > 0

    @property
    def pass_count(self) -> int:
        return sum(child.pass_count for child in self._children)

    @property
    def fail_count(self) -> int:
        return sum(child.fail_count for child in self._children)

    @property
    def warning_count(self) -> int:
        return sum(child.warning_count for child in self._children)

    @property
    def skip_count(self) -> int:
        return sum(child.skip_count for child in self._children)

    @property
    def inconclusive_count(self) -> int:
        return sum(child.inconclusive_count for child in self._children)

    def add_count_attributes(self, this_node: TNode) -> None:
        this_node.add_attribute("total", str(self.total_count))
        this_node.add_attribute("passed", str(self.pass_count))
        this_node.add_attribute("failed", str(self.fail_count))
        this_node.add_attribute("warnings", str(self.warning_count))
        this_node.add_attribute("inconclusive", str(self.inconclusive_count))
        this_node.add_attribute("skipped", str(self.skip_count))
