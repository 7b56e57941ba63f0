"""Mutable outcome containers produced by ``Test.make_result()``."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Sequence

from casetree.states import FailureSite, ResultState, TestStatus
from casetree.tnode import TNode

if TYPE_CHECKING:
    from casetree.nodes.base import Test

_TIME_FORMAT = "%Y-%m-%d %H:%M:%SZ"


def _format_time(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(_TIME_FORMAT)


class TestResult(ABC):
    """Outcome of running one node.

    A result is owned by whoever executes its test until it has been
    populated; after that it is only read. Serialization never mutates it.
    """

    __test__ = False

    def __init__(self, test: Test) -> None:
        self.test = test
        self.result_state: ResultState = ResultState.INCONCLUSIVE
        self.message: str | None = None
        self.stack_trace: str | None = None
        self.duration: float = 0.0
        self.start_time: datetime | None = None
        self.end_time: datetime | None = None
        self.assert_count: int = 0
        self._output: list[str] = []
        self._children: list[TestResult] = []

    @property
    def name(self) -> str:
        return self.test.name

    @property
    def full_name(self) -> str:
        return self.test.full_name

    @property
    def output(self) -> str:
        return "".join(self._output)

    def write_output(self, text: str) -> None:
        self._output.append(text)

    def set_result(
        self,
        result_state: ResultState,
        message: str | None = None,
        stack_trace: str | None = None,
    ) -> None:
        self.result_state = result_state
        self.message = message
        self.stack_trace = stack_trace

    @property
    def children(self) -> Sequence[TestResult]:
        return tuple(self._children)

    @property
    @abstractmethod
    def has_children(self) -> bool: ...

    @property
    @abstractmethod
    def pass_count(self) -> int: ...

    @property
    @abstractmethod
    def fail_count(self) -> int: ...

    @property
    @abstractmethod
    def warning_count(self) -> int: ...

    @property
    @abstractmethod
    def skip_count(self) -> int: ...

    @property
    @abstractmethod
    def inconclusive_count(self) -> int: ...

    @property
    def total_count(self) -> int:
        return (
            self.pass_count
            + self.fail_count
            + self.warning_count
            + self.skip_count
            + self.inconclusive_count
        )

    def to_xml(self, recursive: bool = True) -> TNode:
        return self.add_to_xml(TNode("dummy"), recursive)

    def add_to_xml(self, parent_node: TNode, recursive: bool) -> TNode:
        """Render the test's element, then decorate it with this outcome."""
        this_node = self.test.add_to_xml(parent_node, False)

        state = self.result_state
        this_node.add_attribute("result", state.status.value)
        if state.label:
            this_node.add_attribute("label", state.label)
        if state.site != FailureSite.TEST:
            this_node.add_attribute("site", state.site.value)

        if self.start_time is not None:
            this_node.add_attribute("start-time", _format_time(self.start_time))
        if self.end_time is not None:
            this_node.add_attribute("end-time", _format_time(self.end_time))
        this_node.add_attribute("duration", f"{self.duration:.6f}")

        self.add_count_attributes(this_node)
        this_node.add_attribute("asserts", str(self.assert_count))

        if state.status == TestStatus.FAILED:
            self._add_failure_element(this_node)
        elif self.message and self.message.strip():
            self._add_reason_element(this_node)

        if self._output:
            this_node.add_element_with_cdata("output", self.output)

        if recursive and self.has_children:
            for child in self._children:
                child.add_to_xml(this_node, recursive)

        return this_node

    def add_count_attributes(self, this_node: TNode) -> None:
        """Hook for results that summarize descendants."""

    def _add_failure_element(self, target: TNode) -> TNode:
        failure = target.add_element("failure")
        if self.message:
            failure.add_element_with_cdata("message", self.message)
        if self.stack_trace:
            failure.add_element_with_cdata("stack-trace", self.stack_trace)
        return failure

    def _add_reason_element(self, target: TNode) -> TNode:
        reason = target.add_element("reason")
        reason.add_element_with_cdata("message", self.message or "")
        return reason

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.full_name!r} {self.result_state}>"
