"""Immutable parameter sets bound to test cases and fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Sequence

from casetree.properties import PropertyNames
from casetree.states import RunState

if TYPE_CHECKING:
    from casetree.nodes.base import Test

# Shared by every node that has no bound arguments.
NO_ARGUMENTS: tuple[Any, ...] = ()


@dataclass(frozen=True)
class TestParameters:
    """Arguments and run-time metadata for one invocation.

    Attributes:
        arguments: Values passed to the test, in order.
        run_state: Run state applied to the node the parameters are bound to.
        test_name: Explicit display name, overriding the generated one.
        original_arguments: Arguments as declared, used for display names.
            Defaults to ``arguments``.
        description: Stored as the node's Description property.
        categories: Each stored as a Category property.
        skip_reason: Why the node is not runnable or is ignored.
    """

    __test__ = False

    arguments: Sequence[Any] = NO_ARGUMENTS
    run_state: RunState = RunState.RUNNABLE
    test_name: str | None = None
    original_arguments: Sequence[Any] | None = None
    description: str | None = None
    categories: Sequence[str] = field(default_factory=tuple)
    skip_reason: str | None = None

    def __post_init__(self) -> None:
        arguments = tuple(self.arguments) or NO_ARGUMENTS
        object.__setattr__(self, "arguments", arguments)
        if self.original_arguments is None:
            object.__setattr__(self, "original_arguments", arguments)
        else:
            object.__setattr__(self, "original_arguments", tuple(self.original_arguments))
        object.__setattr__(self, "categories", tuple(self.categories))

    def apply_to_test(self, test: Test) -> None:
        test.run_state = self.run_state
        if self.description is not None:
            test.properties.set(PropertyNames.DESCRIPTION, self.description)
        for category in self.categories:
            test.properties.add(PropertyNames.CATEGORY, category)
        if self.skip_reason is not None:
            test.properties.set(PropertyNames.SKIP_REASON, self.skip_reason)


@dataclass(frozen=True)
class TestCaseParameters(TestParameters):
    """Parameters for a single test case, optionally with an expected result."""

    expected_result: Any | None = None
    has_expected_result: bool = False

    @classmethod
    def with_expected_result(cls, expected: Any, *arguments: Any, **kwargs: Any) -> TestCaseParameters:
        return cls(arguments=arguments, expected_result=expected, has_expected_result=True, **kwargs)


@dataclass(frozen=True)
class TestFixtureParameters(TestParameters):
    """Constructor arguments for a parameterized fixture."""
