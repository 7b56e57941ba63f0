"""Hierarchical test representation: nodes, parameter sets, results and XML trees."""

from casetree.descriptors import MethodInfo, TypeInfo
from casetree.nodes import (
    ParameterizedFixtureSuite,
    ParameterizedMethodSuite,
    Test,
    TestFixture,
    TestMethod,
    TestSuite,
)
from casetree.parameters import (
    NO_ARGUMENTS,
    TestCaseParameters,
    TestFixtureParameters,
    TestParameters,
)
from casetree.results import TestCaseResult, TestResult, TestSuiteResult
from casetree.states import FailureSite, ResultState, RunState, TestStatus
from casetree.tnode import TNode

__version__ = "0.1.0"

__all__ = [
    "NO_ARGUMENTS",
    "FailureSite",
    "MethodInfo",
    "ParameterizedFixtureSuite",
    "ParameterizedMethodSuite",
    "ResultState",
    "RunState",
    "TNode",
    "Test",
    "TestCaseParameters",
    "TestCaseResult",
    "TestFixture",
    "TestFixtureParameters",
    "TestMethod",
    "TestParameters",
    "TestResult",
    "TestStatus",
    "TestSuite",
    "TestSuiteResult",
    "TypeInfo",
    "__version__",
]
