from casetree.nodes.base import Test
from casetree.nodes.method import TestMethod
from casetree.nodes.suite import (
    ParameterizedFixtureSuite,
    ParameterizedMethodSuite,
    TestFixture,
    TestSuite,
)

__all__ = [
    "ParameterizedFixtureSuite",
    "ParameterizedMethodSuite",
    "Test",
    "TestFixture",
    "TestMethod",
    "TestSuite",
]
