from casetree.results.base import TestResult
from casetree.results.case import TestCaseResult
from casetree.results.suite import TestSuiteResult

__all__ = [
    "TestCaseResult",
    "TestResult",
    "TestSuiteResult",
]
