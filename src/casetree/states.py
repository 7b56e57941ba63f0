"""Run states and outcome states shared by nodes and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RunState(str, Enum):
    NOT_RUNNABLE = "NotRunnable"
    RUNNABLE = "Runnable"
    EXPLICIT = "Explicit"
    SKIPPED = "Skipped"
    IGNORED = "Ignored"


class TestStatus(str, Enum):
    __test__ = False

    INCONCLUSIVE = "Inconclusive"
    SKIPPED = "Skipped"
    PASSED = "Passed"
    WARNING = "Warning"
    FAILED = "Failed"


class FailureSite(str, Enum):
    TEST = "Test"
    SETUP = "SetUp"
    TEARDOWN = "TearDown"
    PARENT = "Parent"
    CHILD = "Child"


@dataclass(frozen=True)
class ResultState:
    """Outcome of a test: a status, an optional label and where it happened."""

    status: TestStatus
    label: str = ""
    site: FailureSite = FailureSite.TEST

    def __str__(self) -> str:
        if not self.label:
            return self.status.value
        return f"{self.status.value}:{self.label}"


ResultState.INCONCLUSIVE = ResultState(TestStatus.INCONCLUSIVE)
ResultState.NOT_RUNNABLE = ResultState(TestStatus.FAILED, "Invalid")
ResultState.SKIPPED = ResultState(TestStatus.SKIPPED)
ResultState.IGNORED = ResultState(TestStatus.SKIPPED, "Ignored")
ResultState.EXPLICIT = ResultState(TestStatus.SKIPPED, "Explicit")
ResultState.SUCCESS = ResultState(TestStatus.PASSED)
ResultState.WARNING = ResultState(TestStatus.WARNING)
ResultState.FAILURE = ResultState(TestStatus.FAILED)
ResultState.ERROR = ResultState(TestStatus.FAILED, "Error")
ResultState.CANCELLED = ResultState(TestStatus.FAILED, "Cancelled")
ResultState.CHILD_FAILURE = ResultState(TestStatus.FAILED, "", FailureSite.CHILD)
ResultState.SETUP_FAILURE = ResultState(TestStatus.FAILED, "", FailureSite.SETUP)
ResultState.TEARDOWN_ERROR = ResultState(TestStatus.FAILED, "Error", FailureSite.TEARDOWN)
