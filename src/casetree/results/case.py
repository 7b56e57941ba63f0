from __future__ import annotations

from casetree.results.base import TestResult
from casetree.states import TestStatus


class TestCaseResult(TestResult):
    """Result of a single test case.

    Only ``TestMethod.make_result()`` creates these. Code that compares a
    case's return value against its expected result works on this type.
    """

    def _count(self, status: TestStatus) -> int:
        return 1 if self.result_state.status == status else 0

    @property
    def has_children(self) -> bool:
        return False

    @property
    def pass_count(self) -> int:
        return self._count(TestStatus.PASSED)

    @property
    def fail_count(self) -> int:
        return self._count(TestStatus.FAILED)

    @property
    def warning_count(self) -> int:
        return self._count(TestStatus.WARNING)

    @property
    def skip_count(self) -> int:
        return self._count(TestStatus.SKIPPED)

    @property
    def inconclusive_count(self) -> int:
        return self._count(TestStatus.INCONCLUSIVE)
