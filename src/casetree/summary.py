from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterator

import numpy as np

from casetree.results.base import TestResult
from casetree.states import TestStatus


@dataclass
class DurationStatistics:
    """Statistics over test case durations, in seconds."""

    avg: float | None
    min: float | None
    max: float | None
    stddev: float | None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass
class ResultSummary:
    """Counts and timings for a populated result tree."""

    total: int
    passed: int
    failed: int
    warnings: int
    skipped: int
    inconclusive: int
    asserts: int
    durations: DurationStatistics
    failed_cases: list[str] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "warnings": self.warnings,
            "skipped": self.skipped,
            "inconclusive": self.inconclusive,
            "asserts": self.asserts,
            "durations": self.durations.to_dict(),
            "failed_cases": list(self.failed_cases),
        }


def compute_stats(values: list[float]) -> DurationStatistics:
    """Compute avg, min, max, stddev for a list of durations."""
    if not values:
        return DurationStatistics(avg=None, min=None, max=None, stddev=None)

    arr = np.array(values)
    return DurationStatistics(
        avg=round(float(np.mean(arr)), 6),
        min=round(float(np.min(arr)), 6),
        max=round(float(np.max(arr)), 6),
        stddev=round(float(np.std(arr)), 6),
    )


def is_case_result(result: TestResult) -> bool:
    """True for the result of a single test case rather than of a suite."""
    return not result.test.has_children and result.test.test_case_count == 1


def iter_case_results(result: TestResult) -> Iterator[TestResult]:
    """Yield the leaf results under *result*, depth first."""
    if is_case_result(result):
        yield result
        return
    for child in result.children:
        yield from iter_case_results(child)


def summarize(result: TestResult) -> ResultSummary:
    cases = list(iter_case_results(result))
    failed_cases = [
        case.full_name for case in cases if case.result_state.status == TestStatus.FAILED
    ]
    return ResultSummary(
        total=result.total_count,
        passed=result.pass_count,
        failed=result.fail_count,
        warnings=result.warning_count,
        skipped=result.skip_count,
        inconclusive=result.inconclusive_count,
        asserts=result.assert_count,
        durations=compute_stats([case.duration for case in cases]),
        failed_cases=failed_cases,
    )
