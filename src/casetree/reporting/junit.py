from __future__ import annotations

from junitparser import Error, Failure, JUnitXml, Skipped, TestCase, TestSuite

from casetree.results.base import TestResult
from casetree.states import TestStatus
from casetree.summary import is_case_result


def _junit_case(result: TestResult) -> TestCase:
    test = result.test
    case = TestCase(test.name, test.class_name or "", result.duration)

    state = result.result_state
    message = result.message or ""
    if state.status == TestStatus.FAILED:
        if state.label == "Error":
            case.result = Error(message)
        else:
            case.result = Failure(message)
    elif state.status in (TestStatus.SKIPPED, TestStatus.INCONCLUSIVE):
        case.result = Skipped(message)

    if result.output:
        case.system_out = result.output
    return case


def _collect_suites(result: TestResult, xml: JUnitXml) -> None:
    cases = [child for child in result.children if is_case_result(child)]
    if cases:
        suite = TestSuite(result.full_name)
        suite.add_property("seed", str(result.test.seed))
        for child in cases:
            suite.add_testcase(_junit_case(child))
        # Set time after add_testcase (add_testcase resets it via update_statistics)
        suite.time = float(result.duration)
        xml.append(suite)

    for child in result.children:
        if child.has_children:
            _collect_suites(child, xml)


def to_junit(result: TestResult) -> JUnitXml:
    """Convert a populated result tree into a JUnit document.

    Every suite result that directly holds case results becomes one
    ``<testsuite>``; nested suites are flattened. A lone case result becomes
    a suite of one. Nothing is written to disk.
    """
    xml = JUnitXml()
    if is_case_result(result):
        suite = TestSuite(result.full_name)
        suite.add_property("seed", str(result.test.seed))
        suite.add_testcase(_junit_case(result))
        xml.append(suite)
        return xml

    _collect_suites(result, xml)
    return xml
