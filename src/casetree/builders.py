"""Helpers that turn descriptors and parameter sets into test nodes.

These are what a discovery layer calls once it knows which methods exist and
which arguments they take. Nothing here inspects source code.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from casetree.descriptors import MethodInfo, TypeInfo
from casetree.naming import TestNameGenerator
from casetree.nodes.base import Test
from casetree.nodes.method import TestMethod
from casetree.nodes.suite import ParameterizedFixtureSuite, ParameterizedMethodSuite, TestFixture
from casetree.parameters import TestParameters
from casetree.properties import PropertyNames
from casetree.states import RunState

logger = logging.getLogger(__name__)

# A method paired with its parameter sets; None means the method takes no parameters.
MethodSpec = tuple[MethodInfo, Optional[Sequence[TestParameters]]]


def build_test_method(
    method: MethodInfo,
    parent_suite: Test | None = None,
    parameters: TestParameters | None = None,
    name_generator: TestNameGenerator | None = None,
) -> TestMethod:
    """Build one test case, naming it from its parameters when it has any."""
    name = None
    if parameters is not None:
        if parameters.test_name:
            name = parameters.test_name
        elif parameters.original_arguments:
            generator = name_generator or TestNameGenerator()
            name = generator.get_display_name(method, parameters.original_arguments)

    test = TestMethod(method, parent_suite, parameters=parameters, name=name)
    logger.debug("Built test case %s (seed=%d)", test.full_name, test.seed)
    return test


def build_parameterized_method_suite(
    method: MethodInfo,
    parameter_sets: Sequence[TestParameters],
    parent_suite: Test | None = None,
    name_generator: TestNameGenerator | None = None,
) -> ParameterizedMethodSuite:
    suite = ParameterizedMethodSuite(method, parent_suite)
    if not parameter_sets:
        suite.run_state = RunState.NOT_RUNNABLE
        suite.properties.set(PropertyNames.SKIP_REASON, "No arguments were provided")
        logger.debug("Parameterized method %s has no parameter sets", suite.full_name)

    for parameters in parameter_sets:
        suite.add(build_test_method(method, parent_suite, parameters, name_generator))
    return suite


def build_fixture(
    type_info: TypeInfo,
    methods: Sequence[MethodSpec],
    parameters: TestParameters | None = None,
    name_generator: TestNameGenerator | None = None,
) -> TestFixture:
    """Build a fixture and its cases.

    Cases are built with the fixture as their parent suite so that fixture
    arguments show up in their full names.
    """
    fixture = TestFixture(type_info, parameters, name_generator=name_generator)
    for method, parameter_sets in methods:
        if parameter_sets is None:
            fixture.add(build_test_method(method, fixture))
        else:
            fixture.add(
                build_parameterized_method_suite(method, parameter_sets, fixture, name_generator)
            )
    logger.debug(
        "Built fixture %s with %d test case(s)", fixture.full_name, fixture.test_case_count
    )
    return fixture


def build_parameterized_fixture(
    type_info: TypeInfo,
    fixture_parameter_sets: Sequence[TestParameters],
    methods: Sequence[MethodSpec],
    name_generator: TestNameGenerator | None = None,
) -> ParameterizedFixtureSuite:
    """Build one fixture instance per parameter set under a shared grouping suite."""
    suite = ParameterizedFixtureSuite(type_info)
    for parameters in fixture_parameter_sets:
        suite.add(build_fixture(type_info, methods, parameters, name_generator))
    return suite
