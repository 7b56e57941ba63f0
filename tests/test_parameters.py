import dataclasses

import numpy as np
import pytest

from casetree.parameters import (
    NO_ARGUMENTS,
    TestCaseParameters,
    TestFixtureParameters,
    TestParameters,
)
from casetree.states import RunState


def test_arguments_coerced_to_tuple():
    parameters = TestParameters(arguments=[1, 2])
    assert parameters.arguments == (1, 2)
    assert isinstance(parameters.arguments, tuple)


def test_missing_arguments_use_shared_empty_tuple():
    assert TestParameters().arguments is NO_ARGUMENTS
    assert TestCaseParameters(arguments=[]).arguments is NO_ARGUMENTS
    assert TestFixtureParameters().arguments is NO_ARGUMENTS


def test_arguments_from_numpy_array():
    parameters = TestCaseParameters(arguments=np.array([1, 2]))
    assert parameters.arguments == (1, 2)
    assert parameters.original_arguments == (1, 2)


def test_empty_numpy_array_uses_shared_empty_tuple():
    assert TestParameters(arguments=np.array([])).arguments is NO_ARGUMENTS


def test_arguments_from_generator():
    assert TestParameters(arguments=(x * 2 for x in range(3))).arguments == (0, 2, 4)


def test_original_arguments_default_to_arguments():
    parameters = TestCaseParameters(arguments=[1, "x"])
    assert parameters.original_arguments == (1, "x")


def test_original_arguments_kept_separately():
    parameters = TestCaseParameters(arguments=[1.0], original_arguments=["1"])
    assert parameters.arguments == (1.0,)
    assert parameters.original_arguments == ("1",)


def test_parameters_are_immutable():
    parameters = TestCaseParameters(arguments=[1])
    with pytest.raises(dataclasses.FrozenInstanceError):
        parameters.arguments = (2,)


def test_with_expected_result():
    parameters = TestCaseParameters.with_expected_result(3, 1, 2, test_name="sum")
    assert parameters.arguments == (1, 2)
    assert parameters.has_expected_result is True
    assert parameters.expected_result == 3
    assert parameters.test_name == "sum"


def test_default_has_no_expected_result():
    parameters = TestCaseParameters(arguments=[1])
    assert parameters.has_expected_result is False
    assert parameters.expected_result is None


def test_defaults():
    parameters = TestParameters()
    assert parameters.run_state == RunState.RUNNABLE
    assert parameters.test_name is None
    assert parameters.categories == ()
    assert parameters.skip_reason is None
