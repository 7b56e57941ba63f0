"""Tests for the single test case node."""

import pytest

from casetree.descriptors import MethodInfo, TypeInfo
from casetree.nodes import TestFixture, TestMethod, TestSuite
from casetree.parameters import (
    NO_ARGUMENTS,
    TestCaseParameters,
    TestFixtureParameters,
    TestParameters,
)
from casetree.properties import PropertyNames
from casetree.randomizer import Randomizer
from casetree.results import TestCaseResult, TestSuiteResult
from casetree.states import ResultState, RunState
from casetree.tnode import TNode


# ---------------------------------------------------------------------------
# Arguments and expected results
# ---------------------------------------------------------------------------


def test_unbound_arguments_is_shared_empty_tuple(add_method):
    test = TestMethod(add_method)
    assert test.arguments is NO_ARGUMENTS
    assert len(test.arguments) == 0


def test_unbound_methods_share_the_same_empty_arguments(add_method):
    first = TestMethod(add_method)
    second = TestMethod(add_method)
    assert first.arguments is second.arguments


def test_bound_arguments_match_parameters(add_method):
    parameters = TestCaseParameters(arguments=["b", "a", 3])
    test = TestMethod(add_method, parameters=parameters)
    assert test.arguments is parameters.arguments
    assert list(test.arguments) == ["b", "a", 3]


def test_bound_empty_arguments_is_shared_empty_tuple(add_method):
    test = TestMethod(add_method, parameters=TestCaseParameters(arguments=[]))
    assert test.arguments is NO_ARGUMENTS


def test_expected_result_from_parameters(add_method):
    parameters = TestCaseParameters(arguments=[1, 2], expected_result=3, has_expected_result=True)
    test = TestMethod(add_method, parameters=parameters)
    assert test.arguments == (1, 2)
    assert test.has_expected_result is True
    assert test.expected_result == 3


def test_unbound_has_no_expected_result(add_method):
    test = TestMethod(add_method)
    assert test.has_expected_result is False
    assert test.expected_result is None


def test_expected_none_is_still_an_expected_result(add_method):
    parameters = TestCaseParameters.with_expected_result(None, 1)
    test = TestMethod(add_method, parameters=parameters)
    assert test.has_expected_result is True
    assert test.expected_result is None


def test_plain_parameters_have_no_expected_result(add_method):
    test = TestMethod(add_method, parameters=TestParameters(arguments=[1]))
    assert test.arguments == (1,)
    assert test.has_expected_result is False
    assert test.expected_result is None


# ---------------------------------------------------------------------------
# Children and element name
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "parameters",
    [
        None,
        TestCaseParameters(arguments=[1, 2]),
        TestCaseParameters.with_expected_result(3, 1, 2),
        TestCaseParameters(run_state=RunState.IGNORED, skip_reason="later"),
    ],
)
def test_never_has_children(add_method, parameters):
    test = TestMethod(add_method, parameters=parameters)
    assert test.has_children is False
    assert len(test.tests) == 0
    assert test.test_case_count == 1


@pytest.mark.parametrize(
    "parameters",
    [
        None,
        TestCaseParameters(arguments=[1, 2]),
        TestCaseParameters(run_state=RunState.IGNORED, skip_reason="later"),
    ],
)
def test_element_name_is_constant(add_method, parameters):
    test = TestMethod(add_method, parameters=parameters)
    assert test.xml_element_name == "test-case"


def test_element_name_independent_of_outcome(add_method):
    test = TestMethod(add_method)
    result = test.make_result()
    result.set_result(ResultState.FAILURE, "boom")
    assert test.xml_element_name == "test-case"
    assert result.to_xml().name == "test-case"


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


def test_full_name_with_parent_suite():
    parent = TestSuite("Fixture", "Suite.Fixture")
    method = MethodInfo(type_info=TypeInfo.parse("Other.Declaring"), name="Add")
    test = TestMethod(method, parent)
    assert test.full_name == "Suite.Fixture.Add"


def test_full_name_without_parent_uses_declaring_type():
    method = MethodInfo(type_info=TypeInfo.parse("Other.Declaring"), name="Add")
    test = TestMethod(method)
    assert test.full_name == "Other.Declaring.Add"


def test_full_name_includes_fixture_arguments(calc_type, add_method):
    fixture = TestFixture(calc_type, TestFixtureParameters(arguments=[1, "a"]))
    test = TestMethod(add_method, fixture)
    assert fixture.full_name == 'ns.Calc(1,"a")'
    assert test.full_name == 'ns.Calc(1,"a").Add'


def test_full_name_is_read_only(add_method):
    test = TestMethod(add_method)
    with pytest.raises(AttributeError):
        test.full_name = "changed"


def test_full_name_is_not_recomputed_when_parent_changes(add_method):
    first = TestSuite("First", "ns.First")
    test = TestMethod(add_method, first)
    second = TestSuite("Second", "ns.Second")
    second.add(test)
    assert test.parent is second
    assert test.full_name == "ns.First.Add"


def test_method_name_differs_from_display_name(add_method):
    test = TestMethod(add_method, name="Add(1,2)")
    assert test.name == "Add(1,2)"
    assert test.method_name == "Add"
    assert test.full_name == "ns.Calc.Add(1,2)"


def test_class_name_from_declaring_type(add_method):
    assert TestMethod(add_method).class_name == "ns.Calc"


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


def test_ids_are_unique_strings(add_method):
    ids = {TestMethod(add_method).id for _ in range(20)}
    assert len(ids) == 20
    assert all(isinstance(i, str) for i in ids)


def test_subclass_id_prefix_is_used(add_method):
    class PrefixedMethod(TestMethod):
        id_prefix = "run1-"

    assert PrefixedMethod(add_method).id.startswith("run1-")
    assert not TestMethod(add_method).id.startswith("run1-")


def test_test_method_returns_descriptor(add_method):
    assert TestMethod(add_method).test_method is add_method


def test_seed_is_reproducible_from_initial_seed(add_method):
    Randomizer.set_initial_seed(42)
    first = [TestMethod(add_method).seed for _ in range(3)]
    Randomizer.set_initial_seed(42)
    second = [TestMethod(add_method).seed for _ in range(3)]
    assert first == second


def test_seed_is_read_only(add_method):
    test = TestMethod(add_method)
    with pytest.raises(AttributeError):
        test.seed = 1


def test_parameters_apply_run_state_and_properties(add_method):
    parameters = TestCaseParameters(
        arguments=[1],
        run_state=RunState.IGNORED,
        skip_reason="later",
        categories=["fast", "math"],
        description="adds",
    )
    test = TestMethod(add_method, parameters=parameters)
    assert test.run_state == RunState.IGNORED
    assert test.properties.get(PropertyNames.SKIP_REASON) == "later"
    assert test.properties[PropertyNames.CATEGORY] == ["fast", "math"]
    assert test.properties.get(PropertyNames.DESCRIPTION) == "adds"


# ---------------------------------------------------------------------------
# Result factory
# ---------------------------------------------------------------------------


def test_make_result_returns_case_result(add_method):
    test = TestMethod(add_method)
    result = test.make_result()
    assert type(result) is TestCaseResult
    assert not isinstance(result, TestSuiteResult)
    assert result.test is test


def test_make_result_returns_distinct_instances(add_method):
    test = TestMethod(add_method)
    first = test.make_result()
    second = test.make_result()
    assert first is not second
    first.set_result(ResultState.SUCCESS)
    assert second.result_state == ResultState.INCONCLUSIVE


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def test_add_to_xml_appends_one_test_case(add_method):
    test = TestMethod(add_method)
    parent = TNode("parent")
    parent.add_element("existing")

    node = test.add_to_xml(parent, False)

    assert len(parent.child_nodes) == 2
    assert parent.child_nodes[-1] is node
    assert node.name == "test-case"
    assert node.attributes["seed"] == str(test.seed)


def test_add_to_xml_common_attributes(add_method):
    test = TestMethod(add_method)
    node = test.add_to_xml(TNode("parent"), True)
    assert node.attributes["id"] == test.id
    assert node.attributes["name"] == "Add"
    assert node.attributes["fullname"] == "ns.Calc.Add"
    assert node.attributes["methodname"] == "Add"
    assert node.attributes["classname"] == "ns.Calc"
    assert node.attributes["runstate"] == "Runnable"


def test_seed_is_added_after_common_attributes(add_method):
    node = TestMethod(add_method).add_to_xml(TNode("parent"), False)
    assert list(node.attributes)[-1] == "seed"


def test_recursive_flag_has_no_effect(add_method):
    test = TestMethod(add_method)
    flat = test.add_to_xml(TNode("parent"), False)
    deep = test.add_to_xml(TNode("parent"), True)
    assert flat.outer_xml == deep.outer_xml
    assert flat.child_nodes == []


def test_properties_rendered_as_child(add_method):
    parameters = TestCaseParameters(categories=["fast"])
    node = TestMethod(add_method, parameters=parameters).to_xml()
    prop = node.select_single_node("properties/property")
    assert prop is not None
    assert prop.attributes == {"name": "Category", "value": "fast"}


def test_render_is_stable_across_calls(add_method):
    test = TestMethod(add_method, parameters=TestCaseParameters(arguments=[1]))
    assert test.to_xml().outer_xml == test.to_xml().outer_xml
