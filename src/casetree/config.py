from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from casetree.builders import MethodSpec, build_fixture, build_parameterized_fixture
from casetree.descriptors import MethodInfo, TypeInfo
from casetree.naming import DEFAULT_PATTERN, TestNameGenerator
from casetree.nodes.base import Test
from casetree.nodes.suite import TestSuite
from casetree.parameters import TestCaseParameters, TestFixtureParameters
from casetree.randomizer import Randomizer
from casetree.states import RunState

logger = logging.getLogger(__name__)


class CaseConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    arguments: list[Any] = []
    expected: Any = None
    name: str | None = None
    description: str | None = None
    categories: list[str] = []
    skip: str | None = None

    @property
    def has_expected(self) -> bool:
        # An explicit `expected: null` still counts as an expected result.
        return "expected" in self.model_fields_set

    def to_parameters(self) -> TestCaseParameters:
        return TestCaseParameters(
            arguments=self.arguments,
            test_name=self.name,
            description=self.description,
            categories=self.categories,
            run_state=RunState.IGNORED if self.skip else RunState.RUNNABLE,
            skip_reason=self.skip,
            expected_result=self.expected,
            has_expected_result=self.has_expected,
        )


class MethodConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    description: str | None = None
    categories: list[str] = []
    skip: str | None = None
    cases: list[CaseConfig] | None = None

    @field_validator("name")
    @classmethod
    def name_must_be_identifier(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"Method name '{v}' is not a valid identifier")
        return v


class FixtureConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    class_name: str = Field(alias="class")
    arguments: list[list[Any]] | None = None
    description: str | None = None
    categories: list[str] = []
    skip: str | None = None
    methods: list[MethodConfig]

    @field_validator("methods")
    @classmethod
    def methods_must_not_be_empty(cls, v: list[MethodConfig]) -> list[MethodConfig]:
        if not v:
            raise ValueError("methods must not be empty")
        return v

    @model_validator(mode="after")
    def method_names_must_be_unique(self) -> FixtureConfig:
        names = [m.name for m in self.methods]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(
                f"Fixture '{self.class_name}' declares duplicate methods: {', '.join(duplicates)}"
            )
        return self


class TreeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "tests"
    seed: int | None = None
    name_pattern: str = DEFAULT_PATTERN
    fixtures: list[FixtureConfig]

    @field_validator("fixtures")
    @classmethod
    def fixtures_must_not_be_empty(cls, v: list[FixtureConfig]) -> list[FixtureConfig]:
        if not v:
            raise ValueError("fixtures must not be empty")
        return v

    @field_validator("seed")
    @classmethod
    def seed_must_be_non_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("seed must be non-negative")
        return v


def load_config(path: Path) -> TreeConfig:
    """Load and validate a test tree declaration from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{path} does not contain a mapping")

    return TreeConfig(**raw)


def _method_specs(fixture: FixtureConfig, type_info: TypeInfo) -> list[MethodSpec]:
    specs: list[MethodSpec] = []
    for method in fixture.methods:
        info = MethodInfo(type_info=type_info, name=method.name)
        if method.cases is None:
            specs.append((info, None))
        else:
            specs.append((info, [case.to_parameters() for case in method.cases]))
    return specs


def _apply_method_metadata(fixture_node: Test, fixture: FixtureConfig) -> None:
    """Copy method-level description, categories and skip onto built nodes."""
    by_name = {m.name: m for m in fixture.methods}
    for test in fixture_node.tests:
        method = by_name.get(test.method_name or "")
        if method is None:
            continue
        parameters = TestCaseParameters(
            description=method.description,
            categories=method.categories,
            run_state=RunState.IGNORED if method.skip else test.run_state,
            skip_reason=method.skip,
        )
        parameters.apply_to_test(test)


def build_tree(config: TreeConfig) -> TestSuite:
    """Build the node tree a declaration describes."""
    if config.seed is not None:
        Randomizer.set_initial_seed(config.seed)

    generator = TestNameGenerator(config.name_pattern)
    root = TestSuite(config.name)

    for fixture_config in config.fixtures:
        type_info = TypeInfo.parse(fixture_config.class_name)
        specs = _method_specs(fixture_config, type_info)
        fixture_state = RunState.IGNORED if fixture_config.skip else RunState.RUNNABLE

        if fixture_config.arguments is None:
            parameters = TestFixtureParameters(
                description=fixture_config.description,
                categories=fixture_config.categories,
                run_state=fixture_state,
                skip_reason=fixture_config.skip,
            )
            fixture = build_fixture(type_info, specs, parameters, generator)
            _apply_method_metadata(fixture, fixture_config)
            root.add(fixture)
            continue

        parameter_sets = [
            TestFixtureParameters(
                arguments=args,
                description=fixture_config.description,
                categories=fixture_config.categories,
                run_state=fixture_state,
                skip_reason=fixture_config.skip,
            )
            for args in fixture_config.arguments
        ]
        group = build_parameterized_fixture(type_info, parameter_sets, specs, generator)
        for instance in group.tests:
            _apply_method_metadata(instance, fixture_config)
        root.add(group)

    logger.debug("Built tree %s with %d test case(s)", root.full_name, root.test_case_count)
    return root
