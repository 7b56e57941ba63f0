"""Pytest configuration and fixtures."""

import logging

import pytest

from casetree.descriptors import MethodInfo, TypeInfo
from casetree.nodes import TestFixture


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from casetree loggers after each test."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("casetree"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def calc_type() -> TypeInfo:
    return TypeInfo.parse("ns.Calc")


@pytest.fixture
def add_method(calc_type) -> MethodInfo:
    return MethodInfo(type_info=calc_type, name="Add")


@pytest.fixture
def calc_fixture(calc_type) -> TestFixture:
    return TestFixture(calc_type)
