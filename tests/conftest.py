"""Shared fixtures for errorkind tests."""

from __future__ import annotations

import pytest

from errorkind import define_error_type, override_settings


@pytest.fixture
def root_kind():
    """A fresh root kind named Error with stack capture."""
    return define_error_type()


@pytest.fixture
def chain_kinds():
    """Three-level chain root -> A -> B with overlapping defaults."""
    root = define_error_type("Root", {"x": 1, "y": 1})
    a = define_error_type("A", root, {"y": 2})
    b = define_error_type("B", a, {"y": 3})
    return root, a, b


@pytest.fixture
def default_depth():
    """Pin the process-wide capture depth to 3 frames."""
    with override_settings(stack_length=3) as settings:
        yield settings
