from __future__ import annotations

import pytest

from hr_admin_portal.common.query import build_params, parse_bool


@pytest.mark.parametrize(
    "value,expected",
    [(True, True), (False, False), ("true", True), ("TRUE", True), ("false", False), ("0", False), ("on", False)],
)
def test_parse_bool_only_accepts_true(value, expected):
    assert parse_bool(value) is expected


def test_parse_bool_default_for_missing_values():
    assert parse_bool(None, default=True) is True
    assert parse_bool("", default=True) is True
    assert parse_bool(None) is False


def test_build_params_drops_empty_values():
    assert build_params({"a": None, "b": "", "c": True, "d": 2}) == {"c": "true", "d": "2"}
