from __future__ import annotations

import pytest

from core.config import default_parameters
from core.errors import ParameterParseError
from inputs.parsing import parse_months, parse_number, parse_parameters
from inputs.validators import validate_parameters


@pytest.mark.parametrize("text, expected", [
    ("80000", 80_000.0),
    ("  80,000 ", 80_000.0),
    ("$1,250.50", 1_250.5),
    ("7%", 7.0),
    ("1e3", 1_000.0),
    (12, 12.0),
    (0.5, 0.5),
])
def test_parse_number_accepts(text, expected):
    assert parse_number(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "abc", "nan", "inf", None, float("inf")])
def test_parse_number_rejects(text):
    assert parse_number(text) is None


def test_parse_months():
    assert parse_months("12") == 12
    assert parse_months("12.0") == 12
    assert parse_months("2.5") is None
    assert parse_months("x") is None


def test_parse_parameters_layers_on_defaults():
    params = parse_parameters({"monthly_revenue": "100,000", "months": "24", "unknown": "1"})
    assert params.monthly_revenue == 100_000
    assert params.months == 24
    assert params.revenue_share == default_parameters().revenue_share


def test_parse_parameters_uses_base():
    base = default_parameters(revenue_share=3.0)
    params = parse_parameters({"pool_size_fallback": " None "}, base=base)
    assert params.revenue_share == 3.0
    assert params.pool_size_fallback == "none"


def test_parse_parameters_without_changes_returns_base():
    base = default_parameters()
    assert parse_parameters({}, base=base) is base


def test_parse_parameters_names_bad_field():
    with pytest.raises(ParameterParseError) as exc:
        parse_parameters({"revenue_share": "lots"})
    assert exc.value.field_name == "revenue_share"
    with pytest.raises(ParameterParseError):
        parse_parameters({"months": "1.5"})


def test_validate_defaults_pass():
    result = validate_parameters(default_parameters())
    assert result.is_valid
    assert result.warnings == []
    assert "All checks passed" in result.summary()


def test_validate_reports_engine_errors_without_raising():
    result = validate_parameters(default_parameters(months=0, premium_token_emission=-1.0))
    assert not result.is_valid
    assert len(result.errors) == 2
    assert "ERRORS (2)" in result.summary()


def test_validate_warnings():
    params = default_parameters(
        monthly_revenue=2_000_000.0,
        revenue_share=0.0,
        months=6,
    )
    result = validate_parameters(params)
    assert result.is_valid
    text = " ".join(result.warnings)
    assert "exceeds the expected maximum" in text
    assert "Nothing flows into the pool" in text
    assert "rescaled linearly" in text


def test_validate_warns_on_empty_pool_without_fallback():
    params = default_parameters(initial_pool_size=0.0, pool_size_fallback="none")
    result = validate_parameters(params)
    assert result.is_valid
    assert any("no fallback" in w for w in result.warnings)
