# ABOUTME: Tests for strict and lenient CSS selector compilation
# ABOUTME: Validates that syntax errors surface as SelectorError and that compiled selectors are cached

import pytest

from rastreadora.document import compile_selector, try_compile_selector
from rastreadora.errors import SelectorError


def test_compile_valid_selector():
    compiled = compile_selector("div.entry > h2 a")
    assert compiled.pattern == "div.entry > h2 a"


def test_compile_is_cached():
    assert compile_selector(".column_hasvistoa") is compile_selector(".column_hasvistoa")


@pytest.mark.parametrize("selector", ["div[", "", "p:unknown-pseudo"])
def test_compile_malformed_selector_raises(selector):
    with pytest.raises(SelectorError, match="invalid selector"):
        compile_selector(selector)


def test_compile_non_string_raises():
    with pytest.raises(SelectorError, match="must be a string"):
        compile_selector(None)  # type: ignore[arg-type]


def test_selector_error_is_value_error():
    with pytest.raises(ValueError):
        compile_selector("div[")


def test_try_compile_returns_none_on_malformed_selector():
    assert try_compile_selector("div[") is None
    assert try_compile_selector("div") is not None
