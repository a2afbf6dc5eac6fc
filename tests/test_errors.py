from __future__ import annotations

import pytest

from resultpattern.errors import (
    ConfigurationError,
    InvalidArgumentError,
    ResultPatternError,
)

pytestmark = pytest.mark.unit


def test_invalid_argument_error_structured_metadata() -> None:
    err = InvalidArgumentError("result: got None", hint="do this", argument="result")

    assert str(err) == "result: got None"
    assert err.hint == "do this"
    assert err.argument == "result"


def test_invalid_argument_error_defaults_to_none() -> None:
    err = InvalidArgumentError("fail")
    assert err.hint is None
    assert err.argument is None


def test_subclass_hierarchy() -> None:
    """Contract violations are catchable as ValueError and ResultPatternError."""
    arg_err = InvalidArgumentError("bad")
    cfg_err = ConfigurationError("bad config", hint="fix it")

    assert isinstance(arg_err, ResultPatternError)
    assert isinstance(arg_err, ValueError)
    assert isinstance(cfg_err, ResultPatternError)
    assert not isinstance(cfg_err, ValueError)
    assert str(cfg_err) == "bad config"
