"""Unit tests for the parameter domain model."""

import pytest
from paramstore_env.domain.parameter import (
    FetchMode,
    FlatFetch,
    ParameterRecord,
    PathScopedFetch,
    to_environment_variable,
)
from paramstore_env.domain.result import FetchError, FetchResult


@pytest.mark.parametrize(
    "name, expected",
    [
        ("name1", "NAME1"),
        ("*X()_test", "_X___TEST"),
        ("123abCD", "123ABCD"),
        ("/service/name1", "NAME1"),
        ("/service/nested/db-url", "DB_URL"),
        ("name-1", "NAME_1"),
        ("a.b c", "A_B_C"),
        ("service/", ""),
        ("", ""),
    ],
)
def test_to_environment_variable(name, expected):
    """Test parameter name normalization."""
    assert to_environment_variable(name) == expected


def test_to_environment_variable_keeps_length():
    """Test that the result is as long as the name after the last slash."""
    for name in ["/a/straße", "ß", "ǆ-x", "mixed/Ünïcode-9"]:
        trimmed = name[name.rfind("/") + 1:]
        assert len(to_environment_variable(name)) == len(trimmed)


def test_to_environment_variable_is_deterministic():
    """Test that normalization is a pure function."""
    assert to_environment_variable("/app/api-key") == to_environment_variable("/app/api-key")


def test_parameter_record_env_name_and_repr():
    """Test that records expose their variable name and hide their value."""
    record = ParameterRecord("/service/db-password", "hunter2")

    assert record.env_name == "DB_PASSWORD"
    assert "hunter2" not in repr(record)
    assert record == ParameterRecord("/service/db-password", "hunter2")
    assert ParameterRecord("name").value is None


def test_fetch_mode_flat_without_path():
    """Test that an empty or missing path selects a flat scan."""
    assert FetchMode.select(None, True) == FlatFetch()
    assert FetchMode.select("", False) == FlatFetch()


def test_fetch_mode_path_scoped_with_path():
    """Test that a path selects a path-scoped fetch."""
    mode = FetchMode.select("/service/", None)

    assert mode == PathScopedFetch(path="/service/", recursive=False)
    assert FetchMode.select("/service", True).recursive is True


def test_fetch_mode_is_immutable():
    """Test that a selected mode cannot be changed."""
    mode = FetchMode.select("/service", True)

    with pytest.raises(AttributeError):
        mode.path = "/other"


def test_fetch_result_ok_keeps_empty_string():
    """Test that an empty value is a successful result."""
    result = FetchResult.ok("")

    assert result.is_ok
    assert result.value == ""
    assert result.error is None


def test_fetch_result_failure():
    """Test failed results."""
    error = FetchError("GetParameter", "Access denied", name="name1", code="AccessDeniedException")
    result = FetchResult.failure(error)

    assert not result.is_ok
    assert result.error is error
    with pytest.raises(FetchError):
        result.value
    assert "name1" in str(error)
    assert "AccessDeniedException" in str(error)
