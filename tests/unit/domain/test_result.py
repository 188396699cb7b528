"""Unit tests for the Ok/Err result types."""

import dataclasses

import pytest

from pennywise.domain.shared import Err, ErrorCode, Ok


class TestOk:
    def test_carries_value(self):
        result = Ok(42)

        assert result.value == 42

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Ok(1).value = 2  # type: ignore[misc]


class TestErr:
    def test_details_default_to_empty(self):
        err = Err(ErrorCode.USER_NOT_FOUND, "User not found.")

        assert err.details == ()
        assert str(err) == "User not found."

    def test_details_frozen_into_tuple(self):
        details = ["a", "b"]
        err = Err(ErrorCode.INVALID_PASSWORD, "Invalid password.", details)
        details.append("c")

        assert err.details == ("a", "b")

    def test_error_code_is_a_string(self):
        assert ErrorCode.EMAIL_TAKEN == "EMAIL_TAKEN"
        assert ErrorCode.EMAIL_TAKEN.value == "EMAIL_TAKEN"
