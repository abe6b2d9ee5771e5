"""
Tests for the Result type and the error-kind → status mapping.
"""

import pytest

from utils.result import ErrorKind, Result


class TestResult:
    def test_success(self):
        result = Result.success(3)
        assert result.ok
        assert result.unwrap() == 3
        assert result.error is None

    def test_failure(self):
        result = Result.failure(ErrorKind.NOT_FOUND, "gone")
        assert not result.ok
        assert result.error.message == "gone"
        assert result.error.status_code == 404
        with pytest.raises(ValueError, match="not_found"):
            result.unwrap()

    def test_success_with_falsy_value_is_ok(self):
        assert Result.success(False).ok
        assert Result.success(None).ok

    @pytest.mark.parametrize(
        "kind,status",
        [
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.INVALID_CREDENTIALS, 400),
            (ErrorKind.CONSTRAINT_VIOLATION, 409),
            (ErrorKind.UNKNOWN, 500),
        ],
    )
    def test_status_codes(self, kind, status):
        assert kind.status_code == status
