"""Tests for the error taxonomy."""

import pytest

from clientdesk.errors import (
    ErrorKind,
    ForbiddenError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
    classify,
)
from clientdesk.store.base import DuplicateKeyError


@pytest.mark.unit
class TestClassify:
    @pytest.mark.parametrize(
        "error, kind",
        [
            (NotFoundError("Client not found"), ErrorKind.NOT_FOUND),
            (ValidationError('"email" must be a valid email'), ErrorKind.VALIDATION),
            (UnauthorizedError("Unauthorized"), ErrorKind.UNAUTHORIZED),
            (ForbiddenError("Forbidden"), ErrorKind.FORBIDDEN),
            (InternalError(), ErrorKind.INTERNAL),
        ],
    )
    def test_classified_errors(self, error, kind):
        assert classify(error) is kind

    def test_store_errors_are_internal(self):
        assert classify(DuplicateKeyError("clients", "email")) is ErrorKind.INTERNAL

    def test_arbitrary_exceptions_are_internal(self):
        assert classify(ConnectionError("connection refused")) is ErrorKind.INTERNAL
        assert classify(None) is ErrorKind.INTERNAL


@pytest.mark.unit
class TestStatusClassification:
    @pytest.mark.parametrize(
        "kind, status",
        [
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.VALIDATION, 400),
            (ErrorKind.UNAUTHORIZED, 401),
            (ErrorKind.FORBIDDEN, 403),
            (ErrorKind.INTERNAL, 500),
        ],
    )
    def test_status_codes(self, kind, status):
        assert kind.status == status

    def test_extensions(self):
        error = NotFoundError("Project not found")

        assert error.extensions == {"code": "NOT_FOUND", "status": 404}
        assert str(error) == "Project not found"

    def test_validation_extensions_name_the_field(self):
        error = ValidationError('"phone" is required', field="phone")

        assert error.extensions == {"code": "BAD_USER_INPUT", "status": 400, "field": "phone"}

    def test_internal_error_has_generic_message(self):
        assert InternalError().message == "Internal server error"

    def test_errors_are_not_shared_state(self):
        """Each error carries its own kind; classifying one never changes another."""
        first = NotFoundError("a")
        second = NotFoundError("b")
        classify(first)

        assert first.extensions == second.extensions
        assert first.extensions is not second.extensions
