"""Tests for the mutation input validation rules."""

import pytest

from clientdesk.validation import (
    CLIENT_RULES,
    PROJECT_STATUSES,
    EntityKind,
    ValidationResult,
    validate_client_input,
    validate_input,
    validate_project_input,
)

VALID_CLIENT = {"name": "Acme", "email": "a@acme.com", "phone": "0771234567"}
VALID_PROJECT = {
    "name": "Site Redesign",
    "description": "New marketing site",
    "status": "Not Started",
    "client_id": "c0ffee",
}


@pytest.mark.unit
class TestClientRules:
    def test_valid_client(self):
        result = validate_client_input(VALID_CLIENT)

        assert result == ValidationResult.ok()
        assert result.valid is True
        assert result.message is None

    def test_email_without_at_sign(self):
        result = validate_client_input({**VALID_CLIENT, "email": "acme.com"})

        assert result.valid is False
        assert result.field == "email"
        assert result.message == '"email" must be a valid email'

    def test_three_digit_phone(self):
        result = validate_client_input({**VALID_CLIENT, "phone": "077"})

        assert result.valid is False
        assert result.field == "phone"
        assert result.message == '"phone" length must be at least 10 characters long'

    def test_phone_too_long(self):
        result = validate_client_input({**VALID_CLIENT, "phone": "0" * 16})

        assert result.field == "phone"
        assert "less than or equal to 15" in result.message

    def test_phone_format_is_not_checked_here(self):
        """Only length is checked; the regional format belongs to the store."""
        result = validate_client_input({**VALID_CLIENT, "phone": "12345678901"})

        assert result.valid is True

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Ab", '"name" length must be at least 3 characters long'),
            ("x" * 51, '"name" length must be less than or equal to 50 characters long'),
            ("", '"name" is not allowed to be empty'),
        ],
    )
    def test_name_length(self, name, expected):
        result = validate_client_input({**VALID_CLIENT, "name": name})

        assert result.valid is False
        assert result.message == expected

    def test_missing_field_is_required(self):
        result = validate_client_input({"name": "Acme", "email": "a@acme.com"})

        assert result.field == "phone"
        assert result.message == '"phone" is required'

    def test_first_violated_rule_wins(self):
        """Rules run in table order, so a bad name is reported before a bad email."""
        result = validate_client_input({"name": "A", "email": "nope", "phone": "1"})

        assert result.field == CLIENT_RULES[0].field == "name"

    def test_non_string_value(self):
        result = validate_client_input({**VALID_CLIENT, "phone": 771234567})

        assert result.message == '"phone" must be a string'


@pytest.mark.unit
class TestProjectRules:
    def test_valid_project(self):
        assert validate_project_input(VALID_PROJECT).valid is True

    def test_description_is_optional(self):
        record = {**VALID_PROJECT, "description": None}

        assert validate_project_input(record).valid is True

    def test_description_limit(self):
        result = validate_project_input({**VALID_PROJECT, "description": "d" * 501})

        assert result.field == "description"

    def test_description_at_limit(self):
        assert validate_project_input({**VALID_PROJECT, "description": "d" * 500}).valid

    @pytest.mark.parametrize("status", PROJECT_STATUSES)
    def test_every_status_is_accepted(self, status):
        assert validate_project_input({**VALID_PROJECT, "status": status}).valid

    def test_unknown_status(self):
        result = validate_project_input({**VALID_PROJECT, "status": "Blocked"})

        assert result.field == "status"
        assert result.message == '"status" must be one of [Not Started, In Progress, Completed]'

    def test_status_is_required(self):
        record = {key: value for key, value in VALID_PROJECT.items() if key != "status"}

        assert validate_project_input(record).message == '"status" is required'

    def test_client_id_is_required(self):
        record = {**VALID_PROJECT, "client_id": None}

        assert validate_project_input(record).field == "client_id"

    def test_partial_only_checks_supplied_fields(self):
        assert validate_project_input({"status": "Completed"}, partial=True).valid is True

    def test_partial_still_rejects_bad_values(self):
        result = validate_project_input({"name": "ab"}, partial=True)

        assert result.valid is False
        assert result.field == "name"


@pytest.mark.unit
def test_validate_input_dispatches_on_kind():
    assert validate_input(EntityKind.CLIENT, VALID_CLIENT).valid
    assert not validate_input(EntityKind.PROJECT, VALID_CLIENT).valid


@pytest.mark.unit
class TestPartialNulls:
    def test_null_clears_optional_field(self):
        assert validate_project_input({"description": None}, partial=True).valid is True

    @pytest.mark.parametrize("field", ["name", "status"])
    def test_null_for_required_field(self, field):
        result = validate_input(EntityKind.PROJECT, {field: None}, partial=True)

        assert result == ValidationResult.fail(field, f'"{field}" must be a string')

    def test_absent_field_is_skipped(self):
        assert validate_input(EntityKind.PROJECT, {}, partial=True).valid is True

    def test_non_string_value_without_partial(self):
        result = validate_input(EntityKind.CLIENT, {**VALID_CLIENT, "name": ["Acme"]})

        assert result.field == "name"
        assert result.message == '"name" must be a string'
