# -*- coding: utf-8 -*-
"""
Tests for the Form Engine.

Tests cover:
- Value seeding
- Trim normalization
- Required short-circuit
- Length, email, date and custom checks
- Error aggregation and the validation_failed signal
"""

from datetime import date

import pytest

from models.form import FieldDescriptor, FieldType, StepDescriptor
from ui.wizards.framework import FormEngine


@pytest.fixture
def engine(sample_step):
    return FormEngine(sample_step)


def fill_valid(engine):
    engine.set_value("name", "Alice")
    engine.set_value("email", "alice@example.com")


class TestEngineInitialization:
    """Test engine runtime state after construction."""

    def test_values_seeded_from_defaults(self, engine):
        assert engine.values == {
            "name": "",
            "nickname": "",
            "email": "",
            "birthday": date(2000, 1, 1),
        }

    def test_initial_values_override_defaults(self, sample_step):
        engine = FormEngine(sample_step, initial_values={
            "name": "Bobby",
            "unknown": "ignored",
            "nickname": None,
        })
        assert engine.values["name"] == "Bobby"
        assert engine.values["nickname"] == ""
        assert "unknown" not in engine.values

    def test_no_errors_and_no_loading(self, engine):
        assert engine.field_errors == {}
        assert engine.btn_loading == {"back": False, "next": False}

    def test_set_value_unknown_field(self, engine):
        with pytest.raises(KeyError):
            engine.set_value("missing", "x")


class TestValidateField:
    """Test the per-field pipeline."""

    def test_trim_is_written_back(self, engine):
        engine.set_value("name", "  abcd  ")
        errors = engine.validate_field(engine.descriptor.get_field("name"))

        assert errors == []
        assert engine.values["name"] == "abcd"

    def test_required_short_circuits(self, engine):
        engine.set_value("name", "   ")
        errors = engine.validate_field(engine.descriptor.get_field("name"))

        assert errors == ['Field "Name" is required']

    def test_length_errors(self, engine):
        engine.set_value("name", "abc")
        assert engine.validate_field(engine.descriptor.get_field("name")) == [
            'Field "Name" must be at least 4 characters'
        ]

        engine.set_value("name", "abcdefghijk")
        assert engine.validate_field(engine.descriptor.get_field("name")) == [
            'Field "Name" must be at most 10 characters'
        ]

    def test_optional_empty_field_skips_length(self, engine):
        assert engine.validate_field(engine.descriptor.get_field("nickname")) == []

    def test_email_shape(self, engine):
        field = engine.descriptor.get_field("email")

        engine.set_value("email", "user@example.com")
        assert engine.validate_field(field) == []

        engine.set_value("email", "not-an-email")
        assert engine.validate_field(field) == ['Field "Email" must be a valid email address']

    def test_date_bounds(self, engine):
        field = engine.descriptor.get_field("birthday")

        engine.set_value("birthday", date(2015, 6, 1))
        assert engine.validate_field(field) == ['Field "Birthday" must not be later than 2010-01-01']

        engine.set_value("birthday", date(1990, 6, 1))
        assert engine.validate_field(field) == []

    def test_custom_validator_receives_all_values(self):
        seen = []

        def validation(value, values):
            seen.append((value, dict(values)))
            return ["custom failure"] if value == "bad!" else None

        step = StepDescriptor(
            title="Custom",
            fields=(
                FieldDescriptor(id="a", label="A", min_length=5, validation=validation),
                FieldDescriptor(id="b", label="B", default_value="other"),
            ),
        )
        engine = FormEngine(step)
        engine.set_value("a", " bad! ")

        errors = engine.validate_field(step.get_field("a"))

        # Length and custom messages are combined, not short-circuited
        assert errors == ['Field "A" must be at least 5 characters', "custom failure"]
        assert seen == [("bad!", {"a": "bad!", "b": "other"})]

    def test_custom_validator_empty_list_means_valid(self):
        step = StepDescriptor(
            title="Custom",
            fields=(FieldDescriptor(id="a", label="A", validation=lambda value, values: []),),
        )
        engine = FormEngine(step)
        assert engine.validate_field(step.get_field("a")) == []


class TestValidateForm:
    """Test whole-step validation."""

    def test_invalid_form(self, engine):
        engine.set_value("email", "nope")

        assert engine.validate_form() is False
        assert engine.field_errors == {
            "name": ['Field "Name" is required'],
            "email": ['Field "Email" must be a valid email address'],
        }
        assert engine.is_valid is False

    def test_valid_form(self, engine):
        fill_valid(engine)

        assert engine.validate_form() is True
        assert engine.field_errors == {}
        assert engine.is_valid is True

    def test_revalidation_is_idempotent(self, engine):
        engine.set_value("name", "ab")
        engine.set_value("nickname", "  x ")

        assert engine.validate_form() is False
        first = {key: list(value) for key, value in engine.field_errors.items()}

        assert engine.validate_form() is False
        assert engine.field_errors == first

    def test_errors_are_recomputed_wholesale(self, engine):
        assert engine.validate_form() is False
        assert "name" in engine.field_errors

        fill_valid(engine)
        engine.validate_form()
        assert engine.field_errors == {}

    def test_validation_failed_signal(self, engine):
        emitted = []
        engine.validation_failed.connect(emitted.append)

        engine.validate_form()
        assert emitted == [{"name": ['Field "Name" is required']}]

        fill_valid(engine)
        engine.validate_form()
        assert len(emitted) == 1

    def test_get_field_errors(self, engine):
        engine.validate_form()
        assert engine.get_field_errors("name") == ['Field "Name" is required']
        assert engine.get_field_errors("nickname") == []

    def test_select_membership_not_checked(self):
        step = StepDescriptor(
            title="Select",
            fields=(FieldDescriptor(id="visibility", label="Visibility", type=FieldType.SELECT,
                                    default_value="all"),),
        )
        engine = FormEngine(step)
        engine.set_value("visibility", "something-else")
        assert engine.validate_form() is True
