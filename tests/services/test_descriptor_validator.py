# -*- coding: utf-8 -*-
"""
Tests for StepDescriptorValidator.
"""

from datetime import date

import pytest

from models.form import ButtonDescriptor, FieldDescriptor, FieldType, SelectOption, StepDescriptor
from services.validation import StepDescriptorValidator


def noop(values):
    return None


def step_with(*fields, buttons=None, title="Step"):
    if buttons is None:
        buttons = (ButtonDescriptor(id="next", label="Next", callback=noop),)
    return StepDescriptor(title=title, fields=tuple(fields), buttons=tuple(buttons))


@pytest.fixture
def validator():
    return StepDescriptorValidator()


def test_valid_step(validator, sample_step):
    assert validator.validate(sample_step) == []
    assert validator.is_valid(sample_step) is True


def test_missing_title_and_buttons(validator):
    errors = validator.validate(step_with(title="", buttons=()))
    assert "Step has no title" in errors
    assert "Step '' has no buttons" in errors


def test_duplicate_ids(validator):
    step = step_with(
        FieldDescriptor(id="a", label="A"),
        FieldDescriptor(id="a", label="A again"),
        buttons=(
            ButtonDescriptor(id="go", label="Go", callback=noop),
            ButtonDescriptor(id="go", label="Go", callback=noop),
        ),
    )
    errors = validator.validate(step)
    assert "Duplicate field id: a" in errors
    assert "Duplicate button id: go" in errors


def test_inverted_length_limits(validator):
    errors = validator.validate(step_with(FieldDescriptor(id="a", label="A", min_length=10, max_length=5)))
    assert errors == ["Field 'a': max_length is less than min_length"]


def test_date_field_checks(validator):
    errors = validator.validate(step_with(
        FieldDescriptor(id="d", label="D", type=FieldType.DATE, default_value="2020-01-01",
                        min_date=date(2020, 1, 1), max_date=date(2019, 1, 1)),
        FieldDescriptor(id="t", label="T", min_date=date(2020, 1, 1)),
    ))
    assert "Field 'd': date field default must be a date" in errors
    assert "Field 'd': max_date is earlier than min_date" in errors
    assert "Field 't': date bounds on a non-date field" in errors


def test_select_field_checks(validator):
    options = (SelectOption(name="All", value="all"),)
    errors = validator.validate(step_with(
        FieldDescriptor(id="s", label="S", type=FieldType.SELECT),
        FieldDescriptor(id="o", label="O", type=FieldType.SELECT, select_values=options,
                        default_value="nobody"),
        FieldDescriptor(id="x", label="X", select_values=options),
    ))
    assert "Field 's': select field has no options" in errors
    assert "Field 'o': default value is not one of the options" in errors
    assert "Field 'x': options on a non-select field" in errors


def test_non_callable_hooks(validator):
    errors = validator.validate(step_with(
        FieldDescriptor(id="a", label="A", validation="not callable"),
        buttons=(ButtonDescriptor(id="next", label="Next", callback=None),),
    ))
    assert "Field 'a': validation is not callable" in errors
    assert "Button 'next' has no callable callback" in errors
