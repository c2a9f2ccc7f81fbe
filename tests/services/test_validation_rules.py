# -*- coding: utf-8 -*-
"""
Tests for the validation rule library and the email validator.
"""

from datetime import date, datetime

import pytest

from services.validation import rules
from services.validation.email_validator import EmailValidator


class TestRequired:
    """Test the required rule."""

    @pytest.mark.parametrize("value", ["", None, [], (), {}, set()])
    def test_empty_values_fail(self, value):
        assert rules.required(value, "Name") == 'Field "Name" is required'

    @pytest.mark.parametrize("value", ["a", [1], {"k": 1}, date(2020, 1, 1), 0])
    def test_present_values_pass(self, value):
        assert rules.required(value) is None

    def test_message_without_label(self):
        assert rules.required("") == "Field is required"


class TestLength:
    """Test min/max length rules."""

    def test_min_length(self):
        assert rules.min_length("abc", 4, "Login") == 'Field "Login" must be at least 4 characters'
        assert rules.min_length("abcd", 4) is None

    def test_max_length(self):
        assert rules.max_length("abcdef", 5, "Login") == 'Field "Login" must be at most 5 characters'
        assert rules.max_length("abcde", 5) is None

    def test_sequences_are_measured(self):
        assert rules.min_length([1, 2], 3) is not None
        assert rules.max_length((1, 2, 3), 2) is not None

    def test_non_textual_values_are_ignored(self):
        assert rules.min_length(date(2020, 1, 1), 100) is None
        assert rules.max_length(12345, 1) is None


class TestEmail:
    """Test email shape validation."""

    def test_valid_address(self):
        assert rules.email("user@example.com") is None
        assert EmailValidator.is_valid("first.last+tag@mail.example.co")

    def test_invalid_address(self):
        message = rules.email("not-an-email", "Email")
        assert message == 'Field "Email" must be a valid email address'

    @pytest.mark.parametrize("value", [
        "user@localhost",          # no dot in domain
        "user@-example.com",       # label starts with hyphen
        "user@@example.com",
        "user example@example.com",
        "",
        None,
    ])
    def test_rejected_addresses(self, value):
        assert not EmailValidator.is_valid(value)

    def test_length_limit(self):
        local = "a" * 64
        domain = ".".join(["b" * 60] * 4) + ".com"
        address = f"{local}@{domain}"
        assert len(address) > 254
        assert not EmailValidator.is_valid(address)

    def test_surrounding_whitespace_is_ignored(self):
        assert EmailValidator.is_valid("  user@example.com ")

    def test_extract_domain(self):
        assert EmailValidator.extract_domain("user@example.com") == "example.com"
        assert EmailValidator.extract_domain("broken") is None


class TestDateRange:
    """Test date bounds."""

    def test_inside_range(self):
        assert rules.date_range(date(2000, 1, 1), date(1990, 1, 1), date(2010, 1, 1)) is None

    def test_bounds_are_inclusive(self):
        assert rules.date_range(date(1990, 1, 1), date(1990, 1, 1), date(2010, 1, 1)) is None
        assert rules.date_range(date(2010, 1, 1), date(1990, 1, 1), date(2010, 1, 1)) is None

    def test_before_min(self):
        message = rules.date_range(date(1980, 1, 1), date(1990, 1, 1), None, "Birthday")
        assert message == 'Field "Birthday" must not be earlier than 1990-01-01'

    def test_after_max(self):
        message = rules.date_range(date(2020, 1, 1), None, date(2010, 1, 1), "Birthday")
        assert message == 'Field "Birthday" must not be later than 2010-01-01'

    def test_datetime_values_compare_by_date(self):
        assert rules.date_range(datetime(2010, 1, 1, 23, 59), None, date(2010, 1, 1)) is None

    def test_non_date_values_are_ignored(self):
        assert rules.date_range("2020-01-01", date(2021, 1, 1), None) is None
