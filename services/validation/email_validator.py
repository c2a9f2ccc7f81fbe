# -*- coding: utf-8 -*-
"""
Email address validation with additional structural checks.
"""

import re
from typing import Optional

EMAIL_REG_EXP = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

MAX_EMAIL_LENGTH = 254


class EmailValidator:
    """Validates email addresses against a strict grammar plus length/domain rules."""

    EMAIL_REG_EXP = EMAIL_REG_EXP

    @classmethod
    def is_valid(cls, email: str) -> bool:
        """
        Check an email address.

        Args:
            email: Address to check (surrounding whitespace is ignored)

        Returns:
            True if the address matches the grammar, is at most 254 characters
            long and its domain contains a dot after the first character
        """
        if not email or not isinstance(email, str):
            return False

        trimmed_email = email.strip()

        if not cls.EMAIL_REG_EXP.match(trimmed_email):
            return False

        return cls._has_valid_length(trimmed_email) and cls._has_valid_domain(trimmed_email)

    @staticmethod
    def _has_valid_length(email: str) -> bool:
        return len(email) <= MAX_EMAIL_LENGTH

    @staticmethod
    def _has_valid_domain(email: str) -> bool:
        parts = email.split("@")
        domain = parts[1] if len(parts) > 1 else ""
        return domain.find(".") > 0

    @classmethod
    def extract_domain(cls, email: str) -> Optional[str]:
        """Return the domain part of a valid address, None otherwise."""
        if not cls.is_valid(email):
            return None

        return email.strip().split("@")[1] or None
