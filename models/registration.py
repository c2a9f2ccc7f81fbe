# -*- coding: utf-8 -*-
"""
Registration record model.
"""

from dataclasses import dataclass, asdict, fields
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from utils.datetime_utils import serialize_record


class Visibility(str, Enum):
    """Who can see a user's posts or profile."""
    ALL = "all"
    FRIENDS = "friends"
    ONLY_ME = "onlyMe"


@dataclass
class RegistrationRecord:
    """
    Accumulated registration data for all three steps.

    Step 1: name, surname, patronymic, date_birthday
    Step 2: login, password, password_confirmation
    Step 3: default_post_visible, default_profile_visible
    """

    date_birthday: date
    name: str = ""
    surname: str = ""
    patronymic: Optional[str] = None
    login: str = ""
    password: str = ""
    password_confirmation: str = ""
    default_post_visible: str = Visibility.ALL.value
    default_profile_visible: str = Visibility.ALL.value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegistrationRecord":
        """Build from a value map, ignoring keys that are not record fields."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready body for the register endpoint."""
        return serialize_record(self.to_dict())
