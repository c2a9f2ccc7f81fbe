# -*- coding: utf-8 -*-
"""
Shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest
from PyQt5.QtCore import QCoreApplication

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from models.form import ButtonDescriptor, FieldDescriptor, FieldType, StepDescriptor  # noqa: E402
from services.token_storage import TokenStorage  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Create the Qt core application once for all tests."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def storage(tmp_path):
    """Token storage backed by a temporary database."""
    token_storage = TokenStorage(tmp_path / "storage.db")
    yield token_storage
    token_storage.close()


@pytest.fixture
def callback_calls():
    """List recording the values every test callback was invoked with."""
    return []


@pytest.fixture
def sample_step(callback_calls):
    """A step covering every field kind, with a validating and a skipping button."""

    def record(values):
        callback_calls.append(dict(values))

    return StepDescriptor(
        title="Sample",
        fields=(
            FieldDescriptor(id="name", label="Name", required=True, min_length=4, max_length=10),
            FieldDescriptor(id="nickname", label="Nickname", min_length=4),
            FieldDescriptor(id="email", label="Email", type=FieldType.EMAIL),
            FieldDescriptor(
                id="birthday",
                label="Birthday",
                type=FieldType.DATE,
                default_value=date(2000, 1, 1),
                min_date=date(1950, 1, 1),
                max_date=date(2010, 1, 1),
            ),
        ),
        buttons=(
            ButtonDescriptor(id="back", label="Back", skip_validate=True, callback=record),
            ButtonDescriptor(id="next", label="Next", callback=record),
        ),
    )
