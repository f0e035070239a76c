# tests/conftest.py
from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication

from turtlegrid.model.orientation import Facing
from turtlegrid.model.turtle import Turtle


@pytest.fixture(scope="session")
def qapp():
    """One Qt core application for the whole session (signals need no GUI)."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def turtle() -> Turtle:
    return Turtle(id=1, uuid="3f2b8f4e-6c1d-4a5e-9a0b-2d7c1e5f8a90", x=0, y=0, z=0, facing=Facing.FORWARD)
