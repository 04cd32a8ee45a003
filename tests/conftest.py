"""
CAESAR TOOLKIT - Pytest fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from core.monitors import ActivityMonitor

PANGRAM = "the quick brown fox jumps over the lazy dog"
PANGRAM_ROT13 = "gur dhvpx oebja sbk whzcf bire gur ynml qbt"


@pytest.fixture
def pangram():
    return PANGRAM


@pytest.fixture
def pangram_rot13():
    return PANGRAM_ROT13


@pytest.fixture
def english_sample():
    """English plaintext with both one-letter words ("I", "a")."""
    return "I have a dog and I love it. It is a good dog and I walk it every day."


@pytest.fixture(autouse=True)
def clear_monitor():
    ActivityMonitor().clear()
    yield
    ActivityMonitor().clear()


@pytest.fixture
def client():
    from api.main import app
    with TestClient(app) as c:
        yield c
