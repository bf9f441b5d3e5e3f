"""
Pytest configuration and shared fixtures for FastRules tests.
"""

import pytest
from faker import Faker

fake = Faker()


@pytest.fixture
def short_text():
    """A non-empty word of at most 10 characters."""
    word = fake.word()[:10]
    return word or "a"


@pytest.fixture
def long_text():
    """Text well beyond 10 characters."""
    return fake.pystr(min_chars=11, max_chars=40)


@pytest.fixture(autouse=True)
def default_tag_key(monkeypatch):
    monkeypatch.delenv("FAST_RULES_TAG_KEY", raising=False)
