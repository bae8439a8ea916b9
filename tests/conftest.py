"""Shared fixtures for fnvfold tests."""

import pytest


@pytest.fixture(scope="session")
def hashme():
    """Input behind the published reference vectors."""
    return b"asdfasdfasdfasdf"
