"""Shared test fixtures for gory."""

import pytest

from gory.policy import default_policy


@pytest.fixture(autouse=True)
def reset_default_policy():
    """Give every test a fresh process-wide policy."""
    default_policy().reset()
    yield
    default_policy().reset()


@pytest.fixture
def tty_policy():
    """A policy that sees a terminal and an empty environment."""
    from gory.policy import StylePolicy

    return StylePolicy(probe=lambda: True, environ={})


@pytest.fixture
def pipe_policy():
    """A policy that sees no terminal and an empty environment."""
    from gory.policy import StylePolicy

    return StylePolicy(probe=lambda: False, environ={})
