import pytest

from core.session_manager import SessionManager


class ScriptedRandom:
    """Stands in for random.Random, returning a fixed sequence of indexes."""

    def __init__(self, indexes):
        self.indexes = list(indexes)
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        index = self.indexes.pop(0)
        assert 0 <= index < n
        return index


@pytest.fixture(autouse=True)
def reset_sessions():
    SessionManager.reset()
    yield
    SessionManager.reset()


@pytest.fixture
def scripted_random():
    return ScriptedRandom
