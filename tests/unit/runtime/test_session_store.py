"""Tests for SessionStore"""

from actionbind.config.models import SessionConfig
from actionbind.runtime.store import SessionStore


def test_get_or_create_returns_same_session():
    # Arrange
    store = SessionStore()

    # Act
    first = store.get_or_create("c1")
    second = store.get_or_create("c1")

    # Assert
    assert first is second
    assert first.conversation_id == "c1"
    assert "c1" in store


def test_sessions_are_isolated_per_conversation():
    store = SessionStore()

    assert store.get_or_create("c1") is not store.get_or_create("c2")
    assert len(store) == 2


def test_reset_forgets_session():
    # Arrange
    store = SessionStore()
    store.get_or_create("c1")

    # Act
    store.reset("c1")
    store.reset("unknown")

    # Assert
    assert "c1" not in store


def test_least_recently_used_session_is_evicted():
    # Arrange
    store = SessionStore(SessionConfig(max_sessions=2, ttl_seconds=60))
    store.get_or_create("c1")
    store.get_or_create("c2")

    # Act
    store.get_or_create("c1")
    store.get_or_create("c3")

    # Assert
    assert "c1" in store
    assert "c2" not in store
    assert "c3" in store
