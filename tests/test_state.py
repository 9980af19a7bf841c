"""Tests for global state management."""

from unittest.mock import patch

from blob_mime.dependencies import Dependencies
from blob_mime.services import state


def test_get_dependencies_creates_once(static_base) -> None:
    deps = Dependencies.from_tables(base=static_base)

    with patch.object(Dependencies, "create", return_value=deps) as create:
        assert state.get_dependencies() is deps
        assert state.get_dependencies() is deps

    create.assert_called_once()


def test_set_dependencies(static_base) -> None:
    deps = Dependencies.from_tables(base=static_base)

    state.set_dependencies(deps)

    assert state.get_dependencies() is deps


def test_reset_state(static_base) -> None:
    state.set_dependencies(Dependencies.from_tables(base=static_base))

    state.reset_state()

    assert state._dependencies is None
