"""Shared fixtures for the LMS Admin test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from lmsadmin.constants.values import CONFIG_ENV_VAR
from lmsadmin.models.policy import Policy
from lmsadmin.models.state.policy_store import InMemoryPolicyStore


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings file at a temp dir so tests never touch ~/.config."""
    settings_path = tmp_path / "config" / "settings.yaml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(settings_path))
    return settings_path


@pytest.fixture
def policy() -> Policy:
    return Policy(
        policy_id="pol-1",
        library_id="lib-1",
        max_books_per_user=8,
        max_borrow_days=21,
    )


@pytest.fixture
def store(policy: Policy) -> InMemoryPolicyStore:
    return InMemoryPolicyStore(policy)
