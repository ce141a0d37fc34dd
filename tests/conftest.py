"""Shared pytest fixtures and configuration for the encapsulate-record suite.

Guidelines
----------
* Every test starts from a fresh process-wide default store.
* ``DEFAULT_OWNER_*`` variables from the caller's shell never leak in.
* Tests run in an empty temporary directory, so a developer's ``.env``
  is never read.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from encapsulate_record.core import owner_store


@pytest.fixture(autouse=True)
def fresh_default_store(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEFAULT_OWNER_FIRST_NAME", raising=False)
    monkeypatch.delenv("DEFAULT_OWNER_LAST_NAME", raising=False)
    monkeypatch.setattr(owner_store, "_default_store", None)
