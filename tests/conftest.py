from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_hashing_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MD5SALTED_* variables from the developer shell out of the tests."""

    for key in list(os.environ):
        if key.startswith("MD5SALTED_"):
            monkeypatch.delenv(key, raising=False)
