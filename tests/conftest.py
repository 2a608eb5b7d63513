"""Shared test fixtures for QuickTools tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pytest


@dataclass
class StubSettings:
    """Mirrors the attribute surface of QuickToolsConfig."""

    QUICKTOOLS_DEBUG: bool = False
    QUICKTOOLS_WORDS_PER_MINUTE: int = 200
    QUICKTOOLS_DEFAULT_ALGORITHMS: str = "SHA-1,SHA-256,SHA-384,SHA-512"
    QUICKTOOLS_DIGEST_BACKEND: str = "hashlib"

    def default_algorithms(self) -> List[str]:
        return [
            item.strip()
            for item in self.QUICKTOOLS_DEFAULT_ALGORITHMS.split(",")
            if item.strip()
        ]


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> StubSettings:
    """Replace CLI settings loading with an in-memory settings object."""

    stub = StubSettings()
    monkeypatch.setattr("quicktools.cli.get_settings", lambda: stub)
    return stub
