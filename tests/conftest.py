from __future__ import annotations

import pytest


@pytest.fixture
def clear_edit_engine_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("UNDO_LIMIT", "LEXICON", "SCAN_ON_EDIT"):
        monkeypatch.delenv(f"EDIT_ENGINE_{name}", raising=False)
