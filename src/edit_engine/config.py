"""Engine configuration resolved from defaults and ``EDIT_ENGINE_*`` variables."""

from __future__ import annotations

from dataclasses import dataclass

from edit_engine.runtime.telemetry import env_flag, env_value

DEFAULT_UNDO_LIMIT = 100
DEFAULT_LEXICON = "rust"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Settings shared by an editing session.

    ``undo_limit`` caps both the undo and the redo stack. ``lexicon`` names the
    word lists handed to the scanner. With ``scan_on_edit`` disabled the session
    keeps its previous spans until ``rescan()`` is called explicitly.
    """

    undo_limit: int = DEFAULT_UNDO_LIMIT
    lexicon: str = DEFAULT_LEXICON
    scan_on_edit: bool = True

    def __post_init__(self) -> None:
        if self.undo_limit < 1:
            raise ValueError("undo_limit must be at least 1")
        if not self.lexicon:
            raise ValueError("lexicon cannot be empty")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        raw_limit = env_value("UNDO_LIMIT")
        try:
            undo_limit = int(raw_limit) if raw_limit else DEFAULT_UNDO_LIMIT
        except ValueError as exc:
            raise ValueError(
                f"EDIT_ENGINE_UNDO_LIMIT is not an integer: {raw_limit!r}"
            ) from exc
        return cls(
            undo_limit=undo_limit,
            lexicon=(env_value("LEXICON") or DEFAULT_LEXICON).strip().lower(),
            scan_on_edit=env_flag("SCAN_ON_EDIT", True),
        )


__all__ = ["DEFAULT_LEXICON", "DEFAULT_UNDO_LIMIT", "EngineConfig"]
