"""Named text registers backing cut, copy, and paste."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping

UNNAMED = '"'
CLIPBOARD = "+"


@dataclass(frozen=True, slots=True)
class RegisterValue:
    text: str
    source: str = "copy"  # copy or cut


class RegisterBank:
    """Holds named registers; the unnamed register mirrors the latest write."""

    def __init__(self) -> None:
        self._registers: Dict[str, RegisterValue] = {UNNAMED: RegisterValue(text="")}

    def get(self, name: str = UNNAMED) -> RegisterValue:
        return self._registers.get(name, RegisterValue(text=""))

    def set(self, name: str, value: RegisterValue) -> None:
        self._registers[name] = value
        if name != UNNAMED:
            self._registers[UNNAMED] = value

    def yank_to(self, name: str, text: str, *, source: str = "copy") -> None:
        self.set(name, RegisterValue(text=text, source=source))

    def snapshot(self) -> Mapping[str, RegisterValue]:
        return dict(self._registers)


__all__ = ["CLIPBOARD", "RegisterBank", "RegisterValue", "UNNAMED"]
