from __future__ import annotations

from dataclasses import dataclass

from .types import CombatMode


@dataclass(frozen=True)
class DecideAvoidAction:
    avoid: bool


@dataclass(frozen=True)
class ChooseCardAction:
    room_index: int  # 0-based


@dataclass(frozen=True)
class ChooseCombatModeAction:
    mode: CombatMode

    @staticmethod
    def weapon() -> "ChooseCombatModeAction":
        return ChooseCombatModeAction(mode="weapon")

    @staticmethod
    def barehanded() -> "ChooseCombatModeAction":
        return ChooseCombatModeAction(mode="barehanded")


@dataclass(frozen=True)
class NextRoomAction:
    pass


Action = DecideAvoidAction | ChooseCardAction | ChooseCombatModeAction | NextRoomAction
