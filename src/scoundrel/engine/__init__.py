"""Deterministic, headless rules engine for Scoundrel.

IMPORTANT: This package must never read input or print.
"""

from .actions import ChooseCardAction, ChooseCombatModeAction, DecideAvoidAction, NextRoomAction
from .deck import Deck, Room
from .errors import EmptyDeckError, EngineError, IllegalActionError, InvalidSelectionError
from .game import (
    GameConfig,
    GameState,
    PlayerState,
    StepResult,
    TurnPhase,
    can_fight_with_weapon,
    new_game,
    replay,
    step,
)
from .types import Card, CardCategory, CombatMode, Outcome, Suit

__all__ = [
    "Card",
    "CardCategory",
    "ChooseCardAction",
    "ChooseCombatModeAction",
    "CombatMode",
    "DecideAvoidAction",
    "Deck",
    "EmptyDeckError",
    "EngineError",
    "GameConfig",
    "GameState",
    "IllegalActionError",
    "InvalidSelectionError",
    "NextRoomAction",
    "Outcome",
    "PlayerState",
    "Room",
    "StepResult",
    "Suit",
    "TurnPhase",
    "can_fight_with_weapon",
    "new_game",
    "replay",
    "step",
]
