from __future__ import annotations


from .actions import (
    Action,
    ChooseCardAction,
    ChooseCombatModeAction,
    DecideAvoidAction,
    NextRoomAction,
)
from .game import GameState, PlayerState
from .types import Card


def _card_to_dict(c: Card | None) -> dict[str, object] | None:
    if c is None:
        return None
    return {"suit": c.suit, "rank": c.rank}


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, DecideAvoidAction):
        return {"type": "avoid", "avoid": a.avoid}
    if isinstance(a, ChooseCardAction):
        return {"type": "choose_card", "room_index": a.room_index}
    if isinstance(a, ChooseCombatModeAction):
        return {"type": "combat_mode", "mode": a.mode}
    if isinstance(a, NextRoomAction):
        return {"type": "next_room"}
    # should be unreachable
    return {"type": "unknown"}


def _player_to_dict(p: PlayerState) -> dict[str, object]:
    return {
        "health": p.health,
        "max_health": p.max_health,
        "equipped_weapon": _card_to_dict(p.equipped_weapon),
        "last_slain_monster_value": p.last_slain_monster_value,
        "health_potion_used": p.health_potion_used,
    }


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current game state."""
    return {
        "seed": state.seed,
        "turn": state.turn,
        "phase": state.phase,
        "previous_room_avoided": state.previous_room_avoided,
        "is_game_over": state.is_game_over,
        "outcome": state.outcome,
        "pending_card_index": state.pending_card_index,
        "player": _player_to_dict(state.player),
        "deck": [_card_to_dict(c) for c in state.deck.cards()],
        "room": [_card_to_dict(c) for c in state.room.cards()],
        "discard": [_card_to_dict(c) for c in state.discard],
        "action_log": [action_to_dict(a) for a in state.action_log],
    }
