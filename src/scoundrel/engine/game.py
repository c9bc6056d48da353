from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Literal, Sequence

from .actions import (
    Action,
    ChooseCardAction,
    ChooseCombatModeAction,
    DecideAvoidAction,
    NextRoomAction,
)
from .deck import Deck, Room
from .errors import IllegalActionError, InvalidSelectionError
from .types import Card, CombatMode, Outcome

Event = dict[str, object]

TurnPhase = Literal["avoid_decision", "card_choice", "combat_mode", "room_cleared", "game_over"]


@dataclass(frozen=True)
class GameConfig:
    max_health: int = 20
    starting_health: int = 20
    room_size: int = 4


@dataclass
class PlayerState:
    health: int
    max_health: int
    equipped_weapon: Card | None = None
    last_slain_monster_value: int | None = None
    health_potion_used: bool = False

    def heal(self, amount: int) -> int:
        """Heal up to max_health. Returns the health actually restored."""
        before = self.health
        self.health = min(self.max_health, self.health + amount)
        return self.health - before

    def take_damage(self, amount: int) -> None:
        # Not clamped: the engine checks health <= 0 after each interaction
        self.health -= amount


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class GameState:
    config: GameConfig
    seed: int
    rng: random.Random
    deck: Deck
    room: Room
    player: PlayerState
    discard: list[Card] = field(default_factory=list)
    phase: TurnPhase = "room_cleared"
    turn: int = 0
    previous_room_avoided: bool = False
    is_game_over: bool = False
    outcome: Outcome | None = None
    pending_card_index: int | None = None  # monster awaiting a combat mode
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    def pending_card(self) -> Card | None:
        if self.pending_card_index is None:
            return None
        return self.room[self.pending_card_index]


def can_fight_with_weapon(player: PlayerState, monster: Card) -> bool:
    """True when the equipped weapon may be used against this monster.

    Once a weapon has slain a monster it can only be used on monsters whose
    value does not exceed the last one slain.
    """
    if player.equipped_weapon is None:
        return False
    last = player.last_slain_monster_value
    return last is None or monster.value <= last


def _require_phase(state: GameState, phase: TurnPhase, msg: str) -> None:
    if state.phase != phase:
        raise IllegalActionError(msg)


def _end_game(state: GameState, outcome: Outcome, reason: str) -> None:
    state.is_game_over = True
    state.outcome = outcome
    state.phase = "game_over"
    state.pending_card_index = None
    state.event_log.append({"type": "GAME_ENDED", "outcome": outcome, "reason": reason})


def _await_next_choice(state: GameState) -> None:
    room = state.room
    if room.size() > 1:
        if room.size() == state.config.room_size and not state.previous_room_avoided:
            state.phase = "avoid_decision"
        else:
            state.phase = "card_choice"
        return

    # Down to the carry-over card: the room is done
    state.previous_room_avoided = False
    state.phase = "room_cleared"
    state.event_log.append(
        {
            "type": "ROOM_CLEARED",
            "turn": state.turn,
            "carried_over": [c.name for c in room.cards()],
        }
    )


def _start_turn(state: GameState) -> None:
    state.player.health_potion_used = False
    state.turn += 1
    drawn = state.room.refill(state.deck)
    state.event_log.append(
        {
            "type": "TURN_STARTED",
            "turn": state.turn,
            "drawn": [c.name for c in drawn],
            "dungeon_remaining": state.deck.remaining(),
        }
    )
    if state.room.size() <= 1:
        # Nothing left to build a room from
        _end_game(state, "won", "dungeon_exhausted")
        return
    _await_next_choice(state)


def _after_interaction(state: GameState) -> None:
    if state.player.health <= 0:
        _end_game(state, "lost", "player_died")
        return
    if state.deck.remaining() == 0:
        _end_game(state, "won", "dungeon_cleared")
        return
    _await_next_choice(state)


def _drink_potion(state: GameState, card: Card) -> None:
    player = state.player
    if not player.health_potion_used:
        before = player.health
        healed = player.heal(card.value)
        player.health_potion_used = True
        state.event_log.append(
            {
                "type": "HEALED",
                "card": card.name,
                "amount": card.value,
                "healed": healed,
                "health_before": before,
                "health": player.health,
            }
        )
    else:
        state.event_log.append({"type": "POTION_WASTED", "card": card.name})
    state.discard.append(card)


def _equip_weapon(state: GameState, card: Card) -> None:
    player = state.player
    if player.equipped_weapon is not None:
        old = player.equipped_weapon
        state.discard.append(old)
        state.event_log.append({"type": "WEAPON_DISCARDED", "card": old.name})
    player.equipped_weapon = card
    player.last_slain_monster_value = None
    state.event_log.append({"type": "WEAPON_EQUIPPED", "card": card.name, "value": card.value})


def _fight(state: GameState, monster: Card, mode: CombatMode, forced: bool) -> None:
    player = state.player
    weapon = player.equipped_weapon
    if mode == "weapon":
        assert weapon is not None
        damage = max(0, monster.value - weapon.value)
        player.take_damage(damage)
        player.last_slain_monster_value = monster.value
    else:
        damage = monster.value
        player.take_damage(damage)
    state.discard.append(monster)
    state.event_log.append(
        {
            "type": "MONSTER_FOUGHT",
            "card": monster.name,
            "value": monster.value,
            "mode": mode,
            "forced": forced,
            "weapon": weapon.name if mode == "weapon" and weapon is not None else None,
            "damage": damage,
            "health": player.health,
        }
    )


def _decide_avoid(state: GameState, action: DecideAvoidAction) -> None:
    _require_phase(state, "avoid_decision", "This room cannot be avoided now.")
    if not action.avoid:
        state.phase = "card_choice"
        return

    avoided = state.room.clear()
    for card in avoided:
        state.deck.add_to_bottom(card)
    state.previous_room_avoided = True
    state.phase = "room_cleared"
    state.event_log.append(
        {"type": "ROOM_AVOIDED", "turn": state.turn, "cards": [c.name for c in avoided]}
    )


def _choose_card(state: GameState, action: ChooseCardAction) -> None:
    if state.phase == "avoid_decision":
        raise IllegalActionError("Decide whether to avoid the room first.")
    _require_phase(state, "card_choice", "No card choice is pending.")
    idx = action.room_index
    if idx < 0 or idx >= state.room.size():
        raise InvalidSelectionError(f"Invalid room index: {idx}")

    card = state.room[idx]
    state.event_log.append({"type": "CARD_CHOSEN", "index": idx, "card": card.name})

    if card.category == "monster" and can_fight_with_weapon(state.player, card):
        # Card stays in the room until the combat mode is chosen
        state.pending_card_index = idx
        state.phase = "combat_mode"
        return

    state.room.remove_at(idx)
    if card.category == "health":
        _drink_potion(state, card)
    elif card.category == "weapon":
        _equip_weapon(state, card)
    else:
        _fight(state, card, "barehanded", forced=True)
    _after_interaction(state)


def _choose_combat_mode(state: GameState, action: ChooseCombatModeAction) -> None:
    _require_phase(state, "combat_mode", "No combat is pending.")
    if action.mode not in ("weapon", "barehanded"):
        raise IllegalActionError(f"Unknown combat mode: {action.mode!r}")
    assert state.pending_card_index is not None
    monster = state.room.remove_at(state.pending_card_index)
    state.pending_card_index = None
    _fight(state, monster, action.mode, forced=False)
    _after_interaction(state)


def _next_room(state: GameState, action: NextRoomAction) -> None:
    _require_phase(state, "room_cleared", "The current room is not finished.")
    _start_turn(state)


def step(state: GameState, action: Action) -> StepResult:
    """Apply a single action to the game state.

    Mutates `state` in place. Rejected actions leave the state untouched
    apart from the action log, so a replay of the same log ends up in the
    same place.
    """
    if state.is_game_over:
        return StepResult(ok=False, events=[], error="Game already ended.")

    state.action_log.append(action)
    start = len(state.event_log)

    try:
        if isinstance(action, DecideAvoidAction):
            _decide_avoid(state, action)
        elif isinstance(action, ChooseCardAction):
            _choose_card(state, action)
        elif isinstance(action, ChooseCombatModeAction):
            _choose_combat_mode(state, action)
        elif isinstance(action, NextRoomAction):
            _next_room(state, action)
        else:
            raise IllegalActionError("Unknown action.")
    except (IllegalActionError, InvalidSelectionError) as e:
        return StepResult(ok=False, events=[], error=str(e))

    return StepResult(ok=True, events=state.event_log[start:])


def new_game(
    seed: int,
    config: GameConfig | None = None,
    cards: Sequence[Card] | None = None,
    shuffle: bool = True,
) -> GameState:
    """Create a game and start its first turn.

    `cards` overrides the standard 48-card dungeon (top first); pass
    `shuffle=False` to keep that order.
    """
    cfg = config or GameConfig()
    rng = random.Random(seed)
    deck = Deck(cards) if cards is not None else Deck.standard()
    if shuffle:
        deck.shuffle(rng)

    state = GameState(
        config=cfg,
        seed=seed,
        rng=rng,
        deck=deck,
        room=Room(capacity=cfg.room_size),
        player=PlayerState(health=cfg.starting_health, max_health=cfg.max_health),
    )
    state.event_log.append({"type": "GAME_STARTED", "seed": seed, "dungeon_size": deck.remaining()})
    _start_turn(state)
    return state


def replay(
    seed: int,
    actions: Iterable[Action],
    config: GameConfig | None = None,
    cards: Sequence[Card] | None = None,
    shuffle: bool = True,
) -> GameState:
    state = new_game(seed=seed, config=config, cards=cards, shuffle=shuffle)
    for a in actions:
        step(state, a)
        if state.is_game_over:
            break
    return state
