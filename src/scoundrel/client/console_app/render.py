from __future__ import annotations

from typing import Mapping

from scoundrel.engine.game import GameState
from scoundrel.engine.types import CATEGORY_LABELS, Card
from scoundrel.services.content import Tutorial

TITLE_BAR = "========== SCOUNDREL =========="


def weapon_label(state: GameState) -> str:
    p = state.player
    if p.equipped_weapon is None:
        return "None"
    label = p.equipped_weapon.name
    if p.last_slain_monster_value is not None:
        label += f" (< {p.last_slain_monster_value})"
    return label


def room_line(position: int, card: Card) -> str:
    """`position` is 1-based, as typed by the player."""
    return f"{position}. {card.name} | Type: {CATEGORY_LABELS[card.category]} | Value: {card.value}"


def render_game(state: GameState) -> list[str]:
    lines = [
        TITLE_BAR,
        "",
        f"Health          : {state.player.health}/{state.player.max_health}",
        f"Equipped Weapon : {weapon_label(state)}",
        f"Dungeon Cards   : {state.deck.remaining()}",
        "",
        "---- Current Room ----",
    ]
    for i, card in enumerate(state.room.cards()):
        lines.append(room_line(i + 1, card))
    lines.append("----------------------")
    return lines


def render_tutorial(tutorial: Tutorial) -> list[str]:
    lines = [f"********** {tutorial.title} **********", ""]
    for section in tutorial.sections:
        lines.append(f"{section.title}:")
        lines.extend(f"  - {ln}" if not ln.startswith(" ") else f"  {ln}" for ln in section.lines)
        lines.append("")
    return lines


def _combat_lines(event: Mapping[str, object]) -> list[str]:
    if event.get("mode") == "weapon":
        how = f"Fought with weapon: {event.get('weapon')}"
    elif event.get("forced"):
        how = "Fighting barehanded!"
    else:
        how = "Fought barehanded"
    return [
        "--- Combat Result ---",
        how,
        f"Monster: {event.get('card')} (Value: {event.get('value')})",
        f"Damage Taken: {event.get('damage')}",
        "---------------------",
    ]


def describe_event(event: Mapping[str, object]) -> list[str]:
    """Turn one engine event into the console messages shown for it."""
    t = event.get("type")
    if t == "CARD_CHOSEN":
        return [f"Interacting with {event.get('card')}..."]
    if t == "HEALED":
        return [
            f"Healed for {event.get('amount')} points "
            f"(Health: {event.get('health_before')} -> {event.get('health')})."
        ]
    if t == "POTION_WASTED":
        return ["Health potion already used this turn! Discarding card."]
    if t == "WEAPON_DISCARDED":
        return [f"Discarding previous weapon: {event.get('card')}."]
    if t == "WEAPON_EQUIPPED":
        return [f"Equipped new weapon: {event.get('card')}."]
    if t == "MONSTER_FOUGHT":
        return _combat_lines(event)
    if t == "ROOM_AVOIDED":
        return ["Room avoided!"]
    if t == "ROOM_CLEARED":
        return ["Room cleared!"]
    if t == "GAME_ENDED":
        if event.get("outcome") == "lost":
            return ["Player died! Game over!"]
        return ["Dungeon cleared! You win!"]
    # GAME_STARTED, TURN_STARTED: the room display covers these
    return []
