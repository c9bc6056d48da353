from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from scoundrel.engine.game import GameState


@dataclass
class TelemetryService:
    """JSON-lines record of played games, one event per line."""

    path: Path

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        rec = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "type": event_type,
            "payload": dict(payload),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def record_game_started(self, state: GameState) -> None:
        self.log("game_started", {"seed": state.seed, "dungeon_size": state.deck.remaining()})

    def record_game_ended(self, state: GameState) -> None:
        weapon = state.player.equipped_weapon
        self.log(
            "game_ended",
            {
                "seed": state.seed,
                "outcome": state.outcome,
                "turns": state.turn,
                "health": state.player.health,
                "dungeon_remaining": state.deck.remaining(),
                "weapon": weapon.name if weapon is not None else None,
                "actions": len(state.action_log),
            },
        )
