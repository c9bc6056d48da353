from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from scoundrel.engine.actions import (
    Action,
    ChooseCardAction,
    ChooseCombatModeAction,
    DecideAvoidAction,
    NextRoomAction,
)
from scoundrel.engine.game import GameState, StepResult, step
from scoundrel.services.content import ContentService
from scoundrel.services.telemetry import TelemetryService

from .render import describe_event, render_game, render_tutorial

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]

INVALID_INPUT = "Invalid input. Please try again."


@dataclass
class ConsoleContext:
    content: ContentService
    read: ReadFn = input
    write: WriteFn = print
    telemetry: Optional[TelemetryService] = None


class ConsoleApp:
    """Drives one game from a line-based terminal.

    All rules live in the engine; this class only prompts, submits actions
    and prints what happened.
    """

    def __init__(self, ctx: ConsoleContext, state: GameState) -> None:
        self.ctx = ctx
        self.state = state

    def _ask(self, prompt: str) -> str:
        return self.ctx.read(prompt + "\n").strip().lower()

    def _show(self, lines: list[str]) -> None:
        for ln in lines:
            self.ctx.write(ln)

    def _submit(self, action: Action) -> StepResult:
        res = step(self.state, action)
        for ev in res.events:
            self._show(describe_event(ev))
        return res

    def offer_tutorial(self, show: Optional[bool]) -> None:
        if show is None:
            show = self._ask("Do you wish to see the tutorial? (y/N)") == "y"
        if not show:
            return
        tutorial = self.ctx.content.load_tutorial()
        self._show(render_tutorial(tutorial))
        self.ctx.read(tutorial.footer + "\n")

    def _avoid_decision(self) -> None:
        self._show(render_game(self.state))
        answer = self._ask("Do you wish to avoid this room? (y/N)")
        self._submit(DecideAvoidAction(avoid=answer == "y"))

    def _card_choice(self) -> None:
        answer = self._ask("Choose a card to interact with (enter the number):")
        if not answer.isdigit():
            self.ctx.write(INVALID_INPUT)
            return
        res = self._submit(ChooseCardAction(room_index=int(answer) - 1))
        if not res.ok:
            self.ctx.write(INVALID_INPUT)
            return
        if self.state.phase == "card_choice":
            self._show(render_game(self.state))

    def _combat_mode(self) -> None:
        answer = self._ask("Do you want to fight this monster with your weapon or barehanded? (w/B)")
        mode = ChooseCombatModeAction.weapon() if answer == "w" else ChooseCombatModeAction.barehanded()
        self._submit(mode)
        if self.state.phase == "card_choice":
            self._show(render_game(self.state))

    def _room_cleared(self) -> None:
        self.ctx.write(f"Cards remaining in the dungeon: {self.state.deck.remaining()}")
        self.ctx.read("Press Enter to proceed to the next room...\n")
        self._submit(NextRoomAction())
        if self.state.phase == "card_choice":
            self._show(render_game(self.state))

    def tick(self) -> None:
        phase = self.state.phase
        if phase == "avoid_decision":
            self._avoid_decision()
        elif phase == "card_choice":
            self._card_choice()
        elif phase == "combat_mode":
            self._combat_mode()
        elif phase == "room_cleared":
            self._room_cleared()

    def run(self, show_tutorial: Optional[bool] = None) -> int:
        telemetry = self.ctx.telemetry
        try:
            self.offer_tutorial(show_tutorial)
            if telemetry is not None:
                telemetry.record_game_started(self.state)
            if self.state.phase == "card_choice":
                self._show(render_game(self.state))
            while not self.state.is_game_over:
                self.tick()
        except EOFError:
            self.ctx.write("Input closed, leaving the dungeon.")
            return 1

        if telemetry is not None:
            telemetry.record_game_ended(self.state)
        return 0
