from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Suit = Literal["Hearts", "Diamonds", "Clubs", "Spades"]
CardCategory = Literal["health", "weapon", "monster"]
CombatMode = Literal["weapon", "barehanded"]
Outcome = Literal["won", "lost"]

SUITS: tuple[Suit, ...] = ("Hearts", "Diamonds", "Clubs", "Spades")
MIN_RANK = 2
MAX_RANK = 14  # Ace

RANK_NAMES: dict[int, str] = {
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
    10: "Ten",
    11: "Jack",
    12: "Queen",
    13: "King",
    14: "Ace",
}

CATEGORY_LABELS: dict[CardCategory, str] = {
    "health": "Health",
    "weapon": "Weapon",
    "monster": "Monster",
}


@dataclass(frozen=True)
class Card:
    """One playing card of the dungeon.

    Hearts are health potions, Diamonds are weapons, Clubs and Spades are
    monsters. The rank doubles as the card's heal, weapon or damage value.
    """

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if self.suit not in SUITS:
            raise ValueError(f"Unknown suit: {self.suit!r}")
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise ValueError(f"Rank out of range: {self.rank}")

    @property
    def value(self) -> int:
        return self.rank

    @property
    def category(self) -> CardCategory:
        if self.suit == "Hearts":
            return "health"
        if self.suit == "Diamonds":
            return "weapon"
        return "monster"

    @property
    def name(self) -> str:
        return f"{RANK_NAMES[self.rank]} of {self.suit}"

    def __str__(self) -> str:
        return self.name


HEALTH_RANK_CAP = 10  # no Hearts face cards or Ace


def build_dungeon_cards() -> list[Card]:
    """All 52 (suit, rank) pairs minus the Hearts face cards and Ace of Hearts: 48 cards."""
    cards: list[Card] = []
    for suit in SUITS:
        for rank in range(MIN_RANK, MAX_RANK + 1):
            if suit == "Hearts" and rank > HEALTH_RANK_CAP:
                continue
            cards.append(Card(suit=suit, rank=rank))
    return cards
