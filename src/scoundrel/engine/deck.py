from __future__ import annotations

from typing import Iterable, Protocol

from .errors import EmptyDeckError
from .types import Card, build_dungeon_cards


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Deck:
    """The dungeon: index 0 is the top (next draw), the end is the bottom."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    @staticmethod
    def standard() -> "Deck":
        return Deck(build_dungeon_cards())

    def shuffle(self, rng: RandomSource) -> None:
        # Fisher-Yates, walking down from the last index
        items = self._cards
        for i in range(len(items) - 1, 0, -1):
            j = rng.randrange(i + 1)
            items[i], items[j] = items[j], items[i]

    def draw(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty dungeon.")
        return self._cards.pop(0)

    def add_to_bottom(self, card: Card) -> None:
        self._cards.append(card)

    def remaining(self) -> int:
        return len(self._cards)

    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)


class Room:
    """The cards currently laid out in front of the player, in selection order."""

    def __init__(self, capacity: int = 4, cards: Iterable[Card] = ()) -> None:
        self.capacity = capacity
        self._cards: list[Card] = list(cards)
        if len(self._cards) > capacity:
            raise ValueError(f"A room holds at most {capacity} cards.")

    def refill(self, deck: Deck) -> list[Card]:
        """Draw until the room is full or the dungeon runs out.

        Returns the newly drawn cards (possibly fewer than needed).
        """
        drawn: list[Card] = []
        while len(self._cards) < self.capacity and deck.remaining() > 0:
            card = deck.draw()
            self._cards.append(card)
            drawn.append(card)
        return drawn

    def remove_at(self, index: int) -> Card:
        if index < 0 or index >= len(self._cards):
            raise IndexError(f"Room index out of range: {index}")
        return self._cards.pop(index)

    def clear(self) -> list[Card]:
        removed = self._cards
        self._cards = []
        return removed

    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]
