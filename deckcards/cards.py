"""Card abstractions and helpers for a standard 52-card deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterator

__all__ = ["Suit", "Rank", "Card", "iter_full_deck", "rank_then_suit", "DECK_SIZE"]


class Suit(str, Enum):
    """Enumeration of the four suits, declared in ascending order."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def from_code(cls, code: str) -> "Suit":
        try:
            return cls(code.upper())
        except ValueError:
            raise ValueError(f"invalid suit code '{code}'") from None


class Rank(str, Enum):
    """Enumeration of the thirteen ranks, declared from Two up to Ace."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return ranks in ascending order."""

        return tuple(cls)

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def from_code(cls, code: str) -> "Rank":
        try:
            return cls(code.upper())
        except ValueError:
            raise ValueError(f"invalid rank code '{code}'") from None


RANK_TO_IDX: Final[dict[Rank, int]] = {rank: idx for idx, rank in enumerate(Rank)}
SUIT_TO_IDX: Final[dict[Suit, int]] = {suit: idx for idx, suit in enumerate(Suit)}
DECK_SIZE: Final[int] = len(Rank) * len(Suit)


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single playing card.

    Cards compare by rank first and suit second, both in declaration order.
    """

    rank: Rank
    suit: Suit

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a short code such as ``"AS"`` or ``"10h"``."""

        code = code.strip()
        if len(code) < 2:
            raise ValueError(f"invalid card code '{code}'")
        return cls(rank=Rank.from_code(code[:-1]), suit=Suit.from_code(code[-1]))

    @property
    def sort_key(self) -> tuple[int, int]:
        return RANK_TO_IDX[self.rank], SUIT_TO_IDX[self.suit]

    def short(self) -> str:
        """Return the compact label, rank code followed by suit code."""

        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.label} of {self.suit.label}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key >= other.sort_key


def iter_full_deck() -> Iterator[Card]:
    """Yield all 52 cards in canonical order, suits outer and ranks inner."""

    for suit in Suit:
        for rank in Rank.ordered():
            yield Card(rank=rank, suit=suit)


def rank_then_suit(card: Card) -> tuple[int, int]:
    """Default sort key: rank ascending, ties broken by suit."""

    return card.sort_key
