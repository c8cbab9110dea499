"""Top-level package for the deckcards 52-card deck."""

from . import cards, deck
from .cards import Card, Rank, Suit
from .deck import Deck

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "cards",
    "deck",
]
