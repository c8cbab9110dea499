"""The mutable 52-card deck."""

from __future__ import annotations

import random
from typing import Any, Callable, Iterator, MutableSequence, TypeVar

from .cards import Card, iter_full_deck, rank_then_suit
from .logging_utils import get_logger

__all__ = ["Deck", "fisher_yates"]

logger = get_logger(__name__)

T = TypeVar("T")


def fisher_yates(items: MutableSequence[T], rng: random.Random) -> None:
    """Apply one in-place Fisher–Yates pass to ``items``.

    For i from n-1 down to 1, pick j uniformly from [0, i] and swap.
    """

    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


class Deck:
    """A standard deck of cards kept as a stack.

    The top of the deck is the end of the internal list, so a fresh deck
    deals the canonical order back to front (Ace of Spades first).
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def new_deck(cls, *, seed: int | None = None, rng: random.Random | None = None) -> "Deck":
        """Create a full, ordered deck.

        ``seed`` builds a dedicated generator; ``rng`` shares an existing one.
        """

        if rng is None and seed is not None:
            rng = random.Random(seed)
        return cls(rng=rng)

    @property
    def remaining_cards(self) -> int:
        return len(self._cards)

    @property
    def empty(self) -> bool:
        return not self._cards

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the remaining cards, bottom first."""

        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """Iterate from the top of the deck down without removing cards."""

        return reversed(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining_cards={len(self._cards)})"

    def peek(self) -> Card | None:
        return self._cards[-1] if self._cards else None

    def next_card(self) -> Card | None:
        """Remove and return the top card, or ``None`` once the deck is empty."""

        if not self._cards:
            return None
        return self._cards.pop()

    def draw(self, count: int) -> list[Card]:
        """Draw up to ``count`` cards from the top, first drawn first.

        Non-positive counts draw nothing; counts above the remaining
        total drain the deck.
        """

        if count <= 0:
            return []
        take = min(count, len(self._cards))
        drawn = self._cards[len(self._cards) - take:]
        del self._cards[len(self._cards) - take:]
        drawn.reverse()
        logger.debug("drew %d card(s), %d remaining", len(drawn), len(self._cards))
        return drawn

    def take_all(self) -> list[Card]:
        """Remove and return every remaining card in draw order."""

        return self.draw(len(self._cards))

    def reset(self) -> None:
        """Refill with the 52 canonical cards, discarding current contents."""

        self._cards = list(iter_full_deck())
        logger.debug("deck reset to %d cards", len(self._cards))

    def sort(self, key: Callable[[Card], Any] | None = None) -> None:
        """Sort the remaining cards so the greatest card ends up on top.

        ``key`` defaults to rank then suit. Drawing after a sort yields
        descending order; reverse the draw to read the cards ascending.
        Comparator functions can be passed through ``functools.cmp_to_key``.
        """

        self._cards.sort(key=key or rank_then_suit)

    def sort_by_rank_then_suit(self) -> None:
        self.sort()

    def shuffle(self, times: int, *, on_pass: Callable[[int, int], None] | None = None) -> None:
        """Shuffle the remaining cards ``times`` times in sequence.

        Each pass is an independent Fisher–Yates permutation of the order
        left by the previous pass. ``on_pass(pass_number, times)`` is called
        after every pass. Non-positive ``times`` leaves the deck untouched.
        """

        for pass_number in range(1, times + 1):
            fisher_yates(self._cards, self._rng)
            logger.debug("shuffle pass %d of %d", pass_number, times)
            if on_pass is not None:
                on_pass(pass_number, times)
