"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from ..cards import Card, Suit
from ..deck import Deck

_SUIT_SYMBOLS = {
    Suit.SPADES: ("♠", "cyan"),
    Suit.HEARTS: ("♥", "red"),
    Suit.DIAMONDS: ("♦", "magenta"),
    Suit.CLUBS: ("♣", "green"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    symbol, color = _SUIT_SYMBOLS[card.suit]
    return f"[{color}]{card.rank.value}{symbol}[/{color}]"


def card_line(card: Card) -> str:
    """Return the ``"{short} - {long}"`` line printed for every card."""

    return f"{card.short()} - {card}"


def print_cards(cards: Iterable[Card], console: Console) -> int:
    count = 0
    for card in cards:
        console.print(card_line(card), markup=False, highlight=False)
        count += 1
    return count


def print_all_cards(deck: Deck, console: Console) -> int:
    """Drain ``deck`` card by card, printing each one; returns the count."""

    count = 0
    while not deck.empty:
        card = deck.next_card()
        if card is not None:
            console.print(card_line(card), markup=False, highlight=False)
            count += 1
    return count


def deck_table(cards: Sequence[Card], *, title: str = "Deck") -> Table:
    """Return a table with one column per suit, cards listed in the given order."""

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    columns: dict[Suit, list[str]] = {suit: [] for suit in Suit}
    for card in cards:
        columns[card.suit].append(format_card(card))
    for suit in Suit:
        symbol, color = _SUIT_SYMBOLS[suit]
        table.add_column(f"[{color}]{suit.label} {symbol}[/{color}]", justify="center")
    depth = max((len(entries) for entries in columns.values()), default=0)
    for row in range(depth):
        table.add_row(*(entries[row] if row < len(entries) else "" for entries in columns.values()))
    return table
