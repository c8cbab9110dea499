"""Typer entry-point wiring for the deckcards CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from ..config import DeckConfig, load_config
from ..deck import Deck
from ..logging_utils import get_logger, setup_logging
from .prompts import parse_count, parse_yes
from .render import deck_table, print_cards

app = typer.Typer(add_completion=False, rich_markup_mode="rich", help="Shuffle, draw and sort a 52-card deck.")
console = Console()
logger = get_logger(__name__)

BANNER = "*" * 10


def _config(ctx: typer.Context) -> DeckConfig:
    config = ctx.obj
    if not isinstance(config, DeckConfig):  # pragma: no cover - commands always run under the callback
        config = load_config()
    return config


def _ask(prompt: str, answer: str | None) -> str | None:
    """Return ``answer`` when given on the command line, otherwise prompt for it."""

    if answer is not None:
        console.print(f"{prompt}{answer}", markup=False, highlight=False)
        return answer
    try:
        return console.input(prompt, markup=False)
    except EOFError:
        console.print()
        return None


def _report_pass(pass_number: int, times: int) -> None:
    console.print(f"Shuffling {pass_number}/{times}...", highlight=False)


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level (defaults to $DECKCARDS_LOG_LEVEL)."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (defaults to $DECKCARDS_SEED)."),
) -> None:
    try:
        config = load_config().with_overrides(log_level=log_level, seed=seed)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="DECKCARDS_SEED") from exc
    setup_logging(config.log_level)
    logger.debug("running with %s", config)
    ctx.obj = config


@app.command()
def demo(
    ctx: typer.Context,
    shuffles: str | None = typer.Option(None, help="Answer for the shuffle prompt."),
    draw: str | None = typer.Option(None, help="Answer for the draw prompt."),
    sort: bool | None = typer.Option(None, "--sort/--no-sort", help="Answer for the sort prompt."),
) -> None:
    """Walk through shuffling, drawing, dealing, resetting and sorting a deck."""

    config = _config(ctx)
    console.print(BANNER)
    console.print("Part 1 - Create a new deck, shuffle, then deal out all the cards", highlight=False)

    deck = Deck.new_deck(seed=config.seed)

    shuffle_count = parse_count(_ask("Enter number of times to shuffle: ", shuffles))
    if shuffle_count > 0:
        deck.shuffle(shuffle_count, on_pass=_report_pass)
    else:
        console.print("Invalid input. Deck will not be shuffled.")

    draw_count = parse_count(_ask("Enter number of cards to draw now (0 to skip): ", draw))
    if draw_count > 0:
        drawn = deck.draw(draw_count)
        console.print(f"Drew {len(drawn)} card(s):", highlight=False)
        print_cards(drawn, console)
    else:
        console.print("No cards drawn.")

    print_cards(deck.take_all(), console)

    deck.reset()

    sort_answer = None if sort is None else ("Y" if sort else "N")
    if parse_yes(_ask("Do you want to sort the deck by rank then suit? (Y/N): ", sort_answer)):
        deck.sort_by_rank_then_suit()
        console.print("Deck sorted by rank then suit.")
    else:
        console.print("Deck not sorted.")

    print_cards(deck.take_all(), console)

    console.print()
    console.print(BANNER)
    console.print()


@app.command()
def deal(
    ctx: typer.Context,
    count: int = typer.Option(5, min=0, help="Number of cards to draw."),
    shuffles: int = typer.Option(1, min=0, help="Shuffle passes before drawing."),
) -> None:
    """Shuffle a fresh deck and draw cards from the top."""

    config = _config(ctx)
    deck = Deck.new_deck(seed=config.seed)
    deck.shuffle(shuffles)
    print_cards(deck.draw(count), console)
    console.print(f"{deck.remaining_cards} card(s) remaining.", highlight=False)


@app.command("list")
def list_cards(
    sorted_: bool = typer.Option(False, "--sorted", help="List in rank-then-suit order instead of canonical order."),
    table: bool = typer.Option(False, "--table", help="Render a table with one column per suit."),
) -> None:
    """Print every card of a fresh deck from the bottom up."""

    deck = Deck.new_deck()
    if sorted_:
        deck.sort_by_rank_then_suit()
    cards = deck.take_all()
    cards.reverse()
    if table:
        console.print(deck_table(cards, title="Sorted deck" if sorted_ else "Canonical deck"))
    else:
        print_cards(cards, console)


def main() -> None:
    """Entry-point for ``python -m deckcards.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
