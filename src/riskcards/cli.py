"""
Command-line interface for inspecting the card-exchange rules.

Usage examples (after installing in editable mode):

    python -m riskcards.cli schedule --count 8
    python -m riskcards.cli draws --count 10000 --wild-chance 0.05 --seed 1
    python -m riskcards.cli session --draws 30 --seed 7
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional

from .cards import KIND_NAMES, CardKind
from .progression import CANONICAL_SEED_A, CANONICAL_SEED_B, bonus_schedule
from .simulate import kind_frequencies, simulate_draws, simulate_session


def _add_schedule_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "schedule",
        help="Print the trade bonus progression.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=6,
        help="Number of trades to list.",
    )
    parser.add_argument(
        "--seed-a",
        type=int,
        default=CANONICAL_SEED_A,
        help="Bonus of the first trade.",
    )
    parser.add_argument(
        "--seed-b",
        type=int,
        default=CANONICAL_SEED_B,
        help="Bonus of the second trade.",
    )
    parser.set_defaults(func=_cmd_schedule)


def _cmd_schedule(args: argparse.Namespace) -> None:
    values = bonus_schedule(args.count, seed_a=args.seed_a, seed_b=args.seed_b)
    for i, bonus in enumerate(values, start=1):
        print(f"trade {i}: {bonus}")


def _add_draws_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "draws",
        help="Draw random cards and report how often each kind came up.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1000,
        help="Number of cards to draw.",
    )
    parser.add_argument(
        "--wild-chance",
        type=float,
        default=0.0,
        help="Probability that a drawn card is Wild (0 disables Wild).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for reproducibility.",
    )
    parser.set_defaults(func=_cmd_draws)


def _cmd_draws(args: argparse.Namespace) -> None:
    counts = simulate_draws(args.count, wild_chance=args.wild_chance, seed=args.seed)
    freqs = kind_frequencies(counts)
    for kind in CardKind:
        print(f"{KIND_NAMES[kind]:<10} {int(counts[kind]):>8} ({freqs[kind]:.3f})")


def _add_session_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "session",
        help="Run a greedy single-player draw-and-trade session.",
    )
    parser.add_argument(
        "--draws",
        type=int,
        default=30,
        help="Number of cards drawn during the session.",
    )
    parser.add_argument(
        "--wild-chance",
        type=float,
        default=0.0,
        help="Probability that a drawn card is Wild (0 disables Wild).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for reproducibility.",
    )
    parser.set_defaults(func=_cmd_session)


def _cmd_session(args: argparse.Namespace) -> None:
    trades = simulate_session(args.draws, wild_chance=args.wild_chance, seed=args.seed)
    for n, trade in enumerate(trades, start=1):
        cards = ", ".join(str(c) for c in trade.cards)
        print(f"[trade {n}] after draw {trade.draw_index + 1}: {cards} -> {trade.bonus} troops")
    total = sum(t.bonus for t in trades)
    print(f"{len(trades)} trade(s), {total} troops in total")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="riskcards", description="Territory card exchange CLI.")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log engine activity at DEBUG level.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_schedule_parser(subparsers)
    _add_draws_parser(subparsers)
    _add_session_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
