"""Command-line interface: equity, hand evaluation and pot odds."""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from snapcall.errors import SnapCallError
from snapcall.equity import EquityCalculator, EquityConfig, prepare_spot
from snapcall.game.board import street_name
from snapcall.game.cards import format_cards, parse_cards
from snapcall.game.evaluator import describe_hand
from snapcall.game.ranges import canonical_name, combo_to_string
from snapcall.odds import pot_odds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snapcall",
        description="Texas Hold'em equity calculator",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    equity = subparsers.add_parser("equity", help="Calculate equity for hero vs villains")
    equity.add_argument(
        "hero",
        help="Hero hole cards or a single known card (e.g., 'AhAd' or 'Ah')",
    )
    equity.add_argument(
        "villains",
        nargs="*",
        help="Villain hands: cards, one card, range (e.g., 'TT+,AKs') or '' for unknown",
    )
    equity.add_argument(
        "-b", "--board",
        default="",
        help="Board cards (e.g., 'AsKhTd' or 'As Kh Td')",
    )
    equity.add_argument(
        "-r", "--random-villains",
        type=int,
        default=0,
        help="Add this many villains with unknown cards",
    )
    equity.add_argument(
        "-i", "--iterations",
        type=int,
        default=10000,
        help="Enumeration budget / Monte Carlo iterations (default: 10000)",
    )
    equity.add_argument(
        "--seed",
        type=int,
        help="Random seed for Monte Carlo runs",
    )
    equity.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    evaluate = subparsers.add_parser("eval", help="Name the hand made by 5-7 cards")
    evaluate.add_argument("cards", help="Cards to evaluate (e.g., 'As Ks Qs Js Ts')")

    odds = subparsers.add_parser("pot-odds", help="Break-even equity for a call")
    odds.add_argument(
        "-p", "--pot",
        type=float,
        required=True,
        help="Pot before the opponent's bet",
    )
    odds.add_argument(
        "-b", "--bet",
        type=float,
        required=True,
        help="Opponent's bet",
    )
    odds.add_argument(
        "-c", "--call",
        type=float,
        help="Amount to call (default: the bet)",
    )

    return parser


def run_equity(args, console: Console) -> int:
    villains = list(args.villains) + [""] * args.random_villains
    calculator = EquityCalculator(config=EquityConfig(seed=args.seed))

    spot = prepare_spot(args.board, args.hero, villains)
    result = calculator.estimate_spot(spot, args.iterations)

    if args.json:
        console.print_json(json.dumps(result.to_dict()))
        return 0

    if spot.board:
        console.print(f"[bold]Board:[/] {format_cards(spot.board)} ({street_name(spot.board)})")
    else:
        console.print("[bold]Board:[/] (preflop)")
    console.print()

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Player", style="white")
    table.add_column("Hand")
    table.add_column("Equity", justify="right")

    for i, (spec, equity) in enumerate(zip(spot.players, result.equities)):
        name = "Hero" if i == 0 else f"Villain {i}"
        hand = str(spec)
        if spec.is_range and spec.combos:
            hand += f" e.g. {combo_to_string(spec.combos[0])} ({canonical_name(spec.combos[0])})"
        style = "green" if equity == max(result.equities) else "white"
        table.add_row(name, hand, f"[{style}]{equity:.2f}%[/]")

    console.print(table)
    console.print(
        f"\n[dim]{result.mode.value}: {result.samples} samples "
        f"(budget {result.iteration_budget}, estimate {result.enum_estimate})[/]"
    )
    return 0


def run_eval(args, console: Console) -> int:
    cards = parse_cards(args.cards)
    console.print(f"[bold]Hand:[/] {format_cards(cards)}")
    console.print(f"[bold]Type:[/] {describe_hand(cards)}")
    return 0


def run_pot_odds(args, console: Console) -> int:
    odds = pot_odds(args.pot, args.bet, args.call)
    console.print("[bold]Pot Odds[/]")
    console.print(f"  Current pot: {odds.pot:g}")
    console.print(f"  Opponent bet: {odds.bet:g}")
    console.print(f"  Amount to call: {odds.call:g}")
    console.print(f"  Total pot after call: {odds.total_pot:g}")
    console.print(f"\nYou need at least [bold]{odds.required_equity:.2f}%[/] equity to break even")
    return 0


COMMANDS = {
    "equity": run_equity,
    "eval": run_eval,
    "pot-odds": run_pot_odds,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return COMMANDS[args.command](args, console)
    except SnapCallError as e:
        console.print(f"[red]{e.kind}: {e}[/]")
        return 1
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
