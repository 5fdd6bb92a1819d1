import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .cards import Card, cards_to_labels, parse_cards
from .errors import HandRankError
from .evaluator import classify
from .models import RankingConfig, TieBreak
from .search import best_hand_from, compare_hands

LOGGER = logging.getLogger("handrank")

DEMO_HAND_A = "2H 3D 5S 9C KD"
DEMO_HAND_B = "2C 3H 4S 8C AH"
DEMO_HOLE = "2H 3D"
DEMO_BOARD = "5S 9C KD 2C 3H"


def _cards(tokens: Sequence[str]) -> List[Card]:
    # Accept both `AH KH` and a single quoted "AH KH".
    return parse_cards(" ".join(tokens))


def _format_rank(cards: Sequence[Card], config: RankingConfig) -> str:
    rank = classify(cards, config)
    return f"{' '.join(cards_to_labels(cards))}: {rank.describe()} ({int(rank.category)}) {list(rank.tiebreak)}"


def _winner(result: int) -> str:
    if result > 0:
        return "first hand wins"
    if result < 0:
        return "second hand wins"
    return "tie"


def run_classify(args: argparse.Namespace, config: RankingConfig) -> None:
    print(_format_rank(_cards(args.cards), config))


def run_compare(args: argparse.Namespace, config: RankingConfig) -> None:
    hand_a = parse_cards(args.hand_a)
    hand_b = parse_cards(args.hand_b)
    result = compare_hands(hand_a, hand_b, config)
    print(_format_rank(hand_a, config))
    print(_format_rank(hand_b, config))
    print(f"compare: {result} ({_winner(result)})")


def run_best(args: argparse.Namespace, config: RankingConfig) -> None:
    best = best_hand_from(_cards(args.hole), _cards(args.board), config)
    print(f"best hand: {_format_rank(best, config)}")


def run_demo(config: RankingConfig) -> None:
    hand_a = parse_cards(DEMO_HAND_A)
    hand_b = parse_cards(DEMO_HAND_B)
    print(f"hand 1: {_format_rank(hand_a, config)}")
    print(f"hand 2: {_format_rank(hand_b, config)}")
    print(f"compare hands: {compare_hands(hand_a, hand_b, config)}")

    best = best_hand_from(parse_cards(DEMO_HOLE), parse_cards(DEMO_BOARD), config)
    print(f"best hand: {_format_rank(best, config)}")
    print(f"best vs hand 1: {compare_hands(best, hand_a, config)}")
    print(f"best vs hand 2: {compare_hands(best, hand_b, config)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="handrank", description="Rank poker hands and find the best five cards")
    parser.add_argument(
        "--tiebreak",
        choices=[mode.value for mode in TieBreak],
        default=TieBreak.DESCENDING.value,
        help="descending compares raw card values; grouped compares pairs and trips before kickers",
    )
    parser.add_argument("--allow-duplicates", action="store_true", help="Count repeated cards instead of rejecting them")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    sub = parser.add_subparsers(dest="command")

    classify_cmd = sub.add_parser("classify", help="Rank exactly five cards")
    classify_cmd.add_argument("cards", nargs="+")

    compare_cmd = sub.add_parser("compare", help="Compare two five-card hands")
    compare_cmd.add_argument("hand_a", help='Quoted hand, e.g. "AH KH QH JH TH"')
    compare_cmd.add_argument("hand_b")

    best_cmd = sub.add_parser("best", help="Best five cards from hole and board cards")
    best_cmd.add_argument("--hole", nargs="+", required=True)
    best_cmd.add_argument("--board", nargs="+", required=True)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    config = RankingConfig(tiebreak=TieBreak(args.tiebreak), reject_duplicates=not args.allow_duplicates)
    try:
        if args.command == "classify":
            run_classify(args, config)
        elif args.command == "compare":
            run_compare(args, config)
        elif args.command == "best":
            run_best(args, config)
        else:
            run_demo(config)
    except HandRankError as exc:
        LOGGER.debug("rejected input: %s", exc.code)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
