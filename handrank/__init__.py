"""Poker hand ranking: card parsing, five-card classification and best-hand search."""

from .cards import RANKS, SUITS, Card, cards_to_labels, parse_card, parse_cards, rank_value
from .errors import HandRankError, InsufficientCards, InvalidCardFormat, InvalidHand, WrongHandSize
from .evaluator import classify, evaluate_hand
from .models import HandCategory, HandRank, RankingConfig, TieBreak
from .search import best_hand, best_hand_from, combinations, compare_hands

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "cards_to_labels",
    "parse_card",
    "parse_cards",
    "rank_value",
    "classify",
    "evaluate_hand",
    "best_hand",
    "best_hand_from",
    "combinations",
    "compare_hands",
    "HandCategory",
    "HandRank",
    "RankingConfig",
    "TieBreak",
    "HandRankError",
    "InvalidCardFormat",
    "InvalidHand",
    "InsufficientCards",
    "WrongHandSize",
]
