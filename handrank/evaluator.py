from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .cards import Card, CardLike, as_cards
from .errors import InvalidHand, WrongHandSize
from .models import DEFAULT_CONFIG, HandCategory, HandRank, RankingConfig, TieBreak

HAND_SIZE = 5
WHEEL = frozenset({14, 2, 3, 4, 5})


def classify(hand: Sequence[CardLike], config: Optional[RankingConfig] = None) -> HandRank:
    """Return the category and tiebreak key of exactly five cards. Higher is better."""
    config = config or DEFAULT_CONFIG
    cards = as_cards(hand)
    if len(cards) != HAND_SIZE:
        raise WrongHandSize(len(cards))
    if config.reject_duplicates:
        ensure_unique(cards)
    return _evaluate_five(cards, config)


def evaluate_hand(hand: Sequence[CardLike], config: Optional[RankingConfig] = None) -> int:
    """Category number only, 1 (high card) through 10 (royal flush)."""
    return int(classify(hand, config).category)


def ensure_unique(cards: Sequence[Card]) -> None:
    seen = set()
    for card in cards:
        if card in seen:
            raise InvalidHand(card.label)
        seen.add(card)


def _evaluate_five(cards: Sequence[Card], config: RankingConfig) -> HandRank:
    values = sorted((card.value for card in cards), reverse=True)

    rank_count: Dict[int, int] = {}
    suit_count: Dict[str, int] = {}
    for card in cards:
        rank_count[card.value] = rank_count.get(card.value, 0) + 1
        suit_count[card.suit] = suit_count.get(card.suit, 0) + 1

    flush = _has_count(suit_count, 5)
    straight = _is_straight(values)
    pairs = sum(1 for count in rank_count.values() if count == 2)

    if flush and straight and 14 in values and 10 in values:
        category = HandCategory.ROYAL_FLUSH
    elif flush and straight:
        category = HandCategory.STRAIGHT_FLUSH
    elif _has_count(rank_count, 4):
        category = HandCategory.FOUR_OF_A_KIND
    elif _has_count(rank_count, 3) and _has_count(rank_count, 2):
        category = HandCategory.FULL_HOUSE
    elif flush:
        category = HandCategory.FLUSH
    elif straight:
        category = HandCategory.STRAIGHT
    elif _has_count(rank_count, 3):
        category = HandCategory.THREE_OF_A_KIND
    elif pairs == 2:
        category = HandCategory.TWO_PAIR
    elif pairs == 1:
        category = HandCategory.ONE_PAIR
    else:
        category = HandCategory.HIGH_CARD

    if config.tiebreak is TieBreak.GROUPED:
        tiebreak = _grouped_tiebreak(category, values, rank_count)
    else:
        tiebreak = tuple(values)
    return HandRank(category, tiebreak)


def _has_count(counts: Dict, multiplicity: int) -> bool:
    for count in counts.values():
        if count == multiplicity:
            return True
    return False


def _is_straight(values: Sequence[int]) -> bool:
    unique = sorted(set(values))
    if WHEEL.issubset(unique):  # Ace low
        return True
    for idx in range(len(unique) - 4):
        window = unique[idx : idx + 5]
        if window == list(range(window[0], window[0] + 5)):
            return True
    return False


def _straight_high(values: Sequence[int]) -> int:
    if set(values) == WHEEL:
        return 5
    return max(values)


def _grouped_tiebreak(category: HandCategory, values: List[int], rank_count: Dict[int, int]) -> Tuple[int, ...]:
    if category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH, HandCategory.ROYAL_FLUSH):
        return (_straight_high(values),)
    ordered = sorted(rank_count.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return tuple(value for value, _ in ordered)
