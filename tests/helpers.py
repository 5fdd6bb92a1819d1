from __future__ import annotations

from typing import List, Tuple

from handrank.cards import Card, parse_cards

# One sample per category, lowest first.
CATEGORY_SAMPLES: List[Tuple[int, str]] = [
    (1, "AS KD JH 9C 4D"),  # high card
    (2, "6H 6S QH 8D 4C"),  # one pair
    (3, "7H 7D 4S 4C AS"),  # two pair
    (4, "8H 8D 8S QD JS"),  # three of a kind
    (5, "9H 8D 7C 6S 5H"),  # straight
    (6, "AH JH 9H 6H 2H"),  # flush
    (7, "QC QD QS 9H 9S"),  # full house
    (8, "AS AH AD AC KD"),  # four of a kind
    (9, "9H 8H 7H 6H 5H"),  # straight flush
    (10, "TH JH QH KH AH"),  # royal flush
]


def hand(labels: str) -> List[Card]:
    """Shorthand: hand("AH KH QH JH TH") -> [Card(...), ...]"""
    return parse_cards(labels)


def as_tuple(labels: str) -> Tuple[Card, ...]:
    return tuple(parse_cards(labels))
