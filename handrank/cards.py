from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

from .errors import InvalidCardFormat

RANKS = "23456789TJQKA"
SUITS = "cdhs"
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANKS, start=2)}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANK_VALUE:
            raise InvalidCardFormat(f"Invalid rank: {self.rank}")
        if len(self.suit) != 1 or self.suit not in SUITS:
            raise InvalidCardFormat(f"Invalid suit: {self.suit}")

    @property
    def value(self) -> int:
        return RANK_VALUE[self.rank]

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    def __str__(self) -> str:
        return self.label


CardLike = Union[Card, str]


def rank_value(rank: str) -> int:
    try:
        return RANK_VALUE[rank.upper()]
    except (AttributeError, KeyError):
        raise InvalidCardFormat(f"Invalid rank: {rank}") from None


def parse_card(token: str) -> Card:
    if not isinstance(token, str) or len(token) != 2:
        raise InvalidCardFormat(f"Invalid card label: {token!r}")
    # "Ah", "AH" and "ah" all name the ace of hearts.
    return Card(token[0].upper(), token[1].lower())


def parse_cards(labels: Union[str, Sequence[str]]) -> List[Card]:
    """Parse card labels; a single string is split on whitespace."""
    if isinstance(labels, str):
        labels = labels.split()
    return [parse_card(label) for label in labels]


def as_cards(cards: Iterable[CardLike]) -> List[Card]:
    return [card if isinstance(card, Card) else parse_card(card) for card in cards]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]
