from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple


class HandCategory(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        return self.name.lower()


class TieBreak(str, Enum):
    DESCENDING = "descending"
    GROUPED = "grouped"


@dataclass(frozen=True)
class RankingConfig:
    # DESCENDING compares raw values high-to-low; GROUPED ranks pairs/trips ahead of kickers.
    tiebreak: TieBreak = TieBreak.DESCENDING
    reject_duplicates: bool = True


DEFAULT_CONFIG = RankingConfig()


@dataclass(frozen=True, order=True)
class HandRank:
    """Category plus tiebreak key. Field order gives the comparison order."""

    category: HandCategory
    tiebreak: Tuple[int, ...]

    def describe(self) -> str:
        return self.category.label
