from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar

from .cards import Card, CardLike, as_cards, cards_to_labels
from .errors import InsufficientCards
from .evaluator import HAND_SIZE, classify, ensure_unique
from .models import DEFAULT_CONFIG, HandRank, RankingConfig

LOGGER = logging.getLogger("handrank.search")

T = TypeVar("T")


def combinations(items: Sequence[T], k: int = HAND_SIZE) -> Iterator[Tuple[T, ...]]:
    """Yield every k-subset of ``items`` in lexicographic order of their positions."""
    n = len(items)
    if k < 0 or k > n:
        return
    indices = list(range(k))
    yield tuple(items[i] for i in indices)
    while True:
        # Rightmost index that can still move forward.
        for pos in reversed(range(k)):
            if indices[pos] != pos + n - k:
                break
        else:
            return
        indices[pos] += 1
        for follow in range(pos + 1, k):
            indices[follow] = indices[follow - 1] + 1
        yield tuple(items[i] for i in indices)


def best_hand(pool: Sequence[CardLike], config: Optional[RankingConfig] = None) -> Tuple[Card, ...]:
    """Return the strongest five-card subset of ``pool``; earliest subset wins ties."""
    config = config or DEFAULT_CONFIG
    cards = as_cards(pool)
    if len(cards) < HAND_SIZE:
        raise InsufficientCards(len(cards))
    if config.reject_duplicates:
        ensure_unique(cards)

    best: Optional[Tuple[Card, ...]] = None
    best_rank: Optional[HandRank] = None
    checked = 0
    for combo in combinations(cards):
        checked += 1
        rank = classify(combo, config)
        if best_rank is None or rank > best_rank:
            best, best_rank = combo, rank
    assert best is not None and best_rank is not None
    LOGGER.debug(
        "best of %d combinations: %s (%s %s)",
        checked,
        cards_to_labels(best),
        best_rank.describe(),
        list(best_rank.tiebreak),
    )
    return best


def best_hand_from(
    hole_cards: Sequence[CardLike],
    community_cards: Sequence[CardLike],
    config: Optional[RankingConfig] = None,
) -> Tuple[Card, ...]:
    pool: List[CardLike] = list(hole_cards) + list(community_cards)
    return best_hand(pool, config)


def compare_hands(
    hand_a: Sequence[CardLike],
    hand_b: Sequence[CardLike],
    config: Optional[RankingConfig] = None,
) -> int:
    """Negative if ``hand_a`` loses, zero on a tie, positive if it wins."""
    rank_a = classify(hand_a, config)
    rank_b = classify(hand_b, config)
    if rank_a.category != rank_b.category:
        return int(rank_a.category) - int(rank_b.category)
    for value_a, value_b in zip(rank_a.tiebreak, rank_b.tiebreak):
        if value_a != value_b:
            LOGGER.debug("tiebreak decided at %d vs %d", value_a, value_b)
            return value_a - value_b
    # Grouped keys may differ in length when duplicates are counted.
    return len(rank_a.tiebreak) - len(rank_b.tiebreak)
