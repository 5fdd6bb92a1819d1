import pytest

from handrank.cards import Card, parse_card
from handrank.errors import (
    HandRankError,
    InsufficientCards,
    InvalidCardFormat,
    InvalidHand,
    WrongHandSize,
)
from handrank.evaluator import classify
from handrank.models import RankingConfig
from handrank.search import best_hand, compare_hands

from .helpers import hand


def test_parse_rejects_unknown_rank_and_suit():
    with pytest.raises(InvalidCardFormat, match="Invalid rank"):
        parse_card("1H")
    with pytest.raises(InvalidCardFormat, match="Invalid suit"):
        parse_card("TX")


@pytest.mark.parametrize("token", ["", "A", "10H", "AHS"])
def test_parse_rejects_wrong_length(token):
    with pytest.raises(InvalidCardFormat, match="Invalid card label"):
        parse_card(token)


def test_card_validation_rejects_invalid_values():
    with pytest.raises(ValueError, match="Invalid rank"):
        Card("1", "h")
    with pytest.raises(ValueError, match="Invalid suit"):
        Card("A", "x")
    for suit in ("", "cd", "dh"):
        with pytest.raises(ValueError, match="Invalid suit"):
            Card("A", suit)


def test_best_hand_requires_five_cards():
    with pytest.raises(InsufficientCards, match="at least 5 cards, got 4") as excinfo:
        best_hand(hand("AH KH QH JH"))
    assert excinfo.value.code == "INSUFFICIENT_CARDS"


def test_classify_reports_hand_size():
    with pytest.raises(WrongHandSize) as excinfo:
        classify(hand("AH KH QH JH TH 9H"))
    assert excinfo.value.size == 6


def test_duplicate_cards_rejected_everywhere():
    with pytest.raises(InvalidHand, match="Duplicate card: Ah"):
        classify(hand("AH AH KD QC 2S"))
    with pytest.raises(InvalidHand):
        best_hand(hand("AH KD QC 2S 7D 7C KD"))
    with pytest.raises(InvalidHand):
        compare_hands(hand("AH KD QC 2S 7D"), hand("3H 3H 3S 9C 9H"))


def test_duplicates_allowed_when_configured():
    config = RankingConfig(reject_duplicates=False)
    best = best_hand(hand("AH AH KD QC 2S"), config)
    assert len(best) == 5


def test_errors_share_value_error_base():
    for exc_type in (InvalidCardFormat, InvalidHand, InsufficientCards, WrongHandSize):
        assert issubclass(exc_type, HandRankError)
        assert issubclass(exc_type, ValueError)
