import pytest

from handrank.cards import RANKS, Card, cards_to_labels, parse_card, parse_cards, rank_value
from handrank.errors import InvalidCardFormat


def test_rank_values_run_from_two_to_ace():
    assert [rank_value(rank) for rank in RANKS] == list(range(2, 15))
    assert rank_value("T") == 10
    assert rank_value("t") == 10
    assert rank_value("a") == 14
    with pytest.raises(InvalidCardFormat):
        rank_value("1")


def test_parse_card_normalises_case():
    assert parse_card("AH") == parse_card("Ah") == parse_card("ah") == Card("A", "h")
    assert parse_card("TD").value == 10
    assert parse_card("2c").label == "2c"


def test_parse_cards_accepts_string_or_sequence():
    expected = [Card("K", "s"), Card("Q", "d")]
    assert parse_cards("KS QD") == expected
    assert parse_cards(["KS", "QD"]) == expected
    assert cards_to_labels(expected) == ["Ks", "Qd"]


def test_cards_are_hashable_values():
    assert len({parse_card("AH"), parse_card("ah"), parse_card("AS")}) == 2
    with pytest.raises(AttributeError):
        parse_card("AH").rank = "K"  # type: ignore[misc]
