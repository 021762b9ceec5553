import pytest
from solojack.common.card import Card, Suit, Rank


def test_card_initialization():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert card.suit == Suit.HEARTS
    assert card.rank == Rank.EIGHT


def test_card_repr():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert repr(card) == "Card(Suit.HEARTS, Rank.EIGHT)"


def test_card_str():
    assert str(Card(Suit.HEARTS, Rank.EIGHT)) == "8♥"
    assert str(Card(Suit.SPADES, Rank.TEN)) == "10♠"
    assert str(Card(Suit.CLUBS, Rank.QUEEN)) == "Q♣"


def test_invalid_suit():
    with pytest.raises(TypeError):
        Card("Z", Rank.EIGHT)


def test_invalid_rank():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, "invalid")


def test_non_string_rank():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, 8)


def test_card_is_immutable():
    card = Card(Suit.HEARTS, Rank.ACE)
    with pytest.raises(AttributeError):
        card.rank = Rank.TWO
    with pytest.raises(AttributeError):
        card.extra = 1
    assert card.rank == Rank.ACE


@pytest.mark.parametrize(
    "rank, value",
    [
        (Rank.ACE, 11),
        (Rank.TWO, 2),
        (Rank.FIVE, 5),
        (Rank.NINE, 9),
        (Rank.TEN, 10),
        (Rank.JACK, 10),
        (Rank.QUEEN, 10),
        (Rank.KING, 10),
    ],
)
def test_base_value(rank, value):
    assert Card(Suit.DIAMONDS, rank).base_value == value


def test_ranks_are_distinct_members():
    # Face cards share a value with TEN but must not alias it
    assert len(list(Rank)) == 13
    assert Rank.JACK is not Rank.TEN


def test_all_suits():
    assert [suit.value for suit in Suit] == ["♠", "♣", "♥", "♦"]
    for suit in Suit:
        card = Card(suit, Rank.ACE)
        assert card.suit == suit
        assert card.is_ace


def test_card_equality():
    card1 = Card(Suit.HEARTS, Rank.EIGHT)
    card2 = Card(Suit.HEARTS, Rank.EIGHT)
    card3 = Card(Suit.SPADES, Rank.EIGHT)
    assert card1 == card2
    assert card1 != card3
    assert card1 != "8♥"


def test_card_hash():
    cards = {Card(Suit.HEARTS, Rank.EIGHT), Card(Suit.HEARTS, Rank.EIGHT)}
    assert len(cards) == 1
