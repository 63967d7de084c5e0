"""
扑克牌模块的单元测试.
"""

import pytest

from card_deck import Deck, InvalidCardError
from card_deck.core.playing_card import PlayingCard, Suit, standard_cards, to_rank


@pytest.mark.unit
class TestPlayingCard:
    """PlayingCard类的单元测试."""

    def test_card_creation(self):
        """测试PlayingCard对象的创建."""
        card = PlayingCard(Suit.HEARTS, 1)

        assert card.suit == Suit.HEARTS
        assert card.rank == 1
        assert not card.is_joker

    def test_card_immutability(self):
        """测试PlayingCard对象的不可变性."""
        card = PlayingCard(Suit.SPADES, 13)

        with pytest.raises(AttributeError):
            card.suit = Suit.HEARTS

    def test_of_accepts_int_and_char(self):
        """测试用整数或字符创建."""
        assert PlayingCard.of(Suit.CLUBS, 'a') == PlayingCard(Suit.CLUBS, 1)
        assert PlayingCard.of(Suit.CLUBS, 'T') == PlayingCard(Suit.CLUBS, 10)
        assert PlayingCard.of(Suit.CLUBS, 'q') == PlayingCard(Suit.CLUBS, 12)
        assert PlayingCard.of(Suit.CLUBS, '7') == PlayingCard(Suit.CLUBS, 7)
        assert PlayingCard.of(Suit.CLUBS, 11) == PlayingCard(Suit.CLUBS, 11)

    def test_shorthand_constructors_use_their_suit(self):
        """测试各花色的快捷构造方法."""
        assert PlayingCard.spades(1).suit is Suit.SPADES
        assert PlayingCard.clubs(1).suit is Suit.CLUBS
        assert PlayingCard.hearts(1).suit is Suit.HEARTS
        assert PlayingCard.diamonds(1).suit is Suit.DIAMONDS

    @pytest.mark.parametrize("value", [0, 14, 'X', '0', 'AB', True, 2.0])
    def test_invalid_rank(self, value):
        """测试无效点数."""
        with pytest.raises(InvalidCardError):
            to_rank(value)

    def test_invalid_construction(self):
        """测试无效的直接构造."""
        with pytest.raises(InvalidCardError):
            PlayingCard("invalid", 1)
        with pytest.raises(InvalidCardError):
            PlayingCard(Suit.HEARTS, "A")
        with pytest.raises(InvalidCardError):
            PlayingCard(Suit.JOKER, 3)
        with pytest.raises(InvalidCardError):
            PlayingCard.of(Suit.JOKER, 1)

    def test_invalid_card_error_is_value_error(self):
        """测试InvalidCardError是ValueError."""
        with pytest.raises(ValueError):
            PlayingCard.from_str("ZZ")

    def test_string_representation(self):
        """测试字符串表示."""
        test_cases = [
            (PlayingCard(Suit.HEARTS, 1), "AH"),
            (PlayingCard(Suit.SPADES, 13), "KS"),
            (PlayingCard(Suit.DIAMONDS, 10), "TD"),
            (PlayingCard(Suit.CLUBS, 2), "2C"),
            (PlayingCard.joker(), "JK"),
        ]

        for card, expected in test_cases:
            assert str(card) == expected

    def test_from_string(self):
        """测试从字符串创建."""
        test_cases = [
            ("AH", PlayingCard(Suit.HEARTS, 1)),
            ("ks", PlayingCard(Suit.SPADES, 13)),
            ("10D", PlayingCard(Suit.DIAMONDS, 10)),
            ("Td", PlayingCard(Suit.DIAMONDS, 10)),
            ("2c", PlayingCard(Suit.CLUBS, 2)),
            ("jk", PlayingCard.joker()),
        ]

        for card_str, expected in test_cases:
            assert PlayingCard.from_str(card_str) == expected

    @pytest.mark.parametrize("text", ["", "A", "XH", "AX", "123H", "11S"])
    def test_from_string_invalid(self, text):
        """测试无效字符串."""
        with pytest.raises(InvalidCardError):
            PlayingCard.from_str(text)

    def test_from_string_wrong_type(self):
        """测试非字符串输入."""
        with pytest.raises(InvalidCardError):
            PlayingCard.from_str(12)

    def test_round_trip_for_all_cards(self):
        """测试所有牌的字符串往返."""
        for card in standard_cards(jokers=1):
            assert PlayingCard.from_str(str(card)) == card

    def test_display_uses_symbols(self):
        """测试带花色符号的显示."""
        assert PlayingCard.spades('A').display() == "A♠"
        assert PlayingCard.hearts(12).display() == "Q♥"


@pytest.mark.unit
class TestStandardCards:
    """标准牌生成测试."""

    def test_standard_cards(self):
        """测试生成52张不重复的牌."""
        cards = standard_cards()

        assert len(cards) == 52
        assert len(set(cards)) == 52
        assert not any(card.is_joker for card in cards)

    def test_standard_cards_with_jokers(self):
        """测试加入王."""
        cards = standard_cards(jokers=2)

        assert len(cards) == 54
        assert sum(card.is_joker for card in cards) == 2

    def test_negative_jokers(self):
        """测试负数的王."""
        with pytest.raises(InvalidCardError):
            standard_cards(jokers=-1)

    def test_playing_cards_in_deck(self):
        """测试扑克牌作为牌组中的牌使用."""
        deck = Deck.build().draw_pile(standard_cards()).seed(7).done()

        aces = list(deck.dig_all(lambda c: c.rank == 1))

        assert len(aces) == 4
        assert len(deck) == 48
        assert deck.dig_for(lambda c: str(c) == "AS") is None
