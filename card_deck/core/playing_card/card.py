"""
扑克牌数据结构.

定义不可变的PlayingCard类，可以作为Deck中的牌使用.
"""

from dataclasses import dataclass
from typing import List, Union

from ..exceptions import InvalidCardError
from .types import (
    MAX_RANK, MIN_RANK, RANK_CHARS, RANK_DISPLAY, Suit,
    get_all_ranks, get_standard_suits
)

JOKER_TEXT = "JK"


def to_rank(value: Union[int, str]) -> int:
    """
    把整数或单个字符转换为点数.

    Args:
        value: 1到13的整数，或'A'、'T'、'J'、'Q'、'K'、'1'到'9'中的一个字符

    Returns:
        int: 点数

    Raises:
        InvalidCardError: 当值无法转换时
    """
    if isinstance(value, bool):
        raise InvalidCardError(f"无效的点数: {value!r}")
    if isinstance(value, int):
        rank = value
    elif isinstance(value, str) and len(value) == 1 and value.upper() in RANK_CHARS:
        rank = RANK_CHARS[value.upper()]
    else:
        raise InvalidCardError(f"无效的点数: {value!r}")
    if not MIN_RANK <= rank <= MAX_RANK:
        raise InvalidCardError(f"点数必须在{MIN_RANK}到{MAX_RANK}之间，实际: {rank}")
    return rank


@dataclass(frozen=True)
class PlayingCard:
    """
    表示一张扑克牌.

    不可变数据类，包含花色和点数。点数1表示A，13表示K，王的点数为0.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = PlayingCard.of(Suit.SPADES, 'A')
        >>> str(card)
        'AS'
        >>> PlayingCard.from_str('10d') == PlayingCard(Suit.DIAMONDS, 10)
        True
    """

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            InvalidCardError: 当花色或点数无效时
        """
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, int) or isinstance(self.rank, bool):
            raise InvalidCardError(f"点数必须是int类型，实际: {type(self.rank)}")
        if self.suit is Suit.JOKER:
            if self.rank != 0:
                raise InvalidCardError(f"王的点数必须为0，实际: {self.rank}")
        else:
            to_rank(self.rank)

    @classmethod
    def of(cls, suit: Suit, value: Union[int, str]) -> 'PlayingCard':
        """
        用整数或单个字符创建扑克牌.

        Args:
            suit: 花色，不能是JOKER
            value: 点数，参见to_rank

        Returns:
            PlayingCard: 对应的扑克牌
        """
        if suit is Suit.JOKER:
            raise InvalidCardError("王请使用PlayingCard.joker()创建")
        return cls(suit, to_rank(value))

    @classmethod
    def spades(cls, value: Union[int, str]) -> 'PlayingCard':
        return cls.of(Suit.SPADES, value)

    @classmethod
    def clubs(cls, value: Union[int, str]) -> 'PlayingCard':
        return cls.of(Suit.CLUBS, value)

    @classmethod
    def hearts(cls, value: Union[int, str]) -> 'PlayingCard':
        return cls.of(Suit.HEARTS, value)

    @classmethod
    def diamonds(cls, value: Union[int, str]) -> 'PlayingCard':
        return cls.of(Suit.DIAMONDS, value)

    @classmethod
    def joker(cls) -> 'PlayingCard':
        """创建一张王"""
        return cls(Suit.JOKER, 0)

    @property
    def is_joker(self) -> bool:
        return self.suit is Suit.JOKER

    def __str__(self) -> str:
        """
        返回扑克牌的字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"AS"、"TD"，王为"JK"
        """
        if self.is_joker:
            return JOKER_TEXT
        return f"{RANK_DISPLAY[self.rank]}{self.suit.value}"

    def __repr__(self) -> str:
        if self.is_joker:
            return "PlayingCard(JOKER)"
        return f"PlayingCard({RANK_DISPLAY[self.rank]}, {self.suit.name})"

    def display(self) -> str:
        """返回带花色符号的表示，如A♠"""
        if self.is_joker:
            return self.suit.symbol
        return f"{RANK_DISPLAY[self.rank]}{self.suit.symbol}"

    @classmethod
    def from_str(cls, card_str: str) -> 'PlayingCard':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AS"、"10d"、"Th"，王为"JK"

        Returns:
            PlayingCard: 对应的扑克牌对象

        Raises:
            InvalidCardError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise InvalidCardError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.strip().upper()
        if text == JOKER_TEXT:
            return cls.joker()
        if len(text) < 2:
            raise InvalidCardError(f"卡牌字符串格式错误: {card_str!r}")

        # 处理10的特殊情况
        rank_str, suit_str = text[:-1], text[-1]
        if rank_str == "10":
            rank_str = "T"

        suit_map = {suit.value: suit for suit in get_standard_suits()}
        if suit_str not in suit_map:
            raise InvalidCardError(f"无效的花色: {suit_str}")
        if len(rank_str) != 1 or rank_str not in RANK_CHARS:
            raise InvalidCardError(f"无效的点数: {rank_str}")

        return cls(suit_map[suit_str], RANK_CHARS[rank_str])


def standard_cards(jokers: int = 0) -> List[PlayingCard]:
    """
    生成一副标准扑克牌.

    Args:
        jokers: 额外加入的王的数量

    Returns:
        List[PlayingCard]: 按花色和点数排列的52张牌，王放在最后
    """
    if jokers < 0:
        raise InvalidCardError(f"王的数量不能为负数: {jokers}")
    cards = [
        PlayingCard(suit, rank)
        for suit in get_standard_suits()
        for rank in get_all_ranks()
    ]
    cards.extend(PlayingCard.joker() for _ in range(jokers))
    return cards
