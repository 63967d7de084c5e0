"""
扑克牌相关类型定义.

定义花色枚举和点数的字符对照表.
"""

from enum import Enum
from typing import Dict, List


class Suit(Enum):
    """
    扑克牌花色枚举.

    四种标准花色加上可选的大小王类别.
    """

    SPADES = "S"      # 黑桃
    CLUBS = "C"       # 梅花
    HEARTS = "H"      # 红桃
    DIAMONDS = "D"    # 方块
    JOKER = "JOKER"   # 王

    @property
    def symbol(self) -> str:
        """花色的Unicode符号"""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.SPADES: "♠", Suit.CLUBS: "♣", Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦", Suit.JOKER: "🃏",
}

MIN_RANK = 1
MAX_RANK = 13

# 单个字符到点数，大小写不敏感，'T'表示10
RANK_CHARS: Dict[str, int] = {
    "A": 1, "T": 10, "J": 11, "Q": 12, "K": 13,
    **{str(n): n for n in range(1, 10)},
}

RANK_DISPLAY: Dict[int, str] = {
    1: "A", 10: "T", 11: "J", 12: "Q", 13: "K",
    **{n: str(n) for n in range(2, 10)},
}


def get_standard_suits() -> List[Suit]:
    """
    获取四种标准花色.

    Returns:
        List[Suit]: 不包含JOKER的花色列表
    """
    return [suit for suit in Suit if suit is not Suit.JOKER]


def get_all_ranks() -> List[int]:
    """
    获取所有点数.

    Returns:
        List[int]: 1到13的点数列表，1表示A
    """
    return list(range(MIN_RANK, MAX_RANK + 1))
