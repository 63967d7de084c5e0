"""
扑克牌模块.

提供可以放入Deck的PlayingCard类型，以及字符串解析和标准牌生成.
"""

from .card import PlayingCard, standard_cards, to_rank
from .types import Suit, get_all_ranks, get_standard_suits

__all__ = [
    'PlayingCard',
    'Suit',
    'standard_cards',
    'to_rank',
    'get_all_ranks',
    'get_standard_suits',
]
