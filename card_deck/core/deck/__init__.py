"""
通用牌组模块.

提供Deck和DeckBuilder类，实现抽牌堆、弃牌堆和回收策略.
牌可以是任意对象，牌组只移动牌而不复制牌.
"""

from .builder import DeckBuilder
from .deck import Deck
from .traversal import CardSlot
from .types import DeckSnapshot, Predicate, Shuffler, make_shuffler

__all__ = [
    'Deck',
    'DeckBuilder',
    'CardSlot',
    'DeckSnapshot',
    'Predicate',
    'Shuffler',
    'make_shuffler',
]
