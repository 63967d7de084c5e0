"""
Card Deck - 通用牌组

牌组由抽牌堆和弃牌堆组成，可以放入任意类型的牌.
牌不会被复制：放入时交出，抽出时完整地还给调用方.

Example:
    >>> from card_deck import Deck
    >>> deck = Deck.build().draw_pile([1, 2, 3]).pre_shuffle(False).done()
    >>> deck.draw_1()
    1
"""

from .core.deck import CardSlot, Deck, DeckBuilder, DeckSnapshot
from .core.exceptions import (
    BuilderConsumedError,
    DeckConfigError,
    DeckError,
    DeckMutationError,
    InvalidCardError,
)

__version__ = "0.4.0"

__all__ = [
    'Deck',
    'DeckBuilder',
    'CardSlot',
    'DeckSnapshot',
    'DeckError',
    'BuilderConsumedError',
    'DeckMutationError',
    'DeckConfigError',
    'InvalidCardError',
]
