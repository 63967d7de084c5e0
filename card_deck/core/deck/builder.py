"""
牌组构建器.

以链式调用收集初始牌堆和策略开关，调用done()生成Deck.
"""

import logging
from typing import Generic, Iterable, List, Optional

from ..exceptions import BuilderConsumedError
from .deck import Deck
from .types import C, Shuffler, make_shuffler

logger = logging.getLogger(__name__)


class DeckBuilder(Generic[C]):
    """
    牌组构建器.

    每个设置方法都返回构建器本身，done()之后构建器失效，
    再次调用任何方法都会抛出BuilderConsumedError.

    默认值:
        pre_shuffle: True
        shuffle_discards: True
        stop_on_discards: False

    Examples:
        >>> deck = DeckBuilder().draw_pile([1, 2, 3]).discard_pile([4]) \\
        ...     .stop_on_discards(True).done()
        >>> len(deck)
        3
    """

    def __init__(self) -> None:
        self._draw_pile: Optional[List[C]] = None
        self._discard_pile: Optional[List[C]] = None
        self._pre_shuffle = True
        self._shuffle_discards = True
        self._stop_on_discards = False
        self._shuffler: Optional[Shuffler] = None
        self._consumed = False

    def _check_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError("构建器已经完成，不能再次使用")

    def draw_pile(self, cards: Iterable[C]) -> 'DeckBuilder[C]':
        """用给定的牌替换抽牌堆内容"""
        self._check_open()
        self._draw_pile = list(cards)
        return self

    def discard_pile(self, cards: Iterable[C]) -> 'DeckBuilder[C]':
        """用给定的牌替换弃牌堆内容"""
        self._check_open()
        self._discard_pile = list(cards)
        return self

    def pre_shuffle(self, enabled: bool) -> 'DeckBuilder[C]':
        """构建时是否洗已提供的牌堆"""
        self._check_open()
        self._pre_shuffle = enabled
        return self

    def shuffle_discards(self, enabled: bool) -> 'DeckBuilder[C]':
        """回收弃牌堆到抽牌堆底部前是否先洗牌"""
        self._check_open()
        self._shuffle_discards = enabled
        return self

    def stop_on_discards(self, enabled: bool) -> 'DeckBuilder[C]':
        """
        为True时牌组视为在抽牌堆底部结束.

        对长度、抽牌和所有遍历生效.
        """
        self._check_open()
        self._stop_on_discards = enabled
        return self

    def shuffler(self, shuffler: Shuffler) -> 'DeckBuilder[C]':
        """指定原地洗牌函数"""
        self._check_open()
        self._shuffler = shuffler
        return self

    def seed(self, seed: int) -> 'DeckBuilder[C]':
        """使用指定种子的随机数生成器洗牌，用于可重现的测试"""
        self._check_open()
        self._shuffler = make_shuffler(seed)
        return self

    def done(self) -> Deck[C]:
        """
        生成牌组.

        pre_shuffle为True时分别洗已提供的抽牌堆和弃牌堆，
        未提供的牌堆为空且不洗.

        Returns:
            Deck: 新牌组

        Raises:
            BuilderConsumedError: 当构建器已经完成时
        """
        self._check_open()
        self._consumed = True

        shuffler = self._shuffler or make_shuffler()
        if self._pre_shuffle:
            if self._draw_pile is not None:
                shuffler(self._draw_pile)
            if self._discard_pile is not None:
                shuffler(self._discard_pile)

        deck = Deck(
            draw_pile=self._draw_pile,
            discard_pile=self._discard_pile,
            shuffle_discards=self._shuffle_discards,
            stop_on_discards=self._stop_on_discards,
            shuffler=shuffler
        )
        logger.debug(f"牌组构建完成: {deck!r}")

        self._draw_pile = None
        self._discard_pile = None
        return deck

    def __repr__(self) -> str:
        return (f"DeckBuilder(pre_shuffle={self._pre_shuffle}, "
                f"shuffle_discards={self._shuffle_discards}, "
                f"stop_on_discards={self._stop_on_discards}, "
                f"consumed={self._consumed})")
