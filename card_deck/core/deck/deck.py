"""
牌组管理.

定义Deck类，维护抽牌堆和弃牌堆，提供抽牌、弃牌、回收、检索和遍历操作.
牌在牌堆之间移动时始终是同一个对象，牌组从不复制牌.
"""

import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Sequence

from .pile import MISSING, CardPile
from .traversal import CardSlot, ensure_revision, iter_cards, iter_slots
from .types import C, DeckSnapshot, Predicate, Shuffler, make_shuffler

logger = logging.getLogger(__name__)


class Deck(Generic[C]):
    """
    通用牌组.

    包含一个抽牌堆和一个弃牌堆。抽牌堆下标0为下一张要抽的牌，
    弃牌堆下标0为顶部。抽牌不足时按策略把弃牌堆回收到抽牌堆底部.

    Attributes:
        shuffle_discards: 回收弃牌堆前是否先洗牌
        stop_on_discards: 为True时弃牌堆不计入长度、抽牌和默认遍历，
            直到显式调用discards_to_bottom

    Examples:
        >>> deck = Deck.build().draw_pile([1, 2, 3]).discard_pile([4]) \\
        ...     .pre_shuffle(False).shuffle_discards(False).done()
        >>> len(deck)
        4
        >>> list(deck.draw(4))
        [1, 2, 3, 4]
    """

    def __init__(self, *,
                 draw_pile: Optional[Iterable[C]] = None,
                 discard_pile: Optional[Iterable[C]] = None,
                 shuffle_discards: bool = True,
                 stop_on_discards: bool = False,
                 shuffler: Optional[Shuffler] = None) -> None:
        """
        初始化牌组.

        供DeckBuilder.done()使用的内部构造函数，只接受关键字参数，
        并且不会预先洗牌。请通过Deck.build()或Deck.from_cards()创建牌组.

        Args:
            draw_pile: 抽牌堆初始内容
            discard_pile: 弃牌堆初始内容
            shuffle_discards: 回收前是否洗弃牌堆
            stop_on_discards: 弃牌堆是否在回收前保持休眠
            shuffler: 原地洗牌函数，为None时使用默认随机数生成器
        """
        self._draw_pile: CardPile[C] = CardPile(draw_pile if draw_pile is not None else ())
        self._discard_pile: List[C] = list(discard_pile) if discard_pile is not None else []
        self.shuffle_discards = shuffle_discards
        self.stop_on_discards = stop_on_discards
        self._shuffler = shuffler or make_shuffler()
        self._revision = 0

    @classmethod
    def build(cls) -> 'DeckBuilder[C]':
        """创建牌组构建器，参见DeckBuilder"""
        from .builder import DeckBuilder
        return DeckBuilder()

    @classmethod
    def from_cards(cls, cards: Iterable[C]) -> 'Deck[C]':
        """
        用给定的牌创建牌组，其余选项使用默认值.

        Args:
            cards: 放入抽牌堆的牌

        Returns:
            Deck: 洗好的新牌组
        """
        return cls.build().draw_pile(cards).done()

    # ------------------------------------------------------------------
    # 修订号
    # ------------------------------------------------------------------

    def _current_revision(self) -> int:
        return self._revision

    def _touch(self) -> None:
        self._revision += 1

    # ------------------------------------------------------------------
    # 抽牌与回收
    # ------------------------------------------------------------------

    def discards_to_bottom(self) -> None:
        """
        把弃牌堆放到抽牌堆底部.

        shuffle_discards为True时先洗弃牌堆。完成后弃牌堆为空.
        弃牌堆为空时不做任何改动.
        """
        if not self._discard_pile:
            return
        if self.shuffle_discards:
            self._shuffler(self._discard_pile)
        logger.debug(f"回收弃牌堆: {len(self._discard_pile)}张牌放到抽牌堆底部")
        self._draw_pile.extend(self._discard_pile)
        self._discard_pile.clear()
        self._touch()

    def shuffle_draw_pile(self) -> None:
        """洗抽牌堆，不影响弃牌堆"""
        self._draw_pile.shuffle(self._shuffler)
        self._touch()

    def draw_1(self) -> Optional[C]:
        """
        抽一张牌.

        Returns:
            抽到的牌，没有可抽的牌时返回None
        """
        return next(self.draw(1), None)

    def draw(self, n: int) -> Iterator[C]:
        """
        从抽牌堆顶部抽最多n张牌.

        抽牌堆不足n张时，如果stop_on_discards为True则只返回现有的牌，
        否则先回收弃牌堆再抽。回收在调用时立即发生，牌在迭代产出时
        才会从抽牌堆移除，提前放弃迭代器不会移除未产出的牌.

        Args:
            n: 要抽的牌数

        Returns:
            Iterator: 依次产出抽到的牌
        """
        if n > len(self._draw_pile) and not self.stop_on_discards:
            self.discards_to_bottom()
        count = max(0, min(n, len(self._draw_pile)))
        return self._drain(self._draw_pile, count, self._revision)

    def draw_all(self) -> Iterator[C]:
        """
        抽出所有可抽的牌.

        stop_on_discards为False时先回收弃牌堆，否则弃牌堆保持不变.

        Returns:
            Iterator: 按从顶到底的顺序产出抽牌堆中的所有牌
        """
        if not self.stop_on_discards:
            self.discards_to_bottom()
        return self._drain(self._draw_pile, len(self._draw_pile), self._revision)

    def _drain(self, pile: CardPile[C], count: int, expected: int) -> Iterator[C]:
        for _ in range(count):
            ensure_revision(self._current_revision, expected)
            item = pile.popleft()
            self._touch()
            expected = self._revision
            yield item

    # ------------------------------------------------------------------
    # 放牌
    # ------------------------------------------------------------------

    def put_discard(self, card: C) -> None:
        """把一张牌放到弃牌堆底部"""
        self._discard_pile.append(card)
        self._touch()

    def push_discards(self, card: C) -> None:
        """把一张牌放到弃牌堆底部，等同于put_discard"""
        self.put_discard(card)

    def push_discards_top(self, card: C) -> None:
        """把一张牌放到弃牌堆顶部"""
        self._discard_pile.insert(0, card)
        self._touch()

    def push_bottom(self, card: C) -> None:
        """把一张牌直接放到抽牌堆底部"""
        self._draw_pile.append(card)
        self._touch()

    def push_top(self, card: C) -> None:
        """
        把一张牌放到弃牌堆顶部.

        与push_discards_top位置相同，回收后这张牌排在回收部分的最前面.
        """
        self._discard_pile.insert(0, card)
        self._touch()

    # ------------------------------------------------------------------
    # 查看
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        """
        返回不再放入新牌时最多还能抽到的牌数.

        stop_on_discards为True时只计算抽牌堆.
        """
        if self.stop_on_discards:
            return len(self._draw_pile)
        return len(self._draw_pile) + len(self._discard_pile)

    def draw_len(self) -> int:
        """抽牌堆中的牌数"""
        return len(self._draw_pile)

    def discard_len(self) -> int:
        """弃牌堆中的牌数"""
        return len(self._discard_pile)

    def peek(self, n: int = 1) -> List[C]:
        """
        查看抽牌堆顶部的牌但不抽出.

        不会触发回收，抽牌堆不足n张时返回现有的牌.

        Args:
            n: 要查看的牌数

        Returns:
            List: 顶部最多n张牌，顺序与抽牌顺序一致
        """
        return self._draw_pile.head(n)

    def snapshot(self) -> DeckSnapshot[C]:
        """返回当前牌堆内容和策略开关的快照"""
        return DeckSnapshot(
            draw_pile=tuple(self._draw_pile),
            discard_pile=tuple(self._discard_pile),
            shuffle_discards=self.shuffle_discards,
            stop_on_discards=self.stop_on_discards
        )

    # ------------------------------------------------------------------
    # 检索
    # ------------------------------------------------------------------

    def dig_for(self, predicate: Predicate) -> Optional[C]:
        """
        在抽牌堆中找出第一张满足条件的牌并移除.

        其余牌的相对顺序保持不变.

        Args:
            predicate: 检查一张牌的函数，不应修改牌

        Returns:
            找到的牌，没有满足条件的牌时返回None且抽牌堆不变
        """
        card = self._draw_pile.remove_first(predicate)
        if card is MISSING:
            return None
        self._touch()
        return card

    def dig_all(self, predicate: Predicate) -> Iterator[C]:
        """
        移除抽牌堆中所有满足条件的牌.

        产出的牌保持原来的相对顺序，不满足条件的牌也保持原来的顺序留在
        抽牌堆中。只有已经产出的牌会被移除.

        Args:
            predicate: 检查一张牌的函数

        Returns:
            Iterator: 依次产出被移除的牌
        """
        return self._extract(self._draw_pile, predicate, self._revision)

    def _extract(self, pile: CardPile[C], predicate: Predicate, expected: int) -> Iterator[C]:
        position = 0
        while True:
            ensure_revision(self._current_revision, expected)
            position, item = pile.extract_next(position, predicate)
            if item is MISSING:
                return
            self._touch()
            expected = self._revision
            yield item

    # ------------------------------------------------------------------
    # 遍历
    # ------------------------------------------------------------------

    def _visible_piles(self) -> List[Sequence[C]]:
        if self.stop_on_discards:
            return [self._draw_pile]
        return [self._draw_pile, self._discard_pile]

    def __iter__(self) -> Iterator[C]:
        """
        只读遍历牌组.

        先按顺序遍历抽牌堆，stop_on_discards为False时再遍历弃牌堆.
        遍历期间修改牌组会在下一步抛出DeckMutationError.
        """
        return iter_cards(self._visible_piles(), self._current_revision, self._revision)

    def iter_mut(self) -> Iterator[CardSlot[C]]:
        """
        可写遍历牌组.

        顺序与只读遍历相同，产出的CardSlot可以原地替换牌.
        """
        return iter_slots(self._visible_piles(), self._current_revision, self._revision)

    def transform(self, func: Callable[[C], C]) -> None:
        """用func(card)替换每一张可见的牌"""
        for slot in self.iter_mut():
            slot.value = func(slot.value)

    def __repr__(self) -> str:
        """返回牌组的调试表示"""
        return (f"Deck(draw={len(self._draw_pile)}, discard={len(self._discard_pile)}, "
                f"shuffle_discards={self.shuffle_discards}, "
                f"stop_on_discards={self.stop_on_discards})")

    def __str__(self) -> str:
        """返回牌组的可读表示"""
        return f"牌组: 抽牌堆{len(self._draw_pile)}张, 弃牌堆{len(self._discard_pile)}张"
