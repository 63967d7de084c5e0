"""
抽牌堆存储.

抽牌堆既要从顶部逐张抽牌，又要在检索时从中间逐张移除。普通列表每次
移除都会移动后面的所有元素，这里用一个列表加一段空洞表示牌堆：
逻辑内容为 items[:gap_start] + items[gap_end:]，两种移除都只需扩展空洞.
"""

import itertools
from typing import Any, Generic, Iterable, Iterator, List, Tuple

from .types import C, Predicate

__all__ = ['CardPile', 'MISSING']

# 空洞至少这么大且占满存储一半时才压缩
_COMPACT_MIN_GAP = 32

MISSING: Any = object()


class CardPile(Generic[C]):
    """
    支持常数时间顶部移除和顺序检索移除的牌堆.

    下标0为顶部。下标访问、长度和迭代都按逻辑内容进行，不会看到空洞.
    """

    __slots__ = ('_items', '_gap_start', '_gap_end')

    def __init__(self, cards: Iterable[C] = ()) -> None:
        self._items: List[Any] = list(cards)
        self._gap_start = 0
        self._gap_end = 0

    def __len__(self) -> int:
        return len(self._items) - (self._gap_end - self._gap_start)

    def __iter__(self) -> Iterator[C]:
        return itertools.chain(
            itertools.islice(self._items, 0, self._gap_start),
            itertools.islice(self._items, self._gap_end, None)
        )

    def _physical(self, index: int) -> int:
        if not 0 <= index < len(self):
            raise IndexError("牌堆下标越界")
        if index < self._gap_start:
            return index
        return index + self._gap_end - self._gap_start

    def __getitem__(self, index: int) -> C:
        return self._items[self._physical(index)]

    def __setitem__(self, index: int, card: C) -> None:
        self._items[self._physical(index)] = card

    def __repr__(self) -> str:
        return f"CardPile({list(self)!r})"

    def compact(self) -> None:
        """移除空洞，使存储与逻辑内容一致"""
        if self._gap_end > self._gap_start:
            del self._items[self._gap_start:self._gap_end]
        self._gap_start = self._gap_end = 0

    def _open_gap_at(self, index: int) -> None:
        if self._gap_start == index:
            return
        if self._gap_end > self._gap_start:
            self.compact()
        # 没有空洞时逻辑下标等于存储下标
        self._gap_start = self._gap_end = index

    def _maybe_compact(self) -> None:
        gap = self._gap_end - self._gap_start
        if gap >= len(self._items) or (gap >= _COMPACT_MIN_GAP and gap * 2 >= len(self._items)):
            self.compact()

    def head(self, n: int) -> List[C]:
        """
        返回顶部最多n张牌的列表.

        Args:
            n: 牌数，小于等于0时返回空列表
        """
        n = max(0, n)
        cards = self._items[:min(n, self._gap_start)]
        if len(cards) < n:
            cards.extend(self._items[self._gap_end:self._gap_end + n - len(cards)])
        return cards

    def append(self, card: C) -> None:
        """把一张牌放到底部"""
        self._items.append(card)

    def extend(self, cards: Iterable[C]) -> None:
        """按顺序把多张牌放到底部"""
        self._items.extend(cards)

    def shuffle(self, shuffler) -> None:
        """用shuffler原地打乱整个牌堆"""
        self.compact()
        shuffler(self._items)

    def popleft(self) -> C:
        """
        移除并返回顶部的牌.

        Raises:
            IndexError: 当牌堆为空时
        """
        if not len(self):
            raise IndexError("从空牌堆抽牌")
        self._open_gap_at(0)
        card = self._items[self._gap_end]
        self._items[self._gap_end] = None
        self._gap_end += 1
        self._maybe_compact()
        return card

    def remove_first(self, predicate: Predicate) -> Any:
        """
        移除并返回第一张满足条件的牌.

        Returns:
            找到的牌，没有时返回MISSING
        """
        index = next((i for i, card in enumerate(self) if predicate(card)), None)
        if index is None:
            return MISSING
        self.compact()
        return self._items.pop(index)

    def extract_next(self, position: int, predicate: Predicate) -> Tuple[int, Any]:
        """
        从逻辑位置position开始移除下一张满足条件的牌.

        跳过的牌保持原来的顺序。连续调用时空洞停留在检索位置上，
        每张牌只被移动一次.

        Args:
            position: 开始检查的逻辑下标
            predicate: 检查一张牌的函数

        Returns:
            Tuple: (下一次检索的起始位置, 移除的牌或MISSING)
        """
        self._open_gap_at(position)
        items = self._items
        while self._gap_end < len(items):
            card = items[self._gap_end]
            if predicate(card):
                items[self._gap_end] = None
                self._gap_end += 1
                return self._gap_start, card
            if self._gap_end > self._gap_start:
                items[self._gap_start] = card
                items[self._gap_end] = None
            self._gap_start += 1
            self._gap_end += 1
        return self._gap_start, MISSING
