"""
牌组遍历.

提供跨越抽牌堆和弃牌堆的只读遍历和原地修改遍历。遍历开始时决定是否
拼接弃牌堆，之后不再重新读取策略开关.
"""

from typing import Any, Callable, Generic, Iterator, Sequence

from ..exceptions import DeckMutationError
from .types import C

__all__ = ['CardSlot', 'iter_cards', 'iter_slots', 'ensure_revision']


def ensure_revision(current: Callable[[], int], expected: int) -> None:
    """
    确认牌堆在迭代期间没有被结构性修改.

    Args:
        current: 返回当前修订号的函数
        expected: 迭代器创建时记录的修订号

    Raises:
        DeckMutationError: 当修订号发生变化时
    """
    if current() != expected:
        raise DeckMutationError("牌组在迭代期间被修改")


class CardSlot(Generic[C]):
    """
    牌堆中某个位置的可写句柄.

    通过value读取或替换该位置上的牌，不会移动或移除任何牌.

    Examples:
        >>> deck = Deck.build().draw_pile([1, 2, 3]).pre_shuffle(False).done()
        >>> for slot in deck.iter_mut():
        ...     slot.value += 1
        >>> deck.draw_1()
        2
    """

    __slots__ = ('_pile', '_index', '_current', '_expected')

    def __init__(self, pile: Any, index: int,
                 current: Callable[[], int], expected: int) -> None:
        self._pile = pile
        self._index = index
        self._current = current
        self._expected = expected

    @property
    def value(self) -> C:
        """该位置上的牌"""
        ensure_revision(self._current, self._expected)
        return self._pile[self._index]

    @value.setter
    def value(self, item: C) -> None:
        ensure_revision(self._current, self._expected)
        self._pile[self._index] = item

    def __repr__(self) -> str:
        return f"CardSlot(index={self._index})"


def iter_cards(segments: Sequence[Sequence[C]], current: Callable[[], int],
               expected: int) -> Iterator[C]:
    """
    按顺序依次遍历各个牌堆片段.

    Args:
        segments: 要拼接的牌堆列表，在遍历开始前已经确定
        current: 返回当前修订号的函数
        expected: 创建遍历时的修订号

    Yields:
        牌堆中的牌（引用，不移除）
    """
    for pile in segments:
        index = 0
        while True:
            ensure_revision(current, expected)
            if index >= len(pile):
                break
            yield pile[index]
            index += 1


def iter_slots(segments: Sequence[Sequence[C]], current: Callable[[], int],
               expected: int) -> Iterator[CardSlot[C]]:
    """与iter_cards相同的顺序，但产出可写的CardSlot"""
    for pile in segments:
        index = 0
        while True:
            ensure_revision(current, expected)
            if index >= len(pile):
                break
            yield CardSlot(pile, index, current, expected)
            index += 1
