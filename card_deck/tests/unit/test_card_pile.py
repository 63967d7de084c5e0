"""
抽牌堆存储的单元测试.

测试CardPile的逻辑内容、顶部移除和检索移除，以及大牌堆上的压缩次数.
"""

import pytest

from card_deck.core.deck.pile import MISSING, CardPile


@pytest.fixture
def compact_calls(monkeypatch):
    """记录CardPile.compact的调用次数"""
    calls = []
    original = CardPile.compact

    def counting(self):
        calls.append(len(self))
        original(self)

    monkeypatch.setattr(CardPile, "compact", counting)
    return calls


@pytest.mark.unit
class TestCardPile:
    """CardPile基本操作测试."""

    def test_popleft_in_order(self):
        """测试从顶部依次移除."""
        pile = CardPile(range(5))

        assert [pile.popleft() for _ in range(3)] == [0, 1, 2]
        assert len(pile) == 2
        assert list(pile) == [3, 4]
        assert pile[0] == 3

    def test_popleft_empty(self):
        """测试空牌堆抽牌."""
        with pytest.raises(IndexError):
            CardPile().popleft()

    def test_extract_keeps_skipped_order(self):
        """测试检索移除时跳过的牌顺序不变."""
        pile = CardPile(range(10))

        position, card = pile.extract_next(0, lambda n: n % 3 == 0)
        assert (position, card) == (0, 0)
        position, card = pile.extract_next(position, lambda n: n % 3 == 0)
        assert (position, card) == (2, 3)

        assert list(pile) == [1, 2, 4, 5, 6, 7, 8, 9]
        assert pile.head(4) == [1, 2, 4, 5]
        assert pile[2] == 4
        assert len(pile) == 8

    def test_extract_exhausted(self):
        """测试检索到末尾."""
        pile = CardPile([1, 3])

        assert pile.extract_next(0, lambda n: n % 2 == 0) == (2, MISSING)
        assert list(pile) == [1, 3]

    def test_setitem_after_extract(self):
        """测试检索过程中按逻辑下标替换牌."""
        pile = CardPile(range(6))
        pile.extract_next(0, lambda n: n == 2)

        pile[2] = 30

        assert list(pile) == [0, 1, 30, 4, 5]

    def test_index_out_of_range(self):
        """测试越界下标."""
        pile = CardPile([1, 2, 3])
        pile.popleft()

        with pytest.raises(IndexError):
            pile[2]

    def test_append_after_popleft(self):
        """测试移除后放到底部."""
        pile = CardPile([1, 2])
        pile.popleft()
        pile.append(3)
        pile.extend([4, 5])

        assert list(pile) == [2, 3, 4, 5]

    def test_remove_first(self):
        """测试移除第一张满足条件的牌."""
        pile = CardPile([1, 2, 3, 4])
        pile.popleft()

        assert pile.remove_first(lambda n: n > 2) == 3
        assert pile.remove_first(lambda n: n > 10) is MISSING
        assert list(pile) == [2, 4]

    def test_shuffle_sees_only_remaining(self):
        """测试洗牌只作用于剩余的牌."""
        pile = CardPile(range(6))
        pile.popleft()
        pile.shuffle(lambda items: items.reverse())

        assert list(pile) == [5, 4, 3, 2, 1]


@pytest.mark.unit
class TestCardPileScaling:
    """大牌堆上移除不会反复移动存储."""

    def test_drain_compacts_logarithmically(self, compact_calls):
        """测试逐张抽完只压缩对数次."""
        pile = CardPile(range(100_000))

        drained = [pile.popleft() for _ in range(100_000)]

        assert drained == list(range(100_000))
        assert len(pile) == 0
        assert len(compact_calls) <= 20

    def test_extract_all_never_compacts(self, compact_calls):
        """测试连续检索整个牌堆不需要压缩."""
        pile = CardPile(range(100_000))
        position, extracted = 0, []
        while True:
            position, card = pile.extract_next(position, lambda n: n % 2 == 0)
            if card is MISSING:
                break
            extracted.append(card)

        assert len(extracted) == 50_000
        assert list(pile) == list(range(1, 100_000, 2))
        assert compact_calls == []
