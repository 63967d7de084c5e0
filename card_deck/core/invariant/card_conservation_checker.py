"""
牌守恒检查器

检查牌组中的牌既没有丢失也没有被复制。
"""

from collections import Counter
from typing import Any, Dict, Iterable, List, Sequence

from ..deck.types import DeckSnapshot
from .base_checker import BaseInvariantChecker
from .types import InvariantError, InvariantType

__all__ = ['CardConservationChecker']


class CardConservationChecker(BaseInvariantChecker):
    """牌守恒检查器

    以对象身份(id)而不是相等性比较牌，因此牌不需要实现__eq__或__hash__。
    验证以下规则：
    1. 抽牌堆 + 弃牌堆 + 调用方持有的牌 = 初始的牌
    2. 同一张牌不会同时出现在两个位置
    """

    def __init__(self, initial_cards: Iterable[Any]):
        """初始化牌守恒检查器

        Args:
            initial_cards: 构建牌组时提供的所有牌
        """
        super().__init__(InvariantType.CARD_CONSERVATION)
        # 持有初始牌的引用，保证检查期间id不会被复用
        self._initial_cards: List[Any] = list(initial_cards)
        self._initial_ids = Counter(id(card) for card in self._initial_cards)

    @classmethod
    def from_snapshot(cls, snapshot: DeckSnapshot) -> 'CardConservationChecker':
        """以一个快照中的全部牌作为初始状态"""
        return cls(snapshot.draw_pile + snapshot.discard_pile)

    @property
    def initial_count(self) -> int:
        return len(self._initial_cards)

    def _perform_check(self, snapshot: DeckSnapshot, removed: Sequence[Any]) -> bool:
        """执行牌守恒检查

        Args:
            snapshot: 牌组快照
            removed: 调用方持有的牌

        Returns:
            bool: 检查是否通过
        """
        current_ids = Counter(id(card) for card in snapshot.draw_pile)
        current_ids.update(id(card) for card in snapshot.discard_pile)
        current_ids.update(id(card) for card in removed)

        checks = [
            self._check_no_duplicates(current_ids),
            self._check_no_loss(current_ids),
            self._check_no_strangers(current_ids),
        ]
        return all(checks)

    def _check_no_duplicates(self, current_ids: Counter) -> bool:
        duplicated = {card_id: n for card_id, n in current_ids.items()
                      if n > self._initial_ids.get(card_id, 0) and card_id in self._initial_ids}
        if duplicated:
            self._create_violation(
                f"有{len(duplicated)}张牌出现了多次",
                'CRITICAL',
                {'duplicated': self._describe(duplicated)}
            )
            return False
        return True

    def _check_no_loss(self, current_ids: Counter) -> bool:
        missing = self._initial_ids - current_ids
        if missing:
            self._create_violation(
                f"有{sum(missing.values())}张牌丢失",
                'CRITICAL',
                {'missing': self._describe(missing)}
            )
            return False
        return True

    def _check_no_strangers(self, current_ids: Counter) -> bool:
        strangers = [card_id for card_id in current_ids if card_id not in self._initial_ids]
        if strangers:
            self._create_violation(
                f"有{len(strangers)}张牌不属于初始牌组",
                'WARNING',
                {'count': len(strangers)}
            )
            return False
        return True

    def _describe(self, counts: Dict[int, int]) -> List[str]:
        by_id = {id(card): card for card in self._initial_cards}
        return [repr(by_id[card_id]) for card_id in counts if card_id in by_id]

    def assert_conserved(self, snapshot: DeckSnapshot, removed: Sequence[Any] = ()) -> None:
        """检查牌守恒，不满足时抛出InvariantError

        Raises:
            InvariantError: 当牌丢失、重复或出现陌生牌时
        """
        result = self.check(snapshot, removed)
        if not result.is_valid:
            raise InvariantError("牌守恒检查失败", result.violations)
