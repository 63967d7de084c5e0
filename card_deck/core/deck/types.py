"""
牌组相关类型定义.

定义洗牌函数、筛选谓词和牌组快照等基础类型.
"""

import random
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

C = TypeVar('C')

# 原地打乱一个列表的函数，需要给出均匀随机的排列
Shuffler = Callable[[List[C]], None]

# 以只读方式检查一张牌的谓词
Predicate = Callable[[C], bool]


def make_shuffler(seed: Optional[int] = None) -> Shuffler:
    """
    创建基于随机数生成器的洗牌函数.

    Args:
        seed: 随机种子，用于可重现的洗牌结果。为None时使用系统熵

    Returns:
        Shuffler: 原地洗牌的函数
    """
    rng = random.Random(seed) if seed is not None else random.Random()
    return rng.shuffle


@dataclass(frozen=True)
class DeckSnapshot(Generic[C]):
    """
    牌组状态快照.

    记录某一时刻两个牌堆的内容和策略开关。快照只持有对牌的引用，
    不会复制牌本身.

    Attributes:
        draw_pile: 抽牌堆，下标0为下一张要抽的牌
        discard_pile: 弃牌堆，下标0为顶部
        shuffle_discards: 回收前是否洗弃牌堆
        stop_on_discards: 弃牌堆是否在回收前保持休眠
    """

    draw_pile: Tuple[C, ...]
    discard_pile: Tuple[C, ...]
    shuffle_discards: bool
    stop_on_discards: bool

    @property
    def visible_count(self) -> int:
        """当前策略下可以抽到的牌数"""
        if self.stop_on_discards:
            return len(self.draw_pile)
        return len(self.draw_pile) + len(self.discard_pile)

    @property
    def total_count(self) -> int:
        """两个牌堆中的牌总数"""
        return len(self.draw_pile) + len(self.discard_pile)
