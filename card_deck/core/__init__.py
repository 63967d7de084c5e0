"""
Card Deck Core Module - 纯领域逻辑层

该模块包含牌组的核心逻辑，不依赖应用层.

Modules:
    deck: 抽牌堆、弃牌堆和回收策略
    invariant: 牌守恒检查
    playing_card: 标准扑克牌类型
    exceptions: 异常定义
"""

from .deck import Deck, DeckBuilder

__all__ = ['Deck', 'DeckBuilder']
