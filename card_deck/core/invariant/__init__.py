"""
Invariant Module - 牌组不变量

该模块实现牌组的不变量检查，包括：
- 牌守恒验证（不丢失、不复制）

Classes:
    CardConservationChecker: 牌守恒检查器
    BaseInvariantChecker: 不变量检查器基类

Types:
    InvariantType: 不变量类型枚举
    InvariantViolation: 不变量违反记录
    InvariantCheckResult: 不变量检查结果
    InvariantError: 不变量错误异常
"""

from .types import (
    InvariantType,
    InvariantViolation,
    InvariantCheckResult,
    InvariantError
)
from .base_checker import BaseInvariantChecker
from .card_conservation_checker import CardConservationChecker

__all__ = [
    'CardConservationChecker',
    'BaseInvariantChecker',

    # 类型定义
    'InvariantType',
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError'
]
