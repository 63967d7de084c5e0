"""
不变量检查器基础类

定义不变量检查器的抽象基类和通用功能。
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence
import time
import uuid

from ..deck.types import DeckSnapshot
from .types import InvariantType, InvariantViolation, InvariantCheckResult

__all__ = ['BaseInvariantChecker']


class BaseInvariantChecker(ABC):
    """不变量检查器基础抽象类"""

    def __init__(self, invariant_type: InvariantType):
        """初始化检查器

        Args:
            invariant_type: 不变量类型
        """
        self.invariant_type = invariant_type
        self._violations: List[InvariantViolation] = []

    @abstractmethod
    def _perform_check(self, snapshot: DeckSnapshot, removed: Sequence[Any]) -> bool:
        """执行具体的不变量检查逻辑

        Args:
            snapshot: 牌组快照
            removed: 已经从牌组中取出、由调用方持有的牌

        Returns:
            bool: 检查是否通过
        """
        pass

    def check(self, snapshot: DeckSnapshot, removed: Sequence[Any] = ()) -> InvariantCheckResult:
        """执行不变量检查

        Args:
            snapshot: 牌组快照
            removed: 已经从牌组中取出、由调用方持有的牌

        Returns:
            InvariantCheckResult: 检查结果
        """
        start_time = time.perf_counter()
        self._violations.clear()

        try:
            is_valid = self._perform_check(snapshot, removed)
        except Exception as e:
            check_duration = time.perf_counter() - start_time
            # 检查过程本身出错同样记为违反
            violation = self._create_violation(
                description=f"检查过程中发生异常: {str(e)}",
                severity='CRITICAL',
                context={'exception_type': type(e).__name__, 'exception_message': str(e)}
            )
            return InvariantCheckResult.create_failure(
                invariant_type=self.invariant_type,
                violations=[violation],
                check_duration=check_duration
            )
        check_duration = time.perf_counter() - start_time

        if is_valid:
            return InvariantCheckResult.create_success(
                invariant_type=self.invariant_type,
                check_duration=check_duration
            )
        return InvariantCheckResult.create_failure(
            invariant_type=self.invariant_type,
            violations=self._violations.copy(),
            check_duration=check_duration
        )

    def _create_violation(self, description: str, severity: str = 'CRITICAL',
                          context: Optional[Dict[str, Any]] = None) -> InvariantViolation:
        """创建违反记录

        Args:
            description: 违反描述
            severity: 严重程度
            context: 上下文信息

        Returns:
            InvariantViolation: 违反记录
        """
        violation = InvariantViolation(
            invariant_type=self.invariant_type,
            violation_id=f"{self.invariant_type.name.lower()}_{uuid.uuid4().hex[:8]}",
            description=description,
            severity=severity,
            timestamp=time.time(),
            context=context or {}
        )

        self._violations.append(violation)
        return violation
