"""
Application Layer Types - 应用层类型定义

定义应用服务层使用的查询结果类型。
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar
from enum import Enum, auto

T = TypeVar('T')


class ResultStatus(Enum):
    """操作结果状态"""
    SUCCESS = auto()
    FAILURE = auto()
    VALIDATION_ERROR = auto()
    SYSTEM_ERROR = auto()


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """查询结果"""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_result(cls, data: T, message: str = "查询成功") -> 'QueryResult[T]':
        """创建成功结果"""
        return cls(
            success=True,
            status=ResultStatus.SUCCESS,
            data=data,
            message=message
        )

    @classmethod
    def failure_result(cls, message: str, error_code: Optional[str] = None,
                       status: ResultStatus = ResultStatus.FAILURE) -> 'QueryResult[T]':
        """创建失败结果"""
        return cls(
            success=False,
            status=status,
            message=message,
            error_code=error_code
        )

    @classmethod
    def validation_error(cls, message: str, error_code: Optional[str] = None) -> 'QueryResult[T]':
        """创建验证错误结果"""
        return cls.failure_result(message, error_code, ResultStatus.VALIDATION_ERROR)
