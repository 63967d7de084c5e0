"""
牌组业务异常定义
区分调用方误用(向上抛)和正常的空牌/未找到结果(返回None)
"""


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class BuilderConsumedError(DeckError):
    """构建器已经调用过done()后又被继续使用"""
    pass


class DeckMutationError(DeckError, RuntimeError):
    """迭代器存活期间牌堆被结构性修改"""
    pass


class DeckConfigError(DeckError):
    """牌组配置错误异常"""
    pass


class InvalidCardError(DeckError, ValueError):
    """无效扑克牌异常"""
    pass
