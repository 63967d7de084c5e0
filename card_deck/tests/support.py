"""
测试辅助类型

Token是一种只能按身份区分的牌：禁止比较、哈希和复制，
用来证明牌组对牌没有任何额外要求。
"""

from typing import List


class Token:
    """只有身份的测试牌"""

    __hash__ = None

    def __init__(self, label: int):
        self.label = label

    def __eq__(self, other):
        raise TypeError("Token不支持比较")

    def __copy__(self):
        raise TypeError("Token不能被复制")

    def __deepcopy__(self, memo):
        raise TypeError("Token不能被复制")

    def __repr__(self) -> str:
        return f"Token({self.label})"


def make_tokens(count: int, start: int = 0) -> List[Token]:
    """生成label从start开始连续的Token列表"""
    return [Token(label) for label in range(start, start + count)]


def labels(cards) -> List[int]:
    """取出一组Token的label"""
    return [card.label for card in cards]
