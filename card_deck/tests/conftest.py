"""
Card Deck Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的测试fixture
- 测试标记定义
"""

import pytest

from card_deck import Deck
from card_deck.application import ConfigService
from card_deck.tests.support import make_tokens


@pytest.fixture
def ordered_builder():
    """不洗牌的构建器fixture，抽牌顺序与提供顺序一致"""
    return Deck.build().pre_shuffle(False).shuffle_discards(False)


@pytest.fixture
def seeded_builder():
    """使用固定种子的构建器fixture"""
    return Deck.build().seed(20240601)


@pytest.fixture
def tokens():
    """8张只能按身份区分的测试牌"""
    return make_tokens(8)


@pytest.fixture
def config_service():
    """配置服务fixture"""
    return ConfigService()


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 标记单元测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
