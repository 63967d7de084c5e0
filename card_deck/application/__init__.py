"""
Application Layer - 应用服务层

提供牌组配置管理和日志设置。

Services:
    ConfigService: 配置管理服务
    configure_logging: 日志设置
"""

from .config_service import ConfigService, ConfigType, DeckConfig, LoggingConfig
from .logging_setup import configure_logging
from .types import QueryResult, ResultStatus

__all__ = [
    'ConfigService',
    'ConfigType',
    'DeckConfig',
    'LoggingConfig',
    'configure_logging',
    'QueryResult',
    'ResultStatus',
]
