"""
日志设置

把LoggingConfig应用到card_deck包的根logger上。
"""

import logging
from pathlib import Path
from typing import Optional

from ..core.exceptions import DeckConfigError
from .config_service import LoggingConfig

ROOT_LOGGER_NAME = "card_deck"


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    按配置设置card_deck的日志输出

    重复调用时会先移除上一次添加的处理器。

    Args:
        config: 日志配置，为None时使用默认配置

    Returns:
        logging.Logger: card_deck根logger

    Raises:
        DeckConfigError: 当日志级别无效时
    """
    config = config or LoggingConfig()
    if not isinstance(config.log_level, str):
        raise DeckConfigError(f"日志级别必须是名称字符串: {config.log_level!r}")
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise DeckConfigError(f"无效的日志级别: {config.log_level}")

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.log_format)

    if config.enable_console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.enable_file_logging:
        log_path = Path(config.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
