"""
日志设置单元测试
"""

import logging

import pytest
from pydantic import ValidationError

from card_deck import DeckConfigError
from card_deck.application import LoggingConfig, configure_logging


@pytest.fixture
def restore_logger():
    """测试结束后还原card_deck logger"""
    logger = logging.getLogger("card_deck")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)


@pytest.mark.unit
class TestConfigureLogging:
    """测试日志设置"""

    def test_console_logging(self, restore_logger):
        """测试默认配置只添加控制台处理器"""
        logger = configure_logging()

        assert logger is restore_logger
        assert logger.level == logging.INFO
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]

    def test_file_logging(self, restore_logger, tmp_path):
        """测试文件日志写入"""
        log_file = tmp_path / "logs" / "deck.log"
        configure_logging(LoggingConfig(
            log_level='DEBUG',
            enable_console_logging=False,
            enable_file_logging=True,
            log_file_path=str(log_file)
        ))

        logging.getLogger("card_deck.core.deck.deck").debug("回收测试")
        for handler in restore_logger.handlers:
            handler.flush()

        assert "回收测试" in log_file.read_text(encoding="utf-8")

    def test_repeated_calls_replace_handlers(self, restore_logger):
        """测试重复调用不会叠加处理器"""
        configure_logging()
        configure_logging()

        assert len(restore_logger.handlers) == 1

    def test_no_output_gets_null_handler(self, restore_logger):
        """测试关闭所有输出时使用NullHandler"""
        logger = configure_logging(LoggingConfig(enable_console_logging=False))

        assert [type(h) for h in logger.handlers] == [logging.NullHandler]

    def test_invalid_level(self, restore_logger):
        """测试无效的日志级别"""
        with pytest.raises(DeckConfigError):
            configure_logging(LoggingConfig(log_level='LOUD'))

    def test_non_string_level(self, restore_logger):
        """测试构建后被改成数字的日志级别"""
        config = LoggingConfig()
        config.log_level = 10

        with pytest.raises(DeckConfigError):
            configure_logging(config)

    def test_numeric_level_rejected_on_construction(self):
        """测试LoggingConfig拒绝数字日志级别"""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level=10)
