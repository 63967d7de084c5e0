"""
ConfigService - 配置管理服务

负责集中化管理牌组配置，包括：
- 牌组策略配置（预洗牌、回收洗牌、弃牌堆休眠、随机种子）
- 日志配置

配置以命名的profile保存，可以从YAML文件加载或覆盖。
"""

import dataclasses
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import Field, ValidationError
from pydantic.dataclasses import dataclass as pydantic_dataclass

from ..core.deck import DeckBuilder
from ..core.exceptions import DeckConfigError
from .types import QueryResult


class ConfigType(Enum):
    """配置类型枚举"""
    DECK = "deck"
    LOGGING = "logging"


@pydantic_dataclass
class DeckConfig:
    """牌组策略配置

    字段与DeckBuilder的设置方法一一对应。
    """
    pre_shuffle: bool = Field(True, description="构建时是否洗已提供的牌堆")
    shuffle_discards: bool = Field(True, description="回收前是否洗弃牌堆")
    stop_on_discards: bool = Field(False, description="弃牌堆是否在回收前保持休眠")
    random_seed: Optional[int] = Field(None, ge=0, description="随机种子，用于可重现的洗牌")

    def apply(self, builder: DeckBuilder) -> DeckBuilder:
        """把配置应用到构建器上

        Args:
            builder: 尚未完成的构建器

        Returns:
            DeckBuilder: 同一个构建器
        """
        builder.pre_shuffle(self.pre_shuffle) \
            .shuffle_discards(self.shuffle_discards) \
            .stop_on_discards(self.stop_on_discards)
        if self.random_seed is not None:
            builder.seed(self.random_seed)
        return builder


@pydantic_dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = Field('INFO', min_length=1, description="日志级别名称，如DEBUG、INFO")
    enable_file_logging: bool = Field(False, description="是否写日志文件")
    log_file_path: str = Field("logs/card_deck.log", min_length=1, description="日志文件路径")
    enable_console_logging: bool = Field(True, description="是否输出到控制台")
    log_format: str = Field('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                            description="日志格式")


_CONFIG_CLASSES = {
    ConfigType.DECK: DeckConfig,
    ConfigType.LOGGING: LoggingConfig,
}


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
            # 桌游式：弃牌堆直到手动回收前都不参与抽牌
            'tabletop': DeckConfig(stop_on_discards=True),
            # 不洗牌，按提供的顺序抽牌
            'ordered': DeckConfig(pre_shuffle=False, shuffle_discards=False),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING'),
        }

        self.logger.info("默认配置加载完成")

    def _get_config(self, config_type: ConfigType, profile: str) -> Any:
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return config_profiles[profile]

    def get_deck_config(self, profile: str = "default") -> QueryResult[DeckConfig]:
        """
        获取牌组策略配置

        Args:
            profile: 配置名 (default, tabletop, ordered 或从YAML加载的名称)

        Returns:
            查询结果，包含牌组策略配置
        """
        return QueryResult.success_result(self._get_config(ConfigType.DECK, profile))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置名 (default, debug, quiet)

        Returns:
            查询结果，包含日志配置
        """
        return QueryResult.success_result(self._get_config(ConfigType.LOGGING, profile))

    def create_builder(self, profile: str = "default") -> DeckBuilder:
        """
        创建按配置设置好的构建器

        Args:
            profile: 牌组配置名

        Returns:
            DeckBuilder: 已应用配置、尚未提供牌堆的构建器
        """
        config = self.get_deck_config(profile).data
        return config.apply(DeckBuilder())

    def update_config(self, config_type: ConfigType, profile: str,
                      updates: Dict[str, Any]) -> QueryResult[bool]:
        """
        更新配置

        新值会重新经过验证，验证失败时原配置保持不变。

        Args:
            config_type: 配置类型
            profile: 配置名
            updates: 更新的配置项

        Returns:
            查询结果，包含更新是否成功
        """
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            return QueryResult.failure_result(
                f"配置 {config_type.value}.{profile} 不存在",
                error_code="CONFIG_PROFILE_NOT_FOUND"
            )

        current_config = config_profiles[profile]
        known = {f.name for f in dataclasses.fields(current_config)}
        for key in updates:
            if key not in known:
                self.logger.warning(f"配置项 {key} 不存在于 {config_type.value}.{profile} 中")

        try:
            config_profiles[profile] = dataclasses.replace(
                current_config, **{k: v for k, v in updates.items() if k in known}
            )
        except ValidationError as e:
            return QueryResult.validation_error(
                f"配置 {config_type.value}.{profile} 验证失败: {e}",
                error_code="CONFIG_VALIDATION_FAILED"
            )

        self.logger.info(f"配置 {config_type.value}.{profile} 更新成功")
        return QueryResult.success_result(True)

    def list_available_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """
        列出可用的配置名

        Args:
            config_type: 配置类型

        Returns:
            查询结果，包含可用配置名列表
        """
        return QueryResult.success_result(sorted(self._configs[config_type]))

    def load_profiles_from_yaml(self, path: Union[str, Path]) -> QueryResult[List[str]]:
        """
        从YAML文件加载配置

        文件格式::

            deck:
              tabletop:
                stop_on_discards: true
            logging:
              debug:
                log_level: DEBUG

        同名配置会被覆盖。任何一个配置无效时不加载文件中的任何配置。

        Args:
            path: YAML文件路径

        Returns:
            查询结果，包含加载的配置名列表（格式为 "类型.名称"）
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"无法加载配置文件 {path}: {e}")
            return QueryResult.failure_result(
                f"无法加载配置文件 {path}: {e}",
                error_code="CONFIG_FILE_UNREADABLE"
            )

        # 空文件
        if raw is None:
            raw = {}

        try:
            parsed = self._parse_profiles(raw)
        except DeckConfigError as e:
            self.logger.error(f"配置文件 {path} 无效: {e}")
            return QueryResult.validation_error(str(e), error_code="CONFIG_VALIDATION_FAILED")

        loaded = []
        for config_type, profiles in parsed.items():
            self._configs[config_type].update(profiles)
            loaded.extend(f"{config_type.value}.{name}" for name in profiles)

        self.logger.info(f"从 {path} 加载了{len(loaded)}个配置")
        return QueryResult.success_result(loaded)

    def _parse_profiles(self, raw: Any) -> Dict[ConfigType, Dict[str, Any]]:
        """把YAML内容解析为配置对象

        Raises:
            DeckConfigError: 当结构或字段无效时
        """
        if not isinstance(raw, dict):
            raise DeckConfigError("配置文件顶层必须是映射")

        parsed: Dict[ConfigType, Dict[str, Any]] = {}
        for section, profiles in raw.items():
            try:
                config_type = ConfigType(section)
            except ValueError:
                raise DeckConfigError(f"未知的配置类型: {section}") from None
            if not isinstance(profiles, dict):
                raise DeckConfigError(f"配置类型 {section} 下必须是映射")

            config_class = _CONFIG_CLASSES[config_type]
            parsed[config_type] = {
                str(name): self._build_config(config_class, f"{section}.{name}", values or {})
                for name, values in profiles.items()
            }
        return parsed

    def _build_config(self, config_class: type, label: str, values: Any) -> Any:
        if not isinstance(values, dict):
            raise DeckConfigError(f"配置 {label} 必须是映射")
        unknown = _unknown_keys(config_class, values)
        if unknown:
            raise DeckConfigError(f"配置 {label} 包含未知字段: {', '.join(unknown)}")
        try:
            return config_class(**values)
        except (ValidationError, TypeError) as e:
            raise DeckConfigError(f"配置 {label} 验证失败: {e}") from e


def _unknown_keys(config_class: type, values: Dict[str, Any]) -> List[str]:
    known = {f.name for f in dataclasses.fields(config_class)}
    return sorted(str(key) for key in values if key not in known)
