"""
树索引配置设置
"""
import logging
from typing import Dict, Any
from dataclasses import dataclass, asdict

from ..exceptions import ConfigError
from .validator import ConfigValidator, VALID_LOG_LEVELS


@dataclass
class StoreSettings:
    """
    树索引配置类
    使用dataclass确保配置的类型安全
    """

    # 日志配置
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    enable_logging: bool = True

    # 索引行为
    # 父节点不变的更新是否同步替换子列表中的旧记录
    refresh_children_on_update: bool = True

    # 导入列名配置
    id_column: str = "id"
    parent_column: str = "parent"
    label_column: str = "label"

    def __post_init__(self):
        """初始化后处理，验证配置"""
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()
        self._validate_settings()

    def _validate_settings(self):
        """验证配置值"""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level"
            )

        for key in ("id_column", "parent_column", "label_column"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(
                    message=f"列名不能为空: {key}",
                    config_key=key
                )

        if self.id_column == self.parent_column:
            raise ConfigError(
                message=f"ID列与父ID列不能相同: {self.id_column}",
                config_key="parent_column"
            )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'StoreSettings':
        """
        从字典创建配置

        先经 ConfigValidator 校验类型并丢弃未知配置项。

        Raises:
            ValidationError: 配置项类型或取值不合法
        """
        validated_config = ConfigValidator().validate_store_config(config_dict)
        return cls(**validated_config)


def setup_logging(settings: StoreSettings) -> None:
    """配置日志系统"""
    if not settings.enable_logging:
        return

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        handlers=[logging.StreamHandler()]
    )
