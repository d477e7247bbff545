"""
配置验证器
"""
from typing import Dict, Any

from ..exceptions import ValidationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
BOOLEAN_FIELDS = ('enable_logging', 'refresh_children_on_update')
COLUMN_FIELDS = ('id_column', 'parent_column', 'label_column')


class ConfigValidator:
    """配置验证器"""

    def validate_store_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        验证并清理索引配置

        Args:
            config: 原始配置字典

        Returns:
            只包含已知配置项的字典

        Raises:
            ValidationError: 配置不是字典，或配置项类型、取值不合法
        """
        if not isinstance(config, dict):
            raise ValidationError(
                message=f"配置必须是字典: {type(config).__name__}",
                field="config",
                value=type(config).__name__,
                reason="invalid_type"
            )

        validated = {}

        if 'log_level' in config:
            level = config['log_level']
            if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
                raise ValidationError(
                    message=f"无效的日志级别: {level}",
                    field="log_level",
                    value=level,
                    reason=f"必须是 {VALID_LOG_LEVELS} 之一"
                )
            validated['log_level'] = level.upper()

        if 'log_format' in config:
            if not self._validate_string(config['log_format'], max_len=500):
                raise ValidationError(
                    message="日志格式必须是非空字符串",
                    field="log_format",
                    value=config['log_format'],
                    reason="invalid_type"
                )
            validated['log_format'] = config['log_format']

        for field in BOOLEAN_FIELDS:
            if field in config:
                if not isinstance(config[field], bool):
                    raise ValidationError(
                        message=f"配置项必须是布尔值: {field}",
                        field=field,
                        value=config[field],
                        reason="invalid_type"
                    )
                validated[field] = config[field]

        for field in COLUMN_FIELDS:
            if field in config:
                if not self._validate_string(config[field]):
                    raise ValidationError(
                        message=f"列名必须是1-100个字符的字符串: {field}",
                        field=field,
                        value=config[field],
                        reason="invalid_name"
                    )
                validated[field] = config[field]

        return validated

    def _validate_string(self, value: Any, min_len: int = 1, max_len: int = 100) -> bool:
        """验证字符串"""
        return isinstance(value, str) and min_len <= len(value.strip()) and len(value) <= max_len
