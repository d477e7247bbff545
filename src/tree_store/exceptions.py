"""
树索引异常体系

索引本身不抛异常（未知ID返回 None 或空列表），
异常只用于配置校验和数据导入。
"""
from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """
    树索引外围组件的异常基类

    code 为稳定的错误码，details 记录出错的配置项或数据源。
    """
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """错误码、消息和出错位置打包为字典，供日志和调用方排查"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置和验证异常 ====================
class ConfigError(BaseError):
    """StoreSettings 取值不合法"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


class ValidationError(BaseError):
    """原始配置字典未通过 ConfigValidator 校验"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        reason: Optional[str] = None,
        **kwargs
    ):
        details = {
            "field": field,
            "value": value,
            "reason": reason
        }
        super().__init__(message, code="VALIDATION_ERROR", details=details, **kwargs)


# ==================== 导入相关异常 ====================
class DataImportError(BaseError):
    """表格记录导入失败：文件不可读、扩展名不支持或缺少ID/父ID列"""
    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        details = {"source": source} if source else {}
        super().__init__(message, code="DATA_IMPORT_ERROR", details=details, **kwargs)
