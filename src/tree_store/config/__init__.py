"""
配置模块
"""

from .settings import StoreSettings, setup_logging
from .validator import ConfigValidator

__all__ = ['StoreSettings', 'setup_logging', 'ConfigValidator']
