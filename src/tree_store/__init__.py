"""
树索引 - 扁平记录列表上的父子关系索引
"""

__version__ = "1.0.0"

from .types import Key, TreeItem
from .core import TreeStore
from .config.settings import StoreSettings

__all__ = ['TreeStore', 'TreeItem', 'Key', 'StoreSettings']
