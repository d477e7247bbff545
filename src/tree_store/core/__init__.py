"""
核心模块包
包含树索引实现
"""

from .store import TreeStore

__all__ = [
    'TreeStore',
]
