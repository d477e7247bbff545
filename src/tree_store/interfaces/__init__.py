"""
接口定义包
"""

from .istore import ITreeStore

__all__ = [
    'ITreeStore',
]
