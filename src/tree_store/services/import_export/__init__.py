"""
记录导入
"""

from .base_importer import DataImporter
from .frame_importer import FrameImporter

__all__ = ['DataImporter', 'FrameImporter']
