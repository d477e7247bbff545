"""
记录导入器基类
导入器只负责把外部表格变成 TreeItem 列表，构建索引由调用方决定
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional

from tree_store.exceptions import DataImportError
from tree_store.types import TreeItem


class DataImporter(ABC):
    """
    记录导入器抽象基类

    子类实现文件校验、元数据提取、行解析和记录转换四步，
    import_data 按顺序串起这四步。
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self._validate_config()

    def _validate_config(self):
        """验证列名等配置参数，默认不做检查"""
        pass

    @abstractmethod
    def validate_file(self, file_path: str) -> bool:
        """文件存在且格式受支持时返回True"""
        pass

    @abstractmethod
    def extract_metadata(self, file_path: str) -> Dict[str, Any]:
        """提取文件名、大小等元数据，不读取记录"""
        pass

    @abstractmethod
    def parse_data(self, file_path: str) -> List[Dict[str, Any]]:
        """解析数据为 {id, parent, label} 行"""
        pass

    @abstractmethod
    def convert_to_records(self, data: List[Dict[str, Any]]) -> List[TreeItem]:
        """将行数据转换为记录"""
        pass

    def import_data(self, file_path: str) -> List[TreeItem]:
        """
        文件 -> 记录列表

        Raises:
            DataImportError: 文件未通过 validate_file
        """
        if not self.validate_file(file_path):
            raise DataImportError(f"文件验证失败: {file_path}", source=file_path)

        data = self.parse_data(file_path)
        return self.convert_to_records(data)
