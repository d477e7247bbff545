"""
表格记录导入器
把 DataFrame / CSV / Excel 中的 id、parent、label 列转换为 TreeItem 列表
"""
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Any, Optional, Union

import pandas as pd

from tree_store.config.settings import StoreSettings
from tree_store.core.store import TreeStore
from tree_store.exceptions import DataImportError
from tree_store.types import Key, TreeItem
from .base_importer import DataImporter

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {'.csv', '.xlsx', '.xls'}


class FrameImporter(DataImporter):
    """
    表格记录导入器

    只做取值规整，不做记录校验：
    1. 空值父ID -> None
    2. 整数形式的浮点数和 numpy 整数 -> int
    3. 字符串只去掉首尾空白，仍为 str（"007" 与 "7" 是两个键）
    4. ID为空的行跳过

    从文件读取时所有列按字符串读入，ID列与父ID列的键类型因此一致。
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.id_column = self.config.get('id_column', 'id')
        self.parent_column = self.config.get('parent_column', 'parent')
        self.label_column = self.config.get('label_column', 'label')

        # 统计信息
        self.stats = {
            'files_processed': 0,
            'rows_parsed': 0,
            'rows_skipped': 0,
        }

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> 'FrameImporter':
        """按索引配置中的列名创建导入器"""
        return cls({
            'id_column': settings.id_column,
            'parent_column': settings.parent_column,
            'label_column': settings.label_column,
        })

    def _validate_config(self):
        for key in ('id_column', 'parent_column', 'label_column'):
            value = self.config.get(key)
            if value is not None and (not isinstance(value, str) or not value.strip()):
                raise DataImportError(f"列名配置无效: {key}={value!r}")

    # ============ 抽象方法实现 ============

    def validate_file(self, file_path: str) -> bool:
        """文件存在且扩展名受支持"""
        path = Path(file_path)
        return path.is_file() and path.suffix.lower() in SUPPORTED_EXTENSIONS

    def extract_metadata(self, file_path: str) -> Dict[str, Any]:
        """提取文件元数据"""
        metadata = {
            'file_path': str(file_path),
            'file_name': Path(file_path).name,
            'import_time': datetime.now().isoformat(),
            'config': self.config
        }

        if os.path.exists(file_path):
            file_stat = os.stat(file_path)
            metadata.update({
                'file_size': file_stat.st_size,
                'modified_time': datetime.fromtimestamp(file_stat.st_mtime).isoformat()
            })

        return metadata

    def parse_data(self, file_path: str) -> List[Dict[str, Any]]:
        """读取文件并解析为行"""
        if not self.validate_file(file_path):
            raise DataImportError(f"无效的文件: {file_path}", source=str(file_path))

        suffix = Path(file_path).suffix.lower()
        try:
            if suffix == '.csv':
                df = pd.read_csv(file_path, dtype=str)
            else:
                df = pd.read_excel(file_path, dtype=str)
        except (OSError, ValueError) as e:
            raise DataImportError(f"读取文件失败: {e}", source=str(file_path)) from e

        rows = self.parse_frame(df)
        self.stats['files_processed'] += 1
        logger.info(f"解析文件完成: {Path(file_path).name}, {len(rows)}行")
        return rows

    def convert_to_records(self, data: List[Dict[str, Any]]) -> List[TreeItem]:
        """将行数据转换为记录"""
        return [TreeItem.from_dict(row) for row in data]

    # ============ DataFrame 入口 ============

    def parse_frame(self, df: pd.DataFrame) -> List[Dict[str, Any]]:
        """
        把 DataFrame 解析为 {id, parent, label} 行

        Raises:
            DataImportError: 缺少ID列或父ID列
        """
        for column in (self.id_column, self.parent_column):
            if column not in df.columns:
                raise DataImportError(f"未找到列: {column}")

        has_label = self.label_column in df.columns
        rows = []

        for idx, row in df.iterrows():
            item_id = self._normalize_key(row[self.id_column])
            if item_id is None:
                self.stats['rows_skipped'] += 1
                logger.warning(f"第{idx}行缺少ID，已跳过")
                continue

            label = row[self.label_column] if has_label else ""
            rows.append({
                'id': item_id,
                'parent': self._normalize_key(row[self.parent_column]),
                'label': "" if pd.isna(label) else str(label),
            })
            self.stats['rows_parsed'] += 1

        return rows

    def from_frame(self, df: pd.DataFrame) -> List[TreeItem]:
        """DataFrame -> 记录列表"""
        return self.convert_to_records(self.parse_frame(df))

    def build_store(
        self,
        source: Union[str, Path, pd.DataFrame],
        settings: Optional[StoreSettings] = None
    ) -> TreeStore:
        """导入记录并构建树索引"""
        if isinstance(source, pd.DataFrame):
            records = self.from_frame(source)
        else:
            records = self.import_data(str(source))

        return TreeStore(records, settings=settings)

    # ============ 辅助方法 ============

    @staticmethod
    def _normalize_key(value: Any) -> Optional[Key]:
        """规整单元格取值为 int / str / None"""
        if value is None or pd.isna(value):
            return None

        if isinstance(value, float):
            return int(value) if value.is_integer() else str(value)

        if isinstance(value, int):
            return int(value)

        # numpy 整数类型
        if hasattr(value, 'item') and isinstance(value.item(), int):
            return int(value.item())

        text = str(value).strip()
        return text or None
