"""
树索引接口定义
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..types import Key, ParentKey, TreeItem


class ITreeStore(ABC):
    """树索引接口 - 定义扁平记录集合上的查询和修改"""

    # ========== 查询 ==========

    @abstractmethod
    def get_all(self) -> List[TreeItem]:
        """全部记录，按插入顺序"""
        pass

    @abstractmethod
    def get_item(self, item_id: Key) -> Optional[TreeItem]:
        """按ID获取记录，不存在时返回None"""
        pass

    @abstractmethod
    def get_children(self, item_id: ParentKey) -> List[TreeItem]:
        """直接子记录"""
        pass

    @abstractmethod
    def get_all_children(self, item_id: Key) -> List[TreeItem]:
        """全部后代（广度优先，不含自身）"""
        pass

    @abstractmethod
    def get_all_parents(self, item_id: Key) -> List[TreeItem]:
        """自身及全部祖先，自身在前、根在后"""
        pass

    @abstractmethod
    def get_data_path(self, item_id: Key) -> List[str]:
        """从根到自身的ID路径（字符串形式）"""
        pass

    # ========== 修改 ==========

    @abstractmethod
    def add_item(self, item: TreeItem) -> None:
        """追加记录"""
        pass

    @abstractmethod
    def remove_item(self, item_id: Key) -> None:
        """删除记录及其整棵子树"""
        pass

    @abstractmethod
    def update_item(self, item: TreeItem) -> None:
        """按ID整体替换记录，必要时调整父子关系"""
        pass
