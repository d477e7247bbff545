"""
树索引模块
在扁平记录列表上维护按ID索引和按父ID分组的子记录索引
"""

import logging
from collections import deque
from typing import Dict, Iterable, Iterator, List, Optional

from ..config.settings import StoreSettings
from ..interfaces import ITreeStore
from ..types import Key, ParentKey, TreeItem

logger = logging.getLogger(__name__)


class TreeStore(ITreeStore):
    """
    树索引 - 同一组记录的三个视图

    1. _items：全部记录，保持插入顺序
    2. _items_map：ID -> 记录
    3. _children_map：父ID（含None）-> 直接子记录列表

    每次修改都会同时更新三个视图。未知ID不抛异常，
    查询返回 None 或空列表，修改静默忽略。
    """

    def __init__(self, items: Iterable[TreeItem], settings: Optional[StoreSettings] = None):
        """
        初始化树索引

        Args:
            items: 初始记录（ID唯一、无环），父记录不必排在子记录之前
            settings: 索引配置，默认使用StoreSettings()
        """
        self.settings = settings or StoreSettings()

        self._items: List[TreeItem] = list(items)
        self._items_map: Dict[Key, TreeItem] = {}
        self._children_map: Dict[ParentKey, List[TreeItem]] = {}

        # 第一遍：注册ID，为每个父ID准备子列表
        for item in self._items:
            self._items_map[item.id] = item
            self._children_map.setdefault(item.parent, [])

        # 第二遍：按输入顺序填充子列表
        for item in self._items:
            self._children_map[item.parent].append(item)

        logger.debug(
            f"树索引构建完成: {len(self._items)}条记录, {len(self._children_map)}个父ID"
        )

    # ========== 查询 ==========

    def get_all(self) -> List[TreeItem]:
        """获取全部记录（返回内部列表，调用方不应修改）"""
        return self._items

    def get_item(self, item_id: Key) -> Optional[TreeItem]:
        """根据ID获取记录"""
        return self._items_map.get(item_id)

    def get_children(self, item_id: ParentKey) -> List[TreeItem]:
        """获取直接子记录，get_children(None) 返回全部根记录"""
        return self._children_map.get(item_id, [])

    def get_all_children(self, item_id: Key) -> List[TreeItem]:
        """
        获取全部后代记录

        广度优先遍历，结果按层序排列，不包含自身。

        Args:
            item_id: 子树根的ID

        Returns:
            后代记录列表，叶子或未知ID返回空列表
        """
        result: List[TreeItem] = []
        queue = deque([item_id])

        while queue:
            current_id = queue.popleft()
            for child in self.get_children(current_id):
                result.append(child)
                queue.append(child.id)

        return result

    def get_all_parents(self, item_id: Key) -> List[TreeItem]:
        """
        获取自身及全部祖先

        Returns:
            [自身, 父, 祖父, ..., 根]，未知ID返回空列表。
            父ID无对应记录时链在此处结束。
        """
        item = self._items_map.get(item_id)
        if item is None:
            return []

        result = [item]
        visited = {item.id}

        while item.parent is not None:
            parent = self._items_map.get(item.parent)
            if parent is None or parent.id in visited:
                break
            result.append(parent)
            visited.add(parent.id)
            item = parent

        return result

    def get_data_path(self, item_id: Key) -> List[str]:
        """获取从根到自身的ID路径"""
        return [str(item.id) for item in reversed(self.get_all_parents(item_id))]

    # ========== 修改 ==========

    def add_item(self, item: TreeItem) -> None:
        """
        追加记录

        不检查父记录是否存在；重复ID会覆盖ID索引中的旧记录。
        """
        if item.id in self._items_map:
            logger.warning(f"重复的记录ID, 新记录将覆盖ID索引: {item.id!r}")

        self._items.append(item)
        self._items_map[item.id] = item
        self._children_map.setdefault(item.parent, []).append(item)

        logger.debug(f"添加记录: {item.id!r} -> 父ID {item.parent!r}")

    def remove_item(self, item_id: Key) -> None:
        """
        删除记录及其整棵子树

        级联删除：所有后代记录一并移除。
        """
        item = self._items_map.get(item_id)
        if item is None:
            return

        to_delete = [item] + self.get_all_children(item_id)
        deleted_refs = {id(entry) for entry in to_delete}

        self._items = [entry for entry in self._items if id(entry) not in deleted_refs]

        for entry in to_delete:
            self._items_map.pop(entry.id, None)

            siblings = self._children_map.get(entry.parent)
            if siblings is not None:
                self._remove_by_id(siblings, entry.id)

            self._children_map.pop(entry.id, None)

        logger.debug(f"删除记录: {item_id!r}, 共移除{len(to_delete)}条")

    def update_item(self, item: TreeItem) -> None:
        """
        按ID整体替换记录

        父ID变化时把记录移到新父ID的子列表末尾；
        后代记录的parent不变，因此整棵子树随之移动。
        """
        old_item = self._items_map.get(item.id)
        if old_item is None:
            return

        index = self._find_index(self._items, item.id)
        if index is not None:
            self._items[index] = item

        self._items_map[item.id] = item

        if item.parent != old_item.parent:
            old_siblings = self._children_map.get(old_item.parent)
            if old_siblings is not None:
                self._remove_by_id(old_siblings, item.id)

            self._children_map.setdefault(item.parent, []).append(item)
            logger.debug(f"移动记录: {item.id!r}, {old_item.parent!r} -> {item.parent!r}")

        elif self.settings.refresh_children_on_update:
            siblings = self._children_map.get(item.parent, [])
            sibling_index = self._find_index(siblings, item.id)
            if sibling_index is not None:
                siblings[sibling_index] = item

    # ========== 容器协议 ==========

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items_map

    def __iter__(self) -> Iterator[TreeItem]:
        return iter(self._items)

    def __repr__(self) -> str:
        roots = len(self._children_map.get(None, []))
        return f"TreeStore(items={len(self._items)}, roots={roots})"

    # ========== 内部工具 ==========

    @staticmethod
    def _find_index(items: List[TreeItem], item_id: Key) -> Optional[int]:
        """按ID查找第一个匹配位置"""
        for index, entry in enumerate(items):
            if entry.id == item_id:
                return index
        return None

    @classmethod
    def _remove_by_id(cls, items: List[TreeItem], item_id: Key) -> None:
        """按ID移除第一个匹配项"""
        index = cls._find_index(items, item_id)
        if index is not None:
            del items[index]
