"""
记录类型定义
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

# int 与 str 自带按值比较和哈希，1 与 "1" 是两个不同的键
Key = Union[int, str]
ParentKey = Optional[Key]


@dataclass(frozen=True)
class TreeItem:
    """
    树记录 - 扁平列表中的一项

    索引只读取 id 和 parent，label 对索引是不透明的。
    """

    id: Key
    parent: ParentKey = None
    label: str = ""

    @property
    def is_root(self) -> bool:
        """parent 为 None 的记录是根"""
        return self.parent is None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'TreeItem':
        """从字典创建记录，缺少 parent 视为根"""
        return cls(
            id=data['id'],
            parent=data.get('parent'),
            label=data.get('label', "")
        )
