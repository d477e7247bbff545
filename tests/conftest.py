"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tree_store.types import TreeItem  # noqa: E402


@pytest.fixture
def sample_items():
    """
    示例树：
    1 ─┬─ '91064cee' ─┬─ 4 ─┬─ 7
       │              │     └─ 8
       │              ├─ 5
       │              └─ 6
       └─ 3
    """
    return [
        TreeItem(id=1, parent=None, label='记录 1'),
        TreeItem(id='91064cee', parent=1, label='记录 2'),
        TreeItem(id=3, parent=1, label='记录 3'),
        TreeItem(id=4, parent='91064cee', label='记录 4'),
        TreeItem(id=5, parent='91064cee', label='记录 5'),
        TreeItem(id=6, parent='91064cee', label='记录 6'),
        TreeItem(id=7, parent=4, label='记录 7'),
        TreeItem(id=8, parent=4, label='记录 8'),
    ]
