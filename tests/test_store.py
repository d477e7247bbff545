"""
测试树索引
"""

import sys
import os
import logging

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tree_store import TreeStore, TreeItem, StoreSettings
from tree_store.interfaces import ITreeStore


class TestTreeStoreQueries:
    """测试查询操作"""

    @pytest.fixture
    def store(self, sample_items):
        return TreeStore(sample_items)

    def test_implements_interface(self, store):
        assert isinstance(store, ITreeStore)

    def test_get_all(self, store, sample_items):
        result = store.get_all()
        assert result == sample_items
        assert len(result) == 8

    def test_input_list_not_shared(self, sample_items):
        """构建时复制输入列表"""
        store = TreeStore(sample_items)
        store.add_item(TreeItem(id=9, parent=3, label='记录 9'))

        assert len(sample_items) == 8
        assert len(store.get_all()) == 9

    def test_get_item_by_numeric_and_string_id(self, store, sample_items):
        assert store.get_item(1) is sample_items[0]
        assert store.get_item('91064cee') is sample_items[1]

    def test_get_item_missing(self, store):
        assert store.get_item(2) is None
        assert store.get_item('1') is None

    def test_get_children(self, store, sample_items):
        assert store.get_children(1) == [sample_items[1], sample_items[2]]
        assert store.get_children('91064cee') == sample_items[3:6]

    def test_get_children_empty(self, store):
        assert store.get_children(5) == []
        assert store.get_children('missing') == []

    def test_get_children_of_none_returns_roots(self, store, sample_items):
        assert store.get_children(None) == [sample_items[0]]

    def test_get_all_children_level_order(self, store, sample_items):
        result = store.get_all_children(1)
        assert len(result) == 7
        assert result == sample_items[1:8]

    def test_get_all_children_subtree(self, store, sample_items):
        assert store.get_all_children('91064cee') == sample_items[3:8]
        assert store.get_all_children(4) == [sample_items[6], sample_items[7]]

    def test_get_all_children_leaf_and_missing(self, store):
        assert store.get_all_children(5) == []
        assert store.get_all_children(404) == []

    def test_get_all_parents(self, store, sample_items):
        assert store.get_all_parents(5) == [
            sample_items[4],
            sample_items[1],
            sample_items[0],
        ]

    def test_get_all_parents_root(self, store, sample_items):
        assert store.get_all_parents(1) == [sample_items[0]]

    def test_get_all_parents_missing(self, store):
        assert store.get_all_parents(2) == []

    def test_get_data_path(self, store):
        assert store.get_data_path(7) == ['1', '91064cee', '4', '7']
        assert store.get_data_path(1) == ['1']
        assert store.get_data_path(2) == []

    def test_container_protocol(self, store, sample_items):
        assert len(store) == 8
        assert 4 in store
        assert '4' not in store
        assert list(store) == sample_items
        assert repr(store) == "TreeStore(items=8, roots=1)"


class TestTreeStoreConstruction:
    """测试构建阶段的边界情况"""

    def test_children_before_parent(self):
        """子记录可以排在父记录之前"""
        items = [
            TreeItem(id=2, parent=1, label='b'),
            TreeItem(id=1, parent=None, label='a'),
            TreeItem(id=3, parent=1, label='c'),
        ]
        store = TreeStore(items)

        assert store.get_children(1) == [items[0], items[2]]
        assert store.get_all_parents(2) == [items[0], items[1]]

    def test_falsy_keys_are_traversed(self):
        items = [
            TreeItem(id=0, parent=None, label='zero'),
            TreeItem(id=1, parent=0, label='one'),
            TreeItem(id='', parent=1, label='empty'),
        ]
        store = TreeStore(items)

        assert store.get_all_children(0) == [items[1], items[2]]
        assert store.get_data_path('') == ['0', '1', '']

    def test_int_and_str_keys_are_distinct(self):
        items = [
            TreeItem(id=1, parent=None, label='int'),
            TreeItem(id='1', parent=None, label='str'),
            TreeItem(id=2, parent='1', label='child of str'),
        ]
        store = TreeStore(items)

        assert store.get_item(1).label == 'int'
        assert store.get_item('1').label == 'str'
        assert store.get_children(1) == []
        assert store.get_children('1') == [items[2]]

    def test_empty_store(self):
        store = TreeStore([])
        assert store.get_all() == []
        assert store.get_children(None) == []
        assert len(store) == 0

    def test_dangling_parent_ends_chain(self):
        items = [
            TreeItem(id='a', parent='ghost', label='orphan'),
            TreeItem(id='b', parent='a', label='child'),
        ]
        store = TreeStore(items)

        assert store.get_all_parents('b') == [items[1], items[0]]
        assert store.get_data_path('b') == ['a', 'b']
        assert store.get_children('ghost') == [items[0]]

    def test_cycle_does_not_hang_ancestor_walk(self):
        items = [
            TreeItem(id=1, parent=2, label='x'),
            TreeItem(id=2, parent=1, label='y'),
        ]
        store = TreeStore(items)

        assert store.get_all_parents(1) == [items[0], items[1]]


class TestTreeStoreAdd:
    """测试添加记录"""

    @pytest.fixture
    def store(self, sample_items):
        return TreeStore(sample_items)

    def test_add_child(self, store, sample_items):
        item = TreeItem(id=9, parent=3, label='记录 9')
        store.add_item(item)

        assert store.get_all()[-1] is item
        assert store.get_item(9) is item
        assert store.get_children(3) == [item]
        assert item in store.get_all_children(1)
        assert store.get_all_parents(9) == [item, sample_items[2], sample_items[0]]

    def test_add_root(self, store, sample_items):
        item = TreeItem(id='r2', parent=None, label='第二个根')
        store.add_item(item)

        assert store.get_children(None) == [sample_items[0], item]

    def test_add_with_dangling_parent(self, store):
        item = TreeItem(id=10, parent=99, label='悬空')
        store.add_item(item)

        assert store.get_children(99) == [item]
        assert store.get_all_parents(10) == [item]
        assert store.get_data_path(10) == ['10']

    def test_add_duplicate_id_shadows(self, store, caplog):
        dup = TreeItem(id=5, parent=3, label='重复')

        with caplog.at_level(logging.WARNING, logger='tree_store.core.store'):
            store.add_item(dup)

        assert store.get_item(5) is dup
        assert len(store.get_all()) == 9
        assert store.get_children(3) == [dup]
        assert "重复的记录ID" in caplog.text


class TestTreeStoreRemove:
    """测试级联删除"""

    @pytest.fixture
    def store(self, sample_items):
        return TreeStore(sample_items)

    def test_remove_interior_node(self, store, sample_items):
        store.remove_item(4)

        assert len(store.get_all()) == 5
        for removed_id in (4, 7, 8):
            assert store.get_item(removed_id) is None
        assert store.get_children('91064cee') == [sample_items[4], sample_items[5]]
        assert store.get_children(4) == []
        assert 4 not in store._children_map

    def test_remove_keeps_order(self, store, sample_items):
        store.remove_item('91064cee')

        assert store.get_all() == [sample_items[0], sample_items[2]]
        assert store.get_children(1) == [sample_items[2]]

    def test_remove_leaf(self, store, sample_items):
        store.remove_item(3)

        assert store.get_children(1) == [sample_items[1]]
        assert len(store) == 7

    def test_remove_root_clears_everything(self, store):
        store.remove_item(1)

        assert store.get_all() == []
        assert store.get_children(None) == []
        assert store._items_map == {}

    def test_remove_missing_is_noop(self, store, sample_items):
        store.remove_item(999)

        assert store.get_all() == sample_items

    def test_remove_then_add_again(self, store):
        store.remove_item(4)
        item = TreeItem(id=4, parent=6, label='新的4')
        store.add_item(item)

        assert store.get_children(6) == [item]
        assert store.get_data_path(4) == ['1', '91064cee', '6', '4']


class TestTreeStoreUpdate:
    """测试更新记录"""

    @pytest.fixture
    def store(self, sample_items):
        return TreeStore(sample_items)

    def test_update_same_parent_replaces(self, store):
        updated = TreeItem(id=5, parent='91064cee', label='新标签')
        store.update_item(updated)

        assert store.get_item(5) is updated
        assert store.get_all()[4] is updated
        assert store.get_children('91064cee')[1] is updated

    def test_update_same_parent_stale_children(self, sample_items):
        settings = StoreSettings(refresh_children_on_update=False, enable_logging=False)
        store = TreeStore(sample_items, settings=settings)

        updated = TreeItem(id=5, parent='91064cee', label='新标签')
        store.update_item(updated)

        assert store.get_item(5) is updated
        assert store.get_children('91064cee')[1] is sample_items[4]

    def test_update_reparent_moves_subtree(self, store, sample_items):
        moved = TreeItem(id=4, parent=3, label='移动的4')
        store.update_item(moved)

        assert store.get_all()[3] is moved
        assert store.get_children('91064cee') == [sample_items[4], sample_items[5]]
        assert store.get_children(3) == [moved]
        assert store.get_all_children(3) == [moved, sample_items[6], sample_items[7]]
        assert moved not in store.get_all_children('91064cee')
        assert store.get_data_path(7) == ['1', '3', '4', '7']

    def test_update_to_root(self, store, sample_items):
        promoted = TreeItem(id=3, parent=None, label='新根')
        store.update_item(promoted)

        assert store.get_children(None) == [sample_items[0], promoted]
        assert store.get_children(1) == [sample_items[1]]
        assert store.get_all_parents(3) == [promoted]

    def test_update_is_full_replacement(self, store):
        store.update_item(TreeItem(id=6, parent='91064cee'))

        assert store.get_item(6).label == ""

    def test_update_missing_is_noop(self, store, sample_items):
        store.update_item(TreeItem(id=42, parent=1, label='不存在'))

        assert store.get_all() == sample_items
        assert store.get_item(42) is None
        assert store.get_children(1) == [sample_items[1], sample_items[2]]
