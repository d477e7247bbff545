"""
树索引基本使用示例
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pandas as pd

from tree_store import TreeItem, StoreSettings
from tree_store.config import setup_logging
from tree_store.services.import_export import FrameImporter


def main():
    """主函数"""
    print("=" * 60)
    print("树索引 - 基本使用示例")
    print("=" * 60)

    # 1. 配置与日志
    settings = StoreSettings.from_dict({"log_level": "DEBUG"})
    setup_logging(settings)

    # 2. 从表格导入记录并构建索引
    print("\n1. 导入记录...")
    df = pd.DataFrame({
        "id": [1, "91064cee", 3, 4, 5, 6, 7, 8],
        "parent": [None, 1, 1, "91064cee", "91064cee", "91064cee", 4, 4],
        "label": [f"记录 {i}" for i in range(1, 9)],
    })
    store = FrameImporter.from_settings(settings).build_store(df, settings=settings)
    print(f"   {store}")

    # 3. 查询
    print("\n2. 查询...")
    print(f"   直接子记录(1): {[item.id for item in store.get_children(1)]}")
    print(f"   全部后代(1): {[item.id for item in store.get_all_children(1)]}")
    print(f"   祖先链(7): {[item.id for item in store.get_all_parents(7)]}")
    print(f"   数据路径(7): {'/'.join(store.get_data_path(7))}")

    # 4. 修改
    print("\n3. 修改...")
    store.add_item(TreeItem(id=9, parent=3, label="记录 9"))
    store.update_item(TreeItem(id=4, parent=3, label="记录 4（已移动）"))
    print(f"   移动后数据路径(8): {'/'.join(store.get_data_path(8))}")

    store.remove_item(3)
    print(f"   删除3后剩余: {[item.id for item in store.get_all()]}")


if __name__ == "__main__":
    main()
