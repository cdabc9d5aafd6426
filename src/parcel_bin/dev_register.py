"""
开发期 shim：让工具直接从源码检出运行。

导入本模块即在 `sys.meta_path` 最前面安装一个查找器：之后加载的
`parcel_bin.*` 子模块一律从源码重新编译（不读写 `__pycache__`），并带上
`__checkout_source__ = True` 标记。重复注册不会产生额外效果。
"""

from __future__ import annotations

import importlib.abc
import importlib.machinery
import os
import sys

_PACKAGE = "parcel_bin"
_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_registered = False


class _CheckoutLoader(importlib.machinery.SourceFileLoader):
    """始终从源码编译的加载器。"""

    def get_code(self, fullname):
        source = self.get_data(self.path)
        return self.source_to_code(source, self.path)

    def exec_module(self, module) -> None:
        module.__checkout_source__ = True
        super().exec_module(module)


class _CheckoutFinder(importlib.abc.MetaPathFinder):
    """只接管位于本包目录下的 `parcel_bin.*` 源码模块，其余交回默认查找器。"""

    def find_spec(self, fullname, path, target=None):
        if not fullname.startswith(_PACKAGE + "."):
            return None
        spec = importlib.machinery.PathFinder.find_spec(fullname, path)
        if spec is None or not isinstance(spec.loader, importlib.machinery.SourceFileLoader):
            return None
        origin = os.path.abspath(spec.origin)
        if os.path.dirname(origin) != _PACKAGE_DIR:
            return None
        spec.loader = _CheckoutLoader(fullname, origin)
        return spec


_FINDER = _CheckoutFinder()


def register() -> None:
    """安装源码加载钩子，并关闭字节码缓存写入。"""
    global _registered
    if _registered:
        return
    sys.meta_path.insert(0, _FINDER)
    sys.dont_write_bytecode = True
    _registered = True


def is_registered() -> bool:
    return _registered


register()
