"""
`parcel` 的进程入口。

先根据环境决定是否启用开发期 shim，再把控制权交给真正的命令行模块。
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping, Sequence

from .config import BootstrapConfig, load_config

DEV_SHIM_MODULE = "parcel_bin.dev_register"
CLI_MODULE = "parcel_bin.cli"
BANNER = "HI FROM PAR2"


def needs_dev_shim(config: BootstrapConfig) -> bool:
    """非生产环境，或显式要求自构建时，需要启用开发期 shim。"""
    return config.build_env != "production" or config.self_build


def activate_development_shim(module_name: str = DEV_SHIM_MODULE) -> None:
    """导入 shim 模块以触发其注册副作用；导入失败直接向上抛出。"""
    importlib.import_module(module_name)


def run_cli(argv: Sequence[str] | None = None, module_name: str = CLI_MODULE) -> int:
    """加载命令行模块并调用其 `main`，不做任何异常处理。"""
    cli = importlib.import_module(module_name)
    return cli.main(argv)


def main(argv: Sequence[str] | None = None, *, environ: Mapping[str, str] | None = None) -> int:
    """启动流程：读取配置 -> 门控 -> 可选 shim -> 诊断输出 -> 分派。"""
    config = load_config(environ)
    if needs_dev_shim(config):
        # shim 必须先于命令行模块加载，否则对尚未导入的源码不起作用。
        activate_development_shim()
    print(BANNER)

    return run_cli(argv)
