"""
启动阶段的进程配置快照。

环境变量只在这里读取一次，之后以不可变的 `BootstrapConfig` 传给启动门控。
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

BUILD_ENV_VAR = "BUILD_ENV"
SELF_BUILD_VAR = "SELF_BUILD"


@dataclass(frozen=True)
class BootstrapConfig:
    """启动门控所需的配置项。"""

    # 未设置时为空字符串，只有精确等于 "production" 才视为生产环境。
    build_env: str = ""
    self_build: bool = False


def is_truthy(value: str | None) -> bool:
    """环境变量标志：已设置且非空即为真（"0" 也算真）。"""
    return bool(value)


def load_config(environ: Mapping[str, str] | None = None) -> BootstrapConfig:
    """从环境变量构建配置快照；不会修改传入的映射。"""
    env = os.environ if environ is None else environ
    return BootstrapConfig(
        build_env=env.get(BUILD_ENV_VAR) or "",
        self_build=is_truthy(env.get(SELF_BUILD_VAR)),
    )
