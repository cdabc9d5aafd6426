"""
`parcel` 的命令行模块。

由 `parcel_bin.bootstrap` 在启动门控完成后加载。
"""

import argparse
from collections.abc import Sequence

VERSION = "2.0.0"


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `parcel` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="parcel",
        description="Parcel command-line interface.",
    )
    p.add_argument("-V", "--version", action="version", version=VERSION)
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：解析参数；未给出子命令时打印帮助。"""
    parser = build_parser()
    parser.parse_args(argv)
    parser.print_help()
    return 0
