#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pytest 全局配置

提供构建 GRP / MVL 测试归档的工具函数和共享 fixtures。
"""

import struct
from pathlib import Path
from typing import List, Tuple

import pytest


# ==================== 路径常量 ====================

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent


# ==================== 归档构建工具 ====================

def pack_grp(files: List[Tuple[bytes, bytes]], count: int = None) -> bytes:
    """
    打包 GRP 归档

    Args:
        files: (名称, 数据) 列表，名称按空格填充到 12 字节
        count: 覆盖文件头中的条目数量 (用于构造损坏文件)
    """
    header = b"KenSilverman" + struct.pack("<I", len(files) if count is None else count)
    table = b"".join(
        name.ljust(12, b" ")[:12] + struct.pack("<I", len(data))
        for name, data in files
    )
    return header + table + b"".join(data for _, data in files)


def pack_mvl(files: List[Tuple[bytes, bytes]], count: int = None) -> bytes:
    """
    打包 MVL 归档

    Args:
        files: (名称, 数据) 列表，名称按 NUL 填充到 13 字节
        count: 覆盖文件头中的条目数量 (用于构造损坏文件)
    """
    header = b"DMVL" + struct.pack("<I", len(files) if count is None else count)
    table = b"".join(
        name.ljust(13, b"\0")[:13] + struct.pack("<I", len(data))
        for name, data in files
    )
    return header + table + b"".join(data for _, data in files)


# ==================== 基础 Fixtures ====================

@pytest.fixture
def grp_files() -> List[Tuple[bytes, bytes]]:
    """两条目 GRP 示例: FILE1 (5 字节) + FILE2 (3 字节)"""
    return [
        (b"FILE1", b"HELLO"),
        (b"FILE2", b"abc"),
    ]


@pytest.fixture
def grp_archive(tmp_path, grp_files) -> Path:
    """写入磁盘的两条目 GRP 归档"""
    path = tmp_path / "test.grp"
    path.write_bytes(pack_grp(grp_files))
    return path


@pytest.fixture
def mvl_files() -> List[Tuple[bytes, bytes]]:
    """MVL 示例 (磁盘顺序故意不是字母顺序，大小写混合)"""
    return [
        (b"Intro.mve", b"INTRO-MOVIE-DATA"),
        (b"credits.MVE", b"CREDITS"),
        (b"apple.mve", b"\x00\x01\x02\x03"),
    ]


@pytest.fixture
def mvl_archive(tmp_path, mvl_files) -> Path:
    """写入磁盘的 MVL 归档"""
    path = tmp_path / "movies.mvl"
    path.write_bytes(pack_mvl(mvl_files))
    return path


@pytest.fixture
def grp_container(grp_archive):
    """已加载的 GRP 容器，测试结束后关闭"""
    from flatvfs import ArchiveContainer, GRP

    container = ArchiveContainer.open(str(grp_archive), GRP)
    yield container
    container.close()


@pytest.fixture
def mvl_container(mvl_archive):
    """已加载的 MVL 容器，测试结束后关闭"""
    from flatvfs import ArchiveContainer, MVL

    container = ArchiveContainer.open(str(mvl_archive), MVL)
    yield container
    container.close()
