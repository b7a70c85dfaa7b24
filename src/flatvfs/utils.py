#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FlatVFS 工具函数

提供路径处理、条目名规范化、名称比较等通用功能。
"""

import os
from typing import Callable

from .core.schema import (
    MAX_LOOKUP_NAME_LENGTH,
    MAX_EXTENSION_LENGTH,
    PATH_SEPARATOR,
)
from .formats.base import NameComparison, NamePadding


# 仅 ASCII 大小写折叠，与区域设置无关
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def normalize_path(path: str) -> str:
    """
    目录路径规范化

    1. 反斜杠统一为正斜杠
    2. 合并连续斜杠
    3. 移除首尾斜杠

    Examples:
        >>> normalize_path("/")
        ''
        >>> normalize_path("\\\\sub\\\\")
        'sub'
    """
    path = path.replace("\\", "/")

    while "//" in path:
        path = path.replace("//", "/")

    return path.strip("/")


def normalize_entry_name(raw: bytes, padding: NamePadding) -> str:
    """
    规范化目录表中的原始名称字段

    名称字段在文件中不保证以 NUL 结尾，先截断到第一个 NUL；
    空格填充的格式再截断到第一个空格。

    Args:
        raw: 名称字段原始字节
        padding: 名称字段的填充方式

    Returns:
        去除填充后的名称 (latin-1 解码，字节与字符一一对应)

    Examples:
        >>> normalize_entry_name(b"FILE1       ", NamePadding.SPACE)
        'FILE1'
        >>> normalize_entry_name(b"intro.mve\\0\\0\\0\\0", NamePadding.NUL)
        'intro.mve'
    """
    name = raw.split(b"\0", 1)[0]
    if padding is NamePadding.SPACE:
        name = name.split(b" ", 1)[0]
    return name.decode("latin-1")


def name_sort_key(mode: NameComparison) -> Callable[[str], str]:
    """
    获取名称比较模式对应的排序键函数

    区分大小写时直接按码点比较 (latin-1 下等价于逐字节 strcmp)；
    不区分大小写时仅折叠 ASCII 字母。
    """
    if mode is NameComparison.CASE_INSENSITIVE:
        return lambda name: name.translate(_ASCII_LOWER)
    return lambda name: name


def compare_names(a: str, b: str, mode: NameComparison) -> int:
    """按比较模式比较两个名称，返回 -1 / 0 / 1"""
    key = name_sort_key(mode)
    ka, kb = key(a), key(b)
    return (ka > kb) - (ka < kb)


def is_lookup_candidate(name: str) -> bool:
    """
    判断名称是否可能存在于扁平归档中

    以下名称直接判定为不存在，无需查找:
    - 长度超过 12 个字符
    - 包含路径分隔符
    - 扩展名 (第一个 '.' 之后的部分) 超过 3 个字符
    """
    if len(name) > MAX_LOOKUP_NAME_LENGTH:
        return False
    if PATH_SEPARATOR in name:
        return False
    dot = name.find(".")
    if dot != -1 and len(name) - dot - 1 > MAX_EXTENSION_LENGTH:
        return False
    return True


def get_last_modified_time(path: str) -> int:
    """获取文件最后修改时间 (Unix 时间戳，秒)"""
    return int(os.path.getmtime(path))
