#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FlatVFS 归档读取

提供签名探测、索引构建、归档容器和条目文件句柄。
"""

from .opener import open_raw, probe
from .index import build_index, load_index
from .container import ArchiveContainer
from .handle import EntryFileHandle

__all__ = [
    "open_raw",
    "probe",
    "build_index",
    "load_index",
    "ArchiveContainer",
    "EntryFileHandle",
]
